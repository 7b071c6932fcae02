from .client import FeedClient
from .mapper import flatten_feed, map_feed_game, map_feed_games

__all__ = [
    "FeedClient",
    "flatten_feed",
    "map_feed_game",
    "map_feed_games"
]
