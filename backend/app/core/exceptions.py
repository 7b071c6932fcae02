from typing import Optional


class GameCatalogError(Exception):
    """Base error rendered by the API as ``{"detail": message}``."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class GameNotFoundError(GameCatalogError):
    status_code = 404

    def __init__(self, game_id: int):
        super().__init__(f"Game {game_id} not found")
        self.game_id = game_id


class StoreError(GameCatalogError):
    """A write against the games table failed."""

    status_code = 400


class FeedError(GameCatalogError):
    """A remote feed could not be fetched or had an unexpected format."""

    status_code = 502

    def __init__(self, message: str, url: Optional[str] = None):
        if url:
            message = f"{message} ({url})"
        super().__init__(message)
        self.url = url


class PopulateInProgressError(GameCatalogError):
    status_code = 409

    def __init__(self):
        super().__init__("A populate operation is already running")
