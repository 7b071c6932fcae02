from typing import Any, Dict, List, Optional

from app import schemas
from app.core.exceptions import FeedError


def flatten_feed(feed: Any) -> List[Any]:
    # Feeds wrap some of their results in an extra array
    if not isinstance(feed, list):
        raise FeedError(f"Unexpected feed format: expected a list, got {type(feed).__name__}")

    records = []
    for item in feed:
        if isinstance(item, list):
            records.extend(item)
        else:
            records.append(item)
    return records


def _text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def map_feed_game(raw: Dict[str, Any]) -> schemas.GameCreate:
    """
    Reshape one feed record; field values are stored as text, whatever their type.
    """
    if not isinstance(raw, dict):
        raise FeedError(f"Unexpected feed record: {raw!r}")

    return schemas.GameCreate(
        publisher_id=_text(raw.get("publisher_id")),
        name=_text(raw.get("name")),
        platform=_text(raw.get("os")),
        store_id=_text(raw.get("id")),
        bundle_id=_text(raw.get("bundle_id")),
        app_version=_text(raw.get("version")),
        is_published=True,
    )


def map_feed_games(*feeds: Any) -> List[schemas.GameCreate]:
    records = []
    for feed in feeds:
        records.extend(flatten_feed(feed))
    return [map_feed_game(raw) for raw in records]
