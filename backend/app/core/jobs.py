import threading
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import sessionmaker

from app import schemas
from app.core.exceptions import GameCatalogError
from app.core.logger import setup_logger
from app.feeds import FeedClient, map_feed_games
from app.services.game_service import game_service

logger = setup_logger("jobs")


class PopulateJob:
    """
    Tracks the populate operation and keeps two runs from overlapping.

    A run holds the job from the moment the feeds are requested until the
    games are persisted or the run fails.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._running = False
        self.state = schemas.PopulateStateEnum.idle
        self.started_at: Optional[datetime] = None
        self.finished_at: Optional[datetime] = None
        self.count: Optional[int] = None
        self.error: Optional[str] = None

    @property
    def running(self) -> bool:
        return self._running

    def try_start(self) -> bool:
        with self._lock:
            if self._running:
                return False
            self._running = True
            self.state = schemas.PopulateStateEnum.running
            self.started_at = datetime.now(timezone.utc)
            self.finished_at = None
            self.count = None
            self.error = None
            return True

    def finish(self, count: int):
        with self._lock:
            self._running = False
            self.state = schemas.PopulateStateEnum.succeeded
            self.finished_at = datetime.now(timezone.utc)
            self.count = count

    def fail(self, error: Exception):
        with self._lock:
            self._running = False
            self.state = schemas.PopulateStateEnum.failed
            self.finished_at = datetime.now(timezone.utc)
            self.error = error.message if isinstance(error, GameCatalogError) else str(error)

    def status(self) -> schemas.PopulateStatus:
        with self._lock:
            return schemas.PopulateStatus(
                state=self.state,
                started_at=self.started_at,
                finished_at=self.finished_at,
                count=self.count,
                error=self.error
            )


def fetch_feed_games(feed_client: FeedClient) -> List[schemas.GameCreate]:
    android_games, ios_games = feed_client.fetch_all()
    games = map_feed_games(android_games, ios_games)
    logger.info(f"Mapped {len(games)} games from the remote feeds")
    return games


def persist_games(session_factory: sessionmaker, games: List[schemas.GameCreate], job: PopulateJob):
    """Replace the stored games with ``games`` and release the job."""
    logger.info(f"Replacing stored games with {len(games)} feed games")
    try:
        with session_factory() as db:
            count = game_service.replace_all(db, games)
    except Exception as e:
        logger.error(f"Error persisting populated games: {str(e)}", exc_info=True)
        job.fail(e)
        return
    job.finish(count)
    logger.info(f"Persisted {count} games")


def run_populate(session_factory: sessionmaker, feed_client: FeedClient, job: PopulateJob):
    logger.info("Starting scheduled task: games populate.")
    if not job.try_start():
        logger.warning("Populate is already running, skipping scheduled run")
        return

    try:
        games = fetch_feed_games(feed_client)
    except Exception as e:
        logger.error(f"Error during games populate: {str(e)}", exc_info=True)
        job.fail(e)
        return

    persist_games(session_factory, games, job)
