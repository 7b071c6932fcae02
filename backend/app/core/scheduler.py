from apscheduler.schedulers.background import BackgroundScheduler
from sqlalchemy.orm import sessionmaker

from app.core.config import Settings
from app.core.jobs import PopulateJob, run_populate
from app.feeds import FeedClient


def create_scheduler(
        settings: Settings,
        session_factory: sessionmaker,
        feed_client: FeedClient,
        populate_job: PopulateJob
) -> BackgroundScheduler:
    scheduler = BackgroundScheduler()
    scheduler.add_job(
        run_populate,
        'cron',
        hour=settings.POPULATE_SCHEDULE_HOUR,
        id='populate_games',
        args=[session_factory, feed_client, populate_job]
    )
    return scheduler
