from fastapi import Request
from sqlalchemy.orm import sessionmaker

from app.core.jobs import PopulateJob
from app.feeds import FeedClient


def get_db_session_factory(request: Request) -> sessionmaker:
    return request.app.state.session_factory


def get_db(request: Request):
    with request.app.state.session_factory() as db:
        yield db


def get_feed_client(request: Request) -> FeedClient:
    return request.app.state.feed_client


def get_populate_job(request: Request) -> PopulateJob:
    return request.app.state.populate_job
