import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient

from app.api import deps
from app.core.config import Settings
from app.feeds import FeedClient
from app.main import create_app
from tests.helpers import ANDROID_FEED, ANDROID_URL, IOS_FEED, IOS_URL


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'games.db'}",
        ANDROID_FEED_URL=ANDROID_URL,
        IOS_FEED_URL=IOS_URL,
        FEED_RETRY_WAIT_SECONDS=0,
        STATIC_DIR=str(tmp_path / "static"),
        LOG_TO_FILE=False,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def feed_client(app):
    fake = MagicMock(spec=FeedClient)
    fake.fetch_all.return_value = (ANDROID_FEED, IOS_FEED)
    app.dependency_overrides[deps.get_feed_client] = lambda: fake
    yield fake
    app.dependency_overrides.pop(deps.get_feed_client, None)


@pytest.fixture
def client(app, feed_client):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(app):
    with app.state.session_factory() as session:
        yield session


