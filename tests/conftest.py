import pytest
from fastapi.testclient import TestClient

from caesarapi.api import create_app
from caesarapi.config import Settings
from caesarapi.db import Database
from caesarapi.repositories import api_keys


@pytest.fixture
def settings(tmp_path):
    return Settings(database_url=f"sqlite:///{tmp_path / 'test.db'}", environment="test")


@pytest.fixture
def database(settings):
    db = Database(settings.database_url)
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def app(settings, database):
    return create_app(settings, database)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def token(database):
    raw = api_keys.generate_token()
    with database.session() as session:
        api_keys.create_api_key(session, api_keys.hash_token(raw), "test-key")
    return raw


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}
