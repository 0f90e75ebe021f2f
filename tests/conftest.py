import pytest

from api import create_app
from config import Settings
from db import create_db_engine, init_schema


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    init_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def app(engine):
    app = create_app(engine=engine, settings=Settings())
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def tennis(client):
    resp = client.post(
        "/sports",
        json={
            "sport": "tennis",
            "recommended_foods": ["banana", "oats"],
            "avoid_foods": ["fried food"],
        },
    )
    assert resp.status_code == 200
    return resp
