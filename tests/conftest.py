import mongomock
import pytest

from evidenca import create_app
from evidenca.db import Store


@pytest.fixture
def store():
    return Store(mongomock.MongoClient()["evidenca_test"])


@pytest.fixture
def app(store):
    return create_app(store=store, config={"TESTING": True})


@pytest.fixture
def client(app):
    return app.test_client()
