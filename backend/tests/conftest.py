# backend/tests/conftest.py
# Общие фикстуры: чистый rate-limit, управляемые часы, поддельный MongoClient.
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import PyMongoError

from app import config, db, rate_limit
from app.content_filter import get_content_filter


class FakeCollection:
    def __init__(self, client):
        self._client = client

    def insert_one(self, doc):
        if self._client.fail_insert:
            raise PyMongoError("insert failed")
        doc = dict(doc)
        doc["_id"] = ObjectId()
        self._client.documents.append(doc)
        return SimpleNamespace(inserted_id=doc["_id"])


class FakeDatabase:
    def __init__(self, client):
        self._client = client

    def __getitem__(self, name):
        self._client.collection_names.append(name)
        return FakeCollection(self._client)


class FakeMongo:
    """Фабрика, подменяющая app.db.MongoClient; хранит всё, что записано."""

    def __init__(self):
        self.documents = []
        self.instances = []
        self.fail_insert = False
        self.db_names = []
        self.collection_names = []

    def __call__(self, uri, **kwargs):
        state = self

        class _Client:
            def __init__(self):
                self.uri = uri
                self.kwargs = kwargs
                self.closed = False

            def __getitem__(self, name):
                state.db_names.append(name)
                return FakeDatabase(state)

            def close(self):
                self.closed = True

        client = _Client()
        self.instances.append(client)
        return client


class FakeClock:
    def __init__(self, now=1_700_000_000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    rate_limit.reset_rate_limits()
    get_content_filter.cache_clear()
    monkeypatch.setattr(config, "MONGO_URI", "mongodb://test:27017")
    monkeypatch.setattr(config, "COMMENT_COOLDOWN_SECONDS", 30.0)
    monkeypatch.setattr(config, "BAD_WORDS", "")
    monkeypatch.setattr(config, "BAD_WORDS_FILE", "")
    yield
    rate_limit.reset_rate_limits()
    get_content_filter.cache_clear()


@pytest.fixture
def clock(monkeypatch):
    fake = FakeClock()
    monkeypatch.setattr(rate_limit, "_clock", fake)
    return fake


@pytest.fixture
def mongo(monkeypatch):
    fake = FakeMongo()
    monkeypatch.setattr(db, "MongoClient", fake)
    return fake


@pytest.fixture
def client(mongo, clock):
    from app.main import app

    return TestClient(app)
