import pytest

from helpers import FakeMongoClient


@pytest.fixture
def fake_mongo_client(monkeypatch):
    import datetime_demo
    FakeMongoClient.instances = []
    monkeypatch.setattr(datetime_demo.pymongo, 'MongoClient', FakeMongoClient)
    return FakeMongoClient
