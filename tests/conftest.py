"""Shared fixtures: an in-memory stand-in for the pymongo database and a Flask test client.

FakeCollection implements only the collection calls ContactService makes,
returning objects with the same attributes as pymongo's result types. Setting
`fail_with` makes every call raise that pymongo error instead.
"""

import contextlib
import copy
from types import SimpleNamespace

import pytest
from bson import ObjectId

from contacts_api import create_app
from contacts_api.config import Config


class ConfigForTests(Config):
    TESTING = True
    LOG_FILE = None
    LOG_LEVEL = 'DEBUG'
    STORE_TIMEOUT_SECONDS = 1
    STORE_CONNECT_TIMEOUT_SECONDS = 1


class FakeCollection:
    def __init__(self):
        self.documents = {}
        self.fail_with = None
        self.calls = []

    def _record(self, name):
        self.calls.append(name)
        if self.fail_with is not None:
            raise self.fail_with

    def insert_one(self, document):
        self._record('insert_one')
        document = copy.deepcopy(document)
        document.setdefault('_id', ObjectId())
        self.documents[document['_id']] = document
        return SimpleNamespace(inserted_id=document['_id'], acknowledged=True)

    def find(self, query=None):
        self._record('find')
        assert not query, "only full scans are expected"
        return iter([copy.deepcopy(doc) for doc in self.documents.values()])

    def find_one(self, query, projection=None):
        self._record('find_one')
        document = self.documents.get(query['_id'])
        if document is None:
            return None
        if projection:
            return {key: document[key] for key in projection if key in document}
        return copy.deepcopy(document)

    def update_one(self, query, update):
        self._record('update_one')
        fields = update['$set']
        assert fields, "'$set' is empty"
        document = self.documents.get(query['_id'])
        if document is None:
            return SimpleNamespace(matched_count=0, modified_count=0)
        modified = any(document.get(key) != value for key, value in fields.items())
        document.update(fields)
        return SimpleNamespace(matched_count=1, modified_count=int(modified))

    def delete_one(self, query):
        self._record('delete_one')
        removed = self.documents.pop(query['_id'], None)
        return SimpleNamespace(deleted_count=0 if removed is None else 1)


class FakeDatabase:
    def __init__(self):
        self.collections = {'contacts': FakeCollection()}
        self.fail_with = None

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection())

    def command(self, name):
        if self.fail_with is not None:
            raise self.fail_with
        return {'ok': 1.0}


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def contacts_collection(fake_db):
    return fake_db['contacts']


@pytest.fixture
def app(fake_db):
    return create_app(ConfigForTests, db=fake_db)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def contact_service(app):
    return app.extensions['contact_service']


@pytest.fixture
def seeded_contact(contacts_collection):
    """Inserts one contact directly into the fake store and returns its hex id."""
    result = contacts_collection.insert_one({'name': 'Ada Lovelace', 'phone': '555-0100'})
    contacts_collection.calls.clear()
    return str(result.inserted_id)


@pytest.fixture
def app_config():
    return ConfigForTests


class TimeoutSpy:
    """Stands in for pymongo.timeout and records the store calls made inside it."""

    def __init__(self):
        self.entered = []
        self.depth = 0
        self.calls_inside = []
        self.calls_outside = []

    @contextlib.contextmanager
    def __call__(self, seconds):
        self.entered.append(seconds)
        self.depth += 1
        try:
            yield
        finally:
            self.depth -= 1

    def record(self, name):
        if self.depth:
            self.calls_inside.append(name)
        else:
            self.calls_outside.append(name)


@pytest.fixture
def timeout_spy(monkeypatch, fake_db, contacts_collection):
    import contacts_api.services.contact_service as contact_service_module

    spy = TimeoutSpy()
    monkeypatch.setattr(contact_service_module.pymongo, 'timeout', spy)

    record_collection_call = contacts_collection._record

    def record(name):
        spy.record(name)
        record_collection_call(name)

    run_command = fake_db.command

    def command(name):
        spy.record(name)
        return run_command(name)

    monkeypatch.setattr(contacts_collection, '_record', record)
    monkeypatch.setattr(fake_db, 'command', command)
    return spy
