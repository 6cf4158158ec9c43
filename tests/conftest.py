"""
Shared fixtures: an in-memory stand-in for the motor database and a TestClient wired to it
"""
import asyncio
import copy
import os

# Keep password hashing fast under test
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from welfare_api.database import get_database
from welfare_api.main import app
from welfare_api.services.mongo_service import MongoService


class InsertOneResult:
    def __init__(self, inserted_id):
        self.inserted_id = inserted_id


class InsertManyResult:
    def __init__(self, inserted_ids):
        self.inserted_ids = inserted_ids


class FakeCursor:
    def __init__(self, documents):
        self._documents = documents
        self._iter = None

    def __aiter__(self):
        self._iter = iter(self._documents)
        return self

    async def __anext__(self):
        try:
            return next(self._iter)
        except StopIteration:
            raise StopAsyncIteration

    async def to_list(self, length=None):
        return list(self._documents)


def matches(document, filter_query):
    return all(document.get(key) == value for key, value in filter_query.items())


class FakeCollection:
    """The subset of AsyncIOMotorCollection the service layer uses"""

    def __init__(self, name):
        self.name = name
        self.documents = []
        self.unique_fields = set()
        self.fail_with = None

    def _check_available(self):
        if self.fail_with is not None:
            raise self.fail_with

    def _check_unique(self, document):
        for field in self.unique_fields:
            if any(existing.get(field) == document.get(field) for existing in self.documents):
                raise DuplicateKeyError(f"E11000 duplicate key error collection: {self.name} index: {field}_1")

    def _find(self, filter_query):
        return [doc for doc in self.documents if matches(doc, filter_query or {})]

    async def create_index(self, keys, unique=False):
        if unique:
            for field, _direction in keys:
                self.unique_fields.add(field)
        return "_".join(f"{field}_{direction}" for field, direction in keys)

    async def insert_one(self, document):
        # let other tasks run first so concurrent inserts interleave
        await asyncio.sleep(0)
        self._check_available()
        doc = copy.deepcopy(document)
        doc.setdefault("_id", ObjectId())
        self._check_unique(doc)
        self.documents.append(doc)
        return InsertOneResult(doc["_id"])

    async def insert_many(self, documents):
        self._check_available()
        ids = []
        for document in documents:
            doc = copy.deepcopy(document)
            doc.setdefault("_id", ObjectId())
            self._check_unique(doc)
            self.documents.append(doc)
            ids.append(doc["_id"])
        return InsertManyResult(ids)

    def find(self, filter_query=None):
        self._check_available()
        return FakeCursor([copy.deepcopy(doc) for doc in self._find(filter_query)])

    async def find_one(self, filter_query=None):
        self._check_available()
        found = self._find(filter_query)
        return copy.deepcopy(found[0]) if found else None

    async def count_documents(self, filter_query):
        self._check_available()
        return len(self._find(filter_query))

    async def find_one_and_update(self, filter_query, update, return_document=ReturnDocument.BEFORE):
        self._check_available()
        found = self._find(filter_query)
        if not found:
            return None
        doc = found[0]
        before = copy.deepcopy(doc)
        doc.update(update.get("$set", {}))
        for field in update.get("$unset", {}):
            doc.pop(field, None)
        return copy.deepcopy(doc) if return_document == ReturnDocument.AFTER else before

    async def find_one_and_delete(self, filter_query):
        self._check_available()
        found = self._find(filter_query)
        if not found:
            return None
        self.documents.remove(found[0])
        return found[0]


class FakeDatabase:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]

    async def command(self, name):
        return {"ok": 1.0}


@pytest.fixture
def fake_db():
    db = FakeDatabase()
    db["users"].unique_fields.add("email")
    return db


@pytest.fixture
def mongo(fake_db):
    return MongoService(fake_db)


@pytest.fixture
def client(fake_db):
    app.dependency_overrides[get_database] = lambda: fake_db
    yield TestClient(app)
    app.dependency_overrides.clear()
