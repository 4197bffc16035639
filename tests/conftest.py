import uuid

import pytest
from fastapi.testclient import TestClient
from google.api_core.exceptions import NotFound, ServiceUnavailable

from app.main import app
from app.database import get_db


class FakeSnapshot:
    def __init__(self, reference, data):
        self.reference = reference
        self.id = reference.id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return dict(self._data) if self._data is not None else None


class FakeDocument:
    def __init__(self, db, path):
        self._db = db
        self.path = path
        self.id = path.rsplit("/", 1)[-1]

    def collection(self, name):
        return FakeCollection(self._db, f"{self.path}/{name}")

    def get(self):
        self._db.check("get")
        return FakeSnapshot(self, self._db.docs.get(self.path))

    def set(self, data):
        self._db.check("set")
        self._db.docs[self.path] = dict(data)

    def update(self, data):
        self._db.check("update")
        if self.path not in self._db.docs:
            raise NotFound(f"No document to update: {self.path}")
        self._db.docs[self.path].update(data)

    def delete(self):
        self._db.check("delete")
        self._db.docs.pop(self.path, None)


class FakeQuery:
    def __init__(self, collection, filters=()):
        self._collection = collection
        self._filters = list(filters)

    def where(self, filter):
        return FakeQuery(self._collection, self._filters + [filter])

    def stream(self):
        self._collection._db.check("stream")
        for snapshot in self._collection._snapshots():
            data = snapshot.to_dict()
            if all(f.op_string == "==" and data.get(f.field_path) == f.value for f in self._filters):
                yield snapshot


class FakeCollection(FakeQuery):
    def __init__(self, db, path):
        self._db = db
        self.path = path
        super().__init__(self)

    def document(self, document_id=None):
        return FakeDocument(self._db, f"{self.path}/{document_id or uuid.uuid4().hex[:20]}")

    def add(self, data):
        self._db.check("add")
        ref = self.document()
        self._db.docs[ref.path] = dict(data)
        return None, ref

    def _snapshots(self):
        depth = self.path.count("/") + 1
        return [
            FakeSnapshot(FakeDocument(self._db, path), data)
            for path, data in list(self._db.docs.items())
            if path.startswith(self.path + "/") and path.count("/") == depth
        ]


class FakeBatch:
    def __init__(self, db):
        self._db = db
        self._writes = []

    def set(self, ref, data):
        if not isinstance(data, dict):
            raise TypeError(f"Document data must be a dict, got {type(data).__name__}")
        self._writes.append((ref.path, dict(data)))

    def commit(self):
        self._db.check("commit")
        for path, data in self._writes:
            self._db.docs[path] = data


class FakeFirestore:
    """In-memory stand-in for the parts of google.cloud.firestore.Client the routers use.

    Add an operation name ("get", "set", "update", "delete", "add", "stream",
    "commit") to `failing` to make that call raise like an unavailable backend.
    """

    def __init__(self):
        self.docs = {}
        self.failing = set()

    def check(self, operation):
        if operation in self.failing:
            raise ServiceUnavailable(f"{operation} failed")

    def collection(self, name):
        return FakeCollection(self, name)

    def batch(self):
        return FakeBatch(self)


@pytest.fixture
def fake_db():
    return FakeFirestore()


@pytest.fixture
def client(fake_db):
    app.dependency_overrides[get_db] = lambda: fake_db
    yield TestClient(app)
    app.dependency_overrides.pop(get_db, None)
