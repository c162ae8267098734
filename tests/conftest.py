"""Shared fixtures: an in-memory stand-in for the parts of python-arango the walkthrough uses.

Errors are raised as arango.exceptions.ArangoClientError so that they belong to the driver's ArangoError
hierarchy, like the server errors the real driver raises.
"""

import copy
import itertools
import re

import pytest
from arango.exceptions import ArangoClientError

from first_project.document.arango_db import ArangoConfig
from first_project.utilities.logger import StderrHandler, logger


SELECT_RE = re.compile(r"^FOR (\w+) IN @@collection FILTER \1\.(\w+) == @(\w+) RETURN \1$")
REMOVE_RE = re.compile(
    r"^FOR (\w+) IN @@collection FILTER \1\.(\w+) == @(\w+) "
    r"REMOVE \1 IN @@collection LET removed = OLD RETURN removed$"
)


class FakeServer:
    """Holds all state: database name -> collection name -> key -> document."""

    def __init__(self):
        self.databases: dict[str, dict[str, dict[str, dict]]] = {"_system": {}}
        self._revisions = itertools.count(1)

    def next_rev(self) -> str:
        return f"_rev{next(self._revisions)}"

    def collection_documents(self, db_name: str, collection_name: str) -> dict[str, dict]:
        if db_name not in self.databases:
            raise ArangoClientError(f"[HTTP 404][ERR 1228] database not found: {db_name}")
        collections = self.databases[db_name]
        if collection_name not in collections:
            raise ArangoClientError(f"[HTTP 404][ERR 1203] collection or view not found: {collection_name}")
        return collections[collection_name]


class FakeCollection:
    def __init__(self, server: FakeServer, db_name: str, name: str):
        self.server = server
        self.db_name = db_name
        self.name = name
        self._generated_keys = itertools.count(1000)

    @property
    def documents(self) -> dict[str, dict]:
        return self.server.collection_documents(self.db_name, self.name)

    def _metadata(self, document: dict) -> dict:
        return {"_id": document["_id"], "_key": document["_key"], "_rev": document["_rev"]}

    def insert(self, document, **kwargs):
        documents = self.documents
        key = document.get("_key") or str(next(self._generated_keys))
        if key in documents:
            raise ArangoClientError(
                f"[HTTP 409][ERR 1210] unique constraint violated - in index primary of type primary "
                f"over '_key'; conflicting key: {key}"
            )
        stored = copy.deepcopy(document)
        stored.update({"_key": key, "_id": f"{self.name}/{key}", "_rev": self.server.next_rev()})
        documents[key] = stored
        return self._metadata(stored)

    def get(self, document, **kwargs):
        stored = self.documents.get(document)
        return copy.deepcopy(stored) if stored is not None else None

    def update(self, document, merge=True, keep_none=True, **kwargs):
        documents = self.documents
        key = document["_key"]
        if key not in documents:
            raise ArangoClientError("[HTTP 404][ERR 1202] document not found")
        stored = documents[key]
        stored.update(copy.deepcopy({name: value for name, value in document.items() if name != "_key"}))
        stored["_rev"] = self.server.next_rev()
        return self._metadata(stored)

    def delete(self, document, ignore_missing=False, **kwargs):
        documents = self.documents
        if document not in documents:
            if ignore_missing:
                return False
            raise ArangoClientError("[HTTP 404][ERR 1202] document not found")
        del documents[document]
        return True

    def has(self, document, **kwargs):
        return document in self.documents

    def count(self):
        return len(self.documents)


class FakeCursor:
    """Iterates over query results. Cursors with an id are held open on the server until closed."""

    def __init__(self, documents, id=None):
        self._documents = iter(documents)
        self.id = id
        self.closed_with: list[bool] = []

    def __iter__(self):
        return self

    def __next__(self):
        return next(self._documents)

    def close(self, ignore_missing=False):
        self.closed_with.append(ignore_missing)
        return True


class FakeAQL:
    def __init__(self, db: "FakeDatabase", cursor_id=None):
        self.db = db
        self.executed: list[tuple[str, dict]] = []
        self.cursor_id = cursor_id
        self.cursors: list[FakeCursor] = []

    def execute(self, query, bind_vars=None, **kwargs):
        bind_vars = bind_vars or {}
        self.executed.append((query, bind_vars))

        match = SELECT_RE.match(query) or REMOVE_RE.match(query)
        if match is None:
            raise ArangoClientError(f"[HTTP 400][ERR 1501] syntax error, unexpected query: {query}")
        _, attribute, parameter = match.groups()
        if "@collection" not in bind_vars or parameter not in bind_vars:
            raise ArangoClientError("[HTTP 400][ERR 1552] bind parameter missing")

        documents = self.db.server.collection_documents(self.db.name, bind_vars["@collection"])
        matched = [
            copy.deepcopy(document)
            for document in documents.values()
            if document.get(attribute) == bind_vars[parameter]
        ]
        if match.re is REMOVE_RE:
            for document in matched:
                del documents[document["_key"]]
        cursor = FakeCursor(matched, id=self.cursor_id)
        self.cursors.append(cursor)
        return cursor


class FakeDatabase:
    def __init__(self, server: FakeServer, name: str):
        self.server = server
        self.name = name
        self.aql = FakeAQL(self)

    def create_database(self, name, **kwargs):
        if self.name != "_system":
            raise ArangoClientError("[HTTP 403][ERR 1230] operation only allowed in system database")
        if name in self.server.databases:
            raise ArangoClientError("[HTTP 409][ERR 1207] duplicate database name")
        self.server.databases[name] = {}
        return True

    def create_collection(self, name, **kwargs):
        if self.name not in self.server.databases:
            raise ArangoClientError(f"[HTTP 404][ERR 1228] database not found: {self.name}")
        collections = self.server.databases[self.name]
        if name in collections:
            raise ArangoClientError("[HTTP 409][ERR 1207] duplicate name")
        collections[name] = {}
        return FakeCollection(self.server, self.name, name)

    def collection(self, name):
        return FakeCollection(self.server, self.name, name)

    def has_collection(self, name):
        return name in self.server.databases.get(self.name, {})


class FakeArangoClient:
    def __init__(self, server: FakeServer, reachable: bool = True):
        self.server = server
        self.reachable = reachable
        self.closed = False
        self.opened: list[tuple[str, str, bool]] = []

    def db(self, name="_system", username="root", password="", verify=False, **kwargs):
        self.opened.append((name, username, verify))
        if verify and not self.reachable:
            raise ArangoClientError("Failed to connect to server")
        return FakeDatabase(self.server, name)

    def close(self):
        self.closed = True


@pytest.fixture()
def fake_server():
    return FakeServer()


@pytest.fixture()
def fake_client(fake_server):
    return FakeArangoClient(fake_server)


@pytest.fixture()
def config():
    return ArangoConfig()


@pytest.fixture()
def collection(fake_server):
    """A ready-made collection in database 'testdb'."""
    fake_server.databases["testdb"] = {"items": {}}
    return FakeCollection(fake_server, "testdb", "items")


@pytest.fixture(autouse=True)
def reset_log_level():
    level = logger.level
    yield
    logger.setLevel(level)
    for handler in [handler for handler in logger.handlers if isinstance(handler, StderrHandler)]:
        logger.removeHandler(handler)
