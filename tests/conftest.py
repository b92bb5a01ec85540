import os

# Configuration de test, posée avant tout import de bistro.config
os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-secret")
os.environ["DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS"] = "1"
os.environ.pop("LOCAL_RATE_LIMIT_FALLBACK", None)

import copy
import uuid
from typing import Any, Dict, Generator, List

import pytest
from fastapi.testclient import TestClient

import bistro.infra.supabase_client as supabase_client
from bistro.app import app as fastapi_app
from bistro.auth.tokens import issue_token

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "tests/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "tests/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)


class _Result:
    def __init__(self, data=None, count=None):
        self.data = data
        self.count = count


class _Query:
    """Sous-ensemble du query builder postgrest utilisé par les repositories."""

    def __init__(self, store: "FakeSupabase", table: str):
        self._store = store
        self._table = table
        self._op = "select"
        self._columns = "*"
        self._count = None
        self._payload: Any = None
        self._filters: List = []
        self._limit = None
        self._order = None

    def select(self, columns: str = "*", count=None):
        self._columns = columns
        self._count = count
        return self

    def insert(self, payload):
        self._op, self._payload = "insert", payload
        return self

    def update(self, payload):
        self._op, self._payload = "update", payload
        return self

    def delete(self):
        self._op = "delete"
        return self

    def eq(self, column, value):
        self._filters.append(lambda r: r.get(column) == value)
        return self

    def neq(self, column, value):
        self._filters.append(lambda r: r.get(column) != value)
        return self

    def in_(self, column, values):
        values = list(values)
        self._filters.append(lambda r: r.get(column) in values)
        return self

    def limit(self, n):
        self._limit = n
        return self

    def order(self, column, desc=False):
        self._order = (column, desc)
        return self

    def execute(self):
        if (self._table, self._op) in self._store.failures:
            raise RuntimeError(f"store failure on {self._table}.{self._op}")
        self._store.calls.append((self._table, self._op))
        rows = self._store.tables.setdefault(self._table, [])
        matching = [r for r in rows if all(f(r) for f in self._filters)]

        if self._op == "insert":
            payloads = self._payload if isinstance(self._payload, list) else [self._payload]
            created = []
            for p in payloads:
                row = copy.deepcopy(p)
                row.setdefault("id", uuid.uuid4().hex)
                rows.append(row)
                created.append(copy.deepcopy(row))
            return _Result(data=created)
        if self._op == "update":
            for r in matching:
                r.update(copy.deepcopy(self._payload))
            return _Result(data=copy.deepcopy(matching))
        if self._op == "delete":
            self._store.tables[self._table] = [r for r in rows if r not in matching]
            return _Result(data=copy.deepcopy(matching))

        if self._order:
            column, desc = self._order
            matching = sorted(matching, key=lambda r: str(r.get(column) or ""), reverse=desc)
        # Comme PostgREST: count="exact" donne le total avant limit
        count = len(matching) if self._count else None
        if self._limit is not None:
            matching = matching[: self._limit]
        if self._columns != "*":
            cols = [c.strip() for c in self._columns.split(",")]
            matching = [{c: r.get(c) for c in cols} for r in matching]
        return _Result(data=copy.deepcopy(matching), count=count)


class FakeSupabase:
    def __init__(self):
        self.tables: Dict[str, List[dict]] = {}
        self.failures = set()
        self.calls: List = []

    def table(self, name: str) -> _Query:
        return _Query(self, name)

    def seed(self, table: str, *rows: dict) -> List[dict]:
        stored = []
        for r in rows:
            row = dict(r)
            row.setdefault("id", uuid.uuid4().hex)
            self.tables.setdefault(table, []).append(row)
            stored.append(row)
        return stored

    def fail(self, table: str, op: str) -> None:
        self.failures.add((table, op))


@pytest.fixture()
def store(monkeypatch) -> FakeSupabase:
    fake = FakeSupabase()
    monkeypatch.setattr(supabase_client, "_supabase", fake)
    monkeypatch.setattr(supabase_client, "_service_supabase", fake)
    return fake

@pytest.fixture(scope="session")
def app():
    return fastapi_app

@pytest.fixture()
def client(app, store) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c

@pytest.fixture()
def auth_header():
    def _make(email: str, **claims) -> Dict[str, str]:
        return {"Authorization": f"Bearer {issue_token({'email': email, **claims})}"}
    return _make

@pytest.fixture()
def admin(store, auth_header):
    """Un administrateur présent dans l'annuaire, avec son en-tête Authorization."""
    email = "admin@bistro.com"
    store.seed("users", {"email": email, "name": "Admin", "role": "Admin"})
    return {"email": email, "headers": auth_header(email)}

@pytest.fixture()
def customer(store, auth_header):
    email = "customer@bistro.com"
    store.seed("users", {"email": email, "name": "Customer", "role": "Customer"})
    return {"email": email, "headers": auth_header(email)}
