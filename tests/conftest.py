"""Pytest configuration and fixtures."""

import os
from contextlib import asynccontextmanager

import pytest

# Set test environment variables before importing app modules
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("API_PREFIX", "/api/go")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from fastapi.testclient import TestClient  # noqa: E402

from core.db import get_db  # noqa: E402
from main import create_app  # noqa: E402


class FakeConnection:
    """Connection handed out by FakeDatabase.transaction()."""

    def __init__(self, db: "FakeDatabase"):
        self._db = db

    async def fetchrow(self, sql, *args):
        return self._db._respond("fetchrow", sql, args, None)

    async def fetch(self, sql, *args):
        return self._db._respond("fetch", sql, args, [])

    async def execute(self, sql, *args):
        return self._db._respond("execute", sql, args, "OK")

    async def executemany(self, sql, records):
        return self._db._respond("executemany", sql, (list(records),), None)


class FakeDatabase:
    """
    Stand-in for core.db.Database.

    Responses are keyed by SQL fragments (`on`); the first matching rule wins.
    An exception instance as the response is raised instead of returned.
    Every call is recorded in `calls` and every transaction outcome in
    `transactions` ("commit" / "rollback").
    """

    def __init__(self):
        self.calls = []
        self.rules = []
        self.transactions = []

    def on(self, fragment, response):
        self.rules.append((fragment, response))
        return self

    def _respond(self, method, sql, args, default):
        self.calls.append((method, " ".join(sql.split()), args))
        for fragment, response in self.rules:
            if fragment in sql:
                if isinstance(response, BaseException):
                    raise response
                return response
        return default

    def statements(self, method=None):
        return [sql for (m, sql, _) in self.calls if method is None or m == method]

    def args_for(self, fragment):
        return [args for (_, sql, args) in self.calls if fragment in sql]

    async def fetch_one(self, sql, *args):
        return self._respond("fetch_one", sql, args, None)

    async def fetch_all(self, sql, *args):
        return self._respond("fetch_all", sql, args, [])

    async def execute(self, sql, *args):
        return self._respond("execute", sql, args, "OK")

    @asynccontextmanager
    async def transaction(self):
        try:
            yield FakeConnection(self)
        except BaseException:
            self.transactions.append("rollback")
            raise
        else:
            self.transactions.append("commit")


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def prefix():
    return "/api/go"


@pytest.fixture
def app(fake_db):
    application = create_app()
    application.dependency_overrides[get_db] = lambda: fake_db
    return application


@pytest.fixture
def client(app):
    # Not used as a context manager: the lifespan (real pool) never starts.
    return TestClient(app)
