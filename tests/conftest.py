from __future__ import annotations

from contextlib import contextmanager
from typing import Any

import pytest

import lightbnb.db as db


class FakeCursor:
    def __init__(self, conn: "FakeConnection") -> None:
        self.conn = conn
        self.rowcount = -1

    def __enter__(self) -> "FakeCursor":
        return self

    def __exit__(self, *exc: Any) -> None:
        return None

    def execute(self, sql: str, params: Any = ()) -> None:
        self.conn.executed.append((sql, list(params)))
        if self.conn.error is not None:
            raise self.conn.error
        self.rowcount = len(self.conn.rows)

    def fetchone(self) -> dict | None:
        return self.conn.rows[0] if self.conn.rows else None

    def fetchall(self) -> list[dict]:
        return list(self.conn.rows)


class FakeConnection:
    """Stands in for a pooled psycopg connection; records every statement."""

    def __init__(self) -> None:
        self.rows: list[dict] = []
        self.error: Exception | None = None
        self.executed: list[tuple[str, list]] = []
        self.commits = 0
        self.rollbacks = 0

    def cursor(self, row_factory: Any = None) -> FakeCursor:
        return FakeCursor(self)

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        self.rollbacks += 1


class FakePool:
    def __init__(self, conn: FakeConnection) -> None:
        self.conn = conn
        self.connect_error: Exception | None = None

    @contextmanager
    def connection(self):
        if self.connect_error is not None:
            raise self.connect_error
        yield self.conn


@pytest.fixture
def fake_conn() -> FakeConnection:
    return FakeConnection()


@pytest.fixture
def fake_pool(fake_conn: FakeConnection, monkeypatch: pytest.MonkeyPatch) -> FakePool:
    """
    Routes lightbnb.db.get_conn() to an in-process fake, so no PostgreSQL
    server is needed. Automatically undone after each test.
    """
    pool = FakePool(fake_conn)
    monkeypatch.setattr(db, "get_pool", lambda: pool)
    return pool
