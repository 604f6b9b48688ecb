"""Pytest configuration and shared fixtures."""

from contextlib import contextmanager
from pathlib import Path

import pytest


class FakeCursor:
    """Stands in for a psycopg cursor returning canned catalog rows."""

    def __init__(self, conn: "FakeConnection") -> None:
        self.conn = conn
        self.last_query = ""

    def __enter__(self) -> "FakeCursor":
        return self

    def __exit__(self, *exc) -> None:
        return None

    def execute(self, query: str) -> None:
        self.conn.executed.append(query)
        self.last_query = query
        if self.conn.error is not None:
            raise self.conn.error

    def fetchone(self) -> tuple | None:
        if self.last_query == "SELECT version()":
            return (self.conn.server_version,)
        return None

    def fetchall(self) -> list[tuple]:
        return list(self.conn.rows)


class FakeConnection:
    """Stands in for an open psycopg connection."""

    def __init__(
        self,
        rows=(),
        error: Exception | None = None,
        server_version: str = "PostgreSQL 16.2 on x86_64-pc-linux-gnu",
    ) -> None:
        self.rows = list(rows)
        self.error = error
        self.server_version = server_version
        self.executed: list[str] = []
        self.closed = False

    def __enter__(self) -> "FakeConnection":
        return self

    def __exit__(self, *exc) -> None:
        self.closed = True

    def cursor(self) -> FakeCursor:
        return FakeCursor(self)

    @contextmanager
    def transaction(self):
        yield self


@pytest.fixture
def make_connection():
    """Build a fake connection that answers the catalog query with ``rows``."""
    return FakeConnection


@pytest.fixture
def patch_connect(monkeypatch):
    """Make ``psycopg.connect`` return the given fake connection."""

    def _patch(conn: FakeConnection) -> list[tuple]:
        calls = []

        def connect(conninfo, **kwargs):
            calls.append((conninfo, kwargs))
            return conn

        monkeypatch.setattr("pgviews.db.database.psycopg.connect", connect)
        return calls

    return _patch


@pytest.fixture
def views_dir(tmp_path: Path) -> Path:
    """An empty view definitions directory."""
    path = tmp_path / "db" / "views"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def write_definition(views_dir: Path):
    """Write a definition file into ``views_dir``."""

    def _write(filename: str, sql: str = "SELECT 1") -> Path:
        path = views_dir / filename
        path.write_text(sql, encoding="utf-8")
        return path

    return _write
