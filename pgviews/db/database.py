"""Database snapshot of the views a connection can see."""

import re
from dataclasses import dataclass, field
from pathlib import Path

import psycopg

from ..definitions import VersionResolver
from ..identifiers import PostgresIdentifierQuoter
from ..views import View, Views


def _fetch_postgres_version(conn: psycopg.Connection) -> str:
    with conn.cursor() as cur:
        cur.execute("SELECT version()")
        row = cur.fetchone()
        return row[0] if row else ""


def _extract_major_version(version_string: str) -> str:
    # "PostgreSQL 16.2 on x86_64..." -> "16.2"
    match = re.search(r"PostgreSQL (\d+(?:\.\d+)?)", version_string)
    return match.group(1) if match else ""


@dataclass
class Database:
    """Views discovered in one PostgreSQL database."""

    connection_string: str
    views_dir: Path
    postgres_version: str = ""
    views: list[View] = field(default_factory=list)

    @property
    def major_version(self) -> str:
        """Server version as reported in the XML report, e.g. "16.2"."""
        return _extract_major_version(self.postgres_version)

    @classmethod
    def from_connection_string(
        cls, connection_string: str, views_dir: Path | str
    ) -> "Database":
        """Connect and discover every view with its current definition.

        Args:
            connection_string: PostgreSQL connection string.
            views_dir: Directory holding the versioned view definition files.
        """
        db = cls(connection_string=connection_string, views_dir=Path(views_dir))
        db.fetch_all()
        return db

    def fetch_all(self) -> None:
        """Read the server version and views.

        Both reads run in one transaction that is rolled back afterwards.
        """
        resolver = VersionResolver(self.views_dir)
        with psycopg.connect(self.connection_string, autocommit=True) as conn:
            try:
                with conn.transaction():
                    self.postgres_version = _fetch_postgres_version(conn)
                    self.views = Views(
                        conn, resolver, PostgresIdentifierQuoter(conn)
                    ).all()

                    raise psycopg.Rollback()
            except psycopg.Rollback:
                pass

    def summary(self) -> str:
        """Return a summary of the discovered views."""
        materialized = sum(1 for view in self.views if view.materialized)
        return (
            f"Database Summary:\n"
            f"  Views: {len(self.views) - materialized}\n"
            f"  Materialized Views: {materialized}"
        )
