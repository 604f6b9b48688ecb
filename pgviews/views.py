"""Assemble migration-ready view descriptors from the catalog and definition files."""

import logging
from dataclasses import dataclass
from pathlib import Path

import psycopg

from .db.views import ViewRow, fetch_view_rows
from .definitions import VersionResolver
from .identifiers import IdentifierQuoter, qualify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class View:
    """A database view paired with its current versioned definition."""

    qualified_name: str
    definition: str
    materialized: bool
    version: int
    source: Path | None

    @property
    def kind(self) -> str:
        return "materialized view" if self.materialized else "view"

    def to_dict(self) -> dict[str, object]:
        """Plain representation for serialization."""
        return {
            "qualified_name": self.qualified_name,
            "definition": self.definition,
            "materialized": self.materialized,
            "version": self.version,
            "source": str(self.source) if self.source else None,
        }

    def __str__(self) -> str:
        return f"View({self.qualified_name}, v{self.version})"


class Views:
    """Fetches defined views from a PostgreSQL connection.

    Args:
        conn: An open connection. It is used for a single read-only query.
        resolver: Locates the versioned definition file for each view.
        quoter: Quotes names that are not bare identifiers. Defaults to
            PostgreSQL's rules.
    """

    def __init__(
        self,
        conn: psycopg.Connection,
        resolver: VersionResolver,
        quoter: IdentifierQuoter | None = None,
    ) -> None:
        self.conn = conn
        self.resolver = resolver
        self.quoter = quoter

    def all(self) -> list[View]:
        """All views on the search path, including materialized views.

        Any failure for any view aborts the whole call.
        """
        return [self._to_view(row) for row in fetch_view_rows(self.conn)]

    def _to_view(self, row: ViewRow) -> View:
        name = qualify(row.namespace, row.name, self.quoter)
        current = self.resolver.resolve(row.name)
        logger.debug("%s -> version %d", row, current.version)
        return View(
            qualified_name=name,
            definition=current.sql_body,
            materialized=row.materialized,
            version=current.version,
            source=current.source,
        )
