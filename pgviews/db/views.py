"""View rows and query for PostgreSQL catalog introspection."""

import logging
from dataclasses import dataclass
from enum import Enum

import psycopg

logger = logging.getLogger(__name__)


class ViewKind(Enum):
    """Relation kind of a view, keyed by its ``pg_class.relkind`` code."""

    ORDINARY = "v"
    MATERIALIZED = "m"


@dataclass(frozen=True)
class ViewRow:
    """Represents a view as it currently exists in the database."""

    name: str
    namespace: str
    kind: ViewKind
    live_definition: str

    @property
    def key(self) -> str:
        """Unique identifier within the database."""
        return f"{self.namespace}.{self.name}"

    @property
    def materialized(self) -> bool:
        return self.kind is ViewKind.MATERIALIZED

    def __str__(self) -> str:
        return f"ViewRow({self.key})"


# Only schemas on the connection's search path are read (current_schemas(false)
# leaves out implicitly searched schemas such as pg_catalog). Relations named
# after an installed extension belong to that extension, not the application.
QUERY = """
SELECT
    c.relname AS viewname,
    pg_get_viewdef(c.oid) AS definition,
    c.relkind AS kind,
    n.nspname AS namespace
FROM pg_class c
LEFT JOIN pg_namespace n ON n.oid = c.relnamespace
WHERE c.relkind IN ('m', 'v')
  AND c.relname NOT IN (SELECT extname FROM pg_extension)
  AND n.nspname = ANY (current_schemas(false))
ORDER BY c.oid
"""


def fetch_view_rows(conn: psycopg.Connection) -> list[ViewRow]:
    """Fetch all application views visible on the search path, in creation order."""
    rows = []
    with conn.cursor() as cur:
        cur.execute(QUERY)
        for row in cur.fetchall():
            rows.append(
                ViewRow(
                    name=row[0],
                    live_definition=row[1],
                    kind=ViewKind(row[2]),
                    namespace=row[3],
                )
            )
    logger.debug("Fetched %d view(s) from the catalog", len(rows))
    return rows
