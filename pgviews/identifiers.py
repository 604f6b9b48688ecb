"""Identifier quoting and schema qualification for PostgreSQL names."""

import re
from typing import Protocol

from psycopg import sql
from psycopg.abc import AdaptContext

from .errors import MalformedIdentifier

DEFAULT_NAMESPACE = "public"

BARE_IDENTIFIER = re.compile(r"\A[A-Za-z_][A-Za-z0-9_]*\Z")


class IdentifierQuoter(Protocol):
    """Anything that can render a name as a quoted SQL identifier."""

    def quote(self, name: str) -> str: ...


class PostgresIdentifierQuoter:
    """Quote identifiers the way PostgreSQL's ``quote_ident`` does.

    Delegates to ``psycopg.sql.Identifier``. Passing a connection as
    ``context`` lets libpq do the escaping with the server's encoding;
    without one psycopg doubles embedded quotes itself.
    """

    def __init__(self, context: AdaptContext | None = None) -> None:
        self.context = context

    def quote(self, name: str) -> str:
        return sql.Identifier(name).as_string(self.context)


def is_bare_identifier(name: str) -> bool:
    """Check if a name can appear in SQL without quoting."""
    return BARE_IDENTIFIER.match(name) is not None


def pg_identifier(name: str, quoter: IdentifierQuoter | None = None) -> str:
    """Return ``name`` unchanged if it is a bare identifier, else quoted."""
    if not name:
        raise MalformedIdentifier(name, "identifier is empty")
    if "\x00" in name:
        raise MalformedIdentifier(name, "identifier contains a NUL byte")

    if is_bare_identifier(name):
        return name

    quoter = quoter or PostgresIdentifierQuoter()
    return quoter.quote(name)


def qualify(
    namespace: str, name: str, quoter: IdentifierQuoter | None = None
) -> str:
    """Return the name a migration should use for ``namespace.name``.

    Views in the default ``public`` schema are referenced by their bare
    (possibly quoted) name; everything else is schema-qualified. Each part
    is quoted on its own.
    """
    if namespace == DEFAULT_NAMESPACE:
        return pg_identifier(name, quoter)
    return f"{pg_identifier(namespace, quoter)}.{pg_identifier(name, quoter)}"
