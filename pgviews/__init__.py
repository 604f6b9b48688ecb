"""pgviews - Discover PostgreSQL views and their versioned definitions."""

from .db import Database, ViewKind, ViewRow, fetch_view_rows
from .views import View, Views
from .definitions import Definition, VersionedDefinition, VersionResolver
from .identifiers import IdentifierQuoter, PostgresIdentifierQuoter, qualify
from .errors import (
    PgViewsError,
    DirectoryUnreadable,
    MalformedIdentifier,
    DefinitionNotFound,
    DefinitionUnreadable,
    EmptyDefinition,
)
from .xml_report import generate_xml_report

__all__ = [
    "Database",
    "ViewKind",
    "ViewRow",
    "fetch_view_rows",
    "View",
    "Views",
    "Definition",
    "VersionedDefinition",
    "VersionResolver",
    "IdentifierQuoter",
    "PostgresIdentifierQuoter",
    "qualify",
    "PgViewsError",
    "DirectoryUnreadable",
    "MalformedIdentifier",
    "DefinitionNotFound",
    "DefinitionUnreadable",
    "EmptyDefinition",
    "generate_xml_report",
]
