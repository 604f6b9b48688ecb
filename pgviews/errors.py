"""Exceptions raised by pgviews.

Connection and query failures are not wrapped: they surface as the
``psycopg.Error`` raised by the driver.
"""

from pathlib import Path


class PgViewsError(Exception):
    """Base class for all pgviews errors."""


class DirectoryUnreadable(PgViewsError):
    """The view definitions directory could not be listed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot list view definitions directory {path}: {reason}")


class MalformedIdentifier(PgViewsError):
    """A namespace or view name that cannot be safely quoted."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        super().__init__(f"Malformed identifier {value!r}: {reason}")


class DefinitionNotFound(PgViewsError):
    """The SQL file for a resolved view version does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"View definition not found: {path}")


class EmptyDefinition(PgViewsError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Define view query in {path} before migrating.")


class DefinitionUnreadable(PgViewsError):
    """A definition file exists but could not be read as UTF-8 text."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot read view definition {path}: {reason}")
