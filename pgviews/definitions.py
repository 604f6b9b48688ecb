"""Versioned view definition files.

A view's SQL lives in a flat directory of files named
``<view name>_v<version>.sql``. The current definition is the one with the
highest version number.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from .errors import (
    DefinitionNotFound,
    DefinitionUnreadable,
    DirectoryUnreadable,
    EmptyDefinition,
)

logger = logging.getLogger(__name__)

DEFAULT_VERSION = 1

# Renders the body of a view that has no definition file yet, given its
# name and version.
DefinitionTemplate = Callable[[str, int], str]


def version_pattern(view_name: str) -> re.Pattern[str]:
    """Compile the pattern matching every versioned file for ``view_name``."""
    return re.compile(rf"\A{re.escape(view_name)}_v(?P<version>[0-9]+)\.sql\Z")


def blank_template(view_name: str, version: int) -> str:
    return ""


@dataclass(frozen=True)
class Definition:
    """One versioned SQL file for a view."""

    name: str
    version: int
    path: Path

    def to_sql(self) -> str:
        """Read the SQL body, failing if the file is missing, unreadable or blank."""
        try:
            body = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise DefinitionNotFound(self.path) from None
        except OSError as e:
            raise DefinitionUnreadable(self.path, e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise DefinitionUnreadable(self.path, f"not valid UTF-8 ({e.reason})") from e

        if not body.strip():
            raise EmptyDefinition(self.path)

        logger.debug("Read %s (%d bytes)", self.path, len(body))
        return body


@dataclass(frozen=True)
class VersionedDefinition:
    """The current definition of a view and where it came from.

    ``source`` is None when no definition file exists and the body was
    rendered from the template.
    """

    view_name: str
    version: int
    sql_body: str
    source: Path | None


class VersionResolver:
    """Find the highest-numbered definition file for a view.

    Args:
        directory: The directory holding the versioned ``.sql`` files.
        template: Renders the body for views without any definition file.
            Defaults to an empty body.
    """

    def __init__(
        self, directory: Path | str, template: DefinitionTemplate | None = None
    ) -> None:
        self.directory = Path(directory)
        self.template = template or blank_template

    def _list_entries(self) -> list[Path]:
        try:
            return sorted(self.directory.iterdir(), key=lambda entry: entry.name)
        except OSError as e:
            raise DirectoryUnreadable(self.directory, e.strerror or str(e)) from e

    def find(self, view_name: str) -> Definition | None:
        """Pick the definition file to use for ``view_name`` without reading it.

        Returns None when no file matches. Only regular files count; a
        directory with a matching name is ignored. Ties on version
        (``foo_v2.sql`` and ``foo_v02.sql``) go to the first filename in
        sorted order.
        """
        pattern = version_pattern(view_name)
        best: Definition | None = None

        for entry in self._list_entries():
            match = pattern.match(entry.name)
            if match is None:
                continue
            if not entry.is_file():
                logger.debug("Skipping %s: not a regular file", entry)
                continue
            version = int(match.group("version"))
            if best is None or version > best.version:
                best = Definition(view_name, version, entry)

        if best is None or best.version < DEFAULT_VERSION:
            return None
        return best

    def resolve(self, view_name: str) -> VersionedDefinition:
        """Resolve and load the current definition of ``view_name``.

        Without a matching file the version is 1, nothing is read and the
        body comes from the template.
        """
        definition = self.find(view_name)
        if definition is None:
            logger.debug("No definition file for %s, using version 1", view_name)
            return VersionedDefinition(
                view_name=view_name,
                version=DEFAULT_VERSION,
                sql_body=self.template(view_name, DEFAULT_VERSION),
                source=None,
            )

        logger.debug(
            "Resolved %s to version %d (%s)",
            view_name,
            definition.version,
            definition.path.name,
        )
        return VersionedDefinition(
            view_name=view_name,
            version=definition.version,
            sql_body=definition.to_sql(),
            source=definition.path,
        )
