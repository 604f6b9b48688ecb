"""Database introspection submodule for pgviews."""

from .views import QUERY, ViewKind, ViewRow, fetch_view_rows
from .database import Database

__all__ = [
    "QUERY",
    "ViewKind",
    "ViewRow",
    "fetch_view_rows",
    "Database",
]
