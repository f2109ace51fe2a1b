"""Database layer for scvs_export application."""

from scvs_export.database.base import Database
from scvs_export.database.factories import create_database, create_sqlite_database

__all__ = ["Database", "create_database", "create_sqlite_database"]
