"""Database layer for spendbook application."""

from spendbook.database.base import Database
from spendbook.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
