"""Database store layer - provides persistence for the application.

This module re-exports all public database functions for easy importing.
"""

from spendlog.store.queries import (
    delete_expense,
    get_all_expenses,
    get_expense,
    insert_expense,
    update_expense,
)
from spendlog.store.schema import database_exists, get_db_path, init_database

__all__ = [
    # Schema
    "database_exists",
    "get_db_path",
    "init_database",
    # Queries
    "delete_expense",
    "get_all_expenses",
    "get_expense",
    "insert_expense",
    "update_expense",
]
