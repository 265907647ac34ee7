"""Database query functions."""

import sqlite3
from pathlib import Path
from typing import Any

from spendlog.store.schema import get_db_path

_COLUMNS = "id, date, description, amount, category"


def _connect(db_path: Path | None = None) -> sqlite3.Connection:
    """Create a database connection with row factory.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Database connection with row_factory configured.
    """
    if db_path is None:
        db_path = get_db_path()
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def insert_expense(row: dict[str, Any], db_path: Path | None = None) -> bool:
    """Insert an expense unless one with the same id already exists.

    Args:
        row: Expense row with id, date, description, amount and category.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        True if inserted, False if the id was already present.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.execute("SELECT id FROM expenses WHERE id = ?", (row["id"],))
            if cursor.fetchone():
                return False

            cursor.execute(
                "INSERT INTO expenses (id, date, description, amount, category) VALUES (?, ?, ?, ?, ?)",
                (row["id"], row["date"], row["description"], row["amount"], row["category"]),
            )
            conn.commit()
            return True
        except sqlite3.Error:
            conn.rollback()
            raise


def get_all_expenses(
    db_path: Path | None = None,
    since_date: str | None = None,
    until_date: str | None = None,
    limit: int | None = None,
) -> list[dict[str, Any]]:
    """Get expenses, optionally within a date range.

    Args:
        db_path: Path to the database file. If None, uses default location.
        since_date: Inclusive lower bound (YYYY-MM-DD).
        until_date: Exclusive upper bound (YYYY-MM-DD).
        limit: Maximum number of expenses to return. If None, returns all.

    Returns:
        List of expense dictionaries ordered by date descending.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        query = f"SELECT {_COLUMNS} FROM expenses"
        conditions: list[str] = []
        params: list[Any] = []

        if since_date:
            conditions.append("date >= ?")
            params.append(since_date)
        if until_date:
            conditions.append("date < ?")
            params.append(until_date)

        if conditions:
            query += " WHERE " + " AND ".join(conditions)

        query += " ORDER BY date DESC, created_at DESC"

        if limit is not None:
            query += " LIMIT ?"
            params.append(limit)

        cursor.execute(query, params)
        rows = cursor.fetchall()
        return [dict(row) for row in rows]


def get_expense(expense_id: str, db_path: Path | None = None) -> dict[str, Any] | None:
    """Get a single expense by id.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        cursor.execute(f"SELECT {_COLUMNS} FROM expenses WHERE id = ?", (expense_id,))
        row = cursor.fetchone()
        return dict(row) if row else None


def update_expense(row: dict[str, Any], db_path: Path | None = None) -> bool:
    """Overwrite the stored fields of an existing expense.

    Returns:
        True if a row was updated, False if the id is unknown.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.execute(
                "UPDATE expenses SET date = ?, description = ?, amount = ?, category = ? WHERE id = ?",
                (row["date"], row["description"], row["amount"], row["category"], row["id"]),
            )
            conn.commit()
            return cursor.rowcount > 0
        except sqlite3.Error:
            conn.rollback()
            raise


def delete_expense(expense_id: str, db_path: Path | None = None) -> bool:
    """Delete an expense by id.

    Returns:
        True if a row was deleted, False if the id is unknown.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.execute("DELETE FROM expenses WHERE id = ?", (expense_id,))
            conn.commit()
            return cursor.rowcount > 0
        except sqlite3.Error:
            conn.rollback()
            raise
