"""Tests for the SQLite expense store."""

from pathlib import Path

import pytest

from spendlog.store import (
    database_exists,
    delete_expense,
    get_all_expenses,
    get_expense,
    init_database,
    insert_expense,
    update_expense,
)


def row(expense_id: str, day: str, amount: int = 1000, category: str = "Food") -> dict:
    return {"id": expense_id, "date": day, "description": f"Expense {expense_id}", "amount": amount, "category": category}


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    path = tmp_path / "spendlog.db"
    init_database(path)
    return path


class TestSchema:
    """Tests for init_database and database_exists."""

    def test_creates_database(self, tmp_path: Path) -> None:
        """Should create the file and parent directories."""
        path = tmp_path / "nested" / "spendlog.db"

        init_database(path)

        assert database_exists(path)

    def test_is_idempotent(self, db_path: Path) -> None:
        """Should be safe to run migrations twice."""
        insert_expense(row("a", "2026-10-01"), db_path)

        init_database(db_path)

        assert get_expense("a", db_path) is not None


class TestInsertExpense:
    """Tests for insert_expense."""

    def test_inserts(self, db_path: Path) -> None:
        assert insert_expense(row("a", "2026-10-01"), db_path) is True
        assert get_expense("a", db_path) == row("a", "2026-10-01")

    def test_duplicate_id_is_skipped(self, db_path: Path) -> None:
        insert_expense(row("a", "2026-10-01"), db_path)

        assert insert_expense(row("a", "2026-10-02"), db_path) is False
        assert get_expense("a", db_path)["date"] == "2026-10-01"


class TestGetAllExpenses:
    """Tests for get_all_expenses."""

    def test_newest_first(self, db_path: Path) -> None:
        insert_expense(row("a", "2026-09-10"), db_path)
        insert_expense(row("b", "2026-10-05"), db_path)

        result = get_all_expenses(db_path)

        assert [r["id"] for r in result] == ["b", "a"]

    def test_date_range_is_half_open(self, db_path: Path) -> None:
        insert_expense(row("a", "2026-09-30"), db_path)
        insert_expense(row("b", "2026-10-01"), db_path)
        insert_expense(row("c", "2026-10-31"), db_path)
        insert_expense(row("d", "2026-11-01"), db_path)

        result = get_all_expenses(db_path, "2026-10-01", "2026-11-01")

        assert sorted(r["id"] for r in result) == ["b", "c"]

    def test_limit(self, db_path: Path) -> None:
        for idx in range(5):
            insert_expense(row(str(idx), f"2026-10-0{idx + 1}"), db_path)

        assert len(get_all_expenses(db_path, limit=3)) == 3


class TestUpdateAndDelete:
    """Tests for update_expense and delete_expense."""

    def test_update(self, db_path: Path) -> None:
        insert_expense(row("a", "2026-10-01"), db_path)

        assert update_expense(row("a", "2026-10-02", amount=2500, category="Travel"), db_path) is True

        stored = get_expense("a", db_path)
        assert stored["amount"] == 2500
        assert stored["category"] == "Travel"
        assert stored["date"] == "2026-10-02"

    def test_update_unknown(self, db_path: Path) -> None:
        assert update_expense(row("missing", "2026-10-02"), db_path) is False

    def test_delete(self, db_path: Path) -> None:
        insert_expense(row("a", "2026-10-01"), db_path)

        assert delete_expense("a", db_path) is True
        assert get_expense("a", db_path) is None
        assert delete_expense("a", db_path) is False
