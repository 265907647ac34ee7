"""Tests for date normalisation and import/export parsing."""

import json
from datetime import date
from pathlib import Path

import pytest

from spendlog.commands.data import export_records, import_expenses, parse_import_record, read_import_file
from spendlog.commands.expenses import normalize_date
from spendlog.domain.expenses import create_expense
from spendlog.domain.models import Category, Money
from spendlog.store import get_all_expenses, init_database


class TestNormalizeDate:
    """Tests for normalize_date."""

    def test_iso_date(self) -> None:
        assert normalize_date("2026-10-05") == date(2026, 10, 5)

    def test_iso_timestamp(self) -> None:
        """Should accept the timestamps a browser stores."""
        assert normalize_date("2026-10-05T10:00:00.000Z") == date(2026, 10, 5)

    def test_day_first(self) -> None:
        """Should read slash dates day-first."""
        assert normalize_date("05/10/2026") == date(2026, 10, 5)

    def test_invalid_raises_valueerror(self) -> None:
        with pytest.raises(ValueError):
            normalize_date("not a date")


class TestParseImportRecord:
    """Tests for parse_import_record."""

    def test_local_storage_record(self) -> None:
        record = {
            "id": "1",
            "date": "2026-10-05T10:00:00.000Z",
            "amount": 25.5,
            "category": "Food",
            "description": "Lunch",
        }

        expense = parse_import_record(record)

        assert expense.id == "1"
        assert expense.amount == Money(2550)
        assert expense.date == date(2026, 10, 5)
        assert expense.category == Category.FOOD

    def test_generates_id_when_missing(self) -> None:
        record = {"date": "2026-10-05", "amount": "10", "category": "Bills", "description": "Power"}

        assert parse_import_record(record).id

    def test_missing_field(self) -> None:
        with pytest.raises(ValueError, match="Missing field"):
            parse_import_record({"date": "2026-10-05", "amount": 10, "category": "Food"})

    def test_invalid_amount(self) -> None:
        with pytest.raises(ValueError, match="Invalid amount"):
            parse_import_record({"date": "2026-10-05", "amount": "ten", "category": "Food", "description": "x"})

    def test_unknown_category(self) -> None:
        with pytest.raises(ValueError, match="Unknown category"):
            parse_import_record({"date": "2026-10-05", "amount": 10, "category": "Groceries", "description": "x"})


class TestImportFiles:
    """Tests for read_import_file and import_expenses."""

    def test_json_import_skips_known_ids_and_reports_errors(self, tmp_path: Path) -> None:
        db_path = tmp_path / "spendlog.db"
        init_database(db_path)
        source = tmp_path / "expenses.json"
        source.write_text(
            json.dumps(
                [
                    {"id": "1", "date": "2026-10-05", "amount": 100, "category": "Food", "description": "Lunch"},
                    {"id": "2", "date": "2026-09-05", "amount": 50, "category": "Transport", "description": "Bus"},
                    {"id": "3", "date": "2026-09-06", "amount": 0, "category": "Food", "description": "Free"},
                ]
            ),
            encoding="utf-8",
        )

        first = import_expenses(read_import_file(source), db_path)
        second = import_expenses(read_import_file(source), db_path)

        assert first.inserted == 2
        assert len(first.errors) == 1
        assert first.errors[0].startswith("Row 3:")
        assert second.inserted == 0
        assert second.skipped == 2
        assert len(get_all_expenses(db_path)) == 2

    def test_csv_import(self, tmp_path: Path) -> None:
        source = tmp_path / "expenses.csv"
        source.write_text(
            "id,date,amount,category,description\n1,05/10/2026,12.5,Food,Lunch\n",
            encoding="utf-8",
        )

        records = read_import_file(source)

        assert parse_import_record(records[0]).date == date(2026, 10, 5)

    def test_unsupported_suffix(self, tmp_path: Path) -> None:
        source = tmp_path / "expenses.txt"
        source.write_text("", encoding="utf-8")

        with pytest.raises(ValueError, match="Unsupported file type"):
            read_import_file(source)

    def test_json_must_be_array(self, tmp_path: Path) -> None:
        source = tmp_path / "expenses.json"
        source.write_text('{"expenses": []}', encoding="utf-8")

        with pytest.raises(ValueError, match="JSON array"):
            read_import_file(source)


class TestExportRecords:
    """Tests for export_records."""

    def test_amounts_in_major_units(self) -> None:
        expense = create_expense("Lunch", Money(2550), date(2026, 10, 5), Category.FOOD, expense_id="1")

        assert export_records([expense]) == [
            {"id": "1", "date": "2026-10-05", "description": "Lunch", "amount": 25.5, "category": "Food"}
        ]
