"""Import and export commands for moving expenses in and out of spendlog.

The file format is the JSON array a browser local-storage dump of the
expense tracker holds (amounts in major units); CSV files with the same
columns are accepted on import.
"""

import csv
import json
import sqlite3
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from rich.console import Console

from spendlog.commands.expenses import load_expenses, normalize_date, require_database
from spendlog.domain.expenses import (
    create_expense,
    expense_to_row,
    from_minor_units,
    parse_category,
    to_minor_units,
    validate_expense,
)
from spendlog.domain.models import Expense
from spendlog.store.queries import insert_expense
from spendlog.store.schema import get_db_path

console = Console()


@dataclass
class ImportStats:
    """Statistics from importing expenses."""

    inserted: int = 0
    skipped: int = 0
    errors: list[str] = field(default_factory=list)


def read_import_file(path: Path) -> list[dict[str, Any]]:
    """Read raw expense records from a JSON or CSV file.

    Raises:
        ValueError: If the file is not a JSON array or has an unknown suffix.
        OSError: If the file cannot be read.
    """
    suffix = path.suffix.lower()
    if suffix == ".json":
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError("Expected a JSON array of expenses")
        return data
    if suffix == ".csv":
        with open(path, newline="", encoding="utf-8") as f:
            return list(csv.DictReader(f))
    raise ValueError(f"Unsupported file type '{path.suffix}' (use .json or .csv)")


def parse_import_record(record: dict[str, Any]) -> Expense:
    """Turn one raw record into an expense.

    Raises:
        ValueError: If a field is missing or invalid.
    """
    try:
        description = str(record["description"])
        amount = float(record["amount"])
        category = str(record["category"])
        raw_date = str(record["date"])
    except KeyError as e:
        raise ValueError(f"Missing field {e}") from e
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid amount '{record.get('amount')}'") from e

    error = validate_expense(description, amount, category)
    if error:
        raise ValueError(error)

    return create_expense(
        description,
        to_minor_units(amount),
        normalize_date(raw_date),
        parse_category(category),
        expense_id=str(record["id"]) if record.get("id") else None,
    )


def import_expenses(records: list[dict[str, Any]], db_path: Path) -> ImportStats:
    """Insert records, skipping ids already stored and invalid rows.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    stats = ImportStats()
    for idx, record in enumerate(records, 1):
        try:
            expense = parse_import_record(record)
        except ValueError as e:
            stats.errors.append(f"Row {idx}: {e}")
            continue

        if insert_expense(expense_to_row(expense), db_path):
            stats.inserted += 1
        else:
            stats.skipped += 1
    return stats


def import_command(file_path: str) -> None:
    """Import expenses from a JSON or CSV file."""
    db_path = get_db_path()
    require_database(db_path)

    path = Path(file_path).expanduser()
    if not path.exists():
        console.print(f"[red]File not found: {path}[/red]", style="bold")
        sys.exit(1)

    try:
        records = read_import_file(path)
        stats = import_expenses(records, db_path)
    except (ValueError, json.JSONDecodeError) as e:
        console.print(f"[red]Could not read {path}: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Imported {stats.inserted} expenses")
    if stats.skipped:
        console.print(f"[yellow]Skipped {stats.skipped} already imported[/yellow]")
    for error in stats.errors:
        console.print(f"[red]{error}[/red]")


def export_records(expenses: list[Expense]) -> list[dict[str, Any]]:
    """Expenses as JSON-ready records with amounts in major units."""
    records = []
    for expense in expenses:
        row = expense_to_row(expense)
        row["amount"] = from_minor_units(expense.amount)
        records.append(row)
    return records


def export_command(file_path: str) -> None:
    """Export all expenses to a JSON file."""
    db_path = get_db_path()
    require_database(db_path)

    path = Path(file_path).expanduser()

    try:
        expenses = load_expenses(db_path)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(export_records(expenses), f, indent=2, ensure_ascii=False)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Exported {len(expenses)} expenses to: {path}")
