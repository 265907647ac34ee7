"""Expense management commands (add, list, edit, delete, months)."""

import sqlite3
import sys
from datetime import date
from pathlib import Path

import pandas as pd
from rich.console import Console
from rich.table import Table

from spendlog.config import get_display_currency
from spendlog.currency import format_currency
from spendlog.dates import format_month_label, month_range
from spendlog.domain.aggregate import available_months, total_amount
from spendlog.domain.expenses import (
    create_expense,
    edit_expense,
    expense_from_row,
    expense_to_row,
    parse_category,
    to_minor_units,
    validate_expense,
)
from spendlog.domain.models import Expense, Month
from spendlog.store import queries
from spendlog.store.schema import get_db_path

console = Console()

ID_DISPLAY_LENGTH = 8


def normalize_date(raw_date: str) -> date:
    """Parse a user or file supplied date.

    Uses pandas.to_datetime so ISO dates, ISO timestamps
    ("2026-10-05T10:00:00.000Z") and day-first dates ("05/10/2026") all work.

    Args:
        raw_date: Raw date string.

    Returns:
        Calendar date.

    Raises:
        ValueError: If date cannot be parsed.
    """
    text = str(raw_date).strip()
    # ISO strings must not be reinterpreted day-first
    dayfirst = not text[:4].isdigit()
    try:
        parsed = pd.to_datetime(text, dayfirst=dayfirst)
    except (ValueError, pd.errors.ParserError) as e:
        raise ValueError(f"Could not parse date '{raw_date}': {e}") from e
    if pd.isna(parsed):
        raise ValueError(f"Could not parse date '{raw_date}'")
    return parsed.date()


def require_database(db_path: Path) -> None:
    """Exit with a hint when the database has not been created yet."""
    if not db_path.exists():
        console.print("[red]Database not found. Run 'spendlog init' first.[/red]", style="bold")
        sys.exit(1)


def load_expenses(
    db_path: Path,
    since_date: str | None = None,
    until_date: str | None = None,
    limit: int | None = None,
) -> list[Expense]:
    """Load stored expenses as domain objects, newest first.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    rows = queries.get_all_expenses(db_path, since_date, until_date, limit)
    return [expense_from_row(row) for row in rows]


def resolve_expense(id_prefix: str, db_path: Path) -> Expense:
    """Find the single expense whose id starts with the given prefix.

    Raises:
        ValueError: If no expense or more than one expense matches.
        sqlite3.Error: If database operation fails.
    """
    matches = [e for e in load_expenses(db_path) if e.id.startswith(id_prefix)]
    if not matches:
        raise ValueError(f"No expense with id '{id_prefix}'")
    if len(matches) > 1:
        raise ValueError(f"Id '{id_prefix}' is ambiguous ({len(matches)} matches)")
    return matches[0]


def render_expense(expense: Expense, currency_code: str) -> None:
    """Print the fields of a single expense."""
    console.print(f"  Date: {expense.date.isoformat()}")
    console.print(f"  Description: {expense.description}")
    console.print(f"  Amount: {format_currency(expense.amount, currency_code)}")
    console.print(f"  Category: {expense.category.value}")


def add_command(
    description: str,
    amount: float,
    category: str,
    date_str: str | None = None,
) -> None:
    """Add an expense.

    Args:
        description: Expense description.
        amount: Amount in major units (e.g. 12.50).
        category: Category label.
        date_str: Expense date (YYYY-MM-DD, DD/MM/YYYY, ...); today when omitted.
    """
    db_path = get_db_path()
    require_database(db_path)

    error = validate_expense(description, amount, category)
    if error:
        console.print(f"[red]{error}[/red]", style="bold")
        sys.exit(1)

    try:
        day = normalize_date(date_str) if date_str else date.today()
    except ValueError as e:
        console.print(f"[red]Invalid date format: {e}[/red]")
        console.print("[dim]Accepted formats: YYYY-MM-DD, DD/MM/YYYY, DD-MM-YYYY, etc.[/dim]")
        sys.exit(1)

    expense = create_expense(description, to_minor_units(amount), day, parse_category(category))

    try:
        currency_code = get_display_currency()
        queries.insert_expense(expense_to_row(expense), db_path)
    except ValueError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print("[green]✓[/green] Expense added:")
    render_expense(expense, currency_code)
    console.print(f"[dim]Id: {expense.id}[/dim]")


def list_command(
    month: str | None = None,
    limit: int = 50,
    all: bool = False,
) -> None:
    """List expenses, optionally for a single month."""
    db_path = get_db_path()
    require_database(db_path)

    since_date = until_date = None
    period = "All months"
    if month:
        try:
            since_date, until_date, period = month_range(Month(month))
        except ValueError as e:
            console.print(f"[red]Invalid month '{month}': {e}[/red]", style="bold")
            sys.exit(1)

    try:
        actual_limit = None if all or month else limit
        expenses = load_expenses(db_path, since_date, until_date, actual_limit)
        currency_code = get_display_currency()
    except ValueError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    if not expenses:
        console.print("[yellow]No expenses found. Start by adding your first expense![/yellow]")
        return

    table = Table(title=f"Expenses - {period} ({len(expenses)})")
    table.add_column("Id", style="dim")
    table.add_column("Date", style="cyan")
    table.add_column("Description", style="white")
    table.add_column("Category", style="magenta")
    table.add_column("Amount", justify="right")

    for expense in expenses:
        table.add_row(
            expense.id[:ID_DISPLAY_LENGTH],
            expense.date.strftime("%b %d, %Y"),
            expense.description,
            expense.category.value,
            format_currency(expense.amount, currency_code),
        )

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {format_currency(total_amount(expenses), currency_code)}")


def edit_command(
    expense_id: str,
    description: str | None = None,
    amount: float | None = None,
    category: str | None = None,
    date_str: str | None = None,
) -> None:
    """Change fields of an existing expense."""
    db_path = get_db_path()
    require_database(db_path)

    try:
        expense = resolve_expense(expense_id, db_path)

        error = validate_expense(
            description if description is not None else expense.description,
            amount if amount is not None else expense.amount / 100,
            category if category is not None else expense.category.value,
        )
        if error:
            console.print(f"[red]{error}[/red]", style="bold")
            sys.exit(1)

        updated = edit_expense(
            expense,
            description=description,
            amount=to_minor_units(amount) if amount is not None else None,
            day=normalize_date(date_str) if date_str else None,
            category=parse_category(category) if category else None,
        )
        queries.update_expense(expense_to_row(updated), db_path)
        currency_code = get_display_currency()
    except ValueError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print("[green]✓[/green] Expense updated:")
    render_expense(updated, currency_code)


def delete_command(expense_id: str) -> None:
    """Delete an expense."""
    db_path = get_db_path()
    require_database(db_path)

    try:
        expense = resolve_expense(expense_id, db_path)
        queries.delete_expense(expense.id, db_path)
        currency_code = get_display_currency()
    except ValueError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print("[green]✓[/green] Expense deleted:")
    render_expense(expense, currency_code)


def months_command() -> None:
    """List months that have expenses, newest first."""
    db_path = get_db_path()
    require_database(db_path)

    try:
        months = available_months(load_expenses(db_path))
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    if not months:
        console.print("[yellow]No expenses yet[/yellow]")
        return

    for month in months:
        console.print(f"  {month}  [dim]{format_month_label(month)}[/dim]")
