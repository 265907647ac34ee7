"""Report and compare commands for monthly insights."""

import sqlite3
import sys
import time
from datetime import datetime

from rich.console import Console

from spendlog.commands.expenses import load_expenses, require_database
from spendlog.config import get_display_currency, get_report_delay
from spendlog.currency import get_currency
from spendlog.dates import format_month_key, parse_month_key
from spendlog.domain.compare import generate_comparison_explanation, generate_month_comparison
from spendlog.domain.models import Month
from spendlog.domain.report import generate_monthly_report
from spendlog.store.schema import get_db_path

console = Console()


def resolve_month(month: str | None) -> Month:
    """Month to report on, defaulting to the current month.

    Returns:
        Canonical YYYY-MM key (so "2026-1" becomes "2026-01").

    Raises:
        ValueError: If the month is not in YYYY-MM format.
    """
    if month is None:
        return format_month_key(datetime.now().date())
    return format_month_key(parse_month_key(Month(month)))


def resolve_currency(currency: str | None) -> str:
    """Currency for the report: explicit option, else the configured one.

    Raises:
        ValueError: If the currency is not supported.
    """
    return get_currency(currency or get_display_currency()).code


def think(message: str, delay: float) -> None:
    """Show a spinner for the configured report delay."""
    if delay > 0:
        with console.status(message):
            time.sleep(delay)


def print_report(text: str) -> None:
    """Print report text verbatim, keeping its **bold** markers."""
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def report_command(month: str | None = None, currency: str | None = None) -> None:
    """Generate the monthly snapshot report."""
    db_path = get_db_path()
    require_database(db_path)

    try:
        report_month = resolve_month(month)
        currency_code = resolve_currency(currency)
        delay = get_report_delay()
        expenses = load_expenses(db_path)
        report = generate_monthly_report(expenses, report_month, currency_code)
    except ValueError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    think("Analyzing your spending patterns...", delay)
    print_report(report)


def compare_command(
    month: str | None = None,
    currency: str | None = None,
    explain: bool = False,
) -> None:
    """Compare a month with the month before it."""
    db_path = get_db_path()
    require_database(db_path)

    try:
        report_month = resolve_month(month)
        currency_code = resolve_currency(currency)
        delay = get_report_delay()
        expenses = load_expenses(db_path)
        report = generate_month_comparison(expenses, report_month, currency_code)
        explanation = generate_comparison_explanation(expenses, report_month, currency_code) if explain else []
    except ValueError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    think("Crunching the numbers...", delay)
    print_report(report)

    if explain:
        console.print("\n[bold cyan]Why it changed:[/bold cyan]")
        for item in explanation:
            style = "bold" if item.importance == "high" else None
            console.print(f"  • {item.text}", style=style, markup=False, highlight=False, soft_wrap=True)
