"""CLI entry point for spendlog."""

import typer

from spendlog.commands.admin import backup_command, currency_command, init_command
from spendlog.commands.data import export_command, import_command
from spendlog.commands.expenses import add_command, delete_command, edit_command, list_command, months_command
from spendlog.commands.report import compare_command, report_command

app = typer.Typer(
    name="spendlog",
    help="Track your expenses and get plain-language monthly insights",
    add_completion=False,
)


@app.callback()
def main() -> None:
    """Track your expenses and get plain-language monthly insights."""
    pass


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing database and config"),
) -> None:
    """Initialize the spendlog database and configuration."""
    init_command(force)


@app.command(name="backup")
def backup(
    output_dir: str = typer.Option(None, "--output", "-o", help="Backup directory (default: ~/.spendlog/backups)"),
) -> None:
    """Backup your database and configuration files."""
    backup_command(output_dir)


@app.command()
def add(
    description: str,
    amount: float,
    category: str = typer.Option("Other", "--category", "-c", help="Expense category (e.g. Food, 'Self Care')"),
    date: str = typer.Option(None, "--date", "-d", help="Expense date (default: today)"),
) -> None:
    """Add an expense."""
    add_command(description, amount, category, date)


@app.command(name="list")
def list_expenses(
    month: str = typer.Option(None, "--month", help="Only this month (YYYY-MM)"),
    limit: int = typer.Option(50, help="Maximum expenses to show"),
    all: bool = typer.Option(False, "--all", "-a", help="Show all your expenses"),
) -> None:
    """List your expenses."""
    list_command(month, limit, all)


@app.command()
def edit(
    expense_id: str,
    description: str = typer.Option(None, "--description", help="New description"),
    amount: float = typer.Option(None, "--amount", help="New amount"),
    category: str = typer.Option(None, "--category", "-c", help="New category"),
    date: str = typer.Option(None, "--date", "-d", help="New date"),
) -> None:
    """Edit an expense (id or unique id prefix)."""
    edit_command(expense_id, description, amount, category, date)


@app.command()
def delete(expense_id: str) -> None:
    """Delete an expense (id or unique id prefix)."""
    delete_command(expense_id)


@app.command()
def months() -> None:
    """List the months that have expenses."""
    months_command()


@app.command()
def report(
    month: str = typer.Option(None, "--month", help="Month to report on (YYYY-MM, default: current)"),
    currency: str = typer.Option(None, "--currency", help="Currency code (default: from config)"),
) -> None:
    """Show your monthly money snapshot."""
    report_command(month, currency)


@app.command()
def compare(
    month: str = typer.Option(None, "--month", help="Month to compare with the one before (YYYY-MM)"),
    currency: str = typer.Option(None, "--currency", help="Currency code (default: from config)"),
    explain: bool = typer.Option(False, "--explain", help="Explain which categories drove the change"),
) -> None:
    """Compare a month with the previous month."""
    compare_command(month, currency, explain)


@app.command()
def currency(code: str = typer.Argument(None, help="Currency code to use (e.g. EUR)")) -> None:
    """Show or set your display currency."""
    currency_command(code)


@app.command(name="import")
def import_(file_path: str) -> None:
    """Import expenses from a JSON or CSV file."""
    import_command(file_path)


@app.command()
def export(file_path: str) -> None:
    """Export your expenses to a JSON file."""
    export_command(file_path)


if __name__ == "__main__":
    app()
