"""Admin commands for init, backup and settings."""

import shutil
import sqlite3
import sys
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.table import Table

from spendlog.config import create_default_config, get_config_path, get_display_currency, set_currency
from spendlog.currency import CURRENCIES
from spendlog.store.schema import get_db_path, init_database

console = Console()


def backup_command(
    output_dir: str | None = None,
) -> None:
    """Backup database and configuration files."""
    db_path = get_db_path()
    config_path = get_config_path()

    if not db_path.exists():
        console.print("[red]Database not found. Run 'spendlog init' first.[/red]", style="bold")
        sys.exit(1)

    if output_dir:
        backup_dir = Path(output_dir).expanduser()
    else:
        backup_dir = Path.home() / ".spendlog" / "backups"

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    db_backup = backup_dir / f"spendlog_{timestamp}.db"
    config_backup = backup_dir / f"config_{timestamp}.toml"

    try:
        backup_dir.mkdir(parents=True, exist_ok=True)

        shutil.copy2(db_path, db_backup)
        console.print(f"[green]✓[/green] Database backed up to: {db_backup}")

        if config_path.exists():
            shutil.copy2(config_path, config_backup)
            console.print(f"[green]✓[/green] Config backed up to: {config_backup}")

        console.print("\n[green]Backup complete![/green]", style="bold")
        console.print(f"[dim]Backup directory: {backup_dir}[/dim]")

    except OSError as e:
        console.print(f"[red]Backup failed: {e}[/red]", style="bold")
        sys.exit(1)


def init_command(force: bool = False) -> None:
    """Initialize spendlog database and configuration."""
    db_path = get_db_path()
    config_path = get_config_path()

    db_exists = db_path.exists()
    config_exists = config_path.exists()

    try:
        if db_exists and not force:
            # Existing database: only bring the schema up to date
            console.print(f"[cyan]Running migrations on {db_path}...[/cyan]")
            init_database(db_path)
            console.print("[green]✓[/green] Database schema is up to date")
        else:
            if db_exists:
                db_path.unlink()
            console.print(f"[cyan]Initializing database at {db_path}...[/cyan]")
            init_database(db_path)
            console.print("[green]✓[/green] Database initialized")

        if force or not config_exists:
            console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
            create_default_config(config_path)
            console.print("[green]✓[/green] Config file created (permissions: 600)")

        console.print("\n[green]Initialization complete![/green]", style="bold")
        console.print(f"[dim]Database: {db_path}[/dim]")
        console.print(f"[dim]Config: {config_path}[/dim]")

    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)


def currency_command(code: str | None = None) -> None:
    """Show or set the display currency."""
    try:
        if code is None:
            current = get_display_currency()
            table = Table(title="Currencies")
            table.add_column("Code", style="cyan")
            table.add_column("Symbol", justify="center")
            table.add_column("Name")
            for currency in CURRENCIES.values():
                marker = " [green]✓[/green]" if currency.code == current else ""
                table.add_row(f"{currency.code}{marker}", currency.symbol, currency.name)
            console.print(table)
            return

        saved = set_currency(code)
    except ValueError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Currency set to {saved} ({CURRENCIES[saved].symbol})")
