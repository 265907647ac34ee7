"""Pure functions for creating, validating and editing expenses.

This module contains the functional core for expense records:
- No I/O operations (no database, no console, no files)
- No side effects beyond generating fresh ids
- Pure data transformations
- Easy to test

All monetary amounts are in minor units (Money type).
"""

import math
import uuid
from dataclasses import replace
from datetime import date
from typing import Any

from spendlog.domain.models import Category, Description, Expense, ExpenseId, Money

MAX_DESCRIPTION_LENGTH = 200
MIN_AMOUNT = 0.1
MAX_AMOUNT = 1_000_000_000


def to_minor_units(amount: float) -> Money:
    """Convert a major-unit amount (e.g. 12.50) to minor units (1250)."""
    return Money(round(amount * 100))


def from_minor_units(amount: Money) -> float:
    """Convert minor units back to a major-unit amount."""
    return amount / 100


def parse_category(name: str) -> Category:
    """Resolve a category by its label, case-insensitively.

    Args:
        name: Category label (e.g. "self care").

    Returns:
        Matching Category.

    Raises:
        ValueError: If no category has that label.
    """
    wanted = " ".join(name.split()).lower()
    for category in Category:
        if category.value.lower() == wanted:
            return category
    raise ValueError(f"Unknown category '{name}'")


def validate_expense(description: str, amount: float, category: str) -> str | None:
    """Check user input for a new or edited expense.

    Args:
        description: Free-text description.
        amount: Amount in major units.
        category: Category label.

    Returns:
        Error message, or None when the input is valid.
    """
    if not description.strip():
        return "Description is required"
    if len(description) > MAX_DESCRIPTION_LENGTH:
        return f"Description must be less than {MAX_DESCRIPTION_LENGTH} characters"
    if not math.isfinite(amount):
        return "Amount must be a number"
    if amount < MIN_AMOUNT:
        return f"Amount must be at least {MIN_AMOUNT}"
    if amount > MAX_AMOUNT:
        return "Amount is too large"
    try:
        parse_category(category)
    except ValueError:
        return f"Unknown category '{category}'"
    return None


def create_expense(
    description: str,
    amount: Money,
    day: date,
    category: Category,
    expense_id: str | None = None,
) -> Expense:
    """Build a new expense, generating an id when none is given."""
    return Expense(
        id=ExpenseId(expense_id or str(uuid.uuid4())),
        amount=amount,
        date=day,
        category=category,
        description=Description(description.strip()),
    )


def update_expense(expense: Expense, expenses: list[Expense]) -> list[Expense]:
    """Replace the expense with the same id."""
    return [expense if e.id == expense.id else e for e in expenses]


def delete_expense(expense_id: str, expenses: list[Expense]) -> list[Expense]:
    """Drop the expense with the given id."""
    return [e for e in expenses if e.id != expense_id]


def edit_expense(
    expense: Expense,
    description: str | None = None,
    amount: Money | None = None,
    day: date | None = None,
    category: Category | None = None,
) -> Expense:
    """Copy of an expense with the given fields changed."""
    changes: dict[str, Any] = {}
    if description is not None:
        changes["description"] = Description(description.strip())
    if amount is not None:
        changes["amount"] = amount
    if day is not None:
        changes["date"] = day
    if category is not None:
        changes["category"] = category
    return replace(expense, **changes)


def expense_from_row(row: dict[str, Any]) -> Expense:
    """Build an expense from a store row (ISO date, amount in minor units)."""
    return Expense(
        id=ExpenseId(row["id"]),
        amount=Money(int(row["amount"])),
        date=date.fromisoformat(row["date"]),
        category=parse_category(row["category"]),
        description=Description(row["description"]),
    )


def expense_to_row(expense: Expense) -> dict[str, Any]:
    """Flatten an expense for storage or export."""
    return {
        "id": expense.id,
        "date": expense.date.isoformat(),
        "description": expense.description,
        "amount": expense.amount,
        "category": expense.category.value,
    }
