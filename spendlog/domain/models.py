"""Domain type definitions for spendlog.

These NewTypes provide semantic clarity and help with type checking:
- Money: Amount in minor units (cents, pence, piastres)
- Month: Month in YYYY-MM format
- ExpenseId: Unique identifier of an expense
- Description: Free-text expense description

Category is a closed enumeration; Expense is the immutable record
everything else is computed from.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import NewType

# Money amounts are stored as minor units to avoid floating point errors
Money = NewType("Money", int)

# Month is always in YYYY-MM format (e.g., "2025-01")
Month = NewType("Month", str)

ExpenseId = NewType("ExpenseId", str)

# Expense description text
Description = NewType("Description", str)


class Category(str, Enum):
    """Expense categories.

    OTHER doubles as the fallback when a month has no data.
    """

    FOOD = "Food"
    TRANSPORT = "Transport"
    UTILITIES = "Utilities"
    ENTERTAINMENT = "Entertainment"
    HEALTH = "Health"
    WEARABLES = "Wearables"
    TRAVEL = "Travel"
    SUBSCRIPTIONS = "Subscriptions"
    SELF_CARE = "Self Care"
    GIFTS = "Gifts"
    MEDICAL = "Medical"
    EDUCATION = "Education"
    INSTALLMENTS = "Installments"
    DEBT_PAYMENT = "Debt Payment"
    WITHDRAWALS = "Withdrawals"
    BILLS = "Bills"
    DONATIONS = "Donations"
    BANK_FEES = "Bank Fees"
    FEES = "Fees"
    INVESTMENTS = "Investments"
    SAVINGS = "Savings"
    LOANS = "Loans"
    TAXES = "Taxes"
    INSURANCE = "Insurance"
    TRANSFERS = "Transfers"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Expense:
    """Immutable expense record."""

    id: ExpenseId
    amount: Money
    date: date
    category: Category
    description: Description
