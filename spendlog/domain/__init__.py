"""Domain models and types for spendlog.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Aggregation and report wording separated from infrastructure
"""

from spendlog.domain.models import Category, Description, Expense, ExpenseId, Money, Month

__all__ = ["Money", "Month", "Category", "Description", "Expense", "ExpenseId"]
