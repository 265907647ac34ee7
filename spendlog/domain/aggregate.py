"""Pure functions for monthly aggregation.

This module contains the functional core for summarising expenses:
- No I/O operations (no database, no console, no files)
- No side effects
- Pure data transformations
- Easy to test

All monetary amounts are in minor units (Money type). Values produced by
division (percentages, daily average) are floats.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from spendlog.dates import days_in_month, end_of_month, format_month_key, start_of_month
from spendlog.domain.models import Category, Expense, Money, Month


@dataclass(frozen=True)
class TopCategory:
    """Category with the highest spend."""

    category: Category
    amount: Money


@dataclass(frozen=True)
class CategoryStats:
    """Spend of one category and its share of the month."""

    category: Category
    amount: Money
    percentage: float


@dataclass(frozen=True)
class MonthlySummary:
    """Immutable statistics for one month of expenses."""

    total: Money
    category_totals: dict[Category, Money]
    category_percentages: list[CategoryStats]
    top_category: TopCategory
    daily_average: float
    transaction_count: int

    def percentage_of(self, category: Category) -> float:
        """Share of the month held by a category, 0 when absent."""
        for stats in self.category_percentages:
            if stats.category == category:
                return stats.percentage
        return 0.0


def filter_by_month(expenses: Iterable[Expense], month: Month) -> list[Expense]:
    """Keep expenses dated within the calendar month (inclusive bounds).

    Args:
        expenses: Expenses in any order.
        month: Month in YYYY-MM format.

    Returns:
        Matching expenses in their original order (possibly empty).
    """
    start = start_of_month(month)
    end = end_of_month(month)
    return [exp for exp in expenses if start <= exp.date <= end]


def sum_amounts(expenses: Iterable[Expense]) -> Money:
    """Total amount of the expenses, 0 for none."""
    return Money(sum(exp.amount for exp in expenses))


# The expense table footer and the reports share the same total.
total_amount = sum_amounts


def group_by_category(expenses: Iterable[Expense]) -> dict[Category, Money]:
    """Sum amounts per category.

    Only categories that occur in the input appear, in order of first
    appearance.
    """
    totals: dict[Category, Money] = {}
    for exp in expenses:
        totals[exp.category] = Money(totals.get(exp.category, 0) + exp.amount)
    return totals


def percentages_of(category_totals: dict[Category, Money], total: Money) -> list[CategoryStats]:
    """Share of the total for each category.

    Args:
        category_totals: Amount per category.
        total: Total of the month.

    Returns:
        CategoryStats sorted by descending amount; ties keep insertion order.
        Every percentage is 0 when total is 0.
    """
    stats = [
        CategoryStats(
            category=category,
            amount=amount,
            percentage=(amount / total) * 100 if total else 0.0,
        )
        for category, amount in category_totals.items()
    ]
    return sorted(stats, key=lambda s: s.amount, reverse=True)


def top_category(category_totals: dict[Category, Money]) -> TopCategory:
    """Category with the highest amount.

    The first category inserted wins a tie. With no data, falls back to
    Other with 0.
    """
    if not category_totals:
        return TopCategory(category=Category.OTHER, amount=Money(0))

    category, amount = max(category_totals.items(), key=lambda item: item[1])
    return TopCategory(category=category, amount=amount)


def daily_average(total: Money, month: Month) -> float:
    """Average spend per calendar day of the month."""
    return total / days_in_month(month)


def generate_report_insights_data(expenses: list[Expense], month: Month) -> MonthlySummary:
    """Build the full summary for a month's already-filtered expenses.

    Args:
        expenses: Expenses of a single month.
        month: Month the expenses belong to.

    Returns:
        MonthlySummary with all statistics.
    """
    total = sum_amounts(expenses)
    category_totals = group_by_category(expenses)

    return MonthlySummary(
        total=total,
        category_totals=category_totals,
        category_percentages=percentages_of(category_totals, total),
        top_category=top_category(category_totals),
        daily_average=daily_average(total, month),
        transaction_count=len(expenses),
    )


def available_months(expenses: Iterable[Expense]) -> list[Month]:
    """Distinct month keys that have expenses, newest first."""
    return sorted({format_month_key(exp.date) for exp in expenses}, reverse=True)
