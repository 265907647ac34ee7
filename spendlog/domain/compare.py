"""Pure functions for comparing a month with the one before it.

This module contains the functional core for month-over-month reports:
- No I/O operations (no database, no console, no files)
- No side effects
- Pure data transformations
- Easy to test

All monetary amounts are in minor units (Money type).
"""

from dataclasses import dataclass

from spendlog.currency import format_currency
from spendlog.dates import format_month_label, previous_month_key
from spendlog.domain.aggregate import filter_by_month, group_by_category, sum_amounts
from spendlog.domain.messages import (
    COMPARISON_HEADER,
    DECREASE_LINE,
    INCREASE_LINE,
    MAJOR_CHANGE_THRESHOLD,
    NO_COMPARISON_DATA_MESSAGE,
    NOTABLE_CHANGE_THRESHOLD,
    NUMBERS_HEADER,
    NUMBERS_LINES,
    SAME_SPENDING_THRESHOLD,
    TRANSACTION_MESSAGES,
    TRANSACTIONS_HEADER,
    TRANSACTIONS_LINES,
    VERDICT_HEADER,
    VERDICT_MESSAGES,
    TransactionTrend,
    Verdict,
)
from spendlog.domain.models import Category, Expense, Money, Month


@dataclass(frozen=True)
class ComparisonResult:
    """Immutable totals of a month and the month before it."""

    selected_total: Money
    previous_total: Money
    difference: Money
    percent_change: float
    selected_transactions: int
    previous_transactions: int


@dataclass(frozen=True)
class ExplanationItem:
    """One bullet of a comparison explanation."""

    id: str
    text: str
    kind: str
    importance: str


def calculate_percent_change(difference: Money, previous_total: Money) -> float:
    """Percent change relative to the previous total.

    A previous total of 0 gives 0 rather than an infinite change.
    """
    if previous_total == 0:
        return 0.0
    return (difference / previous_total) * 100


def generate_month_comparison_data(expenses: list[Expense], month: Month) -> ComparisonResult:
    """Compute totals for a month and the calendar month before it.

    Args:
        expenses: All known expenses.
        month: Selected month in YYYY-MM format.

    Returns:
        ComparisonResult for selected vs previous month.
    """
    selected = filter_by_month(expenses, month)
    previous = filter_by_month(expenses, previous_month_key(month))

    selected_total = sum_amounts(selected)
    previous_total = sum_amounts(previous)
    difference = Money(selected_total - previous_total)

    return ComparisonResult(
        selected_total=selected_total,
        previous_total=previous_total,
        difference=difference,
        percent_change=calculate_percent_change(difference, previous_total),
        selected_transactions=len(selected),
        previous_transactions=len(previous),
    )


def classify_change(percent_change: float, difference: Money) -> Verdict:
    """Pick the verdict branch for a month-over-month change.

    Small changes in either direction count as the same; only then does
    the sign of the difference decide between increase and decrease.
    """
    magnitude = abs(percent_change)

    if magnitude < SAME_SPENDING_THRESHOLD:
        return Verdict.SAME

    if difference > 0:
        if magnitude > MAJOR_CHANGE_THRESHOLD:
            return Verdict.BIG_INCREASE
        elif magnitude > NOTABLE_CHANGE_THRESHOLD:
            return Verdict.NOTABLE_INCREASE
        return Verdict.MODEST_INCREASE

    if magnitude > MAJOR_CHANGE_THRESHOLD:
        return Verdict.MAJOR_CUTBACK
    elif magnitude > NOTABLE_CHANGE_THRESHOLD:
        return Verdict.NICE_SAVINGS
    return Verdict.SMALL_SAVINGS


def classify_transactions(selected: int, previous: int) -> TransactionTrend:
    """Compare transaction counts of the two months."""
    if selected > previous:
        return TransactionTrend.MORE
    elif selected < previous:
        return TransactionTrend.FEWER
    return TransactionTrend.SAME


def format_signed_difference(difference: Money, currency_code: str) -> str:
    """Difference with an explicit + for non-negative values."""
    formatted = format_currency(difference, currency_code)
    return f"+{formatted}" if difference >= 0 else formatted


def render_verdict(data: ComparisonResult) -> str:
    """Verdict sentence(s) for the comparison."""
    verdict = classify_change(data.percent_change, data.difference)
    message = VERDICT_MESSAGES[verdict]

    if verdict.is_increase:
        return f"{INCREASE_LINE.format(percentage=abs(data.percent_change))} {message}"
    if verdict.is_decrease:
        return f"{DECREASE_LINE.format(percentage=abs(data.percent_change))} {message}"
    return message


def generate_month_comparison_report(data: ComparisonResult, month: Month, currency_code: str) -> str:
    """Render comparison data as narrative text.

    Args:
        data: Totals for selected and previous month.
        month: Selected month in YYYY-MM format.
        currency_code: ISO currency code for amounts.

    Returns:
        Report text, or the no-data message when both months are empty.
    """
    selected_label = format_month_label(month)
    previous_label = format_month_label(previous_month_key(month))

    if data.selected_total == 0 and data.previous_total == 0:
        return NO_COMPARISON_DATA_MESSAGE.format(selected=selected_label, previous=previous_label)

    header = COMPARISON_HEADER.format(selected=selected_label, previous=previous_label)
    numbers = "\n".join(
        [
            NUMBERS_HEADER,
            NUMBERS_LINES.format(
                selected=format_currency(data.selected_total, currency_code),
                previous=format_currency(data.previous_total, currency_code),
                difference=format_signed_difference(data.difference, currency_code),
            ),
        ]
    )
    verdict = "\n".join([VERDICT_HEADER, render_verdict(data)])
    trend = classify_transactions(data.selected_transactions, data.previous_transactions)
    transactions = "\n".join(
        [
            TRANSACTIONS_HEADER,
            TRANSACTIONS_LINES.format(selected=data.selected_transactions, previous=data.previous_transactions),
            TRANSACTION_MESSAGES[trend],
        ]
    )

    return "\n\n".join([header, numbers, verdict, transactions])


def generate_month_comparison(expenses: list[Expense], month: Month, currency_code: str) -> str:
    """Generate the comparison report for a month vs the previous month."""
    data = generate_month_comparison_data(expenses, month)
    return generate_month_comparison_report(data, month, currency_code)


def category_changes(
    selected: dict[Category, Money],
    previous: dict[Category, Money],
) -> dict[Category, Money]:
    """Per-category change from the previous month.

    Covers every category present in either month; selected-month categories
    come first.
    """
    categories = list(selected) + [cat for cat in previous if cat not in selected]
    return {cat: Money(selected.get(cat, 0) - previous.get(cat, 0)) for cat in categories}


def biggest_contributor(changes: dict[Category, Money]) -> Category:
    """Category with the largest increase, Other when nothing increased."""
    best_category, best_change = Category.OTHER, 0
    for category, change in changes.items():
        if change > best_change:
            best_category, best_change = category, change
    return best_category


def explain_comparison(
    data: ComparisonResult,
    changes: dict[Category, Money],
    currency_code: str,
) -> list[ExplanationItem]:
    """Break a comparison down into explanation bullets.

    Args:
        data: Month totals.
        changes: Per-category change (see category_changes).
        currency_code: ISO currency code for amounts.

    Returns:
        Explanation items, most important first.
    """
    if data.difference > 0:
        direction = "increased"
    elif data.difference < 0:
        direction = "decreased"
    else:
        direction = "stayed the same"

    if data.difference:
        total_text = (
            f"Your spending {direction} by {format_currency(abs(data.difference), currency_code)} "
            f"({data.percent_change:.2f}%)"
        )
    else:
        total_text = f"Your spending {direction}"

    items = [ExplanationItem(id="total-change", text=total_text, kind="pattern", importance="high")]

    if data.difference > 0:
        contributor = biggest_contributor(changes)
        if changes.get(contributor, 0) > 0:
            items.append(
                ExplanationItem(
                    id="biggest-contributor",
                    text=f"{contributor.value} contributed the most to this increase",
                    kind="pattern",
                    importance="medium",
                )
            )

    decreased = [cat.value for cat, change in changes.items() if change < 0]
    increased = [cat.value for cat, change in changes.items() if change > 0]

    if decreased:
        items.append(
            ExplanationItem(
                id="decreased-categories",
                text=f"You spent less on {', '.join(decreased)}",
                kind="pattern",
                importance="medium",
            )
        )

    if increased:
        items.append(
            ExplanationItem(
                id="increased-categories",
                text=f"You spent more on {', '.join(increased)}",
                kind="pattern",
                importance="medium",
            )
        )

    return items


def generate_comparison_explanation(
    expenses: list[Expense],
    month: Month,
    currency_code: str,
) -> list[ExplanationItem]:
    """Explanation bullets for a month vs the previous month."""
    selected = group_by_category(filter_by_month(expenses, month))
    previous = group_by_category(filter_by_month(expenses, previous_month_key(month)))
    data = generate_month_comparison_data(expenses, month)
    return explain_comparison(data, category_changes(selected, previous), currency_code)
