"""Pure functions for the monthly snapshot report.

This module contains the functional core for reporting on a single month:
- No I/O operations (no database, no console, no files)
- No side effects
- Pure data transformations
- Easy to test

The report is plain text with literal **bold** markers; callers display it
verbatim.
"""

from spendlog.currency import format_currency
from spendlog.dates import format_month_label
from spendlog.domain.aggregate import MonthlySummary, filter_by_month, generate_report_insights_data
from spendlog.domain.messages import (
    BREAKDOWN_HEADER,
    BREAKDOWN_LINE,
    EMPTY_MONTH_MESSAGE,
    HIGH_SPENDING_THRESHOLD,
    LOW_SPENDING_THRESHOLD,
    MEDIUM_SPENDING_THRESHOLD,
    MONTHLY_REPORT_HEADER,
    MONTHLY_SUMMARY_LINE,
    SPENDING_MESSAGES,
    TOP_CATEGORY_LINE,
    WHERE_IT_WENT_HEADER,
    SpendingLevel,
)
from spendlog.domain.models import Expense, Month


def classify_spending_share(fraction: float) -> SpendingLevel:
    """Pick the commentary branch for the top category's share.

    Args:
        fraction: Top category amount divided by total (0.0-1.0).

    Returns:
        First level whose threshold is strictly exceeded, checked from high
        to low; BALANCED otherwise.
    """
    if fraction > HIGH_SPENDING_THRESHOLD:
        return SpendingLevel.HIGH
    elif fraction > MEDIUM_SPENDING_THRESHOLD:
        return SpendingLevel.MEDIUM
    elif fraction > LOW_SPENDING_THRESHOLD:
        return SpendingLevel.LOW
    else:
        return SpendingLevel.BALANCED


def render_empty_month(month: Month) -> str:
    """Message for a month without any expenses."""
    return EMPTY_MONTH_MESSAGE.format(month=format_month_label(month))


def render_monthly_report(summary: MonthlySummary, month: Month, currency_code: str) -> str:
    """Render a month's summary as narrative text.

    Args:
        summary: Statistics for the month.
        month: Month the summary covers.
        currency_code: ISO currency code for amounts.

    Returns:
        Multi-section report text.
    """
    if summary.transaction_count == 0:
        return render_empty_month(month)

    top = summary.top_category
    top_percentage = summary.percentage_of(top.category)
    level = classify_spending_share(top_percentage / 100)

    header = MONTHLY_REPORT_HEADER.format(month=format_month_label(month))
    overview = MONTHLY_SUMMARY_LINE.format(
        total=format_currency(summary.total, currency_code),
        count=summary.transaction_count,
        daily=format_currency(summary.daily_average, currency_code),
    )
    where = "\n".join(
        [
            WHERE_IT_WENT_HEADER,
            TOP_CATEGORY_LINE.format(
                category=top.category.value,
                amount=format_currency(top.amount, currency_code),
                percentage=top_percentage,
            )
            + " "
            + SPENDING_MESSAGES[level],
        ]
    )
    breakdown = "\n".join(
        [BREAKDOWN_HEADER]
        + [
            BREAKDOWN_LINE.format(
                category=stats.category.value,
                amount=format_currency(stats.amount, currency_code),
                percentage=stats.percentage,
            )
            for stats in summary.category_percentages
        ]
    )

    return "\n\n".join([header, overview, where, breakdown])


def generate_monthly_report(expenses: list[Expense], month: Month, currency_code: str) -> str:
    """Generate the monthly snapshot report.

    Args:
        expenses: All known expenses; only those in the month are used.
        month: Month in YYYY-MM format.
        currency_code: ISO currency code for amounts.

    Returns:
        Report text, or the empty-month message when nothing was recorded.
    """
    month_expenses = filter_by_month(expenses, month)
    if not month_expenses:
        return render_empty_month(month)

    summary = generate_report_insights_data(month_expenses, month)
    return render_monthly_report(summary, month, currency_code)
