"""Thresholds and narrative message templates for the reports.

Message text is keyed by the branch it belongs to, so report logic only
decides *which* branch applies and tests can assert on the branch instead
of the wording.
"""

from enum import Enum

# Share of total spend held by the top category (0.0-1.0)
HIGH_SPENDING_THRESHOLD = 0.5
MEDIUM_SPENDING_THRESHOLD = 0.4
LOW_SPENDING_THRESHOLD = 0.3

# Month-over-month percent change
SAME_SPENDING_THRESHOLD = 5.0
MAJOR_CHANGE_THRESHOLD = 30.0
NOTABLE_CHANGE_THRESHOLD = 15.0


class SpendingLevel(Enum):
    """How dominant the top category is."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    BALANCED = "balanced"


class Verdict(Enum):
    """Month-over-month spending verdict."""

    SAME = "same"
    BIG_INCREASE = "big_increase"
    NOTABLE_INCREASE = "notable_increase"
    MODEST_INCREASE = "modest_increase"
    MAJOR_CUTBACK = "major_cutback"
    NICE_SAVINGS = "nice_savings"
    SMALL_SAVINGS = "small_savings"

    @property
    def is_increase(self) -> bool:
        return self in (Verdict.BIG_INCREASE, Verdict.NOTABLE_INCREASE, Verdict.MODEST_INCREASE)

    @property
    def is_decrease(self) -> bool:
        return self in (Verdict.MAJOR_CUTBACK, Verdict.NICE_SAVINGS, Verdict.SMALL_SAVINGS)


class TransactionTrend(Enum):
    """Transaction count relative to the previous month."""

    MORE = "more"
    FEWER = "fewer"
    SAME = "same"


SPENDING_MESSAGES: dict[SpendingLevel, str] = {
    SpendingLevel.HIGH: "Whoa! That's more than half your spending. Time to re-evaluate your priorities! 😅",
    SpendingLevel.MEDIUM: "Whoa! That's nearly half your spending. Might be worth keeping an eye on! 👀",
    SpendingLevel.LOW: "That's a significant chunk, but nothing too wild. 🎯",
    SpendingLevel.BALANCED: "Nice balance! You're spreading things out pretty well. ✨",
}

EMPTY_MONTH_MESSAGE = (
    "You didn't record any expenses for {month}. "
    "Either you're living like a hermit or you forgot to track! 🏝️"
)

MONTHLY_REPORT_HEADER = "📊 **{month} Money Snapshot**"
MONTHLY_SUMMARY_LINE = (
    "You spent a total of **{total}** across {count} transactions. That's an average of {daily} per day."
)
WHERE_IT_WENT_HEADER = "🎯 **Where It Went:**"
TOP_CATEGORY_LINE = "Your biggest spending category was **{category}** at **{amount}** ({percentage:.1f}% of your total)."
BREAKDOWN_HEADER = "📈 **Category Breakdown:**"
BREAKDOWN_LINE = "• {category}: {amount} ({percentage:.1f}%)"

NO_COMPARISON_DATA_MESSAGE = "No data for these months. Add some expenses to {selected} or {previous} first! 📭"

COMPARISON_HEADER = "📊 **Month Comparison: {selected} vs {previous}**"
NUMBERS_HEADER = "💰 **The Numbers:**"
NUMBERS_LINES = "This month: {selected}\nLast month: {previous}\nDifference: {difference}"
VERDICT_HEADER = "🎭 **The Verdict:**"
INCREASE_LINE = "You spent {percentage:.1f}% MORE than last month."
DECREASE_LINE = "You spent {percentage:.1f}% LESS than last month."
TRANSACTIONS_HEADER = "🧾 **Transactions:**"
TRANSACTIONS_LINES = "This month: {selected} expenses\nLast month: {previous} expenses"

VERDICT_MESSAGES: dict[Verdict, str] = {
    Verdict.SAME: "Pretty much the same as last month! Consistency is key. 📊",
    Verdict.BIG_INCREASE: "Whoa there, big spender! Did you buy a small island? 🏝️",
    Verdict.NOTABLE_INCREASE: "That's a notable bump. Might be worth a closer look. 👀",
    Verdict.MODEST_INCREASE: "A modest increase. Nothing to panic about. 🙂",
    Verdict.MAJOR_CUTBACK: "Are you living off ramen now? That's a major cutback! 🍜",
    Verdict.NICE_SAVINGS: "Nice savings! Your wallet thanks you. 💰",
    Verdict.SMALL_SAVINGS: "Small savings, but every bit counts! 🪙",
}

TRANSACTION_MESSAGES: dict[TransactionTrend, str] = {
    TransactionTrend.MORE: "More transactions this month. Lots of little purchases adding up? 🛒",
    TransactionTrend.FEWER: "Fewer transactions this month. Bigger but fewer purchases? 🤔",
    TransactionTrend.SAME: "Same number of transactions as last month. Creature of habit! 🔁",
}
