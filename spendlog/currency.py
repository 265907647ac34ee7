"""Currency table and display formatting.

Amounts arrive in minor units; the formatter's output is a display string
only and is never parsed back.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Currency:
    """Supported display currency."""

    code: str
    symbol: str
    name: str


CURRENCIES: dict[str, Currency] = {
    c.code: c
    for c in (
        Currency("EGP", "E£", "Egyptian Pound"),
        Currency("USD", "$", "US Dollar"),
        Currency("EUR", "€", "Euro"),
        Currency("GBP", "£", "British Pound"),
        Currency("JPY", "¥", "Japanese Yen"),
        Currency("CAD", "C$", "Canadian Dollar"),
        Currency("AUD", "A$", "Australian Dollar"),
        Currency("CHF", "CHF", "Swiss Franc"),
        Currency("INR", "₹", "Indian Rupee"),
    )
}

DEFAULT_CURRENCY = "USD"


def get_currency(code: str) -> Currency:
    """Look up a currency by ISO code (case-insensitive).

    Raises:
        ValueError: If the code is not supported.
    """
    currency = CURRENCIES.get(code.upper())
    if currency is None:
        supported = ", ".join(CURRENCIES)
        raise ValueError(f"Unsupported currency '{code}' (supported: {supported})")
    return currency


def currency_prefix(code: str) -> str:
    """Symbol to put in front of amounts, falling back to the code itself."""
    currency = CURRENCIES.get(code.upper())
    if currency is None:
        return f"{code} "
    return currency.symbol


def format_currency(amount: float, code: str = DEFAULT_CURRENCY) -> str:
    """Format an amount in minor units for display.

    Whole amounts drop their decimals: 22000 -> "$220", 387 -> "$3.87",
    -5000 -> "-$50".

    Args:
        amount: Amount in minor units (may be fractional, e.g. a daily average).
        code: ISO currency code.

    Returns:
        Display string.
    """
    major = round(abs(amount) / 100, 2)
    text = f"{major:,.2f}"
    if text.endswith(".00"):
        text = text[:-3]
    sign = "-" if amount < 0 and text != "0" else ""
    return f"{sign}{currency_prefix(code)}{text}"
