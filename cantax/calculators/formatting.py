"""Presentation helpers for calculator output (en-CA dollars and percentages)."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

_CENTS = Decimal("0.01")

# Money fields that get a "<name>_formatted" sibling; "*_rate" keys are
# always treated as percentages.
_CURRENCY_FIELDS = frozenset({
    "income",
    "total_tax",
    "tax_payable",
    "business_limit",
    "federal_tax",
    "provincial_tax",
})


def format_currency(amount: float | Decimal) -> str:
    """Render an amount as Canadian dollars, e.g. 1000 -> "$1,000.00"."""
    value = Decimal(str(amount)).quantize(_CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_percent(rate: float | Decimal) -> str:
    """Render a 0-1 fraction as a percentage, e.g. 0.122 -> "12.20%"."""
    value = (Decimal(str(rate)) * 100).quantize(_CENTS, rounding=ROUND_HALF_UP)
    return f"{value:.2f}%"


def decorate_result(result: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of a calculator result with formatted string fields.

    Every money field and every ``*_rate`` field gets a ``*_formatted``
    sibling placed right after it. Nested dicts (the breakdown) are
    decorated the same way. The numeric values are left untouched.
    """
    decorated: dict[str, Any] = {}
    for key, value in result.items():
        if isinstance(value, dict):
            decorated[key] = decorate_result(value)
            continue

        decorated[key] = value
        if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
            continue
        if key.endswith("_rate"):
            decorated[f"{key}_formatted"] = format_percent(value)
        elif key in _CURRENCY_FIELDS:
            decorated[f"{key}_formatted"] = format_currency(value)

    return decorated
