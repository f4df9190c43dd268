"""Personal income tax: federal plus provincial bracket schedules."""

from decimal import Decimal
from typing import Any

from cantax.calculators.brackets import calculate_bracket_tax
from cantax.calculators.tax_data import (
    FEDERAL_PERSONAL_BRACKETS,
    PROVINCIAL_PERSONAL_BRACKETS,
)


def calculate_personal_tax(
    income: Decimal,
    tax_year: int,
    province: str,
) -> dict[str, Any]:
    """Calculate combined federal and provincial personal income tax.

    Each level is computed independently on the full income. Marginal rates
    are added together rather than recomputed from a blended schedule.

    Args:
        income: Taxable income (must be >= 0).
        tax_year: Supported tax year, e.g. 2025.
        province: Supported province code, e.g. "ON".

    Returns:
        Dict with total_tax, marginal_rate, effective_rate and a
        federal/provincial breakdown.
    """
    federal = calculate_bracket_tax(income, FEDERAL_PERSONAL_BRACKETS[tax_year])
    provincial = calculate_bracket_tax(
        income, PROVINCIAL_PERSONAL_BRACKETS[province][tax_year]
    )

    total_tax = federal.tax + provincial.tax
    marginal_rate = federal.marginal_rate + provincial.marginal_rate
    effective_rate = total_tax / income if income > 0 else Decimal("0")

    return {
        "type": "personal",
        "province": province,
        "tax_year": tax_year,
        "income": float(income),
        "total_tax": float(total_tax),
        "marginal_rate": float(marginal_rate),
        "effective_rate": float(effective_rate),
        "breakdown": {
            "federal_tax": float(federal.tax),
            "federal_marginal_rate": float(federal.marginal_rate),
            "provincial_tax": float(provincial.tax),
            "provincial_marginal_rate": float(provincial.marginal_rate),
        },
    }
