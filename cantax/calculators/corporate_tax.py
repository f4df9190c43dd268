"""Corporate income tax: small business vs general flat rates."""

from decimal import Decimal
from typing import Any

from cantax.calculators.formatting import format_currency
from cantax.calculators.tax_data import (
    FEDERAL_CORPORATE_RATES,
    PROVINCIAL_CORPORATE_RATES,
)

SMALL_BUSINESS = "small_business"
GENERAL = "general"


def calculate_corporate_tax(
    income: Decimal,
    tax_year: int,
    province: str,
) -> dict[str, Any]:
    """Calculate combined federal and provincial corporate tax.

    The provincial business limit picks the regime: income at or below the
    limit gets the small business rate, anything above gets the general rate.
    The chosen rate applies to the whole income, not just the excess over
    the limit.

    Args:
        income: Active business income (must be >= 0).
        tax_year: Supported tax year, e.g. 2025.
        province: Supported province code, e.g. "ON".

    Returns:
        Dict with regime, federal/provincial/combined rates, tax_payable and
        a federal/provincial breakdown.
    """
    federal_rates = FEDERAL_CORPORATE_RATES[tax_year]
    provincial_rates = PROVINCIAL_CORPORATE_RATES[province][tax_year]
    business_limit = provincial_rates.business_limit

    if income <= business_limit:
        regime = SMALL_BUSINESS
        federal_rate = federal_rates.small_business
        provincial_rate = provincial_rates.small_business
        description = (
            "Small Business Deduction applies "
            f"(income ≤ {format_currency(business_limit)} business limit)"
        )
    else:
        regime = GENERAL
        federal_rate = federal_rates.general
        provincial_rate = provincial_rates.general
        description = (
            "General corporate rate applies "
            f"(income > {format_currency(business_limit)} business limit)"
        )

    combined_rate = federal_rate + provincial_rate
    federal_tax = income * federal_rate
    provincial_tax = income * provincial_rate

    return {
        "type": "corporate",
        "province": province,
        "tax_year": tax_year,
        "income": float(income),
        "regime": regime,
        "regime_description": description,
        "federal_rate": float(federal_rate),
        "provincial_rate": float(provincial_rate),
        "combined_rate": float(combined_rate),
        "tax_payable": float(income * combined_rate),
        "business_limit": float(business_limit),
        "breakdown": {
            "federal_tax": float(federal_tax),
            "provincial_tax": float(provincial_tax),
        },
    }
