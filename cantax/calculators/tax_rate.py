"""Tax-rate tool: validates a request and returns a formatted result.

This is the entry boundary for the calculators: bad input comes back as a
``{"success": False, "error": ...}`` dict the agent can relay to the user,
never as an exception.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any

from cantax.calculators.corporate_tax import calculate_corporate_tax
from cantax.calculators.formatting import decorate_result
from cantax.calculators.personal_tax import calculate_personal_tax
from cantax.calculators.tax_data import (
    PROVINCE_CODES,
    SUPPORTED_PROVINCES,
    SUPPORTED_TAX_YEARS,
)
from config.settings import settings

logger = logging.getLogger(__name__)

TAX_TYPES: tuple[str, ...] = ("personal", "corporate")

# Largest income the calculators accept; keeps formatting within Decimal precision.
MAX_INCOME = Decimal("1e15")

_PROVINCE_NAMES = {name.lower(): code for code, name in PROVINCE_CODES.items()}


def normalize_province(province: str) -> str | None:
    """Map a province code or name to its two-letter code.

    Matching is case-insensitive: "ON", "on" and "Ontario" all map to "ON".
    Returns None when the value is not a Canadian province or territory.
    """
    key = province.strip()
    if key.upper() in PROVINCE_CODES:
        return key.upper()
    return _PROVINCE_NAMES.get(key.lower())


def parse_income(income_amount: Any) -> Decimal | None:
    """Convert an income amount to Decimal, or None if it is not usable.

    Accepts ints, floats, Decimals and numeric strings. Booleans, NaN,
    infinities, negative values and amounts above MAX_INCOME are rejected.
    Negative zero is returned as zero.
    """
    if isinstance(income_amount, bool):
        return None
    try:
        income = Decimal(str(income_amount).strip())
    except (InvalidOperation, ValueError):
        return None
    if not income.is_finite() or income < 0 or income > MAX_INCOME:
        return None
    return abs(income)


def _failure(error: str, **supported: Any) -> dict[str, Any]:
    logger.warning("Rejected tax rate request: %s", error)
    return {"success": False, "error": error, **supported}


def get_tax_rate(
    type: str,
    income_amount: Any,
    province: str | None = None,
    tax_year: int | None = None,
) -> dict[str, Any]:
    """Calculate personal or corporate tax for a province and tax year.

    Args:
        type: "personal" (federal + provincial brackets) or "corporate"
            (small business vs general rate).
        income_amount: Income in CAD (must be a finite number >= 0).
        province: Province code or name. Defaults to the configured province.
        tax_year: Tax year, e.g. 2025. Defaults to the configured year.

    Returns:
        The calculator result with ``*_formatted`` string fields and
        ``success: True``, or ``{"success": False, "error": ...}`` listing
        the supported values.
    """
    if type not in TAX_TYPES:
        return _failure(
            f"Unsupported tax type: {type}. Must be one of: {', '.join(TAX_TYPES)}",
            supported_types=list(TAX_TYPES),
        )

    requested = province if province is not None else settings.default_province
    code = normalize_province(str(requested))
    if code is None:
        return _failure(
            f"Unknown province or territory: {requested}. "
            f"Supported: {', '.join(SUPPORTED_PROVINCES)}",
            supported_provinces=list(SUPPORTED_PROVINCES),
        )
    if code not in SUPPORTED_PROVINCES:
        return _failure(
            f"Tax rates for {PROVINCE_CODES[code]} ({code}) are not available yet. "
            f"Supported: {', '.join(SUPPORTED_PROVINCES)}",
            supported_provinces=list(SUPPORTED_PROVINCES),
        )

    year = tax_year if tax_year is not None else settings.default_tax_year
    if isinstance(year, str) and year.strip().isdigit():
        year = int(year)
    elif isinstance(year, float) and year.is_integer():
        year = int(year)
    if isinstance(year, bool) or year not in SUPPORTED_TAX_YEARS:
        return _failure(
            f"Unsupported tax year: {year}. "
            f"Available: {', '.join(str(y) for y in SUPPORTED_TAX_YEARS)}",
            supported_tax_years=list(SUPPORTED_TAX_YEARS),
        )

    income = parse_income(income_amount)
    if income is None:
        return _failure(
            f"Invalid income amount: {income_amount}. "
            f"Income must be a non-negative number no greater than {MAX_INCOME:,.0f}."
        )

    logger.info("Calculating %s tax province=%s year=%s", type, code, year)
    if type == "personal":
        result = calculate_personal_tax(income, year, code)
    else:
        result = calculate_corporate_tax(income, year, code)

    return {"success": True, **decorate_result(result)}
