"""Canadian tax constants — personal brackets and corporate rates.

Hardcoded Python constants, keyed by calendar tax year. Only federal and
Ontario schedules are populated; other provinces are recognised by code but
have no tables yet.

Sources:
- Federal/provincial personal rates: canada.ca, "Canadian income tax rates
  for individuals - current and previous years".
- Corporate rates: canada.ca, "Corporation tax rates".
"""

from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType
from typing import NamedTuple


class TaxBracket(NamedTuple):
    """A single income tax bracket."""

    lower: Decimal  # income above this is taxed in the bracket
    upper: Decimal | None  # inclusive; None = no cap
    rate: Decimal


class CorporateRates(NamedTuple):
    """Flat corporate rates for one jurisdiction and tax year."""

    general: Decimal
    small_business: Decimal
    business_limit: Decimal


FEDERAL_PERSONAL_BRACKETS: Mapping[int, tuple[TaxBracket, ...]] = MappingProxyType({
    # 14.5% lowest rate for 2025 (blended: 15% Jan-Jun, 14% Jul-Dec)
    2025: (
        TaxBracket(Decimal("0"), Decimal("57375"), Decimal("0.145")),
        TaxBracket(Decimal("57375"), Decimal("114750"), Decimal("0.205")),
        TaxBracket(Decimal("114750"), Decimal("177882"), Decimal("0.26")),
        TaxBracket(Decimal("177882"), Decimal("253414"), Decimal("0.29")),
        TaxBracket(Decimal("253414"), None, Decimal("0.33")),
    ),
    2026: (
        TaxBracket(Decimal("0"), Decimal("58523"), Decimal("0.14")),
        TaxBracket(Decimal("58523"), Decimal("117045"), Decimal("0.205")),
        TaxBracket(Decimal("117045"), Decimal("181440"), Decimal("0.26")),
        TaxBracket(Decimal("181440"), Decimal("258482"), Decimal("0.29")),
        TaxBracket(Decimal("258482"), None, Decimal("0.33")),
    ),
})

ONTARIO_PERSONAL_BRACKETS: Mapping[int, tuple[TaxBracket, ...]] = MappingProxyType({
    2025: (
        TaxBracket(Decimal("0"), Decimal("52886"), Decimal("0.0505")),
        TaxBracket(Decimal("52886"), Decimal("105775"), Decimal("0.0915")),
        TaxBracket(Decimal("105775"), Decimal("150000"), Decimal("0.1116")),
        TaxBracket(Decimal("150000"), Decimal("220000"), Decimal("0.1216")),
        TaxBracket(Decimal("220000"), None, Decimal("0.1316")),
    ),
    # 150k and 220k thresholds are not indexed
    2026: (
        TaxBracket(Decimal("0"), Decimal("53891"), Decimal("0.0505")),
        TaxBracket(Decimal("53891"), Decimal("107785"), Decimal("0.0915")),
        TaxBracket(Decimal("107785"), Decimal("150000"), Decimal("0.1116")),
        TaxBracket(Decimal("150000"), Decimal("220000"), Decimal("0.1216")),
        TaxBracket(Decimal("220000"), None, Decimal("0.1316")),
    ),
})

_FEDERAL_CORPORATE = CorporateRates(
    general=Decimal("0.15"),
    small_business=Decimal("0.09"),
    business_limit=Decimal("500000"),
)

_ONTARIO_CORPORATE = CorporateRates(
    general=Decimal("0.115"),
    small_business=Decimal("0.032"),
    business_limit=Decimal("500000"),
)

FEDERAL_CORPORATE_RATES: Mapping[int, CorporateRates] = MappingProxyType({
    2025: _FEDERAL_CORPORATE,
    2026: _FEDERAL_CORPORATE,
})

ONTARIO_CORPORATE_RATES: Mapping[int, CorporateRates] = MappingProxyType({
    2025: _ONTARIO_CORPORATE,
    2026: _ONTARIO_CORPORATE,
})

PROVINCIAL_PERSONAL_BRACKETS: Mapping[str, Mapping[int, tuple[TaxBracket, ...]]] = MappingProxyType({
    "ON": ONTARIO_PERSONAL_BRACKETS,
})

PROVINCIAL_CORPORATE_RATES: Mapping[str, Mapping[int, CorporateRates]] = MappingProxyType({
    "ON": ONTARIO_CORPORATE_RATES,
})

# All provinces and territories, whether or not tables exist for them.
PROVINCE_CODES: Mapping[str, str] = MappingProxyType({
    "AB": "Alberta",
    "BC": "British Columbia",
    "MB": "Manitoba",
    "NB": "New Brunswick",
    "NL": "Newfoundland and Labrador",
    "NS": "Nova Scotia",
    "NT": "Northwest Territories",
    "NU": "Nunavut",
    "ON": "Ontario",
    "PE": "Prince Edward Island",
    "QC": "Quebec",
    "SK": "Saskatchewan",
    "YT": "Yukon",
})

SUPPORTED_PROVINCES: tuple[str, ...] = tuple(sorted(PROVINCIAL_PERSONAL_BRACKETS))
SUPPORTED_TAX_YEARS: tuple[int, ...] = tuple(sorted(FEDERAL_PERSONAL_BRACKETS))

DEFAULT_TAX_YEAR = 2025
