"""Shared test fixtures."""

from decimal import Decimal

import pytest

from cantax.calculators.tax_data import TaxBracket


@pytest.fixture
def simple_brackets() -> tuple[TaxBracket, ...]:
    """Three-bracket schedule with round numbers: 10% / 20% / 30%."""
    return (
        TaxBracket(Decimal("0"), Decimal("50000"), Decimal("0.10")),
        TaxBracket(Decimal("50000"), Decimal("100000"), Decimal("0.20")),
        TaxBracket(Decimal("100000"), None, Decimal("0.30")),
    )
