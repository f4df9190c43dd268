"""Progressive bracket calculator shared by the federal and provincial schedules."""

from collections.abc import Iterable
from decimal import Decimal
from typing import NamedTuple

from cantax.calculators.tax_data import TaxBracket


class BracketTaxResult(NamedTuple):
    """Tax owed under one schedule and the rate on the last dollar."""

    tax: Decimal
    marginal_rate: Decimal


def calculate_bracket_tax(
    income: Decimal,
    brackets: Iterable[TaxBracket],
) -> BracketTaxResult:
    """Apply a progressive schedule to an income.

    Income equal to a bracket's upper bound stays in that bracket, so the
    marginal rate at a boundary is the lower bracket's rate.

    Args:
        income: Taxable income (must be >= 0).
        brackets: Contiguous brackets sorted ascending by lower bound.

    Returns:
        BracketTaxResult with total tax and marginal rate (0 for zero income).
    """
    tax = Decimal("0")
    marginal_rate = Decimal("0")

    for bracket in brackets:
        if income > bracket.lower:
            upper = bracket.upper if bracket.upper is not None else income
            tax += (min(income, upper) - bracket.lower) * bracket.rate
            marginal_rate = bracket.rate

        if bracket.upper is None or income <= bracket.upper:
            break

    return BracketTaxResult(tax=tax, marginal_rate=marginal_rate)
