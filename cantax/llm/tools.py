"""Tool definitions for LLM function calling (OpenAI format)."""

from typing import Any

from cantax.calculators.tax_data import SUPPORTED_TAX_YEARS
from cantax.calculators.tax_rate import TAX_TYPES

GET_TAX_RATE: dict[str, Any] = {
    "type": "function",
    "function": {
        "name": "get_tax_rate",
        "description": (
            "Calculate the marginal and effective tax rate for Personal "
            "(Federal + Provincial brackets) or Corporate (Small Business "
            "Deduction vs General Rate) income tax in Canada. Use when a user "
            "asks 'what is my tax rate on $X' or 'how much corporate tax on "
            "$X profit'. Do not perform tax arithmetic yourself. "
            "Limitations: only Ontario rates are available, corporate rates "
            "assume active business income of a CCPC."
        ),
        "parameters": {
            "type": "object",
            "properties": {
                "type": {
                    "type": "string",
                    "enum": list(TAX_TYPES),
                    "description": (
                        "'personal' for individual income tax, 'corporate' "
                        "for business tax."
                    ),
                },
                "province": {
                    "type": "string",
                    "description": (
                        "Province or territory code or name, e.g. 'ON' or "
                        "'Ontario'. Defaults to Ontario if not specified."
                    ),
                },
                "income_amount": {
                    "type": "number",
                    "description": "Taxable income or business profit in CAD.",
                },
                "tax_year": {
                    "type": "integer",
                    "enum": list(SUPPORTED_TAX_YEARS),
                    "description": (
                        "Tax year, e.g. 2025. Defaults to the current tax "
                        "year if not specified."
                    ),
                },
            },
            "required": ["type", "income_amount"],
        },
    },
}

TOOLS: list[dict[str, Any]] = [
    GET_TAX_RATE,
]
