"""Execute LLM tool calls against the tax calculators."""

import json
import logging
from typing import Any

from cantax.calculators.tax_rate import get_tax_rate

logger = logging.getLogger(__name__)

TOOL_LABELS: dict[str, str] = {
    "get_tax_rate": "Tax rate calculator",
}


def execute_tool(name: str, arguments: str | dict[str, Any]) -> dict[str, Any]:
    """Execute a single tool call and return the result.

    Args:
        name: Tool name from the LLM response.
        arguments: Tool arguments, either the raw JSON string from the LLM
            or an already-decoded dict.

    Returns:
        JSON-serialisable dict. Failures carry ``success: False`` and an
        ``error`` message instead of raising.
    """
    if isinstance(arguments, str):
        try:
            args = json.loads(arguments or "{}")
        except json.JSONDecodeError as exc:
            logger.warning("Malformed arguments for tool=%s: %s", name, exc)
            return {"success": False, "error": f"Malformed tool arguments: {exc.msg}"}
    else:
        args = arguments

    if not isinstance(args, dict):
        logger.warning("Non-object arguments for tool=%s: %r", name, args)
        return {"success": False, "error": "Tool arguments must be a JSON object."}

    logger.info("Executing tool=%s args=%s", name, args)

    if name == "get_tax_rate":
        missing = [key for key in ("type", "income_amount") if key not in args]
        if missing:
            return {
                "success": False,
                "error": f"Missing required argument(s): {', '.join(missing)}",
            }
        return get_tax_rate(
            type=args["type"],
            income_amount=args["income_amount"],
            province=args.get("province"),
            tax_year=args.get("tax_year"),
        )

    logger.warning("Unknown tool requested: %s", name)
    return {"success": False, "error": f"Unknown tool: {name}"}
