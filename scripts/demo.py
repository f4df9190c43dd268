"""Run the reference tax-rate scenarios through the tool dispatcher.

Each scenario in scripts/demo_scenarios.yaml is executed as a get_tax_rate
tool call and its result is checked against the expected fields.

Usage:
    python scripts/demo.py
    python scripts/demo.py --scenario personal_120k --show-result
"""

import argparse
import json
import logging
import math
import sys
from pathlib import Path
from typing import Any

import yaml

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from cantax.tool_runner import TOOL_LABELS, execute_tool
from config.settings import settings

logging.basicConfig(level=settings.log_level, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)

SCENARIOS_PATH = Path(__file__).parent / "demo_scenarios.yaml"


def load_scenarios() -> list[dict[str, Any]]:
    """Load demo scenarios from YAML."""
    data = yaml.safe_load(SCENARIOS_PATH.read_text())
    return data["scenarios"]


def check_result(result: dict[str, Any], expect: dict[str, Any]) -> list[str]:
    """Return a list of mismatches between a tool result and expectations."""
    misses: list[str] = []
    for key, expected in expect.items():
        actual = result.get(key)
        if isinstance(expected, float | int) and not isinstance(expected, bool):
            ok = isinstance(actual, float | int) and math.isclose(
                actual, expected, rel_tol=1e-3
            )
        else:
            ok = actual == expected
        if not ok:
            misses.append(f"{key}: expected {expected!r}, got {actual!r}")
    return misses


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Canadian tax-rate demo scenarios")
    parser.add_argument("--scenario", help="Run a single scenario by id")
    parser.add_argument(
        "--show-result",
        action="store_true",
        help="Print the full JSON tool result for each scenario",
    )
    return parser.parse_args()


def main() -> int:
    """Run the scenarios; exit status is the number of failures."""
    args = parse_args()
    scenarios = load_scenarios()
    if args.scenario:
        scenarios = [s for s in scenarios if s["id"] == args.scenario]
        if not scenarios:
            logger.error("No scenario with id %s", args.scenario)
            return 1

    logger.info("Running %d scenario(s) with %s", len(scenarios), TOOL_LABELS["get_tax_rate"])
    failures = 0
    for scenario in scenarios:
        result = execute_tool("get_tax_rate", json.dumps(scenario["arguments"]))
        misses = check_result(result, scenario.get("expect", {}))
        status = "PASS" if not misses else "FAIL"
        failures += bool(misses)

        summary = result.get("error") or (
            result.get("total_tax_formatted") or result.get("tax_payable_formatted")
        )
        logger.info("  [%s] %-32s %s", status, scenario["id"], summary)
        for miss in misses:
            logger.info("         %s", miss)
        if args.show_result:
            print(json.dumps(result, indent=2, ensure_ascii=False))

    logger.info("%d/%d scenarios passed", len(scenarios) - failures, len(scenarios))
    return failures


if __name__ == "__main__":
    sys.exit(main())
