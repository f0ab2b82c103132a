"""
Numeric normalization for ad platform responses.

Vendors report numbers as strings, ints, floats or not at all. Every helper
returns 0 / 0.0 for missing or blank values so a returned AdMetrics never
holds None.
"""

from typing import Any

MICROS_PER_UNIT = 1_000_000


def to_float(value: Any) -> float:
    if value is None or value == "":
        return 0.0
    return float(value)


def to_int(value: Any) -> int:
    """Parse a count; fractional values (e.g. modeled conversions) are truncated."""
    if value is None or value == "":
        return 0
    return int(float(value))


def micros_to_units(value: Any) -> float:
    """Convert a micro-unit amount (cost_micros) to currency units."""
    return to_float(value) / MICROS_PER_UNIT


def fraction_to_percent(value: Any) -> float:
    """Convert a 0-1 rate to a percentage."""
    return to_float(value) * 100


def sum_action_values(value: Any) -> int:
    """
    Count conversions reported either as a number or as a Graph API action list.

    e.g. [{"action_type": "purchase", "value": "3"}, {"action_type": "lead", "value": "2"}] -> 5
    """
    if isinstance(value, list):
        return sum(to_int(action.get("value")) for action in value if isinstance(action, dict))
    return to_int(value)
