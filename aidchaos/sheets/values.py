"""Attribute value parsing, composition, and clamping.

Parsed numbers are always floats; only a disabled keyword yields the int
DISABLED sentinel. That keeps a literal "-1" modifier from reading as
"disabled".
"""

import math

from aidchaos.models import DISABLED, MAX_ATTRIBUTE_VALUE, MIN_ATTRIBUTE_VALUE

DISABLED_KEYWORDS = frozenset({"unavailable", "disabled", "impossible", "forbidden", "inaccessible"})


def is_disabled(value: float) -> bool:
    return type(value) is int and value == DISABLED


def parse_value(raw: str) -> float | int | None:
    """Disabled keyword → DISABLED; finite number → float; anything else → None."""
    token = raw.strip()
    if token.lower() in DISABLED_KEYWORDS:
        return DISABLED
    try:
        number = float(token)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def compose(current: float, modifier: float) -> float:
    """Add a modifier to a value. Disabled on either side wins."""
    if is_disabled(current) or is_disabled(modifier):
        return DISABLED
    return float(current) + float(modifier)


def clamp(value: float) -> int:
    """Floor and clamp to 1..10, leaving DISABLED untouched."""
    if is_disabled(value):
        return DISABLED
    return min(MAX_ATTRIBUTE_VALUE, max(MIN_ATTRIBUTE_VALUE, math.floor(value)))


def format_value(value: int) -> str:
    return "disabled" if is_disabled(value) else str(int(value))
