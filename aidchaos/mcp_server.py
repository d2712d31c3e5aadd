"""FastMCP server exposing attribute detection and rolls as MCP tools.

Tools:
  - attribute_catalog()              attribute names with their triggers
  - detect_attributes(text)          attributes an action would roll for
  - roll_attribute(attribute, value) one d100 roll for a score (or "disabled")

Usage:
    uv run python -m aidchaos.mcp_server
"""

from mcp.server.fastmcp import FastMCP

from aidchaos.attributes import AttributeCatalog
from aidchaos.matching import TriggerMatcher
from aidchaos.rolls import OutcomeResolver
from aidchaos.sheets import clamp, parse_value

mcp = FastMCP("aidchaos")

_catalog = AttributeCatalog()
_matcher = TriggerMatcher(_catalog)
_roller = OutcomeResolver(_catalog)


def set_roller(roller: OutcomeResolver) -> None:
    """Replace the active roller (used in tests to pin the random source)."""
    global _roller
    _roller = roller


@mcp.tool()
def attribute_catalog() -> list[dict]:
    """List attributes with their single-word and phrase triggers."""
    result = []
    for name in _catalog.names():
        triggers = _catalog.triggers(name)
        result.append({
            "name": name,
            "triggers": sorted(triggers.singles),
            "phrases": list(triggers.phrases),
        })
    return result


@mcp.tool()
def detect_attributes(text: str) -> list[str]:
    """Return the attributes a player action would roll for."""
    return _matcher.detect_all_attributes(text)


@mcp.tool()
def roll_attribute(attribute: str, value: str = "5") -> dict:
    """Roll one attribute. value is 1-10 or a disabled keyword."""
    name = _catalog.canonical(attribute) or attribute
    parsed = parse_value(str(value))
    score = clamp(parsed) if parsed is not None else 5
    return _roller.roll(name, score).model_dump(mode="json")


if __name__ == "__main__":
    mcp.run()
