"""Tests for the MCP tool functions (called directly)."""

import pytest

from aidchaos import mcp_server
from aidchaos.attributes import AttributeCatalog
from aidchaos.rolls import OutcomeResolver


@pytest.fixture
def pinned_roller(stub_random):
    original = mcp_server._roller

    def pin(*values):
        mcp_server.set_roller(OutcomeResolver(AttributeCatalog(), stub_random(*values)))

    yield pin
    mcp_server.set_roller(original)


def test_attribute_catalog():
    catalog = mcp_server.attribute_catalog()
    names = [entry["name"] for entry in catalog]
    assert names == AttributeCatalog().names()
    dexterity = catalog[1]
    assert "climb" in dexterity["triggers"]
    assert "pick lock" in dexterity["phrases"]


def test_detect_attributes():
    assert mcp_server.detect_attributes("I push the door") == ["Strength"]
    assert mcp_server.detect_attributes("I wait") == []


def test_roll_attribute(pinned_roller):
    pinned_roller(10)
    result = mcp_server.roll_attribute("strength", "7")
    assert result["attribute"] == "Strength"
    assert result["roll"] == 10
    assert result["base"] == 55
    assert result["tier"] == "Success"


def test_roll_attribute_disabled(pinned_roller):
    pinned_roller()
    result = mcp_server.roll_attribute("Charisma", "disabled")
    assert result["is_disabled"] is True
    assert result["roll"] is None
    assert result["tier"] == "Critical Failure"


def test_roll_attribute_bad_value_uses_default(pinned_roller):
    pinned_roller(46)
    result = mcp_server.roll_attribute("Dexterity", "lots")
    assert result["base"] == 45
    assert result["tier"] == "Partial Success"


def test_roll_attribute_clamps(pinned_roller):
    pinned_roller(50)
    assert mcp_server.roll_attribute("Perception", "42")["base"] == 70


@pytest.mark.asyncio
async def test_tools_registered():
    tools = await mcp_server.mcp.list_tools()
    assert {t.name for t in tools} == {"attribute_catalog", "detect_attributes", "roll_attribute"}
