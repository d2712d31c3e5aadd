"""Tests for the exchange slot and stored settings."""

from aidchaos.models import RollResult, Settings, Tier
from aidchaos.state import (
    CONFIG_KEY,
    LAST_ROLL_KEY,
    ExchangeSlot,
    store_settings,
    stored_settings,
)


def _results():
    return [RollResult(attribute="Strength", roll=10, base=55, tier=Tier.SUCCESS)]


def test_put_stores_plain_json():
    state = {}
    ExchangeSlot(state).put(_results())
    assert state[LAST_ROLL_KEY] == [{
        "attribute": "Strength",
        "is_disabled": False,
        "roll": 10,
        "base": 55,
        "tier": "Success",
        "guidance_text": "",
    }]


def test_take_reads_once():
    state = {}
    slot = ExchangeSlot(state)
    slot.put(_results())
    assert slot.peek() == _results()
    assert slot.take() == _results()
    assert LAST_ROLL_KEY not in state
    assert slot.take() is None


def test_put_overwrites():
    state = {}
    slot = ExchangeSlot(state)
    slot.put(_results())
    slot.put([RollResult(attribute="Charisma", is_disabled=True, tier=Tier.CRITICAL_FAILURE)])
    assert [r.attribute for r in slot.take()] == ["Charisma"]


def test_malformed_slot_is_discarded():
    state = {LAST_ROLL_KEY: [{"attribute": "Strength", "tier": "Great"}]}
    slot = ExchangeSlot(state)
    assert slot.take() is None
    assert LAST_ROLL_KEY not in state


def test_non_list_slot():
    assert ExchangeSlot({LAST_ROLL_KEY: "junk"}).peek() is None


def test_clear_missing_key():
    state = {}
    ExchangeSlot(state).clear()
    assert state == {}


# ── Settings ─────────────────────────────────────────────


def test_settings_round_trip_through_state():
    state = {}
    settings = Settings(result_output=True, attributes={"Strength": 7, "Charisma": -1})
    store_settings(state, settings)
    assert stored_settings(state) == settings


def test_stored_settings_missing_or_malformed():
    assert stored_settings({}) is None
    assert stored_settings({CONFIG_KEY: "garbage"}) is None
    assert stored_settings({CONFIG_KEY: {"enabled": "maybe"}}) is None
