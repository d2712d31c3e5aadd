"""Tests for core domain models."""

import pytest
from pydantic import ValidationError

from aidchaos.models import Action, Card, RollResult, Settings, Tier


class TestTier:
    def test_keys(self):
        assert Tier.CRITICAL_SUCCESS.key == "critical_success"
        assert Tier.PARTIAL_SUCCESS.key == "partial_success"

    def test_is_failure(self):
        assert Tier.FAILURE.is_failure
        assert Tier.CRITICAL_FAILURE.is_failure
        assert not Tier.PARTIAL_SUCCESS.is_failure

    def test_from_value(self):
        assert Tier("Critical Failure") is Tier.CRITICAL_FAILURE


class TestRollResult:
    def test_json_round_trip(self):
        result = RollResult(attribute="Strength", roll=10, base=55, tier=Tier.SUCCESS)
        data = result.model_dump(mode="json")
        assert data["tier"] == "Success"
        assert RollResult.model_validate(data) == result

    def test_disabled_defaults(self):
        result = RollResult(attribute="Charisma", is_disabled=True, tier=Tier.CRITICAL_FAILURE)
        assert result.roll is None
        assert result.base is None


class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.enabled is True
        assert s.result_output is False
        assert s.inheritance_processed is False
        assert s.attributes == {}

    def test_attribute_dicts_not_shared(self):
        a, b = Settings(), Settings()
        a.attributes["Strength"] = 7
        assert b.attributes == {}


class TestCard:
    def test_defaults(self):
        card = Card(title="Warrior")
        assert card.type == ""
        assert card.entry == ""
        assert card.updated_at


class TestAction:
    def test_defaults(self):
        assert Action() == Action(text="", type="unknown")

    def test_frozen(self):
        action = Action(text="go", type="do")
        with pytest.raises(ValidationError):
            action.type = "say"
