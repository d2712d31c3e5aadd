"""Tests for guidance blocks, result markers, and the Handlebars layer."""

import pytest

from aidchaos.models import RollResult, Tier
from aidchaos.narration import (
    CAUSALITY_RULE,
    NARRATION_RULE,
    build_guidance_block,
    build_result_marker,
)
from aidchaos.prompts import PromptError, build_result_context, render_prompt


def _result(attribute="Strength", roll=10, base=55, tier=Tier.SUCCESS, guidance="It works."):
    return RollResult(attribute=attribute, roll=roll, base=base, tier=tier, guidance_text=guidance)


def _disabled(attribute="Charisma"):
    return RollResult(attribute=attribute, is_disabled=True, tier=Tier.CRITICAL_FAILURE, guidance_text="No.")


# ── Guidance block ───────────────────────────────────────


def test_guidance_block_single_success():
    block = build_guidance_block([_result()])
    expected = "\n".join([
        "[",
        "The part of the action that depended on Strength was a SUCCESS.",
        "Guidance: It works.",
        "",
        *NARRATION_RULE,
        "]",
    ])
    assert block == expected


def test_causality_rule_only_on_failure():
    assert CAUSALITY_RULE[0] not in build_guidance_block([_result()])
    failed = build_guidance_block([_result(), _result("Dexterity", 80, 45, Tier.FAILURE)])
    assert CAUSALITY_RULE[0] in failed
    assert failed.index(CAUSALITY_RULE[0]) < failed.index(NARRATION_RULE[0])


def test_guidance_block_upper_cases_multiword_tier():
    block = build_guidance_block([_result(tier=Tier.PARTIAL_SUCCESS, roll=60)])
    assert "was a PARTIAL SUCCESS." in block


def test_guidance_text_is_not_html_escaped():
    block = build_guidance_block([_result(guidance="It's \"done\" & dusted <now>")])
    assert "Guidance: It's \"done\" & dusted <now>" in block


def test_guidance_line_skipped_when_empty():
    block = build_guidance_block([_result(guidance="")])
    assert "Guidance:" not in block


def test_disabled_result_triggers_causality_rule():
    block = build_guidance_block([_disabled()])
    assert "depended on Charisma was a CRITICAL FAILURE." in block
    assert CAUSALITY_RULE[0] in block


# ── Result marker ────────────────────────────────────────


def test_marker_single():
    assert build_result_marker([_result()]) == "[AIDCHAOS Strength (10/55): Success]\n"


def test_marker_multiple_with_disabled():
    marker = build_result_marker([_result(), _disabled()])
    assert marker == "[AIDCHAOS Strength (10/55): Success, Charisma (disabled): Critical Failure]\n"


# ── Handlebars ───────────────────────────────────────────


def test_upper_helper():
    assert render_prompt("{{upper tier}}", {"tier": "Partial Success"}) == "PARTIAL SUCCESS"


def test_render_error_raises_prompt_error():
    with pytest.raises(PromptError):
        render_prompt("{{> missing_partial}}", {})


def test_result_context_for_disabled():
    ctx = build_result_context(_disabled())
    assert ctx["roll"] == ""
    assert ctx["base"] == ""
    assert ctx["is_disabled"] is True


def test_result_context_keys():
    assert set(build_result_context(_result())) == {
        "attribute", "tier", "guidance", "roll", "base", "is_disabled",
    }
