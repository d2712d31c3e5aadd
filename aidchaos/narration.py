"""Narrator-facing text built from roll results.

Guidance block (appended to the context pass), one paragraph per result:

  [
  The part of the action that depended on Strength was a SUCCESS.
  Guidance: The character succeeds at the physical task ...

  Causality rule          (only when some result is a failure)
  ...

  Narration rule
  ...
  ]

Result marker (prepended to the output pass when display is enabled):

  [AIDCHAOS Strength (10/55): Success, Charisma (disabled): Critical Failure]
"""

from aidchaos.detection import MARKER_TAG
from aidchaos.models import RollResult
from aidchaos.prompts import render_result

RESULT_LINE_TEMPLATE = "The part of the action that depended on {{{attribute}}} was a {{upper tier}}."
GUIDANCE_LINE_TEMPLATE = "Guidance: {{{guidance}}}"
MARKER_PART_TEMPLATE = (
    "{{{attribute}}} {{#if is_disabled}}(disabled){{else}}({{roll}}/{{base}}){{/if}}: {{{tier}}}"
)

CAUSALITY_RULE = [
    "Causality rule",
    "The declared action may include several parts. If an earlier part fails in a way "
    "that makes later parts impossible, do not narrate those later parts as actually "
    "happening. You may show the character's intention, frustration, or delayed "
    "opportunities, but the impossible actions themselves do not occur in this scene.",
]

NARRATION_RULE = [
    "Narration rule",
    "Use these outcomes when continuing the story.",
    "Show the consequences naturally in the scene.",
    "Do not mention dice, rolls, or attribute names directly.",
]


def build_guidance_block(results: list[RollResult]) -> str:
    lines = ["["]
    has_failure = False

    for result in results:
        lines.append(render_result(RESULT_LINE_TEMPLATE, result))
        if result.guidance_text:
            lines.append(render_result(GUIDANCE_LINE_TEMPLATE, result))
        lines.append("")
        if result.tier.is_failure:
            has_failure = True

    if has_failure:
        lines.extend(CAUSALITY_RULE)
        lines.append("")

    lines.extend(NARRATION_RULE)
    lines.append("]")
    return "\n".join(lines)


def build_result_marker(results: list[RollResult]) -> str:
    parts = [render_result(MARKER_PART_TEMPLATE, r) for r in results]
    return f"[{MARKER_TAG} " + ", ".join(parts) + "]\n"
