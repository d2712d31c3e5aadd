"""Handlebars rendering for narrator guidance and result markers.

Templates are short one-liners owned by aidchaos.narration; each is compiled
once and reused for every roll result.
"""

from collections.abc import Callable
from typing import Any

import pybars

from aidchaos.models import RollResult

_compiler = pybars.Compiler()
_templates: dict[str, Callable] = {}


class PromptError(Exception):
    """A narration template failed to compile or render."""


# ── Helpers ──────────────────────────────────────────────


def _helper_upper(this, value):
    """{{upper tier}}: upper-case a value."""
    return str(value).upper()


_HELPERS: dict[str, Callable] = {"upper": _helper_upper}


def _compiled(source: str) -> Callable:
    template = _templates.get(source)
    if template is None:
        template = _compiler.compile(source)
        _templates[source] = template
    return template


def render_prompt(template_str: str, context: dict[str, Any]) -> str:
    try:
        return _compiled(template_str)(context, helpers=_HELPERS)
    except Exception as e:
        raise PromptError(f"Cannot render {template_str[:40]!r}: {e}") from e


def build_result_context(result: RollResult) -> dict[str, Any]:
    """Template variables for one roll result. Numbers go in as strings."""
    return {
        "attribute": result.attribute,
        "tier": result.tier.value,
        "guidance": result.guidance_text,
        "roll": "" if result.roll is None else str(result.roll),
        "base": "" if result.base is None else str(result.base),
        "is_disabled": result.is_disabled,
    }


def render_result(template_str: str, result: RollResult) -> str:
    return render_prompt(template_str, build_result_context(result))
