"""Hook passes: input, context, output.

Each pass gets the same Session for one player turn and keeps nothing in
memory between calls; the only carry-over is the session state mapping.

  input    strip old markers, nothing else
  context  strip, gate on automation / action type / enabled, detect
           attributes in the last action, roll, stash results, append
           the guidance block
  output   strip, and when result output is on, take the stashed results
           and prepend the marker line

Every pass fails open: the worst case is the cleaned input text.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from aidchaos.attributes import AttributeCatalog
from aidchaos.config import Options
from aidchaos.detection import is_automation_activity, strip_markers
from aidchaos.history import ActionClassifier, HistoryReader
from aidchaos.matching import TriggerMatcher
from aidchaos.models import DEFAULT_ATTRIBUTE_VALUE, RollResult, Settings
from aidchaos.narration import build_guidance_block, build_result_marker
from aidchaos.rolls import OutcomeResolver, RandomSource
from aidchaos.sheets import CharacterSheetResolver
from aidchaos.state import ExchangeSlot, store_settings, stored_settings
from aidchaos.storage.cards import CardStore, RecordStore

logger = logging.getLogger(__name__)


class Bypass(str, Enum):
    """Why a pass returned its input without adding anything."""

    AUTOMATION = "automation"
    NOT_ACTION = "not_action"
    DISABLED = "disabled"
    NO_ATTRIBUTES = "no_attributes"
    DISPLAY_OFF = "display_off"
    NO_RESULTS = "no_results"
    ERROR = "error"


@dataclass
class Session:
    """Everything the host lends the pipeline for one turn."""

    state: MutableMapping[str, Any] = field(default_factory=dict)
    cards: RecordStore | None = field(default_factory=CardStore)
    history: HistoryReader | None = None
    memory: str = ""
    rng: RandomSource | None = None
    options: Options = field(default_factory=Options)
    catalog: AttributeCatalog = field(default_factory=AttributeCatalog)

    def sheet_resolver(self) -> CharacterSheetResolver:
        return CharacterSheetResolver(
            self.cards,
            self.catalog,
            memory=self.memory,
            base_type=self.options.base_type,
            modifier_types=self.options.modifier_types,
        )


@dataclass
class PassResult:
    text: str
    stop: bool = False
    bypass: Bypass | None = None
    results: list[RollResult] = field(default_factory=list)


def _attribute_value(settings: Settings, name: str) -> int:
    value = settings.attributes.get(name, DEFAULT_ATTRIBUTE_VALUE)
    if not isinstance(value, int) or isinstance(value, bool) or value == 0:
        return DEFAULT_ATTRIBUTE_VALUE
    return value


# ── Passes ───────────────────────────────────────────────


def input_pass(text: str, session: Session) -> PassResult:
    cleaned = strip_markers(text)
    if is_automation_activity(cleaned):
        logger.debug("input: automation detected, passing through")
        return PassResult(cleaned, bypass=Bypass.AUTOMATION)
    return PassResult(cleaned)


def context_pass(text: str, stop: bool, session: Session) -> PassResult:
    cleaned = strip_markers(text)
    stop = stop is True

    if is_automation_activity(cleaned):
        logger.debug("context: automation detected, skipping")
        return PassResult(cleaned, stop, Bypass.AUTOMATION)

    slot = ExchangeSlot(session.state)
    slot.clear()

    classifier = ActionClassifier(session.history)
    action_type = classifier.classify(0, cleaned)
    if action_type != "do":
        logger.debug("context: action type %s, skipping", action_type)
        return PassResult(cleaned, stop, Bypass.NOT_ACTION)

    try:
        settings = session.sheet_resolver().load()
        store_settings(session.state, settings)
        if not settings.enabled:
            return PassResult(cleaned, stop, Bypass.DISABLED)

        action_text = classifier.read_last_action(0).text
        detected = TriggerMatcher(session.catalog).detect_all_attributes(action_text)
        if not detected:
            logger.debug("context: no attributes detected")
            return PassResult(cleaned, stop, Bypass.NO_ATTRIBUTES)

        roller = OutcomeResolver(session.catalog, session.rng)
        results = [roller.roll(name, _attribute_value(settings, name)) for name in detected]
        slot.put(results)

        block = build_guidance_block(results)
        return PassResult(cleaned + "\n" + block, stop, results=results)
    except Exception:
        logger.exception("context pass failed, returning cleaned text")
        return PassResult(cleaned, stop, Bypass.ERROR)


def output_pass(text: str, session: Session) -> PassResult:
    cleaned = strip_markers(text)
    if is_automation_activity(cleaned):
        logger.debug("output: automation detected, passing through")
        return PassResult(cleaned, bypass=Bypass.AUTOMATION)

    try:
        settings = stored_settings(session.state)
        if settings is None:
            settings = session.sheet_resolver().load()
        if not settings.result_output:
            return PassResult(cleaned, bypass=Bypass.DISPLAY_OFF)

        results = ExchangeSlot(session.state).take()
        if not results:
            return PassResult(cleaned, bypass=Bypass.NO_RESULTS)

        return PassResult(build_result_marker(results) + cleaned, results=results)
    except Exception:
        logger.exception("output pass failed, returning cleaned text")
        return PassResult(cleaned, bypass=Bypass.ERROR)


# ── Entry points ─────────────────────────────────────────


def on_input(text: str, session: Session) -> str:
    return input_pass(text, session).text


def on_context(text: str, stop: bool, session: Session) -> tuple[str, bool]:
    result = context_pass(text, stop, session)
    return result.text, result.stop


def on_output(text: str, session: Session) -> str:
    return output_pass(text, session).text


def run_hook(hook: str | None, text: Any, stop: bool = False, session: Session | None = None) -> Any:
    """Dispatch one hook call. Unknown hooks return text unchanged."""
    session = session if session is not None else Session()
    logger.debug("hook %s", hook)
    try:
        if hook == "input":
            return on_input(text, session)
        if hook == "context":
            return on_context(text, stop, session)
        if hook == "output":
            return on_output(text, session)
    except Exception:
        logger.exception("hook %s failed, returning input unchanged", hook)
        if hook == "context":
            return text, stop is True
    return text
