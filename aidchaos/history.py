"""Action history access and action-type classification.

The host records each turn as {"text" | "rawText", "type"}. The type is
sometimes missing, so classification falls back to text heuristics:

  1. text starts with ">"                      → do
  2. contains "say"/"says"/"said" and a quote  → say
  3. 'please select "continue"' prompt         → continue
  4. fallback text starts with ">"             → do
  otherwise                                    → unknown
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from aidchaos.models import Action

logger = logging.getLogger(__name__)

PLAYER_ACTION_TYPES = ("do", "say", "story")

_LEADING_GT_RE = re.compile(r"^\s*>")
_SAY_RE = re.compile(r"\b(says?|said)\b")
_CONTINUE_RE = re.compile(r'please select\s*"continue"', re.IGNORECASE)


class HistoryReader(Protocol):
    def latest(self, look_back: int = 0) -> Any: ...


class ListHistory:
    """HistoryReader over a plain list of entries, oldest first."""

    def __init__(self, entries: Sequence[Any] | None = None) -> None:
        self._entries = entries

    def latest(self, look_back: int = 0) -> Any:
        entries = self._entries
        if not isinstance(entries, Sequence) or isinstance(entries, str) or not entries:
            return None
        index = max(0, len(entries) - 1 - abs(int(look_back or 0)))
        return entries[index]


def _field(entry: Any, name: str) -> Any:
    if isinstance(entry, Mapping):
        return entry.get(name)
    return getattr(entry, name, None)


class ActionClassifier:
    def __init__(self, history: HistoryReader | None) -> None:
        self.history = history

    def read_last_action(self, look_back: int = 0) -> Action:
        try:
            entry = self.history.latest(look_back) if self.history is not None else None
            if entry is None:
                return Action()
            text = _field(entry, "text") or _field(entry, "rawText") or ""
            return Action(text=str(text), type=str(_field(entry, "type") or "unknown"))
        except Exception as e:
            logger.warning(f"Could not read history entry {look_back}: {e}")
            return Action()

    def classify(self, look_back: int = 0, fallback_text: str | None = None) -> str:
        action = self.read_last_action(look_back)
        if action.type and action.type != "unknown":
            logger.debug("explicit action type %s", action.type)
            return action.type

        text = action.text
        if _LEADING_GT_RE.match(text):
            return "do"
        if _SAY_RE.search(text) and '"' in text:
            return "say"
        if _CONTINUE_RE.search(text):
            return "continue"
        if isinstance(fallback_text, str) and _LEADING_GT_RE.match(fallback_text):
            logger.debug("action type from fallback text")
            return "do"
        return "unknown"

    @staticmethod
    def is_player_action(action_type: str) -> bool:
        return action_type in PLAYER_ACTION_TYPES
