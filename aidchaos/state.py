"""Session state slots shared between passes.

The host hands every pass the same mutable mapping for a session. Two keys
are used:

  AidChaosConfig    settings resolved in the context pass, reused by output
  AidChaosLastRoll  roll results written by context, taken once by output

Values are stored as plain JSON-compatible dicts so the host can persist the
mapping however it likes.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

from pydantic import ValidationError

from aidchaos.models import RollResult, Settings

logger = logging.getLogger(__name__)

CONFIG_KEY = "AidChaosConfig"
LAST_ROLL_KEY = "AidChaosLastRoll"


class ExchangeSlot:
    """Roll results handed from the context pass to the output pass.

    put() overwrites, take() reads and clears. Anything unreadable in the slot
    is discarded rather than interpreted.
    """

    def __init__(self, state: MutableMapping[str, Any], key: str = LAST_ROLL_KEY) -> None:
        self.state = state
        self.key = key

    def put(self, results: list[RollResult]) -> None:
        self.state[self.key] = [r.model_dump(mode="json") for r in results]

    def peek(self) -> list[RollResult] | None:
        raw = self.state.get(self.key)
        if not raw or not isinstance(raw, list):
            return None
        try:
            return [RollResult.model_validate(r) for r in raw]
        except ValidationError as e:
            logger.warning(f"Discarding malformed roll results: {e}")
            return None

    def take(self) -> list[RollResult] | None:
        results = self.peek()
        self.clear()
        return results

    def clear(self) -> None:
        self.state.pop(self.key, None)


def store_settings(state: MutableMapping[str, Any], settings: Settings) -> None:
    state[CONFIG_KEY] = settings.model_dump()


def stored_settings(state: MutableMapping[str, Any]) -> Settings | None:
    raw = state.get(CONFIG_KEY)
    if not isinstance(raw, dict):
        return None
    try:
        return Settings.model_validate(raw)
    except ValidationError as e:
        logger.warning(f"Ignoring malformed stored settings: {e}")
        return None
