"""d100 outcome rolls driven by attribute scores.

Thresholds for a score v in 1..10 (base = 20 + 5v, 25..70):
  critical  max(1, floor(base * 0.1))   roll <= critical, or a natural 1
  success   base                        roll <= base
  partial   base + 15                   roll <= partial
  failure   90 + floor(base * 0.1)      roll <= failure
  anything above failure is a critical failure

A disabled attribute never rolls: the result is a critical failure with no
roll and no base. Internal errors resolve to a critical success so a fault
never blocks the story.
"""

import logging
import math
import random
from dataclasses import dataclass
from typing import Protocol

from aidchaos.attributes import AttributeCatalog
from aidchaos.errors import Fallback, Guarded
from aidchaos.models import DISABLED, RollResult, Tier

logger = logging.getLogger(__name__)

GENERIC_GUIDANCE = {
    Tier.CRITICAL_SUCCESS: "Outstanding success. The action succeeds spectacularly.",
    Tier.SUCCESS: "Normal success. The action succeeds.",
    Tier.PARTIAL_SUCCESS: "Partial success. The action succeeds with a drawback.",
    Tier.FAILURE: "Failure. The action fails.",
    Tier.CRITICAL_FAILURE: "Critical failure. Catastrophic result.",
}

DISABLED_GUIDANCE = (
    "This attribute is disabled for the character. "
    "The action automatically fails in the worst possible way."
)

ERROR_GUIDANCE = "Defaulted to critical success on error."


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


@dataclass(frozen=True)
class Thresholds:
    base: int
    critical: int
    partial: int
    failure: int


def thresholds(value: int) -> Thresholds:
    base = 20 + int(value) * 5
    tenth = math.floor(base * 0.1)
    return Thresholds(
        base=base,
        critical=max(1, tenth),
        partial=base + 15,
        failure=90 + tenth,
    )


def classify(roll: int, limits: Thresholds) -> Tier:
    if roll == 1 or roll <= limits.critical:
        return Tier.CRITICAL_SUCCESS
    if roll <= limits.base:
        return Tier.SUCCESS
    if roll <= limits.partial:
        return Tier.PARTIAL_SUCCESS
    if roll <= limits.failure:
        return Tier.FAILURE
    return Tier.CRITICAL_FAILURE


class OutcomeResolver:
    def __init__(self, catalog: AttributeCatalog, rng: RandomSource | None = None) -> None:
        self.catalog = catalog
        self.rng = rng if rng is not None else random.Random()

    def roll(self, attribute: str, value: int) -> RollResult:
        return self.try_roll(attribute, value).value

    def try_roll(self, attribute: str, value: int) -> Guarded[RollResult]:
        try:
            if value == DISABLED:
                logger.debug("%s is disabled, automatic critical failure", attribute)
                return Guarded(RollResult(
                    attribute=attribute,
                    is_disabled=True,
                    tier=Tier.CRITICAL_FAILURE,
                    guidance_text=self.catalog.guidance(attribute, Tier.CRITICAL_FAILURE) or DISABLED_GUIDANCE,
                ))

            limits = thresholds(value)
            roll = self.rng.randint(1, 100)
            tier = classify(roll, limits)
            logger.debug("roll %s=%s: %d/%d -> %s", attribute, value, roll, limits.base, tier.value)
            return Guarded(RollResult(
                attribute=attribute,
                roll=roll,
                base=limits.base,
                tier=tier,
                guidance_text=self.catalog.guidance(attribute, tier) or GENERIC_GUIDANCE[tier],
            ))
        except Exception:
            logger.exception("Roll for %s failed, defaulting to critical success", attribute)
            return Guarded(
                RollResult(
                    attribute=str(attribute),
                    roll=1,
                    base=0,
                    tier=Tier.CRITICAL_SUCCESS,
                    guidance_text=ERROR_GUIDANCE,
                ),
                Fallback.UNEXPECTED,
            )
