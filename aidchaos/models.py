"""Core domain models.

Every pass and storage helper operates on these types. Pydantic handles
validation and serialisation wherever data crosses the shared state store or
the record store.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Reserved attribute value: the capability is narratively unavailable.
DISABLED = -1

DEFAULT_ATTRIBUTE_VALUE = 5
MIN_ATTRIBUTE_VALUE = 1
MAX_ATTRIBUTE_VALUE = 10

SETTINGS_TITLE = "AidChaos Configuration"
SETTINGS_TYPE = "settings"


class Tier(str, Enum):
    """Five ordered outcome classifications, best first."""

    CRITICAL_SUCCESS = "Critical Success"
    SUCCESS = "Success"
    PARTIAL_SUCCESS = "Partial Success"
    FAILURE = "Failure"
    CRITICAL_FAILURE = "Critical Failure"

    @property
    def key(self) -> str:
        """Guidance lookup key, e.g. "partial_success"."""
        return self.name.lower()

    @property
    def is_failure(self) -> bool:
        return self in (Tier.FAILURE, Tier.CRITICAL_FAILURE)


class RollResult(BaseModel):
    """Outcome of one attribute roll for one action."""

    attribute: str
    is_disabled: bool = False
    roll: int | None = None  # 1-100, None when disabled
    base: int | None = None  # threshold anchor, None when disabled
    tier: Tier
    guidance_text: str = ""


class Settings(BaseModel):
    """Resolved configuration snapshot for one pass."""

    enabled: bool = True
    result_output: bool = False
    inheritance_processed: bool = False
    attributes: dict[str, int] = Field(default_factory=dict)


class Card(BaseModel):
    """An external tagged record (story card)."""

    type: str = ""
    title: str
    keys: str = ""
    entry: str = ""
    description: str = ""
    updated_at: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )


class Action(BaseModel):
    """Immutable snapshot of one history entry."""

    model_config = ConfigDict(frozen=True)

    text: str = ""
    type: str = "unknown"
