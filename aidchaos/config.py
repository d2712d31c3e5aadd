"""Process-level options read from the environment (.env via python-dotenv).

  AIDCHAOS_BASE_TYPE       card type holding base attributes   (default "Class")
  AIDCHAOS_MODIFIER_TYPES  comma-separated modifier card types (default "Race")
  AIDCHAOS_DEBUG           "1"/"true" turns on debug logging

In-game settings (enabled, result output, attribute scores) live in the
"AidChaos Configuration" story card instead; see aidchaos.sheets.
"""

import os

from pydantic import BaseModel, Field, field_validator


class Options(BaseModel):
    base_type: str = "Class"
    modifier_types: list[str] = Field(default_factory=lambda: ["Race"])
    debug: bool = False

    @field_validator("modifier_types", mode="before")
    @classmethod
    def _split_types(cls, value):
        if isinstance(value, str):
            return [t.strip() for t in value.split(",") if t.strip()]
        return value

    @classmethod
    def from_env(cls) -> "Options":
        fields: dict[str, str] = {}
        if os.getenv("AIDCHAOS_BASE_TYPE"):
            fields["base_type"] = os.environ["AIDCHAOS_BASE_TYPE"].strip()
        if os.getenv("AIDCHAOS_MODIFIER_TYPES") is not None:
            fields["modifier_types"] = os.environ["AIDCHAOS_MODIFIER_TYPES"]
        if os.getenv("AIDCHAOS_DEBUG"):
            fields["debug"] = os.environ["AIDCHAOS_DEBUG"].strip().lower() in ("1", "true", "yes")
        return cls(**fields)
