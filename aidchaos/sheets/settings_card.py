"""Settings card text format.

  AidChaos enabled: true
  Result Output enabled: false
  Inheritance processed: true

  Attributes:
  - Strength: 7
  - Dexterity: disabled
  ...

Flag lines tolerate a leading ">" and any casing. Attribute names are
matched against the catalog case-insensitively; unknown names and
unparseable values are skipped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from aidchaos.attributes import AttributeCatalog
from aidchaos.models import Settings

from .sections import read_section
from .values import clamp, format_value, parse_value

ATTRIBUTES_HEADER = "Attributes"

_FLAG_PATTERNS = {
    "enabled": re.compile(r"^\s*>?\s*AidChaos\s+enabled\s*:\s*(true|false)\b", re.IGNORECASE),
    "result_output": re.compile(r"^\s*>?\s*Result\s+Output\s+enabled\s*:\s*(true|false)\b", re.IGNORECASE),
    "inheritance_processed": re.compile(r"^\s*>?\s*Inheritance\s+processed\s*:\s*(true|false)\b", re.IGNORECASE),
}


@dataclass
class ParsedCard:
    settings: Settings
    has_attributes: bool
    skipped: list[str] = field(default_factory=list)


def build_card_text(settings: Settings, names: list[str]) -> str:
    """Canonical card text. Catalog attributes first, in catalog order."""
    lines = [
        "AidChaos enabled: " + ("true" if settings.enabled else "false"),
        "Result Output enabled: " + ("true" if settings.result_output else "false"),
        "Inheritance processed: " + ("true" if settings.inheritance_processed else "false"),
        "",
        ATTRIBUTES_HEADER + ":",
    ]
    ordered = [n for n in names if n in settings.attributes]
    ordered += [n for n in settings.attributes if n not in names]
    for name in ordered:
        lines.append(f"- {name}: {format_value(settings.attributes[name])}")
    return "\n".join(lines)


def parse_card(raw: str, catalog: AttributeCatalog) -> ParsedCard:
    settings = Settings()
    skipped: list[str] = []
    for line in (raw or "").splitlines():
        for flag, pattern in _FLAG_PATTERNS.items():
            m = pattern.match(line)
            if m:
                setattr(settings, flag, m.group(1).lower() == "true")

    for entry in read_section(raw or "", ATTRIBUTES_HEADER):
        name = catalog.canonical(entry.name)
        value = parse_value(entry.raw)
        if name is None or value is None:
            skipped.append(entry.name)
            continue
        settings.attributes[name] = clamp(value)

    return ParsedCard(settings=settings, has_attributes=bool(settings.attributes), skipped=skipped)
