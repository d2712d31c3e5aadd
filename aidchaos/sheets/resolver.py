"""Settings resolution with Class/Race inheritance.

First pass of a session (no attribute values in the settings card and
inheritance not yet processed):
  1. memory line "Class: <Name>"  → Class card → "Attributes:" base values
  2. memory line "Race: <Name>"   → Race card  → "Attribute-Modifiers:" added on top
     (one lookup per configured modifier type; disabled on either side wins)
  3. floor + clamp to 1..10, mark inheritance processed, write the settings card
  4. strip the consumed sections from the source cards so the narrator never
     reads raw mechanics

Every later pass reads the settings card as-is, fills gaps with 5, clamps,
and rewrites the card only when its canonical text differs.
"""

from __future__ import annotations

import logging
import re

from aidchaos.attributes import AttributeCatalog
from aidchaos.errors import Fallback, Guarded
from aidchaos.models import (
    DEFAULT_ATTRIBUTE_VALUE,
    SETTINGS_TITLE,
    SETTINGS_TYPE,
    Card,
    Settings,
)
from aidchaos.storage.cards import RecordStore

from .sections import read_section, strip_section
from .settings_card import build_card_text, parse_card
from .values import clamp, compose, parse_value

logger = logging.getLogger(__name__)

BASE_HEADER = "Attributes"
MODIFIER_HEADER = "Attribute-Modifiers"


def find_reference(memory: str, card_type: str) -> str | None:
    """Name from the first "<card_type>: <Name>" line in memory."""
    if not isinstance(memory, str) or not card_type:
        return None
    pattern = re.compile(r"^\s*[-*>]?\s*" + re.escape(card_type) + r"\s*:\s*(\S.*?)\s*$", re.IGNORECASE)
    for line in memory.splitlines():
        m = pattern.match(line)
        if m:
            return m.group(1)
    return None


class CharacterSheetResolver:
    def __init__(
        self,
        cards: RecordStore | None,
        catalog: AttributeCatalog,
        memory: str = "",
        base_type: str = "Class",
        modifier_types: list[str] | None = None,
    ) -> None:
        self.cards = cards
        self.catalog = catalog
        self.memory = memory or ""
        self.base_type = base_type
        self.modifier_types = list(modifier_types) if modifier_types is not None else ["Race"]

    def defaults(self) -> Settings:
        return Settings(attributes={n: DEFAULT_ATTRIBUTE_VALUE for n in self.catalog.names()})

    def load(self) -> Settings:
        return self.resolve().value

    def resolve(self) -> Guarded[Settings]:
        if self.cards is None:
            logger.warning("No record store available, using default settings")
            return Guarded(self.defaults(), Fallback.ENVIRONMENT)
        try:
            card = self.cards.find(SETTINGS_TITLE)
            parsed = parse_card(card.entry if card else "", self.catalog)
            if not parsed.has_attributes and not parsed.settings.inheritance_processed:
                settings, skipped = self._inherit(parsed.settings)
            else:
                settings = self._normalize(card, parsed.settings)
                skipped = parsed.skipped
            if skipped:
                logger.warning(f"Attribute lines skipped: {skipped}")
                return Guarded(settings, Fallback.PARSE)
            return Guarded(settings)
        except Exception:
            logger.exception("Settings resolution failed, using defaults")
            return Guarded(self.defaults(), Fallback.UNEXPECTED)

    # ── Inheritance ─────────────────────────────────────────

    def _inherit(self, settings: Settings) -> tuple[Settings, list[str]]:
        values: dict[str, float] = {n: DEFAULT_ATTRIBUTE_VALUE for n in self.catalog.names()}
        consumed: list[tuple[Card, str]] = []
        skipped: list[str] = []

        base_card = self._referenced_card(self.base_type)
        if base_card is not None:
            for name, value in self._read_values(base_card, BASE_HEADER, skipped):
                values[name] = value
            consumed.append((base_card, BASE_HEADER))

        for mod_type in self.modifier_types:
            mod_card = self._referenced_card(mod_type)
            if mod_card is None:
                continue
            for name, value in self._read_values(mod_card, MODIFIER_HEADER, skipped):
                values[name] = compose(values[name], value)
            consumed.append((mod_card, MODIFIER_HEADER))

        settings.attributes = {name: clamp(value) for name, value in values.items()}
        settings.inheritance_processed = True
        self.cards.upsert(SETTINGS_TITLE, build_card_text(settings, self.catalog.names()), SETTINGS_TYPE)
        logger.info("Inherited attributes: %s", settings.attributes)

        for source, header in consumed:
            self._strip_source(source, header)
        return settings, skipped

    def _referenced_card(self, card_type: str) -> Card | None:
        name = find_reference(self.memory, card_type)
        if not name:
            return None
        card = self.cards.find_by_type(card_type, name)
        if card is None:
            logger.warning(f"Memory names {card_type} '{name}' but no such card exists")
        return card

    def _read_values(self, card: Card, header: str, skipped: list[str]) -> list[tuple[str, float]]:
        values = []
        for entry in read_section(card.entry, header):
            name = self.catalog.canonical(entry.name)
            value = parse_value(entry.raw)
            if name is None or value is None:
                logger.debug("skipping %s line %r: %r", card.title, entry.name, entry.raw)
                skipped.append(f"{card.title}: {entry.name}")
                continue
            values.append((name, value))
        return values

    def _strip_source(self, card: Card, header: str) -> None:
        try:
            stripped = strip_section(card.entry, header, self.catalog.names())
            if stripped != card.entry:
                self.cards.mutate(card, stripped)
        except Exception as e:
            logger.warning(f"Could not strip {header} from card '{card.title}': {e}")

    # ── Normalization ───────────────────────────────────────

    def _normalize(self, card: Card | None, settings: Settings) -> Settings:
        for name in self.catalog.names():
            settings.attributes.setdefault(name, DEFAULT_ATTRIBUTE_VALUE)
        settings.attributes = {n: clamp(v) for n, v in settings.attributes.items()}

        text = build_card_text(settings, self.catalog.names())
        if card is None or card.entry != text:
            logger.debug("rewriting settings card")
            self.cards.upsert(SETTINGS_TITLE, text, SETTINGS_TYPE)
        return settings
