"""Story card record store.

A card is {type, title, keys, entry, description, updated_at}. Titles are
matched case-insensitively; types too. The resolver only ever talks to the
RecordStore protocol, so a host can plug in its own collection.

CardStore keeps cards in memory. JsonCardStore persists the same list to a
JSON file after every write.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from aidchaos.models import Card

logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    def find(self, title: str) -> Card | None: ...

    def find_by_type(self, type: str, title: str) -> Card | None: ...

    def find_all(self, type: str) -> list[Card]: ...

    def upsert(self, title: str, entry: str, type: str = "") -> Card: ...

    def mutate(self, card: Card, entry: str) -> Card: ...


def _same(a: str, b: str) -> bool:
    return a.strip().lower() == b.strip().lower()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class CardStore:
    def __init__(self, cards: list[Card] | None = None) -> None:
        self.cards: list[Card] = list(cards) if cards else []

    def find(self, title: str) -> Card | None:
        for card in self.cards:
            if _same(card.title, title):
                return card
        return None

    def find_by_type(self, type: str, title: str) -> Card | None:
        for card in self.cards:
            if _same(card.type, type) and _same(card.title, title):
                return card
        return None

    def find_all(self, type: str) -> list[Card]:
        return [c for c in self.cards if _same(c.type, type)]

    def upsert(self, title: str, entry: str, type: str = "") -> Card:
        """Create the card if absent, otherwise overwrite its entry."""
        existing = self.find(title)
        if existing is not None:
            return self.mutate(existing, entry)
        card = Card(type=type, title=title, keys=title, entry=entry)
        self.cards.append(card)
        self._flush()
        return card

    def mutate(self, card: Card, entry: str) -> Card:
        card.entry = entry
        card.updated_at = _now()
        self._flush()
        return card

    def delete(self, title: str) -> bool:
        card = self.find(title)
        if card is None:
            return False
        self.cards.remove(card)
        self._flush()
        return True

    def _flush(self) -> None:
        pass


class JsonCardStore(CardStore):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(self._load(path))

    @staticmethod
    def _load(path: Path) -> list[Card]:
        """Cards from path; an unreadable file loads as an empty store."""
        if not path.is_file():
            return []
        try:
            data = json.loads(path.read_text())
            if not isinstance(data, list):
                raise TypeError(f"expected a list, got {type(data).__name__}")
            return [Card.model_validate(c) for c in data]
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError, TypeError) as e:
            logger.warning(f"Ignoring unreadable {path}: {e}")
            return []

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps([c.model_dump() for c in self.cards], indent=2))
