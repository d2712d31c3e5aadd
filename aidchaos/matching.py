"""Attribute detection in free-text actions.

Two independent detectors, unioned:
  explicit  the attribute name itself appears as a whole word
            ("I use my Strength to ...")
  triggers  a trigger phrase is a substring of the lowercased text, or a
            single-word trigger is one of the tokens

Phrases are checked before single tokens. Each attribute stops at its first
matching trigger; other attributes are still checked. Results come back in
catalog order, deduplicated.
"""

import logging
import re

from aidchaos.attributes import AttributeCatalog

logger = logging.getLogger(__name__)

_BRACKETS_RE = re.compile(r"[\"“”‘’<>\[\]{}()]")
_SPLIT_RE = re.compile(r"[^a-z0-9']+")


def tokenize(text: str) -> list[str]:
    """Lowercase text and split it into word tokens. Apostrophes stay inside words."""
    if not isinstance(text, str):
        return []
    cleaned = _BRACKETS_RE.sub(" ", text.lower())
    return [t for t in _SPLIT_RE.split(cleaned) if t]


class TriggerMatcher:
    def __init__(self, catalog: AttributeCatalog) -> None:
        self.catalog = catalog
        self._name_patterns = {
            name: re.compile(r"\b" + re.escape(name.lower()) + r"\b", re.IGNORECASE)
            for name in catalog.names()
        }

    def tokenize(self, text: str) -> list[str]:
        return tokenize(text)

    def detect_explicit_mentions(self, text: str) -> set[str]:
        if not isinstance(text, str):
            return set()
        return {name for name, pattern in self._name_patterns.items() if pattern.search(text)}

    def detect_trigger_matches(self, tokens: list[str], raw_text: str) -> set[str]:
        matched: set[str] = set()
        try:
            lower = (raw_text or "").lower()
            triggers = self.catalog.all_triggers()

            for name, trigger_set in triggers.items():
                for phrase in trigger_set.phrases:
                    if phrase in lower:
                        logger.debug("trigger phrase %r -> %s", phrase, name)
                        matched.add(name)
                        break

            token_set = set(tokens)
            for name, trigger_set in triggers.items():
                if name in matched:
                    continue
                hit = next((t for t in trigger_set.singles if t in token_set), None)
                if hit is not None:
                    logger.debug("trigger word %r -> %s", hit, name)
                    matched.add(name)
        except Exception as e:
            logger.warning(f"Trigger matching failed: {e}")
        return matched

    def detect_all_attributes(self, text: str) -> list[str]:
        """Every attribute relevant to text, in catalog order."""
        found = self.detect_explicit_mentions(text)
        found |= self.detect_trigger_matches(self.tokenize(text), text if isinstance(text, str) else "")
        return [name for name in self.catalog.names() if name in found]
