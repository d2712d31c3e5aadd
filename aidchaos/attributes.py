"""Attribute catalog: names, trigger words, and narrator guidance per tier.

Default attributes (trigger domain):
  Strength      physical force, lifting, pushing, breaking
  Dexterity     fine motor tasks, balancing, dodging, climbing
  Intelligence  solving, analyzing, figuring out
  Charisma      persuasion, negotiation, intimidation, seduction
  Perception    noticing, sensing, detecting

Triggers containing whitespace are phrases ("pick lock"), matched as substrings
of the raw action text. Everything else is a single token matched against the
tokenized text. Guidance is keyed by Tier.key ("critical_success" ...).

A catalog can be built from any mapping of the same shape as
DEFAULT_ATTRIBUTES; canonical casing of the name is preserved, triggers are
lowercased.
"""

from dataclasses import dataclass
from typing import Any

from aidchaos.models import Tier

DEFAULT_ATTRIBUTES: dict[str, dict[str, Any]] = {
    "Strength": {
        "triggers": [
            "lift", "push", "pull", "break", "carry", "shove", "throw", "crush", "pry", "wrestle",
            "smash", "bash", "strike", "hit", "punch", "kick", "slam", "haul", "drag", "tackle",
            "rip", "tear", "bend", "heave", "ram", "force", "grapple", "press", "burst", "knock",
            "overpower", "pound", "shatter", "thrust", "brace", "strain", "snap",
        ],
        "guidance": {
            "critical_success": "The character greatly exceeds normal physical limits and gains an impressive advantage.",
            "success": "The character succeeds at the physical task in a solid and believable way.",
            "partial_success": "The character makes progress, but the physical outcome is incomplete or costly.",
            "failure": "The physical attempt does not succeed and the obstacle remains in place.",
            "critical_failure": "The character badly misjudges their physical power and suffers a setback or harm.",
        },
    },
    "Dexterity": {
        "triggers": [
            "dodge", "climb", "balance", "catch", "sneak", "pickpocket", "acrobat", "jump", "steal", "parry",
            "roll", "flip", "vault", "evade", "weave", "sidestep", "crawl", "slide", "duck", "twist",
            "maneuver", "aim", "draw", "fire", "reload", "dance", "juggle", "lockpick", "pick lock",
            "tie", "untie", "disarm", "feint", "backflip", "tiptoe", "land", "react", "grab", "snatch", "silent",
        ],
        "guidance": {
            "critical_success": "The character executes the precise movement with extraordinary grace and speed, achieving an optimal result.",
            "success": "The character performs the agile or precise action competently and effectively.",
            "partial_success": "The character manages the delicate task, but the execution is flawed or draws unwanted attention.",
            "failure": "The character cannot execute the fine motor or agile maneuver as intended.",
            "critical_failure": "The character loses control, stumbles badly, or creates a loud commotion that worsens the situation.",
        },
    },
    "Intelligence": {
        "triggers": [
            "analyze", "solve", "calculate", "deduce", "research", "study", "investigate", "learn", "plan",
            "think", "remember", "reason", "strategize", "inspect", "examine", "read", "interpret", "translate", "decipher",
            "invent", "design", "engineer", "craft", "create", "synthesize", "formulate", "compare", "predict", "diagnose",
            "recall", "evaluate", "compile", "crosscheck", "hypothesize", "experiment",
            "teach", "educate", "program", "estimate", "map",
        ],
        "guidance": {
            "critical_success": "The character gains a brilliant insight or solves the problem in a remarkably efficient and creative way.",
            "success": "The character figures out the puzzle, recalls the information, or completes the intellectual task successfully.",
            "partial_success": "The character grasps part of the solution or finds a clue, but key details remain unclear or require more effort.",
            "failure": "The character cannot solve the problem, recall the fact, or understand the mechanism at this time.",
            "critical_failure": "The character draws a dangerously wrong conclusion or forgets crucial information, leading to a significant mistake.",
        },
    },
    "Charisma": {
        "triggers": [
            "persuade", "convince", "seduce", "negotiate", "charm", "intimidate", "flatter", "lie", "beguile",
            "encourage", "inspire", "motivate", "cheer", "taunt", "mock", "deceive", "perform", "entertain", "comfort",
            "lead", "command", "manipulate", "coerce", "rally", "boast", "compliment", "impress", "debate", "argue",
            "question", "beg", "plead", "befriend", "threaten", "scold", "praise", "propose", "flirt", "sing", "bluff",
        ],
        "guidance": {
            "critical_success": "The character wins over the other party completely, forming a strong positive impression or gaining exceptional cooperation.",
            "success": "The character succeeds in the social interaction; the target is inclined to react positively and be more open toward them.",
            "partial_success": "The character makes some headway socially, but the target remains guarded or asks for something in return.",
            "failure": "The social attempt falls flat; the target is unmoved, skeptical, or uninterested.",
            "critical_failure": "The character offends, alienates, or provokes the target, making the situation significantly worse.",
        },
    },
    "Perception": {
        "triggers": [
            "see", "spot", "hear", "listen", "discover", "detect", "observe", "scan", "search",
            "notice", "smell", "sense", "feel", "peek", "survey", "inspect",
            "track", "follow", "glimpse", "watch", "recognize", "identify", "perceive",
            "overhear", "taste", "sniff", "discern", "clue", "look around",
        ],
        "guidance": {
            "critical_success": "The character notices hidden or subtle details that reveal important secrets or give a decisive advantage.",
            "success": "The character perceives the relevant details, clues, or dangers in the environment clearly.",
            "partial_success": "The character picks up on something, but the information is incomplete or ambiguous.",
            "failure": "The character fails to notice the important detail, clue, or threat.",
            "critical_failure": "The character misinterprets what they sense, leading to a false assumption or walking into danger.",
        },
    },
}


@dataclass(frozen=True)
class TriggerSet:
    singles: frozenset[str]
    phrases: tuple[str, ...]


class AttributeCatalog:
    """Read-only registry of attribute definitions."""

    def __init__(self, definitions: dict[str, dict[str, Any]] | None = None) -> None:
        self._definitions = dict(definitions if definitions is not None else DEFAULT_ATTRIBUTES)
        self._lookup = {name.lower(): name for name in self._definitions}
        self._triggers: dict[str, TriggerSet] | None = None

    def names(self) -> list[str]:
        return list(self._definitions)

    def canonical(self, name: str) -> str | None:
        """Return the catalog casing of name, or None if unknown."""
        if not isinstance(name, str):
            return None
        return self._lookup.get(name.strip().lower())

    def guidance(self, name: str, tier: Tier) -> str | None:
        definition = self._definitions.get(name)
        if not definition:
            return None
        return definition.get("guidance", {}).get(tier.key) or None

    def triggers(self, name: str) -> TriggerSet:
        return self.all_triggers().get(name, TriggerSet(frozenset(), ()))

    def all_triggers(self) -> dict[str, TriggerSet]:
        """Split raw triggers into single tokens and phrases, once."""
        if self._triggers is None:
            normalized: dict[str, TriggerSet] = {}
            for name, definition in self._definitions.items():
                singles: set[str] = set()
                phrases: list[str] = []
                for raw in definition.get("triggers", []):
                    if not isinstance(raw, str):
                        continue
                    trigger = raw.lower().strip()
                    if not trigger:
                        continue
                    if any(ch.isspace() for ch in trigger):
                        phrases.append(trigger)
                    else:
                        singles.add(trigger)
                normalized[name] = TriggerSet(frozenset(singles), tuple(phrases))
            self._triggers = normalized
        return self._triggers
