"""Create a demo session for development/testing."""

import shutil

from aidchaos import storage

DEMO_SLUG = "demo"

DEMO_MEMORY = (
    "You are Brannoc, a dwarven warrior escorting a merchant caravan.\n"
    "Class: Warrior\n"
    "Race: Dwarf\n"
)

DEMO_CARDS = [
    {
        "type": "Class",
        "title": "Warrior",
        "entry": (
            "Warriors are trained in arms and armor, relying on strength and grit.\n"
            "\n"
            "Attributes:\n"
            "- Strength: 7\n"
            "- Dexterity: 5\n"
            "- Intelligence: 4\n"
            "- Charisma: 5\n"
            "- Perception: 5\n"
            "\n"
            "Warriors favor heavy weapons."
        ),
    },
    {
        "type": "Race",
        "title": "Dwarf",
        "entry": (
            "Dwarves are stout folk of the deep mountains.\n"
            "\n"
            "Attribute-Modifiers:\n"
            "- Strength: +2\n"
            "- Dexterity: -1\n"
            "- Charisma: -1"
        ),
    },
]

DEMO_HISTORY = [
    {"text": "The caravan halts before a collapsed bridge.", "type": "story"},
    {"text": "> You push the fallen tree off the road.", "type": "do"},
]


def create_demo_data() -> None:
    """Wipe the demo session and create it fresh."""
    path = storage.session_dir(DEMO_SLUG)
    if path.exists():
        shutil.rmtree(path)
    storage.create_session(DEMO_SLUG)

    cards = storage.get_cards(DEMO_SLUG)
    for card in DEMO_CARDS:
        cards.upsert(card["title"], card["entry"], card["type"])

    storage.save_memory(DEMO_SLUG, DEMO_MEMORY)
    storage.save_history(DEMO_SLUG, DEMO_HISTORY)
