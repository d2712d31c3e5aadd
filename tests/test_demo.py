"""Tests for the demo session and its inheritance."""

from aidchaos import storage
from aidchaos.attributes import AttributeCatalog
from aidchaos.demo import DEMO_SLUG, create_demo_data
from aidchaos.history import ListHistory
from aidchaos.pipeline import Session, context_pass


def test_demo_session_created():
    create_demo_data()
    assert storage.session_exists(DEMO_SLUG)
    assert storage.get_cards(DEMO_SLUG).find_by_type("Class", "Warrior") is not None
    assert "Race: Dwarf" in storage.get_memory(DEMO_SLUG)


def test_demo_is_recreated_fresh():
    create_demo_data()
    storage.save_state(DEMO_SLUG, {"junk": True})
    create_demo_data()
    assert storage.get_state(DEMO_SLUG) == {}


def test_demo_turn_inherits_dwarf_warrior(stub_random):
    create_demo_data()
    session = Session(
        cards=storage.get_cards(DEMO_SLUG),
        history=ListHistory(storage.get_history(DEMO_SLUG)),
        memory=storage.get_memory(DEMO_SLUG),
        rng=stub_random(10),
    )
    ctx = context_pass("The road is blocked.", False, session)
    assert [r.attribute for r in ctx.results] == ["Strength"]
    assert ctx.results[0].base == 20 + 9 * 5

    attrs = session.sheet_resolver().load().attributes
    assert attrs == {"Strength": 9, "Dexterity": 4, "Intelligence": 4, "Charisma": 4, "Perception": 5}
    assert "Attributes:" not in storage.get_cards(DEMO_SLUG).find("Warrior").entry
    assert set(attrs) == set(AttributeCatalog().names())
