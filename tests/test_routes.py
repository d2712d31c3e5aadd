"""Tests for the HTTP host (FastAPI TestClient)."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from aidchaos import storage
from aidchaos.app import create_app
from aidchaos.config import Options
from aidchaos.models import SETTINGS_TITLE, SETTINGS_TYPE

SETTINGS_ENTRY = (
    "AidChaos enabled: true\n"
    "Result Output enabled: true\n"
    "Inheritance processed: true\n"
    "\n"
    "Attributes:\n"
    "- Strength: 7"
)


@pytest.fixture
def client():
    return TestClient(create_app(Path("data-tests"), Options()))


@pytest.fixture
def slug(client):
    resp = client.post("/api/sessions", json={"title": "Test Run"})
    assert resp.status_code == 201
    return resp.json()["slug"]


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok"}


def test_create_session(client, slug):
    assert slug == "test-run"
    assert client.get("/api/sessions").json() == ["test-run"]
    assert client.post("/api/sessions", json={"title": "Test Run"}).status_code == 409


def test_detect(client):
    resp = client.post("/api/detect", json={"text": "I climb and search"})
    assert resp.json() == {"attributes": ["Dexterity", "Perception"]}


# ── Cards ────────────────────────────────────────────────


def test_card_crud(client, slug):
    resp = client.put(f"/api/sessions/{slug}/cards", json={"title": "Warrior", "entry": "w", "type": "Class"})
    assert resp.json()["title"] == "Warrior"

    assert [c["title"] for c in client.get(f"/api/sessions/{slug}/cards").json()] == ["Warrior"]
    assert client.get(f"/api/sessions/{slug}/cards", params={"type": "Race"}).json() == []

    assert client.delete(f"/api/sessions/{slug}/cards/Warrior").json() == {"ok": True}
    assert client.delete(f"/api/sessions/{slug}/cards/Warrior").status_code == 404


def test_unknown_session_404(client):
    assert client.get("/api/sessions/nope/cards").status_code == 404
    assert client.get("/api/sessions/nope/settings").status_code == 404
    assert client.post("/api/sessions/nope/hooks/input", json={"text": "x"}).status_code == 404


# ── Settings ─────────────────────────────────────────────


def test_settings_inherit_on_first_read(client, slug):
    client.put(f"/api/sessions/{slug}/cards", json={
        "title": "Warrior", "type": "Class", "entry": "Attributes:\n- Strength: 8",
    })
    client.post(f"/api/sessions/{slug}/hooks/input", json={"text": "", "memory": "Class: Warrior"})

    data = client.get(f"/api/sessions/{slug}/settings").json()
    assert data["fallback"] is None
    assert data["settings"]["attributes"]["Strength"] == 8
    assert data["settings"]["inheritance_processed"] is True

    cards = client.get(f"/api/sessions/{slug}/cards", params={"type": SETTINGS_TYPE}).json()
    assert [c["title"] for c in cards] == [SETTINGS_TITLE]


# ── Hooks ────────────────────────────────────────────────


def test_full_turn_over_http(client, slug):
    client.put(f"/api/sessions/{slug}/cards", json={
        "title": SETTINGS_TITLE, "type": SETTINGS_TYPE, "entry": SETTINGS_ENTRY,
    })

    resp = client.post(f"/api/sessions/{slug}/hooks/input", json={"text": "> I push the door"})
    assert resp.json()["text"] == "> I push the door"

    resp = client.post(f"/api/sessions/{slug}/hooks/context", json={
        "text": "The door is heavy.",
        "stop": True,
        "history": [{"text": "> I push the door", "type": "do"}],
    })
    data = resp.json()
    assert data["stop"] is True
    assert data["text"].startswith("The door is heavy.\n[")
    assert "depended on Strength" in data["text"]

    out = client.post(f"/api/sessions/{slug}/hooks/output", json={"text": "It moves."}).json()
    assert out["text"].startswith("[AIDCHAOS Strength (")
    assert out["text"].endswith("]\nIt moves.")

    again = client.post(f"/api/sessions/{slug}/hooks/output", json={"text": "Quiet."}).json()
    assert again["text"] == "Quiet."


def test_unknown_hook_echoes(client, slug):
    resp = client.post(f"/api/sessions/{slug}/hooks/teardown", json={"text": "same"})
    assert resp.json() == {"text": "same", "stop": False}


def test_malformed_state_file_does_not_break_hooks(client, slug):
    (storage.session_dir(slug) / "state.json").write_text("{not json")
    resp = client.post(f"/api/sessions/{slug}/hooks/output", json={"text": "Quiet."})
    assert resp.status_code == 200
    assert resp.json()["text"] == "Quiet."


def test_malformed_cards_file_does_not_break_hooks(client, slug):
    (storage.session_dir(slug) / "cards.json").write_text('[{"nope": 1}]')
    resp = client.post(f"/api/sessions/{slug}/hooks/input", json={"text": "> I jump"})
    assert resp.status_code == 200
    assert resp.json()["text"] == "> I jump"

    resp = client.post(f"/api/sessions/{slug}/hooks/context", json={
        "text": "Story",
        "history": [{"text": "> I push the door", "type": "do"}],
    })
    assert resp.status_code == 200
    assert "depended on Strength" in resp.json()["text"]
