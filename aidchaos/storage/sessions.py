"""Per-session files for the HTTP host.

  sessions/<slug>/
    cards.json    story cards (settings, Class, Race ...)
    state.json    shared state mapping ferried between passes
    history.json  action history, oldest first
    memory.txt    free-text memory blob
"""

import json
import logging
from pathlib import Path
from typing import Any

from .cards import JsonCardStore
from .core import sessions_dir

logger = logging.getLogger(__name__)


def session_dir(slug: str) -> Path:
    return sessions_dir() / slug


def create_session(slug: str) -> Path:
    path = session_dir(slug)
    path.mkdir(parents=True, exist_ok=True)
    return path


def session_exists(slug: str) -> bool:
    return session_dir(slug).is_dir()


def list_sessions() -> list[str]:
    if not sessions_dir().is_dir():
        return []
    return sorted(p.name for p in sessions_dir().iterdir() if p.is_dir())


def get_cards(slug: str) -> JsonCardStore:
    return JsonCardStore(session_dir(slug) / "cards.json")


def _read_json(path: Path, expected: type, default):
    if not path.is_file():
        return default
    try:
        data = json.loads(path.read_text())
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"Ignoring unreadable {path.name}: {e}")
        return default
    if not isinstance(data, expected):
        logger.warning(f"Ignoring {path.name}: expected {expected.__name__}, got {type(data).__name__}")
        return default
    return data


def get_state(slug: str) -> dict[str, Any]:
    """Load the shared state mapping. Returns {} if missing or unreadable."""
    return _read_json(session_dir(slug) / "state.json", dict, {})


def save_state(slug: str, state: dict[str, Any]) -> None:
    path = session_dir(slug) / "state.json"
    path.write_text(json.dumps(state, indent=2))


def get_history(slug: str) -> list[dict[str, Any]]:
    return _read_json(session_dir(slug) / "history.json", list, [])


def save_history(slug: str, entries: list[dict[str, Any]]) -> None:
    path = session_dir(slug) / "history.json"
    path.write_text(json.dumps(entries, indent=2))


def get_memory(slug: str) -> str:
    path = session_dir(slug) / "memory.txt"
    if not path.is_file():
        return ""
    return path.read_text()


def save_memory(slug: str, memory: str) -> None:
    (session_dir(slug) / "memory.txt").write_text(memory)
