"""Story card CRUD endpoints."""

from fastapi import APIRouter, HTTPException

from aidchaos import storage

from .models import CardBody

router = APIRouter()


def _require_session(slug: str) -> None:
    if not storage.session_exists(slug):
        raise HTTPException(404, "Session not found")


@router.get("/sessions/{slug}/cards")
async def get_cards(slug: str, type: str | None = None):
    """List cards, optionally filtered by type."""
    _require_session(slug)
    store = storage.get_cards(slug)
    cards = store.find_all(type) if type else store.cards
    return [c.model_dump() for c in cards]


@router.put("/sessions/{slug}/cards")
async def put_card(slug: str, body: CardBody):
    """Create or overwrite a card by title."""
    _require_session(slug)
    card = storage.get_cards(slug).upsert(body.title, body.entry, body.type)
    return card.model_dump()


@router.delete("/sessions/{slug}/cards/{title}")
async def delete_card(slug: str, title: str):
    _require_session(slug)
    if not storage.get_cards(slug).delete(title):
        raise HTTPException(404, "Card not found")
    return {"ok": True}
