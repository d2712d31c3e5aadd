"""Health check, resolved settings, and stateless detection endpoints."""

from fastapi import APIRouter, HTTPException, Request

from aidchaos import storage
from aidchaos.attributes import AttributeCatalog
from aidchaos.matching import TriggerMatcher
from aidchaos.sheets import CharacterSheetResolver

from .models import DetectBody

router = APIRouter()

_matcher = TriggerMatcher(AttributeCatalog())


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.get("/sessions/{slug}/settings")
async def get_settings(slug: str, request: Request):
    """Resolve settings for a session (runs inheritance on first use)."""
    if not storage.session_exists(slug):
        raise HTTPException(404, "Session not found")
    options = request.app.state.options
    resolver = CharacterSheetResolver(
        storage.get_cards(slug),
        AttributeCatalog(),
        memory=storage.get_memory(slug),
        base_type=options.base_type,
        modifier_types=options.modifier_types,
    )
    guarded = resolver.resolve()
    return {
        "settings": guarded.value.model_dump(),
        "fallback": guarded.fallback.value if guarded.fallback else None,
    }


@router.post("/detect")
async def detect(body: DetectBody):
    """Attributes an action text would roll for."""
    return {"attributes": _matcher.detect_all_attributes(body.text)}
