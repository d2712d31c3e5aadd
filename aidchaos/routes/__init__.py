"""FastAPI API endpoints under /api.

Endpoint groups: health + settings + detect, sessions and hook passes, story
cards. Each session's resources (cards, state, history, memory) are nested
under /api/sessions/{slug}/.
"""

from fastapi import APIRouter

from .cards import router as cards_router
from .hooks import router as hooks_router
from .settings import router as settings_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(hooks_router)
router.include_router(cards_router)
