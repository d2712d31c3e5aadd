"""Session lifecycle and hook endpoints."""

from fastapi import APIRouter, HTTPException, Request

from aidchaos import storage
from aidchaos.history import ListHistory
from aidchaos.pipeline import Session, run_hook

from .models import CreateSession, HookBody, HookResponse

router = APIRouter()


def _session_for(slug: str, request: Request) -> Session:
    return Session(
        state=storage.get_state(slug),
        cards=storage.get_cards(slug),
        history=ListHistory(storage.get_history(slug)),
        memory=storage.get_memory(slug),
        options=request.app.state.options,
    )


@router.get("/sessions")
async def list_sessions():
    return storage.list_sessions()


@router.post("/sessions", status_code=201)
async def create_session(body: CreateSession):
    """Create a session directory; the slug is derived from the title."""
    slug = storage.slugify(body.title)
    if storage.session_exists(slug):
        raise HTTPException(409, "Session already exists")
    storage.create_session(slug)
    return {"slug": slug}


@router.post("/sessions/{slug}/hooks/{hook}", response_model=HookResponse)
async def post_hook(slug: str, hook: str, body: HookBody, request: Request):
    """Run one hook pass. History and memory in the body replace the stored ones."""
    if not storage.session_exists(slug):
        raise HTTPException(404, "Session not found")
    if body.history is not None:
        storage.save_history(slug, body.history)
    if body.memory is not None:
        storage.save_memory(slug, body.memory)

    session = _session_for(slug, request)
    result = run_hook(hook, body.text, body.stop, session)
    storage.save_state(slug, dict(session.state))

    if hook == "context":
        text, stop = result
        return HookResponse(text=text, stop=stop)
    return HookResponse(text=result, stop=body.stop)
