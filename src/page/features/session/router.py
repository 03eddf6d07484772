from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel

from src.page.dependencies import get_page_session, get_session_store
from src.page.dtos import SessionNotFoundError
from src.page.features.countdown.router import CountdownResponse, build_countdown_response
from src.page.features.guestbook.router import (
    DraftResponse,
    EntryResponse,
    build_draft_response,
    build_entry_response,
)
from src.page.features.rsvp.router import RsvpStatusResponse, build_rsvp_status_response
from src.page.features.section_tracker.router import (
    ActiveSectionResponse,
    build_active_section_response,
)
from src.page.session import PageSession, PageSessionStore
from src.page.urls import SESSION_URL, SESSIONS_URL

router = APIRouter()


class GuestbookSnapshot(BaseModel):
    draft: DraftResponse
    entries: list[EntryResponse]


class PageSessionResponse(BaseModel):
    id: str
    countdown: CountdownResponse
    sections: ActiveSectionResponse
    rsvp: RsvpStatusResponse
    guestbook: GuestbookSnapshot


def build_page_session_response(session: PageSession) -> PageSessionResponse:
    return PageSessionResponse(
        id=session.id,
        countdown=build_countdown_response(session),
        sections=build_active_section_response(session.sections.active),
        rsvp=build_rsvp_status_response(session.rsvp),
        guestbook=GuestbookSnapshot(
            draft=build_draft_response(session.guestbook),
            entries=[build_entry_response(entry) for entry in session.guestbook.ledger.entries],
        ),
    )


@router.post(SESSIONS_URL, response_model=PageSessionResponse, status_code=201)
async def mount_session(store: PageSessionStore = Depends(get_session_store)) -> PageSessionResponse:
    """Mount a page session and start its countdown."""
    session = store.create()
    return build_page_session_response(session)


@router.get(SESSION_URL, response_model=PageSessionResponse)
async def get_session(session: PageSession = Depends(get_page_session)) -> PageSessionResponse:
    return build_page_session_response(session)


@router.delete(SESSION_URL, status_code=204)
async def unmount_session(
    session_id: str,
    store: PageSessionStore = Depends(get_session_store),
) -> Response:
    """Unmount a page session. Its countdown stops; in-flight requests are left to finish."""
    try:
        store.close(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
