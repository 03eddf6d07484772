from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from src.page.dependencies import get_page_session
from src.page.dtos import FallbackUsed, GenerationInProgressError, GuestbookEntry, Tone
from src.page.features.guestbook.composer import GuestbookComposer
from src.page.session import PageSession
from src.page.urls import GUESTBOOK_DRAFT_URL, GUESTBOOK_ENTRIES_URL, GUESTBOOK_GENERATE_URL

router = APIRouter()


class DraftUpdate(BaseModel):
    """Partial update of the guestbook draft. Omitted fields are left as they are."""

    relationship: str | None = None
    tone: Tone | None = None
    generated_text: str | None = None
    author_name: str | None = None


class DraftResponse(BaseModel):
    relationship: str
    tone: Tone
    generated_text: str
    author_name: str
    is_generating: bool
    can_generate: bool
    can_sign: bool


class GenerateResponse(BaseModel):
    text: str
    fallback: bool
    draft: DraftResponse


class EntryResponse(BaseModel):
    id: str
    author_name: str
    message: str


class EntriesResponse(BaseModel):
    entries: list[EntryResponse]


class SignResponse(BaseModel):
    signed: bool
    entry: EntryResponse | None = None
    entries: list[EntryResponse]
    draft: DraftResponse


def build_draft_response(composer: GuestbookComposer) -> DraftResponse:
    draft = composer.draft
    return DraftResponse(
        relationship=draft.relationship,
        tone=draft.tone,
        generated_text=draft.generated_text,
        author_name=draft.author_name,
        is_generating=composer.is_generating,
        can_generate=composer.can_generate,
        can_sign=composer.can_sign,
    )


def build_entry_response(entry: GuestbookEntry) -> EntryResponse:
    return EntryResponse(id=entry.id, author_name=entry.author_name, message=entry.message)


@router.get(GUESTBOOK_DRAFT_URL, response_model=DraftResponse)
async def get_draft(session: PageSession = Depends(get_page_session)) -> DraftResponse:
    return build_draft_response(session.guestbook)


@router.patch(GUESTBOOK_DRAFT_URL, response_model=DraftResponse)
async def update_draft(
    update: DraftUpdate,
    session: PageSession = Depends(get_page_session),
) -> DraftResponse:
    composer = session.guestbook
    if update.relationship is not None:
        composer.set_relationship(update.relationship)
    if update.tone is not None:
        composer.select_tone(update.tone)
    if update.generated_text is not None:
        composer.edit_message(update.generated_text)
    if update.author_name is not None:
        composer.set_author_name(update.author_name)
    return build_draft_response(composer)


@router.post(GUESTBOOK_GENERATE_URL, response_model=GenerateResponse)
async def generate_message(session: PageSession = Depends(get_page_session)) -> GenerateResponse:
    """
    Ask the text provider for a message suggestion.
    Provider problems come back as a fallback message, never as an error.
    """
    composer = session.guestbook
    if not composer.draft.relationship:
        raise HTTPException(status_code=422, detail="A relationship is required to generate a message")

    try:
        result = await composer.generate()
    except GenerationInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return GenerateResponse(
        text=result.text,
        fallback=isinstance(result, FallbackUsed),
        draft=build_draft_response(composer),
    )


@router.get(GUESTBOOK_ENTRIES_URL, response_model=EntriesResponse)
async def list_entries(session: PageSession = Depends(get_page_session)) -> EntriesResponse:
    return EntriesResponse(
        entries=[build_entry_response(entry) for entry in session.guestbook.ledger.entries]
    )


@router.post(GUESTBOOK_ENTRIES_URL, response_model=SignResponse)
async def sign_guestbook(session: PageSession = Depends(get_page_session)) -> SignResponse:
    """Sign the guestbook with the current draft. Does nothing unless name and message are set."""
    composer = session.guestbook
    entry = composer.sign()
    return SignResponse(
        signed=entry is not None,
        entry=build_entry_response(entry) if entry else None,
        entries=[build_entry_response(e) for e in composer.ledger.entries],
        draft=build_draft_response(composer),
    )
