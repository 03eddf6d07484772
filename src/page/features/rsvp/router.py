from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, EmailStr, Field

from src.page.dependencies import get_page_session
from src.page.dtos import RsvpForm, RsvpSubmissionInProgressError, SubmissionState, SubmissionTransportError
from src.page.features.rsvp.pipeline import RSVP_FAILURE_NOTICE, RsvpPipeline
from src.page.session import PageSession
from src.page.urls import RSVP_DIALOG_URL, RSVP_URL

router = APIRouter()


class RsvpSubmit(BaseModel):
    """RSVP form fields. Name and email are required; guests is the selected option."""

    name: str = Field(min_length=1)
    email: EmailStr
    attending: bool = True
    guests: int = Field(default=1, ge=1, le=5)
    plus_one_name: str = ""
    plus_one_dietary: str = ""
    song_request: str = ""
    dietary_restrictions: str = ""


class RsvpStatusResponse(BaseModel):
    status: SubmissionState
    dialog_open: bool
    can_submit: bool


def build_rsvp_status_response(pipeline: RsvpPipeline) -> RsvpStatusResponse:
    return RsvpStatusResponse(
        status=pipeline.status,
        dialog_open=pipeline.dialog_open,
        can_submit=pipeline.can_submit,
    )


@router.get(RSVP_URL, response_model=RsvpStatusResponse)
async def get_rsvp_status(session: PageSession = Depends(get_page_session)) -> RsvpStatusResponse:
    return build_rsvp_status_response(session.rsvp)


@router.post(RSVP_DIALOG_URL, response_model=RsvpStatusResponse)
async def open_rsvp_dialog(session: PageSession = Depends(get_page_session)) -> RsvpStatusResponse:
    session.rsvp.open_dialog()
    return build_rsvp_status_response(session.rsvp)


@router.delete(RSVP_DIALOG_URL, response_model=RsvpStatusResponse)
async def close_rsvp_dialog(session: PageSession = Depends(get_page_session)) -> RsvpStatusResponse:
    session.rsvp.close_dialog()
    return build_rsvp_status_response(session.rsvp)


@router.post(RSVP_URL, response_model=RsvpStatusResponse)
async def submit_rsvp(
    rsvp_data: RsvpSubmit,
    session: PageSession = Depends(get_page_session),
) -> RsvpStatusResponse:
    """
    Forward the RSVP to the intake endpoint.
    Success only means the request was sent; the endpoint's verdict is not visible.
    """
    form = RsvpForm(
        name=rsvp_data.name,
        email=str(rsvp_data.email),
        attending=rsvp_data.attending,
        guests=rsvp_data.guests,
        plus_one_name=rsvp_data.plus_one_name,
        plus_one_dietary=rsvp_data.plus_one_dietary,
        song_request=rsvp_data.song_request,
        dietary_restrictions=rsvp_data.dietary_restrictions,
    )

    try:
        result = await session.rsvp.submit(form)
    except RsvpSubmissionInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e))

    if isinstance(result, SubmissionTransportError):
        raise HTTPException(status_code=502, detail=RSVP_FAILURE_NOTICE)

    return build_rsvp_status_response(session.rsvp)
