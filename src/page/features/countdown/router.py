from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.page.dependencies import get_page_session
from src.page.session import PageSession
from src.page.urls import COUNTDOWN_URL

router = APIRouter()


class CountdownResponse(BaseModel):
    target: datetime
    days: int
    hours: int
    minutes: int
    seconds: int


def build_countdown_response(session: PageSession) -> CountdownResponse:
    remaining = session.time_remaining
    return CountdownResponse(
        target=session.countdown.target,
        days=remaining.days,
        hours=remaining.hours,
        minutes=remaining.minutes,
        seconds=remaining.seconds,
    )


@router.get(COUNTDOWN_URL, response_model=CountdownResponse)
async def get_countdown(session: PageSession = Depends(get_page_session)) -> CountdownResponse:
    """Last value published by the session's countdown ticker."""
    return build_countdown_response(session)
