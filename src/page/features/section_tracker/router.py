from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.page.dependencies import get_page_session
from src.page.dtos import NAVIGATION_ORDER, Section
from src.page.session import PageSession
from src.page.urls import SECTIONS_LAYOUT_URL, SECTIONS_SCROLL_URL

router = APIRouter()


class LayoutSubmit(BaseModel):
    """Top offsets of the rendered sections, in document pixels."""

    offsets: dict[Section, float]


class ScrollSubmit(BaseModel):
    scroll_y: float


class NavigationLink(BaseModel):
    section: Section
    href: str
    active: bool


class ActiveSectionResponse(BaseModel):
    active: Section
    navigation: list[NavigationLink]


def build_active_section_response(active: Section) -> ActiveSectionResponse:
    return ActiveSectionResponse(
        active=active,
        navigation=[
            NavigationLink(section=section, href=f"#{section.value}", active=section == active)
            for section in NAVIGATION_ORDER
        ],
    )


@router.put(SECTIONS_LAYOUT_URL, response_model=ActiveSectionResponse)
async def update_layout(
    layout: LayoutSubmit,
    session: PageSession = Depends(get_page_session),
) -> ActiveSectionResponse:
    active = session.sections.update_layout(layout.offsets)
    return build_active_section_response(active)


@router.post(SECTIONS_SCROLL_URL, response_model=ActiveSectionResponse)
async def scroll(
    position: ScrollSubmit,
    session: PageSession = Depends(get_page_session),
) -> ActiveSectionResponse:
    active = session.sections.on_scroll(position.scroll_y)
    return build_active_section_response(active)
