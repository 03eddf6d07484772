from fastapi import APIRouter

from .features.countdown.router import router as countdown_router
from .features.guestbook.router import router as guestbook_router
from .features.rsvp.router import router as rsvp_router
from .features.section_tracker.router import router as section_tracker_router
from .features.session.router import router as session_router

router = APIRouter()

router.include_router(session_router)
router.include_router(countdown_router)
router.include_router(section_tracker_router)
router.include_router(rsvp_router)
router.include_router(guestbook_router)
