import logging
from collections.abc import Callable
from datetime import datetime
from typing import Protocol
from uuid import uuid4

from src.config.settings import settings
from src.page.dtos import SessionNotFoundError, TimeRemaining
from src.page.features.countdown.engine import CountdownTicker, utc_now
from src.page.features.guestbook.composer import GuestbookComposer
from src.page.features.guestbook.generator import GuestbookMessageGenerator, get_message_generator
from src.page.features.rsvp.intake import RsvpIntakeClient, get_rsvp_intake_client
from src.page.features.rsvp.pipeline import RsvpPipeline
from src.page.features.section_tracker.tracker import SectionTracker

logger = logging.getLogger(__name__)


class PageConfig(Protocol):
    target_instant: datetime
    countdown_interval_seconds: float
    section_lookahead: float
    session_idle_ttl_seconds: float


class PageSession:
    """View-state of one mounted page. Each component only touches its own part."""

    def __init__(
        self,
        session_id: str,
        target: datetime,
        intake_client: RsvpIntakeClient,
        generator: GuestbookMessageGenerator,
        clock: Callable[[], datetime] = utc_now,
        countdown_interval: float = 1.0,
        section_lookahead: float = 100.0,
    ):
        self.id = session_id
        self.time_remaining = TimeRemaining()
        self.last_seen = clock()
        self.countdown = CountdownTicker(
            target,
            on_tick=self._set_time_remaining,
            clock=clock,
            interval=countdown_interval,
        )
        self.sections = SectionTracker(lookahead=section_lookahead)
        self.rsvp = RsvpPipeline(intake_client)
        self.guestbook = GuestbookComposer(generator)

    def _set_time_remaining(self, remaining: TimeRemaining) -> None:
        self.time_remaining = remaining

    def mount(self) -> None:
        self.countdown.start()

    def unmount(self) -> None:
        self.countdown.stop()


class PageSessionStore:
    """In-memory registry of mounted page sessions."""

    def __init__(
        self,
        config: PageConfig = settings,
        intake_client: RsvpIntakeClient | None = None,
        generator: GuestbookMessageGenerator | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._config = config
        self._intake_client = intake_client or get_rsvp_intake_client()
        self._generator = generator or get_message_generator()
        self._clock = clock
        self._sessions: dict[str, PageSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def create(self) -> PageSession:
        """Mount a new page session. Must be called from a running event loop."""
        self.expire_idle()
        session = PageSession(
            session_id=str(uuid4()),
            target=self._config.target_instant,
            intake_client=self._intake_client,
            generator=self._generator,
            clock=self._clock,
            countdown_interval=self._config.countdown_interval_seconds,
            section_lookahead=self._config.section_lookahead,
        )
        session.mount()
        self._sessions[session.id] = session
        logger.debug(f"Mounted page session {session.id}")
        return session

    def get(self, session_id: str) -> PageSession:
        """Look up a session and mark it as seen. Idle sessions are unmounted instead."""
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        now = self._clock()
        if self._is_idle(session, now):
            self.close(session_id)
            raise SessionNotFoundError(session_id)
        session.last_seen = now
        return session

    def _is_idle(self, session: PageSession, now: datetime) -> bool:
        idle = now - session.last_seen
        return idle.total_seconds() > self._config.session_idle_ttl_seconds

    def expire_idle(self) -> int:
        """Unmount sessions not seen within the idle TTL. Returns how many were closed."""
        now = self._clock()
        stale = [sid for sid, session in self._sessions.items() if self._is_idle(session, now)]
        for session_id in stale:
            self.close(session_id)
        if stale:
            logger.info(f"Expired {len(stale)} idle page session(s)")
        return len(stale)

    def close(self, session_id: str) -> None:
        session = self._sessions.pop(session_id, None)
        if session is None:
            raise SessionNotFoundError(session_id)
        session.unmount()
        logger.debug(f"Unmounted page session {session_id}")

    def close_all(self) -> None:
        for session_id in list(self._sessions):
            self.close(session_id)
