from dataclasses import dataclass, field
from enum import Enum
from uuid import uuid4


class SessionNotFoundError(Exception):
    """Raised when a page session id is unknown or already unmounted."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"Page session '{session_id}' not found")


class RsvpSubmissionInProgressError(Exception):
    """Raised when an RSVP is submitted while a previous one is still pending."""

    def __init__(self) -> None:
        super().__init__("An RSVP submission is already in progress")


class GenerationInProgressError(Exception):
    """Raised when a guestbook message is requested while one is being generated."""

    def __init__(self) -> None:
        super().__init__("A guestbook message is already being generated")


class Section(str, Enum):
    """Page sections in document order."""

    HOME = "home"
    GALLERY = "gallery"
    GUESTBOOK = "guestbook"
    REGISTRY = "registry"


# Order of the links in the navigation bar.
NAVIGATION_ORDER = (Section.HOME, Section.GALLERY, Section.REGISTRY, Section.GUESTBOOK)


class SubmissionState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"


class AttendanceStatus(str, Enum):
    ACCEPTS = "Joyfully Accepts"
    DECLINES = "Regretfully Declines"

    @classmethod
    def from_attending(cls, attending: bool) -> "AttendanceStatus":
        return cls.ACCEPTS if attending else cls.DECLINES


class Tone(str, Enum):
    HEARTFELT = "Heartfelt"
    FUNNY = "Funny"
    POETIC = "Poetic"
    FORMAL = "Formal"


@dataclass(frozen=True)
class TimeRemaining:
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @property
    def total_seconds(self) -> int:
        return self.days * 86400 + self.hours * 3600 + self.minutes * 60 + self.seconds


@dataclass(frozen=True)
class RsvpPayload:
    """Normalized RSVP as sent to the intake endpoint."""

    full_name: str
    email: str
    status: AttendanceStatus
    guest_count: int
    song_request: str
    dietary_notes: str

    def to_wire(self) -> dict:
        return {
            "fullName": self.full_name,
            "email": self.email,
            "status": self.status.value,
            "guests": self.guest_count,
            "songRequest": self.song_request,
            "dietaryRestrictions": self.dietary_notes,
        }


@dataclass(frozen=True)
class SubmissionOk:
    """The request left without a transport error. Says nothing about the server's verdict."""


@dataclass(frozen=True)
class SubmissionTransportError:
    reason: str


SubmissionResult = SubmissionOk | SubmissionTransportError


@dataclass(frozen=True)
class Generated:
    text: str


@dataclass(frozen=True)
class FallbackUsed:
    text: str
    reason: str


GenerationResult = Generated | FallbackUsed


@dataclass
class GuestbookDraft:
    relationship: str = ""
    tone: Tone = Tone.HEARTFELT
    generated_text: str = ""
    author_name: str = ""


@dataclass(frozen=True)
class GuestbookEntry:
    author_name: str
    message: str
    id: str = field(default_factory=lambda: str(uuid4()))


@dataclass(frozen=True)
class RsvpForm:
    """Raw RSVP form input, as entered by the guest."""

    name: str
    email: str
    attending: bool = True
    guests: int = 1
    plus_one_name: str = ""
    plus_one_dietary: str = ""
    song_request: str = ""
    dietary_restrictions: str = ""
