from datetime import datetime
from functools import lru_cache
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    debug: bool = True
    cors_origins: list[str] = ["*"]

    ENVIRONMENT: str = "Production"

    # Event
    couple_names: str = "Lourens and Ané"
    wedding_date: datetime = datetime(2026, 11, 21, 0, 0, 0)
    event_timezone: str = "Africa/Johannesburg"

    # Page
    countdown_interval_seconds: float = 1.0
    section_lookahead: float = 100.0
    session_idle_ttl_seconds: float = 1800.0

    # RSVP intake (Google Apps Script web app)
    rsvp_intake_url: str = (
        "https://script.google.com/macros/s/"
        "AKfycbyUpd7-ku4gQwdKcj8c6kSE9zX88GboD6Fk5dYR_ZcFq_cDmANsWI3pTKdYtqHqY9HH0g/exec"
    )
    rsvp_timeout_seconds: float = 15.0

    # Guestbook message generation (Gemini)
    GEMINI_API_KEY: str = ""
    gemini_model: str = "gemini-3-flash-preview"

    SENTRY_DSN: str = ""
    SENTRY_TRACES_SAMPLE_RATE: float = 0.0
    SENTRY_PROFILES_SAMPLE_RATE: float = 0.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def target_instant(self) -> datetime:
        """Wedding date as an aware datetime in the venue's timezone."""
        if self.wedding_date.tzinfo is not None:
            return self.wedding_date
        return self.wedding_date.replace(tzinfo=ZoneInfo(self.event_timezone))


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
