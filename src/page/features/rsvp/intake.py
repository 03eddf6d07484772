import logging
from typing import Protocol

import httpx

from src.config.settings import settings
from src.page.dtos import RsvpPayload, SubmissionOk, SubmissionResult, SubmissionTransportError

logger = logging.getLogger(__name__)


class RsvpIntakeClient(Protocol):
    """Protocol for the remote RSVP intake endpoint."""

    async def __call__(self, payload: RsvpPayload) -> SubmissionResult:
        """Send one RSVP. Must not raise for transport failures."""
        ...


class IntakeConfig(Protocol):
    rsvp_intake_url: str
    rsvp_timeout_seconds: float


class GoogleScriptIntakeClient:
    """
    Posts RSVPs to a Google Apps Script web app.

    The script's response is opaque to callers: neither the status code nor the
    body is read, so a request that reached the script counts as sent even if the
    script rejected it. Only transport failures are reported.
    """

    def __init__(
        self,
        http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
        config: IntakeConfig = settings,
    ):
        self._http_client_class = http_client_class
        self._config = config

    async def __call__(self, payload: RsvpPayload) -> SubmissionResult:
        try:
            async with self._http_client_class(
                timeout=self._config.rsvp_timeout_seconds,
                follow_redirects=True,
            ) as client:
                await client.post(
                    self._config.rsvp_intake_url,
                    headers={"Content-Type": "application/json"},
                    json=payload.to_wire(),
                )
        except httpx.HTTPError as e:
            logger.error(f"Error submitting RSVP for {payload.email}: {e!r}")
            return SubmissionTransportError(reason=str(e) or type(e).__name__)

        logger.info(f"RSVP sent for {payload.email} ({payload.status.value})")
        return SubmissionOk()


def get_rsvp_intake_client() -> RsvpIntakeClient:
    """Factory for the intake client. Override in tests."""
    return GoogleScriptIntakeClient(http_client_class=httpx.AsyncClient, config=settings)
