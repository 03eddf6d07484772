import logging

from src.page.dtos import (
    RsvpForm,
    RsvpSubmissionInProgressError,
    SubmissionOk,
    SubmissionResult,
    SubmissionState,
    SubmissionTransportError,
)
from src.page.features.rsvp.intake import RsvpIntakeClient
from src.page.features.rsvp.payload import build_rsvp_payload

logger = logging.getLogger(__name__)

RSVP_FAILURE_NOTICE = "There was an error sending your RSVP. Please try again."


class RsvpPipeline:
    """
    RSVP dialog state: idle -> submitting -> success, back to idle on a transport failure.

    Opening or closing the dialog starts a new attempt. A request still in flight
    from an earlier attempt runs to completion but its result is discarded.
    """

    def __init__(self, intake_client: RsvpIntakeClient):
        self._intake_client = intake_client
        self._status = SubmissionState.IDLE
        self._dialog_open = False
        self._form: RsvpForm | None = None
        self._attempt = 0

    @property
    def status(self) -> SubmissionState:
        return self._status

    @property
    def dialog_open(self) -> bool:
        return self._dialog_open

    @property
    def form(self) -> RsvpForm | None:
        """Input of the current attempt, kept after a failure so the guest can retry."""
        return self._form

    @property
    def can_submit(self) -> bool:
        return self._status != SubmissionState.SUBMITTING

    def open_dialog(self) -> None:
        self._dialog_open = True
        self._new_attempt()

    def close_dialog(self) -> None:
        self._dialog_open = False
        self._form = None
        self._new_attempt()

    def _new_attempt(self) -> None:
        self._attempt += 1
        self._status = SubmissionState.IDLE

    async def submit(self, form: RsvpForm) -> SubmissionResult:
        if not self.can_submit:
            raise RsvpSubmissionInProgressError()

        attempt = self._attempt
        self._form = form
        self._status = SubmissionState.SUBMITTING

        payload = build_rsvp_payload(form)
        try:
            result = await self._intake_client(payload)
        except Exception as e:
            logger.exception("Error submitting RSVP")
            result = SubmissionTransportError(reason=repr(e))

        if attempt != self._attempt:
            logger.info(f"Discarding result of a dismissed RSVP attempt: {result}")
            return result

        if isinstance(result, SubmissionOk):
            self._status = SubmissionState.SUCCESS
        else:
            self._status = SubmissionState.IDLE
        return result
