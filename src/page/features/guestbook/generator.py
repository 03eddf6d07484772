"""Guestbook message suggestions from Gemini, with local fallbacks."""

import logging
from typing import Protocol

from src.config.settings import settings
from src.page.dtos import FallbackUsed, Generated, GenerationResult, Tone
from src.page.features.guestbook.prompts import build_guestbook_prompt

logger = logging.getLogger(__name__)

MISSING_CREDENTIAL = "missing_credential"
EMPTY_RESPONSE = "empty_response"

MISSING_CREDENTIAL_FALLBACK = "Wishing you a lifetime of happiness, {couple_names}! (AI Key missing)"
EMPTY_RESPONSE_FALLBACK = "Wishing you both a lifetime of love and happiness!"
PROVIDER_ERROR_FALLBACK = (
    "Wishing you both a lifetime of love and happiness! So excited to celebrate with you."
)


class TextProvider(Protocol):
    """Protocol for a text-generation provider."""

    async def __call__(self, prompt: str) -> str:
        """Return the generated text for `prompt`. May raise on provider errors."""
        ...


class GeneratorConfig(Protocol):
    GEMINI_API_KEY: str
    gemini_model: str
    couple_names: str


class GeminiTextProvider:
    """Default text provider using the google-genai SDK."""

    def __init__(self, config: GeneratorConfig = settings):
        self._config = config
        self._client = None

    def _get_client(self):
        if self._client is None:
            from google import genai

            self._client = genai.Client(api_key=self._config.GEMINI_API_KEY)
        return self._client

    async def __call__(self, prompt: str) -> str:
        response = await self._get_client().aio.models.generate_content(
            model=self._config.gemini_model,
            contents=prompt,
        )
        return response.text or ""


class GuestbookMessageGenerator:
    """
    Produces a message suggestion for the guestbook.

    Every outcome yields usable text: a missing API key, a provider error and an
    empty reply each fall back to a fixed message. The reason is kept on the
    result for diagnostics only.
    """

    def __init__(
        self,
        provider: TextProvider | None = None,
        config: GeneratorConfig = settings,
    ):
        self._config = config
        self._provider = provider or GeminiTextProvider(config)

    async def generate(self, relationship: str, tone: Tone) -> GenerationResult:
        if not self._config.GEMINI_API_KEY:
            logger.warning("GEMINI_API_KEY is not set, using the fallback guestbook message")
            return FallbackUsed(
                text=MISSING_CREDENTIAL_FALLBACK.format(couple_names=self._config.couple_names),
                reason=MISSING_CREDENTIAL,
            )

        prompt = build_guestbook_prompt(self._config.couple_names, relationship, tone)
        try:
            text = await self._provider(prompt)
        except Exception as e:
            logger.exception("Guestbook message generation failed")
            return FallbackUsed(text=PROVIDER_ERROR_FALLBACK, reason=repr(e))

        text = (text or "").strip()
        if not text:
            return FallbackUsed(text=EMPTY_RESPONSE_FALLBACK, reason=EMPTY_RESPONSE)
        return Generated(text=text)


def get_message_generator() -> GuestbookMessageGenerator:
    """Factory for the message generator. Override in tests."""
    return GuestbookMessageGenerator(provider=GeminiTextProvider(settings), config=settings)
