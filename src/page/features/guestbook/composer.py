import logging

from src.page.dtos import (
    GenerationInProgressError,
    GenerationResult,
    GuestbookDraft,
    GuestbookEntry,
    Tone,
)
from src.page.features.guestbook.generator import GuestbookMessageGenerator

logger = logging.getLogger(__name__)

SAMPLE_ENTRY = GuestbookEntry(
    id="1",
    author_name="Aunt Sarah",
    message="Wishing you both a lifetime of love and joy. So happy for you!",
)


class GuestbookLedger:
    """Signed guestbook entries, newest first. Entries are never edited or removed."""

    def __init__(self, entries: list[GuestbookEntry] | None = None):
        self._entries = list(entries) if entries is not None else [SAMPLE_ENTRY]

    @property
    def entries(self) -> tuple[GuestbookEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def prepend(self, entry: GuestbookEntry) -> None:
        self._entries.insert(0, entry)


class GuestbookComposer:
    """Draft a message, optionally with a generated suggestion, then sign it into the ledger."""

    def __init__(
        self,
        generator: GuestbookMessageGenerator,
        ledger: GuestbookLedger | None = None,
    ):
        self._generator = generator
        self.ledger = ledger or GuestbookLedger()
        self.draft = GuestbookDraft()
        self._generating = False

    @property
    def is_generating(self) -> bool:
        return self._generating

    @property
    def can_generate(self) -> bool:
        return bool(self.draft.relationship) and not self._generating

    @property
    def can_sign(self) -> bool:
        return bool(self.draft.author_name) and bool(self.draft.generated_text)

    def set_relationship(self, relationship: str) -> None:
        self.draft.relationship = relationship

    def select_tone(self, tone: Tone) -> None:
        self.draft.tone = Tone(tone)

    def edit_message(self, text: str) -> None:
        self.draft.generated_text = text

    def set_author_name(self, author_name: str) -> None:
        self.draft.author_name = author_name

    async def generate(self) -> GenerationResult | None:
        """
        Request a suggestion for the current relationship and tone.
        Returns None without calling the provider when no relationship is set.
        """
        if self._generating:
            raise GenerationInProgressError()
        if not self.draft.relationship:
            return None

        self._generating = True
        try:
            result = await self._generator.generate(self.draft.relationship, self.draft.tone)
        finally:
            self._generating = False

        # replaces any edits made to a previous suggestion
        self.draft.generated_text = result.text
        return result

    def sign(self) -> GuestbookEntry | None:
        if not self.can_sign:
            return None

        entry = GuestbookEntry(
            author_name=self.draft.author_name,
            message=self.draft.generated_text,
        )
        self.ledger.prepend(entry)
        logger.info(f"Guestbook signed by {entry.author_name} ({entry.id})")

        self.draft.relationship = ""
        self.draft.generated_text = ""
        self.draft.author_name = ""
        return entry
