from src.page.dtos import Tone

MAX_MESSAGE_WORDS = 40

GUESTBOOK_PROMPT = """Write a wedding guestbook message for a couple named {couple_names}.
The message is from a person who is the "{relationship}" of the couple.
The tone should be "{tone}".
Keep it under {max_words} words.
Be specific to the relationship if possible.
Do not include "Dear..." or "Sincerely...", just the body of the message."""


def build_guestbook_prompt(couple_names: str, relationship: str, tone: Tone) -> str:
    return GUESTBOOK_PROMPT.format(
        couple_names=couple_names,
        relationship=relationship,
        tone=tone.value,
        max_words=MAX_MESSAGE_WORDS,
    )
