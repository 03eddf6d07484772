import pytest

from src.page.dependencies import get_session_store
from src.page.tests.inmemory import FakeTextProvider, create_test_generator, create_test_store
from src.page.urls import (
    GUESTBOOK_DRAFT_URL,
    GUESTBOOK_ENTRIES_URL,
    GUESTBOOK_GENERATE_URL,
    SESSIONS_URL,
)


@pytest.fixture
async def session_id(client):
    response = await client.post(SESSIONS_URL)
    return response.json()["id"]


@pytest.mark.asyncio
async def test_compose_and_sign(client, session_id):
    draft = await client.patch(
        GUESTBOOK_DRAFT_URL.format(session_id=session_id),
        json={"relationship": "Best Friend", "tone": "Poetic"},
    )
    assert draft.json()["can_generate"] is True

    generated = await client.post(GUESTBOOK_GENERATE_URL.format(session_id=session_id))
    assert generated.status_code == 200
    assert generated.json()["text"] == "So happy for you both!"
    assert generated.json()["fallback"] is False

    await client.patch(
        GUESTBOOK_DRAFT_URL.format(session_id=session_id),
        json={"generated_text": "So happy for you both! See you there.", "author_name": "Sam"},
    )
    signed = await client.post(GUESTBOOK_ENTRIES_URL.format(session_id=session_id))

    data = signed.json()
    assert data["signed"] is True
    assert data["entry"]["author_name"] == "Sam"
    assert data["entry"]["message"] == "So happy for you both! See you there."
    assert [e["author_name"] for e in data["entries"]] == ["Sam", "Aunt Sarah"]
    assert data["draft"]["relationship"] == ""
    assert data["draft"]["tone"] == "Poetic"


@pytest.mark.asyncio
async def test_generate_without_relationship(client, session_id):
    response = await client.post(GUESTBOOK_GENERATE_URL.format(session_id=session_id))

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_generate_falls_back_when_provider_fails(client_factory):
    generator = create_test_generator(provider=FakeTextProvider(error=TimeoutError()))
    store = create_test_store(generator=generator)

    async with client_factory({get_session_store: lambda: store}) as client:
        session_id = (await client.post(SESSIONS_URL)).json()["id"]
        await client.patch(
            GUESTBOOK_DRAFT_URL.format(session_id=session_id), json={"relationship": "Cousin"}
        )
        response = await client.post(GUESTBOOK_GENERATE_URL.format(session_id=session_id))

    store.close_all()
    assert response.status_code == 200
    assert response.json()["fallback"] is True
    assert response.json()["draft"]["generated_text"] == response.json()["text"]


@pytest.mark.asyncio
async def test_sign_without_name_does_not_change_ledger(client, session_id):
    await client.patch(
        GUESTBOOK_DRAFT_URL.format(session_id=session_id),
        json={"generated_text": "Congratulations!"},
    )

    response = await client.post(GUESTBOOK_ENTRIES_URL.format(session_id=session_id))
    entries = await client.get(GUESTBOOK_ENTRIES_URL.format(session_id=session_id))

    assert response.status_code == 200
    assert response.json()["signed"] is False
    assert response.json()["entry"] is None
    assert [e["author_name"] for e in entries.json()["entries"]] == ["Aunt Sarah"]


@pytest.mark.asyncio
async def test_invalid_tone_is_rejected(client, session_id):
    response = await client.patch(
        GUESTBOOK_DRAFT_URL.format(session_id=session_id), json={"tone": "Sarcastic"}
    )

    assert response.status_code == 422
