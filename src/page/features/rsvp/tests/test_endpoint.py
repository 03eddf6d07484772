import pytest

from src.page.dependencies import get_session_store
from src.page.tests.inmemory import InMemoryIntakeClient, create_test_store
from src.page.urls import RSVP_DIALOG_URL, RSVP_URL, SESSIONS_URL

RSVP_DATA = {
    "name": "Alex",
    "email": "alex@example.com",
    "attending": True,
    "guests": "2",
    "plus_one_name": "Sam",
    "plus_one_dietary": "Vegan",
    "song_request": "Dancing Queen - ABBA",
    "dietary_restrictions": "",
}


@pytest.mark.asyncio
async def test_submit_rsvp(client_factory):
    intake = InMemoryIntakeClient()
    store = create_test_store(intake_client=intake)

    async with client_factory({get_session_store: lambda: store}) as client:
        session_id = (await client.post(SESSIONS_URL)).json()["id"]
        await client.post(RSVP_DIALOG_URL.format(session_id=session_id))
        response = await client.post(RSVP_URL.format(session_id=session_id), json=RSVP_DATA)

    store.close_all()
    assert response.status_code == 200
    assert response.json() == {"status": "success", "dialog_open": True, "can_submit": True}
    assert intake.payloads[0].to_wire() == {
        "fullName": "Alex & Sam",
        "email": "alex@example.com",
        "status": "Joyfully Accepts",
        "guests": 2,
        "songRequest": "Dancing Queen - ABBA",
        "dietaryRestrictions": "Plus One: Vegan",
    }


@pytest.mark.asyncio
async def test_submit_rsvp_transport_failure(client_factory):
    store = create_test_store(intake_client=InMemoryIntakeClient(fail_with="network down"))

    async with client_factory({get_session_store: lambda: store}) as client:
        session_id = (await client.post(SESSIONS_URL)).json()["id"]
        await client.post(RSVP_DIALOG_URL.format(session_id=session_id))
        response = await client.post(RSVP_URL.format(session_id=session_id), json=RSVP_DATA)
        status = await client.get(RSVP_URL.format(session_id=session_id))

    pipeline = store.get(session_id).rsvp
    store.close_all()
    assert response.status_code == 502
    assert response.json()["detail"] == "There was an error sending your RSVP. Please try again."
    assert status.json()["status"] == "idle"
    assert pipeline.form.name == "Alex"
    assert pipeline.form.plus_one_dietary == "Vegan"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "missing_field",
    ["name", "email"],
)
async def test_submit_rsvp_requires_name_and_email(client, missing_field):
    session_id = (await client.post(SESSIONS_URL)).json()["id"]
    rsvp_data = {k: v for k, v in RSVP_DATA.items() if k != missing_field}

    response = await client.post(RSVP_URL.format(session_id=session_id), json=rsvp_data)

    assert response.status_code == 422


@pytest.mark.asyncio
@pytest.mark.parametrize("guests", [0, 6, "many"])
async def test_submit_rsvp_guest_count_out_of_range(client, guests):
    session_id = (await client.post(SESSIONS_URL)).json()["id"]

    response = await client.post(
        RSVP_URL.format(session_id=session_id), json={**RSVP_DATA, "guests": guests}
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_reopening_dialog_after_success_resets_status(client):
    session_id = (await client.post(SESSIONS_URL)).json()["id"]
    await client.post(RSVP_DIALOG_URL.format(session_id=session_id))
    await client.post(RSVP_URL.format(session_id=session_id), json=RSVP_DATA)

    closed = await client.delete(RSVP_DIALOG_URL.format(session_id=session_id))
    reopened = await client.post(RSVP_DIALOG_URL.format(session_id=session_id))

    assert closed.json() == {"status": "idle", "dialog_open": False, "can_submit": True}
    assert reopened.json() == {"status": "idle", "dialog_open": True, "can_submit": True}
