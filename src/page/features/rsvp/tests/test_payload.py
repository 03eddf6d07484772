import pytest

from src.page.dtos import AttendanceStatus, RsvpForm
from src.page.features.rsvp.payload import build_rsvp_payload


def make_form(**kwargs) -> RsvpForm:
    defaults = {"name": "Alex", "email": "alex@example.com"}
    return RsvpForm(**{**defaults, **kwargs})


def test_companion_name_is_joined_for_multiple_guests():
    payload = build_rsvp_payload(make_form(guests=2, plus_one_name="Sam"))

    assert payload.full_name == "Alex & Sam"
    assert payload.guest_count == 2


def test_single_guest_ignores_companion_fields():
    payload = build_rsvp_payload(
        make_form(
            guests=1,
            plus_one_name="Sam",
            plus_one_dietary="Vegan",
            dietary_restrictions="No nuts",
        )
    )

    assert payload.full_name == "Alex"
    assert payload.dietary_notes == "No nuts"


def test_missing_companion_name_keeps_primary_name():
    payload = build_rsvp_payload(make_form(guests=3))

    assert payload.full_name == "Alex"


@pytest.mark.parametrize(
    "primary, companion, expected",
    [
        ("No nuts", "Vegan", "No nuts. Plus One: Vegan"),
        ("", "Vegan", "Plus One: Vegan"),
        ("No nuts", "", "No nuts"),
        ("", "", ""),
    ],
)
def test_dietary_notes_for_multiple_guests(primary, companion, expected):
    payload = build_rsvp_payload(
        make_form(guests=2, dietary_restrictions=primary, plus_one_dietary=companion)
    )

    assert payload.dietary_notes == expected


def test_attendance_is_sent_as_label():
    assert build_rsvp_payload(make_form(attending=True)).status == AttendanceStatus.ACCEPTS
    assert build_rsvp_payload(make_form(attending=False)).status == AttendanceStatus.DECLINES


def test_wire_format():
    payload = build_rsvp_payload(
        make_form(
            attending=False,
            guests=2,
            plus_one_name="Sam",
            song_request="September - Earth, Wind & Fire",
            dietary_restrictions="Vegetarian",
        )
    )

    assert payload.to_wire() == {
        "fullName": "Alex & Sam",
        "email": "alex@example.com",
        "status": "Regretfully Declines",
        "guests": 2,
        "songRequest": "September - Earth, Wind & Fire",
        "dietaryRestrictions": "Vegetarian",
    }
