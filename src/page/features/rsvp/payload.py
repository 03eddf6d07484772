from src.page.dtos import AttendanceStatus, RsvpForm, RsvpPayload


def build_rsvp_payload(form: RsvpForm) -> RsvpPayload:
    """
    Shape the form input into the payload the intake endpoint expects.

    With more than one guest, a companion name is joined onto the primary name and
    companion dietary notes are appended under a "Plus One" label. Without a
    companion value the primary value passes through verbatim.
    """
    guest_count = int(form.guests)
    has_companions = guest_count > 1

    full_name = form.name
    if has_companions and form.plus_one_name:
        full_name = f"{form.name} & {form.plus_one_name}"

    dietary_notes = form.dietary_restrictions
    if has_companions and form.plus_one_dietary:
        primary = f"{form.dietary_restrictions}. " if form.dietary_restrictions else ""
        dietary_notes = f"{primary}Plus One: {form.plus_one_dietary}"

    return RsvpPayload(
        full_name=full_name,
        email=form.email,
        status=AttendanceStatus.from_attending(form.attending),
        guest_count=guest_count,
        song_request=form.song_request,
        dietary_notes=dietary_notes,
    )
