SESSIONS_URL = "/sessions"
SESSION_URL = "/sessions/{session_id}"

COUNTDOWN_URL = "/sessions/{session_id}/countdown"

SECTIONS_LAYOUT_URL = "/sessions/{session_id}/sections/layout"
SECTIONS_SCROLL_URL = "/sessions/{session_id}/sections/scroll"

RSVP_URL = "/sessions/{session_id}/rsvp"
RSVP_DIALOG_URL = "/sessions/{session_id}/rsvp/dialog"

GUESTBOOK_DRAFT_URL = "/sessions/{session_id}/guestbook/draft"
GUESTBOOK_GENERATE_URL = "/sessions/{session_id}/guestbook/draft/generate"
GUESTBOOK_ENTRIES_URL = "/sessions/{session_id}/guestbook/entries"
