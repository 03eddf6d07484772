from fastapi import Depends, HTTPException

from src.page.dtos import SessionNotFoundError
from src.page.session import PageSession, PageSessionStore

session_store = PageSessionStore()


def get_session_store() -> PageSessionStore:
    """Dependency to get the page session store. Override in tests."""
    return session_store


def get_page_session(
    session_id: str,
    store: PageSessionStore = Depends(get_session_store),
) -> PageSession:
    try:
        return store.get(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
