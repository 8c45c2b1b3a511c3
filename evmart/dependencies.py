from functools import lru_cache

from .config import get_settings
from .schemas.auth import SessionUser
from .session_store import SessionStore
from .storage import SqliteStorage


class NotAuthenticated(Exception):
    pass


@lru_cache
def get_session_store() -> SessionStore:
    """
    Returns the application session store, persisted at the configured path.
    """
    settings = get_settings()
    return SessionStore(SqliteStorage(settings.SESSION_PATH))


def get_current_user(store: SessionStore) -> SessionUser:
    """Returns the stored user, raising when nobody is signed in."""
    session = store.get()
    if not session.is_authenticated:
        raise NotAuthenticated("No active session. Please sign in again.")
    return session.user


def get_current_user_optional(store: SessionStore) -> SessionUser | None:
    """
    Returns the stored user if signed in, otherwise returns None.
    Does NOT raise.
    """
    session = store.get()
    return session.user if session.is_authenticated else None
