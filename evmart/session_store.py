import json
import logging
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from .schemas.auth import Session, SessionUser
from .storage import KeyValueStorage

logger = logging.getLogger(__name__)

TOKEN_KEY = "auth_token"
USER_KEY = "auth_user"


class SessionStore:
    """
    Persists the bearer token and user profile as two independent entries.

    Reads never raise on bad data: an unreadable user entry is treated as
    "no session".
    """

    def __init__(self, storage: KeyValueStorage):
        self.storage = storage

    def get(self) -> Session:
        entries = self.storage.get_items([TOKEN_KEY, USER_KEY])
        token = entries.get(TOKEN_KEY)
        raw_user = entries.get(USER_KEY)
        if not token or not raw_user:
            return Session.empty()

        try:
            user = SessionUser.model_validate(json.loads(raw_user))
        except (ValueError, ValidationError) as exc:
            logger.warning("Discarding unreadable stored user: %s", exc)
            return Session.empty()

        return Session(token=token, user=user)

    def get_token(self) -> Optional[str]:
        return self.storage.get_item(TOKEN_KEY) or None

    def set(self, session: Session) -> None:
        if not session.is_authenticated:
            raise ValueError("Cannot persist a session without both token and user")
        self.storage.set_items(
            {
                TOKEN_KEY: session.token,
                USER_KEY: _dump_user(session.user),
            }
        )

    def update_user(self, user: SessionUser | Mapping[str, Any]) -> None:
        if not self.get_token():
            logger.debug("No stored token, skipping user update")
            return
        if not isinstance(user, SessionUser):
            user = SessionUser.model_validate(user)
        self.storage.set_items({USER_KEY: _dump_user(user)})

    def clear(self) -> None:
        self.storage.remove_items([TOKEN_KEY, USER_KEY])


def _dump_user(user: SessionUser) -> str:
    return json.dumps(user.model_dump(mode="json", by_alias=True))
