import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from ..errors import ApiError
from ..schemas.auth import LoginPayload, RegisterPayload, Role, Session, SessionUser
from ..utils.logging import log_action

if TYPE_CHECKING:
    from ..api_client import ApiClient

logger = logging.getLogger(__name__)


class AuthEndpoints:
    prefix = "/auth"

    def __init__(self, client: "ApiClient"):
        self.client = client

    def login(self, email: str, password: str) -> Any:
        payload = LoginPayload(email=email, password=password)
        res = self.client.post(f"{self.prefix}/login", payload.model_dump())
        self._remember(res, "login")
        return res

    def register(self, email: str, password: str, confirm_password: str, role_name: Role | str) -> Any:
        payload = RegisterPayload(
            email=email,
            password=password,
            confirm_password=confirm_password,
            role_name=role_name,
        )
        res = self.client.post(f"{self.prefix}/register", payload.model_dump(mode="json", by_alias=True))
        self._remember(res, "register")
        return res

    def logout(self) -> None:
        """
        Best-effort server logout. The local session is cleared whatever the
        server answers, including when it cannot be reached.
        """
        user = self.client.store.get().user
        try:
            self.client.post(f"{self.prefix}/logout", {}, auth=True)
        except ApiError as exc:
            logger.info("Ignoring logout failure: %s", exc.message)
        finally:
            self.client.store.clear()
            log_action(user, "logout", "session")

    def _remember(self, res: Any, action: str) -> None:
        """Persists ``data.token`` and ``data.user`` from an auth response."""
        data = res.get("data") if isinstance(res, dict) else None
        if not isinstance(data, dict):
            data = {}

        token = data.get("token")
        raw_user = data.get("user")
        if not token or not isinstance(raw_user, dict):
            logger.warning("%s response carried no session, nothing persisted", action)
            return

        try:
            user = SessionUser.model_validate(raw_user)
        except ValidationError as exc:
            logger.warning("%s response carried an unreadable user: %s", action, exc)
            return

        self.client.store.set(Session(token=token, user=user))
        log_action(user, action, "session")
