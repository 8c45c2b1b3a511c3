import logging
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Any, Literal, Mapping, Optional
from urllib.parse import urlsplit, urlunsplit

import httpx
from pydantic import BaseModel

from .config import get_settings
from .dependencies import get_session_store
from .endpoints.admin import AdminEndpoints
from .endpoints.auth import AuthEndpoints
from .endpoints.customer import CustomerEndpoints
from .endpoints.shop import ShopEndpoints
from .errors import ApiError, NetworkError
from .session_store import SessionStore

logger = logging.getLogger(__name__)

# Address under which the Android emulator reaches the host machine.
ANDROID_HOST_LOOPBACK = "10.0.2.2"
LOOPBACK_HOSTS = ("localhost", "127.0.0.1")
DEFAULT_PORT = 3000
API_PREFIX = "/api"

Method = Literal["GET", "POST", "PUT", "DELETE"]


def resolve_base_url(api_url: Optional[str], platform: str) -> str:
    """
    Picks the backend origin for the runtime.

    The Android emulator cannot reach the host through ``localhost``, so a
    loopback override is rewritten to the emulator alias. Any other host is
    kept, which is what physical devices on the LAN need.
    """
    if not api_url:
        host = ANDROID_HOST_LOOPBACK if platform == "android" else "localhost"
        return f"http://{host}:{DEFAULT_PORT}{API_PREFIX}"

    if platform == "android":
        # "localhost:3000/api" has no scheme; parse it as a network path.
        schemeless = "//" not in api_url
        parts = urlsplit(f"//{api_url}" if schemeless else api_url)
        if parts.hostname in LOOPBACK_HOSTS:
            userinfo, at, _ = parts.netloc.rpartition("@")
            netloc = f"{userinfo}{at}{ANDROID_HOST_LOOPBACK}"
            if parts.port:
                netloc += f":{parts.port}"
            api_url = urlunsplit(parts._replace(netloc=netloc))
            if schemeless:
                api_url = api_url[2:]

    return api_url.rstrip("/")


@lru_cache
def get_base_url() -> str:
    settings = get_settings()
    base_url = resolve_base_url(settings.API_URL, settings.PLATFORM)
    logger.info("API base URL resolved to %s (platform=%s)", base_url, settings.PLATFORM)
    return base_url


def build_query(filters: Mapping[str, Any] | BaseModel | None) -> dict[str, Any]:
    """Drops unset and falsy filters; enums are sent by value."""
    if filters is None:
        return {}
    if isinstance(filters, BaseModel):
        filters = filters.model_dump(mode="json", by_alias=True)

    query = {}
    for key, value in filters.items():
        if not value:
            continue
        query[key] = value.value if isinstance(value, Enum) else value
    return query


@dataclass
class RequestDescriptor:
    path: str
    method: Method = "GET"
    body: Mapping[str, Any] | BaseModel | None = None
    params: Mapping[str, Any] | BaseModel = field(default_factory=dict)
    requires_auth: bool = False


class ApiClient:
    """
    Thin gateway over the marketplace REST API.

    Returns parsed JSON bodies untouched on 2xx and raises :class:`ApiError`
    (or :class:`NetworkError` when nothing came back) otherwise.
    """

    def __init__(
        self,
        store: SessionStore,
        base_url: Optional[str] = None,
        http: Optional[httpx.Client] = None,
        timeout: float = 15.0,
        user_agent: Optional[str] = None,
    ):
        self.store = store
        self.base_url = base_url or get_base_url()
        self.http = http or httpx.Client(timeout=timeout)
        self.user_agent = user_agent

        self.auth = AuthEndpoints(self)
        self.shop = ShopEndpoints(self)
        self.admin = AdminEndpoints(self)
        self.customer = CustomerEndpoints(self)

    def build_headers(self, include_auth: bool = False) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.user_agent:
            headers["User-Agent"] = self.user_agent
        if include_auth:
            token = self.store.get_token()
            if token:
                headers["Authorization"] = f"Bearer {token}"
        return headers

    def request(self, descriptor: RequestDescriptor) -> Any:
        url = f"{self.base_url}{descriptor.path}"
        kwargs: dict[str, Any] = {
            "headers": self.build_headers(descriptor.requires_auth),
            "params": build_query(descriptor.params),
        }
        if descriptor.method in ("POST", "PUT"):
            kwargs["json"] = _encode_body(descriptor.body)

        logger.debug("%s %s", descriptor.method, url)
        try:
            response = self.http.request(descriptor.method, url, **kwargs)
        except httpx.TransportError as exc:
            logger.error("Network error on %s %s: %s", descriptor.method, url, exc)
            raise NetworkError(
                f"Cannot reach the server at {self.base_url}. Make sure the backend is running, "
                "that the API address (EVMART_API_URL) points at it, and that no firewall "
                f"blocks the connection. ({type(exc).__name__}: {exc})",
                base_url=self.base_url,
            ) from exc

        try:
            data = response.json()
        except ValueError:
            data = {}

        if not response.is_success:
            message = data.get("message") if isinstance(data, dict) else None
            error = ApiError(
                message or f"Request failed ({response.status_code})",
                status=response.status_code,
                data=data,
            )
            logger.warning(
                "%s %s failed with %s: %s", descriptor.method, url, response.status_code, error.message
            )
            raise error

        return data

    def get(self, path: str, params=None, auth: bool = False) -> Any:
        return self.request(RequestDescriptor(path, "GET", params=params or {}, requires_auth=auth))

    def post(self, path: str, body=None, auth: bool = False) -> Any:
        return self.request(RequestDescriptor(path, "POST", body=body, requires_auth=auth))

    def put(self, path: str, body=None, auth: bool = False) -> Any:
        return self.request(RequestDescriptor(path, "PUT", body=body, requires_auth=auth))

    def delete(self, path: str, auth: bool = False) -> Any:
        return self.request(RequestDescriptor(path, "DELETE", requires_auth=auth))

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _encode_body(body) -> dict[str, Any]:
    if body is None:
        return {}
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    return dict(body)


@lru_cache
def get_api_client() -> ApiClient:
    """
    Returns a singleton client bound to the application session store.
    """
    settings = get_settings()
    return ApiClient(
        get_session_store(),
        base_url=get_base_url(),
        timeout=settings.REQUEST_TIMEOUT,
        user_agent=settings.APP_NAME,
    )
