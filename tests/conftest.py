"""
Shared fixtures.

The backend is a FastAPI catch-all app that records every call and replies
with canned bodies. ``TestClient`` is an ``httpx.Client``, so it is handed to
``ApiClient`` in place of the real transport.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Optional

import pytest
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from fastapi.testclient import TestClient

from evmart.api_client import ApiClient
from evmart.schemas.auth import Session, SessionUser
from evmart.session_store import SessionStore
from evmart.storage import MemoryStorage, SqliteStorage

BASE_URL = "http://testserver/api"


@dataclass
class RecordedCall:
    method: str
    path: str
    query: dict[str, str]
    headers: dict[str, str]
    body: Optional[Any] = None


@dataclass
class FakeBackend:
    calls: list[RecordedCall] = field(default_factory=list)
    replies: dict[tuple[str, str], Any] = field(default_factory=dict)

    def __post_init__(self):
        self.app = FastAPI()
        self.app.add_api_route(
            "/api/{path:path}", self._handle, methods=["GET", "POST", "PUT", "DELETE"]
        )

    def reply(self, method: str, path: str, body: Any = None, status: int = 200):
        self.replies[(method, path)] = (status, body)

    def reply_raw(self, method: str, path: str, content: bytes, status: int = 200):
        self.replies[(method, path)] = Response(content=content, status_code=status, media_type="text/html")

    @property
    def last(self) -> RecordedCall:
        return self.calls[-1]

    async def _handle(self, path: str, request: Request):
        raw = await request.body()
        self.calls.append(
            RecordedCall(
                method=request.method,
                path=f"/{path}",
                query=dict(request.query_params),
                headers=dict(request.headers),
                body=json.loads(raw) if raw else None,
            )
        )
        reply = self.replies.get((request.method, f"/{path}"), (200, {"success": True, "data": {}}))
        if isinstance(reply, Response):
            return reply
        status, body = reply
        return JSONResponse(body, status_code=status)


def make_session(token: str = "t1", **user) -> Session:
    user.setdefault("id", "u1")
    user.setdefault("email", "a@b.com")
    user.setdefault("roleName", "SHOP")
    return Session(token=token, user=SessionUser.model_validate(user))


@pytest.fixture
def store() -> SessionStore:
    return SessionStore(MemoryStorage())


@pytest.fixture
def sqlite_store(tmp_path) -> SessionStore:
    return SessionStore(SqliteStorage(tmp_path / "session.db"))


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def client(backend, store):
    with TestClient(backend.app) as http:
        yield ApiClient(store, base_url=BASE_URL, http=http)


@pytest.fixture
def signed_in(store) -> Session:
    session = make_session()
    store.set(session)
    return session
