import threading

import pytest

from evmart.navigation import ROUTE_TITLES, Navigator, Route, resolve_initial_route
from evmart.session_store import TOKEN_KEY, USER_KEY, SessionStore
from evmart.storage import MemoryStorage

from .conftest import make_session

pytestmark = pytest.mark.unit


class HangingStorage(MemoryStorage):
    def __init__(self):
        super().__init__()
        self.release = threading.Event()

    def get_items(self, keys):
        self.release.wait(5)
        return super().get_items(keys)


@pytest.mark.parametrize(
    "role, expected",
    [
        ("SHOP", Route.SHOP_HOME),
        ("ADMIN", Route.ADMIN_HOME),
        ("CUSTOMER", Route.CUSTOMER_HOME),
        ("MODERATOR", Route.HOME),
        (None, Route.HOME),
    ],
)
def test_role_picks_landing_screen(store, role, expected):
    store.set(make_session(roleName=role))
    assert resolve_initial_route(store) is expected


def test_shop_session_lands_on_shop_home(store):
    store.set(make_session(token="t1", email="a@b.com", roleName="SHOP"))
    assert resolve_initial_route(store) is Route.SHOP_HOME


def test_no_session_lands_on_login(store):
    assert resolve_initial_route(store) is Route.LOGIN


def test_corrupt_user_lands_on_login():
    store = SessionStore(MemoryStorage({TOKEN_KEY: "t1", USER_KEY: "{oops"}))
    assert resolve_initial_route(store) is Route.LOGIN


def test_token_alone_lands_on_login():
    store = SessionStore(MemoryStorage({TOKEN_KEY: "t1"}))
    assert resolve_initial_route(store) is Route.LOGIN


def test_bounded_read_within_time(store):
    store.set(make_session(roleName="ADMIN"))
    assert resolve_initial_route(store, timeout=5) is Route.ADMIN_HOME


def test_hanging_read_falls_back_to_login():
    storage = HangingStorage()
    store = SessionStore(storage)
    try:
        assert resolve_initial_route(store, timeout=0.05) is Route.LOGIN
    finally:
        storage.release.set()


def test_hanging_read_does_not_block_exit():
    storage = HangingStorage()
    store = SessionStore(storage)
    try:
        resolve_initial_route(store, timeout=0.05)
        readers = [t for t in threading.enumerate() if t.name == "session-read" and t.is_alive()]
        assert readers
        assert all(t.daemon for t in readers)
    finally:
        storage.release.set()


def test_navigator_decides_once(store):
    navigator = Navigator(store)
    assert navigator.initial_route is None

    assert navigator.start() is Route.LOGIN
    store.set(make_session(roleName="CUSTOMER"))
    assert navigator.start() is Route.LOGIN
    assert navigator.initial_route is Route.LOGIN


def test_every_route_has_a_title():
    assert set(ROUTE_TITLES) == set(Route)
    assert Navigator(SessionStore(MemoryStorage())).title(Route.SHOP_WALLET) == "My wallet"
