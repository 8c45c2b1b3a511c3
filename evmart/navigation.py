"""
Startup routing.

The landing screen is decided once per launch from the persisted session
alone. Later moves (post-login redirects, logout) belong to the screens.
"""

import logging
import threading
from enum import Enum
from typing import Optional

from .schemas.auth import Role, Session
from .session_store import SessionStore

logger = logging.getLogger(__name__)


class Route(str, Enum):
    LOGIN = "Login"
    REGISTER = "Register"
    HOME = "Home"

    SHOP_HOME = "ShopHome"
    SHOP_WALLET = "ShopWallet"
    SHOP_PACKAGE = "ShopPackage"
    SHOP_CREATE_POST = "ShopCreatePost"
    SHOP_POSTS = "ShopPosts"
    SHOP_CONTACTS = "ShopContacts"

    ADMIN_HOME = "AdminHome"
    ADMIN_PRODUCTS = "AdminProducts"
    ADMIN_USERS = "AdminUsers"
    ADMIN_REVENUE = "AdminRevenue"

    CUSTOMER_HOME = "CustomerHome"
    CUSTOMER_PRODUCT_DETAIL = "CustomerProductDetail"
    CUSTOMER_PROFILE = "CustomerProfile"


ROUTE_TITLES = {
    Route.LOGIN: "Sign in",
    Route.REGISTER: "Sign up",
    Route.HOME: "Home",
    Route.SHOP_HOME: "Shop home",
    Route.SHOP_WALLET: "My wallet",
    Route.SHOP_PACKAGE: "Posting packages",
    Route.SHOP_CREATE_POST: "New listing",
    Route.SHOP_POSTS: "My listings",
    Route.SHOP_CONTACTS: "Customer contacts",
    Route.ADMIN_HOME: "Admin home",
    Route.ADMIN_PRODUCTS: "Review listings",
    Route.ADMIN_USERS: "Manage users",
    Route.ADMIN_REVENUE: "Revenue",
    Route.CUSTOMER_HOME: "Home",
    Route.CUSTOMER_PRODUCT_DETAIL: "Listing details",
    Route.CUSTOMER_PROFILE: "My profile",
}

ROLE_HOME_ROUTES = {
    Role.SHOP: Route.SHOP_HOME,
    Role.ADMIN: Route.ADMIN_HOME,
    Role.CUSTOMER: Route.CUSTOMER_HOME,
}


def route_for_session(session: Session) -> Route:
    if not session.is_authenticated:
        return Route.LOGIN
    return ROLE_HOME_ROUTES.get(session.user.role, Route.HOME)


def resolve_initial_route(store: SessionStore, timeout: Optional[float] = None) -> Route:
    """
    Reads the stored session and maps it to a landing screen.

    With ``timeout`` set, a storage read that does not finish in time lands
    on the login screen instead of blocking startup.
    """
    if timeout is None:
        return route_for_session(store.get())

    result: list[Session] = []
    # Daemon, so a read that never returns cannot keep the process alive.
    reader = threading.Thread(target=lambda: result.append(store.get()), name="session-read", daemon=True)
    reader.start()
    reader.join(timeout)
    if not result:
        logger.warning("Session read did not finish within %.1fs, starting at login", timeout)
        return Route.LOGIN
    return route_for_session(result[0])


class Navigator:
    """Holds the launch decision so it is made exactly once."""

    def __init__(self, store: SessionStore, timeout: Optional[float] = None):
        self.store = store
        self.timeout = timeout
        self._initial_route: Optional[Route] = None

    def start(self) -> Route:
        if self._initial_route is None:
            self._initial_route = resolve_initial_route(self.store, self.timeout)
            logger.info("Initial route: %s", self._initial_route.value)
        return self._initial_route

    @property
    def initial_route(self) -> Optional[Route]:
        return self._initial_route

    def title(self, route: Route) -> str:
        return ROUTE_TITLES[route]
