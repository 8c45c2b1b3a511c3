import logging
from dataclasses import dataclass
from typing import Optional

from .api_client import ApiClient, get_api_client
from .config import Settings, get_settings
from .dependencies import get_session_store
from .navigation import Navigator, Route
from .session_store import SessionStore
from .utils.logging import configure_logging

logger = logging.getLogger(__name__)


@dataclass
class App:
    settings: Settings
    store: SessionStore
    client: ApiClient
    navigator: Navigator

    @property
    def initial_route(self) -> Route:
        return self.navigator.start()


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[SessionStore] = None,
    client: Optional[ApiClient] = None,
) -> App:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    store = store or get_session_store()
    client = client or get_api_client()
    navigator = Navigator(store, timeout=settings.BOOTSTRAP_TIMEOUT)

    app = App(settings=settings, store=store, client=client, navigator=navigator)
    logger.info("%s starting against %s", settings.APP_NAME, client.base_url)
    navigator.start()
    return app


if __name__ == "__main__":
    app = create_app()
    print(app.initial_route.value)
