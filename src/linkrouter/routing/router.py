"""LinkRouter — owns the handlers and sends each link to exactly one.

Handlers are consulted in registration order; the first one that claims
a link gets it, whether or not it can extract parameters from it.
"""

import logging
from urllib.parse import urlsplit

from linkrouter.config import RouterConfig
from linkrouter.routing.handler import LinkHandler
from linkrouter.routing.link import Link, parse_link

logger = logging.getLogger("linkrouter.routing")


class LinkRouter:
    """Routes deep links and web links to registered handlers.

    Usage::

        router = LinkRouter(RouterConfig(app_scheme="test-app"))
        router.add_handler(GamesLinkHandler(coordinator))
        router.route("test-app://games/KeyMaster")   # True

    Register every handler at startup, then route. The router holds no
    locks; registering while another thread routes is not supported.
    """

    __slots__ = ("_config", "_handlers")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self._config = config or RouterConfig()
        self._config.validate()
        self._handlers: list[LinkHandler] = []

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def app_scheme(self) -> str | None:
        """The scheme used for deep linking into the app (``"test-app"``)."""
        return self._config.app_scheme

    @property
    def handlers(self) -> tuple[LinkHandler, ...]:
        """Registered handlers, in the order they are consulted."""
        return tuple(self._handlers)

    def add_handler(self, handler: LinkHandler) -> None:
        """Append *handler*. Earlier handlers take priority."""
        self._handlers.append(handler)
        logger.debug("Registered link handler %s", type(handler).__name__)

    def link_for(self, url: str) -> Link:
        """Parse *url* using this router's app scheme."""
        return parse_link(url, self._config.app_scheme)

    def find_handler(self, link: Link) -> LinkHandler | None:
        """Return the first handler that claims *link*, or ``None``."""
        for handler in self._handlers:
            if handler.can_handle(link):
                return handler
        return None

    def can_handle(self, url: str) -> bool:
        """True if some registered handler claims *url*."""
        return self.find_handler(self.link_for(url)) is not None

    def route(self, url: str) -> bool:
        """Send *url* to the first handler that claims it.

        Returns the handler's own result, or False when no handler claims
        the link. Exceptions raised by the handler propagate.
        """
        link = self.link_for(url)
        handler = self.find_handler(link)
        if handler is None:
            logger.debug("No handler claims %r (path=%r)", url, link.path_components)
            return False
        logger.debug("Routing %r to %s", url, type(handler).__name__)
        return handler.handle(link)

    def convert_url_to_app_link(self, url: str | None) -> str | None:
        """Rewrite an http(s) web link as a deep link using the app scheme.

        ``https://www.test-app.com/games/KeyMaster`` becomes
        ``test-app://games/KeyMaster``. Anything else, including every URL
        when no app scheme is configured, is returned unchanged.
        """
        app_scheme = self._config.app_scheme
        if app_scheme is None or url is None:
            return url
        try:
            parts = urlsplit(url)
        except ValueError:
            return url
        if not parts.scheme.startswith("http"):
            return url
        app_link = f"{app_scheme}:/{parts.path}"
        if parts.query:
            app_link = f"{app_link}?{parts.query}"
        return app_link

    def convert_url_to_web_link(self, url: str, host: str | None = None) -> str:
        """Rewrite a deep link as a shareable web link.

        Uses *host*, falling back to ``config.web_host``. Returns *url*
        unchanged when it is not a deep link or no host is available.
        """
        host = host or self._config.web_host
        if host is None:
            return url
        return self.link_for(url).to_web_url(host)

    def __repr__(self) -> str:
        names = ", ".join(type(h).__name__ for h in self._handlers)
        return f"LinkRouter(app_scheme={self.app_scheme!r}, handlers=[{names}])"
