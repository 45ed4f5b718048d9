"""linkrouter — send deep links and web links to the handler that owns them.

Basic usage::

    from linkrouter import BaseLinkHandler, LinkRouter, RouterConfig

    class GamesLinkHandler(BaseLinkHandler):
        path_schemes = ("games", "games/{username}")

        def handle(self, link):
            result = self.result_for(link)
            ...
            return True

    router = LinkRouter(RouterConfig(app_scheme="test-app"))
    router.add_handler(GamesLinkHandler())
    router.route("https://www.test-app.com/games/KeyMaster")
"""

__version__ = "0.1.0"
__all__ = [
    "BaseLinkHandler",
    "ConfigurationError",
    "Link",
    "LinkHandler",
    "LinkRouter",
    "LinkRouterError",
    "PathResult",
    "PathSegment",
    "RouterConfig",
    "SchemeSet",
    "match_scheme",
    "parse_link",
    "parse_scheme",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import linkrouter`` fast while providing a clean top-level API.
    """
    if name == "LinkRouter":
        from linkrouter.routing.router import LinkRouter

        return LinkRouter

    if name == "RouterConfig":
        from linkrouter.config import RouterConfig

        return RouterConfig

    if name in ("ConfigurationError", "LinkRouterError"):
        from linkrouter import errors as _errors

        return getattr(_errors, name)

    if name in ("Link", "parse_link"):
        from linkrouter.routing import link as _link

        return getattr(_link, name)

    if name in ("PathResult", "PathSegment", "match_scheme", "parse_scheme"):
        from linkrouter.routing import scheme as _scheme

        return getattr(_scheme, name)

    if name == "SchemeSet":
        from linkrouter.routing.resolver import SchemeSet

        return SchemeSet

    if name in ("BaseLinkHandler", "LinkHandler"):
        from linkrouter.routing import handler as _handler

        return getattr(_handler, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
