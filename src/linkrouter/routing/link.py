"""Link — a URL broken into the pieces handlers route on.

Deep links (``test-app://games/KeyMaster``) carry their first logical path
segment in the host position. When the URL scheme is the app's own scheme,
the host is folded back into the path so both forms produce the same
segments as the web link ``https://www.test-app.com/games/KeyMaster``.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from urllib.parse import SplitResult, parse_qsl, unquote, urlsplit, urlunsplit

logger = logging.getLogger("linkrouter.routing")

# Scheme used for shareable web links
WEB_SCHEME = "https"

# Query parameter appended to web links produced from deep links
WEB_LINK_MARKER = ("mobile", "ios")

_EMPTY_PARAMS: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class Link:
    """An incoming URL split into path components and query params.

    Attributes:
        url: The URL exactly as it arrived.
        path_components: Decoded path segments, left to right. Never
            includes the empty segment before a leading ``/``.
        params: Decoded query parameters. The last value wins when a
            key repeats.
        scheme: The URL scheme, lowercased.
        host: The decoded URL host, or ``""``.
        app_scheme: The router's app scheme, used for host folding and
            web-link conversion.
    """

    url: str
    path_components: tuple[str, ...] = ()
    params: Mapping[str, str] = field(default_factory=lambda: _EMPTY_PARAMS, hash=False)
    scheme: str = ""
    host: str = ""
    app_scheme: str | None = field(default=None, repr=False)

    @property
    def is_app_link(self) -> bool:
        """True when the URL uses the app's own scheme."""
        return _is_app_scheme(self.scheme, self.app_scheme)

    def to_web_url(self, host: str) -> str:
        """Convert a deep link into a shareable web link on *host*.

        URLs that do not use the app scheme are returned unchanged::

            >>> parse_link("test-app://games/KeyMaster", "test-app").to_web_url("www.test-app.com")
            'https://www.test-app.com/games/KeyMaster?mobile=ios'
        """
        if not self.is_app_link:
            return self.url
        try:
            parts = urlsplit(self.url)
            raw_host = _raw_host(parts)
        except ValueError:
            return self.url

        path = parts.path
        if raw_host:
            rest = path.lstrip("/")
            path = f"/{raw_host}/{rest}" if rest else f"/{raw_host}"

        marker = "=".join(WEB_LINK_MARKER)
        query = f"{parts.query}&{marker}" if parts.query else marker
        return urlunsplit((WEB_SCHEME, host, path, query, parts.fragment))


def parse_link(url: str, app_scheme: str | None = None) -> Link:
    """Split *url* into a ``Link``.

    Unparsable URLs produce a ``Link`` with no path components and no
    params, so they simply fail to match any handler.
    """
    try:
        parts = urlsplit(url)
        raw_host = _raw_host(parts)
    except ValueError:
        logger.debug("Could not decompose URL %r; treating it as empty", url)
        return Link(url=url, app_scheme=app_scheme)

    host = unquote(raw_host)
    path = [unquote(part) for part in parts.path.split("/")[1:]]
    if host and _is_app_scheme(parts.scheme, app_scheme):
        path = [host, *path]

    params = dict(parse_qsl(parts.query, keep_blank_values=True))

    return Link(
        url=url,
        path_components=tuple(path),
        params=MappingProxyType(params) if params else _EMPTY_PARAMS,
        scheme=parts.scheme,
        host=host,
        app_scheme=app_scheme,
    )


def _is_app_scheme(scheme: str, app_scheme: str | None) -> bool:
    # urlsplit lowercases the scheme; URI schemes are case-insensitive
    return app_scheme is not None and scheme == app_scheme.lower()


def _raw_host(parts: SplitResult) -> str:
    """Host portion of the netloc with userinfo and port removed, case kept."""
    hostinfo = parts.netloc.rpartition("@")[2]
    if hostinfo.startswith("["):
        end = hostinfo.find("]")
        if end == -1:
            msg = f"Invalid IPv6 host in {parts.netloc!r}"
            raise ValueError(msg)
        return hostinfo[1:end]
    return hostinfo.partition(":")[0]
