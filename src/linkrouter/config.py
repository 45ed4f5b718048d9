"""Router configuration.

RouterConfig is a frozen dataclass — set once when the router is built,
never read from global state.
"""

import re
from dataclasses import dataclass

from linkrouter.errors import ConfigurationError

# RFC 3986 section 3.1: ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    Override what you need::

        config = RouterConfig(app_scheme="test-app", web_host="www.test-app.com")
    """

    # Custom scheme used by deep links into the app (``test-app://games``)
    app_scheme: str | None = None

    # Canonical host used when converting deep links to shareable web links
    web_host: str | None = None

    def validate(self) -> None:
        """Raise ``ConfigurationError`` if any field is unusable."""
        if self.app_scheme is not None and not _SCHEME_RE.match(self.app_scheme):
            msg = (
                f"Invalid app scheme {self.app_scheme!r}: expected a URI scheme "
                "such as 'myapp' (no ':' or '//')."
            )
            raise ConfigurationError(msg)
        if self.web_host is not None and (not self.web_host or "/" in self.web_host):
            msg = f"Invalid web host {self.web_host!r}: expected a bare host name."
            raise ConfigurationError(msg)
