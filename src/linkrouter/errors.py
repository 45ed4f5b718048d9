"""linkrouter exception hierarchy.

Routing itself never raises for bad input: unparsable URLs become empty
links and unmatched paths come back as ``None`` or ``False``. Exceptions
are reserved for mistakes made while setting a router up.
"""


class LinkRouterError(Exception):
    """Base for all linkrouter-specific errors."""


class ConfigurationError(LinkRouterError):
    """Raised when router configuration is invalid.

    Typically raised by ``LinkRouter.__init__`` when the app scheme is
    not a syntactically valid URI scheme.
    """
