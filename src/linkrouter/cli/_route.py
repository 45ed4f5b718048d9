"""``linkrouter route`` — route a URL through handlers named on the command line."""

import argparse
import sys

from linkrouter.cli._resolve import resolve_handler
from linkrouter.config import RouterConfig
from linkrouter.errors import ConfigurationError
from linkrouter.routing.router import LinkRouter


def run_route(args: argparse.Namespace) -> None:
    """Build a router from ``args.handlers`` and route ``args.url``.

    Prints ``handled`` and returns, or prints ``unhandled`` and exits 1.
    """
    try:
        router = LinkRouter(RouterConfig(app_scheme=args.app_scheme))
        for import_string in args.handlers:
            router.add_handler(resolve_handler(import_string))
    except (ConfigurationError, ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if router.route(args.url):
        print("handled")
        return
    print("unhandled")
    raise SystemExit(1)
