"""``linkrouter parse``, ``web-link`` and ``app-link`` — inspect and convert URLs."""

import argparse
import json
import sys

from linkrouter.config import RouterConfig
from linkrouter.errors import ConfigurationError
from linkrouter.routing.router import LinkRouter


def run_convert(args: argparse.Namespace) -> None:
    """Dispatch one of the URL inspection commands and print its result."""
    try:
        router = LinkRouter(RouterConfig(app_scheme=args.app_scheme))
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.command == "parse":
        link = router.link_for(args.url)
        print(
            json.dumps(
                {
                    "url": link.url,
                    "scheme": link.scheme,
                    "host": link.host,
                    "path_components": list(link.path_components),
                    "params": dict(link.params),
                },
                indent=2,
            )
        )
    elif args.command == "web-link":
        print(router.convert_url_to_web_link(args.url, args.host))
    elif args.command == "app-link":
        print(router.convert_url_to_app_link(args.url))
