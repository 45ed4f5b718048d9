"""linkrouter CLI — inspect, convert, and route links from the shell.

Entry point registered as ``linkrouter`` in ``pyproject.toml``::

    [project.scripts]
    linkrouter = "linkrouter.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``linkrouter`` command."""
    parser = argparse.ArgumentParser(
        prog="linkrouter",
        description="linkrouter — send deep links and web links to their handlers.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log routing decisions to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- linkrouter parse -------------------------------------------------
    parse_parser = subparsers.add_parser("parse", help="Show how a URL is split into a link")
    parse_parser.add_argument("url", help="URL to parse")
    parse_parser.add_argument("--app-scheme", default=None, help="App scheme for host folding")

    # -- linkrouter web-link ----------------------------------------------
    web_parser = subparsers.add_parser("web-link", help="Convert a deep link to a web link")
    web_parser.add_argument("url", help="Deep link to convert")
    web_parser.add_argument("--app-scheme", required=True, help="App scheme of the deep link")
    web_parser.add_argument("--host", required=True, help="Canonical web host")

    # -- linkrouter app-link ----------------------------------------------
    app_parser = subparsers.add_parser("app-link", help="Convert a web link to a deep link")
    app_parser.add_argument("url", help="Web link to convert")
    app_parser.add_argument("--app-scheme", required=True, help="App scheme to convert to")

    # -- linkrouter route -------------------------------------------------
    route_parser = subparsers.add_parser("route", help="Route a URL through link handlers")
    route_parser.add_argument("url", help="URL to route")
    route_parser.add_argument(
        "--handler",
        dest="handlers",
        action="append",
        required=True,
        help="Import string of a handler (e.g. myapp.links:games); repeat in priority order",
    )
    route_parser.add_argument("--app-scheme", default=None, help="App scheme for deep links")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command == "route":
        from linkrouter.cli._route import run_route

        run_route(args)
    else:
        from linkrouter.cli._convert import run_convert

        run_convert(args)
