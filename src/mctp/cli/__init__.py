"""MCTP CLI — run a server or fetch a single document.

Entry point registered as ``mctp`` in ``pyproject.toml``::

    [project.scripts]
    mctp = "mctp.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``mctp`` command."""
    parser = argparse.ArgumentParser(
        prog="mctp",
        description="Fetch markdown documents over a minimal line protocol.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- mctp serve -------------------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Start a server")
    serve_parser.add_argument(
        "config",
        nargs="?",
        default=None,
        help="Import string of a ServerConfig (e.g. mysite:config)",
    )
    serve_parser.add_argument("--host", default=None, help="Bind host address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    serve_parser.add_argument(
        "--content-root", default=None, help="Directory documents are served from"
    )
    serve_parser.add_argument(
        "--route",
        action="append",
        default=[],
        metavar="PATH=DOCUMENT",
        help="Map a logical path to a document (repeatable)",
    )
    serve_parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    # -- mctp get ---------------------------------------------------------
    get_parser = subparsers.add_parser("get", help="Fetch one document")
    get_parser.add_argument("path", nargs="?", default="/", help="Logical path (default: /)")
    get_parser.add_argument("--host", default=None, help="Server host address")
    get_parser.add_argument("--port", type=int, default=None, help="Server port number")
    get_parser.add_argument(
        "--timeout", type=float, default=None, help="Connect timeout in seconds"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "serve":
        from mctp.cli._serve import run_server

        run_server(args)
    elif args.command == "get":
        from mctp.cli._get import run_get

        run_get(args)
