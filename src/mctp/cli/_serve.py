"""``mctp serve`` — start a Responder.

Builds a ``ServerConfig`` from an optional import string, then applies
the command-line overrides on top of it.
"""

import argparse
import logging
import sys
from dataclasses import replace

from mctp.cli._resolve import resolve_config
from mctp.config import ServerConfig
from mctp.errors import ConfigurationError


def parse_routes(values: list[str]) -> dict[str, str]:
    """Parse ``PATH=DOCUMENT`` pairs from repeated ``--route`` flags."""
    routes: dict[str, str] = {}
    for value in values:
        path, sep, document_id = value.partition("=")
        if not sep or not path or not document_id:
            msg = f"Invalid route {value!r}, expected PATH=DOCUMENT."
            raise ConfigurationError(msg)
        routes[path] = document_id
    return routes


def build_config(args: argparse.Namespace) -> ServerConfig:
    """Merge the import-string config (if any) with CLI flags."""
    config = resolve_config(args.config) if args.config else ServerConfig()

    overrides: dict[str, object] = {}
    if args.host is not None:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.content_root is not None:
        overrides["content_root"] = args.content_root
    if args.route:
        overrides["routes"] = {**config.routes, **parse_routes(args.route)}
    return replace(config, **overrides) if overrides else config


def run_server(args: argparse.Namespace) -> None:
    """Start the server and block until interrupted."""
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = build_config(args)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    from mctp.server.responder import Responder

    Responder(config).run()
