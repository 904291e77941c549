"""``mctp get`` — fetch one document and print it."""

import argparse
import sys

from mctp.client.requestor import fetch
from mctp.config import ClientConfig
from mctp.errors import ConfigurationError, InvalidRequest, ParseError, TransportError


def run_get(args: argparse.Namespace) -> None:
    """Fetch ``args.path`` and print status, headers, and body."""
    defaults = ClientConfig()
    try:
        config = ClientConfig(
            host=args.host or defaults.host,
            port=args.port if args.port is not None else defaults.port,
            timeout=args.timeout if args.timeout is not None else defaults.timeout,
        )
        response = fetch(args.path, config)
    except (ConfigurationError, InvalidRequest, TransportError, ParseError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"Status: {response.status}")
    for name, value in response.headers.items():
        print(f"{name}: {value}")
    print()
    print(response.text)
