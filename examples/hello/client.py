"""Fetch ``/hello`` from the hello example server.

Run (with ``app.py`` running):
    python client.py
"""

import sys

from mctp import ClientConfig, MCTPError, fetch

if __name__ == "__main__":
    try:
        response = fetch("/hello", ClientConfig(host="127.0.0.1", port=9196))
    except MCTPError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print("Status:", response.status)
    print("Headers:", dict(response.headers))
    print("Body:")
    print(response.text)
