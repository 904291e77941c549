"""Hello World — the simplest MCTP server.

Serves the markdown files in ``content/`` with two explicit routes.
Any other path is looked up directly, so ``/guide`` serves ``guide.md``.

Run:
    python app.py
    mctp serve app:config        (from this directory)
"""

import logging
from pathlib import Path

from mctp import Responder, ServerConfig

config = ServerConfig(
    host="127.0.0.1",
    port=9196,
    content_root=Path(__file__).parent / "content",
    routes={
        "/": "index.md",
        "/hello": "hello.md",
    },
)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    Responder(config).run()
