"""Requestor — the calling side of MCTP."""

from mctp.client.requestor import Requestor, fetch

__all__ = ["Requestor", "fetch"]
