"""Command-line entry point that sets up the caching proxy's listening socket."""

from __future__ import annotations

import re
import socket
import sys
from collections.abc import Sequence

DEFAULT_PORT = 8080
MAX_CLIENTS = 10

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")

__all__ = [
    "DEFAULT_PORT",
    "MAX_CLIENTS",
    "UsageError",
    "create_proxy_socket",
    "main",
    "parse_port",
]


class UsageError(ValueError):
    """Raised when the command line does not hold exactly one port argument."""


def _leading_int(text: str) -> int:
    """Read a leading decimal integer the way atoi does, yielding 0 if none."""
    match = _LEADING_INTEGER.match(text)
    return int(match.group(1)) if match else 0


def parse_port(argv: Sequence[str]) -> int:
    """Return the port named by the single command-line argument."""
    if len(argv) != 1:
        raise UsageError("Too few arguments")
    return _leading_int(argv[0])


def create_proxy_socket(port: int) -> socket.socket:
    """Create the proxy's TCP socket with address reuse enabled.

    The socket is not yet bound to ``port``; a failure to set the reuse
    option is reported on stderr and otherwise ignored.
    """
    proxy = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        proxy.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    except OSError as exc:
        print(f"setsockOpt failed: {exc}", file=sys.stderr)
    return proxy


def main(argv: Sequence[str] | None = None) -> int:
    """Run the proxy start-up sequence and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        port = parse_port(args)
    except UsageError as exc:
        print(exc)
        return 1

    print(f"Starting proxy server at port: {port}")

    try:
        proxy = create_proxy_socket(port)
    except OSError as exc:
        print(f"Failed to create a socket: {exc}", file=sys.stderr)
        return 1

    with proxy:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())