from __future__ import annotations

import re

from .errors import InvalidPort

MAX_PORT = 65535

_DIGITS = re.compile(r"[0-9]+")


def parse_port(spec: str) -> int:
    """
    Parses a single port token: unsigned decimal, 0-65535.
    """
    if not _DIGITS.fullmatch(spec):
        raise InvalidPort(f"Invalid port: {spec!r}")

    port = int(spec)
    if port > MAX_PORT:
        raise InvalidPort(f"Port out of range: {port}")
    return port
