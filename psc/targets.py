from __future__ import annotations

import logging
import re
from typing import Iterator, List

from .errors import AddressSpaceExhausted, InvalidAddress

OCTET_COUNT = 4
OCTET_MAX = 255

# base-10 integer, optional sign
_OCTET = re.compile(r"[+-]?[0-9]+")

log = logging.getLogger(__name__)


def _octet_value(part: str) -> int:
    if not _OCTET.fullmatch(part):
        raise InvalidAddress(f"Non-numeric octet: {part!r}")
    return int(part)


def parse_ip(s: str) -> str:
    """
    Validates a dotted-decimal IPv4 string.
    The string is returned exactly as given, it is not re-formatted.
    """
    octets = s.split(".")
    if len(octets) != OCTET_COUNT:
        raise InvalidAddress(f"Invalid octet count in {s!r}: {len(octets)}")

    for part in octets:
        value = _octet_value(part)
        if value < 0 or value > OCTET_MAX:
            raise InvalidAddress(f"Octet out of range in {s!r}: {value}")

    return s


def canonical_ip(ip: str) -> str:
    """Decimal form of a parsed address: no leading zeros, no signs."""
    return ".".join(str(int(part)) for part in ip.split("."))


def next_ip(ip: str) -> str:
    """
    Returns the address after `ip`, carrying from the last octet.

    An overflowing octet has 255 subtracted rather than being reset, so
    1.2.3.255 is followed by 1.2.4.1. Overflowing the first octet raises
    AddressSpaceExhausted.
    """
    octets: List[int] = [int(part) for part in ip.split(".")]

    for i in range(OCTET_COUNT - 1, -1, -1):
        octets[i] += 1
        if octets[i] <= OCTET_MAX:
            break

        octets[i] -= OCTET_MAX
        if i == 0:
            raise AddressSpaceExhausted(f"No address after {ip}")

    return ".".join(str(o) for o in octets)


def iter_ips(start: str, end: str) -> Iterator[str]:
    """
    Yields start..end inclusive.
    If end is never reached the walk stops quietly when the address space runs out.
    """
    current = start
    while True:
        yield current

        if current == end:
            log.info("Reached end address %s", end)
            return

        try:
            current = next_ip(current)
        except AddressSpaceExhausted as e:
            log.info("Stopping scan: %s", e)
            return
