from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from .errors import (
    ArgumentError,
    InvalidAddress,
    InvalidArgumentCount,
    InvalidEndAddress,
    InvalidStartAddress,
)
from .models import ScanRequest
from .output import print_result
from .ports import parse_port
from .scanner import scan
from .targets import parse_ip

USAGE = "Usage: psc <ip-from> [<ip-to>] <port>"

log = logging.getLogger(__name__)


class _Parser(argparse.ArgumentParser):
    # argparse would exit(2) on its own; we want the plain usage line instead
    def error(self, message: str):
        raise ArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    p = _Parser(prog="psc", description="Check whether a TCP port is reachable across a range of IPv4 addresses")
    p.add_argument("tokens", nargs="*", metavar="ARG", help="<ip-from> [<ip-to>] <port>")
    p.add_argument("-v", "--verbose", action="count", default=0, help="Log to stderr (-v info, -vv debug)")
    return p


def setup_logging(verbosity: int = 0) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def resolve_tokens(tokens: Sequence[str]) -> ScanRequest:
    """
    <ip> <port> or <ip-from> <ip-to> <port>.
    """
    if len(tokens) == 2:
        ip_from, port_arg = tokens
        ip_to = ip_from
    elif len(tokens) == 3:
        ip_from, ip_to, port_arg = tokens
    else:
        raise InvalidArgumentCount(f"Expected 2 or 3 arguments, got {len(tokens)}")

    try:
        start = parse_ip(ip_from)
    except InvalidAddress as e:
        raise InvalidStartAddress(f"Invalid ip-from value: {e}") from e

    try:
        end = parse_ip(ip_to)
    except InvalidAddress as e:
        raise InvalidEndAddress(f"Invalid ip-to value: {e}") from e

    return ScanRequest(start=start, end=end, port=parse_port(port_arg))


def resolve_args(argv: Sequence[str]) -> ScanRequest:
    """Takes a full argv, program name first."""
    return resolve_tokens(list(argv[1:]))


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_intermixed_args(argv)
        setup_logging(args.verbose)
        request = resolve_tokens(args.tokens)
    except ArgumentError as e:
        log.debug("Bad arguments: %s: %s", type(e).__name__, e)
        print(USAGE)
        return 0

    log.info("Scanning %s - %s on port %d", request.start, request.end, request.port)
    for r in scan(request):
        print_result(r)

    return 0
