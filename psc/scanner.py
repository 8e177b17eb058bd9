from __future__ import annotations

import logging
import socket
from typing import Iterator

from .models import ScanRequest, ScanResult
from .targets import canonical_ip, iter_ips

log = logging.getLogger(__name__)


def probe(target: str, port: int) -> bool:
    """
    One TCP connect attempt using the stack's default connect timeout.
    The connection is closed straight away; any failure means unreachable.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        # the resolver would read "010" as octal
        sock.connect((canonical_ip(target), port))
        return True
    except OSError as e:
        log.debug("%s:%d not reachable: %s", target, port, e)
        return False
    finally:
        sock.close()


def scan_one(target: str, port: int) -> ScanResult:
    return ScanResult(address=target, port=port, reachable=probe(target, port))


def scan(request: ScanRequest) -> Iterator[ScanResult]:
    """
    Sequential scan of request.start..request.end, one probe at a time.
    Results are yielded in address order as soon as each probe finishes.
    """
    scanned = 0
    available = 0

    for ip in iter_ips(request.start, request.end):
        r = scan_one(ip, request.port)
        scanned += 1
        if r.reachable:
            available += 1
        yield r

    log.info("Scanned %d addresses | available=%d", scanned, available)
