from __future__ import annotations

from .models import ScanResult


def format_result(r: ScanResult) -> str:
    status = "AVAILABLE" if r.reachable else "unavailable"
    return f"{status} {r.address}:{r.port}"


def print_result(r: ScanResult) -> None:
    print(format_result(r), flush=True)
