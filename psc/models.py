from dataclasses import dataclass


@dataclass(frozen=True)
class ScanRequest:
    start: str
    end: str
    port: int


@dataclass(frozen=True)
class ScanResult:
    address: str
    port: int
    reachable: bool
