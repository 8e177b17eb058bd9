"""Sequential TCP port reachability checker over a range of IPv4 addresses."""

from .errors import (
    AddressSpaceExhausted,
    ArgumentError,
    InvalidAddress,
    InvalidArgumentCount,
    InvalidEndAddress,
    InvalidPort,
    InvalidStartAddress,
    PscError,
)
from .models import ScanRequest, ScanResult

__version__ = "0.1.0"
