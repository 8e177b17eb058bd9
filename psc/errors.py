from __future__ import annotations


class PscError(Exception):
    """Base class for everything psc raises on purpose."""


class InvalidAddress(PscError):
    pass


class AddressSpaceExhausted(PscError):
    pass


class ArgumentError(PscError):
    """
    Raised while resolving the command line.
    main() turns every subclass into the same usage line.
    """


class InvalidArgumentCount(ArgumentError):
    pass


class InvalidStartAddress(ArgumentError):
    pass


class InvalidEndAddress(ArgumentError):
    pass


class InvalidPort(ArgumentError):
    pass
