"""Exceptions raised while turning an address string into a dialable one."""

LOOKUP_FAILED_PREFIX = "lookup failed for IP address"


class ResolveError(Exception):
    """Base class for every address-resolution failure."""


class NoAddressError(ResolveError):
    """Raised when an empty address string is supplied."""

    def __init__(self) -> None:
        super().__init__("no address specified")


class MalformedAddressError(ResolveError, ValueError):
    """Raised when an address string does not follow the ``host:port`` grammar.

    Attributes:
        address: The offending input, verbatim.
        reason: Short description of what is wrong with it.
    """

    def __init__(self, address: str, reason: str) -> None:
        super().__init__(f"address {address}: {reason}")
        self.address = address
        self.reason = reason


class LookupFailedError(ResolveError):
    """Raised when a host name could not be turned into an IP address.

    The exception raised by the lookup function, if any, is chained as
    ``__cause__``.

    Attributes:
        host: The name that was looked up.
    """

    def __init__(self, host: str, detail: str) -> None:
        super().__init__(f"{LOOKUP_FAILED_PREFIX}: {detail}")
        self.host = host
