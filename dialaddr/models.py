"""Data models: Resolution and Classification dataclasses."""

from dataclasses import dataclass, field


@dataclass
class Resolution:
    """Outcome of resolving one address string.

    Exactly one of ``resolved`` and ``error`` is set.

    Attributes:
        address: The input as given on the command line.
        resolved: Dialable ``ip:port`` / ``[ip]:port`` string on success.
        error: Error message on failure.
        error_kind: Exception class name on failure (e.g.
            ``"LookupFailedError"``).
    """

    address: str
    resolved: str | None = None
    error: str | None = None
    error_kind: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class Classification:
    """Family predicates evaluated over one list of address literals.

    Attributes:
        addresses: The literals that were classified, in input order.
        all_ipv4: Every element is an IPv4 literal.
        all_ipv6: No element is an IPv4 literal.
        global_unicast: First global unicast element, or ``""``.
    """

    addresses: list[str] = field(default_factory=list)
    all_ipv4: bool = False
    all_ipv6: bool = False
    global_unicast: str = ""
