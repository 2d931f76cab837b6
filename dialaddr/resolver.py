"""Turn a ``host:port`` string into a dialable ``ip:port`` string."""

import ipaddress
import logging
from collections.abc import Iterable
from typing import Literal

from dialaddr.errors import LookupFailedError, NoAddressError
from dialaddr.hostport import format_ip_port, split_host_port
from dialaddr.lookup import IPAddress, LookupFn, system_lookup

logger = logging.getLogger(__name__)

Family = Literal["ipv4", "ipv6"]
FAMILIES: tuple[Family, ...] = ("ipv4", "ipv6")


def resolve_addr(
    address: str,
    lookup: LookupFn | None = None,
    *,
    prefer: Family = "ipv4",
) -> str:
    """Resolve *address* to a single ``ip:port`` (or ``[ip]:port``) string.

    IP literals are returned in canonical form without consulting
    *lookup*.  Anything else is treated as a host name: *lookup* is called
    once and one of its answers is picked by ``select_address``.

    Args:
        address: ``host:port`` or ``[ipv6]:port``.  The port is carried
            through verbatim and may be empty (``"host:"``).
        lookup: Name resolution function.  Defaults to ``system_lookup``.
        prefer: Address family to pick when the answer holds both.

    Returns:
        The resolved address, ready for dialing.

    Raises:
        NoAddressError: If *address* is empty.
        MalformedAddressError: If *address* is not in ``host:port`` form.
        LookupFailedError: If the lookup raised or produced no usable
            address.  The lookup's exception is chained as ``__cause__``.
    """
    if not address:
        raise NoAddressError()

    host, port = split_host_port(address)

    try:
        literal = ipaddress.ip_address(host)
    except ValueError:
        pass
    else:
        return format_ip_port(literal, port)

    if lookup is None:
        lookup = system_lookup

    logger.debug("Attempting to lookup address: %s", host)
    try:
        answers = lookup(host)
    except Exception as exc:
        raise LookupFailedError(host, str(exc)) from exc

    chosen = select_address(answers, prefer=prefer)
    if chosen is None:
        raise LookupFailedError(host, f"no addresses found for {host!r}")

    resolved = format_ip_port(chosen, port)
    logger.debug("Address %s resolved to %s", address, resolved)
    return resolved


def select_address(
    answers: Iterable[str | IPAddress],
    *,
    prefer: Family = "ipv4",
) -> IPAddress | None:
    """Pick one address from a lookup answer.

    The first address of the *prefer* family wins regardless of where it
    sits in *answers*; failing that, the first address of the other family
    is used.  Entries that are not IP addresses are skipped and
    IPv4-mapped IPv6 addresses count as IPv4.

    Returns:
        The chosen address, or ``None`` if *answers* holds no usable one.
    """
    if prefer not in FAMILIES:
        raise ValueError(f"Unknown address family: {prefer!r}")
    want = 4 if prefer == "ipv4" else 6

    fallback: IPAddress | None = None
    for answer in answers:
        ip = _to_ip(answer)
        if ip is None:
            logger.debug("Skipping unusable lookup answer %r", answer)
            continue
        if ip.version == want:
            return ip
        if fallback is None:
            fallback = ip
    return fallback


def _to_ip(answer: str | IPAddress) -> IPAddress | None:
    """Normalise a lookup answer to an address object, or ``None``."""
    try:
        ip = ipaddress.ip_address(answer)
    except ValueError:
        return None
    if isinstance(ip, ipaddress.IPv6Address) and ip.ipv4_mapped is not None:
        return ip.ipv4_mapped
    return ip
