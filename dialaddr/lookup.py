"""Name-to-address lookup strategies."""

from __future__ import annotations

import ipaddress
import logging
import socket
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from dialaddr.config import DialConfig

logger = logging.getLogger(__name__)

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


class LookupFn(Protocol):
    """Callable that resolves a host name to an ordered list of addresses.

    Implementations raise on failure; the resolver wraps whatever they
    raise in a ``LookupFailedError``.
    """

    def __call__(self, name: str) -> Sequence[str | IPAddress]: ...


def system_lookup(name: str) -> list[str]:
    """Resolve *name* through the platform resolver.

    Wraps ``socket.getaddrinfo`` to return the A and AAAA answers as IP
    strings, deduplicated, in the order the resolver returned them.

    Args:
        name: Host name to resolve (e.g. ``"www.example.com"``).

    Returns:
        A deduplicated list of IP address strings.

    Raises:
        socket.gaierror: If DNS resolution fails entirely.
    """
    logger.debug("Resolving %s via system resolver", name)

    results = socket.getaddrinfo(
        name,
        None,
        family=socket.AF_UNSPEC,
        type=socket.SOCK_STREAM,
    )

    seen: set[str] = set()
    out: list[str] = []
    for _family, _type, _proto, _canonname, sockaddr in results:
        # sockaddr is (ip, port) for AF_INET, (ip, port, flow, scope) for AF_INET6
        ip = sockaddr[0]
        if ip not in seen:
            seen.add(ip)
            out.append(ip)

    logger.debug("Resolved %s → %d unique address(es)", name, len(out))
    return out


class StaticLookup:
    """Deterministic lookup backed by a fixed host → addresses table.

    Host names are matched case-insensitively.  Names missing from the
    table are handed to *fallback* when one is given; otherwise they fail
    the same way an unknown name fails in the system resolver.
    """

    def __init__(
        self,
        hosts: Mapping[str, Sequence[str]],
        fallback: LookupFn | None = None,
    ) -> None:
        self._hosts = {name.lower(): list(addrs) for name, addrs in hosts.items()}
        self._fallback = fallback

    def __call__(self, name: str) -> Sequence[str | IPAddress]:
        addrs = self._hosts.get(name.lower())
        if addrs is not None:
            logger.debug("Static answer for %s: %s", name, ", ".join(addrs))
            return list(addrs)
        if self._fallback is not None:
            return self._fallback(name)
        raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")


def build_lookup(config: DialConfig) -> LookupFn:
    """Return the lookup function described by *config*.

    Without static hosts this is ``system_lookup``; otherwise a
    ``StaticLookup`` over the configured table that defers to the system
    resolver for everything else.
    """
    if not config.static_hosts:
        return system_lookup
    return StaticLookup(config.static_hosts, fallback=system_lookup)
