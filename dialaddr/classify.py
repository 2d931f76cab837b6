"""Address-family predicates over lists of IP literal strings."""

import ipaddress
from collections.abc import Iterable

from dialaddr.lookup import IPAddress

_IPV4_BROADCAST = ipaddress.IPv4Address("255.255.255.255")


def all_ipv6(addrs: Iterable[str]) -> bool:
    """Return ``True`` unless some element is an IPv4 literal.

    Strings that are not IP literals at all do not count against the
    result, so ``all_ipv6(["invalidip"])`` is ``True``.
    """
    for addr in addrs:
        ip = _parse(addr)
        if ip is not None and ip.version == 4:
            return False
    return True


def all_ipv4(addrs: Iterable[str]) -> bool:
    """Return ``True`` if every element is an IPv4 literal."""
    for addr in addrs:
        ip = _parse(addr)
        if ip is None or ip.version != 4:
            return False
    return True


def global_unicast_ip(addrs: Iterable[str]) -> str:
    """Return the first global unicast address in *addrs*, or ``""``.

    Loopback, link-local, multicast and unspecified addresses (and the
    IPv4 limited broadcast address) are skipped, as are strings that are
    not IP literals.  Private ranges such as ``10.0.0.0/8`` qualify.
    """
    for addr in addrs:
        ip = _parse(addr)
        if ip is not None and _is_global_unicast(ip):
            return addr
    return ""


def _parse(addr: str) -> IPAddress | None:
    try:
        return ipaddress.ip_address(addr)
    except ValueError:
        return None


def _is_global_unicast(ip: IPAddress) -> bool:
    if isinstance(ip, ipaddress.IPv6Address) and ip.ipv4_mapped is not None:
        ip = ip.ipv4_mapped
    if ip == _IPV4_BROADCAST:
        return False
    return not (
        ip.is_unspecified or ip.is_loopback or ip.is_multicast or ip.is_link_local
    )
