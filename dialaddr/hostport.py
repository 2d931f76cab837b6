"""``host:port`` splitting and joining."""

import ipaddress

from dialaddr.errors import MalformedAddressError

_MISSING_PORT = "missing port in address"
_TOO_MANY_COLONS = "too many colons in address"


def split_host_port(address: str) -> tuple[str, str]:
    """Split *address* into ``(host, port)``.

    The host of an IPv6 literal must be bracketed (``"[::1]:80"``); the
    brackets are stripped from the returned host.  The port is returned as
    text and may be empty (``"host:"``).

    Raises:
        MalformedAddressError: If the port is missing, the host holds
            unbracketed colons, or the brackets are unbalanced.
    """
    i = address.rfind(":")
    if i < 0:
        raise MalformedAddressError(address, _MISSING_PORT)

    if address.startswith("["):
        end = address.find("]")
        if end < 0:
            raise MalformedAddressError(address, "missing ']' in address")
        if end + 1 == len(address):
            # "[host]" with nothing after it.
            raise MalformedAddressError(address, _MISSING_PORT)
        if end + 1 != i:
            if address[end + 1] == ":":
                raise MalformedAddressError(address, _TOO_MANY_COLONS)
            raise MalformedAddressError(address, _MISSING_PORT)
        host = address[1:end]
        j, k = 1, end + 1
    else:
        host = address[:i]
        if ":" in host:
            raise MalformedAddressError(address, _TOO_MANY_COLONS)
        j, k = 0, 0

    if "[" in address[j:]:
        raise MalformedAddressError(address, "unexpected '[' in address")
    if "]" in address[k:]:
        raise MalformedAddressError(address, "unexpected ']' in address")

    return host, address[i + 1 :]


def join_host_port(host: str, port: str) -> str:
    """Combine *host* and *port*, bracketing hosts that contain a colon."""
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def format_ip_port(ip: ipaddress.IPv4Address | ipaddress.IPv6Address, port: str) -> str:
    """Format an IP address object and port for dialing."""
    return join_host_port(str(ip), port)
