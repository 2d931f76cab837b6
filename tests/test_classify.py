"""Tests for the address-family predicates."""

import pytest

from dialaddr.classify import all_ipv4, all_ipv6, global_unicast_ip

_IPV4 = ["1.1.1.1", "127.0.0.1", "2.2.2.2"]
_IPV6 = ["1111:2222::1", "::1", "2222:3333::1"]
_MIXED = ["1111:2222::1", "::1", "127.0.0.1", "2.2.2.2", "2222:3333::1"]


class TestAllIPv6:
    """all_ipv6() is false only when some element is IPv4."""

    def test_ipv4_only(self) -> None:
        assert all_ipv6(_IPV4) is False

    def test_ipv6_only(self) -> None:
        assert all_ipv6(_IPV6) is True

    def test_mixed(self) -> None:
        assert all_ipv6(_MIXED) is False
        assert all_ipv6(["1.1.1.1", "2222:3333::1"]) is False

    def test_invalid_counts_as_ipv6(self) -> None:
        assert all_ipv6(["invalidip"]) is True

    def test_empty(self) -> None:
        assert all_ipv6([]) is True

    def test_ipv4_mapped_is_ipv6(self) -> None:
        assert all_ipv6(["::ffff:1.2.3.4"]) is True


class TestAllIPv4:
    """all_ipv4() requires every element to be an IPv4 literal."""

    def test_ipv4_only(self) -> None:
        assert all_ipv4(_IPV4) is True

    def test_ipv6_only(self) -> None:
        assert all_ipv4(_IPV6) is False
        assert all_ipv4(["1111:2222::1", "::1"]) is False

    def test_mixed(self) -> None:
        assert all_ipv4(_MIXED) is False

    def test_invalid_disqualifies(self) -> None:
        assert all_ipv4(["invalidip"]) is False
        assert all_ipv4(["1.1.1.1", "invalidip"]) is False

    def test_empty(self) -> None:
        assert all_ipv4([]) is True


class TestGlobalUnicastIP:
    """global_unicast_ip() returns the first routable unicast literal."""

    def test_skips_loopback(self) -> None:
        assert global_unicast_ip(["127.0.0.1", "1.1.1.1"]) == "1.1.1.1"

    def test_empty(self) -> None:
        assert global_unicast_ip([]) == ""

    def test_invalid(self) -> None:
        assert global_unicast_ip(["invalidip"]) == ""

    def test_preserves_input_order(self) -> None:
        assert global_unicast_ip(["2001:db8::1", "1.1.1.1"]) == "2001:db8::1"

    def test_private_range_qualifies(self) -> None:
        assert global_unicast_ip(["10.0.0.1"]) == "10.0.0.1"

    def test_returns_input_text_unchanged(self) -> None:
        assert global_unicast_ip(["2001:DB8::1"]) == "2001:DB8::1"

    @pytest.mark.parametrize(
        "addr",
        [
            "127.0.0.1",
            "::1",
            "169.254.1.1",
            "fe80::1",
            "224.0.0.1",
            "ff02::1",
            "0.0.0.0",
            "::",
            "255.255.255.255",
            "::ffff:127.0.0.1",
        ],
    )
    def test_non_global_unicast(self, addr: str) -> None:
        assert global_unicast_ip([addr]) == ""


class TestSharedParsing:
    """All predicates classify a literal the same way."""

    def test_ipv4_literal(self) -> None:
        addrs = ["8.8.8.8"]
        assert all_ipv4(addrs) is True
        assert all_ipv6(addrs) is False
        assert global_unicast_ip(addrs) == "8.8.8.8"

    def test_ipv6_literal(self) -> None:
        addrs = ["2001:4860::8888"]
        assert all_ipv4(addrs) is False
        assert all_ipv6(addrs) is True
        assert global_unicast_ip(addrs) == "2001:4860::8888"
