"""Resolver address utilities."""

import ipaddress


DEFAULT_DNS_PORT = 53


def split_resolver_address(address: str) -> tuple[str, int]:
    """Split a resolver address into host and port.

    Accepted forms are "host", "host:port", "[v6]:port" and a bare IPv6
    literal. The port defaults to 53.

    Args:
        address: Resolver address as written in the configuration.

    Returns:
        tuple[str, int]: (host, port)

    Raises:
        ValueError: If the address is empty or the port is not a valid number.

    Examples:
        >>> split_resolver_address("8.8.8.8:53")
        ('8.8.8.8', 53)
        >>> split_resolver_address("[2001:db8::1]:5353")
        ('2001:db8::1', 5353)
        >>> split_resolver_address("1.1.1.1")
        ('1.1.1.1', 53)
    """
    address = (address or "").strip()
    if not address:
        raise ValueError("resolver address cannot be empty")

    if address.startswith("["):
        host, sep, rest = address[1:].partition("]")
        if not sep:
            raise ValueError(f"missing ']' in resolver address: {address}")
        if not rest:
            return host, DEFAULT_DNS_PORT
        if not rest.startswith(":"):
            raise ValueError(f"unexpected text after ']' in resolver address: {address}")
        return host, _parse_port(rest[1:], address)

    if address.count(":") > 1:
        # Bare IPv6 literal without brackets or port
        ipaddress.IPv6Address(address)
        return address, DEFAULT_DNS_PORT

    host, sep, port = address.partition(":")
    if not sep:
        return host, DEFAULT_DNS_PORT
    return host, _parse_port(port, address)


def _parse_port(port: str, address: str) -> int:
    if not port.isdigit() or not 0 < int(port) <= 65535:
        raise ValueError(f"invalid port in resolver address: {address}")
    return int(port)
