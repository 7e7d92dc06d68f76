import socket
import sys
from typing import Tuple  # noqa: F401

from pcapblocks.exceptions import InvalidField


def unpack_ipv4(data):
    # type: (bytes) -> str
    return socket.inet_ntoa(bytes(data))


def unpack_ipv4_mask(data):
    # type: (bytes) -> Tuple[str, str]
    """
    Unpack an ``if_IPv4addr`` payload: an address followed by its netmask.
    """
    if len(data) != 8:
        raise InvalidField("IPv4 address+mask must be exactly 8 bytes")
    return unpack_ipv4(data[:4]), unpack_ipv4(data[4:8])


def unpack_ipv6(data):
    # type: (bytes) -> str
    return socket.inet_ntop(socket.AF_INET6, bytes(data))


def unpack_ipv6_prefix(data):
    # type: (bytes) -> Tuple[str, int]
    """
    Unpack an ``if_IPv6addr`` payload: an address followed by a one-byte
    prefix length.
    """
    if len(data) != 17:
        raise InvalidField("IPv6 address+prefix must be exactly 17 bytes")
    return unpack_ipv6(data[:16]), data[16]


def unpack_macaddr(data):
    # type: (bytes) -> str
    return ":".join(format(x, "02x") for x in data)


def unpack_euiaddr(number, endianness=">"):
    # type: (int, str) -> str
    """
    Format a 64-bit EUI address in the usual colon-separated notation.

    The address is stored in the options as an integer, decoded using the
    section byte order; ``endianness`` restores the on-wire byte sequence.
    """
    byteorder = {"<": "little", "=": sys.byteorder}.get(endianness, "big")
    return unpack_macaddr(number.to_bytes(8, byteorder))


def unpack_timestamp_resolution(num):
    # type: (int) -> float
    """
    Unpack a timestamp resolution.

    Returns a floating point number representing the timestamp
    resolution (multiplier).
    """
    if not 0 <= num <= 0xFF:
        raise ValueError("Timestamp resolution must fit in one byte")
    base = 2 if (num >> 7 & 1) else 10
    exponent = num & 0b01111111
    return float(base ** (-exponent))
