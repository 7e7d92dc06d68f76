import sys

import pytest

from pcapblocks.exceptions import InvalidField
from pcapblocks.utils import (
    unpack_euiaddr,
    unpack_ipv4,
    unpack_ipv4_mask,
    unpack_ipv6,
    unpack_ipv6_prefix,
    unpack_macaddr,
    unpack_timestamp_resolution,
)


def test_unpack_ipv4():
    assert unpack_ipv4(b"\x00\x00\x00\x00") == "0.0.0.0"
    assert unpack_ipv4(b"\xff\xff\xff\xff") == "255.255.255.255"
    assert unpack_ipv4(memoryview(b"\x0a\x10\x20\x30")) == "10.16.32.48"


def test_unpack_ipv4_mask():
    assert unpack_ipv4_mask(b"\xc0\xa8\x01\x01\xff\xff\xff\x00") == (
        "192.168.1.1",
        "255.255.255.0",
    )

    with pytest.raises(InvalidField):
        unpack_ipv4_mask(b"\xc0\xa8\x01\x01")


def test_unpack_ipv6():
    assert (
        unpack_ipv6(b"\x00\x11\x22\x33\x44\x55\x66\x77\x88\x99\xaa\xbb\xcc\xdd\xee\xff")
        == "11:2233:4455:6677:8899:aabb:ccdd:eeff"
    )


def test_unpack_ipv6_prefix():
    data = memoryview(b"\xfe\x80" + b"\x00" * 13 + b"\x01" + b"\x40")
    assert unpack_ipv6_prefix(data) == ("fe80::1", 64)

    with pytest.raises(InvalidField):
        unpack_ipv6_prefix(data[:16])


def test_unpack_macaddr():
    assert unpack_macaddr(b"\x00\x11\x22\xaa\xbb\xcc") == "00:11:22:aa:bb:cc"


def test_unpack_euiaddr():
    assert unpack_euiaddr(0x00112233AABBCCDD) == "00:11:22:33:aa:bb:cc:dd"
    assert unpack_euiaddr(0x00112233AABBCCDD, ">") == "00:11:22:33:aa:bb:cc:dd"
    assert unpack_euiaddr(0xDDCCBBAA33221100, "<") == "00:11:22:33:aa:bb:cc:dd"


def test_unpack_tsresol():
    assert unpack_timestamp_resolution(0) == 1
    assert unpack_timestamp_resolution(1) == 1e-1
    assert unpack_timestamp_resolution(6) == 1e-6
    assert unpack_timestamp_resolution(100) == 1e-100

    assert unpack_timestamp_resolution(0 | 0b10000000) == 1
    assert unpack_timestamp_resolution(1 | 0b10000000) == 2**-1
    assert unpack_timestamp_resolution(6 | 0b10000000) == 2**-6
    assert unpack_timestamp_resolution(100 | 0b10000000) == 2**-100


def test_unpack_tsresol_out_of_range():
    with pytest.raises(ValueError):
        unpack_timestamp_resolution(256)


def test_unpack_euiaddr_native():
    number = int.from_bytes(b"\x00\x11\x22\x33\xaa\xbb\xcc\xdd", sys.byteorder)
    assert unpack_euiaddr(number, "=") == "00:11:22:33:aa:bb:cc:dd"
    assert unpack_euiaddr(0x00112233AABBCCDD, "!") == "00:11:22:33:aa:bb:cc:dd"
