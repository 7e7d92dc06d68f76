import copy
import pickle
import struct
import sys

import pytest

from pcapblocks import BlockDecoder, InterfaceDescription
from pcapblocks.constants.link_types import LinkType
from pcapblocks.exceptions import IncompleteBuffer, InvalidField

FIRST_BLOCK = (
    b"\x01\x00"  # link type
    b"\x00\x00\x04\x00"  # snaplen
    b"\x02\x00\x03\x00"
    b"lo0\x00"  # if_name (+padding)
    b"\x00\x00\x00\x00"  # end of options
)

SECOND_BLOCK = (
    b"\x71\x00"  # link type
    b"\xff\xff\x00\x00"  # snaplen
    b"\x02\x00\x03\x00"
    b"any\x00"  # if_name (+padding)
    b"\x0c\x00\x05\x00"
    b"Linux\x00\x00\x00"  # if_os (+padding)
    b"\x00\x00\x00\x00"  # end of options
)


def test_decoder_endianness():
    assert BlockDecoder("<").endianness == "<"
    assert BlockDecoder(">").endianness == ">"
    assert repr(BlockDecoder("<")) == "BlockDecoder('<')"

    with pytest.raises(ValueError):
        BlockDecoder("big")


def test_decoder_from_byte_order_magic():
    assert BlockDecoder.from_byte_order_magic(b"\x4d\x3c\x2b\x1a").endianness == "<"
    assert BlockDecoder.from_byte_order_magic(b"\x1a\x2b\x3c\x4d").endianness == ">"

    with pytest.raises(InvalidField):
        BlockDecoder.from_byte_order_magic(b"\xde\xad\xbe\xef")


def test_decode_consecutive_blocks():
    decoder = BlockDecoder("<")
    data = FIRST_BLOCK + SECOND_BLOCK

    first, rest = decoder.interface_description(data)
    assert len(rest) == len(data) - len(FIRST_BLOCK)
    assert first.link_type is LinkType.ETHERNET
    assert first.snaplen == 0x40000
    assert first.get("if_name") == "lo0"

    second, rest = decoder.interface_description(rest)
    assert len(rest) == 0
    assert second.link_type is LinkType.LINUX_SLL
    assert second.snaplen == 0xFFFF
    assert second.get("if_name") == "any"
    assert second.get("if_os") == "Linux"

    # Decoding the remainder is the same as decoding the second block alone
    assert second == decoder.interface_description(SECOND_BLOCK)[0]


def test_iter_interface_descriptions():
    decoder = BlockDecoder("<")
    blocks = list(decoder.iter_interface_descriptions(FIRST_BLOCK + SECOND_BLOCK))

    assert len(blocks) == 2
    assert [blk.get("if_name") for blk in blocks] == ["lo0", "any"]


def test_iter_interface_descriptions_truncated():
    decoder = BlockDecoder("<")
    data = FIRST_BLOCK + SECOND_BLOCK[:10]

    with pytest.raises(IncompleteBuffer) as excinfo:
        list(decoder.iter_interface_descriptions(data))
    assert excinfo.value.needed == 3


def test_decode_by_block_type():
    decoder = BlockDecoder("<")

    block, rest = decoder.decode(0x00000001, FIRST_BLOCK)
    assert isinstance(block, InterfaceDescription)
    assert block.endianness == "<"

    with pytest.raises(InvalidField) as excinfo:
        decoder.decode(0x00000006, FIRST_BLOCK)
    assert excinfo.value.description == "Unknown block layout"


def test_block_is_read_only():
    block, rest = BlockDecoder("<").interface_description(FIRST_BLOCK)

    with pytest.raises(AttributeError):
        block.snaplen = 10
    with pytest.raises(AttributeError):
        block.endianness = ">"
    assert block.snaplen == 0x40000


def test_get_nonexistent_block_attribute():
    block, rest = BlockDecoder("<").interface_description(FIRST_BLOCK)

    with pytest.raises(AttributeError):
        block.does_not_exist


def test_blocks_equality():
    decoder = BlockDecoder("<")
    first = decoder.interface_description(FIRST_BLOCK)[0]
    second = decoder.interface_description(SECOND_BLOCK)[0]

    assert first == decoder.interface_description(bytearray(FIRST_BLOCK))[0]
    assert first != second
    assert first != "not a block"


def test_decode_native_endianness():
    data = (
        struct.pack("=HI", 1, 0x40000)  # link type, snaplen
        + struct.pack("=HH", 2, 3)
        + b"lo0\x00"  # if_name (+padding)
        + struct.pack("=HH", 7, 8)
        + b"\x00\x11\x22\x33\xaa\xbb\xcc\xdd"  # if_EUIaddr
        + b"\x00\x00\x00\x00"  # end of options
    )
    native = "<" if sys.byteorder == "little" else ">"

    block, rest = BlockDecoder("=").interface_description(data)
    assert block.link_type is LinkType.ETHERNET
    assert block.get("if_name") == "lo0"
    assert block.eui_address == "00:11:22:33:aa:bb:cc:dd"
    assert block == BlockDecoder(native).interface_description(data)[0]


def test_copy_block():
    block, rest = BlockDecoder("<").interface_description(FIRST_BLOCK)

    copied = copy.copy(block)
    assert copied == block
    assert copied.endianness == "<"
    assert copy.deepcopy(block) == block


def test_pickle_block():
    block, rest = BlockDecoder("<").interface_description(SECOND_BLOCK)

    restored = pickle.loads(pickle.dumps(block))
    assert restored == block
    assert restored.get("if_os") == "Linux"


def test_uninitialized_block_attribute():
    block = InterfaceDescription.__new__(InterfaceDescription)

    with pytest.raises(AttributeError):
        block.snaplen


def test_get_option_unknown_to_schema():
    block, rest = BlockDecoder("<").interface_description(FIRST_BLOCK)

    assert block.get("if_txspeed") is None
    assert block.get("if_txspeed", "default") == "default"
    assert not block.has_option("if_txspeed")

    with pytest.raises(KeyError):
        block.get_all("if_txspeed")
