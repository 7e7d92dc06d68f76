import pytest

from pcapblocks.constants.link_types import LINKTYPE_DESCRIPTIONS, LinkType


def test_known_link_types():
    assert LinkType(0) is LinkType.NULL
    assert LinkType(1) is LinkType.ETHERNET
    assert LinkType(105) is LinkType.IEEE802_11
    assert LinkType(276) is LinkType.LINUX_SLL2
    assert LinkType.ETHERNET.known
    assert LinkType.ETHERNET.description == "D/I/X and 802.3 Ethernet"


def test_unknown_link_type():
    link_type = LinkType(0xFF01)

    assert link_type == 0xFF01
    assert int(link_type) == 0xFF01
    assert isinstance(link_type, LinkType)
    assert link_type.name == "UNKNOWN"
    assert link_type.value == 0xFF01
    assert not link_type.known
    assert link_type.description == "Unknown link type: 0xff01"


def test_link_type_without_description():
    assert LinkType.MTP2.known
    assert LinkType.MTP2 not in LINKTYPE_DESCRIPTIONS
    assert LinkType.MTP2.description == "Unknown link type: 0x008c"


@pytest.mark.parametrize("value", [-1, 0x100000000, "1"])
def test_invalid_link_type(value):
    with pytest.raises(ValueError):
        LinkType(value)
