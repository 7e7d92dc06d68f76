"""
Module containing the definition of known / supported "blocks" of the
pcap-ng format.

Each block is a struct-like object with some fixed fields followed by
a variable amount of options. Blocks are decoded out of a buffer holding
the block body (i.e. without the block type and the two block length
fields, which are the business of whoever splits a file into blocks).

Decoded blocks are immutable. They can optionally expose some other
properties, used eg. to provide better access to decoded information.
"""

import logging

from pcapblocks.constants import ENDIANNESS_MARKERS
from pcapblocks.constants.link_types import LinkType
from pcapblocks.constants.options import (
    OPT_IF_DESCRIPTION,
    OPT_IF_EUIADDR,
    OPT_IF_FCSLEN,
    OPT_IF_FILTER,
    OPT_IF_HARDWARE,
    OPT_IF_IPV4ADDR,
    OPT_IF_IPV6ADDR,
    OPT_IF_MACADDR,
    OPT_IF_NAME,
    OPT_IF_OS,
    OPT_IF_SPEED,
    OPT_IF_TSOFFSET,
    OPT_IF_TSRESOL,
    OPT_IF_TZONE,
)
from pcapblocks.exceptions import IncompleteBuffer, InvalidField
from pcapblocks.structs import (
    TYPE_STRING,
    TYPE_U8,
    TYPE_U32,
    TYPE_U64,
    EnumField,
    IntField,
    Option,
    OptionsField,
    as_view,
    read_byte_order_magic,
    struct_decode,
)
from pcapblocks.utils import (
    unpack_euiaddr,
    unpack_ipv4_mask,
    unpack_ipv6_prefix,
    unpack_macaddr,
    unpack_timestamp_resolution,
)

logger = logging.getLogger(__name__)

KNOWN_BLOCKS = {}


class Block(object):
    """Base class for blocks"""

    schema = []
    __slots__ = [
        "_decoded",
        "endianness",
    ]

    def __init__(self, endianness, **kwargs):
        object.__setattr__(self, "endianness", endianness)
        object.__setattr__(
            self, "_decoded", {key: kwargs[key] for key, field in self.schema}
        )

    @classmethod
    def header_size(cls):
        """Size, in bytes, of the fixed fields at the start of the block"""
        return sum(field.fixed_size for name, field in cls.schema)

    @classmethod
    def from_buffer(cls, data, endianness):
        """
        Decode a block out of the head of a buffer.

        :param data: a bytes-like object starting with the block body
        :param endianness: the section endianness, one of ``<>!=``
        :returns: a ``(block, rest)`` tuple, ``rest`` being a view on the
            part of ``data`` following the block options
        :raises: :py:exc:`~pcapblocks.exceptions.IncompleteBuffer` if more
            data is needed to decode the block
        :raises: :py:exc:`~pcapblocks.exceptions.InvalidField` if the
            block content is malformed
        """
        data = as_view(data)
        header_size = cls.header_size()
        if len(data) < header_size:
            raise IncompleteBuffer(header_size - len(data))
        decoded, rest = struct_decode(cls.schema, data, endianness)
        logger.debug(
            "Decoded %s: %d bytes, %d left",
            cls.__name__,
            len(data) - len(rest),
            len(rest),
        )
        return cls(endianness, **decoded), rest

    def __eq__(self, other):
        if self.__class__ != other.__class__:
            return False
        keys = [x[0] for x in self.schema]
        return [getattr(self, k) for k in keys] == [getattr(other, k) for k in keys]

    def __reduce__(self):
        return (_restore_block, (self.__class__, self.endianness, self._decoded))

    def __getattr__(self, name):
        # __getattr__ is only called when getting an attribute that
        # this object doesn't have.
        if name == "_decoded":
            # Not initialized yet (eg. while being copied)
            raise AttributeError(name)
        try:
            return self._decoded[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __setattr__(self, name, value):
        raise AttributeError(
            "'{cls}' object is read-only".format(cls=self.__class__.__name__)
        )

    def __repr__(self):
        args = []
        for item in self.schema:
            name = item[0]
            value = getattr(self, name)
            try:
                value = repr(value)
            except Exception:
                value = "<{0} (repr failed)>".format(type(value).__name__)
            args.append("{0}={1}".format(name, value))
        return "<{0} {1}>".format(self.__class__.__name__, " ".join(args))


def _restore_block(cls, endianness, decoded):
    return cls(endianness, **decoded)


class BlockWithOptionsMixin(object):
    """
    Block mixin giving access to options by name (or numeric code)
    """

    __slots__ = []

    def _options_field(self):
        return dict(self.schema)["options"]

    def get_all(self, name):
        """
        Get all values for the given option, in the order found.

        Raises :py:exc:`KeyError` for options unknown to the block schema.
        """
        code = self._options_field().resolve_name(name)
        return [opt.value for opt in self.options if opt.code == code]

    def get(self, name, default=None):
        """
        Get the first value for the given option, or ``default`` if it
        is missing or unknown to the block schema.
        """
        try:
            values = self.get_all(name)
        except KeyError:
            return default
        if not values:
            return default
        return values[0]

    def has_option(self, name):
        try:
            return len(self.get_all(name)) > 0
        except KeyError:
            return False

    @property
    def comments(self):
        return self.get_all("opt_comment")


def register_block(block):
    """Handy decorator to register a new known block type"""
    KNOWN_BLOCKS[block.magic_number] = block
    return block


@register_block
class InterfaceDescription(BlockWithOptionsMixin, Block):
    """
    "An Interface Description Block (IDB) is the container for information
    describing an interface on which packet data is captured."
    - pcapng spec, section 4.2.

    Raw byte options (addresses, filter) are views into the buffer the
    block was decoded from, see :py:mod:`pcapblocks.structs`.
    """

    magic_number = 0x00000001
    __slots__ = []
    schema = [
        ("link_type", EnumField(LinkType, 16)),
        ("snaplen", IntField(32, False)),  # 0 means no limit
        (
            "options",
            OptionsField(
                [
                    Option(OPT_IF_NAME, "if_name", TYPE_STRING),
                    Option(OPT_IF_DESCRIPTION, "if_description", TYPE_STRING),
                    Option(OPT_IF_IPV4ADDR, "if_IPv4addr", multiple=True),
                    Option(OPT_IF_IPV6ADDR, "if_IPv6addr", multiple=True),
                    Option(OPT_IF_MACADDR, "if_MACaddr"),
                    Option(OPT_IF_EUIADDR, "if_EUIaddr", TYPE_U64),
                    Option(OPT_IF_SPEED, "if_speed", TYPE_U64),
                    Option(OPT_IF_TSRESOL, "if_tsresol", TYPE_U8),
                    Option(OPT_IF_TZONE, "if_tzone", TYPE_U32),
                    Option(OPT_IF_FILTER, "if_filter"),
                    Option(OPT_IF_OS, "if_os", TYPE_STRING),
                    Option(OPT_IF_FCSLEN, "if_fcslen", TYPE_U8),
                    Option(OPT_IF_TSOFFSET, "if_tsoffset", TYPE_U64),
                    Option(OPT_IF_HARDWARE, "if_hardware", TYPE_STRING),
                ],
                "InterfaceDescription",
            ),
        ),
    ]

    @property
    def timestamp_resolution(self):
        # ------------------------------------------------------------
        # Resolution of timestamps. If the Most Significant Bit is
        # equal to zero, the remaining bits indicates the resolution
        # of the timestamp as as a negative power of 10 (e.g. 6 means
        # microsecond resolution). If the Most Significant Bit is
        # equal to one, the remaining bits indicates the resolution as
        # as negative power of 2 (e.g. 10 means 1/1024 of second). If
        # this option is not present, a resolution of 10^-6 is assumed
        # (i.e. timestamps have the same resolution of the standard
        # 'libpcap' timestamps).
        # ------------------------------------------------------------

        if self.has_option("if_tsresol"):
            return unpack_timestamp_resolution(self.get("if_tsresol"))

        return 1e-6

    @property
    def link_type_description(self):
        return self.link_type.description

    @property
    def ipv4_addresses(self):
        """List of ``(address, netmask)`` tuples"""
        return [unpack_ipv4_mask(x) for x in self.get_all("if_IPv4addr")]

    @property
    def ipv6_addresses(self):
        """List of ``(address, prefix_length)`` tuples"""
        return [unpack_ipv6_prefix(x) for x in self.get_all("if_IPv6addr")]

    @property
    def mac_address(self):
        value = self.get("if_MACaddr")
        if value is None:
            return None
        if len(value) != 6:
            raise InvalidField("if_MACaddr must be exactly 6 bytes")
        return unpack_macaddr(value)

    @property
    def eui_address(self):
        value = self.get("if_EUIaddr")
        if value is None:
            return None
        return unpack_euiaddr(value, self.endianness)

    @property
    def filter(self):
        """
        The capture filter as a ``(filter_type, filter_data)`` tuple;
        the first byte of the option tells how to interpret the rest.
        """
        value = self.get("if_filter")
        if value is None:
            return None
        if len(value) == 0:
            raise InvalidField("if_filter is missing the filter type")
        return value[0], value[1:]


class BlockDecoder(object):
    """
    Decoder for the blocks of a pcap-ng section.

    The section endianness is chosen once, when creating the decoder,
    and used for all the blocks decoded with it.

    Example usage:

        .. code-block:: python

            from pcapblocks import BlockDecoder

            decoder = BlockDecoder(">")
            for interface in decoder.iter_interface_descriptions(data):
                print(interface.link_type, interface.get("if_name"))

    :param endianness:
        the section endianness, in the format used by the :py:mod:`struct`
        module (one of ``<>!=``).
    """

    __slots__ = ["endianness"]

    def __init__(self, endianness):
        if endianness not in ENDIANNESS_MARKERS:
            raise ValueError("Invalid endianness: {0!r}".format(endianness))
        self.endianness = endianness

    @classmethod
    def from_byte_order_magic(cls, data):
        """Create a decoder from a section header "byte order magic" field"""
        endianness, _ = read_byte_order_magic(as_view(data))
        return cls(endianness)

    def decode(self, block_type, data):
        """
        Decode the body of a block of the given type.

        :returns: a ``(block, rest)`` tuple
        """
        try:
            block_class = KNOWN_BLOCKS[block_type]
        except KeyError:
            raise InvalidField("Unknown block layout") from None
        return block_class.from_buffer(data, self.endianness)

    def interface_description(self, data):
        """
        Decode an interface description block.

        :returns: a ``(block, rest)`` tuple
        """
        return InterfaceDescription.from_buffer(data, self.endianness)

    def iter_interface_descriptions(self, data):
        """
        Decode all the interface description blocks packed back-to-back
        in a buffer.
        """
        data = as_view(data)
        while len(data) > 0:
            block, data = self.interface_description(data)
            yield block

    def __repr__(self):
        return "{0}({1!r})".format(self.__class__.__name__, self.endianness)
