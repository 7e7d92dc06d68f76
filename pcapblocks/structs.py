"""
Module providing facilities for decoding struct-like data out of
in-memory buffers.

Decoding never copies the input: every function takes a buffer and
returns the decoded value together with the unconsumed remainder, both
being :py:class:`memoryview` slices of the caller's buffer. Raw byte
values (addresses, filters, ...) are handed out the same way, so they
are only valid for as long as the caller keeps the source buffer alive
and unchanged. Use ``bytes(value)`` to get an independent copy.
"""

import abc
import logging
import struct
from collections import namedtuple

from pcapblocks import strictness
from pcapblocks.constants import ENDIANNESS_MARKERS
from pcapblocks.constants.options import OPT_COMMENT, OPT_ENDOFOPT
from pcapblocks.exceptions import IncompleteBuffer, InvalidField

logger = logging.getLogger(__name__)

BYTE_ORDER_MAGIC = 0x1A2B3C4D
BYTE_ORDER_MAGIC_INVERSE = 0x4D3C2B1A

# Option code (uint16) + value length (uint16)
OPTION_HEADER_SIZE = 4

INT_FORMATS = {8: "b", 16: "h", 32: "i", 64: "q"}

# Type name constants, to keep a list and prevent typos
TYPE_BYTES = "bytes"
TYPE_STRING = "string"

TYPE_U8 = "u8"  # Unsigned integer, 8 bits
TYPE_U16 = "u16"
TYPE_U32 = "u32"
TYPE_U64 = "u64"
TYPE_I8 = "i8"  # Signed integer, 8 bits
TYPE_I16 = "i16"
TYPE_I32 = "i32"
TYPE_I64 = "i64"

_numeric_types = {
    TYPE_U8: "B",
    TYPE_I8: "b",
    TYPE_U16: "H",
    TYPE_I16: "h",
    TYPE_U32: "I",
    TYPE_I32: "i",
    TYPE_U64: "Q",
    TYPE_I64: "q",
}


def as_view(data):
    """
    Wrap a bytes-like object in a flat, unsigned-byte memoryview,
    without copying it.
    """
    view = memoryview(data)
    if view.ndim != 1 or view.format != "B":
        view = view.cast("B")
    return view


def read_bytes(data, size):
    """
    Read the given amount of raw bytes from the head of a buffer.

    This is the only place where buffer length is checked: every other
    fixed-width read goes through here.

    :param data: the buffer from which to read data
    :param size: the size to read, in bytes
    :returns: a ``(chunk, rest)`` tuple of slices of ``data``
    :raises: :py:exc:`~pcapblocks.exceptions.IncompleteBuffer` reporting
        exactly how many bytes are missing, if ``data`` is too short
    """
    if size > len(data):
        raise IncompleteBuffer(size - len(data))
    return data[:size], data[size:]


def read_int(data, size, signed=False, endianness="="):
    """
    Read (and decode) an integer number from the head of a buffer.

    :param data: the buffer from which to read data
    :param size: the size, in bits, of the number to be read.
        Supported sizes are: 8, 16, 32 and 64 bits.
    :param signed: Whether a signed or unsigned number is required.
        Defaults to ``False`` (unsigned int).
    :param endianness: specify the endianness to use to decode the number,
        in the same format used by Python :py:mod:`struct` module.
        Defaults to '=' (native endianness). '!' means "network" endianness
        (big endian), '<' little endian, '>' big endian.
    :return: a ``(number, rest)`` tuple
    """
    fmt = INT_FORMATS.get(size)
    if fmt is None:
        raise ValueError("Unsupported integer size: {0}".format(size))
    fmt = fmt.lower() if signed else fmt.upper()
    assert endianness in ENDIANNESS_MARKERS
    chunk, rest = read_bytes(data, size // 8)
    return struct.unpack(endianness + fmt, chunk)[0], rest


def skip_padding(data, size, pad_block_size=4):
    """
    Skip the padding following a ``size``-bytes value, so that the
    remainder starts on the next ``pad_block_size`` boundary.

    Padding content is never checked. A buffer ending inside the padding
    is not an error: there is simply nothing left to skip.
    """
    padding = (pad_block_size - (size % pad_block_size)) % pad_block_size
    return data[min(padding, len(data)):]


def read_byte_order_magic(data):
    """
    Determine a section endianness from its "byte order magic" field.

    :returns: a ``(endianness, rest)`` tuple
    """
    byte_order_magic, rest = read_int(data, 32, False, ">")
    if byte_order_magic == BYTE_ORDER_MAGIC:
        return ">", rest
    if byte_order_magic == BYTE_ORDER_MAGIC_INVERSE:
        return "<", rest
    raise InvalidField("Wrong byte order magic")


def read_options(data, endianness, interpret):
    """
    Read "options" from an options list, until the buffer is exhausted or
    an end marker is reached.

    Each option is composed by:

    - option_code (uint16)
    - value_length (uint16)
    - value (value_length-sized binary data, padded to 32 bits)

    The end marker is simply an option with code ``0x0000``; only its
    header is consumed.

    :param data: the buffer holding the options
    :param endianness: the section endianness
    :param interpret: a callable ``(payload, code, length)`` returning the
        decoded option. Any exception it raises is propagated as-is.
    :returns: a ``(options, rest)`` tuple, ``options`` being a list of
        whatever ``interpret`` returned, in the order found in the buffer
    """
    data = as_view(data)
    options = []

    while len(data) > 0:
        header, data = read_bytes(data, OPTION_HEADER_SIZE)
        option_code, option_length = struct.unpack(endianness + "HH", header)

        if option_code == OPT_ENDOFOPT:
            break

        payload, data = read_bytes(data, option_length)
        data = skip_padding(data, option_length)

        logger.debug("Read option %d (%d bytes)", option_code, option_length)
        options.append(interpret(payload, option_code, option_length))

    return options, data


def decode_value(value, ftype, endianness, name):
    """
    Decode a raw option payload according to its field type.

    The following value types are supported:

    - ``bytes``: the payload itself, a view into the source buffer
    - ``string``: strict UTF-8 decoding
    - ``{u,i}{8,16,32,64}``: (un)signed integer of the specified length
    """
    if ftype == TYPE_BYTES:
        return value

    if ftype == TYPE_STRING:
        try:
            return str(value, "utf-8")
        except UnicodeDecodeError as e:
            raise InvalidField("{0} is not valid UTF-8".format(name)) from e

    if ftype in _numeric_types:
        fmt = endianness + _numeric_types[ftype]
        try:
            raw, extra = read_bytes(value, struct.calcsize(fmt))
        except IncompleteBuffer as e:
            # The option itself was complete: its value is just too short
            raise InvalidField("{0} value too short".format(name)) from e
        if len(extra) > 0:
            strictness.warn(
                "option {0} has {1} unexpected trailing bytes".format(
                    name, len(extra)
                )
            )
        return struct.unpack(fmt, raw)[0]

    raise ValueError("Unsupported field type: {0}".format(ftype))


# Class representing a single option schema.
# require code and name; by default, bytes ftype, forbid multiples
Option = namedtuple(
    "Option", ("code", "name", "ftype", "multiple"), defaults=(TYPE_BYTES, False)
)


class DecodedOption(namedtuple("DecodedOption", ("code", "name", "value"))):
    """A single option, as found in a block"""

    __slots__ = ()

    def __repr__(self):
        value = self.value
        if isinstance(value, memoryview):
            value = bytes(value)
        return "{0}({1}={2!r})".format(self.__class__.__name__, self.name, value)


class StructField(metaclass=abc.ABCMeta):
    """Abstract base class for struct fields"""

    __slots__ = []

    # Number of bytes always taken by the field
    fixed_size = 0

    @abc.abstractmethod
    def load(self, data, endianness, seen=None):
        """Decode the field value; return a ``(value, rest)`` tuple"""

    def __repr__(self):
        return "{0}()".format(self.__class__.__name__)


class IntField(StructField):
    """
    Field containing an integer number.

    :param size: number size, in bits. Currently supported
        are 8, 16, 32 and 64-bit integers
    :param signed: whether the number is a signed or unsigned
        integer. Defaults to False (unsigned)
    """

    __slots__ = ["size", "signed"]

    def __init__(self, size, signed=False):
        self.size = size  # in bits!
        self.signed = signed

    @property
    def fixed_size(self):
        return self.size // 8

    def load(self, data, endianness, seen=None):
        return read_int(data, self.size, signed=self.signed, endianness=endianness)

    def __repr__(self):
        return "{0}(size={1!r}, signed={2!r})".format(
            self.__class__.__name__, self.size, self.signed
        )


class EnumField(IntField):
    """
    Unsigned integer field whose value is looked up in an enum.

    The enum is in charge of representing values it doesn't know about.
    """

    __slots__ = ["enum"]

    def __init__(self, enum, size):
        super(EnumField, self).__init__(size, signed=False)
        self.enum = enum

    def load(self, data, endianness, seen=None):
        number, rest = super(EnumField, self).load(data, endianness, seen)
        return self.enum(number), rest

    def __repr__(self):
        return "{0}({1}, size={2!r})".format(
            self.__class__.__name__, self.enum.__name__, self.size
        )


class OptionsField(StructField):
    """
    Field containing some options.

    :param options_schema:
        Definition of the known options: a list of :py:class:`Option`
        objects. ``opt_comment`` is common to all blocks and is always
        part of the schema.
    :param block_name:
        Name of the block owning the options, used in error messages.
    """

    __slots__ = ["schema", "block_name"]

    def __init__(self, options_schema, block_name):
        self.schema = {}  # {<code>: Option(...)}
        self.block_name = block_name
        for item in [
            Option(OPT_COMMENT, "opt_comment", TYPE_STRING, multiple=True)
        ] + list(options_schema):
            if not isinstance(item, Option):
                raise TypeError("expected option, got '{}'".format(item))
            self.schema[item.code] = item

    def load(self, data, endianness, seen=None):
        def interpret(payload, code, length):
            return self.decode_option(payload, code, endianness)

        options, rest = read_options(data, endianness, interpret)
        return tuple(self._check_multiples(options)), rest

    def decode_option(self, payload, code, endianness):
        try:
            option = self.schema[code]
        except KeyError:
            logger.debug("Unknown %s option code %d", self.block_name, code)
            raise InvalidField(
                "{0} option type invalid".format(self.block_name)
            ) from None
        value = decode_value(payload, option.ftype, endianness, option.name)
        return DecodedOption(code, option.name, value)

    def resolve_name(self, name):
        """Map an option name to its code; codes are returned unchanged"""
        for option in self.schema.values():
            if option.name == name:
                return option.code
        if name in self.schema:
            return name
        raise KeyError(name)

    def _check_multiples(self, options):
        """Warn about (and possibly drop) repeated non-repeatable options"""
        seen = set()
        for option in options:
            if option.code in seen and not self.schema[option.code].multiple:
                strictness.warn(
                    "repeated option {0} '{1}' not permitted in pcapng".format(
                        option.code, option.name
                    )
                )
                if strictness.should_fix():
                    continue
            seen.add(option.code)
            yield option

    def __repr__(self):
        return "{0}({1!r})".format(self.__class__.__name__, self.block_name)


def struct_decode(schema, data, endianness="="):
    """
    Decode structured data from a buffer, following a schema.

    :param schema:
        a list of two tuples: ``(name, field)``, where ``name`` is a
        string representing the attribute name, and ``field`` is an instance
        of a :py:class:`StructField` sub-class, providing a ``.load()``
        method to be called on the buffer to get the field value.

    :param data:
        a bytes-like object from which data will be read.

    :param endianness:
        endianness specifier, as accepted by Python struct module
        (one of ``<>!=``, defaults to ``=``).

    :return:
        a ``(decoded, rest)`` tuple: a dictionary mapping the field names
        to decoded data, and the unconsumed part of ``data``
    """

    data = as_view(data)
    decoded = {}
    for name, field in schema:
        decoded[name], data = field.load(data, endianness=endianness, seen=decoded)
    return decoded, data
