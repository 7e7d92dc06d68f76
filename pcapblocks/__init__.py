# ----------------------------------------------------------------------
# Library to decode blocks of the pcap-ng file format
#
# See: https://www.ietf.org/archive/id/draft-tuexen-opsawg-pcapng-05.html
# ----------------------------------------------------------------------

from .blocks import BlockDecoder, InterfaceDescription  # noqa
from .constants.link_types import LinkType  # noqa
from .exceptions import IncompleteBuffer, InvalidField  # noqa
from .structs import read_options  # noqa
