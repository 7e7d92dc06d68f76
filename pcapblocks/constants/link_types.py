"""
Registry of the standardized link-layer header types.

Extracted from:
http://www.tcpdump.org/linktypes.html
"""

from enum import IntEnum


class LinkType(IntEnum):
    """
    Link layer type of an interface.

    Values missing from the registry don't fail the lookup: ``LinkType(n)``
    returns an ``UNKNOWN`` member still carrying ``n`` as its value, so the
    original number is never lost.
    """

    # No link layer information. A packet saved with this link layer
    # contains a raw L3 packet preceded by a 32-bit host-byte-order AF_
    # value indicating the specific L3 type.
    NULL = 0
    ETHERNET = 1
    EXP_ETHERNET = 2
    AX25 = 3
    PRONET = 4
    CHAOS = 5
    TOKEN_RING = 6
    ARCNET = 7
    SLIP = 8
    PPP = 9
    FDDI = 10
    PPP_HDLC = 50
    PPP_ETHER = 51
    SYMANTEC_FIREWALL = 99
    ATM_RFC1483 = 100
    RAW = 101
    SLIP_BSDOS = 102
    PPP_BSDOS = 103
    C_HDLC = 104
    IEEE802_11 = 105
    ATM_CLIP = 106
    FRELAY = 107
    LOOP = 108
    ENC = 109
    LANE8023 = 110
    HIPPI = 111
    HDLC = 112
    LINUX_SLL = 113
    LTALK = 114
    ECONET = 115
    IPFILTER = 116
    PFLOG = 117
    CISCO_IOS = 118
    PRISM_HEADER = 119
    AIRONET_HEADER = 120
    HHDLC = 121
    IP_OVER_FC = 122
    SUNATM = 123
    RIO = 124
    PCI_EXP = 125
    AURORA = 126
    IEEE802_11_RADIO = 127
    # Tazmen Sniffer Protocol: a generic encapsulation for any other
    # link type, with meta-information such as 802.11 signal strength.
    TZSP = 128
    ARCNET_LINUX = 129
    # Juniper-private data link types; the corresponding DLT_s carry
    # chassis-internal metainformation such as QOS profiles.
    JUNIPER_MLPPP = 130
    JUNIPER_MLFR = 131
    JUNIPER_ES = 132
    JUNIPER_GGSN = 133
    JUNIPER_MFR = 134
    JUNIPER_ATM2 = 135
    JUNIPER_SERVICES = 136
    JUNIPER_ATM1 = 137
    APPLE_IP_OVER_IEEE1394 = 138
    MTP2_WITH_PHDR = 139
    MTP2 = 140
    MTP3 = 141
    SCCP = 142
    DOCSIS = 143
    LINUX_IRDA = 144
    IBM_SP = 145
    IBM_SN = 146
    USB_LINUX = 189
    PPI = 192
    IEEE802_15_4 = 195
    USB_LINUX_MMAPPED = 220
    IPV4 = 228
    IPV6 = 229
    NETLINK = 253
    LINUX_SLL2 = 276

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, int) or not 0 <= value <= 0xFFFFFFFF:
            return None
        unknown = int.__new__(cls, value)
        unknown._name_ = "UNKNOWN"
        unknown._value_ = value
        return unknown

    @property
    def known(self):
        return self._name_ != "UNKNOWN"

    @property
    def description(self):
        try:
            return LINKTYPE_DESCRIPTIONS[self]
        except KeyError:
            return "Unknown link type: 0x{0:04x}".format(int(self))


LINKTYPE_DESCRIPTIONS = {
    LinkType.NULL: "No link layer information.",
    LinkType.ETHERNET: "D/I/X and 802.3 Ethernet",
    LinkType.EXP_ETHERNET: "Experimental Ethernet (3Mb)",
    LinkType.AX25: "Amateur Radio AX.25",
    LinkType.PRONET: "Proteon ProNET Token Ring",
    LinkType.CHAOS: "Chaos",
    LinkType.TOKEN_RING: "IEEE 802 Networks",
    LinkType.ARCNET: "ARCNET, with BSD-style header",
    LinkType.SLIP: "Serial Line IP",
    LinkType.PPP: "Point-to-point Protocol",
    LinkType.FDDI: "FDDI",
    LinkType.PPP_HDLC: "PPP in HDLC-like framing",
    LinkType.PPP_ETHER: "NetBSD PPP-over-Ethernet",
    LinkType.SYMANTEC_FIREWALL: "Symantec Enterprise Firewall",
    LinkType.ATM_RFC1483: "LLC/SNAP-encapsulated ATM",
    LinkType.RAW: "Raw IP",
    LinkType.SLIP_BSDOS: "BSD/OS SLIP BPF header",
    LinkType.PPP_BSDOS: "BSD/OS PPP BPF header",
    LinkType.C_HDLC: "Cisco HDLC",
    LinkType.IEEE802_11: "IEEE 802.11 (wireless)",
    LinkType.ATM_CLIP: "Linux Classical IP over ATM",
    LinkType.FRELAY: "Frame Relay",
    LinkType.LOOP: "OpenBSD loopback",
    LinkType.ENC: "OpenBSD IPSEC enc",
    LinkType.LANE8023: "ATM LANE + 802.3 (Reserved for future use)",
    LinkType.HIPPI: "NetBSD HIPPI (Reserved for future use)",
    LinkType.HDLC: "NetBSD HDLC framing (Reserved for future use)",
    LinkType.LINUX_SLL: "Linux cooked socket capture",
    LinkType.LTALK: "Apple LocalTalk hardware",
    LinkType.ECONET: "Acorn Econet",
    LinkType.IPFILTER: "Reserved for use with OpenBSD ipfilter",
    LinkType.PFLOG: "OpenBSD DLT_PFLOG",
    LinkType.CISCO_IOS: "For Cisco-internal use",
    LinkType.PRISM_HEADER: "802.11+Prism II monitor mode",
    LinkType.AIRONET_HEADER: "FreeBSD Aironet driver stuff",
    LinkType.HHDLC: "Reserved for Siemens HiPath HDLC",
    LinkType.IP_OVER_FC: "RFC 2625 IP-over-Fibre Channel",
    LinkType.SUNATM: "Solaris+SunATM",
    LinkType.RIO: "RapidIO (private use)",
    LinkType.PCI_EXP: "PCI Express (private use)",
    LinkType.AURORA: "Xilinx Aurora link layer (private use)",
    LinkType.IEEE802_11_RADIO: "802.11 plus BSD radio header",
    LinkType.TZSP: "Tazmen Sniffer Protocol",
    LinkType.ARCNET_LINUX: "Linux-style headers",
    LinkType.JUNIPER_MLPPP: "Juniper-private data link type",
    LinkType.JUNIPER_MLFR: "Juniper-private data link type",
    LinkType.JUNIPER_ES: "Juniper-private data link type",
    LinkType.JUNIPER_GGSN: "Juniper-private data link type",
    LinkType.JUNIPER_MFR: "Juniper-private data link type",
    LinkType.JUNIPER_ATM2: "Juniper-private data link type",
    LinkType.JUNIPER_SERVICES: "Juniper-private data link type",
    LinkType.JUNIPER_ATM1: "Juniper-private data link type",
    LinkType.APPLE_IP_OVER_IEEE1394: "Apple IP-over-IEEE 1394 cooked header",
    # LinkType.MTP2_WITH_PHDR: "???",
    # LinkType.MTP2: "???",
    # LinkType.MTP3: "???",
    # LinkType.SCCP: "???",
    LinkType.DOCSIS: "DOCSIS MAC frames",
    LinkType.LINUX_IRDA: "Linux-IrDA",
    LinkType.IBM_SP: "Reserved for IBM SP switch and IBM Next Federation switch.",  # noqa
    LinkType.IBM_SN: "Reserved for IBM SP switch and IBM Next Federation switch.",  # noqa
    LinkType.USB_LINUX: "USB packets with Linux USB header",
    LinkType.PPI: "Per-Packet Information header",
    LinkType.IEEE802_15_4: "IEEE 802.15.4 wireless PAN",
    LinkType.USB_LINUX_MMAPPED: "USB packets with padded Linux USB header",
    LinkType.IPV4: "Raw IPv4",
    LinkType.IPV6: "Raw IPv6",
    LinkType.NETLINK: "Linux netlink NETLINK NFLOG socket log messages",
    LinkType.LINUX_SLL2: "Linux cooked capture encapsulation v2",
}
