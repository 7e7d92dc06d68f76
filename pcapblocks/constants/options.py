# Option codes
# ------------------------------------------------------------

# Generic options
# ----------------------------------------

# It delimits the end of the optional fields. This block cannot be
# repeated within a given list of options.
OPT_ENDOFOPT = 0

# A UTF-8 string containing a comment that is associated to the
# current block.
OPT_COMMENT = 1

# Interface options
# ----------------------------------------

# A UTF-8 string containing the name of the device used to capture data.
OPT_IF_NAME = 2

# A UTF-8 string containing the description of the device used to
# capture data.
OPT_IF_DESCRIPTION = 3

# 8 Interface network address and netmask. This option can be repeated
# multiple times within the same Interface Description Block when
# multiple IPv4 addresses are assigned to the interface.
OPT_IF_IPV4ADDR = 4

# 17 Interface network address and prefix length (stored in the last
# byte). Repeatable, like OPT_IF_IPV4ADDR.
OPT_IF_IPV6ADDR = 5

# 6 Interface Hardware MAC address (48 bits).
OPT_IF_MACADDR = 6

# 8 Interface Hardware EUI address (64 bits), if available.
OPT_IF_EUIADDR = 7

# 8 Interface speed (in bps).
OPT_IF_SPEED = 8

# 1 Resolution of timestamps. If the Most Significant Bit is equal to
# zero, the remaining bits indicates the resolution of the timestamp
# as as a negative power of 10 (e.g. 6 means microsecond resolution).
# If the Most Significant Bit is equal to one, the remaining bits
# indicates the resolution as as negative power of 2 (e.g. 10 means
# 1/1024 of second). If this option is not present, a resolution of
# 10^-6 is assumed.
OPT_IF_TSRESOL = 9

# 4 Time zone for GMT support.
OPT_IF_TZONE = 10

# variable The filter (e.g. "capture only TCP traffic") used to
# capture traffic. The first byte of the Option Data keeps a code of
# the filter used (e.g. if this is a libpcap string, or BPF bytecode).
OPT_IF_FILTER = 11

# variable A UTF-8 string containing the name of the operating system
# of the machine in which this interface is installed.
OPT_IF_OS = 12

# 1 An integer value that specified the length of the Frame Check
# Sequence (in bits) for this interface.
OPT_IF_FCSLEN = 13

# 8 A 64 bits integer value that specifies an offset (in seconds) that
# must be added to the timestamp of each packet to obtain the absolute
# timestamp of a packet.
OPT_IF_TSOFFSET = 14

# variable A UTF-8 string containing the description of the interface
# hardware.
OPT_IF_HARDWARE = 15
