"""Generic constants"""

# Endianness markers, in the format used by the :py:mod:`struct` module
# ----------------------------------------

ENDIAN_NATIVE = "="
ENDIAN_LITTLE = "<"
ENDIAN_BIG = ">"
ENDIAN_NETWORK = "!"

ENDIANNESS_MARKERS = (ENDIAN_NATIVE, ENDIAN_LITTLE, ENDIAN_BIG, ENDIAN_NETWORK)
