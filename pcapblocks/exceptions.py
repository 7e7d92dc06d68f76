class PcapngException(Exception):
    """Base for all the pcapng exceptions"""

    pass


class PcapngWarning(Warning):
    """Base for all the pcapng warnings"""

    pass


class PcapngLoadError(PcapngException):
    """Indicate an error while decoding pcapng data"""

    pass


class PcapngStrictnessWarning(PcapngWarning):
    """Indicate a condition about poorly formed pcapng data"""


class IncompleteBuffer(PcapngLoadError):
    """
    Exception indicating that the buffer is a valid prefix of a larger
    block, but more bytes are required to decode it.

    Callers reading from a stream can fetch :py:attr:`needed` more bytes
    and retry the decode on the extended buffer.
    """

    def __init__(self, needed):
        super(IncompleteBuffer, self).__init__(
            "Incomplete buffer, need {0} more bytes".format(needed)
        )
        self.needed = needed


class InvalidField(PcapngLoadError):
    """
    Exception used to indicate that some field holds malformed or
    semantically invalid data (bad UTF-8, unknown option code, ...).

    Unlike :py:exc:`IncompleteBuffer`, feeding more data won't help.
    """

    def __init__(self, description):
        super(InvalidField, self).__init__(description)
        self.description = description
