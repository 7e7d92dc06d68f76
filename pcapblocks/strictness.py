"""
Module for alerting the user when decoding pcapng data that isn't
strictly valid, but can still be made sense of.

Decoding never aborts because of these conditions: structurally broken
data is reported through :py:mod:`pcapblocks.exceptions` instead.
"""

import warnings
from enum import IntEnum

from pcapblocks.exceptions import PcapngStrictnessWarning


class Strictness(IntEnum):
    NONE = 0  # No warnings, do what you want
    WARN = 1  # Do what you want, but warn of potential issues
    FIX = 2  # Warn of potential issues, fix *if possible*


strict_level = Strictness.WARN


def set_strictness(level):
    assert type(level) is Strictness
    global strict_level
    strict_level = level


def get_strictness():
    return strict_level


def warn(msg):
    "Show a warning with the given message."
    if strict_level > Strictness.NONE:
        warnings.warn(PcapngStrictnessWarning(msg))


def should_fix():
    "Helper function for showing code used to fix questionable pcapng data."
    return strict_level == Strictness.FIX
