"""
Tag values of the heap dump event stream.
"""

from enum import IntEnum


class Tag(IntEnum):
    """Single-byte discriminator preceding every record in a heap dump."""

    ROOT = 0
    SIZE = 1
    CLASS_NAME = 2
    PUSH = 3
    POP = 4
