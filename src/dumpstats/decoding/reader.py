"""
Primitive readers for the heap dump wire format.

Integers are 4-byte big-endian signed values; strings are an integer byte
length followed by that many bytes of text. The reader keeps track of its
byte offset so decode errors can point at the failing record.
"""

import logging
import struct
from typing import BinaryIO, Optional

from ..validation import InvalidLengthError, TruncatedInputError

logger = logging.getLogger(__name__)

_INT32 = struct.Struct(">i")


class DumpReader:
    """
    Sequential reader over a binary heap dump stream.

    Args:
        stream: Any object with a `read(n)` method returning bytes. Short reads
            are retried until the requested size is reached or the stream
            reports end of input.
        encoding: Text encoding for length-prefixed strings
    """

    def __init__(self, stream: BinaryIO, encoding: str = "utf-8"):
        self.stream = stream
        self.encoding = encoding
        self.offset = 0

    def _read_exact(self, size: int) -> bytes:
        start = self.offset
        chunks = []
        remaining = size
        while remaining > 0:
            chunk = self.stream.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
        data = b"".join(chunks)
        self.offset += len(data)
        if len(data) != size:
            raise TruncatedInputError(size, len(data), offset=start)
        return data

    def read_tag(self) -> Optional[int]:
        """
        Read one tag byte.

        Returns:
            The byte value, or None on a clean end of stream
        """
        data = self.stream.read(1)
        if not data:
            return None
        self.offset += 1
        return data[0]

    def read_int32(self) -> int:
        """
        Read a 4-byte big-endian signed integer.

        Raises:
            TruncatedInputError: If the stream ends before 4 bytes are read
        """
        return _INT32.unpack(self._read_exact(_INT32.size))[0]

    def read_string(self) -> str:
        """
        Read a length-prefixed string.

        Raises:
            TruncatedInputError: If the stream ends before the whole string is read
            InvalidLengthError: If the announced length is negative
        """
        length_offset = self.offset
        length = self.read_int32()
        if length < 0:
            raise InvalidLengthError(length, offset=length_offset)
        data = self._read_exact(length)
        return data.decode(self.encoding, errors="replace")
