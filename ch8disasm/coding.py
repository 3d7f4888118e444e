# based on https://github.com/whitequark/binja-avnera/blob/main/mc/coding.py
"""Splitting raw ROM bytes into big-endian instruction words."""

import struct
from typing import Iterator, List, Sequence, Union

from .errors import EmptyInputError, OddLengthError

# Every instruction is one big-endian 16-bit word
WORD_SIZE = 2

ByteSource = Union[bytes, bytearray, memoryview, Sequence[int]]


class BufferTooShort(Exception):
    """Raised when attempting to read past the end of the buffer."""


class WordDecoder:
    def __init__(self, buf: ByteSource) -> None:
        self.buf, self.pos = bytes(buf), 0

    def remaining(self) -> int:
        return len(self.buf) - self.pos

    def _unpack(self, fmt: str) -> int:
        size = struct.calcsize(fmt)
        if len(self.buf) - self.pos < size:
            raise BufferTooShort
        fmt = ">" + fmt if fmt[0] != "<" else fmt
        items = struct.unpack_from(fmt, self.buf, self.pos)
        self.pos += size
        if len(items) == 1:
            return items[0]  # type: ignore
        raise ValueError("Unpacking more than one item is not supported")

    def unsigned_word_be(self) -> int:
        return self._unpack("H")


def iter_words(data: ByteSource) -> Iterator[int]:
    """Yield instruction words from ``data``, rejecting empty or odd input."""
    if len(data) == 0:
        raise EmptyInputError()
    if len(data) % WORD_SIZE != 0:
        raise OddLengthError(f"{len(data)} bytes")

    decoder = WordDecoder(data)
    while decoder.remaining():
        yield decoder.unsigned_word_be()


def frame(data: ByteSource) -> List[int]:
    # validation happens on the first next(), so errors surface here
    return list(iter_words(data))


__all__ = ["BufferTooShort", "WordDecoder", "WORD_SIZE", "iter_words", "frame"]
