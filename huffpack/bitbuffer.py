"""Bit-level reading and writing on top of binary streams.

Bits are handled most-significant first within each byte.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Iterator
from typing import BinaryIO

logger = logging.getLogger(__name__)

BITS_PER_BYTE = 8


def _binary(value: int) -> str:
    return format(value, "08b")


class BitReader:
    """Reads a binary stream one bit at a time, buffering a single byte."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._byte = 0
        self._remaining = 0

    def occupied(self) -> int:
        """Number of bits still waiting in the buffer."""
        return self._remaining

    def free(self) -> int:
        """Number of bit positions already consumed from the buffered byte."""
        return BITS_PER_BYTE - self._remaining

    def read_bit(self) -> int:
        """Return the next bit (0 or 1); raise EOFError when the stream is exhausted."""
        if self._remaining == 0:
            chunk = self._stream.read(1)
            if not chunk:
                raise EOFError("no more bits to read")
            self._byte = chunk[0]
            self._remaining = BITS_PER_BYTE
        self._remaining -= 1
        bit = (self._byte >> self._remaining) & 1
        logger.debug(
            "read: remaining=%d byte=%d (%s) bit=%d",
            self._remaining,
            self._byte,
            _binary(self._byte),
            bit,
        )
        return bit

    def __iter__(self) -> Iterator[int]:
        while True:
            try:
                yield self.read_bit()
            except EOFError:
                return


class BitWriter:
    """Writes bits to a binary stream, emitting a byte every eight bits."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._byte = 0
        self._count = 0

    def occupied(self) -> int:
        """Number of bits written into the pending byte."""
        return self._count

    def free(self) -> int:
        """Number of bits that still fit in the pending byte."""
        return BITS_PER_BYTE - self._count

    def write_bit(self, bit: int) -> None:
        """Append one bit; the byte is written out once it is full."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        before = self._byte
        self._byte = (self._byte << 1) | bit
        self._count += 1
        logger.debug(
            "write: bit=%d count=%d byte %s -> %s",
            bit,
            self._count,
            _binary(before),
            _binary(self._byte),
        )
        if self._count == BITS_PER_BYTE:
            self.flush()

    def flush(self) -> None:
        """Write the pending byte, padding with zero bits, if any bit is pending."""
        if self._count > 0:
            value = self._byte << (BITS_PER_BYTE - self._count)
            self._stream.write(bytes((value,)))
            self._byte = 0
            self._count = 0

    def __enter__(self) -> BitWriter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.flush()


def copy_bits(source: BinaryIO, destination: BinaryIO) -> int:
    """Copy *source* to *destination* bit by bit; return the number of bits copied."""
    copied = 0
    with BitWriter(destination) as writer:
        for bit in BitReader(source):
            writer.write_bit(bit)
            copied += 1
    return copied


def main(argv: list[str] | None = None) -> int:
    """Copy one file to another through the bit buffers."""
    parser = argparse.ArgumentParser(description="Copy a file bit by bit.")
    parser.add_argument("source", help="file to read")
    parser.add_argument("destination", help="file to write")
    args = parser.parse_args(argv)
    with open(args.source, "rb") as src, open(args.destination, "wb") as dst:
        copy_bits(src, dst)
    return 0