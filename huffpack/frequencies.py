"""Byte frequency counting for Huffman coding."""

from __future__ import annotations

import os
from collections import Counter

from huffpack.minheap import Node

ALPHABET_SIZE = 256


def get_frequencies(path: str | os.PathLike[str]) -> list[int]:
    """Return a list of 256 counts, one per byte value, for the file at *path*."""
    with open(path, "rb") as handle:
        counts = Counter(handle.read())
    return [counts.get(byte, 0) for byte in range(ALPHABET_SIZE)]


def get_nodes(path: str | os.PathLike[str]) -> list[Node]:
    """Return a leaf node for every byte that occurs in the file, in byte order."""
    return [
        Node(key=count, symbol=byte)
        for byte, count in enumerate(get_frequencies(path))
        if count > 0
    ]