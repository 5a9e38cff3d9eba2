"""Command line Huffman compressor and decompressor."""

from __future__ import annotations

import argparse
import struct
import sys
from collections.abc import Iterator
from pathlib import Path

from huffpack.bitbuffer import BitReader, BitWriter
from huffpack.frequencies import get_nodes
from huffpack.minheap import MinHeap, Node
from huffpack.table import HuffmanTable
from huffpack.tree import HuffmanTree

# Alphabet size (uint16) and original length (uint64), little-endian.
_HEADER = struct.Struct("<HQ")
_SUFFIX = ".huf"


def _compress(source: Path, destination: Path) -> None:
    tree = HuffmanTree(MinHeap(get_nodes(source)))
    table = HuffmanTable(tree)
    data = source.read_bytes()
    with open(destination, "wb") as out:
        out.write(_HEADER.pack(len(table.leaves), len(data)))
        out.write(bytes(table.leaves))
        with BitWriter(out) as writer:
            for bit in table.tree_code:
                writer.write_bit(bit)
            for byte in data:
                for bit in table.codes[byte]:
                    writer.write_bit(bit)


def _read_tree(reader: BitReader, leaves: Iterator[int]) -> Node:
    if reader.read_bit():
        try:
            return Node(symbol=next(leaves))
        except StopIteration:
            raise ValueError("tree description has more leaves than the alphabet") from None
    left = _read_tree(reader, leaves)
    right = _read_tree(reader, leaves)
    node = Node(key=0, left=left, right=right)
    left.parent = node
    right.parent = node
    return node


def _decompress(source: Path, destination: Path) -> None:
    with open(source, "rb") as inp:
        header = inp.read(_HEADER.size)
        if len(header) != _HEADER.size:
            raise ValueError("compressed file is too short for its header")
        alphabet, length = _HEADER.unpack(header)
        leaves = inp.read(alphabet)
        if len(leaves) != alphabet:
            raise ValueError("compressed file is missing alphabet symbols")
        if length and not alphabet:
            raise ValueError("compressed file has data but an empty alphabet")
        reader = BitReader(inp)
        output = bytearray()
        try:
            if alphabet:
                remaining = iter(leaves)
                root = _read_tree(reader, remaining)
                if next(remaining, None) is not None:
                    raise ValueError("tree description has fewer leaves than the alphabet")
                for _ in range(length):
                    node = root
                    while not node.is_leaf():
                        node = node.right if reader.read_bit() else node.left
                    output.append(node.symbol)
        except EOFError:
            raise ValueError("compressed data is truncated") from None
    destination.write_bytes(bytes(output))


def _default_output(source: Path, compress: bool) -> Path:
    if compress:
        return source.with_name(source.name + _SUFFIX)
    if source.suffix == _SUFFIX:
        return source.with_suffix("")
    return source.with_name(source.name + ".out")


def main(argv: list[str] | None = None) -> int:
    """Compress ('c...') or decompress (anything else) a file."""
    parser = argparse.ArgumentParser(description="Huffman file compression.")
    parser.add_argument("mode", help="'c' to compress, 'd' to decompress")
    parser.add_argument("file", help="input file")
    parser.add_argument("output", nargs="?", help="output file")
    args = parser.parse_args(argv)

    source = Path(args.file)
    compress = args.mode.startswith("c")
    destination = Path(args.output) if args.output else _default_output(source, compress)
    try:
        if compress:
            _compress(source, destination)
        else:
            _decompress(source, destination)
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0