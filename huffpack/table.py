"""Code table derived from a Huffman tree."""

from __future__ import annotations

import os

from huffpack.frequencies import get_nodes
from huffpack.minheap import MinHeap, Node
from huffpack.tree import HuffmanTree


class HuffmanTable:
    """Per-symbol bit codes plus a pre-order description of the tree shape.

    ``tree_code`` holds 0 for each branch and 1 for each leaf in pre-order;
    ``leaves`` holds the leaf symbols in the same order.
    """

    def __init__(self, tree: HuffmanTree) -> None:
        self.codes: dict[int, tuple[int, ...]] = {}
        self.tree_code: list[int] = []
        self.leaves: list[int] = []
        self._build(tree.root, [])

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> HuffmanTable:
        """Build the table for the byte frequencies of the file at *path*."""
        return cls(HuffmanTree(MinHeap(get_nodes(path))))

    def _build(self, node: Node | None, path: list[int]) -> None:
        if node is None:
            return
        if node.is_leaf():
            self.tree_code.append(1)
            self.codes[node.symbol] = tuple(path)
            self.leaves.append(node.symbol)
        else:
            self.tree_code.append(0)
        path.append(0)
        self._build(node.left, path)
        path.pop()
        path.append(1)
        self._build(node.right, path)
        path.pop()