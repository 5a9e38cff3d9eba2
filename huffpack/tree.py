"""Huffman tree built by repeatedly merging the two lightest nodes of a heap."""

from __future__ import annotations

from collections.abc import Iterator

from huffpack.minheap import MinHeap, Node


class HuffmanTree:
    """A Huffman tree built from (and consuming) a min-heap of leaf nodes."""

    def __init__(self, heap: MinHeap) -> None:
        self.leaf_count: int = len(heap)
        self.root: Node | None = None
        while len(heap) > 1:
            left = heap.pop_min()
            right = heap.pop_min()
            merged = Node(key=left.key + right.key, left=left, right=right)
            left.parent = merged
            right.parent = merged
            heap.insert(merged)
        if len(heap) == 1:
            self.root = heap.pop_min()
            self.root.parent = None

    def _walk_in_order(self, node: Node | None) -> Iterator[int]:
        if node is None:
            return
        yield from self._walk_in_order(node.left)
        yield node.key
        yield from self._walk_in_order(node.right)

    def in_order(self) -> list[int]:
        """Keys of all nodes in an in-order traversal."""
        return list(self._walk_in_order(self.root))

    def _render_lines(self, prefix: str, node: Node | None) -> Iterator[str]:
        if node is None:
            return
        parent = node.parent
        is_right = parent is not None and parent.right is node
        has_left_sibling = parent is not None and parent.left is not None
        joined = is_right and has_left_sibling
        branch = "├──" if joined else "└──"
        if parent is None:
            label = str(node.key)
        else:
            label = f"{node.key}{'d' if is_right else 'e'}"
        yield f"{prefix}{branch}{label}"
        child_prefix = prefix + ("│   " if joined else "    ")
        yield from self._render_lines(child_prefix, node.right)
        yield from self._render_lines(child_prefix, node.left)

    def render(self) -> str:
        """Draw the tree as text, right subtree first; 'd' marks right, 'e' left."""
        return "".join(line + "\n" for line in self._render_lines("", self.root))

    def clear(self) -> None:
        """Drop every node of the tree."""
        self.root = None
        self.leaf_count = 0