"""Tree nodes and a binary min-heap ordered by node key."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """A weighted node usable both as a heap entry and a Huffman tree node."""

    key: int = 0
    symbol: int = 0
    parent: Node | None = None
    left: Node | None = None
    right: Node | None = None

    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None

    def __str__(self) -> str:
        return str(self.key)


def _parent(i: int) -> int:
    return (i - 1) // 2


def _left(i: int) -> int:
    return 2 * i + 1


def _right(i: int) -> int:
    return 2 * i + 2


class MinHeap:
    """Array-backed binary min-heap of nodes keyed by ``Node.key``."""

    def __init__(self, nodes: Iterable[Node] | None = None) -> None:
        self._items: list[Node] = list(nodes) if nodes is not None else []
        for i in reversed(range(len(self._items) // 2)):
            self._sift_down(i)

    def __len__(self) -> int:
        return len(self._items)

    def _swap(self, i: int, j: int) -> None:
        self._items[i], self._items[j] = self._items[j], self._items[i]

    def _sift_down(self, i: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = i
            left, right = _left(i), _right(i)
            if left < size and items[left].key < items[smallest].key:
                smallest = left
            if right < size and items[right].key < items[smallest].key:
                smallest = right
            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest

    def _sift_up(self, i: int) -> None:
        items = self._items
        while i > 0 and items[_parent(i)].key > items[i].key:
            self._swap(i, _parent(i))
            i = _parent(i)

    def insert(self, node: Node) -> None:
        """Add a node to the heap."""
        self._items.append(node)
        self._sift_up(len(self._items) - 1)

    def peek(self) -> Node:
        """Return the node with the smallest key without removing it."""
        if not self._items:
            raise IndexError("peek at empty heap")
        return self._items[0]

    def pop_min(self) -> Node:
        """Remove and return the node with the smallest key."""
        if not self._items:
            raise IndexError("pop from empty heap")
        smallest = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return smallest

    def change_priority(self, index: int, node: Node) -> None:
        """Replace the node at *index* with *node* and restore heap order."""
        old = self._items[index]
        self._items[index] = node
        if node.key > old.key:
            self._sift_down(index)
        else:
            self._sift_up(index)

    def levels(self) -> list[list[int]]:
        """Keys of the heap array grouped by tree level."""
        result: list[list[int]] = []
        start, width = 0, 1
        while start < len(self._items):
            result.append([n.key for n in self._items[start:start + width]])
            start += width
            width *= 2
        return result

    def _render_lines(self, prefix: str, i: int) -> Iterator[str]:
        if i >= len(self._items):
            return
        is_left = i % 2 != 0
        has_sibling = i < len(self._items) - 1
        branch = "├──" if is_left and has_sibling else "└──"
        yield f"{prefix}{branch}{self._items[i].key}"
        child_prefix = prefix + ("│   " if is_left else "    ")
        yield from self._render_lines(child_prefix, _left(i))
        yield from self._render_lines(child_prefix, _right(i))

    def render(self) -> str:
        """Draw the heap as a text tree, one node per line."""
        return "".join(line + "\n" for line in self._render_lines("", 0))