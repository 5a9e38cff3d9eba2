"""Huffman file compression: bit buffers, a min-heap, code trees, code tables and a command."""

__version__ = "0.1.0"
__all__ = ["bitbuffer", "minheap", "frequencies", "tree", "table", "cli"]