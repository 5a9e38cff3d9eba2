# huffpack

Huffman compression of files, and the pieces it is built from, in plain
Python with no third-party dependencies.

- `huffpack.bitbuffer` — `BitReader` and `BitWriter`, one-byte buffers
  for reading and writing a binary stream one bit at a time, most
  significant bit first, plus `copy_bits(source, destination)`.
- `huffpack.minheap` — `Node` and `MinHeap`, a binary min-heap of
  weighted tree nodes keyed by `Node.key`.
- `huffpack.frequencies` — `get_frequencies(path)` returns 256 counts,
  one per byte value of a file, and `get_nodes(path)` turns the non-zero
  counts into leaf nodes in byte order.
- `huffpack.tree` — `HuffmanTree`, built by repeatedly merging the two
  lightest nodes of a `MinHeap` (the heap is consumed).
- `huffpack.table` — `HuffmanTable`, which walks a tree and records the
  bit code of every symbol (`codes`), the pre-order shape of the tree
  (`tree_code`: 0 for a branch, 1 for a leaf) and the leaf symbols in
  the same order (`leaves`).
- `huffpack.cli` — the `huffpack` command.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

### huffpack

```
huffpack MODE FILE [OUTPUT]
```

A mode starting with `c` compresses; any other mode decompresses.

```
huffpack c notes.txt              # writes notes.txt.huf
huffpack d notes.txt.huf          # writes notes.txt
huffpack d archive.bin restored   # explicit output name
```

Without `OUTPUT`, compression appends `.huf` to the input name, and
decompression strips a trailing `.huf` or, failing that, appends `.out`.
On a read or write failure, or a malformed compressed file, the command
prints `error: ...` to standard error and returns 1.

The compressed file holds:

1. a header of the alphabet size (unsigned 16-bit) and the original
   length in bytes (unsigned 64-bit), both little-endian;
2. the leaf symbols, one byte each, in pre-order;
3. a bit stream with the tree shape in pre-order (0 branch, 1 leaf)
   followed by the code of every input byte, padded with zero bits to a
   whole byte.

### huffpack-copybits

Copies one file to another bit by bit through the bit buffers, which is
handy for checking them:

```
huffpack-copybits input.bin output.bin
```

Each bit read and written is logged at debug level on the
`huffpack.bitbuffer` logger.

## Using the library

```python
from huffpack.frequencies import get_nodes
from huffpack.minheap import MinHeap
from huffpack.tree import HuffmanTree
from huffpack.table import HuffmanTable

tree = HuffmanTree(MinHeap(get_nodes("notes.txt")))
print(tree.render())      # right subtree first; 'd' marks right, 'e' left
print(tree.in_order())    # node keys in in-order

table = HuffmanTable(tree)
print(table.codes[ord("e")])   # e.g. (0, 1, 1)
```

`HuffmanTable.from_file(path)` does the counting, heap and tree steps in
one call.

`MinHeap` supports `insert`, `peek`, `pop_min` (both raise `IndexError`
when empty), `change_priority(index, node)`, `len()`, `levels()` (keys
grouped by level) and `render()`.

Bits can be written and read back:

```python
import io
from huffpack.bitbuffer import BitReader, BitWriter

out = io.BytesIO()
with BitWriter(out) as writer:
    for bit in (1, 0, 1):
        writer.write_bit(bit)
# leaving the block flushes the partial byte, padded with zeros: b"\xa0"

bits = list(BitReader(io.BytesIO(out.getvalue())))
# [1, 0, 1, 0, 0, 0, 0, 0]
```

`BitWriter.write_bit` accepts only 0 or 1 and raises `ValueError`
otherwise. `BitReader.read_bit` raises `EOFError` when the stream is
exhausted; iterating a reader stops there instead.