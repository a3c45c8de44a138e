# fastcommon

A small collection of general-purpose building blocks for Python programs.
It has no dependencies outside the standard library.

- `fastcommon.avl_tree` – `AVLTree`, a height-balanced binary search tree of
  unique items with `insert`, `replace`, `delete`, `find`, `find_ge`,
  in-order iteration and `walk`, `depth` and `clear`. Ordering comes from an
  optional three-way compare function; an optional `free_data_func` is
  called on items that leave the tree.
- `fastcommon.fast_timer` – `FastTimer`, a hashed timing wheel of
  `TimerEntry` objects with integer ticks. `modify` to a later time is
  applied lazily; `timeouts_get` advances the wheel and returns the expired
  entries, `slot_get` advances one tick and returns that slot's entries.
- `fastcommon.base64codec` – `Base64Codec`, base64 with configurable last
  two alphabet characters and padding character, optional line wrapping
  (`line_length`, `line_separator`), `encode`, `decode`, `decode_auto` for
  unpadded input and `encode_length`.
- `fastcommon.fast_mpool` – `MemoryPool`, a bump allocator handing out
  `memoryview` regions of large trunks, with `reset`, `clear` and `stats`
  (`MPoolStats`).
- `fastcommon.fast_mblock` – `MemoryBlockPool`, a pool of fixed-size
  elements created in batches, with immediate (`free`) and delayed
  (`delay_free`) recycling.
- `fastcommon.chain` – `Chain`, a list that inserts at the head, appends at
  the tail or keeps its items sorted (`ChainType`), with `delete_one`,
  `delete_all` and `pop_head`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from fastcommon.avl_tree import AVLTree

tree = AVLTree()
for n in (5, 1, 9, 3):
    tree.insert(n)
tree.find_ge(4)              # 5
list(tree)                   # [1, 3, 5, 9]
```

```python
from fastcommon.fast_timer import FastTimer, TimerEntry

timer = FastTimer(16, 100)
entry = TimerEntry(105, data="job")
timer.add(entry)
timer.timeouts_get(110)      # [entry]
```

```python
from fastcommon.base64codec import Base64Codec

codec = Base64Codec()
encoded = codec.encode(b"any bytes", True)
codec.decode(encoded)        # b"any bytes"
codec.decode_auto(codec.encode(b"any bytes", False))  # b"any bytes"
```

```python
from fastcommon.fast_mpool import MemoryPool

pool = MemoryPool(alloc_size_once=4096)
region = pool.alloc(100)
region[:5] = b"hello"
pool.stats().free_bytes      # 3996
pool.reset()
```

```python
from fastcommon.fast_mblock import MemoryBlockPool

blocks = MemoryBlockPool(64, alloc_elements_once=8)
buf = blocks.alloc()         # a bytearray of 64 bytes
blocks.free_count()          # 7
blocks.free(buf)
blocks.free_count()          # 8
```

```python
from fastcommon.chain import Chain, ChainType

chain = Chain(ChainType.SORTED, compare=lambda a, b: (a > b) - (a < b))
for n in (3, 1, 2):
    chain.add(n)
chain.pop_head()             # 1
```

## What is not included

The package offers no string hash functions or CRC32, no hash table, and
no connection task queues; use the standard library (`dict`, `zlib.crc32`,
`queue`) for those needs. It has no command-line interface.