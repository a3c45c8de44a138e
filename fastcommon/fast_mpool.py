"""A bump-pointer memory pool carving byte regions out of large trunks.

Regions are handed out as ``memoryview`` slices of trunk buffers. They are
never freed one by one: :meth:`MemoryPool.reset` makes every trunk reusable
at once, and :meth:`MemoryPool.clear` drops all trunks. A trunk leaves the
free list once the space left in it is no more than ``discard_size`` bytes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

__all__ = ["MPoolStats", "MemoryPool"]

_DEFAULT_ALLOC_SIZE_ONCE = 1024 * 1024
_DEFAULT_DISCARD_SIZE = 64


@dataclass(frozen=True)
class MPoolStats:
    """Byte and trunk counts of a :class:`MemoryPool`."""

    total_bytes: int
    free_bytes: int
    total_trunk_count: int
    free_trunk_count: int


@dataclass(eq=False)
class _Trunk:
    buffer: bytearray
    free_offset: int = 0

    @property
    def remaining(self) -> int:
        return len(self.buffer) - self.free_offset


class MemoryPool:
    """Pool of byte regions allocated from trunks of ``alloc_size_once`` bytes."""

    def __init__(self, alloc_size_once: int = 0, discard_size: int = 0) -> None:
        self.alloc_size_once = (
            alloc_size_once if alloc_size_once > 0 else _DEFAULT_ALLOC_SIZE_ONCE
        )
        self.discard_size = discard_size if discard_size > 0 else _DEFAULT_DISCARD_SIZE
        self._trunks: list[_Trunk] = []  # newest first
        self._free: list[_Trunk] = []    # trunks with usable space, newest first

    def _new_trunk(self, alloc_size: int) -> _Trunk:
        trunk = _Trunk(bytearray(alloc_size))
        self._free.insert(0, trunk)
        self._trunks.insert(0, trunk)
        return trunk

    def _take(self, trunk: _Trunk, size: int) -> Optional[memoryview]:
        if trunk.remaining < size:
            return None
        start = trunk.free_offset
        trunk.free_offset += size
        if trunk.remaining <= self.discard_size:
            self._free.remove(trunk)
        return memoryview(trunk.buffer)[start:start + size]

    def alloc(self, size: int) -> memoryview:
        """Return a writable region of ``size`` bytes."""
        if size < 0:
            raise ValueError(f"size must not be negative: {size}")
        for trunk in list(self._free):
            region = self._take(trunk, size)
            if region is not None:
                return region
        trunk = self._new_trunk(max(size, self.alloc_size_once))
        region = self._take(trunk, size)
        assert region is not None
        return region

    def reset(self) -> None:
        """Make the whole of every trunk available again."""
        self._free = []
        for trunk in self._trunks:
            trunk.free_offset = 0
            self._free.insert(0, trunk)

    def stats(self) -> MPoolStats:
        """Current byte and trunk counts."""
        return MPoolStats(
            total_bytes=sum(len(t.buffer) for t in self._trunks),
            free_bytes=sum(t.remaining for t in self._trunks),
            total_trunk_count=len(self._trunks),
            free_trunk_count=len(self._free),
        )

    def clear(self) -> None:
        """Drop all trunks."""
        self._trunks = []
        self._free = []