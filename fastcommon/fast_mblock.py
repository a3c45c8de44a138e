"""A pool of fixed-size elements allocated in batches and recycled.

Elements are ``bytearray`` buffers of the aligned element size unless a
``factory`` makes other objects. Freed elements go back on a free stack
and are handed out again last-in, first-out. An element freed with a delay
stays out of use until its recycle time has passed. It is reused only when
the free stack is empty.
"""

from __future__ import annotations

import threading
import time
from collections import deque
from contextlib import nullcontext
from typing import Any, Callable, ContextManager, Deque, Optional

__all__ = ["MemoryBlockPool"]

_ALIGN = 8
_NODE_HEADER_SIZE = 16
_DEFAULT_BATCH_BYTES = 1024 * 1024


def _mem_align(size: int) -> int:
    return (size + _ALIGN - 1) & ~(_ALIGN - 1)


class MemoryBlockPool:
    """Pool of reusable elements of ``element_size`` bytes."""

    def __init__(
        self,
        element_size: int,
        alloc_elements_once: int = 0,
        init_func: Optional[Callable[[Any], Any]] = None,
        need_lock: bool = True,
        factory: Optional[Callable[[], Any]] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if element_size <= 0:
            raise ValueError(f"invalid block size: {element_size}")
        self.element_size = _mem_align(element_size)
        if alloc_elements_once > 0:
            self.alloc_elements_once = alloc_elements_once
        else:
            block_size = _mem_align(_NODE_HEADER_SIZE + self.element_size)
            self.alloc_elements_once = _DEFAULT_BATCH_BYTES // block_size
        self._init_func = init_func
        self._factory = factory or (lambda: bytearray(self.element_size))
        self._clock = clock
        self._lock: Optional[threading.Lock] = threading.Lock() if need_lock else None
        self._free: Deque[Any] = deque()
        self._delayed: Deque[tuple[int, Any]] = deque()
        self._total_count = 0

    @property
    def total_count(self) -> int:
        """Number of elements created so far."""
        return self._total_count

    def _guard(self) -> ContextManager[Any]:
        return self._lock if self._lock is not None else nullcontext()

    def _now(self) -> int:
        return int(self._clock())

    def _prealloc(self) -> None:
        batch = [self._factory() for _ in range(self.alloc_elements_once)]
        if self._init_func is not None:
            for element in batch:
                self._init_func(element)
        self._free.extend(batch)
        self._total_count += len(batch)

    def alloc(self) -> Any:
        """Take an element: a free one, a delayed one that is due, or a new batch."""
        with self._guard():
            if not self._free:
                if self._delayed and self._delayed[0][0] <= self._now():
                    return self._delayed.popleft()[1]
                self._prealloc()
            return self._free.popleft()

    def free(self, obj: Any) -> None:
        """Give ``obj`` back for immediate reuse."""
        with self._guard():
            self._free.appendleft(obj)

    def delay_free(self, obj: Any, delay: int) -> None:
        """Give ``obj`` back, reusable only after ``delay`` seconds."""
        with self._guard():
            self._delayed.append((self._now() + delay, obj))

    def free_count(self) -> int:
        """Number of elements ready for immediate reuse."""
        with self._guard():
            return len(self._free)

    def delay_free_count(self) -> int:
        """Number of elements waiting for their recycle time."""
        with self._guard():
            return len(self._delayed)

    def clear(self) -> None:
        """Drop every element the pool holds and reset the total count."""
        with self._guard():
            self._free.clear()
            self._delayed.clear()
            self._total_count = 0