"""A singly linked chain that inserts at the head, appends at the tail, or keeps order.

A :class:`Chain` of type :attr:`ChainType.SORTED` keeps its items in
ascending order according to a three-way compare function
``compare(a, b)``. Deleting by value also needs the compare function. An
optional ``free_data_func`` is called on items that are deleted or cleared.
It is not called on items taken off with :meth:`Chain.pop_head`.
"""

from __future__ import annotations

import enum
from typing import Any, Callable, Iterator, Optional

__all__ = ["ChainType", "Chain"]

CompareFunc = Callable[[Any, Any], int]
FreeDataFunc = Callable[[Any], Any]


class ChainType(enum.IntEnum):
    """Where :meth:`Chain.add` puts a new item."""

    INSERT = 0  # before the head
    APPEND = 1  # after the tail
    SORTED = 2  # in ascending order


class Chain:
    """Ordered collection of items with head, tail and sorted insertion."""

    def __init__(
        self,
        chain_type: ChainType = ChainType.APPEND,
        free_data_func: Optional[FreeDataFunc] = None,
        compare: Optional[CompareFunc] = None,
    ) -> None:
        self.type = ChainType(chain_type)
        self._free = free_data_func
        self._compare = compare
        self._items: list[Any] = []

    def _require_compare(self) -> CompareFunc:
        if self._compare is None:
            raise ValueError("this operation needs a compare function")
        return self._compare

    def _release(self, data: Any) -> None:
        if self._free is not None:
            self._free(data)

    def insert_prior(self, data: Any) -> None:
        """Put ``data`` before the head."""
        self._items.insert(0, data)

    def append(self, data: Any) -> None:
        """Put ``data`` after the tail."""
        self._items.append(data)

    def _insert_sorted(self, data: Any) -> None:
        compare = self._require_compare()
        position = next(
            (i for i, item in enumerate(self._items) if compare(item, data) >= 0),
            len(self._items),
        )
        self._items.insert(position, data)

    def add(self, data: Any) -> None:
        """Add ``data`` where the chain type says."""
        if self.type is ChainType.INSERT:
            self.insert_prior(data)
        elif self.type is ChainType.APPEND:
            self.append(data)
        else:
            self._insert_sorted(data)

    def _delete(self, data: Any, delete_all: bool) -> int:
        compare = self._require_compare()
        kept: list[Any] = []
        removed = 0
        stopped_at: Optional[int] = None
        for index, item in enumerate(self._items):
            if stopped_at is not None:
                break
            result = compare(item, data)
            if result == 0 and (delete_all or removed == 0):
                self._release(item)
                removed += 1
                if not delete_all:
                    stopped_at = index + 1
                continue
            if result > 0 and self.type is ChainType.SORTED:
                stopped_at = index
                break
            kept.append(item)
        if stopped_at is not None:
            kept.extend(self._items[stopped_at:])
        self._items = kept
        return removed

    def delete_one(self, data: Any) -> int:
        """Delete the first item equal to ``data``; return how many were deleted."""
        return self._delete(data, delete_all=False)

    def delete_all(self, data: Any) -> int:
        """Delete every item equal to ``data``; return how many were deleted."""
        return self._delete(data, delete_all=True)

    def pop_head(self) -> Any:
        """Remove and return the head item, or None when the chain is empty."""
        return self._items.pop(0) if self._items else None

    def clear(self) -> None:
        """Remove every item, passing each to ``free_data_func`` if set."""
        items, self._items = self._items, []
        for item in items:
            self._release(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))