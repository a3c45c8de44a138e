"""A hashed timing wheel for coarse, integer-tick timeouts.

Entries go into ``slot_count`` slots by ``(expires - base_time) % slot_count``.
Moving an entry to a later time does not touch the wheel: the entry is only
flagged for a rehash and is moved when its old slot is next scanned.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

__all__ = ["TimerEntry", "FastTimer"]


@dataclass(eq=False)
class TimerEntry:
    """One scheduled timeout."""

    expires: int
    data: Any = None
    rehash: bool = False
    _slot: Optional[int] = field(default=None, init=False, repr=False)

    @property
    def scheduled(self) -> bool:
        """True while the entry sits in a timer."""
        return self._slot is not None


class FastTimer:
    """Timing wheel of ``slot_count`` slots starting at ``current_time``."""

    def __init__(self, slot_count: int, current_time: int) -> None:
        if slot_count <= 0:
            raise ValueError(f"slot count must be positive: {slot_count}")
        if current_time <= 0:
            raise ValueError(f"current time must be positive: {current_time}")
        self.slot_count = slot_count
        self.base_time = current_time
        self.current_time = current_time
        # Each slot keeps insertion order; the newest entry is the head.
        self._slots: list[dict[TimerEntry, None]] = [{} for _ in range(slot_count)]

    def _slot_index(self, when: int) -> int:
        return (when - self.base_time) % self.slot_count

    @staticmethod
    def _head_first(slot: dict[TimerEntry, None]) -> list[TimerEntry]:
        return list(reversed(slot))

    def add(self, entry: TimerEntry) -> None:
        """Schedule ``entry``; past expiry times land in the current slot."""
        if entry._slot is not None:
            raise ValueError("timer entry is already scheduled")
        index = self._slot_index(max(entry.expires, self.current_time))
        self._slots[index][entry] = None
        entry._slot = index

    def remove(self, entry: TimerEntry) -> None:
        """Unschedule ``entry``; KeyError when it is not scheduled."""
        if entry._slot is None:
            raise KeyError("timer entry is not scheduled")
        del self._slots[entry._slot][entry]
        entry._slot = None

    def modify(self, entry: TimerEntry, new_expires: int) -> None:
        """Change the expiry time; moving it later is applied lazily."""
        if new_expires == entry.expires:
            return
        if new_expires < entry.expires:
            if entry._slot is not None:
                self.remove(entry)
            entry.expires = new_expires
            self.add(entry)
            return
        entry.rehash = self._slot_index(new_expires) != self._slot_index(
            entry.expires
        )
        entry.expires = new_expires

    def slot_get(self, current_time: int) -> Optional[list[TimerEntry]]:
        """Advance one tick toward ``current_time`` and return that slot's entries.

        Returns None when the wheel has already reached ``current_time``.
        """
        if self.current_time >= current_time:
            return None
        index = self._slot_index(self.current_time)
        self.current_time += 1
        return self._head_first(self._slots[index])

    def timeouts_get(self, current_time: int) -> list[TimerEntry]:
        """Advance to ``current_time`` and return the entries that expired.

        Expired entries are unscheduled. Entries flagged for a rehash that
        are met on the way are moved to their proper slot.
        """
        expired: list[TimerEntry] = []
        while self.current_time < current_time:
            index = self._slot_index(self.current_time)
            self.current_time += 1
            slot = self._slots[index]
            for entry in self._head_first(slot):
                if entry.expires >= current_time:
                    if entry.rehash:
                        entry.rehash = False
                        self.remove(entry)
                        self.add(entry)
                else:
                    del slot[entry]
                    entry._slot = None
                    expired.append(entry)
        return expired