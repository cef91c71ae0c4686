"""
Per-aggregate lock table.

Mutations against the same adventurer run one at a time; mutations against
different adventurers never wait on each other. Entries are reference counted
and dropped once the last holder (or waiter) releases them, so the table only
ever holds ids that are currently in use.
"""

import threading
from contextlib import contextmanager


class _Entry:
    __slots__ = ("lock", "refs")

    def __init__(self):
        self.lock = threading.Lock()
        self.refs = 0


class AggregateLockTable:
    def __init__(self):
        self._guard = threading.Lock()
        self._entries: dict[str, _Entry] = {}

    def _checkout(self, key: str) -> _Entry:
        with self._guard:
            entry = self._entries.get(key)
            if entry is None:
                entry = self._entries[key] = _Entry()
            entry.refs += 1
            return entry

    def _checkin(self, key: str, entry: _Entry) -> None:
        with self._guard:
            entry.refs -= 1
            if entry.refs == 0:
                del self._entries[key]

    @contextmanager
    def hold(self, key: str):
        """Hold the lock for ``key`` for the duration of the block."""
        entry = self._checkout(key)
        try:
            with entry.lock:
                yield
        finally:
            self._checkin(key, entry)

    def __len__(self) -> int:
        with self._guard:
            return len(self._entries)


adventurer_locks = AggregateLockTable()
