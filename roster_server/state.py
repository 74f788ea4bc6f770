"""In-memory roster store.

The roster is a set of unique, case-sensitive names. Every read and write goes
through one lock, including the full render of the list page, so a list render
blocks adds and deletes and vice versa.

Nothing is persisted; the roster is lost when the process exits.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from threading import Lock
from typing import Iterator

from .errors import DuplicateNameError


log = logging.getLogger("roster_server.state")


def matches(name: str, search: str) -> bool:
    """Case-insensitive substring match; an empty search matches everything."""

    if not search:
        return True
    return search.lower() in name.lower()


class RosterStore:
    """Thread-safe in-memory roster."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._names: set[str] = set()

    def __len__(self) -> int:
        with self._lock:
            return len(self._names)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._names

    def add(self, name: str) -> None:
        """Insert ``name``; raises DuplicateNameError if it is already present."""

        with self._lock:
            if name in self._names:
                raise DuplicateNameError(name)
            self._names.add(name)
        log.debug("added %r", name)

    def discard(self, name: str) -> bool:
        """Remove ``name`` if present. Returns whether anything was removed."""

        with self._lock:
            if name not in self._names:
                return False
            self._names.discard(name)
        log.debug("removed %r", name)
        return True

    def snapshot(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._names)

    @contextmanager
    def matching(self, search: str = "") -> Iterator[list[str]]:
        """Hold the roster lock and yield the names matching ``search``.

        Names are sorted so the rendered page is stable between calls. The
        lock stays held until the ``with`` block exits; callers must not block
        on I/O or re-enter the store inside it.
        """

        with self._lock:
            yield sorted((n for n in self._names if matches(n, search)), key=lambda n: (n.lower(), n))
