"""Session storage abstraction and per-session mutation locks."""
from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Generic, Iterator, Optional, Protocol, Tuple, TypeVar

S = TypeVar("S")


class SessionStore(Protocol[S]):
    """Key/value store for session records."""

    def get(self, session_id: str) -> Optional[S]: ...

    def set(self, session_id: str, session: S) -> None: ...

    def delete(self, session_id: str) -> None: ...


class InMemorySessionStore(Generic[S]):
    """Process-local store; contents are lost when the process exits."""

    def __init__(self) -> None:
        self._items: Dict[str, S] = {}
        self._guard = threading.Lock()

    def get(self, session_id: str) -> Optional[S]:
        with self._guard:
            return self._items.get(session_id)

    def set(self, session_id: str, session: S) -> None:
        with self._guard:
            self._items[session_id] = session

    def delete(self, session_id: str) -> None:
        with self._guard:
            self._items.pop(session_id, None)

    def clear(self) -> None:
        with self._guard:
            self._items.clear()

    def __len__(self) -> int:
        with self._guard:
            return len(self._items)


class SessionLocks:
    """One lock per session id so read-mutate-write cycles never interleave.

    A lock is dropped once its last holder or waiter releases it.
    """

    def __init__(self) -> None:
        self._locks: Dict[str, Tuple[threading.Lock, int]] = {}
        self._guard = threading.Lock()

    def _acquire_ref(self, session_id: str) -> threading.Lock:
        with self._guard:
            lock, users = self._locks.get(session_id, (None, 0))
            if lock is None:
                lock = threading.Lock()
            self._locks[session_id] = (lock, users + 1)
        return lock

    def _release_ref(self, session_id: str) -> None:
        with self._guard:
            lock, users = self._locks[session_id]
            if users <= 1:
                del self._locks[session_id]
            else:
                self._locks[session_id] = (lock, users - 1)

    @contextmanager
    def hold(self, session_id: str) -> Iterator[None]:
        lock = self._acquire_ref(session_id)
        try:
            with lock:
                yield
        finally:
            self._release_ref(session_id)

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)


__all__ = ["InMemorySessionStore", "SessionLocks", "SessionStore"]
