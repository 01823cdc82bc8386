"""A bounded, ordered set of sockets for readiness checks."""

from __future__ import annotations

from collections.abc import Hashable, Iterator

FD_SETSIZE = 64


class FdSet:
    """An insertion-ordered set of sockets holding at most ``capacity`` entries.

    Adding to a full set leaves it unchanged.
    """

    def __init__(self, capacity: int = FD_SETSIZE) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._members: dict[Hashable, None] = {}

    @property
    def capacity(self) -> int:
        return self._capacity

    def add(self, sock: Hashable) -> bool:
        """Add a socket; return whether it is in the set afterwards."""
        if sock in self._members:
            return True
        if len(self._members) >= self._capacity:
            return False
        self._members[sock] = None
        return True

    def discard(self, sock: Hashable) -> None:
        """Remove a socket if present, keeping the order of the rest."""
        self._members.pop(sock, None)

    def clear(self) -> None:
        """Remove every socket."""
        self._members.clear()

    def __contains__(self, sock: object) -> bool:
        return sock in self._members

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(list(self._members))

    def __repr__(self) -> str:
        return f"FdSet({list(self._members)!r}, capacity={self._capacity})"