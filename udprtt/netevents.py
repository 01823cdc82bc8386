"""Network events reported on a socket and the error code for each."""

from __future__ import annotations

import enum
from collections.abc import Sequence

from udprtt.errors import WsaError

FD_MAX_EVENTS = 6


class NetworkEvent(enum.IntFlag):
    """Events a socket can signal."""

    READ = 0x01
    WRITE = 0x02
    OOB = 0x04
    ACCEPT = 0x08
    CONNECT = 0x10
    CLOSE = 0x20


FD_ALL_EVENTS = NetworkEvent((1 << FD_MAX_EVENTS) - 1)


def _bit_index(event: NetworkEvent) -> int:
    value = int(event)
    if value <= 0 or value & (value - 1) or value > int(FD_ALL_EVENTS):
        raise ValueError(f"expected a single network event, got {event!r}")
    return value.bit_length() - 1


class NetworkEvents:
    """The events signalled on a socket with an error code per event."""

    def __init__(self, events: NetworkEvent | int, error_codes: Sequence[int] = ()) -> None:
        if isinstance(events, bool) or not isinstance(events, int):
            raise TypeError("events must be a NetworkEvent or an int")
        if int(events) & ~int(FD_ALL_EVENTS):
            raise ValueError(f"unknown network event bits: {int(events):#x}")
        codes = [int(code) for code in error_codes]
        if len(codes) > FD_MAX_EVENTS:
            raise ValueError(
                f"at most {FD_MAX_EVENTS} error codes, got {len(codes)}"
            )
        codes.extend([0] * (FD_MAX_EVENTS - len(codes)))
        self.events = NetworkEvent(int(events))
        self.error_codes: tuple[int, ...] = tuple(codes)

    def error_for(self, event: NetworkEvent) -> int | None:
        """The error code for ``event``, or None when it was not signalled."""
        index = _bit_index(event)
        if not self.events & event:
            return None
        code = self.error_codes[index]
        try:
            return WsaError(code)
        except ValueError:
            return code

    def __contains__(self, event: object) -> bool:
        return isinstance(event, int) and bool(self.events & event)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NetworkEvents):
            return NotImplemented
        return self.events == other.events and self.error_codes == other.error_codes

    def __repr__(self) -> str:
        return f"NetworkEvents({self.events!r}, {list(self.error_codes)!r})"