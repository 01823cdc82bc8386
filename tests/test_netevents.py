import pytest

from udprtt.errors import WsaError
from udprtt.netevents import FD_ALL_EVENTS, FD_MAX_EVENTS, NetworkEvent, NetworkEvents


def test_error_code_is_taken_from_event_bit_position():
    codes = [0, 0, 0, 0, 0, WsaError.WSAECONNRESET]
    events = NetworkEvents(NetworkEvent.CLOSE | NetworkEvent.READ, codes)
    assert events.error_for(NetworkEvent.CLOSE) == WsaError.WSAECONNRESET
    assert events.error_for(NetworkEvent.READ) == 0


def test_known_code_becomes_enum_member():
    events = NetworkEvents(NetworkEvent.CONNECT, [0, 0, 0, 0, WsaError.WSAECONNREFUSED])
    result = events.error_for(NetworkEvent.CONNECT)
    assert result is WsaError.WSAECONNREFUSED


def test_unsignalled_event_has_no_error():
    events = NetworkEvents(NetworkEvent.READ, [WsaError.WSAENETDOWN] * FD_MAX_EVENTS)
    assert events.error_for(NetworkEvent.WRITE) is None


def test_short_code_list_is_padded():
    events = NetworkEvents(FD_ALL_EVENTS, [WsaError.WSAEINTR])
    assert len(events.error_codes) == FD_MAX_EVENTS
    assert events.error_codes[1:] == (0,) * (FD_MAX_EVENTS - 1)
    assert events.error_for(NetworkEvent.READ) == WsaError.WSAEINTR


def test_all_events_covers_every_flag():
    assert all(event in NetworkEvents(FD_ALL_EVENTS) for event in NetworkEvent)
    assert len(list(NetworkEvent)) == FD_MAX_EVENTS


def test_unknown_code_is_returned_as_int():
    events = NetworkEvents(NetworkEvent.OOB, [0, 0, 4242])
    assert events.error_for(NetworkEvent.OOB) == 4242


def test_combined_event_is_rejected():
    events = NetworkEvents(FD_ALL_EVENTS)
    with pytest.raises(ValueError):
        events.error_for(NetworkEvent.READ | NetworkEvent.WRITE)


def test_too_many_codes_rejected():
    with pytest.raises(ValueError):
        NetworkEvents(NetworkEvent.READ, [0] * (FD_MAX_EVENTS + 1))


def test_unknown_event_bits_rejected():
    with pytest.raises(ValueError):
        NetworkEvents(int(FD_ALL_EVENTS) + 1)


def test_equality_follows_contents():
    first = NetworkEvents(NetworkEvent.ACCEPT, [0, 0, 0, 7])
    second = NetworkEvents(NetworkEvent.ACCEPT, [0, 0, 0, 7, 0, 0])
    assert first == second
    assert first != NetworkEvents(NetworkEvent.ACCEPT)