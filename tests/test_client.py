import io
import socket
import threading

import pytest

from udprtt.client import UdpClient


@pytest.fixture
def peer():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(5)
    yield sock
    sock.close()


def _client_for(peer):
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.settimeout(5)
    return UdpClient(peer.getsockname(), sock)


def _start(client, out):
    result = {}
    thread = threading.Thread(target=lambda: result.update(received=client.run(out)))
    thread.start()
    return thread, result


def test_full_exchange(peer):
    out = io.StringIO()
    client = _client_for(peer)
    thread, result = _start(client, out)
    try:
        data, address = peer.recvfrom(1024)
        assert data == b"INIT"

        peer.sendto(b"R 00001 10:00:00:000", address)
        ack, _ = peer.recvfrom(1024)
        assert ack.decode().split()[:3] == ["ACK", "R", "00001"]

        peer.sendto(b"E 00002 10:00:03:000", address)
        ack, _ = peer.recvfrom(1024)
        assert ack.decode().split()[:3] == ["ACK", "E", "00002"]

        peer.sendto(b"ACK 00002 10:00:03:001", address)
        thread.join(5)
    finally:
        client.close()
    assert not thread.is_alive()
    assert result["received"] == [
        "R 00001 10:00:00:000",
        "E 00002 10:00:03:000",
        "ACK 00002 10:00:03:001",
    ]
    text = out.getvalue()
    assert text.startswith("UDP Client started...")
    assert "Received Final ACK: ACK 00002 10:00:03:001" in text


def test_other_messages_are_not_answered(peer):
    out = io.StringIO()
    client = _client_for(peer)
    thread, result = _start(client, out)
    try:
        _, address = peer.recvfrom(1024)
        peer.sendto(b"ACK R 00001 x", address)
        peer.sendto(b"", address)
        thread.join(5)
        peer.settimeout(0.2)
        with pytest.raises(TimeoutError):
            peer.recvfrom(1024)
    finally:
        client.close()
    assert result["received"] == ["ACK R 00001 x"]
    assert "Received: ACK R 00001 x" in out.getvalue()


def test_context_manager_closes_socket(peer):
    with _client_for(peer) as client:
        sock = client.sock
        assert sock.fileno() >= 0
    assert sock.fileno() == -1