"""The UDP server that measures round-trip times to its client."""

from __future__ import annotations

import argparse
import select
import socket
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

from udprtt.protocol import (
    BUFLEN,
    CONFIG_FILE,
    ServerConfig,
    elapsed_ms,
    end_message,
    final_ack_message,
    load_config,
    now_timestamp,
    request_message,
)

DEFAULT_INTERVAL = 3.0
_POLL = 0.01


@dataclass(frozen=True)
class RttSample:
    """One request, its acknowledgement and the time between them."""

    seqno: int
    rtt_ms: float
    request: str
    reply: str


class UdpServer:
    """Sends numbered requests to one client and times the replies."""

    def __init__(self, host: str, port: int, sock: socket.socket | None = None) -> None:
        self._sock = (
            sock if sock is not None else socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        )
        self._sock.bind((host, port))
        self.seqno = 1
        self.client_address: tuple[str, int] | None = None

    @property
    def address(self) -> tuple[str, int]:
        """The address the server is bound to."""
        return self._sock.getsockname()

    def __enter__(self) -> UdpServer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _client(self) -> tuple[str, int]:
        if self.client_address is None:
            raise RuntimeError("no client address yet; call wait_for_client first")
        return self.client_address

    def _send(self, text: str) -> None:
        self._sock.sendto(text.encode("utf-8"), self._client())

    def _receive(self) -> str:
        data, self.client_address = self._sock.recvfrom(BUFLEN - 1)
        return data.decode("utf-8", "replace")

    def wait_for_client(self) -> str:
        """Block for the client's first message and remember where it came from."""
        return self._receive()

    def send_request(self, out: TextIO | None = None) -> RttSample | None:
        """Send one request, echo the reply back and time the round trip.

        Returns None when the client sends nothing back.
        """
        out = sys.stdout if out is None else out
        seqno = self.seqno
        request = request_message(seqno, now_timestamp())
        start = time.perf_counter()
        self._send(request)
        print(f"Sent: {request}", file=out)
        try:
            data, address = self._sock.recvfrom(BUFLEN - 1)
        except OSError:
            return None
        end = time.perf_counter()
        if not data:
            return None
        self.client_address = address
        reply = data.decode("utf-8", "replace")
        self._send(reply)
        print(f"Sent: {reply}", file=out)
        rtt = elapsed_ms(start, end)
        print(f"RTT for seq {seqno:05d}: {rtt:.3f} ms", file=out)
        self.seqno += 1
        return RttSample(seqno, rtt, request, reply)

    def terminate(self, out: TextIO | None = None) -> str:
        """Send the end message, wait for its acknowledgement and send the final ACK."""
        out = sys.stdout if out is None else out
        self._send(end_message(self.seqno, now_timestamp()))
        ack = self._receive()
        print(f"Received: {ack}", file=out)
        self._send(final_ack_message(self.seqno, now_timestamp()))
        return ack

    def serve(
        self,
        interval: float = DEFAULT_INTERVAL,
        stop_requested: Callable[[], bool] | None = None,
        out: TextIO | None = None,
    ) -> list[RttSample]:
        """Send a request every ``interval`` seconds until asked to stop.

        Terminates the exchange when ``stop_requested`` returns true; stops
        without terminating when the client does not answer.
        """
        self._client()
        samples: list[RttSample] = []
        last = time.monotonic()
        while True:
            now = time.monotonic()
            if now - last >= interval:
                sample = self.send_request(out)
                if sample is None:
                    break
                samples.append(sample)
                last = now
            if stop_requested is not None and stop_requested():
                self.terminate(out)
                break
            remaining = interval - (time.monotonic() - last)
            time.sleep(min(_POLL, max(0.0, remaining)))
        return samples

    def close(self) -> None:
        """Close the socket."""
        self._sock.close()


def _end_key_pressed() -> bool:
    try:
        import msvcrt
    except ImportError:
        ready, _, _ = select.select([sys.stdin], [], [], 0)
        if not ready:
            return False
        return sys.stdin.readline()[:1] in ("e", "E")
    while msvcrt.kbhit():
        if msvcrt.getwch() in ("e", "E"):
            return True
    return False


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="udprtt-server", description="Measure UDP round-trip times to a client."
    )
    parser.add_argument("--config", default=CONFIG_FILE)
    parser.add_argument("--interval", type=float, default=DEFAULT_INTERVAL)
    args = parser.parse_args(argv)
    try:
        config = load_config(args.config)
    except FileNotFoundError:
        host = input("Config file not found. Enter IP address to bind: ").strip()
        port = int(input("Enter port: ").strip())
        config = ServerConfig(host, port)
    else:
        print(f"Loaded config: IP = {config.host}, Port = {config.port}")
    with UdpServer(config.host, config.port) as server:
        print("UDP Server is running...")
        print("Waiting for first message to capture client address...")
        server.wait_for_client()
        server.serve(args.interval, _end_key_pressed)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())