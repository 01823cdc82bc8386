"""The UDP client that acknowledges the server's requests."""

from __future__ import annotations

import argparse
import socket
import sys
from typing import TextIO

from udprtt.protocol import (
    BUFLEN,
    DEFAULT_SERVER_HOST,
    DEFAULT_SERVER_PORT,
    INIT_MESSAGE,
    MessageKind,
    ack_message,
    message_kind,
    now_timestamp,
)


class UdpClient:
    """Answers request and termination messages from one server."""

    def __init__(
        self,
        server_address: tuple[str, int] = (DEFAULT_SERVER_HOST, DEFAULT_SERVER_PORT),
        sock: socket.socket | None = None,
    ) -> None:
        self.server_address = tuple(server_address)
        self._sock = (
            sock if sock is not None else socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        )

    @property
    def sock(self) -> socket.socket:
        return self._sock

    def __enter__(self) -> UdpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _send(self, text: str) -> None:
        self._sock.sendto(text.encode("utf-8"), self.server_address)

    def _receive(self) -> bytes:
        data, _ = self._sock.recvfrom(BUFLEN - 1)
        return data

    def run(self, out: TextIO | None = None) -> list[str]:
        """Announce this client, then acknowledge messages until the exchange ends.

        Returns every message received, in order.
        """
        out = sys.stdout if out is None else out
        self._send(INIT_MESSAGE)
        print("UDP Client started...", file=out)
        received: list[str] = []
        while True:
            try:
                data = self._receive()
            except OSError:
                break
            if not data:
                break
            message = data.decode("utf-8", "replace")
            received.append(message)
            print(f"Received: {message}", file=out)
            kind = message_kind(message)
            if kind is MessageKind.OTHER:
                continue
            try:
                reply = ack_message(message, now_timestamp())
            except ValueError:
                continue
            self._send(reply)
            if kind is MessageKind.END:
                try:
                    final = self._receive().decode("utf-8", "replace")
                except OSError:
                    break
                received.append(final)
                print(f"Received Final ACK: {final}", file=out)
                break
        return received

    def close(self) -> None:
        """Close the socket."""
        self._sock.close()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="udprtt-client", description="Acknowledge RTT requests from a UDP server."
    )
    parser.add_argument("--host", default=DEFAULT_SERVER_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_SERVER_PORT)
    args = parser.parse_args(argv)
    with UdpClient((args.host, args.port)) as client:
        client.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())