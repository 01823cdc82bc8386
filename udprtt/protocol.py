"""Messages exchanged between the RTT server and client, and shared helpers."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

BUFLEN = 1024
DEFAULT_SERVER_HOST = "127.0.0.1"
DEFAULT_SERVER_PORT = 8886
CONFIG_FILE = "server_config.txt"
INIT_MESSAGE = "INIT"

_LEADING_INT = re.compile(r"[+-]?\d+")


class MessageKind(enum.Enum):
    """What a received message asks for, judged by its first character."""

    REQUEST = "R"
    END = "E"
    OTHER = ""


@dataclass(frozen=True)
class ServerConfig:
    """The address the server binds to."""

    host: str
    port: int


def format_timestamp(moment: datetime) -> str:
    """Format a time of day as ``hh:mm:ss:mmm``."""
    return (
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}:"
        f"{moment.microsecond // 1000:03d}"
    )


def now_timestamp() -> str:
    """The current local time formatted by ``format_timestamp``."""
    return format_timestamp(datetime.now())


def request_message(seqno: int, timestamp: str) -> str:
    """A request the server sends every interval."""
    return f"R {seqno:05d} {timestamp}"


def end_message(seqno: int, timestamp: str) -> str:
    """The termination message the server sends."""
    return f"E {seqno:05d} {timestamp}"


def final_ack_message(seqno: int, timestamp: str) -> str:
    """The acknowledgement closing a termination exchange."""
    return f"ACK {seqno:05d} {timestamp}"


def message_kind(message: str) -> MessageKind:
    """Classify a message by its first character, ignoring case."""
    first = message[:1].upper()
    if first == MessageKind.REQUEST.value:
        return MessageKind.REQUEST
    if first == MessageKind.END.value:
        return MessageKind.END
    return MessageKind.OTHER


def ack_message(message: str, timestamp: str) -> str:
    """The client's acknowledgement of a request or termination message.

    The sequence field is the first word after the leading character.
    """
    kind = message_kind(message)
    if kind is MessageKind.OTHER:
        raise ValueError(f"message is neither a request nor an end: {message!r}")
    words = message[1:].split()
    if not words:
        raise ValueError(f"message carries no sequence number: {message!r}")
    return f"ACK {kind.value} {words[0]} {timestamp}"


def load_config(path: str | Path = CONFIG_FILE) -> ServerConfig:
    """Read ``<ip> <port>`` from a configuration file."""
    tokens = Path(path).read_text().split()
    if len(tokens) < 2:
        raise ValueError(f"configuration needs an address and a port: {path}")
    host, port_text = tokens[0], tokens[1]
    match = _LEADING_INT.match(port_text)
    if match is None:
        raise ValueError(f"invalid port in configuration: {port_text!r}")
    port = int(match.group())
    if not 0 <= port <= 0xFFFF:
        raise ValueError(f"port out of range: {port}")
    return ServerConfig(host, port)


def elapsed_ms(start: float, end: float) -> float:
    """Milliseconds between two performance-counter readings in seconds."""
    return (end - start) * 1000.0