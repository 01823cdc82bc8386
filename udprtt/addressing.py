"""IPv4 addresses, socket addresses and byte-order helpers."""

from __future__ import annotations

import enum
import struct
import sys
from dataclasses import dataclass

INADDR_ANY = 0x00000000
INADDR_LOOPBACK = 0x7F000001
INADDR_BROADCAST = 0xFFFFFFFF
INADDR_NONE = 0xFFFFFFFF

AF_MAX = 18
IPPROTO_MAX = 256
SOCKADDR_IN_SIZE = 16


class AddressFamily(enum.IntEnum):
    """Address families; the protocol families share these values."""

    UNSPEC = 0
    UNIX = 1
    INET = 2
    IMPLINK = 3
    PUP = 4
    CHAOS = 5
    NS = 6
    ISO = 7
    OSI = 7
    ECMA = 8
    DATAKIT = 9
    CCITT = 10
    SNA = 11
    DECNET = 12
    DLI = 13
    LAT = 14
    HYLINK = 15
    APPLETALK = 16
    NETBIOS = 17


class SocketType(enum.IntEnum):
    """Socket types."""

    STREAM = 1
    DGRAM = 2
    RAW = 3
    RDM = 4
    SEQPACKET = 5


class IpProtocol(enum.IntEnum):
    """IP protocol numbers."""

    IP = 0
    ICMP = 1
    IGMP = 2
    GGP = 3
    TCP = 6
    PUP = 12
    UDP = 17
    IDP = 22
    ND = 77
    RAW = 255


@dataclass(frozen=True, order=True)
class InAddr:
    """An IPv4 address held as its 32-bit value (first octet most significant)."""

    value: int = INADDR_ANY

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("address value must be an int")
        if not 0 <= self.value <= 0xFFFFFFFF:
            raise ValueError(f"address value out of range: {self.value:#x}")

    @classmethod
    def from_bytes(cls, data: bytes) -> InAddr:
        """Build an address from its four bytes in network order."""
        data = bytes(data)
        if len(data) != 4:
            raise ValueError(f"an IPv4 address takes 4 bytes, got {len(data)}")
        return cls(int.from_bytes(data, "big"))

    @property
    def packed(self) -> bytes:
        """The four bytes in network order."""
        return self.value.to_bytes(4, "big")

    def octets(self) -> tuple[int, int, int, int]:
        """The four octets in network order."""
        first, second, third, fourth = self.packed
        return first, second, third, fourth

    def words(self) -> tuple[int, int]:
        """The two 16-bit halves in network order."""
        return self.value >> 16, self.value & 0xFFFF

    @property
    def net(self) -> int:
        return self.octets()[0]

    @property
    def host(self) -> int:
        return self.octets()[1]

    @property
    def lh(self) -> int:
        return self.octets()[2]

    @property
    def impno(self) -> int:
        return self.octets()[3]

    @property
    def imp(self) -> int:
        return self.words()[1]

    def __str__(self) -> str:
        return ".".join(str(octet) for octet in self.octets())


_DIGITS = {8: set("01234567"), 10: set("0123456789"), 16: set("0123456789abcdef")}


def _parse_part(text: str) -> int:
    if text[:2].lower() == "0x":
        digits, base = text[2:], 16
    elif len(text) > 1 and text.startswith("0"):
        digits, base = text[1:], 8
    else:
        digits, base = text, 10
    if not digits or not set(digits.lower()) <= _DIGITS[base]:
        raise ValueError(f"invalid address component: {text!r}")
    return int(digits, base)


def inet_addr(text: str) -> InAddr:
    """Parse an IPv4 address in dotted notation, including the short forms."""
    parts = text.split(".")
    if not 1 <= len(parts) <= 4:
        raise ValueError(f"invalid IPv4 address: {text!r}")
    try:
        numbers = [_parse_part(part) for part in parts]
    except ValueError:
        raise ValueError(f"invalid IPv4 address: {text!r}") from None
    *leading, last = numbers
    tail_bits = 8 * (5 - len(numbers))
    if any(number > 0xFF for number in leading) or last >= 1 << tail_bits:
        raise ValueError(f"invalid IPv4 address: {text!r}")
    value = last
    for position, number in enumerate(leading):
        value |= number << (24 - 8 * position)
    return InAddr(value)


def inet_ntoa(address: InAddr | int) -> str:
    """Format an IPv4 address in dotted-decimal notation."""
    if not isinstance(address, InAddr):
        address = InAddr(address)
    return str(address)


@dataclass(frozen=True)
class SockAddrIn:
    """An IPv4 socket address: family, port and address."""

    addr: InAddr
    port: int
    family: int = AddressFamily.INET

    def __post_init__(self) -> None:
        if isinstance(self.addr, str):
            object.__setattr__(self, "addr", inet_addr(self.addr))
        elif isinstance(self.addr, int):
            object.__setattr__(self, "addr", InAddr(self.addr))
        if not 0 <= self.port <= 0xFFFF:
            raise ValueError(f"port out of range: {self.port}")
        if not 0 <= self.family <= 0xFFFF:
            raise ValueError(f"address family out of range: {self.family}")
        try:
            object.__setattr__(self, "family", AddressFamily(self.family))
        except ValueError:
            object.__setattr__(self, "family", int(self.family))

    def pack(self) -> bytes:
        """The 16-byte wire form: family, port, address and zero padding."""
        return (
            struct.pack("<H", self.family)
            + struct.pack("!H", self.port)
            + self.addr.packed
            + bytes(8)
        )

    def __str__(self) -> str:
        return f"{self.addr}:{self.port}"


def unpack_sockaddr_in(data: bytes) -> SockAddrIn:
    """Decode the 16-byte wire form of an IPv4 socket address."""
    data = bytes(data)
    if len(data) < SOCKADDR_IN_SIZE:
        raise ValueError(
            f"a socket address takes {SOCKADDR_IN_SIZE} bytes, got {len(data)}"
        )
    (family,) = struct.unpack_from("<H", data, 0)
    (port,) = struct.unpack_from("!H", data, 2)
    return SockAddrIn(addr=InAddr.from_bytes(data[4:8]), port=port, family=family)


def _swap(value: int, width: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("value must be an int")
    if not 0 <= value < 1 << (8 * width):
        raise ValueError(f"value does not fit in {width} bytes: {value}")
    return int.from_bytes(value.to_bytes(width, sys.byteorder), "big")


def htons(value: int) -> int:
    """Convert a 16-bit value from host to network byte order."""
    return _swap(value, 2)


def htonl(value: int) -> int:
    """Convert a 32-bit value from host to network byte order."""
    return _swap(value, 4)


def ntohs(value: int) -> int:
    """Convert a 16-bit value from network to host byte order."""
    return _swap(value, 2)


def ntohl(value: int) -> int:
    """Convert a 32-bit value from network to host byte order."""
    return _swap(value, 4)