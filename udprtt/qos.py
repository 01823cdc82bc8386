"""Quality-of-service flow specifications and protocol chains."""

from __future__ import annotations

import enum
import struct
from dataclasses import astuple, dataclass, field, fields

MAX_PROTOCOL_CHAIN = 7
BASE_PROTOCOL = 1
LAYERED_PROTOCOL = 0

_FLOWSPEC = struct.Struct("<8I")
_LENGTH = struct.Struct("<I")
FLOWSPEC_SIZE = _FLOWSPEC.size


class ServiceType(enum.IntEnum):
    """Service levels a flow can request."""

    NOTRAFFIC = 0x00000000
    BESTEFFORT = 0x00000001
    CONTROLLEDLOAD = 0x00000002
    GUARANTEED = 0x00000003
    NETWORK_UNAVAILABLE = 0x00000004
    GENERAL_INFORMATION = 0x00000005
    NOCHANGE = 0x00000006
    IMMEDIATE_TRAFFIC_CONTROL = 0x00000007


def _check_ulong(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int")
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"{name} does not fit in 32 bits: {value}")


@dataclass(frozen=True)
class FlowSpec:
    """Traffic parameters of one direction of a flow.

    Rates and sizes are in bytes (per second), latency and delay variation
    in microseconds.
    """

    token_rate: int = 0
    token_bucket_size: int = 0
    peak_bandwidth: int = 0
    latency: int = 0
    delay_variation: int = 0
    service_type: int = ServiceType.NOTRAFFIC
    max_sdu_size: int = 0
    minimum_policed_size: int = 0

    def __post_init__(self) -> None:
        for spec in fields(self):
            _check_ulong(spec.name, getattr(self, spec.name))
        try:
            object.__setattr__(self, "service_type", ServiceType(self.service_type))
        except ValueError:
            object.__setattr__(self, "service_type", int(self.service_type))

    def pack(self) -> bytes:
        """The 32-byte little-endian wire form."""
        return _FLOWSPEC.pack(*(int(value) for value in astuple(self)))


def unpack_flowspec(data: bytes) -> FlowSpec:
    """Decode the wire form of a flow specification."""
    data = bytes(data)
    if len(data) != FLOWSPEC_SIZE:
        raise ValueError(f"a flow spec takes {FLOWSPEC_SIZE} bytes, got {len(data)}")
    return FlowSpec(*_FLOWSPEC.unpack(data))


@dataclass(frozen=True)
class QualityOfService:
    """Sending and receiving flow specs plus provider-specific data."""

    sending: FlowSpec = field(default_factory=FlowSpec)
    receiving: FlowSpec = field(default_factory=FlowSpec)
    provider_specific: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "provider_specific", bytes(self.provider_specific))
        _check_ulong("provider-specific length", len(self.provider_specific))

    def pack(self) -> bytes:
        """Both flow specs, the provider data length, then the provider data."""
        return (
            self.sending.pack()
            + self.receiving.pack()
            + _LENGTH.pack(len(self.provider_specific))
            + self.provider_specific
        )


def unpack_qos(data: bytes) -> QualityOfService:
    """Decode the wire form written by ``QualityOfService.pack``."""
    data = bytes(data)
    header = 2 * FLOWSPEC_SIZE + _LENGTH.size
    if len(data) < header:
        raise ValueError(f"a QoS record takes at least {header} bytes, got {len(data)}")
    sending = unpack_flowspec(data[:FLOWSPEC_SIZE])
    receiving = unpack_flowspec(data[FLOWSPEC_SIZE : 2 * FLOWSPEC_SIZE])
    (length,) = _LENGTH.unpack_from(data, 2 * FLOWSPEC_SIZE)
    provider = data[header:]
    if len(provider) != length:
        raise ValueError(
            f"provider data length is {length} but {len(provider)} bytes follow"
        )
    return QualityOfService(sending, receiving, provider)


class ProtocolChain:
    """The catalog entries that make up a protocol.

    A layered protocol has no entries, a base protocol exactly one, and a
    protocol chain more than one.
    """

    def __init__(self, entries=(), layered: bool = False) -> None:
        entries = tuple(int(entry) for entry in entries)
        for entry in entries:
            _check_ulong("catalog entry", entry)
        if len(entries) > MAX_PROTOCOL_CHAIN:
            raise ValueError(
                f"a protocol chain holds at most {MAX_PROTOCOL_CHAIN} entries, "
                f"got {len(entries)}"
            )
        if layered and entries:
            raise ValueError("a layered protocol has no chain entries")
        if not layered and not entries:
            raise ValueError("a base protocol or chain needs at least one entry")
        self.entries = entries
        self.layered = layered

    @property
    def chain_len(self) -> int:
        """The chain length field: 0 for layered, 1 for base, more for a chain."""
        return LAYERED_PROTOCOL if self.layered else len(self.entries)

    def is_base(self) -> bool:
        """Whether this describes a base protocol."""
        return self.chain_len == BASE_PROTOCOL

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProtocolChain):
            return NotImplemented
        return self.entries == other.entries and self.layered == other.layered

    def __repr__(self) -> str:
        return f"ProtocolChain({list(self.entries)!r}, layered={self.layered})"