"""Socket I/O control codes and the word-packing helpers used with them."""

from __future__ import annotations

import enum

IOCPARM_MASK = 0x7F
IOC_VOID = 0x20000000
IOC_OUT = 0x40000000
IOC_IN = 0x80000000
IOC_INOUT = IOC_IN | IOC_OUT

IOC_UNIX = 0x00000000
IOC_WS2 = 0x08000000
IOC_FAMILY = 0x10000000
IOC_VENDOR = 0x18000000

_FAMILIES = frozenset({IOC_UNIX, IOC_WS2, IOC_FAMILY, IOC_VENDOR})
_CODE_LIMIT = 1 << 27
_ULONG_SIZE = 4


def _byte(value: int | str, what: str) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"{what} must be a single character, got {value!r}")
        value = ord(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int or a single character")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{what} out of range: {value}")
    return value


def _size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError("size must be an int")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return (size & IOCPARM_MASK) << 16


def io(group: int | str, number: int) -> int:
    """A control code that carries no parameter."""
    return IOC_VOID | (_byte(group, "group") << 8) | _byte(number, "number")


def ior(group: int | str, number: int, size: int) -> int:
    """A control code that returns a parameter of ``size`` bytes."""
    return IOC_OUT | _size(size) | (_byte(group, "group") << 8) | _byte(number, "number")


def iow(group: int | str, number: int, size: int) -> int:
    """A control code that takes a parameter of ``size`` bytes."""
    return IOC_IN | _size(size) | (_byte(group, "group") << 8) | _byte(number, "number")


def _wsa(direction: int, family: int, code: int) -> int:
    if family not in _FAMILIES:
        raise ValueError(f"unknown control code family: {family:#x}")
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError("code must be an int")
    if not 0 <= code < _CODE_LIMIT:
        raise ValueError(f"control code out of range: {code}")
    return direction | family | code


def wsaio(family: int, code: int) -> int:
    """An extended control code with no input or output."""
    return _wsa(IOC_VOID, family, code)


def wsaior(family: int, code: int) -> int:
    """An extended control code with output."""
    return _wsa(IOC_OUT, family, code)


def wsaiow(family: int, code: int) -> int:
    """An extended control code with input."""
    return _wsa(IOC_IN, family, code)


def wsaiorw(family: int, code: int) -> int:
    """An extended control code with both input and output."""
    return _wsa(IOC_INOUT, family, code)


def _word(value: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int")
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"{what} does not fit in 16 bits: {value}")
    return value


def _long(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("value must be an int")
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"value does not fit in 32 bits: {value}")
    return value


def make_long(low: int, high: int) -> int:
    """Combine two 16-bit words into one 32-bit value."""
    return _word(low, "low word") | (_word(high, "high word") << 16)


def low_word(value: int) -> int:
    """The low 16 bits of a 32-bit value."""
    return _long(value) & 0xFFFF


def high_word(value: int) -> int:
    """The high 16 bits of a 32-bit value."""
    return _long(value) >> 16


class IoControl(enum.IntEnum):
    """Socket I/O control codes."""

    FIONREAD = ior("f", 127, _ULONG_SIZE)
    FIONBIO = iow("f", 126, _ULONG_SIZE)
    FIOASYNC = iow("f", 125, _ULONG_SIZE)

    SIOCSHIWAT = iow("s", 0, _ULONG_SIZE)
    SIOCGHIWAT = ior("s", 1, _ULONG_SIZE)
    SIOCSLOWAT = iow("s", 2, _ULONG_SIZE)
    SIOCGLOWAT = ior("s", 3, _ULONG_SIZE)
    SIOCATMARK = ior("s", 7, _ULONG_SIZE)

    SIO_ASSOCIATE_HANDLE = wsaiow(IOC_WS2, 1)
    SIO_ENABLE_CIRCULAR_QUEUEING = wsaio(IOC_WS2, 2)
    SIO_FIND_ROUTE = wsaior(IOC_WS2, 3)
    SIO_FLUSH = wsaio(IOC_WS2, 4)
    SIO_GET_BROADCAST_ADDRESS = wsaior(IOC_WS2, 5)
    SIO_GET_EXTENSION_FUNCTION_POINTER = wsaiorw(IOC_WS2, 6)
    SIO_GET_QOS = wsaiorw(IOC_WS2, 7)
    SIO_GET_GROUP_QOS = wsaiorw(IOC_WS2, 8)
    SIO_MULTIPOINT_LOOPBACK = wsaiow(IOC_WS2, 9)
    SIO_MULTICAST_SCOPE = wsaiow(IOC_WS2, 10)
    SIO_SET_QOS = wsaiow(IOC_WS2, 11)
    SIO_SET_GROUP_QOS = wsaiow(IOC_WS2, 12)
    SIO_TRANSLATE_HANDLE = wsaiorw(IOC_WS2, 13)
    SIO_ROUTING_INTERFACE_QUERY = wsaiorw(IOC_WS2, 20)
    SIO_ROUTING_INTERFACE_CHANGE = wsaiow(IOC_WS2, 21)
    SIO_ADDRESS_LIST_QUERY = wsaior(IOC_WS2, 22)
    SIO_ADDRESS_LIST_CHANGE = wsaio(IOC_WS2, 23)