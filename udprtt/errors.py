"""Winsock error codes and the exception raised for them."""

from __future__ import annotations

import enum

WSABASEERR = 10000


class WsaError(enum.IntEnum):
    """Error codes reported by the Windows sockets layer."""

    WSAEINTR = WSABASEERR + 4
    WSAEBADF = WSABASEERR + 9
    WSAEACCES = WSABASEERR + 13
    WSAEFAULT = WSABASEERR + 14
    WSAEINVAL = WSABASEERR + 22
    WSAEMFILE = WSABASEERR + 24

    WSAEWOULDBLOCK = WSABASEERR + 35
    WSAEINPROGRESS = WSABASEERR + 36
    WSAEALREADY = WSABASEERR + 37
    WSAENOTSOCK = WSABASEERR + 38
    WSAEDESTADDRREQ = WSABASEERR + 39
    WSAEMSGSIZE = WSABASEERR + 40
    WSAEPROTOTYPE = WSABASEERR + 41
    WSAENOPROTOOPT = WSABASEERR + 42
    WSAEPROTONOSUPPORT = WSABASEERR + 43
    WSAESOCKTNOSUPPORT = WSABASEERR + 44
    WSAEOPNOTSUPP = WSABASEERR + 45
    WSAEPFNOSUPPORT = WSABASEERR + 46
    WSAEAFNOSUPPORT = WSABASEERR + 47
    WSAEADDRINUSE = WSABASEERR + 48
    WSAEADDRNOTAVAIL = WSABASEERR + 49
    WSAENETDOWN = WSABASEERR + 50
    WSAENETUNREACH = WSABASEERR + 51
    WSAENETRESET = WSABASEERR + 52
    WSAECONNABORTED = WSABASEERR + 53
    WSAECONNRESET = WSABASEERR + 54
    WSAENOBUFS = WSABASEERR + 55
    WSAEISCONN = WSABASEERR + 56
    WSAENOTCONN = WSABASEERR + 57
    WSAESHUTDOWN = WSABASEERR + 58
    WSAETOOMANYREFS = WSABASEERR + 59
    WSAETIMEDOUT = WSABASEERR + 60
    WSAECONNREFUSED = WSABASEERR + 61
    WSAELOOP = WSABASEERR + 62
    WSAENAMETOOLONG = WSABASEERR + 63
    WSAEHOSTDOWN = WSABASEERR + 64
    WSAEHOSTUNREACH = WSABASEERR + 65
    WSAENOTEMPTY = WSABASEERR + 66
    WSAEUSERS = WSABASEERR + 68
    WSAEDQUOT = WSABASEERR + 69
    WSAESTALE = WSABASEERR + 70
    WSAEREMOTE = WSABASEERR + 71

    WSASYSNOTREADY = WSABASEERR + 91
    WSAVERNOTSUPPORTED = WSABASEERR + 92
    WSANOTINITIALISED = WSABASEERR + 93
    WSAEDISCON = WSABASEERR + 101
    WSAENOMORE = WSABASEERR + 102
    WSAECANCELLED = WSABASEERR + 103
    WSAEINVALIDPROCTABLE = WSABASEERR + 104
    WSAEINVALIDPROVIDER = WSABASEERR + 105
    WSAEPROVIDERFAILEDINIT = WSABASEERR + 106
    WSASYSCALLFAILURE = WSABASEERR + 107
    WSASERVICE_NOT_FOUND = WSABASEERR + 108
    WSATYPE_NOT_FOUND = WSABASEERR + 109
    WSA_E_NO_MORE = WSABASEERR + 110
    WSA_E_CANCELLED = WSABASEERR + 111
    WSAEREFUSED = WSABASEERR + 112

    WSAHOST_NOT_FOUND = WSABASEERR + 1001
    WSATRY_AGAIN = WSABASEERR + 1002
    WSANO_RECOVERY = WSABASEERR + 1003
    WSANO_DATA = WSABASEERR + 1004
    WSANO_ADDRESS = WSANO_DATA


def error_name(code: int) -> str:
    """Return the symbolic name of a Winsock error code."""
    try:
        return WsaError(code).name
    except ValueError:
        raise ValueError(f"unknown Winsock error code: {code!r}") from None


class WinsockError(OSError):
    """A socket operation failed with a Winsock error code."""

    def __init__(self, code: int, message: str | None = None) -> None:
        try:
            resolved: int = WsaError(code)
        except ValueError:
            resolved = int(code)
        if message is None:
            if isinstance(resolved, WsaError):
                message = resolved.name
            else:
                message = f"Winsock error {resolved}"
        super().__init__(int(resolved), message)
        self.code = resolved