"""UDP request/acknowledge exchange with round-trip-time measurement."""

__version__ = "0.1.0"
__all__ = [
    "addressing",
    "client",
    "errors",
    "fdset",
    "ioctl",
    "netevents",
    "protocol",
    "qos",
    "server",
]