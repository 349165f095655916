"""The base socket: ownership of the descriptor and the generic socket options."""

from __future__ import annotations

import errno
import os
import socket
import struct
import sys
from types import TracebackType

__all__ = ["Socket", "get_protocol"]

# struct linger is two ints on POSIX systems and two unsigned shorts on Windows.
_LINGER = struct.Struct("HH" if sys.platform == "win32" else "ii")


def get_protocol(name: str) -> int:
    """Return the protocol number registered for ``name`` (such as ``"tcp"``).

    Raises OSError when the protocol is unknown.
    """
    return socket.getprotobyname(name)


class Socket:
    """An owned socket descriptor with helpers for reading and changing its options.

    Either a new socket is created from ``family``, ``kind`` and ``protocol``,
    or an existing ``socket.socket`` passed as ``sock`` is taken over.
    Failures are raised as OSError.
    """

    #: The largest number of bytes taken from the socket by one read.
    read_block_size = 1024

    def __init__(
        self,
        family: int = socket.AF_INET,
        kind: int = socket.SOCK_STREAM,
        protocol: int = 0,
        sock: socket.socket | None = None,
    ) -> None:
        self._sock = sock if sock is not None else socket.socket(family, kind, protocol)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fd={self.fileno()})"

    @property
    def family(self) -> int:
        """The address family of the socket."""
        return self._sock.family

    @property
    def kind(self) -> int:
        """The socket type (stream, datagram, sequenced packet, ...)."""
        return self._sock.type

    def fileno(self) -> int:
        """Return the file descriptor, or -1 once the socket is closed."""
        return self._sock.fileno()

    def close(self) -> None:
        """Close the socket; closing twice is harmless."""
        self._sock.close()

    def __enter__(self) -> Socket:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _require_open(self) -> None:
        if self._sock.fileno() == -1:
            raise OSError(errno.EBADF, os.strerror(errno.EBADF))

    @property
    def non_blocking(self) -> bool:
        """Whether the socket is in non-blocking mode."""
        self._require_open()
        return not self._sock.getblocking()

    @non_blocking.setter
    def non_blocking(self, toggle: bool) -> None:
        self._require_open()
        self._sock.setblocking(not toggle)

    def set_option_int(self, option: int, value: int, level: int = socket.SOL_SOCKET) -> None:
        """Set an integer socket option."""
        self._sock.setsockopt(level, option, int(value))

    def get_option_int(self, option: int, level: int = socket.SOL_SOCKET) -> int:
        """Return the value of an integer socket option."""
        return self._sock.getsockopt(level, option)

    def set_option_flag(
        self, option: int, toggle: bool = True, level: int = socket.SOL_SOCKET
    ) -> None:
        """Turn a boolean socket option on or off."""
        self.set_option_int(option, 1 if toggle else 0, level)

    def get_option_flag(self, option: int, level: int = socket.SOL_SOCKET) -> bool:
        """Return whether a boolean socket option is on."""
        return self.get_option_int(option, level) != 0

    @property
    def linger(self) -> int:
        """Seconds the socket lingers on close, or 0 when lingering is off.

        Setting a value of 0 or less turns lingering off.
        """
        raw = self._sock.getsockopt(socket.SOL_SOCKET, socket.SO_LINGER, _LINGER.size)
        onoff, seconds = _LINGER.unpack(raw)
        return seconds if onoff else 0

    @linger.setter
    def linger(self, seconds: int) -> None:
        packed = _LINGER.pack(1, seconds) if seconds > 0 else _LINGER.pack(0, 0)
        self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_LINGER, packed)