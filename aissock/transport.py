"""Socket types: byte streams, sequenced packets, and connection-oriented sockets."""

from __future__ import annotations

import socket
from abc import ABCMeta, abstractmethod

from aissock.base import Socket

__all__ = ["StreamType", "SeqPacketType", "StatefulType", "DEFAULT_LISTEN_BACKLOG"]

#: The backlog used by listen() when none is given.
DEFAULT_LISTEN_BACKLOG = 5


def _write_whole(sock: socket.socket, data: bytes | bytearray | memoryview | str) -> int:
    payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    sent = sock.send(payload)
    if sent != len(payload):
        raise OSError(f"only {sent} of {len(payload)} bytes were written")
    return sent


def _read_chunk(sock: socket.socket, size: int) -> bytes:
    try:
        chunk = sock.recv(size)
    except (BlockingIOError, InterruptedError):
        return b""
    if not chunk:
        raise EOFError("connection closed by peer")
    return chunk


class StreamType(Socket):
    """A byte-stream socket."""

    def write(self, data: bytes | bytearray | memoryview | str) -> int:
        """Write all of ``data`` in one go and return the number of bytes written.

        Text is sent as UTF-8. A partial write raises OSError.
        """
        return _write_whole(self._sock, data)

    def read(self) -> bytes:
        """Read up to ``read_block_size`` bytes.

        Returns ``b""`` when nothing is available yet on a non-blocking
        socket; raises EOFError when the peer has closed the connection.
        """
        return _read_chunk(self._sock, self.read_block_size)


class SeqPacketType(Socket):
    """A socket carrying sequenced, reliable packets."""

    def write(self, data: bytes | bytearray | memoryview | str) -> int:
        """Send ``data`` as one packet and return its length in bytes.

        Text is sent as UTF-8. A partial write raises OSError.
        """
        return _write_whole(self._sock, data)

    def read(self) -> bytes:
        """Read one packet of at most ``read_block_size`` bytes.

        Returns ``b""`` when nothing is available yet on a non-blocking
        socket; raises EOFError when the peer has closed the connection.
        """
        return _read_chunk(self._sock, self.read_block_size)


class StatefulType(Socket, metaclass=ABCMeta):
    """A connection-oriented socket that can listen for and accept peers."""

    def listen(self, backlog: int = DEFAULT_LISTEN_BACKLOG) -> None:
        """Start listening for connections; raises OSError on failure."""
        self._sock.listen(backlog)

    @property
    def keep_alive(self) -> bool:
        """Whether keep-alive packets are sent on this connection."""
        return self.get_option_flag(socket.SO_KEEPALIVE)

    @keep_alive.setter
    def keep_alive(self, toggle: bool) -> None:
        self.set_option_flag(socket.SO_KEEPALIVE, toggle)

    @abstractmethod
    def accept(self) -> StatefulType:
        """Accept a pending connection and return a socket for it."""