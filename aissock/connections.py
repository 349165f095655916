"""Ready-to-use connection sockets: TCP over IPv4 and IPv6, SPX over IPX, and local streams."""

from __future__ import annotations

import socket
import struct
from typing import Any, Tuple, Type

from aissock.inet import DomainIPv4, DomainIPv6
from aissock.ipx import AF_IPX, DomainIPX, IPXAddress
from aissock.local import DomainUNIX
from aissock.transport import SeqPacketType, StatefulType, StreamType

__all__ = [
    "SocketIPv4TCP",
    "SocketIPv6TCP",
    "SocketIPXSPX",
    "SocketUNIX",
    "available_socket_types",
]

_SOCK_SEQPACKET = getattr(socket, "SOCK_SEQPACKET", 5)
_IPX_SA_DATA = struct.Struct("!HI6s")


def _inherit(conn: StatefulType, listener: StatefulType, new_sock: socket.socket) -> StatefulType:
    conn.read_block_size = listener.read_block_size
    return conn


class SocketIPv4TCP(DomainIPv4, StatefulType, StreamType):
    """A TCP connection over IPv4."""

    def __init__(
        self,
        sock: socket.socket | None = None,
        local: Any = None,
        remote: Any = None,
    ) -> None:
        super().__init__(socket.SOCK_STREAM, socket.IPPROTO_TCP, sock, local, remote)

    def accept(self) -> SocketIPv4TCP:
        """Accept a pending connection; it shares this socket's local endpoint."""
        new_sock, peer = self._sock.accept()
        try:
            conn = type(self)(sock=new_sock, local=self.local_sockaddr, remote=peer)
        except BaseException:
            new_sock.close()
            raise
        return _inherit(conn, self, new_sock)


class SocketIPv6TCP(DomainIPv6, StatefulType, StreamType):
    """A TCP connection over IPv6."""

    def __init__(
        self,
        sock: socket.socket | None = None,
        local: Any = None,
        remote: Any = None,
    ) -> None:
        super().__init__(socket.SOCK_STREAM, socket.IPPROTO_TCP, sock, local, remote)

    def accept(self) -> SocketIPv6TCP:
        """Accept a pending connection; it shares this socket's local endpoint."""
        new_sock, peer = self._sock.accept()
        try:
            host, *rest = peer
            remote = (host.split("%", 1)[0], *rest)
            conn = type(self)(sock=new_sock, local=self.local_sockaddr, remote=remote)
        except BaseException:
            new_sock.close()
            raise
        return _inherit(conn, self, new_sock)


def _ipx_peer(peer: object) -> IPXAddress:
    # Addresses of unknown families come back as (family, raw sa_data).
    if (
        isinstance(peer, tuple)
        and len(peer) == 2
        and isinstance(peer[1], bytes)
        and len(peer[1]) >= _IPX_SA_DATA.size
    ):
        port, network, node = _IPX_SA_DATA.unpack_from(peer[1])
        return IPXAddress(network=network, node=node, port=port)
    return IPXAddress()


class SocketIPXSPX(DomainIPX, StatefulType, SeqPacketType):
    """An SPX connection over IPX."""

    def __init__(
        self,
        sock: socket.socket | None = None,
        local: IPXAddress | None = None,
        remote: IPXAddress | None = None,
    ) -> None:
        super().__init__(_SOCK_SEQPACKET, 0, sock, local, remote)

    def accept(self) -> SocketIPXSPX:
        """Accept a pending connection; it shares this socket's local endpoint."""
        new_sock, peer = self._sock.accept()
        try:
            conn = type(self)(sock=new_sock, local=self.local_address, remote=_ipx_peer(peer))
        except BaseException:
            new_sock.close()
            raise
        return _inherit(conn, self, new_sock)


class SocketUNIX(DomainUNIX, StatefulType, StreamType):
    """A stream connection between local processes."""

    def __init__(
        self,
        sock: socket.socket | None = None,
        local: Any = None,
        remote: Any = None,
    ) -> None:
        super().__init__(socket.SOCK_STREAM, 0, sock, local, remote)

    def accept(self) -> SocketUNIX:
        """Accept a pending connection; it shares this socket's local path."""
        new_sock, peer = self._sock.accept()
        try:
            conn = type(self)(sock=new_sock, local=self.local_address, remote=peer or "")
        except BaseException:
            new_sock.close()
            raise
        return _inherit(conn, self, new_sock)


_CANDIDATES: Tuple[Tuple[Type[StatefulType], str, int], ...] = (
    (SocketIPv4TCP, "AF_INET", socket.SOCK_STREAM),
    (SocketIPv6TCP, "AF_INET6", socket.SOCK_STREAM),
    (SocketIPXSPX, "AF_IPX", _SOCK_SEQPACKET),
    (SocketUNIX, "AF_UNIX", socket.SOCK_STREAM),
)


def _family_works(name: str, kind: int) -> bool:
    family = AF_IPX if name == "AF_IPX" else getattr(socket, name, None)
    if family is None:
        return False
    try:
        probe = socket.socket(family, kind)
    except (OSError, ValueError):
        return False
    probe.close()
    return True


def available_socket_types() -> tuple[Type[StatefulType], ...]:
    """Return the connection socket classes this system can actually create."""
    return tuple(cls for cls, name, kind in _CANDIDATES if _family_works(name, kind))