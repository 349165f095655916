"""The IPX socket domain: endpoints made of a network, a node and a port."""

from __future__ import annotations

import socket
from dataclasses import dataclass, replace
from typing import Iterable, Union

from aissock.base import Socket

__all__ = ["IPXAddress", "DomainIPX", "format_ipx_address", "AF_IPX", "NODE_LENGTH"]

AF_IPX = getattr(socket, "AF_IPX", 4)

#: The number of bytes in an IPX node address.
NODE_LENGTH = 6

_SOCK_SEQPACKET = getattr(socket, "SOCK_SEQPACKET", 5)


def _node_bytes(node: Union[bytes, bytearray, Iterable[int]]) -> bytes:
    data = bytes(node)
    if len(data) != NODE_LENGTH:
        raise ValueError(f"an IPX node is {NODE_LENGTH} bytes long")
    return data


def _check_network(network: int) -> int:
    network = int(network)
    if not 0 <= network <= 0xFFFFFFFF:
        raise ValueError("an IPX network number is 32 bits")
    return network


def format_ipx_address(network: int, node: Union[bytes, bytearray, Iterable[int]]) -> str:
    """Format an address as ``network:node`` in zero-padded lower-case hex."""
    return f"{_check_network(network):08x}:{_node_bytes(node).hex()}"


@dataclass(frozen=True)
class IPXAddress:
    """An IPX endpoint: 32-bit network, 6-byte node and 16-bit port."""

    network: int = 0
    node: bytes = bytes(NODE_LENGTH)
    port: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "network", _check_network(self.network))
        object.__setattr__(self, "node", _node_bytes(self.node))
        port = int(self.port)
        if not 0 <= port <= 0xFFFF:
            raise ValueError(f"port out of range: {port}")
        object.__setattr__(self, "port", port)

    def __str__(self) -> str:
        return format_ipx_address(self.network, self.node)


def _check_port(port: int) -> int:
    port = int(port)
    if not 0x0001 <= port <= 0xFFFE:
        raise ValueError("Port must be between 1 and 65534")
    return port


class DomainIPX(Socket):
    """An IPX socket with a local and a remote endpoint.

    Both endpoints start zeroed. Addresses can only be set from IPXAddress
    values; text addresses are not supported.
    """

    def __init__(
        self,
        kind: int = _SOCK_SEQPACKET,
        protocol: int = 0,
        sock: socket.socket | None = None,
        local: IPXAddress | None = None,
        remote: IPXAddress | None = None,
    ) -> None:
        super().__init__(AF_IPX, kind, protocol, sock)
        self._local = IPXAddress()
        self._remote = IPXAddress()
        if local is not None:
            self.set_local_address(local)
        if remote is not None:
            self.set_remote_address(remote)

    @staticmethod
    def _resolve(address: object) -> IPXAddress:
        if isinstance(address, IPXAddress):
            return address
        if isinstance(address, str):
            raise ValueError("IPX addresses cannot be set from text")
        raise TypeError(f"cannot use {type(address).__name__} as an IPX address")

    def set_local_address(self, address: IPXAddress) -> None:
        """Replace the whole local endpoint."""
        self._local = self._resolve(address)

    def set_remote_address(self, address: IPXAddress) -> None:
        """Replace the whole remote endpoint."""
        self._remote = self._resolve(address)

    def set_local_port(self, port: int) -> None:
        """Set the local port (1 to 65534); raises ValueError outside that range."""
        self._local = replace(self._local, port=_check_port(port))

    def set_remote_port(self, port: int) -> None:
        """Set the remote port (1 to 65534); raises ValueError outside that range."""
        self._remote = replace(self._remote, port=_check_port(port))

    @property
    def local_address(self) -> IPXAddress:
        """The local endpoint; ``str()`` of it gives the ``network:node`` text."""
        return self._local

    @property
    def remote_address(self) -> IPXAddress:
        """The remote endpoint; ``str()`` of it gives the ``network:node`` text."""
        return self._remote

    @staticmethod
    def _sockaddr(address: IPXAddress) -> tuple:
        return (address.network, address.node, address.port)

    def bind(self) -> None:
        """Bind the socket to its local endpoint; raises OSError on failure."""
        self._sock.bind(self._sockaddr(self._local))

    def connect(self) -> None:
        """Connect the socket to its remote endpoint; raises OSError on failure."""
        self._sock.connect(self._sockaddr(self._remote))