"""Internet socket domains: IPv4 and IPv6 local and remote endpoints."""

from __future__ import annotations

import ipaddress
import socket
from typing import Any, ClassVar, Tuple, Union

from aissock.base import Socket

__all__ = ["DomainIPv4", "DomainIPv6", "MAX_PORT"]

#: The highest port that may be set on an endpoint.
MAX_PORT = 65534

_SockAddr = Tuple[Any, ...]


def _check_port(port: int) -> int:
    port = int(port)
    if not 0 <= port <= MAX_PORT:
        raise ValueError("Port must be between 0 and 65536")
    return port


def _check_tuple_port(port: int) -> int:
    port = int(port)
    if not 0 <= port <= 0xFFFF:
        raise ValueError(f"port out of range: {port}")
    return port


def _ipv4_host(address: Union[str, ipaddress.IPv4Address]) -> str:
    if isinstance(address, ipaddress.IPv4Address):
        return str(address)
    if not isinstance(address, str):
        raise TypeError(f"cannot use {type(address).__name__} as an IPv4 address")
    try:
        packed = socket.inet_aton(address)
    except (OSError, ValueError):
        raise ValueError(f"invalid IPv4 address: {address!r}") from None
    return socket.inet_ntoa(packed)


def _ipv6_host(address: Union[str, ipaddress.IPv6Address]) -> str:
    if isinstance(address, ipaddress.IPv6Address):
        return socket.inet_ntop(socket.AF_INET6, address.packed)
    if not isinstance(address, str):
        raise TypeError(f"cannot use {type(address).__name__} as an IPv6 address")
    try:
        packed = socket.inet_pton(socket.AF_INET6, address)
    except (OSError, ValueError):
        raise ValueError(f"invalid IPv6 address: {address!r}") from None
    return socket.inet_ntop(socket.AF_INET6, packed)


def _ipv4_endpoint(address: Any, current: _SockAddr) -> _SockAddr:
    if isinstance(address, tuple):
        if len(address) != 2:
            raise ValueError("an IPv4 endpoint is a (host, port) pair")
        host, port = address
        return (_ipv4_host(host), _check_tuple_port(port))
    return (_ipv4_host(address),) + current[1:]


def _ipv6_endpoint(address: Any, current: _SockAddr) -> _SockAddr:
    if isinstance(address, tuple):
        if not 2 <= len(address) <= 4:
            raise ValueError("an IPv6 endpoint is (host, port[, flowinfo[, scope_id]])")
        host, port, *extra = address
        flowinfo, scope_id = (list(extra) + [0, 0])[:2]
        return (_ipv6_host(host), _check_tuple_port(port), int(flowinfo), int(scope_id))
    return (_ipv6_host(address),) + current[1:]


def _with_port(current: _SockAddr, port: int) -> _SockAddr:
    return (current[0], _check_port(port)) + current[2:]


class _InetDomain(Socket):
    """Endpoint storage shared by the internet address families."""

    _FAMILY: ClassVar[int]
    _ANY: ClassVar[_SockAddr]

    def __init__(
        self,
        kind: int = socket.SOCK_STREAM,
        protocol: int = 0,
        sock: socket.socket | None = None,
        local: Any = None,
        remote: Any = None,
    ) -> None:
        super().__init__(self._FAMILY, kind, protocol, sock)
        self._local: _SockAddr = self._ANY
        self._remote: _SockAddr = self._ANY
        if local is not None:
            self.set_local_address(local)  # type: ignore[attr-defined]
        if remote is not None:
            self.set_remote_address(remote)  # type: ignore[attr-defined]

    @property
    def local_sockaddr(self) -> _SockAddr:
        """The local endpoint in the form the socket module uses."""
        return self._local

    @property
    def remote_sockaddr(self) -> _SockAddr:
        """The remote endpoint in the form the socket module uses."""
        return self._remote


class DomainIPv4(_InetDomain):
    """An IPv4 socket with a local and a remote endpoint.

    Both endpoints start as the "any" address with port 0.
    """

    _FAMILY = socket.AF_INET
    _ANY = ("0.0.0.0", 0)

    def set_local_address(self, address: Any) -> None:
        """Set the local address from a string, an address object or a (host, port) pair.

        A string or address object replaces only the host part; a tuple
        replaces the whole endpoint. Raises ValueError for a bad address.
        """
        self._local = _ipv4_endpoint(address, self._local)

    def set_remote_address(self, address: Any) -> None:
        """Set the remote address, accepting the same forms as set_local_address()."""
        self._remote = _ipv4_endpoint(address, self._remote)

    def set_local_port(self, port: int) -> None:
        """Set the local port (0 to 65534); raises ValueError outside that range."""
        self._local = _with_port(self._local, port)

    def set_remote_port(self, port: int) -> None:
        """Set the remote port (0 to 65534); raises ValueError outside that range."""
        self._remote = _with_port(self._remote, port)

    @property
    def local_address(self) -> str:
        """The local address in dotted-quad form."""
        return self._local[0]

    @property
    def remote_address(self) -> str:
        """The remote address in dotted-quad form."""
        return self._remote[0]

    @property
    def local_port(self) -> int:
        """The local port."""
        return self._local[1]

    @property
    def remote_port(self) -> int:
        """The remote port."""
        return self._remote[1]

    @property
    def maximum_hop_count(self) -> int:
        """The time-to-live of outgoing packets.

        It may be set from -1 (the system default) to 255; other values
        raise ValueError.
        """
        return self.get_option_int(socket.IP_TTL, socket.IPPROTO_IP)

    @maximum_hop_count.setter
    def maximum_hop_count(self, hops: int) -> None:
        if not -1 <= hops < 256:
            raise ValueError("hop count must be between -1 and 255")
        self.set_option_int(socket.IP_TTL, hops, socket.IPPROTO_IP)

    def bind(self) -> None:
        """Bind the socket to its local endpoint; raises OSError on failure."""
        self._sock.bind(self._local)

    def connect(self) -> None:
        """Connect the socket to its remote endpoint; raises OSError on failure."""
        self._sock.connect(self._remote)


class DomainIPv6(_InetDomain):
    """An IPv6 socket with a local and a remote endpoint.

    Endpoints are (host, port, flowinfo, scope_id) tuples and start as the
    "any" address with port 0.
    """

    _FAMILY = socket.AF_INET6
    _ANY = ("::", 0, 0, 0)

    def set_local_address(self, address: Any) -> None:
        """Set the local address from a string, an address object or a sockaddr tuple.

        A string or address object replaces only the host part; a tuple
        replaces the whole endpoint. Raises ValueError for a bad address.
        """
        self._local = _ipv6_endpoint(address, self._local)

    def set_remote_address(self, address: Any) -> None:
        """Set the remote address, accepting the same forms as set_local_address()."""
        self._remote = _ipv6_endpoint(address, self._remote)

    def set_local_port(self, port: int) -> None:
        """Set the local port (0 to 65534); raises ValueError outside that range."""
        self._local = _with_port(self._local, port)

    def set_remote_port(self, port: int) -> None:
        """Set the remote port (0 to 65534); raises ValueError outside that range."""
        self._remote = _with_port(self._remote, port)

    @property
    def local_address(self) -> str:
        """The local address in its compressed text form."""
        return self._local[0]

    @property
    def remote_address(self) -> str:
        """The remote address in its compressed text form."""
        return self._remote[0]

    @property
    def local_port(self) -> int:
        """The local port."""
        return self._local[1]

    @property
    def remote_port(self) -> int:
        """The remote port."""
        return self._remote[1]

    def bind(self) -> None:
        """Bind the socket to its local endpoint; raises OSError on failure."""
        self._sock.bind(self._local)

    def connect(self) -> None:
        """Connect the socket to its remote endpoint; raises OSError on failure."""
        self._sock.connect(self._remote)