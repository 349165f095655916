"""The local (Unix) socket domain: endpoints named by filesystem paths."""

from __future__ import annotations

import contextlib
import os
import socket
from typing import Union

from aissock.base import Socket

__all__ = ["DomainUNIX", "UNIX_PATH_MAX"]

#: The longest path, in bytes, that a local socket address may hold.
UNIX_PATH_MAX = 108

_AF_UNIX = getattr(socket, "AF_UNIX", 1)

_Path = Union[str, bytes]


def _check_path(address: Union[str, bytes, os.PathLike]) -> _Path:
    path = os.fspath(address)
    if len(os.fsencode(path)) > UNIX_PATH_MAX:
        raise ValueError("Address is too long")
    return path


def _is_abstract(path: _Path) -> bool:
    return path[:1] in ("\0", b"\0")


class DomainUNIX(Socket):
    """A local socket with a local and a remote path.

    Both paths start empty. A path this socket has bound is removed from
    the filesystem again when the socket is closed.
    """

    def __init__(
        self,
        kind: int = socket.SOCK_STREAM,
        protocol: int = 0,
        sock: socket.socket | None = None,
        local: Union[str, bytes, os.PathLike, None] = None,
        remote: Union[str, bytes, os.PathLike, None] = None,
    ) -> None:
        super().__init__(_AF_UNIX, kind, protocol, sock)
        self._local: _Path = ""
        self._remote: _Path = ""
        self._bound_path: _Path | None = None
        if local:
            self.set_local_address(local)
        if remote:
            self.set_remote_address(remote)

    def set_local_address(self, address: Union[str, bytes, os.PathLike]) -> None:
        """Set the local path; raises ValueError if it is longer than UNIX_PATH_MAX bytes."""
        self._local = _check_path(address)

    def set_remote_address(self, address: Union[str, bytes, os.PathLike]) -> None:
        """Set the remote path; raises ValueError if it is longer than UNIX_PATH_MAX bytes."""
        self._remote = _check_path(address)

    @property
    def local_address(self) -> _Path:
        """The local path."""
        return self._local

    @property
    def remote_address(self) -> _Path:
        """The remote path."""
        return self._remote

    def bind(self) -> None:
        """Bind the socket to its local path; raises OSError on failure."""
        self._sock.bind(self._local)
        self._bound_path = self._local

    def connect(self) -> None:
        """Connect the socket to its remote path; raises OSError on failure."""
        self._sock.connect(self._remote)

    def close(self) -> None:
        """Close the socket and remove the file of a path it bound."""
        super().close()
        path, self._bound_path = self._bound_path, None
        if path and not _is_abstract(path):
            with contextlib.suppress(OSError):
                os.remove(path)