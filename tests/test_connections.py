import os
import socket

import pytest

from aissock.connections import (
    SocketIPv4TCP,
    SocketIPv6TCP,
    SocketUNIX,
    available_socket_types,
)
from aissock.transport import StatefulType


def _free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]


@pytest.fixture
def tcp_pair():
    port = _free_port()
    server = SocketIPv4TCP()
    server.set_local_address("127.0.0.1")
    server.set_local_port(port)
    server.bind()
    server.listen()
    client = SocketIPv4TCP()
    client.set_remote_address("127.0.0.1")
    client.set_remote_port(port)
    client.connect()
    yield server, client, port
    client.close()
    server.close()


def test_available_types_include_ipv4():
    types = available_socket_types()
    assert SocketIPv4TCP in types
    assert all(issubclass(cls, StatefulType) for cls in types)
    assert len(set(types)) == len(types)


def test_ipv4_accept_gives_endpoints(tcp_pair):
    server, client, port = tcp_pair
    with server.accept() as conn:
        assert isinstance(conn, SocketIPv4TCP)
        assert conn.local_address == "127.0.0.1"
        assert conn.local_port == port
        assert conn.remote_address == "127.0.0.1"
        assert 0 < conn.remote_port <= 0xFFFF


def test_ipv4_write_and_read(tcp_pair):
    server, client, _ = tcp_pair
    with server.accept() as conn:
        assert client.write(b"hello") == 5
        assert conn.read() == b"hello"
        assert conn.write("reply") == 5
        assert client.read() == b"reply"


def test_accept_inherits_read_block_size(tcp_pair):
    server, client, _ = tcp_pair
    server.read_block_size = 4
    with server.accept() as conn:
        assert conn.read_block_size == 4
        client.write(b"hello")
        assert conn.read() == b"hell"


def test_read_after_peer_close_raises_eof(tcp_pair):
    server, client, _ = tcp_pair
    with server.accept() as conn:
        client.close()
        with pytest.raises(EOFError):
            conn.read()


def test_accept_without_listen_fails():
    with SocketIPv4TCP() as sock:
        with pytest.raises(OSError):
            sock.accept()


def test_ipv6_defaults_to_any_address():
    with SocketIPv6TCP() as sock:
        assert sock.local_address == "::"
        assert sock.remote_port == 0


def test_unix_accept_and_exchange(tmp_path):
    path = str(tmp_path / "u")
    server = SocketUNIX(local=path)
    server.bind()
    server.listen()
    try:
        with SocketUNIX(remote=path) as client:
            client.connect()
            with server.accept() as conn:
                assert isinstance(conn, SocketUNIX)
                assert conn.local_address == path
                assert conn.remote_address == ""
                client.write(b"data")
                assert conn.read() == b"data"
            assert os.path.exists(path)
    finally:
        server.close()
    assert not os.path.exists(path)


def test_unix_keep_alive_round_trip(tmp_path):
    with SocketUNIX(local=str(tmp_path / "k")) as sock:
        sock.keep_alive = True
        assert sock.keep_alive is True
        sock.keep_alive = False
        assert sock.keep_alive is False