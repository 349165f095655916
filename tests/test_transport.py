import socket

import pytest

from aissock.transport import (
    DEFAULT_LISTEN_BACKLOG,
    SeqPacketType,
    StatefulType,
    StreamType,
)


class _TCP(StatefulType, StreamType):
    def __init__(self, kind=socket.SOCK_STREAM, sock=None):
        super().__init__(socket.AF_INET, kind, 0, sock)

    def bind_loopback(self):
        self._sock.bind(("127.0.0.1", 0))
        return self._sock.getsockname()

    def accept(self):
        conn, _ = self._sock.accept()
        return _TCP(sock=conn)


@pytest.fixture
def streams():
    a, b = socket.socketpair()
    left, right = StreamType(sock=a), StreamType(sock=b)
    yield left, right
    left.close()
    right.close()


def test_stream_round_trip_bytes(streams):
    left, right = streams
    assert left.write(b"hello world") == len(b"hello world")
    assert right.read() == b"hello world"


def test_stream_text_is_utf8(streams):
    left, right = streams
    text = "h\u00e9llo"
    assert left.write(text) == len(text.encode("utf-8"))
    assert right.read() == text.encode("utf-8")


def test_stream_read_respects_block_size(streams):
    left, right = streams
    right.read_block_size = 4
    left.write(b"0123456789")
    assert right.read() == b"0123"
    assert right.read() == b"4567"


def test_stream_read_nothing_available(streams):
    _, right = streams
    right.non_blocking = True
    assert right.read() == b""


def test_stream_read_after_peer_closed(streams):
    left, right = streams
    left.close()
    with pytest.raises(EOFError):
        right.read()


def test_seqpacket_keeps_packet_boundaries():
    a, b = socket.socketpair(socket.AF_UNIX, socket.SOCK_DGRAM)
    with SeqPacketType(sock=a) as left, SeqPacketType(sock=b) as right:
        assert left.write(b"first") == 5
        assert left.write(b"second") == 6
        assert right.read() == b"first"
        assert right.read() == b"second"


def test_seqpacket_read_nothing_available():
    a, b = socket.socketpair(socket.AF_UNIX, socket.SOCK_DGRAM)
    with SeqPacketType(sock=a), SeqPacketType(sock=b) as right:
        right.non_blocking = True
        assert right.read() == b""


def test_stateful_type_is_abstract():
    with pytest.raises(TypeError):
        StatefulType()


def test_listen_with_default_backlog_accepts_connection():
    assert DEFAULT_LISTEN_BACKLOG == 5
    with _TCP() as server:
        address = server.bind_loopback()
        StatefulType.listen(server, DEFAULT_LISTEN_BACKLOG)
        client = socket.create_connection(address)
        try:
            conn, _ = server._sock.accept()
            with StreamType(sock=conn) as wrapped:
                client.sendall(b"hi")
                assert wrapped.read() == b"hi"
        finally:
            client.close()


def test_listen_accept_and_talk():
    with _TCP() as server:
        address = server.bind_loopback()
        StatefulType.listen(server)
        client = socket.create_connection(address)
        try:
            with server.accept() as conn:
                assert StreamType.write(conn, b"ping") == 4
                assert client.recv(16) == b"ping"
                client.sendall(b"pong")
                assert StreamType.read(conn) == b"pong"
        finally:
            client.close()


def test_listen_on_datagram_socket_fails():
    with _TCP(kind=socket.SOCK_DGRAM) as sock:
        sock.bind_loopback()
        with pytest.raises(OSError):
            StatefulType.listen(sock)


@pytest.mark.parametrize("toggle", [True, False])
def test_keep_alive_round_trip(toggle):
    with _TCP() as sock:
        StatefulType.keep_alive.fset(sock, toggle)
        assert StatefulType.keep_alive.fget(sock) is toggle
        raw = sock._sock.getsockopt(socket.SOL_SOCKET, socket.SO_KEEPALIVE)
        assert bool(raw) is toggle