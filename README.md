# aissock

Small object-oriented wrappers around BSD sockets, plus a few string helpers
that network daemons tend to need. There are no third-party dependencies.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Sockets

Every socket class derives from `aissock.base.Socket`, which owns the
underlying `socket.socket` and offers:

- `fileno()`, `close()` and use as a context manager;
- the `non_blocking` property;
- `set_option_int()` / `get_option_int()` and `set_option_flag()` /
  `get_option_flag()` for socket options;
- the `linger` property (seconds, 0 when off; setting 0 or less turns it off);
- the class attribute `read_block_size` (1024 bytes by default).

`aissock.base.get_protocol(name)` returns the protocol number for a name
such as `"tcp"`.

Transport types live in `aissock.transport`:

- `StreamType` and `SeqPacketType` with `write(data)` (text is sent as UTF-8;
  a partial write raises `OSError`) and `read()` (returns up to
  `read_block_size` bytes, `b""` when a non-blocking socket has nothing yet,
  and raises `EOFError` when the peer has closed);
- `StatefulType` with `listen(backlog=5)`, the `keep_alive` property and an
  abstract `accept()`.

Address domains:

- `aissock.inet.DomainIPv4` and `DomainIPv6`: `set_local_address()`,
  `set_remote_address()` (a string, an `ipaddress` object, or a sockaddr
  tuple), `set_local_port()`, `set_remote_port()` (0..65534), and the
  properties `local_address`, `remote_address`, `local_port`, `remote_port`;
  `bind()` and `connect()`. `DomainIPv4` also has the `maximum_hop_count`
  property (settable from -1 to 255).
- `aissock.local.DomainUNIX`: paths of at most `UNIX_PATH_MAX` (108) bytes,
  `local_address` / `remote_address` properties, `bind()`, `connect()`. A
  path the socket bound is removed from the filesystem on `close()`.
- `aissock.ipx.DomainIPX`: endpoints are `IPXAddress(network, node, port)`
  values whose `str()` is the `network:node` form (see also
  `format_ipx_address()`). Ports must lie in 1..65534.

The ready-made combinations live in `aissock.connections`:
`SocketIPv4TCP`, `SocketIPv6TCP`, `SocketUNIX` and `SocketIPXSPX`. Their
`accept()` returns a new socket of the same class that shares the listener's
local endpoint and `read_block_size`. `available_socket_types()` returns the
classes the running system can actually create.

A listening TCP server:

```python
from aissock.connections import SocketIPv4TCP

with SocketIPv4TCP() as server:
    server.set_local_address("127.0.0.1")
    server.set_local_port(6667)
    server.bind()
    server.listen(5)
    client = server.accept()
    print(client.remote_address, client.remote_port)
    client.write("hello\r\n")
    client.close()
```

Failures raise `OSError` (or `ValueError` for bad addresses and out-of-range
ports) instead of returning status flags.

## Strings

`aissock.text` holds `to_lower`, `to_upper`, `prepad(text, width, fill=" ")`,
`trim`, `trim_quotes`, lenient `to_int` / `to_long` / `to_double`
conversions (they parse a leading number and return 0 rather than raising),
and `string_hash`.

`aissock.mask.StringMask` matches strings against `*` and `?` wildcards
(the default mask `*` matches everything):

```python
from aissock.mask import StringMask

mask = StringMask("*!*@example.com")
mask.matches("Nick!user@EXAMPLE.com")       # True, case-insensitive
mask.matches_case("Nick!user@EXAMPLE.com")  # False
```

`aissock.tokens.StringTokens` splits a line into tokens, including
IRC-style trailing `:` parameters:

```python
from aissock.tokens import StringTokens

line = StringTokens("PRIVMSG #chan :hello there")
line.next_token()        # "PRIVMSG"
line.next_token()        # "#chan"
line.next_colon_token()  # "hello there"
```

It also offers `has_more_tokens()`, `count_tokens(delimiter=None)`,
`rest()` and iteration over the remaining tokens.

## What it does not do

This is a library only: it has no command-line program, no event loop or
server framework, and no buffering of lines across reads. IPX addresses
cannot be set from text, and IPX sockets work only where the operating
system still supports that family.