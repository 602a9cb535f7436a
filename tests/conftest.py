import socket
from contextlib import contextmanager

import pytest

from inlineredis import Connection, Redis
from inlineredis.errors import RedisTimeoutError, TransportError


class FakeConnection:
    """In-memory stand-in for Connection: replays scripted reply bytes and records writes."""

    def __init__(self, replies=b""):
        self.host = "fake"
        self.port = 0
        self.incoming = bytearray(replies)
        self.written = []
        self.connected = True
        self.deadlines = []

    def __str__(self):
        return f"{self.host}:{self.port}"

    def feed(self, data):
        self.incoming.extend(data)

    def connect(self):
        self.connected = True

    def close(self):
        self.connected = False

    def reconnect(self):
        self.close()
        self.connect()

    @contextmanager
    def deadline(self, seconds):
        self.deadlines.append(seconds)
        yield

    def write(self, data):
        self.written.append(data)

    def read_line(self):
        i = self.incoming.find(b"\r\n")
        if i < 0:
            raise TransportError("no more scripted replies")
        line = bytes(self.incoming[:i])
        del self.incoming[:i + 2]
        return line

    def read_exact(self, n):
        if len(self.incoming) < n:
            raise TransportError("no more scripted replies")
        data = bytes(self.incoming[:n])
        del self.incoming[:n]
        return data


class SilentConnection(FakeConnection):
    """Accepts writes but every read runs past the deadline."""

    def read_line(self):
        raise RedisTimeoutError("deadline exceeded")


@pytest.fixture
def fake():
    return FakeConnection()


@pytest.fixture
def client(fake):
    return Redis(connection=fake)


@pytest.fixture
def socket_pair():
    a, b = socket.socketpair()
    yield a, b
    a.close()
    b.close()


@pytest.fixture
def wired(socket_pair):
    """A real Connection over one end of a socket pair, and the peer socket."""
    ours, peer = socket_pair
    return Connection.from_socket(ours), peer
