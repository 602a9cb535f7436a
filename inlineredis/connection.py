import logging
import socket
import time
from contextlib import contextmanager

from .errors import RedisTimeoutError, TransportError

logger = logging.getLogger(__name__)

CRLF = b"\r\n"
RECV_SIZE = 65536


class Connection:
    """
    A single TCP stream to the server.

    Reads are buffered here rather than through ``socket.makefile`` because a
    file object refuses further reads once a timeout has fired on it, and the
    retry path needs to keep using the same stream.
    """

    def __init__(self, host="localhost", port=6379, connect_timeout=None):
        self.host = host
        self.port = port
        self.connect_timeout = connect_timeout
        self.sock = None
        self._buffer = bytearray()
        self._deadline = None

    @classmethod
    def from_socket(cls, sock, host="localhost", port=6379):
        """Wrap an already connected socket."""
        conn = cls(host, port)
        conn.sock = sock
        return conn

    def __str__(self):
        return f"{self.host}:{self.port}"

    @property
    def connected(self):
        return self.sock is not None

    def connect(self):
        if self.sock is not None:
            return
        try:
            sock = socket.create_connection((self.host, self.port), timeout=self.connect_timeout)
        except socket.timeout as e:
            raise RedisTimeoutError(f"timed out connecting to {self}") from e
        except OSError as e:
            raise TransportError(f"cannot connect to {self}: {e}") from e
        sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
        self.sock = sock
        logger.debug("connected to %s", self)

    def close(self):
        if self.sock is None:
            return
        try:
            self.sock.close()
        finally:
            self.sock = None
            self._buffer.clear()
            logger.debug("closed connection to %s", self)

    def reconnect(self):
        self.close()
        self.connect()

    @contextmanager
    def deadline(self, seconds):
        """Bound every read and write inside the block by ``seconds`` in total."""
        previous = self._deadline
        self._deadline = None if seconds is None else time.monotonic() + seconds
        try:
            yield
        finally:
            self._deadline = previous

    def _arm(self):
        if self._deadline is None:
            self.sock.settimeout(None)
            return
        remaining = self._deadline - time.monotonic()
        if remaining <= 0:
            raise RedisTimeoutError(f"deadline exceeded talking to {self}")
        self.sock.settimeout(remaining)

    def write(self, data):
        if self.sock is None:
            self.connect()
        logger.debug("> %r", data)
        self._arm()
        try:
            self.sock.sendall(data)
        except socket.timeout as e:
            raise RedisTimeoutError(f"timed out writing to {self}") from e
        except OSError as e:
            raise TransportError(f"error writing to {self}: {e}") from e

    def _fill(self):
        if self.sock is None:
            raise TransportError(f"not connected to {self}")
        self._arm()
        try:
            chunk = self.sock.recv(RECV_SIZE)
        except socket.timeout as e:
            raise RedisTimeoutError(f"timed out reading from {self}") from e
        except OSError as e:
            raise TransportError(f"error reading from {self}: {e}") from e
        if not chunk:
            raise TransportError(f"connection closed by {self}")
        self._buffer.extend(chunk)

    def read_line(self):
        """Return the next line without its CRLF."""
        while True:
            i = self._buffer.find(CRLF)
            if i >= 0:
                line = bytes(self._buffer[:i])
                del self._buffer[:i + 2]
                return line
            self._fill()

    def read_exact(self, n):
        while len(self._buffer) < n:
            self._fill()
        data = bytes(self._buffer[:n])
        del self._buffer[:n]
        return data
