import logging

from .codec import ValueCodec, ValueKind
from .commands import lookup
from .connection import Connection
from .encoder import encode_command
from .errors import ServerError
from .executor import DEFAULT_RETRIES, DEFAULT_TIMEOUT, Executor
from .keys import KeyCommands
from .lists import ListCommands
from .reply import Bulk, Error, Integer, MultiBulk, Status, read_reply
from .server import ServerCommands
from .sets import SetCommands
from .strings import StringCommands

logger = logging.getLogger(__name__)

_NO_PAYLOAD = object()


class Redis(StringCommands, KeyCommands, ListCommands, SetCommands, ServerCommands):
    """Client for one server, owning one connection. Not safe to share between threads."""

    def __init__(self, host="localhost", port=6379, timeout=DEFAULT_TIMEOUT,
                 retries=DEFAULT_RETRIES, encoding="utf-8", connect_timeout=None,
                 lazy=True, connection=None):
        self.connection = connection or Connection(host, port, connect_timeout=connect_timeout)
        self.executor = Executor(timeout=timeout, retries=retries)
        self.codec = ValueCodec(encoding)
        if not lazy:
            self.connection.connect()

    @property
    def host(self):
        return self.connection.host

    @property
    def port(self):
        return self.connection.port

    def __str__(self):
        return str(self.connection)

    def __repr__(self):
        return f"<Redis {self}>"

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def connect(self):
        self.connection.connect()
        return self

    def close(self):
        self.connection.close()

    def reconnect(self):
        self.connection.reconnect()

    def execute(self, name, *args, payload=_NO_PAYLOAD, as_=ValueKind.AUTO, subject=None):
        """
        Send one command and return its interpreted reply.

        Status replies come back as their text, integers after sentinel mapping,
        bulk values decoded with ``as_`` and multi-bulk values as a list of decoded
        items. ``None`` stands for an absent bulk or multi-bulk value.
        """
        spec = lookup(name)
        data = None if payload is _NO_PAYLOAD else self.codec.encode(payload)
        wire = encode_command(spec.name, *args, payload=data)

        def exchange():
            self.connection.write(wire)
            return read_reply(self.connection, spec.shape)

        reply = self.executor.run(self.connection, exchange,
                                  idempotent=spec.idempotent, label=spec.name)
        logger.debug("< %r", reply)
        return self._interpret(spec, reply, as_, subject)

    def _interpret(self, spec, reply, as_, subject):
        if isinstance(reply, Error):
            raise ServerError(reply.text)
        if isinstance(reply, Status):
            return reply.text
        if isinstance(reply, Integer):
            return spec.sentinels.check(reply.value, subject)
        if isinstance(reply, Bulk):
            return self.codec.decode(reply.data, as_)
        if isinstance(reply, MultiBulk):
            if reply.items is None:
                return None
            return [self.codec.decode(item, as_) for item in reply.items]
        raise TypeError(f"unexpected reply {reply!r}")


def connect(host="localhost", port=6379, **kwargs):
    """Create a client and open its connection."""
    return Redis(host, port, lazy=False, **kwargs)
