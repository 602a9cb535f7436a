class RedisError(Exception):
    """Base class for every error raised by the client."""


class TransportError(RedisError, ConnectionError):
    """The underlying stream failed or was closed by the server."""


class RedisTimeoutError(RedisError, TimeoutError):
    """An exchange did not complete before its deadline."""


class ProtocolError(RedisError):
    """The server sent something that is not a well-formed reply."""


class CodecError(RedisError):
    """A stored value could not be decoded as requested."""


class ServerError(RedisError):
    """The server answered with an error line."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class SentinelError(RedisError):
    """A command returned one of its negative integer error codes."""

    def __init__(self, kind, command, code, message=None):
        super().__init__(message or f"{command}: {kind.value}")
        self.kind = kind
        self.command = command
        self.code = code
