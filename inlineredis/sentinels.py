"""
Command-local error codes carried on the integer reply channel.

Some commands answer with a small negative integer instead of an error line when
the request cannot be honoured. The codes mean different things for different
commands, so each command declares its own table.
"""
import enum
from dataclasses import dataclass
from typing import Any, Optional

from .errors import SentinelError


class ErrorKind(enum.Enum):
    NO_SUCH_KEY = "source key does not exist"
    WRONG_TYPE = "key holds a value of the wrong type"
    SAME_OBJECT = "source and destination are the same"
    OUT_OF_RANGE = "index out of range"


@dataclass(frozen=True)
class Outcome:
    """Either a plain result or the error kind a sentinel stood for."""
    value: Any = None
    error: Optional[ErrorKind] = None

    @property
    def ok(self):
        return self.error is None


class SentinelTable:
    def __init__(self, command, codes=None):
        self.command = command
        self.codes = dict(codes or {})
        for code in self.codes:
            if code >= 0:
                raise ValueError(f"{command}: sentinel codes must be negative, got {code}")

    def __contains__(self, value):
        return value in self.codes

    def outcome(self, value):
        kind = self.codes.get(value)
        if kind is None:
            return Outcome(value=value)
        return Outcome(error=kind)

    def check(self, value, subject=None):
        """Return ``value`` unchanged, or raise if it is one of the error codes."""
        kind = self.codes.get(value)
        if kind is None:
            return value
        message = f"{self.command}: {kind.value}"
        if subject is not None:
            message = f"{message} ({subject})"
        raise SentinelError(kind, self.command, value, message)


NO_SENTINELS = SentinelTable("")

WRONG_TYPE_ONLY = {-2: ErrorKind.WRONG_TYPE}

TABLES = {
    "RENAMENX": SentinelTable("RENAMENX", {-1: ErrorKind.NO_SUCH_KEY, -3: ErrorKind.SAME_OBJECT}),
    "MOVE": SentinelTable("MOVE", {-3: ErrorKind.SAME_OBJECT, -4: ErrorKind.OUT_OF_RANGE}),
    "LLEN": SentinelTable("LLEN", WRONG_TYPE_ONLY),
    "LREM": SentinelTable("LREM", {-1: ErrorKind.NO_SUCH_KEY, -2: ErrorKind.WRONG_TYPE}),
    "SADD": SentinelTable("SADD", WRONG_TYPE_ONLY),
    "SREM": SentinelTable("SREM", WRONG_TYPE_ONLY),
    "SISMEMBER": SentinelTable("SISMEMBER", WRONG_TYPE_ONLY),
    "SCARD": SentinelTable("SCARD", WRONG_TYPE_ONLY),
}


def table_for(command):
    return TABLES.get(command.upper(), NO_SENTINELS)
