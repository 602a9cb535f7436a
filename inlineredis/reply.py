"""
Reply model and reader.

A reply starts with one line. ``+`` marks a status and ``-`` an error. Any other
line is a signed integer whose meaning depends on the command that was sent: the
value itself, the length of a bulk payload, or the number of bulk blocks that
follow. ``-1`` as a length or count means the value is absent.
"""
import enum
from dataclasses import dataclass
from typing import List, Optional

from .errors import ProtocolError

CRLF = b"\r\n"


class ReplyShape(enum.Enum):
    STATUS = "status"
    INTEGER = "integer"
    BULK = "bulk"
    MULTI_BULK = "multi_bulk"


@dataclass(frozen=True)
class Status:
    text: str


@dataclass(frozen=True)
class Integer:
    value: int


@dataclass(frozen=True)
class Bulk:
    data: Optional[bytes]


@dataclass(frozen=True)
class MultiBulk:
    items: Optional[List[Optional[bytes]]]


@dataclass(frozen=True)
class Error:
    text: str


def _parse_int(line):
    try:
        return int(line)
    except ValueError:
        raise ProtocolError(f"expected an integer line, got {line!r}") from None


def _read_bulk(connection, length):
    if length == -1:
        return None
    if length < 0:
        raise ProtocolError(f"invalid bulk length {length}")
    data = connection.read_exact(length + 2)
    if data[-2:] != CRLF:
        raise ProtocolError("bulk payload not terminated by CRLF")
    return data[:-2]


def read_reply(connection, shape):
    """Read one reply for a command that expects ``shape``."""
    line = connection.read_line()
    prefix = line[0:1]

    if prefix == b"+":
        return Status(line[1:].decode("utf-8", errors="replace"))
    # "-" followed only by digits is a negative integer, not an error
    if prefix == b"-" and not line[1:].isdigit():
        return Error(line[1:].decode("utf-8", errors="replace"))

    if shape is ReplyShape.STATUS:
        if prefix == b"-":
            return Error(line[1:].decode("utf-8", errors="replace"))
        return Status(line.decode("utf-8", errors="replace"))

    n = _parse_int(line)
    if shape is ReplyShape.INTEGER:
        return Integer(n)
    if shape is ReplyShape.BULK:
        return Bulk(_read_bulk(connection, n))
    if shape is ReplyShape.MULTI_BULK:
        if n == -1:
            return MultiBulk(None)
        if n < 0:
            raise ProtocolError(f"invalid multi-bulk count {n}")
        items = []
        for _ in range(n):
            items.append(_read_bulk(connection, _parse_int(connection.read_line())))
        return MultiBulk(items)
    raise ValueError(f"unknown reply shape: {shape!r}")
