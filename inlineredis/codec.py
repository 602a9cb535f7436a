"""
Conversion between application values and the bytes stored on the server.

Strings, bytes and integers are stored as-is so other clients can read them.
Anything else is packed with msgpack and prefixed with ``MARKER`` so it can be
told apart on the way back. Dicts may have any hashable keys and tuples are
carried as an extension type, so both come back as they went in.

Telling the two apart by sniffing the first byte is ambiguous: a raw value that
happens to start with ``MARKER`` looks structured. ``ValueKind.AUTO`` keeps that
behaviour for compatibility; pass an explicit kind when the stored type is known.
"""
import enum
import logging

import msgpack

from .errors import CodecError

logger = logging.getLogger(__name__)

MARKER = b"\x00"

# msgpack extension type carrying a tuple, so tuples do not come back as lists
TUPLE_EXT = 1


def _default(obj):
    # strict_types sends subclasses here too; store them as their base type
    if isinstance(obj, tuple):
        return msgpack.ExtType(TUPLE_EXT, _pack(list(obj)))
    if isinstance(obj, dict):
        return dict(obj)
    if isinstance(obj, list):
        return list(obj)
    if isinstance(obj, str):
        return str(obj)
    if isinstance(obj, bytes):
        return bytes(obj)
    if isinstance(obj, int):
        return int(obj)
    if isinstance(obj, float):
        return float(obj)
    raise TypeError(f"cannot serialize {type(obj).__name__}")


def _ext_hook(code, data):
    if code == TUPLE_EXT:
        return tuple(_unpack(data))
    return msgpack.ExtType(code, data)


def _pack(value):
    return msgpack.packb(value, use_bin_type=True, strict_types=True, default=_default)


def _unpack(data):
    return msgpack.unpackb(data, raw=False, strict_map_key=False, ext_hook=_ext_hook)


class ValueKind(enum.Enum):
    AUTO = "auto"
    TEXT = "text"
    BYTES = "bytes"
    STRUCTURED = "structured"


class ValueCodec:
    def __init__(self, encoding="utf-8"):
        self.encoding = encoding

    def encode(self, value):
        """Render a value as the bytes to store."""
        if isinstance(value, bytes):
            return value
        if isinstance(value, str):
            data = value.encode(self.encoding)
            if data.startswith(MARKER):
                logger.debug("raw value starts with the structured marker: %r", data[:16])
            return data
        # bool is an int subclass but should round-trip as a bool
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value).encode("ascii")
        try:
            return MARKER + _pack(value)
        except TypeError as e:
            raise CodecError(f"cannot store value of type {type(value).__name__}") from e

    def decode(self, data, kind=ValueKind.AUTO):
        """Turn stored bytes back into a value, ``None`` stays ``None``."""
        if data is None:
            return None
        if kind is ValueKind.BYTES:
            return data
        if kind is ValueKind.TEXT:
            try:
                return data.decode(self.encoding)
            except UnicodeDecodeError as e:
                raise CodecError(f"value is not valid {self.encoding} text: {data[:16]!r}") from e
        if kind is ValueKind.STRUCTURED:
            if not data.startswith(MARKER):
                raise CodecError(f"value is not a structured value: {data[:16]!r}")
            return self._unpack(data)

        if data.startswith(MARKER):
            try:
                return self._unpack(data)
            except CodecError:
                logger.debug("marker-prefixed value did not unpack, treating it as raw")
        try:
            return data.decode(self.encoding)
        except UnicodeDecodeError:
            return data

    def _unpack(self, data):
        try:
            return _unpack(data[len(MARKER):])
        except (ValueError, msgpack.UnpackException) as e:
            raise CodecError(f"cannot unpack structured value: {e}") from e
