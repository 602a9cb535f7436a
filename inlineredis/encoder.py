from dataclasses import dataclass
from typing import Optional, Tuple

CRLF = b"\r\n"


def _token(arg):
    if isinstance(arg, bytes):
        return arg
    return str(arg).encode("utf-8")


def encode_command(name, *args, payload=None):
    """
    Render a command in the inline wire format.

    Arguments are joined with single spaces and are not escaped, so they must not
    contain spaces, CR or LF. When a payload is given its length in bytes is
    appended as the last token and the payload follows on its own line.
    """
    tokens = [_token(name)]
    tokens.extend(_token(a) for a in args)
    if payload is None:
        return b" ".join(tokens) + CRLF
    # the declared length is in bytes, never characters
    tokens.append(str(len(payload)).encode("ascii"))
    return b" ".join(tokens) + CRLF + payload + CRLF


@dataclass(frozen=True)
class Command:
    name: str
    args: Tuple = ()
    payload: Optional[bytes] = None

    def to_bytes(self) -> bytes:
        return encode_command(self.name, *self.args, payload=self.payload)
