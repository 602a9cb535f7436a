from .client import Redis, connect
from .codec import MARKER, ValueCodec, ValueKind
from .commands import COMMANDS, CommandSpec
from .connection import Connection
from .encoder import Command, encode_command
from .errors import RedisError, TransportError, RedisTimeoutError, ProtocolError, CodecError, ServerError, SentinelError
from .executor import Executor
from .reply import ReplyShape, Status, Integer, Bulk, MultiBulk, Error, read_reply
from .sentinels import ErrorKind, Outcome, SentinelTable
