"""
What the client needs to know about each command: the reply shape to parse,
the sentinel codes to map, and whether a timed-out request may be re-sent.
"""
from dataclasses import dataclass

from .reply import ReplyShape
from .sentinels import SentinelTable, table_for

STATUS = ReplyShape.STATUS
INTEGER = ReplyShape.INTEGER
BULK = ReplyShape.BULK
MULTI_BULK = ReplyShape.MULTI_BULK


@dataclass(frozen=True)
class CommandSpec:
    name: str
    shape: ReplyShape
    sentinels: SentinelTable
    idempotent: bool = True


def _spec(name, shape, idempotent=True):
    return CommandSpec(name, shape, table_for(name), idempotent)


COMMANDS = {spec.name: spec for spec in [
    # strings
    _spec("SET", STATUS),
    _spec("SETNX", INTEGER, idempotent=False),
    _spec("GET", BULK),
    _spec("INCR", INTEGER, idempotent=False),
    _spec("INCRBY", INTEGER, idempotent=False),
    _spec("DECR", INTEGER, idempotent=False),
    _spec("DECRBY", INTEGER, idempotent=False),
    # keys
    _spec("EXISTS", INTEGER),
    _spec("DEL", INTEGER, idempotent=False),
    _spec("KEYS", BULK),
    _spec("TYPE", STATUS),
    _spec("RANDOMKEY", STATUS),
    _spec("RENAME", STATUS, idempotent=False),
    _spec("RENAMENX", INTEGER, idempotent=False),
    # lists
    _spec("RPUSH", STATUS, idempotent=False),
    _spec("LPUSH", STATUS, idempotent=False),
    _spec("LPOP", BULK, idempotent=False),
    _spec("RPOP", BULK, idempotent=False),
    _spec("LSET", STATUS),
    _spec("LLEN", INTEGER),
    _spec("LRANGE", MULTI_BULK),
    _spec("LTRIM", STATUS),
    _spec("LINDEX", BULK),
    _spec("LREM", INTEGER, idempotent=False),
    # sets
    _spec("SADD", INTEGER),
    _spec("SREM", INTEGER),
    _spec("SCARD", INTEGER),
    _spec("SISMEMBER", INTEGER),
    _spec("SINTER", MULTI_BULK),
    _spec("SINTERSTORE", STATUS),
    _spec("SMEMBERS", MULTI_BULK),
    # server
    _spec("SORT", MULTI_BULK),
    _spec("SELECT", STATUS),
    _spec("MOVE", INTEGER, idempotent=False),
    _spec("SAVE", STATUS),
    _spec("BGSAVE", STATUS),
    _spec("LASTSAVE", INTEGER),
    _spec("FLUSHDB", STATUS),
    _spec("INFO", BULK),
]}


def lookup(name):
    try:
        return COMMANDS[name.upper()]
    except KeyError:
        raise ValueError(f"unknown command: {name}") from None
