import pytest

from inlineredis.errors import RedisTimeoutError, TransportError
from inlineredis.executor import Executor
from inlineredis.reply import ReplyShape, Status, read_reply

from .conftest import FakeConnection, SilentConnection


def exchange_on(conn, wire=b"GET foo\r\n", shape=ReplyShape.BULK):
    def exchange():
        conn.write(wire)
        return read_reply(conn, shape)
    return exchange


def test_gives_up_after_initial_attempt_and_three_retries():
    conn = SilentConnection()
    with pytest.raises(RedisTimeoutError):
        Executor(timeout=0.5, retries=3).run(conn, exchange_on(conn))
    assert conn.written == [b"GET foo\r\n"] * 4
    assert conn.deadlines == [0.5] * 4


def test_non_idempotent_exchange_is_not_retried():
    conn = SilentConnection()
    with pytest.raises(RedisTimeoutError):
        Executor(retries=3).run(conn, exchange_on(conn, b"INCR n\r\n"), idempotent=False)
    assert conn.written == [b"INCR n\r\n"]


def test_succeeds_once_a_retry_gets_through():
    conn = FakeConnection(b"+OK\r\n")
    attempts = []

    def exchange():
        attempts.append(1)
        if len(attempts) < 3:
            raise RedisTimeoutError("slow")
        return read_reply(conn, ReplyShape.STATUS)

    assert Executor(retries=3).run(conn, exchange) == Status("OK")
    assert len(attempts) == 3


def test_transport_errors_are_not_retried():
    conn = FakeConnection()
    with pytest.raises(TransportError):
        Executor(retries=3).run(conn, exchange_on(conn))
    assert len(conn.written) == 1


def test_negative_retry_budget_rejected():
    with pytest.raises(ValueError):
        Executor(retries=-1)


def test_real_socket_deadline(wired):
    conn, peer = wired
    with pytest.raises(RedisTimeoutError):
        Executor(timeout=0.05, retries=1).run(conn, exchange_on(conn))

    peer.settimeout(1)
    received = b""
    while len(received) < 18:
        received += peer.recv(64)
    assert received == b"GET foo\r\nGET foo\r\n"


def test_connection_usable_after_timeout(wired):
    conn, peer = wired
    executor = Executor(timeout=0.05, retries=0)
    with pytest.raises(RedisTimeoutError):
        executor.run(conn, exchange_on(conn))
    peer.sendall(b"3\r\nbar\r\n")
    assert executor.run(conn, lambda: read_reply(conn, ReplyShape.BULK)).data == b"bar"


def test_late_reply_is_read_by_the_next_exchange_until_reconnect(wired):
    conn, peer = wired
    executor = Executor(timeout=0.05, retries=0)
    with pytest.raises(RedisTimeoutError):
        executor.run(conn, exchange_on(conn))
    # the reply to the timed-out GET turns up late
    peer.sendall(b"3\r\nbar\r\n1\r\n")
    stale = executor.run(conn, lambda: read_reply(conn, ReplyShape.INTEGER))
    assert stale.value == 3

    conn.close()
    assert not conn.connected
