import pytest

from inlineredis.errors import SentinelError
from inlineredis.sentinels import ErrorKind, SentinelTable, table_for


@pytest.fixture
def table():
    return SentinelTable("LREM", {-1: ErrorKind.NO_SUCH_KEY, -2: ErrorKind.WRONG_TYPE})


def test_codes_raise_their_kind(table):
    with pytest.raises(SentinelError) as exc:
        table.check(-1)
    assert exc.value.kind is ErrorKind.NO_SUCH_KEY
    assert exc.value.command == "LREM"
    assert exc.value.code == -1

    with pytest.raises(SentinelError) as exc:
        table.check(-2, "mylist")
    assert exc.value.kind is ErrorKind.WRONG_TYPE
    assert "mylist" in str(exc.value)


def test_other_values_are_results(table):
    assert table.check(0) == 0
    assert table.check(1) == 1
    assert table.check(17) == 17
    assert table.check(-9) == -9


def test_outcome_is_tagged(table):
    ok = table.outcome(3)
    assert ok.ok and ok.value == 3
    failed = table.outcome(-2)
    assert not failed.ok and failed.error is ErrorKind.WRONG_TYPE


def test_codes_must_be_negative():
    with pytest.raises(ValueError):
        SentinelTable("BAD", {0: ErrorKind.WRONG_TYPE})


def test_tables_are_command_local():
    assert -1 in table_for("renamenx")
    assert -1 not in table_for("LLEN")
    assert -2 in table_for("LLEN")
    assert table_for("INCR").check(-1) == -1
