from datetime import datetime, timedelta, timezone

import pytest

from simplebank.models import Account, Entry, Transfer

AWARE = datetime(2024, 3, 1, 12, 30, 15, 123000, tzinfo=timezone.utc)


def test_account_from_row_with_iso_string():
    account = Account.from_row((1, "alice", 100, "EUR", AWARE.isoformat()))
    assert account == Account(1, "alice", 100, "EUR", AWARE)


def test_account_from_row_with_datetime():
    account = Account.from_row((2, "bob", 0, "USD", AWARE))
    assert account.created_at == AWARE
    assert account.owner == "bob"


def test_naive_timestamp_is_taken_as_utc():
    naive = AWARE.replace(tzinfo=None)
    entry = Entry.from_row((3, 1, -10, naive.isoformat(sep=" ")))
    assert entry.created_at == AWARE
    assert entry.created_at.utcoffset() == timedelta(0)


def test_other_offset_is_kept():
    plus_two = timezone(timedelta(hours=2))
    moment = AWARE.astimezone(plus_two)
    transfer = Transfer.from_row((4, 1, 2, 10, moment.isoformat()))
    assert transfer.created_at == AWARE
    assert transfer.created_at.utcoffset() == timedelta(hours=2)


def test_entry_fields():
    entry = Entry.from_row((5, 7, -25, AWARE))
    assert (entry.id, entry.account_id, entry.amount) == (5, 7, -25)


def test_transfer_fields():
    transfer = Transfer.from_row((6, 7, 8, 25, AWARE))
    assert (transfer.id, transfer.from_account_id, transfer.to_account_id, transfer.amount) == (
        6,
        7,
        8,
        25,
    )


def test_wrong_row_length_raises():
    with pytest.raises(ValueError):
        Account.from_row((1, "alice", 100, "EUR"))


def test_bad_timestamp_type_raises():
    with pytest.raises(TypeError):
        Entry.from_row((1, 1, 1, 12345))


def test_records_are_immutable():
    account = Account.from_row((1, "alice", 100, "EUR", AWARE))
    with pytest.raises(AttributeError):
        account.balance = 5  # type: ignore[misc]
    assert account.balance == 100