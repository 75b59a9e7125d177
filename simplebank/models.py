"""Records stored by the bank: accounts, balance entries and transfers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Sequence


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, str):
        moment = datetime.fromisoformat(value)
    else:
        raise TypeError(f"cannot read a timestamp from {value!r}")
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


@dataclass(frozen=True)
class Account:
    """A bank account holding a balance in one currency."""

    id: int
    owner: str
    balance: int
    currency: str
    created_at: datetime

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> Account:
        """Build an account from (id, owner, balance, currency, created_at)."""
        account_id, owner, balance, currency, created_at = row
        return cls(
            id=int(account_id),
            owner=str(owner),
            balance=int(balance),
            currency=str(currency),
            created_at=_parse_timestamp(created_at),
        )


@dataclass(frozen=True)
class Entry:
    """A change to one account's balance; the amount may be negative or positive."""

    id: int
    account_id: int
    amount: int
    created_at: datetime

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> Entry:
        """Build an entry from (id, account_id, amount, created_at)."""
        entry_id, account_id, amount, created_at = row
        return cls(
            id=int(entry_id),
            account_id=int(account_id),
            amount=int(amount),
            created_at=_parse_timestamp(created_at),
        )


@dataclass(frozen=True)
class Transfer:
    """A movement of money between two accounts; the amount must be positive."""

    id: int
    from_account_id: int
    to_account_id: int
    amount: int
    created_at: datetime

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> Transfer:
        """Build a transfer from (id, from_account_id, to_account_id, amount, created_at)."""
        transfer_id, from_account_id, to_account_id, amount, created_at = row
        return cls(
            id=int(transfer_id),
            from_account_id=int(from_account_id),
            to_account_id=int(to_account_id),
            amount=int(amount),
            created_at=_parse_timestamp(created_at),
        )