"""Transactions over the bank database, including money transfers between accounts."""

from __future__ import annotations

import sqlite3
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from simplebank.models import Account, Entry, Transfer
from simplebank.queries import Queries


@dataclass(frozen=True)
class TransferTxResult:
    """Everything a money transfer created or changed."""

    transfer: Transfer
    from_account: Account
    to_account: Account
    from_entry: Entry
    to_entry: Entry


class Store(Queries):
    """Queries plus transactions over one database connection.

    The connection is expected in autocommit mode (``isolation_level=None``).
    Transactions on the same store are serialized, so one store may be
    shared between threads when the connection allows it.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        super().__init__(conn)
        self._lock = threading.Lock()

    @contextmanager
    def transaction(self) -> Iterator[Queries]:
        """Run the block in a database transaction and yield queries bound to it.

        The transaction commits when the block ends normally and rolls back
        when it raises; the exception is then raised again.
        """
        with self._lock:
            self.conn.execute("BEGIN IMMEDIATE")
            try:
                yield Queries(self.conn)
            except BaseException as err:
                try:
                    self.conn.execute("ROLLBACK")
                except sqlite3.Error as rb_err:
                    raise RuntimeError(f"tx err: {err}, rb err: {rb_err}") from err
                raise
            self.conn.execute("COMMIT")

    def transfer_tx(
        self, from_account_id: int, to_account_id: int, amount: int
    ) -> TransferTxResult:
        """Move ``amount`` from one account to another in a single transaction.

        Creates the transfer record and one entry per account, then updates
        both balances, always in ascending order of account id.
        """
        with self.transaction() as q:
            transfer = q.create_transfer(from_account_id, to_account_id, amount)
            from_entry = q.create_entry(from_account_id, -amount)
            to_entry = q.create_entry(to_account_id, amount)

            if from_account_id < to_account_id:
                from_account, to_account = _add_money(
                    q, from_account_id, -amount, to_account_id, amount
                )
            else:
                to_account, from_account = _add_money(
                    q, to_account_id, amount, from_account_id, -amount
                )

        return TransferTxResult(
            transfer=transfer,
            from_account=from_account,
            to_account=to_account,
            from_entry=from_entry,
            to_entry=to_entry,
        )


def _add_money(
    q: Queries, account_id1: int, amount1: int, account_id2: int, amount2: int
) -> tuple[Account, Account]:
    account1 = q.add_account_balance(account_id1, amount1)
    account2 = q.add_account_balance(account_id2, amount2)
    return account1, account2