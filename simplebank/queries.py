"""SQL queries over the bank's accounts, entries and transfers."""

from __future__ import annotations

import sqlite3
from typing import Any, Callable, Sequence, TypeVar

from simplebank.models import Account, Entry, Transfer

T = TypeVar("T")

_NOW = "(strftime('%Y-%m-%dT%H:%M:%f+00:00', 'now'))"

SCHEMA = f"""
CREATE TABLE IF NOT EXISTS accounts (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    owner TEXT NOT NULL,
    balance INTEGER NOT NULL,
    currency TEXT NOT NULL,
    created_at TEXT NOT NULL DEFAULT {_NOW}
);
CREATE TABLE IF NOT EXISTS entries (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    account_id INTEGER NOT NULL REFERENCES accounts (id),
    amount INTEGER NOT NULL,
    created_at TEXT NOT NULL DEFAULT {_NOW}
);
CREATE TABLE IF NOT EXISTS transfers (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    from_account_id INTEGER NOT NULL REFERENCES accounts (id),
    to_account_id INTEGER NOT NULL REFERENCES accounts (id),
    amount INTEGER NOT NULL,
    created_at TEXT NOT NULL DEFAULT {_NOW}
);
CREATE INDEX IF NOT EXISTS accounts_owner_idx ON accounts (owner);
CREATE INDEX IF NOT EXISTS entries_account_id_idx ON entries (account_id);
CREATE INDEX IF NOT EXISTS transfers_from_account_id_idx ON transfers (from_account_id);
CREATE INDEX IF NOT EXISTS transfers_to_account_id_idx ON transfers (to_account_id);
"""

_ACCOUNT_COLUMNS = "id, owner, balance, currency, created_at"
_ENTRY_COLUMNS = "id, account_id, amount, created_at"
_TRANSFER_COLUMNS = "id, from_account_id, to_account_id, amount, created_at"


class NoRowsError(LookupError):
    """Raised when a query that must return one row finds none."""

    def __init__(self, message: str = "no rows in result set") -> None:
        super().__init__(message)


def create_schema(conn: sqlite3.Connection) -> None:
    """Create the bank's tables and indexes if they do not exist yet."""
    conn.execute("PRAGMA foreign_keys = ON")
    conn.executescript(SCHEMA)


class Queries:
    """Typed queries over one database connection.

    The connection is expected in autocommit mode (``isolation_level=None``),
    so that callers decide where transactions begin and end.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def _one(self, sql: str, params: Sequence[Any], build: Callable[[Sequence[Any]], T]) -> T:
        row = self.conn.execute(sql, params).fetchone()
        if row is None:
            raise NoRowsError()
        return build(row)

    def _many(self, sql: str, params: Sequence[Any], build: Callable[[Sequence[Any]], T]) -> list[T]:
        return [build(row) for row in self.conn.execute(sql, params)]

    # Accounts

    def create_account(self, owner: str, balance: int, currency: str) -> Account:
        """Insert a new account and return it."""
        cursor = self.conn.execute(
            "INSERT INTO accounts (owner, balance, currency) VALUES (?, ?, ?)",
            (owner, balance, currency),
        )
        return self.get_account(cursor.lastrowid)

    def get_account(self, account_id: int) -> Account:
        """Return the account with the given id."""
        return self._one(
            f"SELECT {_ACCOUNT_COLUMNS} FROM accounts WHERE id = ? LIMIT 1",
            (account_id,),
            Account.from_row,
        )

    def get_account_for_update(self, account_id: int) -> Account:
        """Return the account with the given id, for a change within a transaction.

        SQLite locks the whole database for writing transactions, so no row lock is taken.
        """
        return self.get_account(account_id)

    def list_accounts(self, limit: int, offset: int) -> list[Account]:
        """Return up to ``limit`` accounts ordered by id, skipping ``offset``."""
        return self._many(
            f"SELECT {_ACCOUNT_COLUMNS} FROM accounts ORDER BY id LIMIT ? OFFSET ?",
            (limit, offset),
            Account.from_row,
        )

    def update_account(self, account_id: int, balance: int) -> Account:
        """Set an account's balance and return the updated account."""
        cursor = self.conn.execute(
            "UPDATE accounts SET balance = ? WHERE id = ?", (balance, account_id)
        )
        if cursor.rowcount == 0:
            raise NoRowsError()
        return self.get_account(account_id)

    def add_account_balance(self, account_id: int, amount: int) -> Account:
        """Add ``amount`` to an account's balance and return the updated account."""
        cursor = self.conn.execute(
            "UPDATE accounts SET balance = balance + ? WHERE id = ?", (amount, account_id)
        )
        if cursor.rowcount == 0:
            raise NoRowsError()
        return self.get_account(account_id)

    def delete_account(self, account_id: int) -> None:
        """Delete the account with the given id; a missing account is not an error."""
        self.conn.execute("DELETE FROM accounts WHERE id = ?", (account_id,))

    # Entries

    def create_entry(self, account_id: int, amount: int) -> Entry:
        """Insert a balance entry for an account and return it."""
        cursor = self.conn.execute(
            "INSERT INTO entries (account_id, amount) VALUES (?, ?)", (account_id, amount)
        )
        return self.get_entry(cursor.lastrowid)

    def get_entry(self, entry_id: int) -> Entry:
        """Return the entry with the given id."""
        return self._one(
            f"SELECT {_ENTRY_COLUMNS} FROM entries WHERE id = ? LIMIT 1",
            (entry_id,),
            Entry.from_row,
        )

    def list_entries(self, account_id: int, limit: int, offset: int) -> list[Entry]:
        """Return an account's entries ordered by id, paged by limit and offset."""
        return self._many(
            f"SELECT {_ENTRY_COLUMNS} FROM entries WHERE account_id = ? "
            "ORDER BY id LIMIT ? OFFSET ?",
            (account_id, limit, offset),
            Entry.from_row,
        )

    # Transfers

    def create_transfer(self, from_account_id: int, to_account_id: int, amount: int) -> Transfer:
        """Insert a transfer record and return it."""
        cursor = self.conn.execute(
            "INSERT INTO transfers (from_account_id, to_account_id, amount) VALUES (?, ?, ?)",
            (from_account_id, to_account_id, amount),
        )
        return self.get_transfer(cursor.lastrowid)

    def get_transfer(self, transfer_id: int) -> Transfer:
        """Return the transfer with the given id."""
        return self._one(
            f"SELECT {_TRANSFER_COLUMNS} FROM transfers WHERE id = ? LIMIT 1",
            (transfer_id,),
            Transfer.from_row,
        )

    def list_transfers(
        self, from_account_id: int, to_account_id: int, limit: int, offset: int
    ) -> list[Transfer]:
        """Return transfers sent from the first account or received by the second."""
        return self._many(
            f"SELECT {_TRANSFER_COLUMNS} FROM transfers "
            "WHERE from_account_id = ? OR to_account_id = ? "
            "ORDER BY id LIMIT ? OFFSET ?",
            (from_account_id, to_account_id, limit, offset),
            Transfer.from_row,
        )