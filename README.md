# simplebank

A small banking ledger built on the standard library's `sqlite3`. It keeps
three tables:

- **accounts**: an owner, a balance and a currency;
- **entries**: every change to an account's balance (negative or positive);
- **transfers**: money moved from one account to another.

A transfer is recorded as one transfer row, two entries and two balance
updates, all inside a single database transaction.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

Open the connection in autocommit mode (`isolation_level=None`), so that
transactions begin and end only where the store says.

```python
import sqlite3

from simplebank.queries import Queries, NoRowsError, create_schema
from simplebank.store import Store

conn = sqlite3.connect(":memory:", isolation_level=None)
create_schema(conn)

queries = Queries(conn)
alice = queries.create_account("alice", 100, "EUR")
bob = queries.create_account("bob", 50, "EUR")

store = Store(conn)
result = store.transfer_tx(alice.id, bob.id, 10)

print(result.from_account.balance)  # 90
print(result.to_account.balance)    # 60
print(result.from_entry.amount)     # -10
print(result.to_entry.amount)       # 10
```

### Schema

`create_schema(conn)` turns on foreign keys for the connection and creates the
`accounts`, `entries` and `transfers` tables and their indexes if they do not
exist yet. Each row gets a `created_at` timestamp in UTC when it is inserted.

### Queries

`simplebank.queries.Queries` runs single statements against a connection:

- accounts: `create_account`, `get_account`, `get_account_for_update`,
  `list_accounts`, `update_account`, `add_account_balance`, `delete_account`
- entries: `create_entry`, `get_entry`, `list_entries`
- transfers: `create_transfer`, `get_transfer`, `list_transfers`

The `list_*` methods page by `limit` and `offset` in order of id;
`list_transfers` returns transfers sent from the first account id given or
received by the second.

Getting a row that does not exist raises `NoRowsError` (a `LookupError`), and
so do `update_account` and `add_account_balance` on a missing account.
`delete_account` on a missing account does nothing. `get_account_for_update`
returns the same as `get_account`: SQLite locks the whole database for a
writing transaction, so no row lock is taken.

Rows come back as the frozen dataclasses `Account`, `Entry` and `Transfer`
from `simplebank.models`; each has a `from_row` class method that builds it
from a tuple of column values, with `created_at` as a timezone-aware
`datetime`.

### Store

`simplebank.store.Store` has the same queries plus transactions.
`Store.transaction()` is a context manager that starts an immediate
transaction and yields a `Queries` bound to it: it commits when the block
finishes and rolls back if the block raises, then raises the error again.
Transactions on one store are serialized by a lock.

`Store.transfer_tx(from_account_id, to_account_id, amount)` makes a whole
transfer atomic and returns a `TransferTxResult` holding `transfer`,
`from_account`, `to_account`, `from_entry` and `to_entry`. It updates the two
balances in ascending order of account id. It does not check balances,
currencies or the sign of the amount.

### Test data

`simplebank.randomdata` makes random values for tests and fixtures:
`random_int` (both ends included; raises `ValueError` on an empty range),
`random_string`, `random_owner` (six lowercase letters), `random_money`
(0 to 1000) and `random_currency` (one of `EUR`, `USD`, `CAD`).

## What it does not do

This is a library only: it has no command-line program, no HTTP API and no
server. Storage is SQLite through `sqlite3`; there is no support for other
databases and no migration tooling beyond `create_schema`.