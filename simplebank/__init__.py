"""A small banking ledger of accounts, entries and transfers on SQLite."""

__version__ = "0.1.0"
__all__ = ["models", "queries", "randomdata", "store"]