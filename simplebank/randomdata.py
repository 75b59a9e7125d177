"""Random values for accounts, used to populate and exercise the bank database."""

import random
import string

ALPHABET = string.ascii_lowercase
CURRENCIES = ("EUR", "USD", "CAD")


def random_int(min_value: int, max_value: int) -> int:
    """Return a random integer between min_value and max_value, both included."""
    if max_value < min_value:
        raise ValueError(
            f"empty range: min_value {min_value} is greater than max_value {max_value}"
        )
    return random.randint(min_value, max_value)


def random_string(n: int) -> str:
    """Return a random string of n lowercase letters."""
    return "".join(random.choice(ALPHABET) for _ in range(n))


def random_owner() -> str:
    """Return a random owner name."""
    return random_string(6)


def random_money() -> int:
    """Return a random amount of money."""
    return random_int(0, 1000)


def random_currency() -> str:
    """Return a random supported currency code."""
    return random.choice(CURRENCIES)