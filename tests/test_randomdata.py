import pytest

from simplebank import randomdata


@pytest.mark.parametrize("bounds", [(0, 0), (-5, 5), (10, 20), (7, 8)])
def test_random_int_within_bounds(bounds):
    low, high = bounds
    for _ in range(200):
        value = randomdata.random_int(low, high)
        assert low <= value <= high


def test_random_int_single_value_range():
    assert randomdata.random_int(42, 42) == 42


def test_random_int_reaches_both_ends():
    seen = {randomdata.random_int(0, 1) for _ in range(500)}
    assert seen == {0, 1}


def test_random_int_empty_range_raises():
    with pytest.raises(ValueError):
        randomdata.random_int(5, 3)


@pytest.mark.parametrize("length", [0, 1, 6, 50])
def test_random_string_length_and_alphabet(length):
    value = randomdata.random_string(length)
    assert len(value) == length
    assert set(value) <= set(randomdata.ALPHABET)


def test_random_string_negative_length_is_empty():
    assert randomdata.random_string(-3) == ""


def test_random_owner_shape():
    owner = randomdata.random_owner()
    assert len(owner) == 6
    assert owner.islower() and owner.isalpha()


def test_random_money_range():
    for _ in range(200):
        assert 0 <= randomdata.random_money() <= 1000


def test_random_currency_is_supported():
    seen = {randomdata.random_currency() for _ in range(300)}
    assert seen <= {"EUR", "USD", "CAD"}
    assert len(seen) > 1