import pytest

from ftls.mathutil import int_range, is_power_of, power


@pytest.mark.parametrize("n, x", [(1, 2), (8, 2), (81, 3), (1000, 10)])
def test_powers_are_recognised(n, x):
    assert is_power_of(n, x) is True


@pytest.mark.parametrize("n, x", [(0, 2), (12, 2), (10, 3), (7, 5)])
def test_non_powers_are_rejected(n, x):
    assert is_power_of(n, x) is False


def test_is_power_of_invalid_base():
    with pytest.raises(ValueError):
        is_power_of(4, 1)
    with pytest.raises(ValueError):
        is_power_of(4, 0)


def test_is_power_of_negative_n():
    with pytest.raises(ValueError):
        is_power_of(-8, 2)


def test_int_range_upwards():
    assert int_range(3, 6) == [3, 4, 5, 6]


def test_int_range_downwards():
    assert int_range(6, 3) == [6, 5, 4, 3]


def test_int_range_single():
    assert int_range(4, 4) == [4]


def test_int_range_invariants():
    values = int_range(-5, 9)
    assert values[0] == -5
    assert values[-1] == 9
    assert all(b - a == 1 for a, b in zip(values, values[1:]))


def test_power_zero_exponent():
    assert power(3.5, 0) == 1.0


@pytest.mark.parametrize("base", [2.0, 3.0, -1.5, 0.5])
def test_power_recurrence(base):
    for exponent in range(6):
        assert power(base, exponent + 1) == base * power(base, exponent)


def test_power_negative_exponent():
    with pytest.raises(ValueError):
        power(2.0, -1)