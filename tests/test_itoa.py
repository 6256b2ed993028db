import pytest

from chaosutil.itoa import itoa


def test_zero():
    assert itoa(0) == "0"


@pytest.mark.parametrize("n", [1, 9, 10, 1104, 1121, 123456789, 2**63])
def test_decimal_matches_str(n):
    assert itoa(n) == str(n)


@pytest.mark.parametrize("n", [1, 2, 255, 1104, 2**40 + 7])
def test_binary_matches_bin(n):
    assert itoa(n, 2) == bin(n)[2:]


@pytest.mark.parametrize("n", [7, 8, 64, 1121])
def test_octal_matches_oct(n):
    assert itoa(n, 8) == oct(n)[2:]


@pytest.mark.parametrize("base", [2, 3, 5, 7, 9, 10])
def test_round_trip(base):
    for n in (0, 1, 42, 1104, 99999):
        assert int(itoa(n, base), base) == n


def test_too_many_digits_gives_empty():
    assert itoa(2**300, 2) == ""


def test_exactly_256_digits_is_kept():
    n = 2**256 - 1
    assert itoa(n, 2) == bin(n)[2:]


@pytest.mark.parametrize("base", [0, 1, 11, 16])
def test_bad_base(base):
    with pytest.raises(ValueError):
        itoa(5, base)


def test_negative_rejected():
    with pytest.raises(ValueError):
        itoa(-1)