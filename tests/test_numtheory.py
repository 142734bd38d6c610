import pytest

from aoc2019.numtheory import gcd, inverse_mod, lcm

PAIRS = [(12, 18), (7, 13), (100, 75), (10007, 2019), (1, 1), (48, 180)]


def test_gcd_pinned_value():
    assert gcd(12, 18) == 6


@pytest.mark.parametrize("a,b", PAIRS)
def test_gcd_divides_both(a, b):
    g = gcd(a, b)
    assert a % g == 0
    assert b % g == 0
    assert gcd(a // g, b // g) == 1


@pytest.mark.parametrize("a", [1, 5, 120, 10007])
def test_gcd_with_zero(a):
    assert gcd(a, 0) == a
    assert gcd(0, a) == a


def test_gcd_of_distinct_primes_is_one():
    assert gcd(10007, 2019) == 1


@pytest.mark.parametrize("a,b", PAIRS)
def test_lcm_times_gcd_is_product(a, b):
    assert lcm(a, b) * gcd(a, b) == a * b
    assert lcm(a, b) % a == 0
    assert lcm(a, b) % b == 0


def test_lcm_of_zeros():
    assert lcm(0, 0) == 0


@pytest.mark.parametrize("a,n", [(3, 10007), (2019, 10007), (17, 3120), (5, 7)])
def test_inverse_mod_is_inverse(a, n):
    x = inverse_mod(a, n)
    assert 0 <= x < n
    assert (a * x) % n == 1


def test_inverse_mod_negative_argument():
    x = inverse_mod(-3, 10007)
    assert (-3 * x) % 10007 == 1


def test_inverse_mod_requires_coprime():
    with pytest.raises(ValueError):
        inverse_mod(4, 8)