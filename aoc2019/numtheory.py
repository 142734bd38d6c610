"""Greatest common divisors, least common multiples and modular inverses."""

from __future__ import annotations


def gcd(a: int, b: int) -> int:
    """Euclid's algorithm; the sign may follow the inputs, the magnitude is the gcd."""
    while b:
        a, b = b, a % b
    return a


def inverse_mod(a: int, n: int) -> int:
    """Return x in [0, n) with a * x congruent to 1 modulo n."""
    old_r, r = a, n
    old_s, s = 1, 0
    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_s, s = s, old_s - quotient * s
    if old_r != 1:
        raise ValueError(f"{a} has no inverse modulo {n}")
    return old_s % n


def lcm(a: int, b: int) -> int:
    """Least common multiple; zero when both arguments are zero."""
    d = gcd(a, b)
    return d if d == 0 else (a * b) // d