"""Deterministic Miller-Rabin primality and Pollard's rho factorisation for 64-bit values."""

from __future__ import annotations

import random
from itertools import groupby
from math import gcd, prod

_SMALL_PRIMES = (2, 3, 5, 7, 11)
_TRIAL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29)
_SMALL_BASES = (2, 7, 61)
_LARGE_BASES = (2, 325, 9375, 28178, 450775, 9780504, 1795265022)
_SMALL_BASES_LIMIT = 4_759_123_141
_STEP = 128

_rng = random.Random()


def _strong_probable_prime(n: int, base: int, d: int, s: int) -> bool:
    if base == 0:
        return True
    y = pow(base, d, n)
    if y == 1:
        return True
    for _ in range(s):
        if y == n - 1:
            return True
        y = y * y % n
    return False


def is_prime(value: int) -> bool:
    """Primality test, deterministic below 2**64."""
    if value < 2:
        return False
    for x in _SMALL_PRIMES:
        if value == x:
            return True
        if value % x == 0:
            return False
    d = value - 1
    s = (d & -d).bit_length() - 1
    d >>= s
    bases = _SMALL_BASES if value < _SMALL_BASES_LIMIT else _LARGE_BASES
    return all(_strong_probable_prime(value, base % value, d, s) for base in bases)


def find_any_nontrivial_divisor(value: int) -> int:
    """A divisor of value other than 1 and value; value itself if there is none."""
    if value < 1:
        raise ValueError(f"value must be positive, got {value}")
    for x in _TRIAL_PRIMES:
        if value % x == 0:
            return x
    if value == 1 or is_prime(value):
        return value

    while True:
        c = _rng.randrange(1, value)

        def f(x: int) -> int:
            return (x * x + c) % value

        x = _rng.randrange(2, value)
        y = x
        g = 1
        while g == 1:
            product = 1
            saved_x, saved_y = x, y
            for _ in range(_STEP):
                x = f(x)
                y = f(f(y))
                product = product * (x - y) % value
            g = gcd(product, value)
            if g == 1:
                continue
            x, y = saved_x, saved_y
            for _ in range(_STEP):
                x = f(x)
                y = f(f(y))
                g = gcd((x - y) % value, value)
                if g != 1:
                    break
            if g != 1 and g != value:
                return g


def prime_factors_with_duplicates(value: int) -> list[int]:
    """Sorted prime factors, each repeated as often as it divides value."""
    if value < 1:
        raise ValueError(f"value must be positive, got {value}")
    result = []
    pending = [value]
    while pending:
        v = pending.pop()
        if v == 1:
            continue
        x = find_any_nontrivial_divisor(v)
        if x == v:
            result.append(x)
        else:
            pending.extend((x, v // x))
    result.sort()
    return result


def prime_factors(value: int) -> list[tuple[int, int]]:
    """(prime, exponent) pairs sorted by prime."""
    return [(p, sum(1 for _ in group)) for p, group in groupby(prime_factors_with_duplicates(value))]


def all_factors(value: int) -> list[int]:
    """Every divisor of value in increasing order."""
    divisors = [1]
    for p, d in prime_factors(value):
        divisors += [x * p**j for x in divisors for j in range(1, d + 1)]
    divisors.sort()
    return divisors


def _product_check(factors: list[int]) -> int:
    return prod(factors)