import math

import pytest

from algolib.factorizer import is_prime as mr_is_prime
from algolib.sieve import Sieve

LIMIT = 5000


@pytest.fixture(scope="module")
def sieve():
    return Sieve(LIMIT)


def test_primes_agree_with_miller_rabin(sieve):
    assert sieve.primes == [n for n in range(LIMIT + 1) if mr_is_prime(n)]
    for n in range(LIMIT + 1):
        assert sieve.is_prime(n) == mr_is_prime(n)


def test_smallest_factor_invariant(sieve):
    for n in range(2, LIMIT + 1):
        p = sieve.smallest_factor[n]
        assert n % p == 0
        assert sieve.is_prime(p)
        assert all(n % d for d in range(2, p))


def test_small_numbers_not_prime(sieve):
    assert not sieve.is_prime(0)
    assert not sieve.is_prime(1)
    assert not sieve.is_prime(-7)


def test_prime_factors_reconstruct(sieve):
    for n in range(1, LIMIT + 1):
        pairs = sieve.prime_factors(n)
        assert math.prod(p**d for p, d in pairs) == n
        assert all(sieve.is_prime(p) for p, _ in pairs)
        assert [p for p, _ in pairs] == sorted(p for p, _ in pairs)


def test_prime_factors_of_one(sieve):
    assert sieve.prime_factors(1) == []
    assert sieve.all_factors(1) == [1]


def test_all_factors(sieve):
    for n in range(1, 400):
        assert sieve.all_factors(n) == [d for d in range(1, n + 1) if n % d == 0]


def test_invalid_arguments(sieve):
    with pytest.raises(ValueError):
        sieve.prime_factors(0)
    with pytest.raises(ValueError):
        sieve.is_prime(LIMIT + 1)
    with pytest.raises(ValueError):
        Sieve(-1)


def test_empty_sieve():
    small = Sieve(1)
    assert small.primes == []
    assert not small.is_prime(1)