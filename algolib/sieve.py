"""Linear sieve with smallest prime factors."""

from __future__ import annotations


class Sieve:
    """Primes and smallest prime factors of every number up to n."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"limit must be non-negative, got {n}")
        self.limit = n
        self.smallest_factor = list(range(n + 1))
        self.primes: list[int] = []
        smallest, primes = self.smallest_factor, self.primes
        for i in range(2, n + 1):
            if smallest[i] == i:
                primes.append(i)
            for p in primes:
                if p > smallest[i] or p * i > n:
                    break
                smallest[p * i] = p

    def _check(self, n: int) -> None:
        if n > self.limit:
            raise ValueError(f"{n} exceeds the sieve limit {self.limit}")

    def is_prime(self, n: int) -> bool:
        if n <= 1:
            return False
        self._check(n)
        return self.smallest_factor[n] == n

    def prime_factors(self, n: int) -> list[tuple[int, int]]:
        """(prime, exponent) pairs of n, sorted by prime."""
        if n < 1:
            raise ValueError(f"value must be positive, got {n}")
        self._check(n)
        smallest = self.smallest_factor
        factors = []
        while n != 1:
            prime = smallest[n]
            degree = 0
            while smallest[n] == prime:
                degree += 1
                n //= prime
            factors.append((prime, degree))
        return factors

    def all_factors(self, value: int) -> list[int]:
        """Every divisor of value in increasing order."""
        divisors = [1]
        for p, d in self.prime_factors(value):
            divisors += [x * p**j for x in divisors for j in range(1, d + 1)]
        divisors.sort()
        return divisors