"""Factorials, binomial coefficients and Catalan numbers modulo a prime."""

from __future__ import annotations

from algolib.modint import DEFAULT_MOD, ModInt


class Combinatorics:
    """Lazily growing tables of factorials and inverses modulo a prime."""

    def __init__(self, mod: int = DEFAULT_MOD) -> None:
        self.mod = mod
        self._mint = ModInt.with_modulus(mod)
        one = self._mint(1)
        self._fact = [one, one]
        self._ifact = [one, one]
        self._inv = [self._mint(0), one]

    def _grow(self, size: int) -> None:
        mod = self.mod
        for pos in range(len(self._fact), size + 1):
            self._fact.append(self._fact[-1] * pos)
            self._inv.append(-self._inv[mod % pos] * (mod // pos))
            self._ifact.append(self._ifact[-1] * self._inv[pos])

    def _lookup(self, table: list[ModInt], n: int) -> ModInt:
        if n < 0:
            raise ValueError(f"index must be non-negative, got {n}")
        if n >= len(table):
            self._grow(n)
        return table[n]

    def fact(self, n: int) -> ModInt:
        """n!"""
        return self._lookup(self._fact, n)

    def ifact(self, n: int) -> ModInt:
        """Inverse of n!"""
        return self._lookup(self._ifact, n)

    def inv(self, n: int) -> ModInt:
        """Inverse of n."""
        return self._lookup(self._inv, n)

    def choose(self, n: int, k: int) -> ModInt:
        """Binomial coefficient using the tables; O(max n) in total."""
        if n < k or k < 0 or n < 0:
            return self._mint(0)
        return self.fact(n) * self.ifact(k) * self.ifact(n - k)

    def choose_slow(self, n: int, k: int) -> ModInt:
        """Binomial coefficient in O(min(k, n - k)), for huge n."""
        if n < k or k < 0 or n < 0:
            return self._mint(0)
        k = min(k, n - k)
        result = self._mint(1)
        for i in range(k, 0, -1):
            result *= n - i + 1
            result *= self.inv(i)
        return result

    def catalan(self, n: int, m: int | None = None) -> ModInt:
        """Balanced bracket sequences with n opening and m (default n) closing brackets."""
        if m is None:
            m = n
        if m > n or m < 0:
            return self._mint(0)
        return self.choose(n + m, m) - self.choose(n + m, m - 1)