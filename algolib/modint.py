"""Integers modulo a fixed modulus, with modulus-specific subclasses."""

from __future__ import annotations

from functools import total_ordering
from typing import ClassVar

DEFAULT_MOD = 998_244_353

_KNOWN_ROOTS = {1_000_000_007: 5, 998_244_353: 3, 786_433: 10}
_root_cache: dict[int, int] = {}
_classes: dict[int, type[ModInt]] = {}


def normalize(value: int, mod: int) -> int:
    """Reduce value into the range [0, mod)."""
    if mod <= 0:
        raise ValueError(f"modulus must be positive, got {mod}")
    return value % mod


@total_ordering
class ModInt:
    """Residue modulo cls.mod; the modulus should be prime for division and inverses."""

    __slots__ = ("value",)
    mod: ClassVar[int] = DEFAULT_MOD

    def __init__(self, value: int | ModInt = 0) -> None:
        if isinstance(value, ModInt):
            if value.mod != self.mod:
                raise TypeError("cannot convert between different moduli")
            value = value.value
        elif not isinstance(value, int):
            raise TypeError(f"expected an integer, got {type(value).__name__}")
        self.value = value % self.mod

    @classmethod
    def with_modulus(cls, mod: int) -> type[ModInt]:
        """The residue class type for the given modulus."""
        if mod < 2:
            raise ValueError(f"modulus must be at least 2, got {mod}")
        if mod == DEFAULT_MOD:
            return ModInt
        if mod not in _classes:
            _classes[mod] = type(f"ModInt{mod}", (ModInt,), {"mod": mod, "__slots__": ()})
        return _classes[mod]

    @classmethod
    def parse(cls, text: str) -> ModInt:
        """Read a decimal integer, possibly negative."""
        return cls(int(text.strip()))

    @classmethod
    def primitive_root(cls) -> int:
        """Smallest generator of the multiplicative group, for a prime modulus."""
        mod = cls.mod
        if mod in _KNOWN_ROOTS:
            return _KNOWN_ROOTS[mod]
        if mod in _root_cache:
            return _root_cache[mod]

        primes = []
        rest = mod - 1
        i = 2
        while i * i <= rest:
            if rest % i == 0:
                primes.append(i)
                while rest % i == 0:
                    rest //= i
            i += 1
        if rest != 1:
            primes.append(rest)

        r = 2
        while any(pow(r, (mod - 1) // p, mod) == 1 for p in primes):
            r += 1
        _root_cache[mod] = r
        return r

    def _coerce(self, other: object) -> int | None:
        if isinstance(other, ModInt):
            if other.mod != self.mod:
                raise TypeError("cannot mix residues of different moduli")
            return other.value
        if isinstance(other, int):
            return other % self.mod
        return None

    def _new(self, value: int) -> ModInt:
        return type(self)(value)

    def power(self, degree: int) -> ModInt:
        """self raised to degree; a negative degree uses the inverse."""
        if degree < 0:
            return self.inv().power(-degree)
        return self._new(pow(self.value, degree, self.mod))

    def inv(self) -> ModInt:
        """Multiplicative inverse."""
        try:
            return self._new(pow(self.value, -1, self.mod))
        except ValueError:
            raise ZeroDivisionError(f"{self.value} is not invertible modulo {self.mod}") from None

    def __add__(self, other: object) -> ModInt:
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self._new(self.value + v)

    __radd__ = __add__

    def __sub__(self, other: object) -> ModInt:
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self._new(self.value - v)

    def __rsub__(self, other: object) -> ModInt:
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self._new(v - self.value)

    def __mul__(self, other: object) -> ModInt:
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self._new(self.value * v)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> ModInt:
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self * self._new(v).inv()

    def __rtruediv__(self, other: object) -> ModInt:
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self._new(v) * self.inv()

    def __pow__(self, degree: int) -> ModInt:
        return self.power(degree)

    def __neg__(self) -> ModInt:
        return self._new(-self.value)

    def __pos__(self) -> ModInt:
        return self

    def __eq__(self, other: object) -> bool:
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self.value == v

    def __lt__(self, other: object) -> bool:
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self.value < v

    def __hash__(self) -> int:
        return hash(self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value})"