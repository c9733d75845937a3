"""Extended Euclid, square roots modulo a prime and Gray codes."""

from __future__ import annotations

import random


def extgcd(a: int, b: int) -> tuple[int, int, int]:
    """(g, x, y) with x * a + y * b == g, g the gcd of a and b up to sign."""
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def find_square_root(a: int, p: int) -> int | None:
    """Some x with x * x == a modulo the prime p, or None if a is not a square."""
    a %= p
    if a == 0:
        return 0
    if p == 2:
        return 1
    half = (p - 1) // 2
    if pow(a, half, p) != 1:
        return None

    def mult(x: tuple[int, int], y: tuple[int, int]) -> tuple[int, int]:
        # (x0 + x1 t)(y0 + y1 t) with t^2 = a
        x0, x1 = x
        y0, y1 = y
        return (x0 * y0 + x1 * y1 % p * a) % p, (x1 * y0 + x0 * y1) % p

    def power(base: tuple[int, int], e: int) -> tuple[int, int]:
        result = (1, 0)
        while e:
            if e & 1:
                result = mult(result, base)
            base = mult(base, base)
            e >>= 1
        return result

    rng = random.Random()
    while True:
        i = rng.randrange(1, p)
        c, b = power((i, 1), half)
        if b == 0:
            continue
        answer = (c - 1) * pow(b, p - 2, p) % p
        if answer * answer % p == a:
            return answer


def gray_code(n: int) -> list[int]:
    """The reflected Gray code sequence of all n-bit numbers."""
    if n < 0:
        raise ValueError(f"bit count must be non-negative, got {n}")
    return [i ^ (i >> 1) for i in range(1 << n)]