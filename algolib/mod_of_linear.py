"""Sums, counts and extrema of linear functions taken modulo m."""

from __future__ import annotations


def _floor_sum(k: int, b: int, m: int, n: int) -> int:
    if k == 0:
        return (b // m) * n
    if k >= m or b >= m:
        return n * (n - 1) // 2 * (k // m) + n * (b // m) + _floor_sum(k % m, b % m, m, n)
    ymax = (k * (n - 1) + b) // m
    return n * ymax - _floor_sum(m, m + k - b - 1, k, ymax)


def floor_sum(k: int, b: int, m: int, n: int) -> int:
    """Sum of floor((k * x + b) / m) for x in [0, n); needs k, b >= 0, m > 0, n >= 0."""
    if k < 0 or b < 0:
        raise ValueError("k and b must be non-negative")
    if m <= 0:
        raise ValueError(f"modulus must be positive, got {m}")
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return _floor_sum(k, b, m, n)


def mod_sum(k: int, b: int, m: int, n: int) -> int:
    """Sum of (k * x + b) mod m for x in [0, n); needs m > 0, n >= 0."""
    if m <= 0:
        raise ValueError(f"modulus must be positive, got {m}")
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    k %= m
    b %= m
    return n * (n - 1) // 2 * k + n * b - m * _floor_sum(k, b, m, n)


def count_remainders(k: int, b: int, v: int, m: int, n: int) -> int:
    """Number of x in [0, n) with (k * x + b) mod m <= v."""
    if m <= 0:
        raise ValueError(f"modulus must be positive, got {m}")
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if v < 0:
        return 0
    if v >= m - 1:
        return n
    return (mod_sum(k, b - v - 1, m, n) - mod_sum(k, b, m, n) + n * (v + 1)) // m


def _max_of(n: int, m: int, k: int, b: int, step_cost: int, overflow_cost: int) -> int:
    if k == 0:
        return b
    if b < m - k:
        steps = (m - b - 1) // k
        cost = step_cost * steps
        if cost >= n:
            return k * ((n - 1) // step_cost) + b
        n -= cost
        b += steps * k
    return m - 1 - _min_of(n, k, m % k, m - 1 - b, (m // k) * step_cost + overflow_cost, step_cost)


def _min_of(n: int, m: int, k: int, b: int, step_cost: int, overflow_cost: int) -> int:
    if k == 0:
        return b
    if b >= k:
        steps = (m - b + k - 1) // k
        cost = step_cost * steps + overflow_cost
        if cost >= n:
            return b
        n -= cost
        b += steps * k - m
    return k - 1 - _max_of(n, k, m % k, k - 1 - b, (m // k) * step_cost + overflow_cost, step_cost)


def _check_extremum_args(n: int, m: int, k: int, b: int, step_cost: int) -> None:
    if n <= 0 or m <= 0:
        raise ValueError("n and m must be positive")
    if not (0 <= k < m and 0 <= b < m):
        raise ValueError("k and b must lie in [0, m)")
    if step_cost <= 0:
        raise ValueError("step_cost must be positive")


def min_of_mod_of_linear(n: int, m: int, k: int, b: int, step_cost: int = 1, overflow_cost: int = 0) -> int:
    """Minimum of (k * x + b) mod m over x in [0, n); needs n, m > 0 and 0 <= k, b < m."""
    _check_extremum_args(n, m, k, b, step_cost)
    return _min_of(n, m, k, b, step_cost, overflow_cost)


def max_of_mod_of_linear(n: int, m: int, k: int, b: int, step_cost: int = 1, overflow_cost: int = 0) -> int:
    """Maximum of (k * x + b) mod m over x in [0, n); needs n, m > 0 and 0 <= k, b < m."""
    _check_extremum_args(n, m, k, b, step_cost)
    return _max_of(n, m, k, b, step_cost, overflow_cost)