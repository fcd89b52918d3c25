"""Number theory: primality, sieves, gcd and the extended Euclidean algorithm."""

from __future__ import annotations

import math


def _check_not_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")


def is_prime(n: int) -> bool:
    """Tell whether ``n`` has no divisor between 2 and its square root.

    Trial division finds no such divisor for 0 and 1 either, so they pass.
    """
    _check_not_negative(n=n)
    return all(n % i for i in range(2, math.isqrt(n) + 1))


def pow_mod(a: int, n: int, m: int) -> int:
    """Return ``a`` to the power ``n`` modulo ``m`` (1 when ``n`` is 0)."""
    _check_not_negative(n=n)
    if m < 1:
        raise ValueError(f"modulus must be positive, got {m}")
    return pow(a, n, m) if n else 1


def is_carmichael(n: int) -> bool:
    """Tell whether ``n`` is composite yet ``i ** n % n == i`` for all ``1 < i < n``."""
    return not is_prime(n) and all(pow_mod(i, n, n) == i for i in range(2, n))


def _strike(flags: bytearray, start: int, step: int) -> None:
    if start < len(flags):
        flags[start::step] = bytes(len(range(start, len(flags), step)))


class Sieve:
    """Sieve of Eratosthenes over ``0 .. n``."""

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError(f"sieve limit must be at least 1, got {n}")
        flags = bytearray([1]) * (n + 1)
        flags[0] = flags[1] = 0
        for i in range(2, math.isqrt(n) + 1):
            if flags[i]:
                _strike(flags, i * i, i)
        self._flags = flags
        self._limit = n

    def _check(self, n: int) -> None:
        if not 0 <= n <= self._limit:
            raise ValueError(f"{n} lies outside the sieve 0..{self._limit}")

    def is_prime(self, n: int) -> bool:
        """Tell whether ``n`` is prime."""
        self._check(n)
        return bool(self._flags[n])

    def prime_count(self, n: int) -> int:
        """Return how many primes lie in ``0 .. n``."""
        self._check(n)
        return sum(self._flags[: n + 1])


class SegmentSieve:
    """Sieve of Eratosthenes over the segment ``a .. b``."""

    def __init__(self, a: int, b: int) -> None:
        _check_not_negative(a=a)
        if b < a:
            raise ValueError(f"segment end {b} lies before its start {a}")
        root = math.isqrt(b) + 1
        small = Sieve(root)
        flags = bytearray([1]) * (b - a + 1)
        for value in range(a, min(b, 1) + 1):
            flags[value - a] = 0
        for p in range(2, root + 1):
            if small.is_prime(p):
                first = max(2, -(-a // p)) * p
                _strike(flags, first - a, p)
        self._flags = flags
        self._low = a
        self._high = b

    def is_prime(self, n: int) -> bool:
        """Tell whether ``n``, which must lie in the segment, is prime."""
        if not self._low <= n <= self._high:
            raise ValueError(f"{n} lies outside the segment {self._low}..{self._high}")
        return bool(self._flags[n - self._low])

    def prime_count(self) -> int:
        """Return how many primes lie in ``a + 1 .. b``."""
        return sum(self._flags[1:])


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b``."""
    while b:
        a, b = b, a % b
    return a


def lattice_points_on_segment(p: tuple[int, int], q: tuple[int, int]) -> int:
    """Count the lattice points strictly between the lattice points ``p`` and ``q``."""
    (px, py), (qx, qy) = p, q
    return max(gcd(abs(px - qx), abs(py - qy)), 1) - 1


def extgcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(x, y, g)`` with ``a * x + b * y == g == gcd(a, b)``."""
    _check_not_negative(a=a, b=b)
    if b == 0:
        return 1, 0, a
    x, y, g = extgcd(b, a % b)
    return y, x - (a // b) * y, g


def sugoroku(a: int, b: int) -> tuple[int, int, int, int] | None:
    """Return moves reaching square 1 with steps of ``a`` and ``b``.

    The result is ``(forward a, forward b, back a, back b)``, or None when
    square 1 cannot be reached.
    """
    x, y, g = extgcd(a, b)
    if g > 1:
        return None
    return max(x, 0), max(y, 0), -min(x, 0), -min(y, 0)