"""Number theory helpers for the public-key ciphers."""

from __future__ import annotations

import secrets

_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def mod_inverse(a: int, n: int) -> int:
    """Return the inverse of ``a`` modulo ``n``.

    Raises ValueError when ``a`` and ``n`` are not coprime.
    """
    if n <= 0:
        raise ValueError("modulus must be positive")
    try:
        return pow(a, -1, n)
    except ValueError:
        raise ValueError(f"{a} has no inverse modulo {n}") from None


def mod_pow(base: int, exp: int, n: int) -> int:
    """Return ``base ** exp % n`` for non-negative operands and a positive modulus."""
    if base < 0 or exp < 0:
        raise ValueError("base and exponent must be non-negative")
    if n <= 0:
        raise ValueError("modulus must be positive")
    return pow(base, exp, n)


def is_prime(n: int) -> bool:
    """Tell whether ``n`` is prime (exact for every n below 3.3e24)."""
    if n < 2:
        return False
    for p in _WITNESSES:
        if n % p == 0:
            return n == p
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in _WITNESSES:
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True


def random_prime(low: int, high: int) -> int:
    """Pick a random prime by drawing odd candidates from ``[low, high]``.

    A drawn number is made odd by setting its lowest bit, so the result may be
    one above an even ``high``.
    """
    if low > high:
        raise ValueError("low must not exceed high")
    if high < 2:
        raise ValueError("range holds no primes")
    rng = secrets.SystemRandom()
    while True:
        candidate = rng.randint(low, high) | 1
        if is_prime(candidate):
            return candidate