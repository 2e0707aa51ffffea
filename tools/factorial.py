"""Factorial over unsigned 64-bit integers.

``factorial`` reproduces what a chain of unsigned 64-bit multiplications
yields: exact up to ``20!``, silently wrapped modulo ``2**64`` above that.
``checked_factorial`` refuses to wrap.
"""

from __future__ import annotations

from core.exceptions import FactorialOverflowError, NegativeInputError

U64_BITS = 64
U64_MASK = (1 << U64_BITS) - 1
U64_MAX = U64_MASK
MAX_EXACT_N = 20
# 66! is the first factorial with 64 factors of two, so every n! from here on is 0 mod 2**64
FIRST_ZERO_N = 66


def _require_int(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"factorial() requires an integer input, got {type(n).__name__}")
    if n < 0:
        raise NegativeInputError(n)


def factorial(n: int) -> int:
    """Return ``n!`` truncated to 64 unsigned bits.

    Raises:
        TypeError:           when ``n`` is not an integer.
        NegativeInputError:  when ``n`` is negative.
    """
    _require_int(n)
    return _factorial_u64(n)


def _factorial_u64(n: int) -> int:
    if n >= FIRST_ZERO_N:
        return 0
    if n == 0:
        return 1
    return (n * _factorial_u64(n - 1)) & U64_MASK


def checked_factorial(n: int) -> int:
    """Return ``n!``, raising ``FactorialOverflowError`` for ``n > 20``."""
    _require_int(n)
    if not fits_u64(n):
        raise FactorialOverflowError(n, MAX_EXACT_N)
    return _factorial_u64(n)


def fits_u64(n: int) -> bool:
    return 0 <= n <= MAX_EXACT_N
