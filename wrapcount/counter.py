"""A modular counter over a 32-bit unsigned integer.

A Counter is a plain ``int`` in ``[0, 2**32 - 1]``. Every operation is a
pure function that takes Counter values and returns a new one:

    new       : → U32
    increment : U32 → U32              c + 1 mod 2³²
    decrement : U32 → U32              c − 1 mod 2³²
    add       : U32 × U32 → U32        c + n mod 2³²
    subtract  : U32 × U32 → U32        c − n mod 2³²
    reset     : U32 → U32              0

Overflow and underflow wrap around. No operation saturates or fails for
arguments inside the domain; arguments outside it are rejected before any
arithmetic happens.
"""

from __future__ import annotations

from typing import NewType

from .errors import CounterRangeError

Counter = NewType("Counter", int)

BITS = 32
MODULUS = 1 << BITS
MAX = Counter(MODULUS - 1)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def as_counter(value: int) -> Counter:
    """Validate ``value`` as a Counter and return it.

    Raises TypeError for anything that is not an ``int`` (``bool`` included)
    and CounterRangeError for an ``int`` outside ``[0, MAX]``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Counter must be an int, got {type(value).__name__}")
    if not 0 <= value <= MAX:
        raise CounterRangeError(value)
    return Counter(value)


def is_counter(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= MAX


# ---------------------------------------------------------------------------
# Wrap-around primitives
# ---------------------------------------------------------------------------


def wrapping_add(a: int, b: int) -> Counter:
    """a + b mod 2³²."""
    return Counter((as_counter(a) + as_counter(b)) % MODULUS)


def wrapping_sub(a: int, b: int) -> Counter:
    """a − b mod 2³² (two's-complement wrap for a < b)."""
    return Counter((as_counter(a) - as_counter(b)) % MODULUS)


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------


def new() -> Counter:
    """A fresh counter, always 0."""
    return Counter(0)


def increment(c: int) -> Counter:
    return wrapping_add(c, 1)


def decrement(c: int) -> Counter:
    return wrapping_sub(c, 1)


def add(c: int, n: int) -> Counter:
    return wrapping_add(c, n)


def subtract(c: int, n: int) -> Counter:
    return wrapping_sub(c, n)


def reset(c: int) -> Counter:
    """Return 0 whatever ``c`` is. ``c`` is still validated."""
    as_counter(c)
    return new()
