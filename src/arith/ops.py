"""32-bit signed integer arithmetic.

Operands and results model the host's native ``i32``: values live in
``[I32_MIN, I32_MAX]`` and sums that leave the range wrap around using
two's-complement semantics unless the caller asks for overflow to raise.
"""

from __future__ import annotations

import logging
from typing import Literal, get_args

logger = logging.getLogger(__name__)

I32_BITS = 32
I32_MIN = -(2 ** (I32_BITS - 1))
I32_MAX = 2 ** (I32_BITS - 1) - 1

_I32_MODULUS = 2**I32_BITS

OverflowMode = Literal["wrap", "raise"]

VALID_OVERFLOW_MODES = frozenset(get_args(OverflowMode))


class ArithmeticOverflowError(OverflowError):
    """Raised when a checked sum does not fit in 32 bits."""

    def __init__(self, a: int, b: int) -> None:
        self.a = a
        self.b = b
        super().__init__(f"i32 overflow: {a} + {b} = {a + b} is out of range")


def fits_i32(value: int) -> bool:
    return I32_MIN <= value <= I32_MAX


def wrap_i32(value: int) -> int:
    """Reduce ``value`` into the i32 range by two's-complement wraparound.

    Examples:
        >>> wrap_i32(2**31)
        -2147483648
        >>> wrap_i32(-(2**31) - 1)
        2147483647
        >>> wrap_i32(30)
        30
    """
    return (value - I32_MIN) % _I32_MODULUS + I32_MIN


def _check_operand(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an int, got {type(value).__name__}"
        raise TypeError(msg)
    if not fits_i32(value):
        msg = f"{name}={value} is outside the i32 range [{I32_MIN}, {I32_MAX}]"
        raise ValueError(msg)
    return value


def add(a: int, b: int, *, overflow: OverflowMode = "wrap") -> int:
    """Add two i32 values.

    Args:
        a: Left operand, within ``[I32_MIN, I32_MAX]``.
        b: Right operand, within ``[I32_MIN, I32_MAX]``.
        overflow: ``"wrap"`` wraps out-of-range sums around; ``"raise"``
            raises ``ArithmeticOverflowError`` instead.

    Returns:
        The i32 sum of ``a`` and ``b``.

    Raises:
        TypeError: If an operand is not an int.
        ValueError: If an operand is out of range or ``overflow`` is unknown.
        ArithmeticOverflowError: If ``overflow="raise"`` and the sum does
            not fit.
    """
    if overflow not in VALID_OVERFLOW_MODES:
        msg = (
            f"Invalid overflow mode '{overflow}'. "
            f"Valid modes: {', '.join(sorted(VALID_OVERFLOW_MODES))}"
        )
        raise ValueError(msg)

    a = _check_operand("a", a)
    b = _check_operand("b", b)

    total = a + b
    if fits_i32(total):
        return total

    if overflow == "raise":
        raise ArithmeticOverflowError(a, b)

    wrapped = wrap_i32(total)
    logger.debug("i32 wraparound: %d + %d -> %d", a, b, wrapped)
    return wrapped


def uses_add() -> int:
    return add(10, 20)


__all__ = [
    "I32_BITS",
    "I32_MAX",
    "I32_MIN",
    "VALID_OVERFLOW_MODES",
    "ArithmeticOverflowError",
    "OverflowMode",
    "add",
    "fits_i32",
    "uses_add",
    "wrap_i32",
]
