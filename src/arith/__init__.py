"""Arithmetic helpers with 32-bit signed integer semantics."""

from arith.ops import (
    I32_MAX,
    I32_MIN,
    ArithmeticOverflowError,
    OverflowMode,
    add,
    fits_i32,
    uses_add,
    wrap_i32,
)

__all__ = [
    "I32_MAX",
    "I32_MIN",
    "ArithmeticOverflowError",
    "OverflowMode",
    "add",
    "fits_i32",
    "uses_add",
    "wrap_i32",
]
