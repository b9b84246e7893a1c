# SPDX-FileCopyrightText: 2025 Lagrange Consensus contributors
# SPDX-License-Identifier: MIT

"""Exact fractions over unbounded Python integers.

Every instance is kept in normal form: the denominator is positive and shares
no common divisor with the numerator. Equality and hashing therefore compare
the ``(numerator, denominator)`` pair directly, which is what the consensus
tally relies on when grouping identical interpolation results.
"""

from __future__ import annotations

from typing import Optional, Union

from .errors import DivisionByZeroError

_Operand = Union["ExactRational", int]


def _gcd(a: int, b: int) -> int:
    """Euclid on absolute values; ``_gcd(0, b) == b``."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def _check_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


class ExactRational:
    __slots__ = ("_num", "_den")

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        numerator = _check_int(numerator, "numerator")
        denominator = _check_int(denominator, "denominator")
        if denominator == 0:
            raise DivisionByZeroError("Denominator zero")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        g = _gcd(numerator, denominator)
        object.__setattr__(self, "_num", numerator // g)
        object.__setattr__(self, "_den", denominator // g)

    # -- constructors -------------------------------------------------------

    @classmethod
    def from_int(cls, value: int) -> "ExactRational":
        return cls(value, 1)

    @classmethod
    def zero(cls) -> "ExactRational":
        return cls(0, 1)

    @classmethod
    def parse(cls, text: str) -> "ExactRational":
        """Inverse of :meth:`__str__`: accepts ``"n"`` or ``"n/d"``."""
        num, sep, den = text.strip().partition("/")
        try:
            return cls(int(num), int(den) if sep else 1)
        except ValueError as exc:
            raise ValueError(f"Not a rational literal: {text!r}") from exc

    # -- accessors ----------------------------------------------------------

    @property
    def numerator(self) -> int:
        return self._num

    @property
    def denominator(self) -> int:
        return self._den

    def is_zero(self) -> bool:
        return self._num == 0

    def is_integer(self) -> bool:
        return self.as_exact_integer() is not None

    def as_exact_integer(self) -> Optional[int]:
        """Return the integer value, or ``None`` when the fraction is not whole."""
        if self._den == 1:
            return self._num
        if self._num % self._den == 0:
            return self._num // self._den
        return None

    # -- arithmetic ---------------------------------------------------------

    def add(self, other: _Operand) -> "ExactRational":
        other = _coerce(other)
        return ExactRational(self._num * other._den + other._num * self._den, self._den * other._den)

    def sub(self, other: _Operand) -> "ExactRational":
        other = _coerce(other)
        return ExactRational(self._num * other._den - other._num * self._den, self._den * other._den)

    def mul(self, other: _Operand) -> "ExactRational":
        other = _coerce(other)
        return ExactRational(self._num * other._num, self._den * other._den)

    def div(self, other: _Operand) -> "ExactRational":
        other = _coerce(other)
        if other._num == 0:
            raise DivisionByZeroError("Divide by zero")
        return ExactRational(self._num * other._den, self._den * other._num)

    def neg(self) -> "ExactRational":
        return ExactRational(-self._num, self._den)

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __truediv__ = div
    __neg__ = neg

    def __radd__(self, other: int) -> "ExactRational":
        return _coerce(other).add(self)

    def __rsub__(self, other: int) -> "ExactRational":
        return _coerce(other).sub(self)

    def __rmul__(self, other: int) -> "ExactRational":
        return _coerce(other).mul(self)

    def __rtruediv__(self, other: int) -> "ExactRational":
        return _coerce(other).div(self)

    # -- comparison ---------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ExactRational):
            return self._num == other._num and self._den == other._den
        if isinstance(other, int) and not isinstance(other, bool):
            return self._den == 1 and self._num == other
        return NotImplemented

    def __hash__(self) -> int:
        # whole values must hash like the int they compare equal to
        if self._den == 1:
            return hash(self._num)
        return hash((self._num, self._den))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ExactRational is immutable")

    def __reduce__(self):
        return (ExactRational, (self._num, self._den))

    def __str__(self) -> str:
        if self._den == 1:
            return str(self._num)
        return f"{self._num}/{self._den}"

    def __repr__(self) -> str:
        return f"ExactRational({self._num}, {self._den})"


def _coerce(value: _Operand) -> ExactRational:
    if isinstance(value, ExactRational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return ExactRational(value, 1)
    raise TypeError(f"Unsupported operand type: {type(value).__name__}")


__all__ = ["ExactRational"]
