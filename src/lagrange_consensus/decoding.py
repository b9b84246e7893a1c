# SPDX-FileCopyrightText: 2025 Lagrange Consensus contributors
# SPDX-License-Identifier: MIT

"""Positional numeral decoding for share values (bases 2 to 36)."""

from __future__ import annotations

from typing import Union

from .errors import DigitError

MIN_BASE = 2
MAX_BASE = 36


def parse_base(base: Union[int, str]) -> int:
    if isinstance(base, bool):
        raise DigitError(f"Invalid base: {base!r}")
    if isinstance(base, str):
        try:
            base = int(base.strip(), 10)
        except ValueError as exc:
            raise DigitError(f"Invalid base: {base!r}") from exc
    if not isinstance(base, int) or not MIN_BASE <= base <= MAX_BASE:
        raise DigitError(f"Base must be between {MIN_BASE} and {MAX_BASE}, got {base!r}")
    return base


def digit_value(ch: str) -> int:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    lower = ch.lower()
    if "a" <= lower <= "z":
        return ord(lower) - ord("a") + 10
    raise DigitError(f"Invalid digit char: {ch!r}")


def decode_digits(text: str, base: Union[int, str]) -> int:
    """Decode ``text`` written in ``base``.

    Surrounding whitespace is trimmed and ``_`` separators are skipped. An
    empty digit string decodes to 0.
    """
    radix = parse_base(base)
    value = 0
    for ch in text.strip():
        if ch == "_":
            continue
        digit = digit_value(ch)
        if digit >= radix:
            raise DigitError(f"Digit {ch!r} >= base {radix}")
        value = value * radix + digit
    return value


__all__ = ["MIN_BASE", "MAX_BASE", "decode_digits", "digit_value", "parse_base"]
