# SPDX-FileCopyrightText: 2025 Lagrange Consensus contributors
# SPDX-License-Identifier: MIT

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True, order=True)
class Share:
    """One ``(x, y)`` point believed to lie on the secret polynomial."""

    x: int
    y: int

    def __post_init__(self) -> None:
        for name in ("x", "y"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Share.{name} must be an int, got {type(value).__name__}")
        if self.x < 0:
            raise ValueError(f"Share.x must be non-negative, got {self.x}")


def sort_shares(shares: Iterable[Share]) -> tuple[Share, ...]:
    """Return ``shares`` in canonical order (ascending x, then y)."""
    return tuple(sorted(shares))


__all__ = ["Share", "sort_shares"]
