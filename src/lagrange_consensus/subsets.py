# SPDX-FileCopyrightText: 2025 Lagrange Consensus contributors
# SPDX-License-Identifier: MIT

"""Enumeration of the k-sized index subsets of a share sequence.

Subsets come out in lexicographic order of their (ascending) indices, so a
fresh enumeration for the same ``n`` and ``k`` always reproduces the same
sequence. The consensus tie-break depends on that order.
"""

from __future__ import annotations

import itertools
import math
from typing import Iterator

Subset = tuple[int, ...]


def _validate(n: int, k: int) -> None:
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")


def count_subsets(n: int, k: int) -> int:
    """C(n, k); zero when ``k > n``."""
    _validate(n, k)
    return math.comb(n, k)


def iter_subsets(n: int, k: int) -> Iterator[Subset]:
    """Lazily yield every k-combination of ``range(n)`` exactly once."""
    _validate(n, k)
    return itertools.combinations(range(n), k)


def batched_subsets(n: int, k: int, size: int) -> Iterator[tuple[int, list[Subset]]]:
    """Group :func:`iter_subsets` into ``(start_position, batch)`` pairs."""
    if size < 1:
        raise ValueError(f"batch size must be positive, got {size}")
    subsets = iter_subsets(n, k)
    position = 0
    while True:
        batch = list(itertools.islice(subsets, size))
        if not batch:
            return
        yield position, batch
        position += len(batch)


__all__ = ["Subset", "count_subsets", "iter_subsets", "batched_subsets"]
