# SPDX-FileCopyrightText: 2025 Lagrange Consensus contributors
# SPDX-License-Identifier: MIT

"""Majority vote over the interpolation results of every k-subset.

Any subset made only of correct shares reproduces the true value at 0, while a
subset containing a wrong share almost always lands somewhere else. The value
produced by the largest number of subsets is therefore taken as the secret.

The tally is an explicit :class:`ConsensusTally` object. Partial tallies built
from disjoint slices of the enumeration merge into the same result as a single
sequential pass, which is what allows :func:`build_tally` to shard the work
across processes.
"""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence

from .errors import DivisionByZeroError, InsufficientSharesError, NoConsensusError
from .interpolation import interpolate_at_zero
from .rational import ExactRational
from .shares import Share, sort_shares
from .subsets import Subset, batched_subsets, count_subsets

_logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 256


@dataclass
class TallyEntry:
    result: ExactRational
    count: int
    first_seen: int
    subset: Subset


class ConsensusTally:
    """Votes per normalised interpolation result."""

    def __init__(self) -> None:
        self._entries: Dict[ExactRational, TallyEntry] = {}
        self.total = 0
        self.excluded = 0

    def record(self, result: ExactRational, subset: Subset, position: int) -> None:
        """Count one vote for ``result`` cast by the subset at ``position``."""
        self.total += 1
        entry = self._entries.get(result)
        if entry is None:
            self._entries[result] = TallyEntry(result, 1, position, tuple(subset))
            return
        entry.count += 1
        if position < entry.first_seen:
            entry.first_seen = position
            entry.subset = tuple(subset)

    def exclude(self) -> None:
        self.excluded += 1

    def merge(self, other: "ConsensusTally") -> "ConsensusTally":
        """Fold ``other`` into this tally; the earliest representative is kept."""
        for entry in other._entries.values():
            mine = self._entries.get(entry.result)
            if mine is None:
                self._entries[entry.result] = TallyEntry(entry.result, entry.count, entry.first_seen, entry.subset)
                continue
            mine.count += entry.count
            if entry.first_seen < mine.first_seen:
                mine.first_seen = entry.first_seen
                mine.subset = entry.subset
        self.total += other.total
        self.excluded += other.excluded
        return self

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TallyEntry]:
        """Entries in order of first discovery during enumeration."""
        return iter(sorted(self._entries.values(), key=lambda e: e.first_seen))

    def leader(self) -> TallyEntry:
        """Most supported entry; on equal counts the earliest discovered wins."""
        best: Optional[TallyEntry] = None
        for entry in self:
            if best is None or entry.count > best.count:
                best = entry
        if best is None:
            raise NoConsensusError("Could not determine consensus secret")
        return best

    def most_common(self, limit: Optional[int] = None) -> List[TallyEntry]:
        ranked = sorted(self._entries.values(), key=lambda e: (-e.count, e.first_seen))
        return ranked if limit is None else ranked[:limit]


@dataclass(frozen=True)
class Secret:
    """Winning value plus the subset that first produced it."""

    value: ExactRational
    is_integer: bool
    subset: tuple[Share, ...]
    indices: Subset
    support: int
    total: int

    @property
    def integer(self) -> int:
        if not self.is_integer:
            raise ValueError(f"Secret {self.value} is not an integer")
        return self.value.as_exact_integer()  # type: ignore[return-value]

    def to_dict(self) -> Dict[str, Any]:
        if self.is_integer:
            data: Dict[str, Any] = {"kind": "integer", "value": self.integer}
        else:
            data = {
                "kind": "rational",
                "numerator": self.value.numerator,
                "denominator": self.value.denominator,
            }
        data["subset"] = [share.x for share in self.subset]
        data["support"] = self.support
        data["total"] = self.total
        return data


def _tally_batch(
    shares: Sequence[Share],
    item: tuple[int, List[Subset]],
    *,
    exclude_degenerate: bool = False,
) -> ConsensusTally:
    start, batch = item
    tally = ConsensusTally()
    for offset, subset in enumerate(batch):
        try:
            result = interpolate_at_zero([shares[i] for i in subset])
        except DivisionByZeroError as exc:
            if not exclude_degenerate:
                raise
            _logger.warning("excluding subset %s: %s", subset, exc)
            tally.exclude()
            continue
        tally.record(result, subset, start + offset)
    return tally


def build_tally(
    shares: Sequence[Share],
    k: int,
    *,
    workers: int = 1,
    batch_size: int = DEFAULT_BATCH_SIZE,
    exclude_degenerate: bool = False,
    progress: Optional[Callable[[int], Any]] = None,
) -> ConsensusTally:
    """Interpolate every k-subset of ``shares`` and count identical results.

    ``shares`` is used in the order given; subset indices refer to it. With
    ``workers > 1`` batches are evaluated in a process pool and merged, which
    yields the same tally as the sequential path. ``progress`` is called with
    the size of each finished batch.
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    shares = tuple(shares)
    n = len(shares)
    if n < k:
        raise InsufficientSharesError(n, k)

    tally = ConsensusTally()
    if k == 0:
        return tally

    _logger.info("evaluating %d subsets of size %d from %d shares", count_subsets(n, k), k, n)
    evaluate = partial(_tally_batch, shares, exclude_degenerate=exclude_degenerate)
    batches = batched_subsets(n, k, batch_size)
    if workers <= 1:
        partials: Iterator[ConsensusTally] = map(evaluate, batches)
        for part in partials:
            tally.merge(part)
            if progress is not None:
                progress(part.total + part.excluded)
    else:
        with ProcessPoolExecutor(max_workers=workers) as pool:
            for part in pool.map(evaluate, batches):
                tally.merge(part)
                if progress is not None:
                    progress(part.total + part.excluded)

    if tally.excluded:
        _logger.warning("%d of %d subsets excluded as degenerate", tally.excluded, tally.total + tally.excluded)
    return tally


def select_secret(shares: Sequence[Share], k: int, **options: Any) -> Secret:
    """Recover the secret by majority vote over all k-subsets of ``shares``.

    Shares are put in canonical order (ascending x) first; the returned
    ``indices`` refer to that order. Keyword options are passed to
    :func:`build_tally`.
    """
    ordered = sort_shares(shares)
    if len(ordered) < k:
        raise InsufficientSharesError(len(ordered), k)
    return secret_from_tally(build_tally(ordered, k, **options), ordered)


def secret_from_tally(tally: ConsensusTally, shares: Sequence[Share]) -> Secret:
    """Turn the leader of ``tally`` into a :class:`Secret`.

    ``shares`` must be the sequence the tally was built from.
    """
    ordered = tuple(shares)
    winner = tally.leader()
    exact = winner.result.as_exact_integer()
    _logger.info("consensus reached: %d of %d subsets agree", winner.count, tally.total)
    return Secret(
        value=winner.result,
        is_integer=exact is not None,
        subset=tuple(ordered[i] for i in winner.subset),
        indices=winner.subset,
        support=winner.count,
        total=tally.total,
    )


__all__ = [
    "ConsensusTally",
    "TallyEntry",
    "Secret",
    "build_tally",
    "select_secret",
    "secret_from_tally",
    "DEFAULT_BATCH_SIZE",
]
