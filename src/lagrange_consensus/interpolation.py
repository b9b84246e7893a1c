# SPDX-FileCopyrightText: 2025 Lagrange Consensus contributors
# SPDX-License-Identifier: MIT

"""Lagrange interpolation evaluated at x = 0 in exact rational arithmetic."""

from __future__ import annotations

import logging
from typing import Sequence

from .errors import DegenerateSubsetError, DivisionByZeroError
from .rational import ExactRational
from .shares import Share

_logger = logging.getLogger(__name__)


def _basis_at_zero(i: int, points: Sequence[Share]) -> ExactRational:
    xi = points[i].x
    basis = ExactRational.from_int(1)
    for j, other in enumerate(points):
        if j == i:
            continue
        numerator = ExactRational.from_int(-other.x)
        denominator = ExactRational.from_int(xi - other.x)
        try:
            basis = basis.mul(numerator.div(denominator))
        except DivisionByZeroError as exc:
            raise DegenerateSubsetError(xi) from exc
    return basis


def interpolate_at_zero(points: Sequence[Share]) -> ExactRational:
    """Value at 0 of the unique degree ``len(points) - 1`` polynomial through ``points``.

    Computes ``sum(y_i * prod(-x_j / (x_i - x_j)))`` without any floating
    point step. Raises :class:`DegenerateSubsetError` when two points share an
    x coordinate.
    """
    total = ExactRational.zero()
    for i, point in enumerate(points):
        total = total.add(ExactRational.from_int(point.y).mul(_basis_at_zero(i, points)))
    if _logger.isEnabledFor(logging.DEBUG):
        _logger.debug("interpolated %d points at x=[%s] -> %s", len(points), ",".join(str(p.x) for p in points), total)
    return total


__all__ = ["interpolate_at_zero"]
