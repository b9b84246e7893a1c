# SPDX-FileCopyrightText: 2025 Lagrange Consensus contributors
# SPDX-License-Identifier: MIT

"""Exception hierarchy shared by the arithmetic core and the loaders."""

from __future__ import annotations


class ConsensusError(Exception):
    """Base class for every error raised by :mod:`lagrange_consensus`."""


class DivisionByZeroError(ConsensusError, ZeroDivisionError):
    """A zero denominator was constructed or a zero rational was used as divisor."""


class DegenerateSubsetError(DivisionByZeroError):
    """Two shares inside one subset have the same x coordinate."""

    def __init__(self, x: int) -> None:
        super().__init__(f"Duplicate x coordinate {x} inside subset")
        self.x = x

    def __reduce__(self):
        return (type(self), (self.x,))


class InsufficientSharesError(ConsensusError, ValueError):
    def __init__(self, available: int, required: int) -> None:
        super().__init__(f"Not enough shares: {available} available, {required} required")
        self.available = available
        self.required = required

    def __reduce__(self):
        return (type(self), (self.available, self.required))


class NoConsensusError(ConsensusError):
    """No subset produced a result, so there is nothing to vote on."""


class DocumentError(ConsensusError, ValueError):
    """The share document is malformed."""


class DigitError(DocumentError):
    """A digit string does not belong to the declared base."""


__all__ = [
    "ConsensusError",
    "DivisionByZeroError",
    "DegenerateSubsetError",
    "InsufficientSharesError",
    "NoConsensusError",
    "DocumentError",
    "DigitError",
]
