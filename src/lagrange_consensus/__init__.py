# SPDX-FileCopyrightText: 2025 Lagrange Consensus contributors
# SPDX-License-Identifier: MIT

"""Exact Lagrange reconstruction of a polynomial's constant term with
majority voting over every k-subset of the available shares."""

from .consensus import ConsensusTally, Secret, build_tally, secret_from_tally, select_secret
from .decoding import decode_digits
from .errors import (
    ConsensusError,
    DegenerateSubsetError,
    DigitError,
    DivisionByZeroError,
    DocumentError,
    InsufficientSharesError,
    NoConsensusError,
)
from .interpolation import interpolate_at_zero
from .loader import ShareSet, load_document, load_file, recover_from_document
from .rational import ExactRational
from .shares import Share, sort_shares
from .subsets import count_subsets, iter_subsets

__version__ = "0.1.0"

__all__ = [
    "ExactRational",
    "Share",
    "sort_shares",
    "interpolate_at_zero",
    "iter_subsets",
    "count_subsets",
    "ConsensusTally",
    "Secret",
    "build_tally",
    "secret_from_tally",
    "select_secret",
    "decode_digits",
    "ShareSet",
    "load_document",
    "load_file",
    "recover_from_document",
    "ConsensusError",
    "DivisionByZeroError",
    "DegenerateSubsetError",
    "InsufficientSharesError",
    "NoConsensusError",
    "DocumentError",
    "DigitError",
]
