# SPDX-FileCopyrightText: 2025 Lagrange Consensus contributors
# SPDX-License-Identifier: MIT

"""Runtime tunables for the recovery command.

Values can be overridden by environment variables; unparsable values fall
back to the defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_str(name: str, default: str) -> str:
    value = os.environ.get(name)
    if not value:
        return default
    return value.strip().upper()


@dataclass(frozen=True)
class ConsensusPolicy:
    """Limits applied by callers of the consensus core."""

    max_combinations: int = 1_000_000
    workers: int = 1
    batch_size: int = 256
    log_level: str = "WARNING"


def load_policy() -> ConsensusPolicy:
    """Load the policy considering environment overrides."""

    return ConsensusPolicy(
        max_combinations=_load_int("LAGRANGE_MAX_COMBINATIONS", 1_000_000),
        workers=max(1, _load_int("LAGRANGE_WORKERS", 1)),
        batch_size=max(1, _load_int("LAGRANGE_BATCH_SIZE", 256)),
        log_level=_load_str("LAGRANGE_LOG_LEVEL", "WARNING"),
    )


policy = load_policy()


__all__ = ["ConsensusPolicy", "policy", "load_policy"]
