# SPDX-FileCopyrightText: 2025 Lagrange Consensus contributors
# SPDX-License-Identifier: MIT

from __future__ import annotations

import logging
import sys

_ROOT = "lagrange_consensus"
_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package's namespace."""
    if name == _ROOT or name.startswith(_ROOT + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT}.{name}")


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """Route the package logger to the current stderr at ``level``."""
    logger = logging.getLogger(_ROOT)
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    handler = next((h for h in logger.handlers if getattr(h, "_lagrange", False)), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._lagrange = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    else:
        # stderr may have been swapped since the first call
        handler.setStream(sys.stderr)  # type: ignore[attr-defined]
    logger.setLevel(level)
    return logger


__all__ = ["get_logger", "configure_logging"]
