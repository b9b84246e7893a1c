"""Test configuration helpers."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest
from hypothesis import settings


def _ensure_src_on_path() -> None:
    src = Path(__file__).resolve().parent.parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


_ensure_src_on_path()

settings.register_profile("lagrange", max_examples=100, deadline=None)
settings.load_profile("lagrange")


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).resolve().parent / "fixtures"
