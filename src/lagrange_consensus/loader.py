# SPDX-FileCopyrightText: 2025 Lagrange Consensus contributors
# SPDX-License-Identifier: MIT

"""Turns a share document into validated :class:`Share` records.

A document looks like::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"}
    }

Every key made only of decimal digits is an x coordinate; other keys besides
``keys`` are ignored.
"""

from __future__ import annotations

import json
import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from .consensus import Secret, select_secret
from .decoding import decode_digits
from .errors import DocumentError, InsufficientSharesError
from .shares import Share, sort_shares

_logger = logging.getLogger(__name__)

_DECIMAL = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class ShareSet:
    shares: tuple[Share, ...]
    k: int
    declared_n: Optional[int] = None

    @property
    def n(self) -> int:
        return len(self.shares)


def _read_int(keys: Mapping[str, Any], name: str) -> Optional[int]:
    raw = keys.get(name)
    if raw is None:
        return None
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if isinstance(raw, str) and _DECIMAL.fullmatch(raw.strip()):
        return int(raw.strip())
    raise DocumentError(f"keys.{name} must be an integer, got {raw!r}")


def _read_share(key: str, entry: Any) -> Share:
    if not isinstance(entry, Mapping):
        raise DocumentError(f"Share {key} must be a mapping with 'base' and 'value'")
    try:
        base = entry["base"]
        value = entry["value"]
    except KeyError as exc:
        raise DocumentError(f"Share {key} is missing {exc.args[0]!r}") from exc
    return Share(int(key), decode_digits(str(value), base))


def load_document(document: Mapping[str, Any]) -> ShareSet:
    if not isinstance(document, Mapping):
        raise DocumentError("Share document must be a mapping")
    keys = document.get("keys")
    if not isinstance(keys, Mapping):
        raise DocumentError("Share document has no 'keys' section")
    k = _read_int(keys, "k")
    if k is None or k < 1:
        raise DocumentError(f"keys.k must be a positive integer, got {keys.get('k')!r}")
    declared_n = _read_int(keys, "n")

    seen: dict[int, str] = {}
    parsed = []
    for key, entry in document.items():
        key = str(key)
        if not _DECIMAL.fullmatch(key):
            continue
        share = _read_share(key, entry)
        if share.x in seen:
            raise DocumentError(f"Share keys {seen[share.x]!r} and {key!r} both give x={share.x}")
        seen[share.x] = key
        parsed.append(share)
    shares = sort_shares(parsed)
    if declared_n is not None and declared_n != len(shares):
        _logger.warning("document declares n=%d but contains %d shares", declared_n, len(shares))
    return ShareSet(shares=shares, k=k, declared_n=declared_n)


def load_file(path: str | os.PathLike[str]) -> ShareSet:
    """Read a JSON or YAML share document from ``path``."""
    p = Path(path)
    text = p.read_text(encoding="utf-8")
    try:
        if p.suffix.lower() in (".yaml", ".yml"):
            document = yaml.safe_load(text)
        else:
            document = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise DocumentError(f"Cannot parse {p}: {exc}") from exc
    # YAML turns unquoted x keys into ints.
    if isinstance(document, Mapping):
        document = {str(key): value for key, value in document.items()}
    return load_document(document)


def recover_from_document(document: Mapping[str, Any], **options: Any) -> Secret:
    share_set = load_document(document)
    if share_set.n < share_set.k:
        raise InsufficientSharesError(share_set.n, share_set.k)
    return select_secret(share_set.shares, share_set.k, **options)


__all__ = ["ShareSet", "load_document", "load_file", "recover_from_document"]
