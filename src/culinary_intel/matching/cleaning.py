# src/culinary_intel/matching/cleaning.py
from __future__ import annotations

"""
cleaning.py

Purpose:
    Deterministic normalization of free-text ingredient names before they
    are matched against the catalog.
"""

import re
from typing import List, Optional

_TOKEN_SPLIT = re.compile(r"[\s,\-]+")
MIN_TOKEN_LENGTH = 3


def normalize_name(name: Optional[str]) -> str:
    if not isinstance(name, str):
        return ""
    t = name.replace("\r", " ").replace("\n", " ")
    t = re.sub(r"\s+", " ", t)
    return t.strip().lower()


def name_tokens(name: Optional[str], min_length: int = MIN_TOKEN_LENGTH) -> List[str]:
    """Split on whitespace / comma / hyphen; keep tokens of at least min_length chars."""
    return [w for w in _TOKEN_SPLIT.split(normalize_name(name)) if len(w) >= min_length]
