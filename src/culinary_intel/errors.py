"""
errors.py

Purpose:
    Exceptions raised at the storage boundary.

    Analysis functions are total and never raise. Only catalog / cooking-effect
    sources raise, and the composition service turns CatalogUnavailable into an
    empty analysis flagged as retryable.
"""
from __future__ import annotations

from typing import Optional


class CulinaryIntelError(Exception):
    """Base class for errors raised by this package."""


class CatalogUnavailable(CulinaryIntelError):
    """The ingredient catalog could not be read (network / storage failure)."""

    retryable = True

    def __init__(self, message: str, *, source: str = "", cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.source = source
        self.cause = cause

    def __str__(self) -> str:
        base = super().__str__()
        if self.source:
            base = f"[{self.source}] {base}"
        if self.cause is not None:
            base = f"{base} ({self.cause!r})"
        return base
