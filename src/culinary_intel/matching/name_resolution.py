"""
name_resolution.py

Purpose:
    Map free-text ingredient names to catalog entries.

    Tiers, first hit wins:
      1. exact, case-insensitive, on canonical or localized name
      2. token: a query token (>= 3 chars) is contained in a catalog name,
         or equals one of that name's tokens
      3. substring in either direction
      4. placeholder Ingredient carrying the raw text

    resolve() always returns exactly one Ingredient per input name.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from culinary_intel.logging_utils import get_logger
from culinary_intel.matching.cleaning import name_tokens, normalize_name
from culinary_intel.models.ingredient import Ingredient

logger = get_logger(__name__)

MODULE_PURPOSE = "Map free-text ingredient names to catalog entries"


def _exact(query: str, catalog: Sequence[Ingredient]) -> Optional[Ingredient]:
    for ing in catalog:
        if query in ing.names_lower():
            return ing
    return None


def _token(query: str, catalog: Sequence[Ingredient]) -> Optional[Ingredient]:
    tokens = name_tokens(query)
    if not tokens:
        return None
    for ing in catalog:
        names = ing.names_lower()
        own_tokens = set(name_tokens(ing.name, min_length=1))
        for word in tokens:
            if any(word in n for n in names) or word in own_tokens:
                return ing
    return None


def _substring(query: str, catalog: Sequence[Ingredient]) -> Optional[Ingredient]:
    for ing in catalog:
        for n in ing.names_lower():
            if n and (n in query or query in n):
                return ing
    return None


def match_name(raw_name: str, catalog: Sequence[Ingredient]) -> Optional[Ingredient]:
    """Best catalog match for one name, or None."""
    query = normalize_name(raw_name)
    if not query:
        return None
    for tier in (_exact, _token, _substring):
        hit = tier(query, catalog)
        if hit is not None:
            return hit
    return None


def resolve(names: Sequence[str], catalog: Sequence[Ingredient]) -> List[Ingredient]:
    out: List[Ingredient] = []
    unmatched = []
    for raw in names:
        hit = match_name(raw, catalog)
        if hit is None:
            unmatched.append(raw)
            hit = Ingredient.placeholder((raw or "").strip())
        out.append(hit)

    if unmatched:
        logger.info(
            "%d of %d names unmatched: %s",
            len(unmatched),
            len(names),
            unmatched,
            extra={
                "invoking_func": "resolve",
                "invoking_purpose": MODULE_PURPOSE,
                "next_step": "Use placeholders (excluded from flavor math)",
                "resolution": "Add the ingredient or a localized name to the catalog",
            },
        )
    return out
