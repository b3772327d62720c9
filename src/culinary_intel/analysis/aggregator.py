"""
aggregator.py

Purpose:
    Combine per-ingredient profiles into one dish profile.

      mean_flavor_profile     : unweighted mean of the 5-axis taste profile
      weighted_smaakprofiel   : weighted mean of the mouthfeel / richness profile

    Both are permutation invariant and return the zero profile for empty
    input. Division by zero is guarded, never raised.
"""
from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from culinary_intel.models.ingredient import FlavorProfile
from culinary_intel.models.smaakprofiel import (
    IngredientSmaakprofiel,
    Mondgevoel,
    Smaakprofiel,
    Smaakrijkdom,
    clamp01,
)


def mean_flavor_profile(profiles: Iterable[FlavorProfile]) -> FlavorProfile:
    items = list(profiles)
    if not items:
        return FlavorProfile.zero()
    total = FlavorProfile.zero()
    for p in items:
        total = total + p
    return total / len(items)


def normalize_mondgevoel(m: Mondgevoel) -> Mondgevoel:
    """Scale strak/filmend/droog down so that they sum to at most 1."""
    total = m.total
    if total > 1.0:
        return m / total
    return m


def weighted_smaakprofiel(items: Sequence[Tuple[Smaakprofiel, int]]) -> Smaakprofiel:
    total_weight = sum(max(0, w) for _, w in items)
    if not items or total_weight == 0:
        return Smaakprofiel.zero()

    acc = Smaakprofiel.zero()
    for profile, weight in items:
        if weight <= 0:
            continue
        acc = acc + profile * (weight / total_weight)

    r = acc.smaakrijkdom
    return Smaakprofiel(
        normalize_mondgevoel(acc.mondgevoel),
        Smaakrijkdom(gehalte=clamp01(r.gehalte), type=clamp01(r.type)),
    )


def composition_profile(members: Iterable[IngredientSmaakprofiel]) -> Smaakprofiel:
    pairs: List[Tuple[Smaakprofiel, int]] = [
        (m.smaakprofiel, m.weight) for m in members if not m.ingredient.is_placeholder
    ]
    return weighted_smaakprofiel(pairs)
