"""
heuristics.py

Purpose:
    Derive a base Smaakprofiel from catalog metadata when no stored profile
    exists. One function per axis; within an axis the first matching rule wins.
"""
from __future__ import annotations

from culinary_intel.models.ingredient import (
    CRUNCH_TEXTURES,
    Ingredient,
    MoleculeType,
    MouthfeelCategory,
)
from culinary_intel.models.smaakprofiel import Mondgevoel, Smaakprofiel, Smaakrijkdom

FRESH_AROMAS = frozenset({"green", "fresh", "citrus"})
RIPE_AROMAS = frozenset({"roasted", "caramel", "earthy"})
TOASTED_AROMAS = frozenset({"toasted", "smoky"})

DEFAULT_GEHALTE = 0.3


def derive_strak(ing: Ingredient) -> float:
    fp = ing.flavor_profile
    if ing.mouthfeel == MouthfeelCategory.ASTRINGENT:
        return 0.8
    if fp.sourness > 0.5:
        return 0.7
    if fp.sourness > 0.3:
        return 0.5
    if fp.saltiness > 0.5:
        return 0.3
    return 0.1


def derive_filmend(ing: Ingredient) -> float:
    fp = ing.flavor_profile
    if ing.mouthfeel == MouthfeelCategory.COATING:
        return 0.8
    if ing.mouthfeel == MouthfeelCategory.RICH:
        return 0.7
    if ing.molecule_type == MoleculeType.FAT:
        return 0.9
    if fp.umami > 0.5:
        return 0.6
    if fp.umami > 0.3:
        return 0.4
    return 0.1


def derive_droog(ing: Ingredient) -> float:
    if ing.mouthfeel == MouthfeelCategory.DRY:
        return 0.8
    if ing.molecule_type == MoleculeType.CARBOHYDRATE:
        return 0.7 if ing.textures & CRUNCH_TEXTURES else 0.4
    return 0.1


def derive_smaaktype(ing: Ingredient) -> float:
    aromas = ing.aroma_categories
    if aromas & FRESH_AROMAS:
        return 0.2
    if aromas & RIPE_AROMAS:
        return 0.8
    if aromas & TOASTED_AROMAS:
        return 0.75
    return 0.5


def derive_gehalte(ing: Ingredient) -> float:
    if ing.aroma_intensity and ing.aroma_intensity > 0:
        return ing.aroma_intensity
    return DEFAULT_GEHALTE


def derive_base_profile(ing: Ingredient) -> Smaakprofiel:
    return Smaakprofiel(
        Mondgevoel(strak=derive_strak(ing), filmend=derive_filmend(ing), droog=derive_droog(ing)),
        Smaakrijkdom(gehalte=derive_gehalte(ing), type=derive_smaaktype(ing)),
    )
