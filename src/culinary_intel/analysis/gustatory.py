"""
gustatory.py

Purpose:
    Five-taste analysis of a dish: carrier detection, texture variety, missing
    elements and an overall 0..100 score.

    Placeholder ingredients (unmatched names) are filtered out by the caller
    before any of these functions run.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from culinary_intel.models.analysis import ElementType, MissingElement, Priority, TextureAnalysis
from culinary_intel.models.ingredient import (
    CRUNCH_TEXTURES,
    FlavorProfile,
    Ingredient,
    IngredientRole,
    TextureCategory,
)

UMAMI_LOW = 0.3
SOURNESS_LOW = 0.2
CRUNCH_MIN_INGREDIENTS = 3
FRESHNESS_MIN_INGREDIENTS = 2

FRESH_AROMAS = frozenset({"green", "fresh"})


def identify_carrier(ingredients: Sequence[Ingredient]) -> Optional[Ingredient]:
    for ing in ingredients:
        if ing.role == IngredientRole.CARRIER:
            return ing
    for ing in ingredients:
        if ing.can_be_carrier:
            return ing
    return None


def analyze_textures(ingredients: Sequence[Ingredient]) -> TextureAnalysis:
    textures: List[TextureCategory] = []
    mouthfeels = []
    for ing in ingredients:
        for t in sorted(ing.textures, key=lambda t: t.value):
            if t not in textures:
                textures.append(t)
        if ing.mouthfeel not in mouthfeels:
            mouthfeels.append(ing.mouthfeel)

    has_crunch = any(t in CRUNCH_TEXTURES for t in textures)
    return TextureAnalysis(
        textures=textures,
        mouthfeels=mouthfeels,
        has_crispy_creamy=has_crunch and TextureCategory.CREAMY in textures,
        has_variety=len(textures) >= 2,
        score=min(1.0, len(textures) / 4.0),
    )


def identify_missing_elements(
    profile: FlavorProfile,
    textures: TextureAnalysis,
    carrier: Optional[Ingredient],
    ingredients: Sequence[Ingredient],
) -> List[MissingElement]:
    """
    Flags in priority order. Acid and texture need at least one ingredient to
    judge; crunch and freshness only apply once the dish has a few components.
    """
    missing: List[MissingElement] = []
    count = len(ingredients)

    if carrier is None:
        missing.append(MissingElement(
            ElementType.CARRIER,
            "No main ingredient (carrier) to build the dish around",
            Priority.HIGH,
        ))
    if profile.umami < UMAMI_LOW:
        missing.append(MissingElement(
            ElementType.UMAMI,
            "Low umami: the dish lacks savory depth",
            Priority.HIGH,
        ))
    if count > 0 and profile.sourness < SOURNESS_LOW:
        missing.append(MissingElement(
            ElementType.ACID,
            "Low acidity: add brightness to balance the flavors",
            Priority.MEDIUM,
        ))
    if count > 0 and not textures.has_variety:
        missing.append(MissingElement(
            ElementType.TEXTURE,
            "Little texture contrast between the ingredients",
            Priority.MEDIUM,
        ))
    if count >= CRUNCH_MIN_INGREDIENTS and not any(t in CRUNCH_TEXTURES for t in textures.textures):
        missing.append(MissingElement(
            ElementType.CRUNCH,
            "Nothing crispy or crunchy in the dish",
            Priority.LOW,
        ))
    if count >= FRESHNESS_MIN_INGREDIENTS and not any(
        ing.role == IngredientRole.FINISHING or ing.aroma_categories & FRESH_AROMAS
        for ing in ingredients
    ):
        missing.append(MissingElement(
            ElementType.FRESHNESS,
            "No fresh finishing element",
            Priority.LOW,
        ))
    return missing


@dataclass(frozen=True)
class ScoringRubric:
    no_carrier: int = 25
    low_umami: int = 15
    low_acid: int = 10
    no_texture_variety: int = 10
    # Per-flag deductions applied on top of the above when enabled
    penalize_missing_flags: bool = False
    per_flag_high: int = 10
    per_flag_medium: int = 5
    per_flag_low: int = 2


_BASE_DEDUCTIONS = {
    ElementType.CARRIER: "no_carrier",
    ElementType.UMAMI: "low_umami",
    ElementType.ACID: "low_acid",
    ElementType.TEXTURE: "no_texture_variety",
}


def calculate_overall_score(missing: Sequence[MissingElement], rubric: Optional[ScoringRubric] = None) -> int:
    rubric = rubric or ScoringRubric()
    score = 100
    present = {m.element_type for m in missing}
    for element, attr in _BASE_DEDUCTIONS.items():
        if element in present:
            score -= getattr(rubric, attr)

    if rubric.penalize_missing_flags:
        per_flag = {
            Priority.HIGH: rubric.per_flag_high,
            Priority.MEDIUM: rubric.per_flag_medium,
            Priority.LOW: rubric.per_flag_low,
        }
        for m in missing:
            score -= per_flag[m.priority]
    return max(0, min(100, score))
