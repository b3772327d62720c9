"""
predicates.py

Purpose:
    Which catalog ingredients can close which gap, and how to explain it.

    Each element type maps to a (predicate, reason template) pair. Keyword
    lists match against the lowercased canonical name.
"""
from __future__ import annotations

from typing import Callable, Dict, Iterable, Tuple

from culinary_intel.models.analysis import AnyElement, BalanceElement, ElementType
from culinary_intel.models.ingredient import (
    CRUNCH_TEXTURES,
    Ingredient,
    IngredientRole,
    MoleculeType,
    MouthfeelCategory,
)

Predicate = Callable[[Ingredient], bool]

UMAMI_KEYWORDS = (
    "parmesan", "soy sauce", "miso", "tomato", "mushroom", "anchovy",
    "fish sauce", "worcestershire", "aged cheese", "seaweed", "bonito",
    "yeast extract",
)
ACID_KEYWORDS = (
    "lemon", "lime", "vinegar", "tomato", "wine", "yogurt", "citrus",
    "orange", "tamarind", "pickle",
)
FRESH_KEYWORDS = (
    "parsley", "cilantro", "basil", "mint", "dill", "chive", "green onion",
    "scallion", "microgreen", "sprout",
)
RICH_KEYWORDS = (
    "butter", "cream", "oil", "cheese", "avocado", "coconut", "nut", "egg yolk",
)
STRAK_KEYWORDS = ("lemon", "lime", "vinegar", "citrus")
FILMEND_KEYWORDS = ("butter", "cream", "oil")


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    t = (text or "").lower()
    return any(k in t for k in keywords)


def _has_aroma(ing: Ingredient, *aromas: str) -> bool:
    return bool(ing.aroma_categories & set(aromas))


def _crunchy(ing: Ingredient) -> bool:
    return bool(ing.textures & CRUNCH_TEXTURES)


# ---------------------------------------------------------------------------
# Five-taste (gustatory) gaps
# ---------------------------------------------------------------------------
GUSTATORY_PREDICATES: Dict[AnyElement, Tuple[Predicate, str]] = {
    ElementType.CARRIER: (
        lambda i: i.can_be_carrier,
        "{name} can carry the dish as its main element",
    ),
    ElementType.UMAMI: (
        lambda i: i.flavor_profile.umami >= 0.5 or _contains_any(i.name, UMAMI_KEYWORDS),
        "{name} adds savory depth (umami)",
    ),
    ElementType.ACID: (
        lambda i: i.flavor_profile.sourness >= 0.5 or _contains_any(i.name, ACID_KEYWORDS),
        "{name} adds brightness and acidity",
    ),
    ElementType.TEXTURE: (
        _crunchy,
        "{name} adds texture contrast",
    ),
    ElementType.CRUNCH: (
        _crunchy,
        "{name} adds crunch",
    ),
    ElementType.FRESHNESS: (
        lambda i: i.role in (IngredientRole.FINISHING, IngredientRole.ACCENT)
        or _has_aroma(i, "green", "fresh")
        or _contains_any(i.name, FRESH_KEYWORDS),
        "{name} adds a fresh finish",
    ),
    ElementType.RICHNESS: (
        lambda i: i.molecule_type == MoleculeType.FAT or _contains_any(i.name, RICH_KEYWORDS),
        "{name} adds richness and body",
    ),
}


# ---------------------------------------------------------------------------
# Mouthfeel / richness gaps
# ---------------------------------------------------------------------------
MOUTHFEEL_PREDICATES: Dict[AnyElement, Tuple[Predicate, str]] = {
    BalanceElement.STRAK: (
        lambda i: i.flavor_profile.sourness >= 0.5 or _contains_any(i.name, STRAK_KEYWORDS),
        "{name} adds tightness (acidity) to cut through richness",
    ),
    BalanceElement.FILMEND: (
        lambda i: i.molecule_type == MoleculeType.FAT
        or i.mouthfeel == MouthfeelCategory.COATING
        or i.flavor_profile.umami >= 0.5
        or _contains_any(i.name, FILMEND_KEYWORDS),
        "{name} adds a coating, rounding element",
    ),
    BalanceElement.DROOG: (
        lambda i: _crunchy(i)
        or i.mouthfeel == MouthfeelCategory.DRY
        or i.molecule_type == MoleculeType.CARBOHYDRATE,
        "{name} adds a dry, crisp texture",
    ),
    BalanceElement.FRIS: (
        lambda i: _has_aroma(i, "green", "fresh", "citrus") or i.role == IngredientRole.FINISHING,
        "{name} adds freshness",
    ),
    BalanceElement.RIJP: (
        lambda i: _has_aroma(i, "roasted", "caramel", "earthy") or i.flavor_profile.umami >= 0.5,
        "{name} adds ripe, deep flavour",
    ),
    BalanceElement.SMAAKGEHALTE: (
        lambda i: (i.aroma_intensity or 0.0) >= 0.7
        or i.flavor_profile.umami >= 0.5
        or i.role == IngredientRole.ACCENT,
        "{name} boosts flavour intensity",
    ),
}
