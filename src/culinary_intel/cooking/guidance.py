"""
guidance.py

Purpose:
    Human-readable notes on how a cooking method changes an ingredient.
    Uses the recorded CookingEffect when one exists, otherwise general rules
    by molecule type and culinary role.
"""
from __future__ import annotations

from typing import List, Optional, Union

from culinary_intel.cooking.methods import CookingEffect, CookingMethod
from culinary_intel.cooking.sources import CookingEffectSource
from culinary_intel.logging_utils import get_logger
from culinary_intel.models.ingredient import Ingredient, IngredientRole, MoleculeType

logger = get_logger(__name__)

MODULE_PURPOSE = "Describe how a cooking method changes an ingredient"

_HIGH_HEAT = (CookingMethod.ROAST, CookingMethod.GRILL)
_SLOW_WET = (CookingMethod.BRAISE, CookingMethod.STEW)
_BROWNING_CARB = (CookingMethod.ROAST, CookingMethod.FRY, CookingMethod.DEEP_FRY, CookingMethod.BAKE)
_GENTLE_WET = (CookingMethod.BOIL, CookingMethod.STEAM, CookingMethod.POACH, CookingMethod.BLANCH)


def format_effect_guidance(ingredient: Ingredient, effect: CookingEffect) -> str:
    parts = [f"{ingredient.name} ({effect.method_name}):"]

    if effect.flavor_delta is not None:
        changes = []
        if effect.flavor_delta.umami > 0.1:
            changes.append(f"+{effect.flavor_delta.umami * 100:.0f}% umami")
        if effect.flavor_delta.sweetness > 0.1:
            changes.append(f"+{effect.flavor_delta.sweetness * 100:.0f}% sweetness")
        if changes:
            parts.append(f"  Flavor: {', '.join(changes)}")

    if effect.aroma_categories_added:
        parts.append(f"  Aroma: Adds {', '.join(effect.aroma_categories_added)}")
    if effect.aroma_categories_removed:
        parts.append(f"  Aroma: Removes {', '.join(effect.aroma_categories_removed)}")
    if effect.texture_categories_added:
        parts.append(f"  Texture: Becomes {', '.join(effect.texture_categories_added)}")

    if effect.maillard_contribution > 0.5:
        parts.append("  Maillard reaction: Strong browning and umami development")
    if effect.caramelization_contribution > 0.5:
        parts.append("  Caramelization: Significant sweetness and golden color")

    if effect.optimal_temperature is not None:
        parts.append(f"  Optimal: {effect.optimal_temperature}°C")
    if effect.optimal_time_min is not None:
        parts.append(f"  Time: {effect.optimal_time_min} minutes")
    return "\n".join(parts)


def general_guidance(ingredient: Ingredient, method: CookingMethod) -> str:
    parts: List[str] = [f"{ingredient.name} ({method.label}):"]
    mt = ingredient.molecule_type

    if mt == MoleculeType.PROTEIN:
        if method in _HIGH_HEAT:
            parts.append("  Use high heat (180-220°C) for Maillard reaction and browning")
            parts.append("  Develops umami and savory flavors")
            parts.append("  Texture: Crispy exterior, tender interior")
        elif method in _SLOW_WET:
            parts.append("  Use low heat (80-100°C) for slow breakdown of collagen")
            parts.append("  Results in very tender, falling-apart texture")
    elif mt == MoleculeType.CARBOHYDRATE:
        if method in _BROWNING_CARB:
            parts.append("  Develops caramelization and crispy texture")
            parts.append("  Sweetness increases with browning")
        elif method in _GENTLE_WET:
            parts.append("  Gelatinizes starch, becomes tender")
            parts.append("  Preserves structure better with steaming")
    elif mt == MoleculeType.FAT:
        parts.append("  Melts and carries flavors")
        parts.append("  Creates richness and mouthfeel")
    elif mt == MoleculeType.WATER:
        if method in _HIGH_HEAT:
            parts.append("  Loses moisture, concentrates flavors")
            parts.append("  Can develop browning and caramelization")
        elif method == CookingMethod.STEAM:
            parts.append("  Preserves freshness and structure")
            parts.append("  Minimal flavor loss")

    if ingredient.role == IngredientRole.CARRIER:
        parts.append("  Main element: Cook until properly done (check doneness)")
    elif ingredient.role == IngredientRole.FINISHING:
        parts.append("  Finishing element: Add at the end to preserve freshness")
    return "\n".join(parts)


def cooking_guidance(
    ingredient: Ingredient,
    cooking_method: Union[CookingMethod, str, None],
    source: Optional[CookingEffectSource] = None,
) -> str:
    method = CookingMethod.parse(cooking_method)
    effect = None
    if source is not None and method not in (CookingMethod.RAW, CookingMethod.UNKNOWN):
        try:
            effect = source.cooking_effect(ingredient.id, method)
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "Cooking effect lookup failed for %s (%s): %r",
                ingredient.id,
                method.value,
                exc,
                extra={
                    "invoking_func": "cooking_guidance",
                    "invoking_purpose": MODULE_PURPOSE,
                    "next_step": "Fall back to general guidance",
                },
            )
    if effect is not None:
        return format_effect_guidance(ingredient, effect)
    return general_guidance(ingredient, method)
