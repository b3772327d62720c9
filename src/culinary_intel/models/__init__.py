"""
Typed models for the culinary composition engine.

  ingredient   : Ingredient, FlavorProfile and their enums (catalog reference data)
  smaakprofiel : mouthfeel / richness profiles and composition members
  analysis     : derived result objects (missing elements, suggestions, ...)
"""
from culinary_intel.models.analysis import (
    BalanceElement,
    BalanceResult,
    CompositionAnalysis,
    ElementType,
    MissingElement,
    Priority,
    Suggestion,
    TextureAnalysis,
)
from culinary_intel.models.ingredient import (
    FlavorProfile,
    Ingredient,
    IngredientRole,
    MoleculeType,
    MouthfeelCategory,
    TextureCategory,
)
from culinary_intel.models.smaakprofiel import (
    Composition,
    IngredientSmaakprofiel,
    Mondgevoel,
    Smaakprofiel,
    Smaakrijkdom,
    default_weight_for_role,
)

__all__ = [
    "BalanceElement",
    "BalanceResult",
    "Composition",
    "CompositionAnalysis",
    "ElementType",
    "FlavorProfile",
    "Ingredient",
    "IngredientRole",
    "IngredientSmaakprofiel",
    "MissingElement",
    "MoleculeType",
    "Mondgevoel",
    "MouthfeelCategory",
    "Priority",
    "Smaakprofiel",
    "Smaakrijkdom",
    "Suggestion",
    "TextureAnalysis",
    "TextureCategory",
    "default_weight_for_role",
]
