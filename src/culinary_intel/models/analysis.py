# src/culinary_intel/models/analysis.py
from __future__ import annotations

"""
analysis.py

Purpose:
    Derived, ephemeral result objects produced by the analysis layer.
    Nothing here is persisted.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional, Union

from culinary_intel.models.ingredient import (
    FlavorProfile,
    Ingredient,
    MouthfeelCategory,
    TextureCategory,
)


class Priority(IntEnum):
    """Sort order: HIGH first."""

    HIGH = 0
    MEDIUM = 1
    LOW = 2

    @property
    def label(self) -> str:
        return self.name.lower()


class ElementType(str, Enum):
    """Gaps detected by the 5-axis (gustatory) analysis."""

    CARRIER = "carrier"
    UMAMI = "umami"
    ACID = "acid"
    TEXTURE = "texture"
    CRUNCH = "crunch"
    FRESHNESS = "freshness"
    RICHNESS = "richness"


class BalanceElement(str, Enum):
    """Gaps detected by the mouthfeel / richness analysis."""

    STRAK = "strak"
    FILMEND = "filmend"
    DROOG = "droog"
    FRIS = "fris"
    RIJP = "rijp"
    SMAAKGEHALTE = "smaakgehalte"


AnyElement = Union[ElementType, BalanceElement]


@dataclass(frozen=True)
class MissingElement:
    element_type: AnyElement
    reason: str
    priority: Priority
    hint: Optional[str] = None


@dataclass(frozen=True)
class Suggestion:
    ingredient: Ingredient
    reason: str
    element_type: AnyElement
    priority: Priority


@dataclass
class TextureAnalysis:
    textures: List[TextureCategory] = field(default_factory=list)
    mouthfeels: List[MouthfeelCategory] = field(default_factory=list)
    has_crispy_creamy: bool = False
    has_variety: bool = False
    score: float = 0.0


@dataclass
class BalanceResult:
    is_balanced: bool
    strak_filmend_ratio: float
    fris_rijp_balans: float
    missing_elements: List[MissingElement] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)
    narrative: str = ""

    @property
    def balance_description(self) -> str:
        if self.is_balanced:
            return "balanced"
        high = [m for m in self.missing_elements if m.priority == Priority.HIGH]
        return "unbalanced" if high else "slightly unbalanced"


@dataclass
class CompositionAnalysis:
    ingredients: List[Ingredient] = field(default_factory=list)
    flavor_profile: FlavorProfile = field(default_factory=FlavorProfile)
    texture_analysis: TextureAnalysis = field(default_factory=TextureAnalysis)
    carrier: Optional[Ingredient] = None
    missing_elements: List[MissingElement] = field(default_factory=list)
    suggestions: List[Suggestion] = field(default_factory=list)
    overall_score: int = 0

    # Set when the catalog could not be read; the caller may retry.
    retryable: bool = False
    error: Optional[str] = None

    @classmethod
    def unavailable(cls, error: str) -> "CompositionAnalysis":
        return cls(retryable=True, error=error)

    @property
    def placeholders(self) -> List[Ingredient]:
        return [i for i in self.ingredients if i.is_placeholder]
