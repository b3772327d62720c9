# src/culinary_intel/models/ingredient.py
from __future__ import annotations

"""
ingredient.py

Purpose:
    Immutable ingredient reference data and the 5-axis taste profile.

    Ingredients come from the catalog (see catalog.parsing) and are never
    mutated at runtime. Placeholder ingredients stand in for names that could
    not be matched; they carry a zero taste profile and are excluded from
    flavor math.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Tuple

TASTE_AXES: Tuple[str, ...] = ("sweetness", "saltiness", "sourness", "bitterness", "umami")


class IngredientRole(str, Enum):
    CARRIER = "carrier"
    SUPPORTING = "supporting"
    ACCENT = "accent"
    FINISHING = "finishing"


class MoleculeType(str, Enum):
    WATER = "water"
    FAT = "fat"
    CARBOHYDRATE = "carbohydrate"
    PROTEIN = "protein"
    MIXED = "mixed"


class TextureCategory(str, Enum):
    CRISPY = "crispy"
    CREAMY = "creamy"
    TENDER = "tender"
    CHEWY = "chewy"
    SILKY = "silky"
    CRUNCHY = "crunchy"
    SOFT = "soft"
    FIRM = "firm"


class MouthfeelCategory(str, Enum):
    ASTRINGENT = "astringent"
    COATING = "coating"
    DRY = "dry"
    REFRESHING = "refreshing"
    RICH = "rich"


CRUNCH_TEXTURES = frozenset({TextureCategory.CRISPY, TextureCategory.CRUNCHY})


@dataclass(frozen=True)
class FlavorProfile:
    """Five basic tastes, each 0..1."""

    sweetness: float = 0.0
    saltiness: float = 0.0
    sourness: float = 0.0
    bitterness: float = 0.0
    umami: float = 0.0

    @classmethod
    def zero(cls) -> "FlavorProfile":
        return cls()

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, object]]) -> "FlavorProfile":
        if not data:
            return cls()
        values = {}
        for axis in TASTE_AXES:
            try:
                values[axis] = float(data.get(axis) or 0.0)
            except (TypeError, ValueError):
                values[axis] = 0.0
        return cls(**values)

    def to_dict(self) -> Dict[str, float]:
        return {axis: getattr(self, axis) for axis in TASTE_AXES}

    def __add__(self, other: "FlavorProfile") -> "FlavorProfile":
        return FlavorProfile(*(getattr(self, a) + getattr(other, a) for a in TASTE_AXES))

    def __truediv__(self, divisor: float) -> "FlavorProfile":
        if divisor == 0:
            return FlavorProfile()
        return FlavorProfile(*(getattr(self, a) / divisor for a in TASTE_AXES))

    @property
    def dominant_taste(self) -> str:
        # ties resolve to the first axis in TASTE_AXES order
        values = self.to_dict()
        return max(TASTE_AXES, key=lambda a: values[a])

    @property
    def is_balanced(self) -> bool:
        values = list(self.to_dict().values())
        avg = sum(values) / len(values)
        return (max(values) - avg) < 0.4


@dataclass(frozen=True)
class Ingredient:
    """Catalog ingredient with culinary metadata."""

    id: str
    name: str
    name_nl: Optional[str] = None
    description: Optional[str] = None
    category_id: Optional[str] = None
    category_name: Optional[str] = None

    flavor_profile: FlavorProfile = field(default_factory=FlavorProfile)
    role: IngredientRole = IngredientRole.SUPPORTING
    molecule_type: MoleculeType = MoleculeType.MIXED
    textures: FrozenSet[TextureCategory] = frozenset()
    mouthfeel: MouthfeelCategory = MouthfeelCategory.REFRESHING
    aroma_intensity: Optional[float] = None     # None = not recorded
    aroma_categories: FrozenSet[str] = frozenset()

    # Display / supplemental metadata
    season: Tuple[str, ...] = ()
    preparation_methods: Tuple[str, ...] = ()
    culinary_uses: Tuple[str, ...] = ()
    image_url: Optional[str] = None

    is_placeholder: bool = False

    @classmethod
    def placeholder(cls, raw_name: str) -> "Ingredient":
        """Stand-in for an unmatched free-text name. Zero taste profile."""
        slug = "-".join(raw_name.lower().split()) or "blank"
        return cls(id=f"placeholder-{slug}", name=raw_name, is_placeholder=True)

    @property
    def can_be_carrier(self) -> bool:
        return self.role == IngredientRole.CARRIER or self.molecule_type in (
            MoleculeType.PROTEIN,
            MoleculeType.CARBOHYDRATE,
        )

    @property
    def provides_umami(self) -> bool:
        return self.flavor_profile.umami >= 0.5

    @property
    def provides_acidity(self) -> bool:
        return self.flavor_profile.sourness >= 0.5

    @property
    def provides_crunch(self) -> bool:
        return bool(self.textures & CRUNCH_TEXTURES)

    def names_lower(self) -> List[str]:
        """Lowercased canonical and localized names (non-empty only)."""
        out = [self.name.lower()] if self.name else []
        if self.name_nl:
            out.append(self.name_nl.lower())
        return out
