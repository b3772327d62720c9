# src/culinary_intel/models/smaakprofiel.py
from __future__ import annotations

"""
smaakprofiel.py

Purpose:
    Mouthfeel / flavour-richness profile of a single ingredient (optionally
    for a specific cooking method) and of a whole dish.

      Mondgevoel   : strak (tight/astringent), filmend (coating), droog (dry)
      Smaakrijkdom : gehalte (intensity), type (0 = fresh .. 1 = ripe)

    All axes live in [0, 1]. Arithmetic (+, /, *) is pointwise so that profiles
    can be weighted and averaged by analysis.aggregator.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Tuple

from culinary_intel.models.ingredient import Ingredient, IngredientRole

if TYPE_CHECKING:
    from culinary_intel.cooking.methods import CookingMethod


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def _num(row: Dict[str, object], *keys: str, default: float = 0.0) -> float:
    for key in keys:
        value = row.get(key)
        if value is None:
            continue
        try:
            return float(value)
        except (TypeError, ValueError):
            continue
    return default


@dataclass(frozen=True)
class Mondgevoel:
    strak: float = 0.0
    filmend: float = 0.0
    droog: float = 0.0

    def __add__(self, other: "Mondgevoel") -> "Mondgevoel":
        return Mondgevoel(self.strak + other.strak, self.filmend + other.filmend, self.droog + other.droog)

    def __mul__(self, factor: float) -> "Mondgevoel":
        return Mondgevoel(self.strak * factor, self.filmend * factor, self.droog * factor)

    def __truediv__(self, divisor: float) -> "Mondgevoel":
        if divisor == 0:
            return Mondgevoel()
        return Mondgevoel(self.strak / divisor, self.filmend / divisor, self.droog / divisor)

    @property
    def total(self) -> float:
        return self.strak + self.filmend + self.droog

    @property
    def strak_filmend_ratio(self) -> float:
        """strak / filmend; 10.0 sentinel when only strak is present, 0.0 when neither."""
        if self.filmend == 0:
            return 10.0 if self.strak > 0 else 0.0
        return self.strak / self.filmend

    @property
    def dominant(self) -> str:
        if self.strak >= self.filmend and self.strak >= self.droog:
            return "strak"
        if self.filmend >= self.droog:
            return "filmend"
        return "droog"

    @property
    def is_balanced(self) -> bool:
        values = (self.strak, self.filmend, self.droog)
        avg = sum(values) / 3
        return (max(values) - avg) < 0.3


@dataclass(frozen=True)
class Smaakrijkdom:
    gehalte: float = 0.0
    type: float = 0.5

    def __add__(self, other: "Smaakrijkdom") -> "Smaakrijkdom":
        return Smaakrijkdom(self.gehalte + other.gehalte, self.type + other.type)

    def __mul__(self, factor: float) -> "Smaakrijkdom":
        return Smaakrijkdom(self.gehalte * factor, self.type * factor)

    def __truediv__(self, divisor: float) -> "Smaakrijkdom":
        if divisor == 0:
            return Smaakrijkdom(0.0, 0.0)
        return Smaakrijkdom(self.gehalte / divisor, self.type / divisor)

    @property
    def intensity_description(self) -> str:
        if self.gehalte > 0.7:
            return "intense"
        if self.gehalte > 0.4:
            return "moderate"
        return "light"

    @property
    def type_description(self) -> str:
        if self.type < 0.3:
            return "fresh"
        if self.type < 0.7:
            return "neutral"
        return "ripe"


@dataclass(frozen=True)
class Smaakprofiel:
    mondgevoel: Mondgevoel = field(default_factory=Mondgevoel)
    smaakrijkdom: Smaakrijkdom = field(default_factory=Smaakrijkdom)

    @classmethod
    def zero(cls) -> "Smaakprofiel":
        """Identity of the weighted aggregate: every axis 0."""
        return cls(Mondgevoel(), Smaakrijkdom(0.0, 0.0))

    @classmethod
    def from_row(cls, row: Optional[Dict[str, object]]) -> "Smaakprofiel":
        """Build from a flavor_profiles row (or any dict with the same keys)."""
        if not row:
            return cls()
        return cls(
            Mondgevoel(
                strak=_num(row, "mondgevoel_strak", "strak"),
                filmend=_num(row, "mondgevoel_filmend", "filmend"),
                droog=_num(row, "mondgevoel_droog", "droog"),
            ),
            Smaakrijkdom(
                gehalte=_num(row, "smaakgehalte", "gehalte"),
                type=_num(row, "smaaktype", "type", default=0.5),
            ),
        )

    def to_row(self) -> Dict[str, float]:
        return {
            "mondgevoel_strak": self.mondgevoel.strak,
            "mondgevoel_filmend": self.mondgevoel.filmend,
            "mondgevoel_droog": self.mondgevoel.droog,
            "smaakgehalte": self.smaakrijkdom.gehalte,
            "smaaktype": self.smaakrijkdom.type,
        }

    def __add__(self, other: "Smaakprofiel") -> "Smaakprofiel":
        return Smaakprofiel(self.mondgevoel + other.mondgevoel, self.smaakrijkdom + other.smaakrijkdom)

    def __mul__(self, factor: float) -> "Smaakprofiel":
        return Smaakprofiel(self.mondgevoel * factor, self.smaakrijkdom * factor)

    def __truediv__(self, divisor: float) -> "Smaakprofiel":
        return Smaakprofiel(self.mondgevoel / divisor, self.smaakrijkdom / divisor)

    @property
    def description(self) -> str:
        return (
            f"{self.smaakrijkdom.intensity_description}, "
            f"{self.smaakrijkdom.type_description}, "
            f"{self.mondgevoel.dominant}"
        )


DEFAULT_ROLE_WEIGHTS: Dict[IngredientRole, int] = {
    IngredientRole.CARRIER: 100,
    IngredientRole.SUPPORTING: 25,
    IngredientRole.ACCENT: 15,
    IngredientRole.FINISHING: 10,
}


def default_weight_for_role(role: IngredientRole) -> int:
    return DEFAULT_ROLE_WEIGHTS.get(role, DEFAULT_ROLE_WEIGHTS[IngredientRole.SUPPORTING])


@dataclass(frozen=True)
class IngredientSmaakprofiel:
    """One member of a composition: ingredient + resolved profile + weight."""

    ingredient: Ingredient
    smaakprofiel: Smaakprofiel
    cooking_method: Optional["CookingMethod"] = None
    weight: int = 25

    @classmethod
    def for_ingredient(
        cls,
        ingredient: Ingredient,
        smaakprofiel: Smaakprofiel,
        cooking_method: Optional["CookingMethod"] = None,
        weight: Optional[int] = None,
    ) -> "IngredientSmaakprofiel":
        if weight is None:
            weight = default_weight_for_role(ingredient.role)
        return cls(ingredient, smaakprofiel, cooking_method, weight)


@dataclass(frozen=True)
class Composition:
    """Caller-owned, immutable list of composition members."""

    members: Tuple[IngredientSmaakprofiel, ...] = ()

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[IngredientSmaakprofiel]:
        return iter(self.members)

    @property
    def ingredient_ids(self) -> List[str]:
        return [m.ingredient.id for m in self.members]

    @property
    def ingredients(self) -> List[Ingredient]:
        return [m.ingredient for m in self.members]

    def get(self, ingredient_id: str) -> Optional[IngredientSmaakprofiel]:
        for m in self.members:
            if m.ingredient.id == ingredient_id:
                return m
        return None

    def with_member(self, member: IngredientSmaakprofiel) -> "Composition":
        """Add, or replace in place when the ingredient is already present."""
        ing_id = member.ingredient.id
        if self.get(ing_id) is None:
            return Composition(self.members + (member,))
        return Composition(tuple(member if m.ingredient.id == ing_id else m for m in self.members))

    def without(self, ingredient_id: str) -> "Composition":
        return Composition(tuple(m for m in self.members if m.ingredient.id != ingredient_id))
