# src/culinary_intel/cooking/methods.py
from __future__ import annotations

"""
methods.py

Purpose:
    Typed cooking methods and the records that describe what a method does
    to an ingredient.

    CookingMethod.parse() never raises: empty input is RAW, anything it cannot
    recognise is UNKNOWN. Callers treat UNKNOWN as "no method-specific data".
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from culinary_intel.models.ingredient import FlavorProfile


class CookingMethod(str, Enum):
    RAW = "raw"
    BOIL = "boil"
    STEAM = "steam"
    POACH = "poach"
    BLANCH = "blanch"
    BRAISE = "braise"
    STEW = "stew"
    ROAST = "roast"
    BAKE = "bake"
    GRILL = "grill"
    FRY = "fry"
    DEEP_FRY = "deep_fry"
    SAUTE = "saute"
    SMOKE = "smoke"
    SOUS_VIDE = "sous_vide"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()

    @classmethod
    def parse(cls, text: Optional[Any]) -> "CookingMethod":
        if isinstance(text, CookingMethod):
            return text
        if text is None:
            return cls.RAW
        t = re.sub(r"[\s\-]+", "_", str(text).strip().lower())
        if not t:
            return cls.RAW
        t = _ALIASES.get(t, t)
        try:
            return cls(t)
        except ValueError:
            return cls.UNKNOWN


# English verb forms and Dutch names seen in catalog data
_ALIASES: Dict[str, str] = {
    "rauw": "raw",
    "none": "raw",
    "boiled": "boil", "boiling": "boil", "koken": "boil",
    "steamed": "steam", "steaming": "steam", "stomen": "steam",
    "poached": "poach", "pocheren": "poach",
    "blanched": "blanch", "blancheren": "blanch",
    "braised": "braise", "braising": "braise", "smoren": "braise",
    "stewed": "stew", "stoven": "stew",
    "roasted": "roast", "roasting": "roast", "roosteren": "roast",
    "baked": "bake", "baking": "bake", "bakken": "bake",
    "grilled": "grill", "grilling": "grill", "grillen": "grill",
    "fried": "fry", "frying": "fry", "pan_fry": "fry", "pan_fried": "fry",
    "deep_fried": "deep_fry", "frituren": "deep_fry",
    "sauteed": "saute", "sauté": "saute", "sautéed": "saute",
    "smoked": "smoke", "roken": "smoke",
}


@dataclass
class CookingMethodInfo:
    """A row of the `cooking_methods` table."""

    id: str
    name_en: str
    name_nl: Optional[str] = None
    description_en: Optional[str] = None
    heat_type: Optional[str] = None
    temperature_range_min: Optional[int] = None
    temperature_range_max: Optional[int] = None

    @property
    def method(self) -> CookingMethod:
        return CookingMethod.parse(self.name_en)

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "CookingMethodInfo":
        return cls(
            id=str(row.get("id") or ""),
            name_en=str(row.get("name_en") or ""),
            name_nl=row.get("name_nl"),
            description_en=row.get("description_en"),
            heat_type=row.get("heat_type"),
            temperature_range_min=row.get("temperature_range_min"),
            temperature_range_max=row.get("temperature_range_max"),
        )


@dataclass(frozen=True)
class MouthfeelDelta:
    """Additive change a cooking method applies to a base Smaakprofiel."""

    strak: float = 0.0
    filmend: float = 0.0
    droog: float = 0.0
    smaaktype: float = 0.0

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "MouthfeelDelta":
        def num(key: str) -> float:
            try:
                return float(row.get(key) or 0.0)
            except (TypeError, ValueError):
                return 0.0

        return cls(
            strak=num("mondgevoel_strak_delta"),
            filmend=num("mondgevoel_filmend_delta"),
            droog=num("mondgevoel_droog_delta"),
            smaaktype=num("smaaktype_delta"),
        )


@dataclass
class CookingEffect:
    """Full `ingredient_cooking_effects` record, used for guidance text."""

    method_name: str
    flavor_delta: Optional[FlavorProfile] = None
    aroma_intensity_change: float = 0.0
    aroma_categories_added: List[str] = field(default_factory=list)
    aroma_categories_removed: List[str] = field(default_factory=list)
    texture_categories_added: List[str] = field(default_factory=list)
    texture_categories_removed: List[str] = field(default_factory=list)
    mouthfeel_change: Optional[str] = None
    maillard_contribution: float = 0.0
    caramelization_contribution: float = 0.0
    moisture_loss_pct: Optional[float] = None
    optimal_temperature: Optional[int] = None
    optimal_time_min: Optional[int] = None
    scientific_source: Optional[str] = None
    confidence_level: str = "medium"

    @classmethod
    def from_row(cls, row: Dict[str, Any], method_name: str = "") -> "CookingEffect":
        method_row = row.get("cooking_methods") or {}
        delta = row.get("flavor_profile_delta")
        return cls(
            method_name=method_row.get("name_en") or method_name,
            flavor_delta=FlavorProfile.from_dict(delta) if isinstance(delta, dict) else None,
            aroma_intensity_change=float(row.get("aroma_intensity_change") or 0.0),
            aroma_categories_added=[str(a) for a in row.get("aroma_categories_added") or []],
            aroma_categories_removed=[str(a) for a in row.get("aroma_categories_removed") or []],
            texture_categories_added=[str(t) for t in row.get("texture_categories_added") or []],
            texture_categories_removed=[str(t) for t in row.get("texture_categories_removed") or []],
            mouthfeel_change=row.get("mouthfeel_change"),
            maillard_contribution=float(row.get("maillard_contribution") or 0.0),
            caramelization_contribution=float(row.get("caramelization_contribution") or 0.0),
            moisture_loss_pct=row.get("moisture_loss_pct"),
            optimal_temperature=row.get("optimal_temperature"),
            optimal_time_min=row.get("optimal_time_min"),
            scientific_source=row.get("scientific_source"),
            confidence_level=str(row.get("confidence_level") or "medium"),
        )
