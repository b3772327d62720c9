# src/culinary_intel/catalog/parsing.py
from __future__ import annotations

"""
parsing.py

Purpose:
    Deterministic conversion of raw catalog rows (Supabase `ingredients`
    rows, CSV records, plain dicts) into immutable Ingredient objects.

    Rows are loosely typed: flavor_profile may be JSONB, a JSON string or flat
    columns; texture is free text in English or Dutch; list fields may be a
    list or a comma separated string. Unknown values fall back to the model
    defaults instead of raising.
"""

import json
import math
import re
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from culinary_intel.models.ingredient import (
    TASTE_AXES,
    FlavorProfile,
    Ingredient,
    IngredientRole,
    MoleculeType,
    MouthfeelCategory,
    TextureCategory,
)

# Texture keywords (English + Dutch) found in the free-text `texture` column
_TEXTURE_KEYWORDS: Dict[TextureCategory, Tuple[str, ...]] = {
    TextureCategory.CRISPY: ("crispy", "knapperig"),
    TextureCategory.CREAMY: ("creamy", "romig"),
    TextureCategory.TENDER: ("tender", "mals"),
    TextureCategory.CHEWY: ("chewy", "taai"),
    TextureCategory.SILKY: ("silky", "zijdezacht"),
    TextureCategory.CRUNCHY: ("crunchy", "krokant"),
    TextureCategory.SOFT: ("soft", "zacht"),
    TextureCategory.FIRM: ("firm", "stevig"),
}

# Category-name fallback when culinary_role is not recorded
_CARRIER_CATEGORY_WORDS = (
    "protein", "eiwit", "vlees", "vis", "meat", "fish",
    "grain", "graan", "pasta", "rice", "rijst",
)
_ACCENT_CATEGORY_WORDS = ("herb", "kruid", "spice", "specerij")

_LENIENT_PAIR = re.compile(r'\\?"?(\w+)\\?"?\s*:\s*(-?\d+(?:\.\d+)?)')


def _contains_any(text: str, keywords) -> bool:
    t = (text or "").lower()
    return any(k in t for k in keywords)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and not value.strip()


def _text(row: Dict[str, Any], *keys: str) -> Optional[str]:
    for key in keys:
        value = row.get(key)
        if not _is_missing(value):
            return str(value).strip()
    return None


def parse_string_list(value: Any) -> List[str]:
    if _is_missing(value):
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return [str(v).strip() for v in value if not _is_missing(v)]
    if isinstance(value, str):
        t = value.strip()
        if t.startswith("[") and t.endswith("]"):
            try:
                parsed = json.loads(t)
            except ValueError:
                parsed = None
            if isinstance(parsed, list):
                return [str(v).strip() for v in parsed if not _is_missing(v)]
            t = t[1:-1]
        return [p.strip().strip("'\"") for p in re.split(r"[,;]", t) if p.strip().strip("'\"")]
    return [str(value)]


def parse_flavor_profile(row: Dict[str, Any]) -> FlavorProfile:
    raw = row.get("flavor_profile")
    if isinstance(raw, dict):
        return FlavorProfile.from_dict(raw)
    if isinstance(raw, str) and raw.strip():
        try:
            parsed = json.loads(raw)
        except ValueError:
            # escaped / single-quoted JSON: pick out "axis": number pairs
            parsed = {k: float(v) for k, v in _LENIENT_PAIR.findall(raw)}
        if isinstance(parsed, dict):
            return FlavorProfile.from_dict(parsed)
        return FlavorProfile()
    # flat columns (CSV seeds)
    flat = {axis: row.get(axis) for axis in TASTE_AXES if not _is_missing(row.get(axis))}
    return FlavorProfile.from_dict(flat)


def parse_textures(value: Any) -> FrozenSet[TextureCategory]:
    if _is_missing(value):
        return frozenset()
    if isinstance(value, (list, tuple, set, frozenset)):
        value = ",".join(str(v) for v in value)
    text = str(value).lower()
    return frozenset(t for t, words in _TEXTURE_KEYWORDS.items() if _contains_any(text, words))


def parse_role(culinary_role: Optional[str], category_name: Optional[str]) -> IngredientRole:
    role = (culinary_role or "").strip().lower()
    if role in ("carrier", "accent", "finishing"):
        return IngredientRole(role)
    if _contains_any(category_name or "", _CARRIER_CATEGORY_WORDS):
        return IngredientRole.CARRIER
    if _contains_any(category_name or "", _ACCENT_CATEGORY_WORDS):
        return IngredientRole.ACCENT
    return IngredientRole.SUPPORTING


def parse_molecule_type(value: Optional[str]) -> MoleculeType:
    try:
        return MoleculeType((value or "").strip().lower())
    except ValueError:
        return MoleculeType.MIXED


def parse_mouthfeel(value: Optional[str]) -> MouthfeelCategory:
    try:
        return MouthfeelCategory((value or "").strip().lower())
    except ValueError:
        return MouthfeelCategory.REFRESHING


def parse_intensity(row: Dict[str, Any]) -> Optional[float]:
    for key in ("aroma_intensity", "intensity"):
        value = row.get(key)
        if _is_missing(value):
            continue
        try:
            return max(0.0, min(1.0, float(value)))
        except (TypeError, ValueError):
            continue
    return None


def ingredient_from_row(row: Dict[str, Any]) -> Ingredient:
    """Build an Ingredient from one catalog row."""
    category_name = _text(row, "category_name")
    return Ingredient(
        id=_text(row, "id") or "",
        name=_text(row, "name_en", "name", "name_nl") or "",
        name_nl=_text(row, "name_nl"),
        description=_text(row, "description_en", "description_nl", "description"),
        category_id=_text(row, "category_id"),
        category_name=category_name,
        flavor_profile=parse_flavor_profile(row),
        role=parse_role(_text(row, "culinary_role"), category_name),
        molecule_type=parse_molecule_type(_text(row, "molecule_type")),
        textures=parse_textures(row.get("texture")),
        mouthfeel=parse_mouthfeel(_text(row, "mouthfeel")),
        aroma_intensity=parse_intensity(row),
        aroma_categories=frozenset(a.lower() for a in parse_string_list(row.get("aroma_categories"))),
        season=tuple(parse_string_list(row.get("season_en") if not _is_missing(row.get("season_en")) else row.get("season"))),
        preparation_methods=tuple(parse_string_list(
            row.get("preparation_methods_en") if not _is_missing(row.get("preparation_methods_en"))
            else row.get("preparation_methods")
        )),
        culinary_uses=tuple(parse_string_list(
            row.get("culinary_uses_en") if not _is_missing(row.get("culinary_uses_en"))
            else row.get("culinary_uses")
        )),
        image_url=_text(row, "hero_image_url", "image_url"),
    )
