"""
resolver.py

Purpose:
    Resolve the Smaakprofiel of one ingredient under a cooking method.

    Order of preference:
      1. raw / no method         -> stored base profile, else heuristic
      2. precomputed method row  -> returned verbatim
      3. method delta            -> base + delta (clamped, gehalte unchanged)
      4. nothing recorded        -> base profile

    resolve() never raises. Every storage failure is logged and the resolver
    degrades to the best approximation it has (base -> heuristic -> neutral).
"""
from __future__ import annotations

from typing import Optional, Union

from culinary_intel.catalog.store import IngredientCatalog
from culinary_intel.cooking.heuristics import derive_base_profile
from culinary_intel.cooking.methods import CookingMethod, MouthfeelDelta
from culinary_intel.cooking.sources import CookingEffectSource
from culinary_intel.logging_utils import get_logger
from culinary_intel.models.ingredient import Ingredient
from culinary_intel.models.smaakprofiel import Mondgevoel, Smaakprofiel, Smaakrijkdom, clamp01

logger = get_logger(__name__)

MODULE_PURPOSE = "Resolve per-ingredient mouthfeel profile for a cooking method"


def apply_delta(base: Smaakprofiel, delta: MouthfeelDelta) -> Smaakprofiel:
    m = base.mondgevoel
    r = base.smaakrijkdom
    return Smaakprofiel(
        Mondgevoel(
            strak=clamp01(m.strak + delta.strak),
            filmend=clamp01(m.filmend + delta.filmend),
            droog=clamp01(m.droog + delta.droog),
        ),
        Smaakrijkdom(gehalte=r.gehalte, type=clamp01(r.type + delta.smaaktype)),
    )


class CookingEffectResolver:
    def __init__(self, source: CookingEffectSource, catalog: Optional[IngredientCatalog] = None) -> None:
        self.source = source
        self.catalog = catalog

    def _warn(self, func: str, msg: str, ingredient_id: str, exc: Optional[BaseException], next_step: str) -> None:
        logger.warning(
            "%s for ingredient %s: %r",
            msg,
            ingredient_id,
            exc,
            extra={
                "invoking_func": func,
                "invoking_purpose": MODULE_PURPOSE,
                "next_step": next_step,
                "resolution": "Check flavor_profiles / ingredient_cooking_effects rows",
            },
        )

    def _heuristic(self, ingredient_id: str, ingredient: Optional[Ingredient]) -> Smaakprofiel:
        if ingredient is None and self.catalog is not None:
            try:
                ingredient = self.catalog.by_id(ingredient_id)
            except Exception as exc:  # noqa: BLE001
                self._warn("_heuristic", "Catalog lookup failed", ingredient_id, exc, "Return neutral profile")
                ingredient = None
        if ingredient is None:
            return Smaakprofiel()
        return derive_base_profile(ingredient)

    def base_profile(self, ingredient_id: str, ingredient: Optional[Ingredient] = None) -> Smaakprofiel:
        """Stored base (raw) profile, or a heuristic derivation when none is stored."""
        if ingredient is not None and ingredient.is_placeholder:
            return Smaakprofiel.zero()
        try:
            stored = self.source.base_profile(ingredient_id)
        except Exception as exc:  # noqa: BLE001
            self._warn("base_profile", "Base profile lookup failed", ingredient_id, exc, "Derive heuristic profile")
            stored = None
        if stored is not None:
            return stored
        logger.debug(
            "No stored base profile for %s; deriving heuristically",
            ingredient_id,
            extra={"invoking_func": "base_profile", "invoking_purpose": MODULE_PURPOSE},
        )
        return self._heuristic(ingredient_id, ingredient)

    def resolve(
        self,
        ingredient_id: str,
        cooking_method: Union[CookingMethod, str, None] = None,
        ingredient: Optional[Ingredient] = None,
    ) -> Smaakprofiel:
        method = CookingMethod.parse(cooking_method)
        base = self.base_profile(ingredient_id, ingredient)
        if method == CookingMethod.RAW or (ingredient is not None and ingredient.is_placeholder):
            return base
        if method == CookingMethod.UNKNOWN:
            logger.warning(
                "Unrecognised cooking method %r for %s; using base profile",
                cooking_method,
                ingredient_id,
                extra={
                    "invoking_func": "resolve",
                    "invoking_purpose": MODULE_PURPOSE,
                    "next_step": "Return base profile",
                    "resolution": "Add the method name to CookingMethod aliases",
                },
            )
            return base

        try:
            precomputed = self.source.method_profile(ingredient_id, method)
        except Exception as exc:  # noqa: BLE001
            self._warn("resolve", f"Method profile lookup ({method.value}) failed", ingredient_id, exc, "Return base profile")
            return base
        if precomputed is not None:
            return precomputed

        try:
            delta = self.source.delta(ingredient_id, method)
        except Exception as exc:  # noqa: BLE001
            self._warn("resolve", f"Delta lookup ({method.value}) failed", ingredient_id, exc, "Return base profile")
            return base
        if delta is None:
            return base
        return apply_delta(base, delta)
