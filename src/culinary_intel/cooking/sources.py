"""
sources.py

Purpose:
    Storage for per-ingredient mouthfeel profiles and cooking-method effects.

      flavor_profiles            : base row (cooking_method_id IS NULL) and
                                   precomputed rows per (ingredient, method)
      ingredient_cooking_effects : additive deltas + descriptive effect data
      cooking_methods            : method id / name lookup

    Sources may raise; CookingEffectResolver is responsible for degrading.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from supabase import Client

from culinary_intel.cooking.methods import (
    CookingEffect,
    CookingMethod,
    CookingMethodInfo,
    MouthfeelDelta,
)
from culinary_intel.logging_utils import get_logger
from culinary_intel.models.smaakprofiel import Smaakprofiel

logger = get_logger(__name__)

MODULE_PURPOSE = "Read mouthfeel profiles and cooking effects from storage"

DELTA_COLUMNS = (
    "mondgevoel_strak_delta, mondgevoel_filmend_delta, "
    "mondgevoel_droog_delta, smaaktype_delta"
)


class CookingEffectSource:
    """Interface; every lookup returns None when nothing is stored."""

    def base_profile(self, ingredient_id: str) -> Optional[Smaakprofiel]:
        raise NotImplementedError

    def method_profile(self, ingredient_id: str, method: CookingMethod) -> Optional[Smaakprofiel]:
        raise NotImplementedError

    def delta(self, ingredient_id: str, method: CookingMethod) -> Optional[MouthfeelDelta]:
        raise NotImplementedError

    def cooking_effect(self, ingredient_id: str, method: CookingMethod) -> Optional[CookingEffect]:
        return None

    def list_methods(self) -> List[CookingMethodInfo]:
        return []


class InMemoryCookingEffectSource(CookingEffectSource):
    def __init__(
        self,
        base_profiles: Optional[Dict[str, Smaakprofiel]] = None,
        method_profiles: Optional[Dict[Tuple[str, CookingMethod], Smaakprofiel]] = None,
        deltas: Optional[Dict[Tuple[str, CookingMethod], MouthfeelDelta]] = None,
        effects: Optional[Dict[Tuple[str, CookingMethod], CookingEffect]] = None,
    ) -> None:
        self.base_profiles = dict(base_profiles or {})
        self.method_profiles = dict(method_profiles or {})
        self.deltas = dict(deltas or {})
        self.effects = dict(effects or {})

    def base_profile(self, ingredient_id: str) -> Optional[Smaakprofiel]:
        return self.base_profiles.get(ingredient_id)

    def method_profile(self, ingredient_id: str, method: CookingMethod) -> Optional[Smaakprofiel]:
        return self.method_profiles.get((ingredient_id, method))

    def delta(self, ingredient_id: str, method: CookingMethod) -> Optional[MouthfeelDelta]:
        return self.deltas.get((ingredient_id, method))

    def cooking_effect(self, ingredient_id: str, method: CookingMethod) -> Optional[CookingEffect]:
        return self.effects.get((ingredient_id, method))


class SupabaseCookingEffectSource(CookingEffectSource):
    def __init__(self, client: Client) -> None:
        self.client = client
        self._methods: Optional[Dict[CookingMethod, CookingMethodInfo]] = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _method_index(self) -> Dict[CookingMethod, CookingMethodInfo]:
        if self._methods is None:
            res = self.client.table("cooking_methods").select("*").execute()
            index: Dict[CookingMethod, CookingMethodInfo] = {}
            for row in res.data or []:
                info = CookingMethodInfo.from_row(row)
                # first row per method wins; unrecognised names are not addressable
                if info.method != CookingMethod.UNKNOWN:
                    index.setdefault(info.method, info)
            self._methods = index
            logger.info(
                "Indexed %d cooking methods",
                len(index),
                extra={"invoking_func": "_method_index", "invoking_purpose": MODULE_PURPOSE},
            )
        return self._methods

    def _method_id(self, method: CookingMethod) -> Optional[str]:
        info = self._method_index().get(method)
        return info.id if info else None

    def _first(self, table: str, columns: str, ingredient_id: str, method_id: str) -> Optional[Dict[str, Any]]:
        res = (
            self.client.table(table)
            .select(columns)
            .eq("ingredient_id", ingredient_id)
            .eq("cooking_method_id", method_id)
            .limit(1)
            .execute()
        )
        return res.data[0] if res.data else None

    # ------------------------------------------------------------------
    # Public APIs
    # ------------------------------------------------------------------
    def base_profile(self, ingredient_id: str) -> Optional[Smaakprofiel]:
        res = self.client.table("flavor_profiles").select("*").eq("ingredient_id", ingredient_id).execute()
        for row in res.data or []:
            if row.get("cooking_method_id") is None:
                return Smaakprofiel.from_row(row)
        return None

    def method_profile(self, ingredient_id: str, method: CookingMethod) -> Optional[Smaakprofiel]:
        method_id = self._method_id(method)
        if method_id is None:
            return None
        row = self._first("flavor_profiles", "*", ingredient_id, method_id)
        return Smaakprofiel.from_row(row) if row else None

    def delta(self, ingredient_id: str, method: CookingMethod) -> Optional[MouthfeelDelta]:
        method_id = self._method_id(method)
        if method_id is None:
            return None
        row = self._first("ingredient_cooking_effects", DELTA_COLUMNS, ingredient_id, method_id)
        return MouthfeelDelta.from_row(row) if row else None

    def cooking_effect(self, ingredient_id: str, method: CookingMethod) -> Optional[CookingEffect]:
        info = self._method_index().get(method)
        if info is None:
            return None
        row = self._first("ingredient_cooking_effects", "*", ingredient_id, info.id)
        return CookingEffect.from_row(row, method_name=info.name_en) if row else None

    def list_methods(self) -> List[CookingMethodInfo]:
        return list(self._method_index().values())
