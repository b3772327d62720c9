"""
service.py

Public entry points of the composition engine.

  analyze_composition(names)   -> CompositionAnalysis   (five-taste analysis)
  get_suggestions(names)       -> [Suggestion]
  add_ingredient / remove_ingredient / set_cooking_method / clear
                               -> new Composition (inputs are never mutated)
  compute_profile(composition) -> Smaakprofiel           (weighted mouthfeel)
  analyze_balance(composition) -> BalanceResult
  suggest_for_balance(composition) -> [Suggestion]
  ingredients_in_category(id) / cooking_methods()  -> catalog and method listings

Catalog failures (CatalogUnavailable) are caught here and surfaced as an
empty, retryable result; everything below this layer is total.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Union

from culinary_intel.analysis.balance import BalanceAnalyzer
from culinary_intel.analysis.gustatory import (
    ScoringRubric,
    analyze_textures,
    calculate_overall_score,
    identify_carrier,
)
from culinary_intel.catalog.store import IngredientCatalog
from culinary_intel.composition.pipeline import (
    CompositionPipeline,
    gustatory_strategy,
    mouthfeel_strategy,
)
from culinary_intel.config import Settings
from culinary_intel.cooking import guidance
from culinary_intel.cooking.methods import CookingMethod, CookingMethodInfo
from culinary_intel.cooking.resolver import CookingEffectResolver
from culinary_intel.cooking.sources import CookingEffectSource, InMemoryCookingEffectSource
from culinary_intel.errors import CatalogUnavailable
from culinary_intel.logging_utils import get_logger
from culinary_intel.matching import name_resolution
from culinary_intel.models.analysis import BalanceResult, CompositionAnalysis, Suggestion
from culinary_intel.models.ingredient import Ingredient
from culinary_intel.models.smaakprofiel import (
    Composition,
    IngredientSmaakprofiel,
    Smaakprofiel,
)

logger = get_logger(__name__)

MODULE_PURPOSE = "Public entry points for composition analysis"


class CompositionService:
    def __init__(
        self,
        catalog: IngredientCatalog,
        effects: Optional[CookingEffectSource] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        settings = settings or Settings()
        self.catalog = catalog
        self.effects = effects or InMemoryCookingEffectSource()
        self.resolver = CookingEffectResolver(self.effects, catalog)
        self.balance = BalanceAnalyzer()
        self.rubric = ScoringRubric(penalize_missing_flags=settings.score_parity)
        self.gustatory = CompositionPipeline(
            gustatory_strategy(settings.max_suggestions, settings.suggestions_per_element)
        )
        self.mouthfeel = CompositionPipeline(
            mouthfeel_strategy(settings.suggestions_per_element, self.balance)
        )

    def _log_unavailable(self, func: str, exc: CatalogUnavailable) -> None:
        logger.error(
            "Catalog unavailable: %s",
            exc,
            extra={
                "invoking_func": func,
                "invoking_purpose": MODULE_PURPOSE,
                "next_step": "Return empty, retryable result",
                "resolution": "Retry once the catalog source is reachable",
            },
        )

    # ------------------------------------------------------------------
    # Five-taste analysis from free-text names
    # ------------------------------------------------------------------
    def analyze_composition(self, names: Sequence[str]) -> CompositionAnalysis:
        try:
            catalog = self.catalog.get()
        except CatalogUnavailable as exc:
            self._log_unavailable("analyze_composition", exc)
            return CompositionAnalysis.unavailable(str(exc))

        resolved = name_resolution.resolve(names, catalog)
        result = self.gustatory.run(resolved, catalog)
        valid = result.ingredients

        analysis = CompositionAnalysis(
            ingredients=resolved,
            flavor_profile=result.profile,
            texture_analysis=analyze_textures(valid),
            carrier=identify_carrier(valid),
            missing_elements=result.missing_elements,
            suggestions=result.suggestions,
            overall_score=calculate_overall_score(result.missing_elements, self.rubric),
        )
        logger.info(
            "Analyzed %d names: score=%d, %d gaps",
            len(names),
            analysis.overall_score,
            len(analysis.missing_elements),
            extra={"invoking_func": "analyze_composition", "invoking_purpose": MODULE_PURPOSE},
        )
        return analysis

    def get_suggestions(self, names: Sequence[str]) -> List[Suggestion]:
        return self.analyze_composition(names).suggestions

    # ------------------------------------------------------------------
    # Composition mutators (pure: always return a new Composition)
    # ------------------------------------------------------------------
    def add_ingredient(
        self,
        composition: Composition,
        ingredient: Ingredient,
        cooking_method: Union[CookingMethod, str, None] = None,
        weight: Optional[int] = None,
    ) -> Composition:
        method = CookingMethod.parse(cooking_method)
        profile = self.resolver.resolve(ingredient.id, method, ingredient=ingredient)
        member = IngredientSmaakprofiel.for_ingredient(ingredient, profile, method, weight)
        return composition.with_member(member)

    def remove_ingredient(self, composition: Composition, ingredient_id: str) -> Composition:
        return composition.without(ingredient_id)

    def set_cooking_method(
        self,
        composition: Composition,
        ingredient_id: str,
        cooking_method: Union[CookingMethod, str, None],
    ) -> Composition:
        """Re-resolve one member's profile for a new method; its weight is kept."""
        current = composition.get(ingredient_id)
        if current is None:
            return composition
        method = CookingMethod.parse(cooking_method)
        profile = self.resolver.resolve(ingredient_id, method, ingredient=current.ingredient)
        return composition.with_member(
            IngredientSmaakprofiel(current.ingredient, profile, method, current.weight)
        )

    def clear(self) -> Composition:
        return Composition()

    # ------------------------------------------------------------------
    # Mouthfeel / richness analysis of a composition
    # ------------------------------------------------------------------
    def compute_profile(self, composition: Composition) -> Smaakprofiel:
        return self.mouthfeel.run(list(composition)).profile

    def analyze_balance(self, composition: Composition) -> BalanceResult:
        return self.balance.analyze(self.compute_profile(composition))

    def suggest_for_balance(self, composition: Composition) -> List[Suggestion]:
        try:
            catalog = self.catalog.get()
        except CatalogUnavailable as exc:
            self._log_unavailable("suggest_for_balance", exc)
            return []
        return self.mouthfeel.run(list(composition), catalog).suggestions

    # ------------------------------------------------------------------
    # Catalog helpers
    # ------------------------------------------------------------------
    def search_ingredients(self, query: str) -> List[Ingredient]:
        try:
            return self.catalog.search(query)
        except CatalogUnavailable as exc:
            self._log_unavailable("search_ingredients", exc)
            return []

    def ingredients_by_category(self) -> Dict[str, List[Ingredient]]:
        try:
            return self.catalog.by_category()
        except CatalogUnavailable as exc:
            self._log_unavailable("ingredients_by_category", exc)
            return {}

    def ingredients_in_category(self, category_id: str) -> List[Ingredient]:
        try:
            return self.catalog.in_category(category_id)
        except CatalogUnavailable as exc:
            self._log_unavailable("ingredients_in_category", exc)
            return []

    def refresh_catalog(self) -> bool:
        try:
            self.catalog.refresh()
        except CatalogUnavailable as exc:
            self._log_unavailable("refresh_catalog", exc)
            return False
        return True

    def cooking_methods(self) -> List[CookingMethodInfo]:
        """Stored cooking methods; the built-in set when the source has none."""
        try:
            methods = self.effects.list_methods()
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "Cooking method lookup failed",
                exc_info=exc,
                extra={
                    "invoking_func": "cooking_methods",
                    "invoking_purpose": MODULE_PURPOSE,
                    "next_step": "Use built-in cooking methods",
                },
            )
            methods = []
        if methods:
            return methods
        return [
            CookingMethodInfo(id=m.value, name_en=m.label)
            for m in CookingMethod
            if m != CookingMethod.UNKNOWN
        ]

    def cooking_guidance(self, ingredient: Ingredient, cooking_method: Union[CookingMethod, str, None]) -> str:
        return guidance.cooking_guidance(ingredient, cooking_method, self.effects)
