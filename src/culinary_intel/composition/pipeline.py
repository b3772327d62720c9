"""
pipeline.py

Purpose:
    One generic aggregate -> detect -> suggest pipeline, configured by a
    strategy object per analysis variant:

      gustatory : unweighted 5-taste mean, carrier/taste/texture rules,
                  suggestions capped (default 8)
      mouthfeel : weighted Smaakprofiel, balance rule table,
                  suggestions uncapped

    Placeholders are dropped before aggregation and detection.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, Optional, Sequence, TypeVar

from culinary_intel.analysis.aggregator import composition_profile, mean_flavor_profile
from culinary_intel.analysis.balance import BalanceAnalyzer
from culinary_intel.analysis.gustatory import (
    analyze_textures,
    identify_carrier,
    identify_missing_elements,
)
from culinary_intel.logging_utils import get_logger
from culinary_intel.models.analysis import MissingElement, Suggestion
from culinary_intel.models.ingredient import FlavorProfile, Ingredient
from culinary_intel.models.smaakprofiel import IngredientSmaakprofiel, Smaakprofiel
from culinary_intel.suggestions.engine import SuggestionEngine
from culinary_intel.suggestions.predicates import GUSTATORY_PREDICATES, MOUTHFEEL_PREDICATES

logger = get_logger(__name__)

MODULE_PURPOSE = "Run aggregate -> detect -> suggest for one analysis variant"

M = TypeVar("M")        # composition member type
P = TypeVar("P")        # aggregate profile type


@dataclass
class AnalysisStrategy(Generic[M, P]):
    name: str
    ingredient_of: Callable[[M], Ingredient]
    aggregate: Callable[[Sequence[M]], P]
    detect: Callable[[P, Sequence[Ingredient]], List[MissingElement]]
    engine: SuggestionEngine


@dataclass
class PipelineResult(Generic[P]):
    profile: P
    ingredients: List[Ingredient]
    missing_elements: List[MissingElement] = field(default_factory=list)
    suggestions: List[Suggestion] = field(default_factory=list)


class CompositionPipeline(Generic[M, P]):
    def __init__(self, strategy: AnalysisStrategy[M, P]) -> None:
        self.strategy = strategy

    def run(self, members: Sequence[M], catalog: Optional[Sequence[Ingredient]] = None) -> PipelineResult[P]:
        """
        Aggregate the non-placeholder members, detect gaps and (when a catalog
        is given) rank suggestions that exclude every member already present.
        """
        s = self.strategy
        valid = [m for m in members if not s.ingredient_of(m).is_placeholder]
        ingredients = [s.ingredient_of(m) for m in valid]

        profile = s.aggregate(valid)
        missing = s.detect(profile, ingredients)

        suggestions: List[Suggestion] = []
        if catalog is not None:
            current_ids = [s.ingredient_of(m).id for m in members]
            suggestions = s.engine.suggest(current_ids, missing, catalog)

        logger.info(
            "%s pipeline: %d members (%d valid), %d gaps, %d suggestions",
            s.name,
            len(members),
            len(valid),
            len(missing),
            len(suggestions),
            extra={
                "invoking_func": "run",
                "invoking_purpose": MODULE_PURPOSE,
                "next_step": "Return PipelineResult",
            },
        )
        return PipelineResult(profile, ingredients, missing, suggestions)


def _detect_gustatory(profile: FlavorProfile, ingredients: Sequence[Ingredient]) -> List[MissingElement]:
    return identify_missing_elements(
        profile,
        analyze_textures(ingredients),
        identify_carrier(ingredients),
        ingredients,
    )


def _identity(item: Any) -> Any:
    return item


def gustatory_strategy(max_suggestions: int = 8, per_element: int = 3) -> AnalysisStrategy[Ingredient, FlavorProfile]:
    return AnalysisStrategy(
        name="gustatory",
        ingredient_of=_identity,
        aggregate=lambda items: mean_flavor_profile(i.flavor_profile for i in items),
        detect=_detect_gustatory,
        engine=SuggestionEngine(GUSTATORY_PREDICATES, per_element=per_element, max_total=max_suggestions),
    )


def mouthfeel_strategy(
    per_element: int = 3,
    analyzer: Optional[BalanceAnalyzer] = None,
) -> AnalysisStrategy[IngredientSmaakprofiel, Smaakprofiel]:
    analyzer = analyzer or BalanceAnalyzer()
    return AnalysisStrategy(
        name="mouthfeel",
        ingredient_of=lambda m: m.ingredient,
        aggregate=composition_profile,
        detect=lambda profile, _ingredients: analyzer.detect(profile),
        engine=SuggestionEngine(MOUTHFEEL_PREDICATES, per_element=per_element, max_total=None),
    )
