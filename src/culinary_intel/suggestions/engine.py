"""
engine.py

Purpose:
    Rank catalog ingredients that close detected gaps.

    For each missing element (in priority order) the catalog is scanned with
    that element's predicate; ingredients already in the dish are skipped and
    at most `per_element` candidates are taken. Results are de-duplicated by
    ingredient id (first wins), stably sorted by priority and optionally
    capped. Ties keep catalog order.
"""
from __future__ import annotations

from typing import Collection, Dict, List, Optional, Sequence, Tuple

from culinary_intel.logging_utils import get_logger
from culinary_intel.models.analysis import AnyElement, MissingElement, Suggestion
from culinary_intel.models.ingredient import Ingredient
from culinary_intel.suggestions.predicates import Predicate

logger = get_logger(__name__)

MODULE_PURPOSE = "Rank catalog ingredients that close detected gaps"


class SuggestionEngine:
    def __init__(
        self,
        predicates: Dict[AnyElement, Tuple[Predicate, str]],
        per_element: int = 3,
        max_total: Optional[int] = None,
    ) -> None:
        self.predicates = predicates
        self.per_element = per_element
        self.max_total = max_total

    def candidates_for(
        self,
        missing: MissingElement,
        catalog: Sequence[Ingredient],
        exclude_ids: Collection[str],
    ) -> List[Suggestion]:
        entry = self.predicates.get(missing.element_type)
        if entry is None:
            return []
        predicate, template = entry
        out: List[Suggestion] = []
        for ing in catalog:
            if len(out) >= self.per_element:
                break
            if ing.id in exclude_ids or ing.is_placeholder:
                continue
            if predicate(ing):
                out.append(Suggestion(
                    ingredient=ing,
                    reason=template.format(name=ing.name),
                    element_type=missing.element_type,
                    priority=missing.priority,
                ))
        return out

    def suggest(
        self,
        current_ids: Collection[str],
        missing_elements: Sequence[MissingElement],
        catalog: Sequence[Ingredient],
    ) -> List[Suggestion]:
        exclude = set(current_ids)
        ordered = sorted(missing_elements, key=lambda m: m.priority)

        collected: List[Suggestion] = []
        seen = set()
        for missing in ordered:
            for s in self.candidates_for(missing, catalog, exclude):
                if s.ingredient.id in seen:
                    continue
                seen.add(s.ingredient.id)
                collected.append(s)

        collected.sort(key=lambda s: s.priority)
        if self.max_total is not None:
            collected = collected[: self.max_total]

        logger.debug(
            "Suggested %d ingredients for %d missing elements",
            len(collected),
            len(ordered),
            extra={"invoking_func": "suggest", "invoking_purpose": MODULE_PURPOSE},
        )
        return collected
