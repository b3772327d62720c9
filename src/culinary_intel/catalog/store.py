"""
store.py

Purpose:
    IngredientCatalog: the single owned cache of catalog reference data.

    - get()        : lazy load on first use, cached afterwards
    - refresh()    : reload from the source (last refresh wins)
    - invalidate() : drop the cache; next get() reloads

    There is no time-based expiry. Source failures propagate as
    CatalogUnavailable and leave any previous snapshot untouched.
"""
from __future__ import annotations

from collections import OrderedDict
from typing import Dict, List, Optional

from culinary_intel.catalog.sources import CatalogSource
from culinary_intel.logging_utils import get_logger
from culinary_intel.models.ingredient import Ingredient

logger = get_logger(__name__)

MODULE_PURPOSE = "Own the cached ingredient catalog snapshot"

DEFAULT_SEARCH_LIMIT = 20
OTHER_CATEGORY = "Other"


class IngredientCatalog:
    def __init__(self, source: CatalogSource) -> None:
        self.source = source
        self._snapshot: Optional[List[Ingredient]] = None
        self._by_id: Dict[str, Ingredient] = {}

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    def get(self) -> List[Ingredient]:
        """All ingredients in source order. Loads on first call."""
        if self._snapshot is None:
            return self.refresh()
        return list(self._snapshot)

    def refresh(self) -> List[Ingredient]:
        items = self.source.fetch_all()
        self._snapshot = list(items)
        self._by_id = {i.id: i for i in self._snapshot}
        logger.info(
            "Catalog snapshot loaded: %d ingredients from %s",
            len(self._snapshot),
            self.source.name,
            extra={
                "invoking_func": "refresh",
                "invoking_purpose": MODULE_PURPOSE,
                "next_step": "Serve lookups from cache",
            },
        )
        return list(self._snapshot)

    def invalidate(self) -> None:
        self._snapshot = None
        self._by_id = {}

    # ------------------------------------------------------------------
    # Lookups (served from the snapshot)
    # ------------------------------------------------------------------
    def by_id(self, ingredient_id: str) -> Optional[Ingredient]:
        self.get()
        return self._by_id.get(ingredient_id)

    def by_category(self) -> Dict[str, List[Ingredient]]:
        """Ingredients grouped by category name, in first-seen order."""
        grouped: Dict[str, List[Ingredient]] = OrderedDict()
        for ing in self.get():
            grouped.setdefault(ing.category_name or OTHER_CATEGORY, []).append(ing)
        return grouped

    def in_category(self, category_id: str) -> List[Ingredient]:
        return [i for i in self.get() if i.category_id == category_id]

    def search(self, query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> List[Ingredient]:
        """Substring match on canonical or localized name."""
        q = (query or "").strip().lower()
        if not q:
            return []
        out = []
        for ing in self.get():
            if any(q in n for n in ing.names_lower()):
                out.append(ing)
                if len(out) >= limit:
                    break
        return out
