"""
Shared fixtures: a small in-memory catalog built from raw rows (so the row
parsing path is exercised) and a CompositionService wired to it.
"""
from __future__ import annotations

from typing import Dict, List

import pytest

from culinary_intel.catalog.sources import InMemoryCatalogSource
from culinary_intel.catalog.store import IngredientCatalog
from culinary_intel.composition.service import CompositionService
from culinary_intel.config import Settings
from culinary_intel.cooking.sources import InMemoryCookingEffectSource
from culinary_intel.models.ingredient import Ingredient


def _row(id_, name, name_nl, category, role, molecule, mouthfeel, texture, intensity, aromas, **taste) -> Dict:
    return {
        "id": id_,
        "name_en": name,
        "name_nl": name_nl,
        "category_id": f"cat-{category.lower()}",
        "category_name": category,
        "culinary_role": role,
        "molecule_type": molecule,
        "mouthfeel": mouthfeel,
        "texture": texture,
        "intensity": intensity,
        "aroma_categories": aromas,
        "flavor_profile": taste,
    }


CATALOG_ROWS: List[Dict] = [
    _row("ing-butter", "Butter", "Boter", "Dairy", "supporting", "fat", "coating", "creamy", 0.5, [],
         sweetness=0.1, saltiness=0.1, umami=0.1),
    _row("ing-chicken", "Chicken breast", "Kipfilet", "Meat", "carrier", "protein", "refreshing", "tender", 0.3, [],
         saltiness=0.1, umami=0.2),
    _row("ing-croutons", "Croutons", "Croutons", "Grains", "supporting", "carbohydrate", "dry", "crunchy", 0.4,
         ["toasted"], sweetness=0.1, saltiness=0.3, bitterness=0.1, umami=0.1),
    _row("ing-lemon", "Lemon", "Citroen", "Fruit", "accent", "water", "astringent", "", 0.8, ["citrus", "fresh"],
         sweetness=0.1, sourness=0.9, bitterness=0.2),
    _row("ing-mushroom", "Mushroom", "Champignon", "Vegetables", "supporting", "water", "rich", "tender", 0.6,
         ["earthy"], umami=0.7),
    _row("ing-olive-oil", "Olive oil", "Olijfolie", "Oils", "supporting", "fat", "coating", "silky", 0.6, ["green"],
         bitterness=0.2),
    _row("ing-parmesan", "Parmesan", "Parmezaan", "Dairy", "accent", "protein", "rich", "firm", 0.9, [],
         saltiness=0.7, sourness=0.1, bitterness=0.1, umami=0.9),
    _row("ing-parsley", "Parsley", "Peterselie", "Herbs", "finishing", "water", "refreshing", "soft", 0.6,
         ["green", "fresh"], bitterness=0.2),
    _row("ing-rice", "Rice", "Rijst", "Grains", "carrier", "carbohydrate", "refreshing", "soft", 0.2, [],
         sweetness=0.1),
    _row("ing-vinegar", "Red wine vinegar", "Rode wijnazijn", "Condiments", "accent", "water", "astringent", "", 0.7,
         [], sourness=0.9, bitterness=0.1),
]


@pytest.fixture
def catalog_rows() -> List[Dict]:
    return [dict(r) for r in CATALOG_ROWS]


@pytest.fixture
def catalog(catalog_rows) -> IngredientCatalog:
    return IngredientCatalog(InMemoryCatalogSource(catalog_rows))


@pytest.fixture
def ingredients(catalog) -> Dict[str, Ingredient]:
    """Catalog ingredients keyed by id."""
    return {i.id: i for i in catalog.get()}


@pytest.fixture
def effects() -> InMemoryCookingEffectSource:
    return InMemoryCookingEffectSource()


@pytest.fixture
def service(catalog, effects) -> CompositionService:
    return CompositionService(catalog, effects, Settings())
