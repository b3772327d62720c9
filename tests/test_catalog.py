"""Tests for catalog sources and the cached IngredientCatalog."""
from unittest.mock import MagicMock

import pytest

from culinary_intel.catalog.sources import (
    CatalogSource,
    CsvCatalogSource,
    InMemoryCatalogSource,
    SupabaseCatalogSource,
)
from culinary_intel.catalog.store import IngredientCatalog
from culinary_intel.errors import CatalogUnavailable
from culinary_intel.models.ingredient import Ingredient, IngredientRole, TextureCategory

CSV_TEXT = """id,name_en,name_nl,category_id,category_name,culinary_role,molecule_type,mouthfeel,texture,intensity,aroma_categories,sweetness,sourness,umami
ing-2,Lime,Limoen,cat-fruit,Fruit,accent,water,astringent,,0.8,citrus;fresh,0.1,0.9,0.0
ing-1,Bacon,Spek,cat-meat,Meat,,fat,rich,crispy,0.9,smoky,0.1,,0.8
"""


class CountingSource(CatalogSource):
    name = "counting"

    def __init__(self, items):
        self.items = list(items)
        self.calls = 0

    def fetch_all(self):
        self.calls += 1
        return list(self.items)


class FailingSource(CatalogSource):
    name = "failing"

    def fetch_all(self):
        raise CatalogUnavailable("offline", source=self.name)


def _supabase_client(tables, fail=False, fail_tables=()):
    """MagicMock mimicking client.table(...).select(...)...execute().data"""
    client = MagicMock()

    def table(name):
        query = MagicMock()
        for method in ("select", "eq", "order", "limit", "or_"):
            getattr(query, method).return_value = query
        if fail or name in fail_tables:
            query.execute.side_effect = ConnectionError("network down")
        else:
            query.execute.return_value = MagicMock(data=tables.get(name, []))
        return query

    client.table.side_effect = table
    return client


class TestIngredientCatalog:
    def test_loads_lazily_once(self):
        source = CountingSource([Ingredient(id="a", name="A")])
        catalog = IngredientCatalog(source)
        assert not catalog.is_loaded
        catalog.get()
        catalog.get()
        assert catalog.by_id("a").name == "A"
        assert source.calls == 1

    def test_refresh_and_invalidate_reload(self):
        source = CountingSource([Ingredient(id="a", name="A")])
        catalog = IngredientCatalog(source)
        catalog.get()
        source.items.append(Ingredient(id="b", name="B"))
        assert len(catalog.get()) == 1
        assert len(catalog.refresh()) == 2
        catalog.invalidate()
        catalog.get()
        assert source.calls == 3

    def test_failure_propagates(self):
        with pytest.raises(CatalogUnavailable):
            IngredientCatalog(FailingSource()).get()

    def test_search_limits_to_twenty(self):
        items = [Ingredient(id=str(n), name=f"Pepper {n}") for n in range(25)]
        catalog = IngredientCatalog(InMemoryCatalogSource(items))
        assert len(catalog.search("pepper")) == 20
        assert catalog.search("   ") == []

    def test_search_matches_localized_name(self, catalog):
        assert [i.id for i in catalog.search("olie")] == ["ing-olive-oil"]

    def test_by_category_uses_other_fallback(self):
        items = [
            Ingredient(id="a", name="A", category_name="Herbs"),
            Ingredient(id="b", name="B"),
            Ingredient(id="c", name="C", category_name="Herbs"),
        ]
        grouped = IngredientCatalog(InMemoryCatalogSource(items)).by_category()
        assert list(grouped) == ["Herbs", "Other"]
        assert [i.id for i in grouped["Herbs"]] == ["a", "c"]

    def test_in_category_filters_by_id(self):
        items = [
            Ingredient(id="a", name="A", category_id="cat-herbs"),
            Ingredient(id="b", name="B", category_id="cat-fish"),
            Ingredient(id="c", name="C", category_id="cat-herbs"),
        ]
        catalog = IngredientCatalog(InMemoryCatalogSource(items))
        assert [i.id for i in catalog.in_category("cat-herbs")] == ["a", "c"]
        assert catalog.in_category("cat-none") == []


class TestCsvCatalogSource:
    def test_reads_and_sorts_by_name(self, tmp_path):
        path = tmp_path / "catalog.csv"
        path.write_text(CSV_TEXT, encoding="utf-8")
        items = CsvCatalogSource(path).fetch_all()

        assert [i.name for i in items] == ["Bacon", "Lime"]
        bacon, lime = items
        assert bacon.role == IngredientRole.CARRIER      # from category "Meat"
        assert bacon.textures == frozenset({TextureCategory.CRISPY})
        assert bacon.flavor_profile.umami == pytest.approx(0.8)
        assert bacon.flavor_profile.sourness == 0.0
        assert lime.aroma_categories == frozenset({"citrus", "fresh"})
        assert lime.name_nl == "Limoen"

    def test_missing_file_raises_catalog_unavailable(self, tmp_path):
        with pytest.raises(CatalogUnavailable):
            CsvCatalogSource(tmp_path / "nope.csv").fetch_all()


class TestSupabaseCatalogSource:
    def test_fetch_all_joins_category_names(self):
        client = _supabase_client({
            "ingredients": [
                {"id": 1, "name_en": "Salmon", "category_id": 10, "flavor_profile": {"umami": 0.6}},
                {"id": 2, "name_en": "Dill", "category_id": 11, "culinary_role": "finishing"},
            ],
            "ingredient_categories": [
                {"id": 10, "name_en": "Fish"},
                {"id": 11, "name_en": "Herbs"},
            ],
        })
        salmon, dill = SupabaseCatalogSource(client).fetch_all()
        assert salmon.category_name == "Fish"
        assert salmon.role == IngredientRole.CARRIER
        assert salmon.flavor_profile.umami == pytest.approx(0.6)
        assert dill.role == IngredientRole.FINISHING
        client.table.assert_any_call("ingredients")

    def test_fetch_by_id_missing(self):
        client = _supabase_client({"ingredients": []})
        assert SupabaseCatalogSource(client).fetch_by_id("x") is None

    def test_query_failure_raises_catalog_unavailable(self):
        client = _supabase_client({}, fail=True)
        with pytest.raises(CatalogUnavailable) as err:
            SupabaseCatalogSource(client).fetch_all()
        assert err.value.retryable
        assert isinstance(err.value.cause, ConnectionError)

    @pytest.mark.parametrize(
        "call",
        [
            lambda src: src.fetch_all(),
            lambda src: src.fetch_by_id("1"),
            lambda src: src.fetch_by_category("10"),
            lambda src: src.search("salm"),
        ],
        ids=["fetch_all", "fetch_by_id", "fetch_by_category", "search"],
    )
    def test_category_lookup_failure_raises_catalog_unavailable(self, call):
        client = _supabase_client(
            {"ingredients": [{"id": 1, "name_en": "Salmon", "category_id": 10}]},
            fail_tables=("ingredient_categories",),
        )
        with pytest.raises(CatalogUnavailable) as err:
            call(SupabaseCatalogSource(client))
        assert err.value.retryable
        assert isinstance(err.value.cause, ConnectionError)
