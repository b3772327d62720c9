"""End-to-end tests for CompositionService."""
from unittest.mock import MagicMock

import pytest

from culinary_intel.catalog.store import IngredientCatalog
from culinary_intel.composition.service import CompositionService
from culinary_intel.config import Settings
from culinary_intel.cooking.methods import CookingMethod, CookingMethodInfo
from culinary_intel.cooking.sources import CookingEffectSource, InMemoryCookingEffectSource
from culinary_intel.models.analysis import BalanceElement, ElementType
from culinary_intel.models.ingredient import FlavorProfile
from culinary_intel.models.smaakprofiel import Composition, Mondgevoel, Smaakprofiel, Smaakrijkdom

from tests.test_catalog import FailingSource

ROASTED_CHICKEN = Smaakprofiel(Mondgevoel(0.1, 0.4, 0.5), Smaakrijkdom(0.7, 0.8))


def _element_types(analysis):
    return [m.element_type for m in analysis.missing_elements]


class TestAnalyzeComposition:
    def test_chicken_and_lemon(self, service):
        analysis = service.analyze_composition(["Chicken breast", "lemon"])
        assert [i.id for i in analysis.ingredients] == ["ing-chicken", "ing-lemon"]
        assert analysis.carrier.id == "ing-chicken"
        assert ElementType.UMAMI in _element_types(analysis)
        assert ElementType.ACID not in _element_types(analysis)
        assert analysis.overall_score < 100

        ids = [s.ingredient.id for s in analysis.suggestions]
        assert "ing-parmesan" in ids
        assert "ing-chicken" not in ids and "ing-lemon" not in ids

    def test_empty_composition(self, service):
        analysis = service.analyze_composition([])
        assert analysis.overall_score == 60
        assert analysis.flavor_profile == FlavorProfile.zero()
        assert ElementType.UMAMI in _element_types(analysis)
        assert analysis.carrier is None

    def test_unmatched_name_is_placeholder(self, service):
        analysis = service.analyze_composition(["chiken brest"])
        assert len(analysis.ingredients) == 1
        assert analysis.ingredients[0].is_placeholder
        assert analysis.placeholders == analysis.ingredients
        assert analysis.flavor_profile == FlavorProfile.zero()
        assert analysis.overall_score == 60

    def test_suggestions_are_capped(self, catalog, effects):
        svc = CompositionService(catalog, effects, Settings(max_suggestions=2))
        assert len(svc.get_suggestions([])) == 2

    def test_parity_scoring(self, catalog, effects):
        svc = CompositionService(catalog, effects, Settings(score_parity=True))
        assert svc.analyze_composition([]).overall_score == 40

    def test_catalog_unavailable_is_retryable(self, effects):
        svc = CompositionService(IngredientCatalog(FailingSource()), effects)
        analysis = svc.analyze_composition(["lemon"])
        assert analysis.retryable
        assert analysis.error
        assert analysis.ingredients == []
        assert analysis.suggestions == []
        assert svc.get_suggestions(["lemon"]) == []
        assert svc.search_ingredients("lemon") == []
        assert svc.ingredients_in_category("cat-dairy") == []
        assert svc.refresh_catalog() is False


class TestCompositionMutators:
    def test_add_uses_role_weight_and_leaves_input_untouched(self, service, ingredients):
        empty = Composition()
        comp = service.add_ingredient(empty, ingredients["ing-chicken"])
        comp = service.add_ingredient(comp, ingredients["ing-parsley"])
        assert len(empty) == 0
        assert [m.weight for m in comp] == [100, 10]
        assert comp.get("ing-chicken").cooking_method == CookingMethod.RAW

    def test_remove_and_clear(self, service, ingredients):
        comp = service.add_ingredient(Composition(), ingredients["ing-lemon"])
        assert service.remove_ingredient(comp, "ing-lemon").ingredient_ids == []
        assert len(service.clear()) == 0

    def test_set_cooking_method_keeps_weight(self, catalog, ingredients):
        effects = InMemoryCookingEffectSource(
            method_profiles={("ing-chicken", CookingMethod.ROAST): ROASTED_CHICKEN}
        )
        svc = CompositionService(catalog, effects)
        comp = svc.add_ingredient(Composition(), ingredients["ing-chicken"], weight=60)
        roasted = svc.set_cooking_method(comp, "ing-chicken", "roasted")

        member = roasted.get("ing-chicken")
        assert member.weight == 60
        assert member.cooking_method == CookingMethod.ROAST
        assert member.smaakprofiel == ROASTED_CHICKEN
        assert svc.set_cooking_method(comp, "ing-missing", "roast") is comp


class TestBalance:
    def test_empty_composition_profile_is_zero(self, service):
        assert service.compute_profile(Composition()) == Smaakprofiel.zero()

    def test_butter_only(self, service, ingredients):
        comp = service.add_ingredient(Composition(), ingredients["ing-butter"])
        result = service.analyze_balance(comp)
        assert not result.is_balanced
        assert result.strak_filmend_ratio < 0.3
        assert result.missing_elements[0].element_type == BalanceElement.STRAK

        suggestions = service.suggest_for_balance(comp)
        ids = [s.ingredient.id for s in suggestions]
        assert "ing-lemon" in ids
        assert "ing-butter" not in ids

    def test_profile_sums_stay_normalized(self, service, ingredients):
        comp = Composition()
        for ing_id in ("ing-butter", "ing-croutons", "ing-parmesan", "ing-olive-oil"):
            comp = service.add_ingredient(comp, ingredients[ing_id])
        assert service.compute_profile(comp).mondgevoel.total <= 1.0 + 1e-9

    def test_ingredients_by_category(self, service):
        grouped = service.ingredients_by_category()
        assert [i.id for i in grouped["Dairy"]] == ["ing-butter", "ing-parmesan"]

    def test_ingredients_in_category(self, service):
        assert [i.id for i in service.ingredients_in_category("cat-dairy")] == ["ing-butter", "ing-parmesan"]


def test_cooking_guidance_passthrough(service, ingredients):
    assert service.cooking_guidance(ingredients["ing-butter"], "fry").startswith("Butter (Fry):")


class TestCookingMethods:
    def test_builtin_methods_when_source_has_none(self, service):
        methods = [info.method for info in service.cooking_methods()]
        assert CookingMethod.RAW in methods
        assert CookingMethod.SOUS_VIDE in methods
        assert CookingMethod.UNKNOWN not in methods

    def test_stored_methods_are_used(self, catalog):
        source = MagicMock(spec=CookingEffectSource)
        source.list_methods.return_value = [CookingMethodInfo(id="m1", name_en="Roast", heat_type="dry")]
        svc = CompositionService(catalog, source)
        assert [info.id for info in svc.cooking_methods()] == ["m1"]

    def test_lookup_failure_falls_back_to_builtin(self, catalog):
        source = MagicMock(spec=CookingEffectSource)
        source.list_methods.side_effect = ConnectionError("down")
        svc = CompositionService(catalog, source)
        assert len(svc.cooking_methods()) == len(CookingMethod) - 1
