"""Tests for profile aggregation."""
import pytest

from culinary_intel.analysis.aggregator import (
    composition_profile,
    mean_flavor_profile,
    weighted_smaakprofiel,
)
from culinary_intel.models.ingredient import FlavorProfile, Ingredient
from culinary_intel.models.smaakprofiel import (
    IngredientSmaakprofiel,
    Mondgevoel,
    Smaakprofiel,
    Smaakrijkdom,
)

A = Smaakprofiel(Mondgevoel(0.8, 0.4, 0.2), Smaakrijkdom(0.6, 0.2))
B = Smaakprofiel(Mondgevoel(0.2, 0.8, 0.4), Smaakrijkdom(0.4, 0.8))


def _fields(p: Smaakprofiel):
    return (
        p.mondgevoel.strak,
        p.mondgevoel.filmend,
        p.mondgevoel.droog,
        p.smaakrijkdom.gehalte,
        p.smaakrijkdom.type,
    )


def test_mean_flavor_profile_empty_is_zero():
    assert mean_flavor_profile([]) == FlavorProfile.zero()


def test_mean_flavor_profile_ignores_weights():
    fp = mean_flavor_profile([FlavorProfile(umami=0.2), FlavorProfile(umami=0.6)])
    assert fp.umami == pytest.approx(0.4)


def test_weighted_empty_and_zero_weight_are_zero():
    assert weighted_smaakprofiel([]) == Smaakprofiel.zero()
    assert weighted_smaakprofiel([(A, 0), (B, 0)]) == Smaakprofiel.zero()


def test_weighted_mean_normalizes_mouthfeel():
    p = weighted_smaakprofiel([(A, 100), (B, 25)])
    # raw weighted sums: strak .68, filmend .48, droog .24 -> total 1.4
    assert p.mondgevoel.strak == pytest.approx(0.68 / 1.4)
    assert p.mondgevoel.filmend == pytest.approx(0.48 / 1.4)
    assert p.mondgevoel.droog == pytest.approx(0.24 / 1.4)
    assert p.mondgevoel.total == pytest.approx(1.0)
    assert p.smaakrijkdom.gehalte == pytest.approx(0.56)
    assert p.smaakrijkdom.type == pytest.approx(0.32)


def test_weighted_mean_below_one_is_not_scaled():
    low = Smaakprofiel(Mondgevoel(0.1, 0.2, 0.1), Smaakrijkdom(0.5, 0.5))
    p = weighted_smaakprofiel([(low, 10)])
    assert _fields(p) == pytest.approx(_fields(low))


def test_weighted_mean_is_permutation_invariant():
    c = Smaakprofiel(Mondgevoel(0.1, 0.1, 0.7), Smaakrijkdom(0.9, 0.5))
    forward = weighted_smaakprofiel([(A, 100), (B, 25), (c, 15)])
    backward = weighted_smaakprofiel([(c, 15), (B, 25), (A, 100)])
    assert _fields(forward) == pytest.approx(_fields(backward))


def test_composition_profile_skips_placeholders():
    real = Ingredient(id="r", name="Real")
    ghost = Ingredient.placeholder("ghost")
    members = [
        IngredientSmaakprofiel(real, A, weight=25),
        IngredientSmaakprofiel(ghost, B, weight=100),
    ]
    assert _fields(composition_profile(members)) == pytest.approx(_fields(weighted_smaakprofiel([(A, 25)])))
