"""Tests for the mouthfeel balance analyzer."""
import pytest

from culinary_intel.analysis.balance import BalanceAnalyzer
from culinary_intel.models.analysis import BalanceElement, Priority
from culinary_intel.models.smaakprofiel import Mondgevoel, Smaakprofiel, Smaakrijkdom


@pytest.fixture
def analyzer():
    return BalanceAnalyzer()


def _elements(result):
    return [m.element_type for m in result.missing_elements]


def test_balanced_profile(analyzer):
    p = Smaakprofiel(Mondgevoel(0.3, 0.3, 0.3), Smaakrijkdom(0.5, 0.5))
    result = analyzer.analyze(p)
    assert result.is_balanced
    assert result.missing_elements == []
    assert result.suggestions == []
    assert result.strak_filmend_ratio == pytest.approx(1.0)
    assert result.narrative == "Well balanced dish with a moderate, neutral flavour profile."
    assert result.balance_description == "balanced"


def test_butter_only_is_too_coating(analyzer):
    p = Smaakprofiel(Mondgevoel(0.05, 0.9, 0.05), Smaakrijkdom(0.5, 0.5))
    result = analyzer.analyze(p)
    assert not result.is_balanced
    assert result.strak_filmend_ratio == pytest.approx(0.05 / 0.9)
    strak = result.missing_elements[0]
    assert strak.element_type == BalanceElement.STRAK
    assert strak.priority == Priority.HIGH
    assert "acid" in strak.hint
    assert "too coating/rich" in result.narrative


def test_only_strak_hits_ratio_sentinel(analyzer):
    p = Smaakprofiel(Mondgevoel(0.5, 0.0, 0.2), Smaakrijkdom(0.5, 0.5))
    result = analyzer.analyze(p)
    assert result.strak_filmend_ratio == 10.0
    assert _elements(result) == [BalanceElement.FILMEND]


@pytest.mark.parametrize(
    "type_,element,issue",
    [(0.1, BalanceElement.RIJP, "too fresh"), (0.9, BalanceElement.FRIS, "too ripe/heavy")],
)
def test_type_extremes(analyzer, type_, element, issue):
    p = Smaakprofiel(Mondgevoel(0.3, 0.3, 0.3), Smaakrijkdom(0.5, type_))
    result = analyzer.analyze(p)
    assert not result.is_balanced
    assert _elements(result) == [element]
    assert result.fris_rijp_balans == type_
    assert result.narrative.startswith(f"The dish is {issue}.")


def test_advisory_flags_keep_balance(analyzer):
    p = Smaakprofiel(Mondgevoel(0.2, 0.2, 0.05), Smaakrijkdom(0.2, 0.5))
    result = analyzer.analyze(p)
    assert result.is_balanced
    assert _elements(result) == [BalanceElement.SMAAKGEHALTE, BalanceElement.DROOG]
    assert len(result.suggestions) == 2
    assert result.narrative.startswith("The mouthfeel structure is balanced.")


def test_zero_profile(analyzer):
    result = analyzer.analyze(Smaakprofiel.zero())
    assert not result.is_balanced
    assert result.strak_filmend_ratio == 0.0
    assert set(_elements(result)) == {
        BalanceElement.STRAK,
        BalanceElement.RIJP,
        BalanceElement.SMAAKGEHALTE,
        BalanceElement.DROOG,
    }


@pytest.mark.parametrize(
    "strak,filmend,type_,balanced",
    [
        (0.3, 1.0, 0.2, True),    # ratio exactly 0.3, type exactly 0.2
        (0.75, 0.25, 0.8, True),  # ratio exactly 3.0, type exactly 0.8
        (0.29, 1.0, 0.5, False),
        (0.5, 0.5, 0.81, False),
    ],
)
def test_is_balanced_boundaries(analyzer, strak, filmend, type_, balanced):
    p = Smaakprofiel(Mondgevoel(strak, filmend, 0.2), Smaakrijkdom(0.5, type_))
    assert analyzer.analyze(p).is_balanced is balanced
