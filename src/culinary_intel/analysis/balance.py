"""
balance.py

Purpose:
    Mouthfeel / richness balance of a dish, from its aggregate Smaakprofiel.

    Rule table (thresholds are fixed):
      strak:filmend ratio < 0.3   -> missing strak element        (high)
      strak:filmend ratio > 3.0   -> missing filmend element      (high)
      smaaktype < 0.2             -> missing rijp element         (medium)
      smaaktype > 0.8             -> missing fris element         (medium)
      smaakgehalte < 0.3          -> low intensity                (low)
      droog, strak, filmend all low -> lacks texture variety      (low)

    Only the ratio and type rules make a dish unbalanced; the low-priority
    rules are advisory.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from culinary_intel.logging_utils import get_logger
from culinary_intel.models.analysis import BalanceElement, BalanceResult, MissingElement, Priority
from culinary_intel.models.smaakprofiel import Smaakprofiel

logger = get_logger(__name__)

MODULE_PURPOSE = "Detect mouthfeel / richness imbalances in a dish"

RATIO_LOW = 0.3
RATIO_HIGH = 3.0
TYPE_LOW = 0.2
TYPE_HIGH = 0.8
GEHALTE_LOW = 0.3


@dataclass(frozen=True)
class BalanceRule:
    element: BalanceElement
    priority: Priority
    affects_balance: bool
    test: Callable[[Smaakprofiel], bool]
    reason: str
    hint: str
    issue: str          # phrase used in the narrative
    advice: str


BALANCE_RULES: List[BalanceRule] = [
    BalanceRule(
        BalanceElement.STRAK, Priority.HIGH, True,
        lambda p: p.mondgevoel.strak_filmend_ratio < RATIO_LOW,
        "Dish is too coating/rich; a tight, fresh element is missing",
        "acid, citrus, vinegar",
        "too coating/rich",
        "Add something acidic (lemon, lime, vinegar) to cut through the richness.",
    ),
    BalanceRule(
        BalanceElement.FILMEND, Priority.HIGH, True,
        lambda p: p.mondgevoel.strak_filmend_ratio > RATIO_HIGH,
        "Dish is too tight/sour; a coating element is missing",
        "butter, cream, olive oil",
        "too tight/sour",
        "Add a coating element (butter, cream, olive oil) to round off the acidity.",
    ),
    BalanceRule(
        BalanceElement.RIJP, Priority.MEDIUM, True,
        lambda p: p.smaakrijkdom.type < TYPE_LOW,
        "Flavour is too fresh; a ripe, deep element is missing",
        "roasted, caramelized, umami",
        "too fresh",
        "Add depth with roasted, caramelized or umami-rich ingredients.",
    ),
    BalanceRule(
        BalanceElement.FRIS, Priority.MEDIUM, True,
        lambda p: p.smaakrijkdom.type > TYPE_HIGH,
        "Flavour is too ripe/heavy; a fresh element is missing",
        "citrus, green herbs, raw vegetables",
        "too ripe/heavy",
        "Lift the dish with citrus, fresh green herbs or raw vegetables.",
    ),
    BalanceRule(
        BalanceElement.SMAAKGEHALTE, Priority.LOW, False,
        lambda p: p.smaakrijkdom.gehalte < GEHALTE_LOW,
        "Flavour intensity is low",
        "herbs, spices, umami",
        "low in flavour intensity",
        "Boost intensity with herbs, spices or an umami source.",
    ),
    BalanceRule(
        BalanceElement.DROOG, Priority.LOW, False,
        lambda p: p.mondgevoel.droog < 0.1 and p.mondgevoel.strak < 0.3 and p.mondgevoel.filmend < 0.3,
        "Dish lacks texture variety",
        "crispy, crunchy, toasted",
        "lacking texture variety",
        "Add a crisp or crunchy element for texture contrast.",
    ),
]


def _narrative(profile: Smaakprofiel, fired: List[BalanceRule]) -> str:
    r = profile.smaakrijkdom
    if not fired:
        return (
            f"Well balanced dish with a {r.intensity_description}, "
            f"{r.type_description} flavour profile."
        )
    structural = [rule.issue for rule in fired if rule.affects_balance]
    advisory = [rule.issue for rule in fired if not rule.affects_balance]
    sentences = []
    if structural:
        sentences.append(
            f"The dish is {' and '.join(structural)}. "
            "Consider adding contrasting elements for balance."
        )
    else:
        sentences.append("The mouthfeel structure is balanced.")
    if advisory:
        sentences.append(f"It is {' and '.join(advisory)}.")
    return " ".join(sentences)


class BalanceAnalyzer:
    def __init__(self, rules: Optional[List[BalanceRule]] = None) -> None:
        self.rules = list(rules) if rules is not None else list(BALANCE_RULES)

    def detect(self, profile: Smaakprofiel) -> List[MissingElement]:
        return [
            MissingElement(rule.element, rule.reason, rule.priority, rule.hint)
            for rule in self.rules
            if rule.test(profile)
        ]

    def analyze(self, profile: Smaakprofiel) -> BalanceResult:
        fired = [rule for rule in self.rules if rule.test(profile)]
        result = BalanceResult(
            is_balanced=not any(rule.affects_balance for rule in fired),
            strak_filmend_ratio=profile.mondgevoel.strak_filmend_ratio,
            fris_rijp_balans=profile.smaakrijkdom.type,
            missing_elements=[
                MissingElement(rule.element, rule.reason, rule.priority, rule.hint) for rule in fired
            ],
            suggestions=[rule.advice for rule in fired],
            narrative=_narrative(profile, fired),
        )
        logger.debug(
            "Balance: balanced=%s ratio=%.2f type=%.2f flags=%s",
            result.is_balanced,
            result.strak_filmend_ratio,
            result.fris_rijp_balans,
            [rule.element.value for rule in fired],
            extra={"invoking_func": "analyze", "invoking_purpose": MODULE_PURPOSE},
        )
        return result
