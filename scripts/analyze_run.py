"""
analyze_run.py

Purpose:
    Command-line runner for the culinary composition engine.

    Resolves free-text ingredient names against the catalog, prints the
    five-taste analysis (score, gaps, suggestions) and the mouthfeel balance
    of the same ingredients.

Usage:
    python scripts/analyze_run.py "chicken breast" lemon "olive oil"

    Offline, against a CSV seed file:
    python scripts/analyze_run.py --csv data/sample_ingredients.csv chicken lemon

    With cooking methods (name=method):
    python scripts/analyze_run.py --csv data/sample_ingredients.csv chicken=roast lemon

    List the known cooking methods:
    python scripts/analyze_run.py --list-methods
"""

from __future__ import annotations

import argparse
import datetime
from typing import List, Tuple

from culinary_intel.catalog.sources import CsvCatalogSource
from culinary_intel.catalog.store import IngredientCatalog
from culinary_intel.composition.service import CompositionService
from culinary_intel.config import build_catalog, get_supabase_client, load_settings
from culinary_intel.cooking.sources import SupabaseCookingEffectSource
from culinary_intel.logging_utils import LOG_RUN_ID, log_error, log_info
from culinary_intel.models.smaakprofiel import Composition

MODULE_PURPOSE = "Command-line runner for composition analysis"


# ---------------------------------------------------------------------------
# RUN BANNER
# ---------------------------------------------------------------------------
def print_run_banner(source: str, names: List[str]) -> None:
    now = datetime.datetime.now(datetime.timezone.utc)
    banner = [
        "\n===============================================================",
        "  CULINARY COMPOSITION ANALYSIS",
        f"  Run ID       : {LOG_RUN_ID}",
        f"  UTC Time     : {now.strftime('%Y-%m-%d %H:%M:%S')}",
        f"  Catalog      : {source}",
        "  Ingredients  :",
    ]
    for n in names:
        banner.append(f"    • {n}")
    banner.append("===============================================================\n")
    print("\n".join(banner))


def _split_method(arg: str) -> Tuple[str, str]:
    name, _, method = arg.partition("=")
    return name.strip(), method.strip()


def main() -> None:
    parser = argparse.ArgumentParser(description="Analyze a dish composition")
    parser.add_argument("ingredients", nargs="*", help="ingredient names, optionally name=method")
    parser.add_argument("--csv", default=None, help="Use an offline CSV catalog instead of Supabase")
    parser.add_argument("--parity-score", action="store_true", help="Apply per-flag score deductions too")
    parser.add_argument("--list-methods", action="store_true", help="Print the known cooking methods and exit")
    args = parser.parse_args()
    if not args.ingredients and not args.list_methods:
        parser.error("at least one ingredient is required")

    settings = load_settings()
    if args.parity_score:
        settings.score_parity = True

    effects = None
    if args.csv:
        catalog = IngredientCatalog(CsvCatalogSource(args.csv))
        source = f"csv:{args.csv}"
    else:
        catalog = build_catalog(settings)
        source = settings.catalog_source
        if settings.catalog_source == "supabase":
            effects = SupabaseCookingEffectSource(get_supabase_client())

    service = CompositionService(catalog, effects, settings)
    if args.list_methods:
        for info in service.cooking_methods():
            heat = f" ({info.heat_type})" if info.heat_type else ""
            print(f"{info.method.value:<10} {info.name_en}{heat}")
        return

    pairs = [_split_method(a) for a in args.ingredients]
    names = [n for n, _ in pairs]
    print_run_banner(source, args.ingredients)

    analysis = service.analyze_composition(names)
    if analysis.retryable:
        log_error(
            f"Catalog unavailable: {analysis.error}",
            module_purpose=MODULE_PURPOSE,
            invoking_function="main",
            next_step="Abort run",
            resolution="Check catalog configuration and retry",
        )
        return

    fp = analysis.flavor_profile
    print(f"Overall score : {analysis.overall_score}/100")
    print(f"Carrier       : {analysis.carrier.name if analysis.carrier else '-'}")
    print(
        "Taste profile : "
        f"sweet={fp.sweetness:.2f} salt={fp.saltiness:.2f} sour={fp.sourness:.2f} "
        f"bitter={fp.bitterness:.2f} umami={fp.umami:.2f}"
    )
    if analysis.placeholders:
        print(f"Unmatched     : {', '.join(i.name for i in analysis.placeholders)}")
    print("\nMissing elements:")
    for m in analysis.missing_elements:
        print(f"  [{m.priority.label:<6}] {m.element_type.value}: {m.reason}")
    print("\nSuggestions:")
    for s in analysis.suggestions:
        print(f"  - {s.ingredient.name}: {s.reason}")

    composition = Composition()
    for ing, (_, method) in zip(analysis.ingredients, pairs):
        if ing.is_placeholder:
            continue
        composition = service.add_ingredient(composition, ing, method or None)

    balance = service.analyze_balance(composition)
    print("\nMouthfeel balance:")
    print(f"  {balance.narrative}")
    print(f"  strak/filmend ratio : {balance.strak_filmend_ratio:.2f}")
    print(f"  fresh/ripe balance  : {balance.fris_rijp_balans:.2f}")
    for advice in balance.suggestions:
        print(f"  - {advice}")
    for s in service.suggest_for_balance(composition):
        print(f"  + {s.ingredient.name}: {s.reason}")

    log_info(
        f"Analysis complete: score={analysis.overall_score}, balanced={balance.is_balanced}",
        module_purpose=MODULE_PURPOSE,
        invoking_function="main",
        next_step="Exit",
    )


if __name__ == "__main__":
    main()
