"""
culinary_intel

Culinary composition-intelligence engine: combines per-ingredient flavor and
texture metadata into a dish profile, detects imbalances and suggests
ingredients that close the gaps.

Usage:
    from culinary_intel.config import build_catalog
    from culinary_intel.composition.service import CompositionService

    service = CompositionService(build_catalog())
    analysis = service.analyze_composition(["chicken breast", "lemon"])
"""

__version__ = "0.1.0"
