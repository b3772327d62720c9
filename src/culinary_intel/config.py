"""
config.py

Purpose:
    Central configuration for the culinary composition engine.

    - get_supabase_client(): Supabase client from environment variables
    - load_settings(): typed Settings read from environment (.env supported)
    - build_catalog(): IngredientCatalog wired to the configured source

Usage:
    from culinary_intel.config import get_supabase_client, load_settings
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

# Client connection details are read from env vars, never hardcoded.
from supabase import create_client, Client

from dotenv import load_dotenv

from culinary_intel.logging_utils import init_logging

load_dotenv()  # loads .env

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    catalog_source: str = "supabase"          # "supabase" | "csv"
    catalog_csv_path: Optional[str] = None
    max_suggestions: int = 8
    suggestions_per_element: int = 3
    score_parity: bool = False                # apply per-flag deductions too
    log_level: str = "INFO"


def get_supabase_client() -> Client:
    """Create a Supabase client using env vars."""
    url = os.environ["SUPABASE_URL"]
    # service role for backfills; anon key is enough for read-only catalog access
    key = os.environ.get("SUPABASE_SERVICE_ROLE_KEY") or os.environ["SUPABASE_ANON_KEY"]
    return create_client(url, key)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _log_level(name: str) -> int:
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def load_settings() -> Settings:
    """Read Settings from the process environment and apply the log level."""
    settings = Settings(
        catalog_source=os.environ.get("CULINARY_CATALOG_SOURCE", "supabase").strip().lower(),
        catalog_csv_path=os.environ.get("CULINARY_CATALOG_CSV") or None,
        max_suggestions=_env_int("CULINARY_MAX_SUGGESTIONS", 8),
        suggestions_per_element=_env_int("CULINARY_SUGGESTIONS_PER_ELEMENT", 3),
        score_parity=os.environ.get("CULINARY_SCORE_PARITY", "").strip().lower() in _TRUE_VALUES,
        log_level=os.environ.get("CULINARY_LOG_LEVEL", "INFO").strip().upper(),
    )
    init_logging(_log_level(settings.log_level))
    return settings


def build_catalog(settings: Optional[Settings] = None):
    """
    Return an IngredientCatalog backed by the configured source.

    CSV mode requires CULINARY_CATALOG_CSV; Supabase mode requires SUPABASE_URL.
    """
    from culinary_intel.catalog.sources import CsvCatalogSource, SupabaseCatalogSource
    from culinary_intel.catalog.store import IngredientCatalog

    settings = settings or load_settings()
    if settings.catalog_source == "csv":
        if not settings.catalog_csv_path:
            raise ValueError("CULINARY_CATALOG_CSV must be set when CULINARY_CATALOG_SOURCE=csv")
        return IngredientCatalog(CsvCatalogSource(settings.catalog_csv_path))
    return IngredientCatalog(SupabaseCatalogSource(get_supabase_client()))
