"""
sources.py

Purpose:
    Read-only catalog sources. Each source returns Ingredient objects and
    raises CatalogUnavailable when the underlying storage cannot be read.

      - SupabaseCatalogSource : `ingredients` + `ingredient_categories` tables
      - CsvCatalogSource      : offline seed file loaded with pandas
      - InMemoryCatalogSource : rows supplied by the caller (tests, fixtures)

    Ordering is stable (by canonical name) so that "first match" semantics in
    name resolution and suggestion tie-breaks are deterministic.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import pandas as pd
from supabase import Client

from culinary_intel.catalog.parsing import ingredient_from_row
from culinary_intel.errors import CatalogUnavailable
from culinary_intel.logging_utils import get_logger
from culinary_intel.models.ingredient import Ingredient

logger = get_logger(__name__)

MODULE_PURPOSE = "Read catalog rows from Supabase, CSV seed files or memory"

INGREDIENT_COLUMNS = (
    "id, name_en, name_nl, description_en, description_nl, category_id, "
    "flavor_profile, texture, culinary_role, molecule_type, mouthfeel, "
    "intensity, aroma_categories, season_en, preparation_methods_en, "
    "culinary_uses_en, hero_image_url, image_url"
)


def _matches(ing: Ingredient, query: str) -> bool:
    q = query.strip().lower()
    return any(q in n for n in ing.names_lower())


class CatalogSource:
    """Interface for ingredient catalog storage."""

    name = "catalog"

    def fetch_all(self) -> List[Ingredient]:
        raise NotImplementedError

    def fetch_by_id(self, ingredient_id: str) -> Optional[Ingredient]:
        for ing in self.fetch_all():
            if ing.id == ingredient_id:
                return ing
        return None

    def fetch_by_category(self, category_id: str) -> List[Ingredient]:
        return [i for i in self.fetch_all() if i.category_id == category_id]

    def search(self, query: str, limit: int = 20) -> List[Ingredient]:
        if not query or not query.strip():
            return []
        return [i for i in self.fetch_all() if _matches(i, query)][:limit]


class InMemoryCatalogSource(CatalogSource):
    name = "memory"

    def __init__(self, rows: Iterable[Any]) -> None:
        items: List[Ingredient] = []
        for row in rows:
            items.append(row if isinstance(row, Ingredient) else ingredient_from_row(row))
        self._items = items

    def fetch_all(self) -> List[Ingredient]:
        return list(self._items)


class CsvCatalogSource(CatalogSource):
    """
    Offline catalog read from a CSV seed file with the same column names as
    the Supabase `ingredients` table (plus an optional category_name column).
    Flavor axes may be given as flat columns (sweetness, saltiness, ...).
    """

    name = "csv"

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def fetch_all(self) -> List[Ingredient]:
        try:
            df = pd.read_csv(self.path, dtype={"id": str, "category_id": str})
        except (OSError, ValueError) as exc:
            logger.error(
                "Could not read catalog CSV %s",
                self.path,
                extra={
                    "invoking_func": "fetch_all",
                    "invoking_purpose": MODULE_PURPOSE,
                    "next_step": "Raise CatalogUnavailable",
                    "resolution": "Check CULINARY_CATALOG_CSV path and file encoding",
                },
            )
            raise CatalogUnavailable("catalog CSV unreadable", source=self.name, cause=exc) from exc

        df = df.astype(object).where(pd.notna(df), None)
        if "name_en" in df.columns:
            df = df.sort_values("name_en", key=lambda s: s.fillna("").str.lower(), kind="stable")

        items = [ingredient_from_row(rec) for rec in df.to_dict(orient="records")]
        logger.info(
            "Loaded %d ingredients from %s",
            len(items),
            self.path.name,
            extra={"invoking_func": "fetch_all", "invoking_purpose": MODULE_PURPOSE},
        )
        return items


class SupabaseCatalogSource(CatalogSource):
    """Catalog backed by the Supabase `ingredients` table."""

    name = "supabase"

    def __init__(self, client: Client) -> None:
        self.client = client

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _category_names(self) -> Dict[str, str]:
        query = self.client.table("ingredient_categories").select("id, name_en, name_nl")
        out: Dict[str, str] = {}
        for row in self._run("_category_names", query):
            name = row.get("name_en") or row.get("name_nl")
            if row.get("id") is not None and name:
                out[str(row["id"])] = str(name)
        return out

    def _to_ingredients(self, rows: List[Dict[str, Any]]) -> List[Ingredient]:
        categories = self._category_names()
        items = []
        for row in rows:
            row = dict(row)
            cat_id = row.get("category_id")
            if cat_id is not None and not row.get("category_name"):
                row["category_name"] = categories.get(str(cat_id))
            items.append(ingredient_from_row(row))
        return items

    def _run(self, func: str, query) -> List[Dict[str, Any]]:
        try:
            res = query.execute()
        except Exception as exc:  # noqa: BLE001
            logger.error(
                "Supabase catalog query failed",
                exc_info=exc,
                extra={
                    "invoking_func": func,
                    "invoking_purpose": MODULE_PURPOSE,
                    "next_step": "Raise CatalogUnavailable",
                    "resolution": "Check SUPABASE_URL / key and network connectivity",
                },
            )
            raise CatalogUnavailable("ingredient catalog query failed", source=self.name, cause=exc) from exc
        return res.data or []

    # ------------------------------------------------------------------
    # Public APIs
    # ------------------------------------------------------------------
    def fetch_all(self) -> List[Ingredient]:
        query = self.client.table("ingredients").select(INGREDIENT_COLUMNS).order("name_en")
        rows = self._run("fetch_all", query)
        items = self._to_ingredients(rows)
        logger.info(
            "Fetched %d ingredients from Supabase",
            len(items),
            extra={"invoking_func": "fetch_all", "invoking_purpose": MODULE_PURPOSE},
        )
        return items

    def fetch_by_id(self, ingredient_id: str) -> Optional[Ingredient]:
        query = self.client.table("ingredients").select(INGREDIENT_COLUMNS).eq("id", ingredient_id).limit(1)
        rows = self._run("fetch_by_id", query)
        if not rows:
            return None
        return self._to_ingredients(rows)[0]

    def fetch_by_category(self, category_id: str) -> List[Ingredient]:
        query = (
            self.client.table("ingredients")
            .select(INGREDIENT_COLUMNS)
            .eq("category_id", category_id)
            .order("name_en")
        )
        return self._to_ingredients(self._run("fetch_by_category", query))

    def search(self, query: str, limit: int = 20) -> List[Ingredient]:
        q = (query or "").strip()
        if not q:
            return []
        # PostgREST `or` filter; commas / parentheses would break the filter syntax
        q = q.replace(",", " ").replace("(", " ").replace(")", " ")
        builder = (
            self.client.table("ingredients")
            .select(INGREDIENT_COLUMNS)
            .or_(f"name_en.ilike.%{q}%,name_nl.ilike.%{q}%")
            .order("name_en")
            .limit(limit)
        )
        return self._to_ingredients(self._run("search", builder))
