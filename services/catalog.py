"""
services/catalog.py
────────────────────────────────────────────────────────────────────────
Catalog loader: database rows → tagged records → deduplicated catalog.

Every `load()` re-reads and re-deduplicates from scratch; nothing is
cached here.  When the database is not configured, or fails while
``fallback_enabled`` is on, the static seed catalog is served instead.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Awaitable, Callable, Dict, List

import pandas as pd
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from config import settings
from core.dedup import deduplicate_catalog
from core.models.catalog import CatalogKind, record_from_row
from core.models.meal import Meal
from services.db import CategoryRow, MealRow, PlanRow, session_scope
from services.fallback import fallback_rows

_LOG = logging.getLogger(__name__)

Row = Dict[str, Any]
Fetcher = Callable[[CatalogKind], Awaitable[List[Row]]]


# ───────── database access ───────────────────────────────────────────
def _query(kind: CatalogKind):
    if kind is CatalogKind.meal:
        t = MealRow.__table__
        return select(t).order_by(t.c.name)
    if kind is CatalogKind.category:
        t = CategoryRow.__table__
        return select(t).order_by(t.c.sort_order, t.c.name)
    t = PlanRow.__table__
    return select(t).order_by(t.c.total_weekly_price)


async def fetch_rows(kind: CatalogKind) -> List[Row]:
    async with session_scope() as db:
        result = await db.execute(_query(kind))
        return [dict(r) for r in result.mappings().all()]


def _missing(v: Any) -> bool:
    return v is None or (isinstance(v, float) and math.isnan(v))


def tabulate_rows(df: pd.DataFrame) -> List[Row]:
    """DataFrame ➜ row dicts with every column present; NaN becomes ``None``."""
    return [
        {k: (None if _missing(v) else v) for k, v in rec.items()}
        for rec in df.to_dict("records")
    ]


# ───────── loader ────────────────────────────────────────────────────
class CatalogLoader:
    def __init__(self, fetch: Fetcher | None = None, fallback_enabled: bool = True) -> None:
        # fetch=None → seed catalog only
        self._fetch = fetch
        self._fallback_enabled = fallback_enabled

    async def rows(self, kind: CatalogKind | str) -> List[Row]:
        kind = CatalogKind(kind)
        if self._fetch is None:
            return fallback_rows(kind)
        try:
            return await self._fetch(kind)
        except (SQLAlchemyError, OSError) as exc:
            if not self._fallback_enabled:
                raise
            _LOG.warning("catalog fetch for %s failed (%s) – serving seed data", kind.value, exc)
            return fallback_rows(kind)

    async def load(self, kind: CatalogKind | str) -> list:
        kind = CatalogKind(kind)
        raw = tabulate_rows(pd.DataFrame(await self.rows(kind)))
        records = [record_from_row(kind, r) for r in raw]
        return deduplicate_catalog(kind, records)

    async def load_meals_for_ranking(self) -> List[Meal]:
        records = await self.load(CatalogKind.meal)
        return [Meal.from_record(r, i) for i, r in enumerate(records)]


def default_loader() -> CatalogLoader:
    if not settings.database_url:
        return CatalogLoader()
    return CatalogLoader(fetch_rows, settings.catalog_fallback_enabled)
