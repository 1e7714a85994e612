"""
Loader tests – fake fetchers stand in for the database.
"""
import asyncio
import logging

import pytest
from sqlalchemy.exc import OperationalError

from core.models.catalog import CatalogKind, MealRecord, PlanRecord
from core.models.meal import Meal
import services.db as db
from services.catalog import CatalogLoader, _query, default_loader
from services.fallback import FALLBACK_MEALS, fallback_rows

ROWS = {
    CatalogKind.meal: [
        {"id": 1, "name": "Chili", "price": 12.00, "dietary_tags": "spicy", "calories": 600},
        {"id": 2, "name": " chili ", "price": 12.009, "dietary_tags": "spicy", "calories": 610},
        {"id": 3, "name": "Chili", "price": 12.01, "dietary_tags": "spicy"},
    ],
    CatalogKind.category: [
        {"id": 1, "name": "Lunch"},
        {"id": 2, "name": "LUNCH "},
    ],
    CatalogKind.plan: [
        {"id": 1, "name": "Basic", "meals_per_week": 10},
        {"id": 2, "name": "basic", "meals_per_week": 12},
        {"id": 3, "name": "Basic", "meals_per_week": None},
    ],
}


async def _fake_fetch(kind):
    return [dict(r) for r in ROWS[kind]]


async def _broken_fetch(kind):
    raise OperationalError("SELECT 1", {}, Exception("connection refused"))


def _run(coro):
    return asyncio.run(coro)


# ── happy path ───────────────────────────────────────────────────────
def test_load_meals_dedupes():
    meals = _run(CatalogLoader(_fake_fetch).load("meal"))
    assert [m.id for m in meals] == [1, 3]
    assert all(isinstance(m, MealRecord) for m in meals)


def test_load_categories_and_plans():
    loader = CatalogLoader(_fake_fetch)
    assert [c.id for c in _run(loader.load(CatalogKind.category))] == [1]

    plans = _run(loader.load(CatalogKind.plan))
    assert [p.id for p in plans] == [1, 2, 3]
    assert all(isinstance(p, PlanRecord) for p in plans)
    assert [p.meals_per_week for p in plans] == [10, 12, None]


def test_missing_columns_become_none():
    meals = _run(CatalogLoader(_fake_fetch).load("meal"))
    assert meals[1].calories is None


def test_each_load_is_independent():
    loader = CatalogLoader(_fake_fetch)
    first = _run(loader.load("meal"))
    second = _run(loader.load("meal"))
    assert first == second
    assert first[0] is not second[0]


def test_load_meals_for_ranking():
    meals = _run(CatalogLoader(_fake_fetch).load_meals_for_ranking())
    assert all(isinstance(m, Meal) for m in meals)
    assert [m.id for m in meals] == ["1", "3"]
    assert meals[1].calories is None


def test_rows_without_ids_get_distinct_keys():
    async def fetch(kind):
        return [
            {"name": "Soup", "price": 5.0},
            {"name": "Soup", "price": 9.0},
        ]

    meals = _run(CatalogLoader(fetch).load_meals_for_ranking())
    assert [m.id for m in meals] == ["Soup#0", "Soup#1"]


def test_meal_query_keeps_unavailable_rows():
    sql = str(_query(CatalogKind.meal))
    assert "WHERE" not in sql
    assert "ORDER BY meals.name" in sql


# ── fallback ─────────────────────────────────────────────────────────
def test_no_fetcher_serves_seed_catalog():
    meals = _run(CatalogLoader().load("meal"))
    assert [m.name for m in meals] == [m["name"] for m in FALLBACK_MEALS]


def test_store_failure_falls_back(caplog):
    with caplog.at_level(logging.WARNING, logger="services.catalog"):
        plans = _run(CatalogLoader(_broken_fetch).load("plan"))
    assert [p.name for p in plans] == ["Basic Plan", "Premium Plan", "Elite Plan"]
    assert "serving seed data" in caplog.text


def test_store_failure_propagates_without_fallback():
    with pytest.raises(OperationalError):
        _run(CatalogLoader(_broken_fetch, fallback_enabled=False).load("plan"))


def test_fallback_rows_are_copies():
    rows = fallback_rows("meal")
    rows[0]["name"] = "changed"
    assert FALLBACK_MEALS[0]["name"] == "Avocado Toast Deluxe"


# ── store boundary ───────────────────────────────────────────────────
def test_session_scope_needs_database_url(monkeypatch):
    monkeypatch.setattr(db.settings, "database_url", None)
    monkeypatch.setattr(db, "_ENGINE", None)

    async def open_session():
        async with db.session_scope():
            pass

    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        _run(open_session())


def test_default_loader_without_database_serves_seed_catalog(monkeypatch):
    monkeypatch.setattr(db.settings, "database_url", None)
    plans = _run(default_loader().load("plan"))
    assert [p.meals_per_week for p in plans] == [10, 16, 21]
