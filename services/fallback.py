"""
Static seed catalog.

Served by the loader when the database is unreachable (or not
configured) and used by ``scripts.seed_catalog`` to populate a fresh one.
"""
from __future__ import annotations

import copy
from typing import Any, Dict, List

from core.models.catalog import CatalogKind

FALLBACK_MEALS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "name": "Avocado Toast Deluxe",
        "description": "Creamy avocado on artisan sourdough with poached egg",
        "price": 12.99,
        "category_name": "Breakfast",
        "dietary_tags": "vegetarian",
        "calories": 420, "protein": 18.5, "carbohydrates": 35.2, "fat": 22.1,
        "is_popular": True,
    },
    {
        "id": 2,
        "name": "Protein Power Bowl",
        "description": "Greek yogurt with berries, granola, and almond butter",
        "price": 9.99,
        "category_name": "Breakfast",
        "dietary_tags": "vegetarian, gluten-free, nuts",
        "calories": 380, "protein": 25.0, "carbohydrates": 40.5, "fat": 15.2,
        "is_popular": False,
    },
    {
        "id": 3,
        "name": "Grilled Salmon Salad",
        "description": "Fresh Atlantic salmon over mixed greens with quinoa",
        "price": 18.99,
        "category_name": "Lunch",
        "dietary_tags": "gluten-free, high-protein, fish",
        "calories": 520, "protein": 35.8, "carbohydrates": 25.4, "fat": 28.2,
        "is_popular": True,
    },
    {
        "id": 4,
        "name": "Buddha Bowl Supreme",
        "description": "Nutrient-packed bowl with roasted vegetables and tahini",
        "price": 15.99,
        "category_name": "Lunch",
        "dietary_tags": "vegan, vegetarian, gluten-free, sesame",
        "calories": 480, "protein": 18.2, "carbohydrates": 55.8, "fat": 20.1,
        "is_popular": False,
    },
    {
        "id": 5,
        "name": "Herb-Crusted Chicken",
        "description": "Organic chicken breast with roasted vegetables",
        "price": 22.99,
        "category_name": "Dinner",
        "dietary_tags": "gluten-free, high-protein",
        "calories": 580, "protein": 42.5, "carbohydrates": 35.2, "fat": 22.8,
        "is_popular": False,
    },
]

FALLBACK_CATEGORIES: List[Dict[str, Any]] = [
    {"id": 1, "name": "Breakfast", "sort_order": 1,
     "description": "Nutritious morning meals to start your day right"},
    {"id": 2, "name": "Lunch", "sort_order": 2,
     "description": "Balanced midday meals for sustained energy"},
    {"id": 3, "name": "Dinner", "sort_order": 3,
     "description": "Satisfying evening meals for optimal recovery"},
    {"id": 4, "name": "Snacks", "sort_order": 4,
     "description": "Healthy snacks to keep you energized"},
]

FALLBACK_PLANS: List[Dict[str, Any]] = [
    {"id": 1, "name": "Basic Plan", "price": 299.99, "total_weekly_price": 74.99,
     "duration_days": 30, "meals_per_week": 10, "calories_per_day": 1800,
     "description": "Perfect for beginners looking to start their health journey",
     "is_popular": False},
    {"id": 2, "name": "Premium Plan", "price": 499.99, "total_weekly_price": 124.99,
     "duration_days": 30, "meals_per_week": 16, "calories_per_day": 2000,
     "description": "Our most popular choice for serious health enthusiasts",
     "is_popular": True},
    {"id": 3, "name": "Elite Plan", "price": 799.99, "total_weekly_price": 199.99,
     "duration_days": 30, "meals_per_week": 21, "calories_per_day": 2200,
     "description": "Ultimate nutrition experience with personalized coaching",
     "is_popular": False},
]

_BY_KIND: Dict[CatalogKind, List[Dict[str, Any]]] = {
    CatalogKind.meal: FALLBACK_MEALS,
    CatalogKind.category: FALLBACK_CATEGORIES,
    CatalogKind.plan: FALLBACK_PLANS,
}


def fallback_rows(kind: CatalogKind | str) -> List[Dict[str, Any]]:
    """Fresh copies of the seed rows for ``kind``."""
    return copy.deepcopy(_BY_KIND[CatalogKind(kind)])
