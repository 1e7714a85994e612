# tests/test_catalog_models.py
import pytest
from pydantic import TypeAdapter, ValidationError

from core.models.catalog import (
    CatalogRecord,
    CategoryRecord,
    MealRecord,
    PlanRecord,
    record_from_row,
)
from core.models.meal import Meal


def test_record_from_row_tags_kind_and_keeps_extras():
    rec = record_from_row("meal", {"id": 3, "name": "Salmon", "price": "18.99", "calories": 520})
    assert isinstance(rec, MealRecord)
    assert rec.kind == "meal"
    assert rec.price == 18.99
    assert rec.calories == 520


def test_record_from_row_overrides_stray_kind():
    rec = record_from_row("category", {"name": "Lunch", "kind": "plan"})
    assert isinstance(rec, CategoryRecord)


def test_plan_count_coercion():
    assert PlanRecord(name="Basic", meals_per_week="10").meals_per_week == 10
    assert PlanRecord(name="Basic", meals_per_week=10.0).meals_per_week == 10
    assert PlanRecord(name="Basic", meals_per_week=10.5).meals_per_week is None
    assert PlanRecord(name="Basic").meals_per_week is None


def test_unknown_kind_rejected():
    with pytest.raises(ValueError):
        record_from_row("drink", {"name": "Cola"})


def test_discriminated_union():
    adapter = TypeAdapter(list[CatalogRecord])
    out = adapter.validate_python(
        [{"kind": "plan", "name": "Elite", "meals_per_week": 21}, {"kind": "category", "name": "Dinner"}]
    )
    assert isinstance(out[0], PlanRecord)
    assert isinstance(out[1], CategoryRecord)


def test_records_are_frozen():
    rec = MealRecord(name="Bowl", price=10)
    with pytest.raises(ValidationError):
        rec.price = 11


def test_meal_from_record():
    rec = record_from_row(
        "meal",
        {"id": 4, "name": "Buddha Bowl", "price": 15.99,
         "dietary_tags": "vegan, sesame", "calories": 480, "protein": None},
    )
    meal = Meal.from_record(rec)
    assert meal.id == "4"
    assert meal.dietary_tags == "vegan, sesame"
    assert meal.calories == 480
    assert meal.protein is None
    assert meal.price == 15.99


def test_meal_accepts_tag_lists():
    assert Meal(id="x", dietary_tags=["vegan", "soy"]).dietary_tags == "vegan,soy"
    assert Meal(id="x", dietary_tags=None).dietary_tags == ""
