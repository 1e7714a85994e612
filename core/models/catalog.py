"""
Tagged catalog record variants.

The loader decides the kind of every row it hands over; the deduplicator
never infers it from the record's shape.  Each variant carries the fields
its equivalence rule needs, and keeps any display columns as extras.
"""
from __future__ import annotations

import math
from enum import Enum
from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.normalize import to_number


class CatalogKind(str, Enum):
    meal = "meal"
    category = "category"
    plan = "plan"


class _RecordBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    id: int | str | None = None
    name: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def _name_as_text(cls, v: Any) -> str | None:
        return None if v is None else str(v)


class MealRecord(_RecordBase):
    kind: Literal["meal"] = "meal"
    price: float | None = None

    @field_validator("price", mode="before")
    @classmethod
    def _coerce_price(cls, v: Any) -> float | None:
        return None if v is None else to_number(v)


class CategoryRecord(_RecordBase):
    kind: Literal["category"] = "category"


class PlanRecord(_RecordBase):
    kind: Literal["plan"] = "plan"
    meals_per_week: int | None = None

    @field_validator("meals_per_week", mode="before")
    @classmethod
    def _coerce_count(cls, v: Any) -> int | None:
        if v is None:
            return None
        n = to_number(v, default=math.nan)
        # non-integral counts can never be equal to a real plan size
        return int(n) if not math.isnan(n) and n.is_integer() else None


CatalogRecord = Annotated[
    Union[MealRecord, CategoryRecord, PlanRecord],
    Field(discriminator="kind"),
]

_MODELS: dict[CatalogKind, type[_RecordBase]] = {
    CatalogKind.meal: MealRecord,
    CatalogKind.category: CategoryRecord,
    CatalogKind.plan: PlanRecord,
}


def record_from_row(kind: CatalogKind | str, row: Mapping[str, Any]) -> _RecordBase:
    """Build the tagged record for one raw row of the given kind."""
    kind = CatalogKind(kind)
    return _MODELS[kind].model_validate({**row, "kind": kind.value})
