from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from core.models.catalog import MealRecord
from core.normalize import to_number


class Meal(BaseModel):
    """A catalog meal as the ranker sees it."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str
    name: str = ""
    dietary_tags: str = ""       # comma-separated, case-insensitive
    calories: float | None = None
    protein: float | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, v: Any) -> Any:
        return str(v) if isinstance(v, int) else v

    @field_validator("name", "dietary_tags", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        if v is None:
            return ""
        if isinstance(v, (set, frozenset)):
            v = sorted(str(t) for t in v)
        if isinstance(v, (list, tuple)):
            return ",".join(str(t) for t in v)
        return str(v)

    @field_validator("calories", "protein", mode="before")
    @classmethod
    def _number(cls, v: Any) -> float | None:
        return None if v is None else to_number(v)

    @classmethod
    def from_record(cls, record: MealRecord, position: int | None = None) -> "Meal":
        """
        Rows without an id are keyed by name, plus their catalog position
        when known, so two unnamed-id rows never share a key.
        """
        extra = record.model_extra or {}
        if record.id is not None:
            meal_id = record.id
        elif position is not None:
            meal_id = f"{record.name or ''}#{position}"
        else:
            meal_id = record.name or ""
        return cls.model_validate(
            {
                **extra,
                "id": meal_id,
                "name": record.name,
                "price": record.price,
            }
        )
