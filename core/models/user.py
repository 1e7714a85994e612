from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator


class DietaryProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    restrictions: frozenset[str] = frozenset()
    allergies: frozenset[str] = frozenset()
    calorie_goal: float = 2000
    protein_goal: float = 150
    favorite_meal_ids: frozenset[str] = frozenset()
    disliked_meal_ids: frozenset[str] = frozenset()
    # informational only – the ranker does not read these
    preferences: frozenset[str] = frozenset()
    carb_preference: Literal["low", "moderate", "high"] = "moderate"
    goals: tuple[str, ...] = ()

    @field_validator(
        "restrictions", "allergies", "preferences",
        "favorite_meal_ids", "disliked_meal_ids",
        mode="before",
    )
    @classmethod
    def _as_text_set(cls, v: Any) -> Any:
        if v is None:
            return frozenset()
        if isinstance(v, (str, int)):
            v = [v]
        return frozenset(str(x) for x in v)
