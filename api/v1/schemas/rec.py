# api/v1/schemas/rec.py
from __future__ import annotations
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field


class ProfileIn(BaseModel):
    restrictions: List[str] = []
    allergies: List[str] = []
    calorie_goal: float | None = Field(None, examples=[2000])
    protein_goal: float | None = Field(None, examples=[150])
    favorite_meal_ids: List[str] = []
    disliked_meal_ids: List[str] = []
    carb_preference: Literal["low", "moderate", "high"] = "moderate"


class RecRequest(BaseModel):
    profile: ProfileIn = Field(default_factory=ProfileIn)
    limit: int | None = Field(None, ge=1, le=100)   # defaults to REC_PAGE_SIZE


class MealOut(BaseModel):
    id:            str
    name:          str
    dietary_tags:  str
    calories:      float | None
    protein:       float | None
    price:         float | None = None
    reason:        str | None = None   # short "why this meal" label

    model_config = ConfigDict(from_attributes=True)


class RecResponse(BaseModel):
    meals: List[MealOut]
    total: int        # size of the full ranked set before truncation
