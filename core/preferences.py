"""
Profile update operations.

Each function takes the current `DietaryProfile` and returns a new one;
nothing is stored here.  Favourites and dislikes are kept mutually
exclusive: liking a meal clears a dislike for it and vice versa.
"""
from __future__ import annotations

from typing import Any

from core.models.user import DietaryProfile


def add_favorite_meal(profile: DietaryProfile, meal_id: Any) -> DietaryProfile:
    meal_id = str(meal_id)
    return profile.model_copy(
        update={
            "favorite_meal_ids": profile.favorite_meal_ids | {meal_id},
            "disliked_meal_ids": profile.disliked_meal_ids - {meal_id},
        }
    )


def remove_favorite_meal(profile: DietaryProfile, meal_id: Any) -> DietaryProfile:
    return profile.model_copy(
        update={"favorite_meal_ids": profile.favorite_meal_ids - {str(meal_id)}}
    )


def add_disliked_meal(profile: DietaryProfile, meal_id: Any) -> DietaryProfile:
    meal_id = str(meal_id)
    return profile.model_copy(
        update={
            "disliked_meal_ids": profile.disliked_meal_ids | {meal_id},
            "favorite_meal_ids": profile.favorite_meal_ids - {meal_id},
        }
    )


def remove_disliked_meal(profile: DietaryProfile, meal_id: Any) -> DietaryProfile:
    return profile.model_copy(
        update={"disliked_meal_ids": profile.disliked_meal_ids - {str(meal_id)}}
    )


def update_dietary_profile(profile: DietaryProfile, **changes: Any) -> DietaryProfile:
    """
    Partial update.  Unlike ``model_copy(update=…)`` the merged data is
    validated again, so ``restrictions=["vegan"]`` becomes a frozenset and
    an unknown ``carb_preference`` is rejected.
    """
    unknown = set(changes) - set(DietaryProfile.model_fields)
    if unknown:
        raise ValueError(f"unknown profile fields: {sorted(unknown)}")
    return DietaryProfile.model_validate({**profile.model_dump(), **changes})
