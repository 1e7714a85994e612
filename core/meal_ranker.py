"""
core/meal_ranker.py
────────────────────────────────────────────────────────────────────────
Profile-driven meal ranking.

Responsibilities
----------------
1.   `filter_meals()` – drop meals the profile rules out: disliked ids,
     any allergen tag, and (when restrictions exist) meals matching none
     of the restrictions.
2.   `sort_meals()`   – stable sort on (favourite-first, calorie
     distance, protein distance); remaining ties keep input order.
3.   `rank()`         – both stages, full result, no pagination.
4.   `recommendation_reason()` – one-line "why this meal" label.

Tags are split on commas into a set; a profile term matches when it is a
case-insensitive *substring* of any tag, so an allergy to "nuts" also
rules out "coconuts".

The ranker is a pure function of its arguments: the caller passes the
profile in on every call.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np

from core.models.meal import Meal
from core.models.user import DietaryProfile
from core.normalize import contains_any, normalize_terms, parse_tags, to_number

_LOG = logging.getLogger(__name__)

CALORIE_MATCH_WINDOW = 100      # kcal either side of the goal
PROTEIN_MATCH_SHARE = 0.2       # share of the daily protein goal


def _check_args(catalog: Sequence[Meal] | None, profile: DietaryProfile | None) -> None:
    if catalog is None:
        raise TypeError("catalog must be a list of meals, not None")
    if profile is None:
        raise TypeError("profile is required – pass a default DietaryProfile()")


# ─────────────────────────────── filter ───────────────────────── #
def filter_meals(catalog: Sequence[Meal], profile: DietaryProfile) -> List[Meal]:
    _check_args(catalog, profile)

    allergies = normalize_terms(profile.allergies)
    restrictions = normalize_terms(profile.restrictions)
    disliked = profile.disliked_meal_ids

    out: List[Meal] = []
    for meal in catalog:
        if meal.id in disliked:
            continue
        tags = parse_tags(meal.dietary_tags)
        if allergies and contains_any(tags, allergies):
            continue
        if restrictions and not contains_any(tags, restrictions):
            continue
        out.append(meal)
    return out


# ──────────────────────────── sorting ─────────────────────────── #
def sort_meals(meals: Sequence[Meal], profile: DietaryProfile) -> List[Meal]:
    """
    Order by favourite flag, then |calories − goal|, then |protein − goal|.

    ``np.lexsort`` is stable and treats its *last* key as primary, so keys
    are passed least-significant first.  Missing numbers count as 0.
    """
    _check_args(meals, profile)
    if not meals:
        return []

    favorites = profile.favorite_meal_ids
    fav_key = np.array([0 if m.id in favorites else 1 for m in meals], dtype=np.int8)
    cal = np.array([to_number(m.calories) for m in meals], dtype=float)
    pro = np.array([to_number(m.protein) for m in meals], dtype=float)

    cal_gap = np.abs(cal - to_number(profile.calorie_goal))
    pro_gap = np.abs(pro - to_number(profile.protein_goal))

    order = np.lexsort((pro_gap, cal_gap, fav_key))
    return [meals[i] for i in order]


# ──────────────────────────── wrapper ─────────────────────────── #
def rank(catalog: Sequence[Meal], profile: DietaryProfile) -> List[Meal]:
    filtered = filter_meals(catalog, profile)
    if catalog and not filtered:
        _LOG.warning("No meals left after filtering – returning empty list")
        return filtered

    ranked = sort_meals(filtered, profile)
    _LOG.debug("ranked %d of %d meals", len(ranked), len(catalog))
    return ranked


# ──────────────────────────── reasons ─────────────────────────── #
def recommendation_reason(meal: Meal, profile: DietaryProfile) -> str:
    """
    First matching rule wins:

      restriction match  → "Matches your <restriction> preference"
      calories within 100 of the goal → "Perfect for your calorie goal"
      protein ≥ 20 % of the goal      → "High protein for your goals"
      otherwise                       → "Popular choice"

    Restrictions are tried in sorted order so the label is deterministic.
    """
    _check_args([meal], profile)
    tags = parse_tags(meal.dietary_tags)
    for restriction in sorted(normalize_terms(profile.restrictions)):
        if contains_any(tags, [restriction]):
            return f"Matches your {restriction} preference"

    calorie_gap = abs(to_number(meal.calories) - to_number(profile.calorie_goal))
    if calorie_gap < CALORIE_MATCH_WINDOW:
        return "Perfect for your calorie goal"

    if to_number(meal.protein) >= PROTEIN_MATCH_SHARE * to_number(profile.protein_goal):
        return "High protein for your goals"

    return "Popular choice"
