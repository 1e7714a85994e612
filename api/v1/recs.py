# api/v1/recs.py
from __future__ import annotations

from fastapi import APIRouter, Depends, status

from api.v1.deps import get_loader
from api.v1.schemas import MealOut, ProfileIn, RecRequest, RecResponse
from config import settings
from core.meal_ranker import rank, recommendation_reason
from core.models.user import DietaryProfile
from services.catalog import CatalogLoader

router = APIRouter()


def _to_profile(body: ProfileIn) -> DietaryProfile:
    """Request body ➜ core profile, filling unset goals from settings."""
    data = body.model_dump()
    if data["calorie_goal"] is None:
        data["calorie_goal"] = settings.default_calorie_goal
    if data["protein_goal"] is None:
        data["protein_goal"] = settings.default_protein_goal
    return DietaryProfile.model_validate(data)


@router.post("", response_model=RecResponse, status_code=status.HTTP_200_OK)
async def recommend(
    body: RecRequest,
    loader: CatalogLoader = Depends(get_loader),
) -> RecResponse:
    catalog = await loader.load_meals_for_ranking()
    profile = _to_profile(body.profile)
    ranked = rank(catalog, profile)

    # the ranker returns everything; the page size is a display concern
    limit = body.limit or settings.rec_page_size
    return RecResponse(
        meals=[
            MealOut.model_validate(m, from_attributes=True).model_copy(
                update={"reason": recommendation_reason(m, profile)}
            )
            for m in ranked[:limit]
        ],
        total=len(ranked),
    )
