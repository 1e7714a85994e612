# api/v1/catalog.py
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from api.v1.deps import get_loader
from core.models.catalog import CatalogKind, CategoryRecord, MealRecord, PlanRecord
from core.normalize import normalize_name
from services.catalog import CatalogLoader

router = APIRouter()


@router.get(
    "/meals",
    response_model=list[MealRecord],
    status_code=status.HTTP_200_OK,
    summary="Deduplicated meal catalog",
)
async def list_meals(
    category: str | None = None,
    popular: bool = False,
    limit: int | None = Query(None, ge=1),
    loader: CatalogLoader = Depends(get_loader),
) -> list[MealRecord]:
    meals = await loader.load(CatalogKind.meal)
    if category:
        wanted = normalize_name(category)
        meals = [m for m in meals if normalize_name(getattr(m, "category_name", None)) == wanted]
    if popular:
        meals = [m for m in meals if getattr(m, "is_popular", False)]
    if limit is not None:
        meals = meals[:limit]
    return meals


@router.get(
    "/categories",
    response_model=list[CategoryRecord],
    summary="Deduplicated meal categories",
)
async def list_categories(
    loader: CatalogLoader = Depends(get_loader),
) -> list[CategoryRecord]:
    return await loader.load(CatalogKind.category)


@router.get(
    "/plans",
    response_model=list[PlanRecord],
    summary="Deduplicated subscription plans",
)
async def list_plans(
    loader: CatalogLoader = Depends(get_loader),
) -> list[PlanRecord]:
    return await loader.load(CatalogKind.plan)
