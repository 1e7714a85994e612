# api/v1/router.py
from fastapi import APIRouter

from . import catalog, recs

api_router = APIRouter()

api_router.include_router(catalog.router, prefix="/catalog", tags=["Catalog"])
api_router.include_router(recs.router, prefix="/recommendations", tags=["Recommendations"])
