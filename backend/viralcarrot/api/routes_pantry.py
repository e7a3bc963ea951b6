# viralcarrot/api/routes_pantry.py
# POST /recipes/pantry: existing recipes you can make from what's on hand

from __future__ import annotations
import logging
from typing import List

from fastapi import APIRouter, Depends

from viralcarrot.core.cache import TTLCache, make_key
from viralcarrot.core.config import settings
from viralcarrot.core.deps import get_cache, get_pantry_sources
from viralcarrot.core.errors import RecipeInputError, failure_response
from viralcarrot.models.schemas import PantryRequest, PantryResponse
from viralcarrot.services.pantry import PantryWizard, match_summary
from viralcarrot.services.sources import RecipeSource

log = logging.getLogger(__name__)

router = APIRouter(prefix="/recipes", tags=["pantry"])


@router.post("/pantry", response_model=PantryResponse)
async def pantry_recipes(
    body: PantryRequest,
    cache: TTLCache = Depends(get_cache),
    sources: List[RecipeSource] = Depends(get_pantry_sources),
):
    pantry = body.pantryIngredients
    if not pantry:
        raise RecipeInputError("Please enter at least one pantry ingredient")
    key = make_key("pantry", pantry, body.filters.model_dump())

    async def compute() -> PantryResponse:
        recipes = await PantryWizard(sources, limit=settings.PANTRY_LIMIT).find(pantry, body.filters)
        return PantryResponse(
            recipes=recipes,
            total=len(recipes),
            pantryIngredients=pantry,
            matchSummary=match_summary(recipes),
        )

    try:
        return await cache.get_or_compute(key, settings.PANTRY_CACHE_TTL, compute)
    except Exception as e:
        log.exception("pantry search failed for %s", pantry)
        return failure_response(500, "Failed to find pantry recipes", e)
