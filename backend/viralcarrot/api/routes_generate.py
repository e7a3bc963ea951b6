# viralcarrot/api/routes_generate.py
# Recipe generation: templated originals + external candidates -> ranked page
# POST /recipes/generate  (originals first, then external, 6 per page)
# POST /recipes/external  (external only, best ingredient match first)

from __future__ import annotations
import asyncio
import logging
from typing import List

from fastapi import APIRouter, Depends

from viralcarrot.core.cache import TTLCache, make_key
from viralcarrot.core.config import settings
from viralcarrot.core.deps import get_cache, get_external_sources, get_generate_sources, get_synthesizer
from viralcarrot.core.errors import RecipeInputError, failure_response
from viralcarrot.models.schemas import ExternalRequest, ExternalResponse, GenerateRequest, GenerateResponse
from viralcarrot.services.images import RequestContext
from viralcarrot.services.ranker import aggregate, top_external
from viralcarrot.services.sources import RecipeSource, build_search_query, count_by_source, gather_candidates
from viralcarrot.services.synthesizer import Synthesizer

log = logging.getLogger(__name__)

router = APIRouter(prefix="/recipes", tags=["recipes"])


def _require_main_food(main_food: str) -> str:
    food = (main_food or "").strip()
    if not food:
        raise RecipeInputError("Main food is required")
    return food


@router.post("/generate", response_model=GenerateResponse)
async def generate_recipes(
    body: GenerateRequest,
    cache: TTLCache = Depends(get_cache),
    synth: Synthesizer = Depends(get_synthesizer),
    sources: List[RecipeSource] = Depends(get_generate_sources),
):
    main_food = _require_main_food(body.mainFood)
    page = max(1, body.page)
    key = make_key("generate", main_food.lower(), body.ingredients, body.filters.model_dump(), page)

    async def compute() -> GenerateResponse:
        ctx = RequestContext()
        query = build_search_query(main_food, body.ingredients, body.filters)
        originals, external = await asyncio.gather(
            synth.synthesize_many(main_food, body.ingredients, body.filters, settings.ORIGINALS_PER_REQUEST, ctx),
            gather_candidates(sources, query, main_food, body.ingredients),
        )
        ranked = aggregate(originals, external, page, settings.PAGE_SIZE)
        log.info(
            "generate %r: %d originals + %d external, page %d -> %d items",
            main_food, len(originals), len(external), page, len(ranked.items),
        )
        return GenerateResponse(recipes=ranked.items, total=ranked.total, page=page, hasMore=ranked.hasMore)

    try:
        return await cache.get_or_compute(key, settings.GENERATE_CACHE_TTL, compute)
    except Exception as e:
        log.exception("generate failed for %r", main_food)
        return failure_response(500, "Failed to generate recipes", e)


@router.post("/external", response_model=ExternalResponse)
async def external_recipes(
    body: ExternalRequest,
    cache: TTLCache = Depends(get_cache),
    sources: List[RecipeSource] = Depends(get_external_sources),
):
    main_food = _require_main_food(body.mainFood)
    key = make_key("external", main_food.lower(), body.ingredients, body.filters.model_dump())

    async def compute() -> ExternalResponse:
        query = build_search_query(main_food, body.ingredients, body.filters)
        found = await gather_candidates(sources, query, main_food, body.ingredients)
        recipes = top_external(found, settings.EXTERNAL_LIMIT)
        log.info("external %r: %d found, %d returned", query, len(found), len(recipes))
        return ExternalResponse(recipes=recipes, total=len(recipes), sources=count_by_source(recipes))

    try:
        return await cache.get_or_compute(key, settings.EXTERNAL_CACHE_TTL, compute)
    except Exception as e:
        log.exception("external search failed for %r", main_food)
        return failure_response(500, "Failed to fetch external recipes", e)
