# viralcarrot/core/deps.py
# Shared FastAPI dependencies (anon cookie, cache, rng, synthesizer, sources, community store)
# Tests swap any of these through app.dependency_overrides

from __future__ import annotations
import random
import uuid
from typing import List, Optional

from fastapi import Depends, Header, HTTPException, Request, Response

from viralcarrot.core.cache import TTLCache
from viralcarrot.core.config import settings
from viralcarrot.db.init import get_db
from viralcarrot.services.community import COLLECTION, CommunityRecipeStore
from viralcarrot.services.images import UnsplashImageSearch
from viralcarrot.services.sources import (
    CommunityRecipeSource,
    RecipePuppySource,
    RecipeSource,
    TheMealDBSource,
    default_mock_sources,
)
from viralcarrot.services.synthesizer import Synthesizer

COOKIE = "anon_id"
MAX_AGE = 60 * 60 * 24 * 365 * 2  # 2 years


def get_or_set_anon_id(request: Request, response: Response) -> str:
    # issue the cookie when missing, reuse it otherwise
    v = request.cookies.get(COOKIE)
    if not v:
        v = uuid.uuid4().hex
        response.set_cookie(COOKIE, v, max_age=MAX_AGE, httponly=True, samesite="lax")
    return v


def get_cache(request: Request) -> TTLCache:
    return request.app.state.cache


def get_image_search(request: Request) -> Optional[UnsplashImageSearch]:
    return getattr(request.app.state, "image_search", None)


def get_rng() -> random.Random:
    return random.Random()


def get_synthesizer(
    rng: random.Random = Depends(get_rng),
    image_search: Optional[UnsplashImageSearch] = Depends(get_image_search),
) -> Synthesizer:
    return Synthesizer(
        rng=rng,
        image_search=image_search,
        image_timeout=settings.IMAGE_SEARCH_TIMEOUT,
        image_upgrade_limit=settings.IMAGE_UPGRADE_LIMIT,
    )


def get_community_store() -> CommunityRecipeStore:
    try:
        db = get_db()
    except RuntimeError:
        raise HTTPException(status_code=503, detail="Community recipes are unavailable right now")
    return CommunityRecipeStore(db[COLLECTION])


def get_optional_community_store() -> Optional[CommunityRecipeStore]:
    # None until Mongo is up; generation then skips community candidates
    try:
        return CommunityRecipeStore(get_db()[COLLECTION])
    except RuntimeError:
        return None


def get_external_sources(rng: random.Random = Depends(get_rng)) -> List[RecipeSource]:
    return default_mock_sources(rng)


def get_generate_sources(
    rng: random.Random = Depends(get_rng),
    store: Optional[CommunityRecipeStore] = Depends(get_optional_community_store),
) -> List[RecipeSource]:
    sources = default_mock_sources(rng)
    if store is not None:
        sources.append(CommunityRecipeSource(store))
    return sources


def get_pantry_sources(rng: random.Random = Depends(get_rng)) -> List[RecipeSource]:
    return [TheMealDBSource(rng), RecipePuppySource(rng)]


def require_admin(x_admin_token: Optional[str] = Header(None)) -> None:
    if not settings.ADMIN_TOKEN or x_admin_token != settings.ADMIN_TOKEN:
        raise HTTPException(status_code=403, detail="Admin token required")
