# viralcarrot/main.py
# FastAPI app setup: logging, CORS, process-scoped cache / image search, routers
# Routers are split per feature; each file defines its own prefix

from __future__ import annotations
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from viralcarrot.api.routes_community import admin_router
from viralcarrot.api.routes_community import router as community_router
from viralcarrot.api.routes_generate import router as generate_router
from viralcarrot.api.routes_pantry import router as pantry_router
from viralcarrot.core.cache import TTLCache
from viralcarrot.core.config import settings
from viralcarrot.core.errors import RecipeInputError, recipe_input_error_handler
from viralcarrot.core.logging import setup_logging
from viralcarrot.db.indexes import ensure_indexes
from viralcarrot.db.init import close_db, get_db, init_db_with_retries
from viralcarrot.services.images import UnsplashImageSearch

setup_logging()
log = logging.getLogger(__name__)

app = FastAPI(title="ViralCarrot - Recipe API", version="0.1.0")

# frontend on localhost:3000, cookies allowed
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RecipeInputError, recipe_input_error_handler)

app.state.cache = TTLCache()
app.state.image_search = (
    UnsplashImageSearch(settings.UNSPLASH_ACCESS_KEY, timeout=settings.IMAGE_SEARCH_TIMEOUT)
    if settings.UNSPLASH_ACCESS_KEY
    else None
)
if app.state.image_search is None:
    log.info("UNSPLASH_ACCESS_KEY not set; using curated fallback images only")


@app.on_event("startup")
async def on_startup() -> None:
    # 1) connect to Mongo (community recipes); the recipe pipeline runs without it
    db = await init_db_with_retries()
    if db is None:
        return

    # 2) indexes
    try:
        await ensure_indexes()
        log.info("indexes ensured")
    except Exception as e:
        log.warning("ensure_indexes failed: %s", e)


@app.on_event("shutdown")
async def on_shutdown() -> None:
    await close_db()


@app.get("/")
async def root():
    return {"status": "ok"}


@app.get("/health")
async def health():
    ok = {"status": "ok", "db": "skip", "cacheEntries": len(app.state.cache)}
    try:
        db = get_db()
    except RuntimeError:
        return ok
    try:
        await db.command("ping")
        ok["db"] = "ok"
    except Exception as e:
        ok["db"] = f"error: {e}"
    return ok


app.include_router(generate_router)
app.include_router(pantry_router)
app.include_router(community_router)
app.include_router(admin_router)
