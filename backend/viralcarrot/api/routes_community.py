# viralcarrot/api/routes_community.py
# Community recipes: trending feed, own submissions, admin moderation
# The submitter is the anon_id cookie; moderation needs the X-Admin-Token header

from __future__ import annotations
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from viralcarrot.core.deps import get_community_store, get_or_set_anon_id, require_admin
from viralcarrot.models.schemas import UserRecipe, UserRecipeIn, UserRecipeListResponse
from viralcarrot.services.community import TRENDING_LIMIT, CommunityRecipeStore

log = logging.getLogger(__name__)

router = APIRouter(prefix="/recipes", tags=["community"])
admin_router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("/trending", response_model=UserRecipeListResponse)
async def trending_recipes(
    limit: int = Query(TRENDING_LIMIT, ge=1, le=50),
    store: CommunityRecipeStore = Depends(get_community_store),
):
    recipes = await store.trending(limit)
    return UserRecipeListResponse(recipes=recipes, total=len(recipes))


@router.get("/user", response_model=UserRecipeListResponse)
async def my_recipes(
    anon_id: str = Depends(get_or_set_anon_id),
    store: CommunityRecipeStore = Depends(get_community_store),
):
    recipes = await store.list_for_user(anon_id)
    return UserRecipeListResponse(recipes=recipes, total=len(recipes))


@router.post("/user")
async def submit_recipe(
    payload: UserRecipeIn,
    anon_id: str = Depends(get_or_set_anon_id),
    store: CommunityRecipeStore = Depends(get_community_store),
):
    recipe = await store.add(payload, created_by=anon_id)
    return {"success": True, "recipe": recipe.model_dump(mode="json")}


# ---------------------------------------------------------------------
# moderation
# ---------------------------------------------------------------------
@admin_router.get("/recipes", response_model=UserRecipeListResponse)
async def list_for_moderation(
    status: Optional[str] = Query(None, pattern="^(pending|approved|rejected)$"),
    store: CommunityRecipeStore = Depends(get_community_store),
):
    recipes = await store.list_by_status(status)
    return UserRecipeListResponse(recipes=recipes, total=len(recipes))


async def _moderate(store: CommunityRecipeStore, recipe_id: str, approved: bool) -> UserRecipe:
    recipe = await store.set_status(recipe_id, approved)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe


@admin_router.post("/recipes/{recipe_id}/approve")
async def approve_recipe(recipe_id: str, store: CommunityRecipeStore = Depends(get_community_store)):
    recipe = await _moderate(store, recipe_id, True)
    return {"success": True, "recipe": recipe.model_dump(mode="json")}


@admin_router.post("/recipes/{recipe_id}/reject")
async def reject_recipe(recipe_id: str, store: CommunityRecipeStore = Depends(get_community_store)):
    recipe = await _moderate(store, recipe_id, False)
    return {"success": True, "recipe": recipe.model_dump(mode="json")}
