# viralcarrot/services/community.py
# Community (user-submitted) recipes stored in Mongo ("user_recipes")
# - new submissions start as pending; only approved + public ones are shown to others
# - users are the anonymous anon_id cookie; no accounts here

from __future__ import annotations
import logging
import re
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pymongo import DESCENDING

from viralcarrot.models.schemas import UserRecipe, UserRecipeIn

log = logging.getLogger(__name__)

COLLECTION = "user_recipes"
TRENDING_LIMIT = 12

APPROVED_PUBLIC = {"status": "approved", "isPublic": True}


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _from_doc(doc: Dict[str, Any]) -> UserRecipe:
    doc = {k: v for k, v in doc.items() if k != "_id"}
    return UserRecipe(**doc)


class CommunityRecipeStore:
    def __init__(self, collection):
        # motor AsyncIOMotorCollection (or anything with the same async surface)
        self.col = collection

    async def add(self, payload: UserRecipeIn, created_by: str) -> UserRecipe:
        now = _now()
        recipe = UserRecipe(
            **payload.model_dump(),
            id=f"user-{uuid.uuid4().hex}",
            createdBy=created_by,
            status="pending",
            isApproved=False,
            createdAt=now,
            updatedAt=now,
        )
        await self.col.insert_one(recipe.model_dump())
        log.info("community recipe submitted id=%s by=%s", recipe.id, created_by[:8])
        return recipe

    async def list_for_user(self, user_id: str, limit: int = 100) -> List[UserRecipe]:
        cur = self.col.find({"createdBy": user_id}).sort("createdAt", DESCENDING).limit(limit)
        return [_from_doc(d) for d in await cur.to_list(length=limit)]

    async def trending(self, limit: int = TRENDING_LIMIT) -> List[UserRecipe]:
        cur = self.col.find(dict(APPROVED_PUBLIC)).sort("createdAt", DESCENDING).limit(limit)
        return [_from_doc(d) for d in await cur.to_list(length=limit)]

    async def get(self, recipe_id: str) -> Optional[UserRecipe]:
        doc = await self.col.find_one({"id": recipe_id})
        return _from_doc(doc) if doc else None

    async def set_status(self, recipe_id: str, approved: bool) -> Optional[UserRecipe]:
        status = "approved" if approved else "rejected"
        res = await self.col.update_one(
            {"id": recipe_id},
            {"$set": {"status": status, "isApproved": approved, "updatedAt": _now()}},
        )
        if not res.matched_count:
            return None
        log.info("community recipe %s -> %s", recipe_id, status)
        return await self.get(recipe_id)

    async def search_approved(self, main_food: str, limit: int = 3) -> List[UserRecipe]:
        food = (main_food or "").strip()
        if not food:
            return []
        rx = re.compile(re.escape(food), re.I)
        q = dict(APPROVED_PUBLIC)
        q["$or"] = [{"title": rx}, {"ingredients": rx}]
        cur = self.col.find(q).sort("createdAt", DESCENDING).limit(limit)
        return [_from_doc(d) for d in await cur.to_list(length=limit)]

    async def list_by_status(self, status: Optional[str] = None, limit: int = 100) -> List[UserRecipe]:
        q = {"status": status} if status else {}
        cur = self.col.find(q).sort("createdAt", DESCENDING).limit(limit)
        return [_from_doc(d) for d in await cur.to_list(length=limit)]
