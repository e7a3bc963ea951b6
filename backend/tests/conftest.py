# shared fakes: image search, recipe sources, an in-memory stand-in for the motor collection

import asyncio
import random
import re
from types import SimpleNamespace
from typing import Any, Dict, List, Optional, Sequence

import httpx
import pytest

from viralcarrot.models.schemas import IngredientMatch, Recipe
from viralcarrot.services.community import CommunityRecipeStore
from viralcarrot.services.sources import RecipeSource


def make_recipe(
    rid: str,
    title: Optional[str] = None,
    ingredients: Sequence[str] = (),
    is_external: bool = True,
    score: float = 0.0,
    pct: int = 0,
    cuisine: Optional[str] = None,
    source: str = "Test",
) -> Recipe:
    return Recipe(
        id=rid,
        title=title or rid,
        ingredients=list(ingredients),
        isExternal=is_external,
        matchScore=score,
        ingredientMatch=IngredientMatch(matchPercentage=pct),
        cuisine=cuisine,
        source=source,
    )


class FakeImageSearch:
    def __init__(self, url: str = "https://img.test/photo.jpg", delay: float = 0.0, fail: bool = False):
        self.url = url
        self.delay = delay
        self.fail = fail
        self.calls: List[int] = []

    async def search_image(self, ctx, title, main_food, cuisine=None, meal_type=None, index=0):
        self.calls.append(index)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail:
            raise RuntimeError("image provider down")
        return f"{self.url}?i={index}"


class StaticSource(RecipeSource):
    def __init__(self, name: str, recipes: Sequence[Recipe]):
        self.name = name
        self.recipes = list(recipes)
        self.queries: List[str] = []

    async def fetch_candidates(self, query, main_food, user_ingredients):
        self.queries.append(query)
        return list(self.recipes)


class FailingSource(RecipeSource):
    name = "broken"

    async def fetch_candidates(self, query, main_food, user_ingredients):
        raise httpx.ConnectError("connection refused")


# ---------------------------------------------------------------------
# motor collection stand-in (only what CommunityRecipeStore uses)
# ---------------------------------------------------------------------
def _matches(doc: Dict[str, Any], q: Dict[str, Any]) -> bool:
    for k, v in q.items():
        if k == "$or":
            if not any(_matches(doc, sub) for sub in v):
                return False
            continue
        val = doc.get(k)
        if isinstance(v, re.Pattern):
            values = val if isinstance(val, list) else [val]
            if not any(v.search(str(x or "")) for x in values):
                return False
        elif val != v:
            return False
    return True


class FakeCursor:
    def __init__(self, docs: List[Dict[str, Any]]):
        self.docs = docs

    def sort(self, key: str, direction: int = 1):
        self.docs = sorted(self.docs, key=lambda d: d.get(key), reverse=direction < 0)
        return self

    def limit(self, n: int):
        self.docs = self.docs[:n]
        return self

    async def to_list(self, length: Optional[int] = None):
        return [dict(d) for d in self.docs[:length]]


class FakeCollection:
    def __init__(self):
        self.docs: List[Dict[str, Any]] = []

    async def insert_one(self, doc):
        stored = dict(doc)
        stored["_id"] = len(self.docs) + 1
        self.docs.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])

    def find(self, q=None):
        return FakeCursor([d for d in self.docs if _matches(d, q or {})])

    async def find_one(self, q):
        for d in self.docs:
            if _matches(d, q):
                return dict(d)
        return None

    async def update_one(self, q, update):
        for d in self.docs:
            if _matches(d, q):
                d.update(update.get("$set", {}))
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def store(collection):
    return CommunityRecipeStore(collection)
