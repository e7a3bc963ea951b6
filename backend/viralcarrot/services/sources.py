# viralcarrot/services/sources.py
# External recipe sources for the generator, the external-only endpoint and the pantry wizard
# - every source: fetch_candidates(query, main_food, user_ingredients) -> list[Recipe]
# - HTTP sources degrade to [] on failure; gather_candidates also absorbs anything they raise
# - AllRecipes / FoodNetwork / BBCGoodFood are templated stand-ins (no scraping)

from __future__ import annotations
import asyncio
import logging
import random
import re
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional, Sequence

import httpx

from viralcarrot.models.schemas import Nutrition, Recipe, RecipeFilters
from viralcarrot.models.templates import (
    COOKING_METHODS,
    EXTERNAL_COMMON_INGREDIENTS,
    EXTERNAL_GENERIC_TITLE_TEMPLATES,
    EXTERNAL_PROVIDERS,
    FLAVOR_ENHANCERS,
    MAX_EXTERNAL_INGREDIENTS,
    TITLE_TEMPLATES,
)
from viralcarrot.services.matcher import dedupe, match, normalize, resolve_key
from viralcarrot.services.synthesizer import display_food, fallback_image

log = logging.getLogger(__name__)

THEMEALDB_SEARCH_URL = "https://www.themealdb.com/api/json/v1/1/search.php"
THEMEALDB_MEAL_URL = "https://www.themealdb.com/meal/{id}"
RECIPEPUPPY_URL = "http://www.recipepuppy.com/api/"

RESULTS_PER_SOURCE = 3
DIFFICULTIES = ("Easy", "Medium", "Hard")
_SLUG_RE = re.compile(r"[^a-z0-9]+")


def build_search_query(main_food: str, ingredients: Sequence[str], filters: RecipeFilters) -> str:
    parts = [(main_food or "").strip(), *list(ingredients or [])[:3]]
    parts += [filters.cuisine, filters.mealType, filters.dietaryStyle]
    return " ".join(p.strip() for p in parts if p and p.strip())


def slugify(s: str) -> str:
    return _SLUG_RE.sub("-", (s or "").lower()).strip("-")


def external_title(main_food: str, source: str, index: int) -> str:
    food = display_food(main_food)
    key = resolve_key(main_food, TITLE_TEMPLATES)
    if key:
        templates = TITLE_TEMPLATES[key]
    else:
        templates = tuple(t.format(food=food, source=source) for t in EXTERNAL_GENERIC_TITLE_TEMPLATES)
    base = templates[index % len(templates)]
    method = COOKING_METHODS[index % len(COOKING_METHODS)]
    flavor = FLAVOR_ENHANCERS[index % len(FLAVOR_ENHANCERS)]
    variations = (
        base,
        f"{method} {food}",
        f"{flavor} {food}",
        f"{base} from {source}",
        f"{source}'s {base}",
        f"{method} {base}",
        f"{flavor} {base}",
    )
    return variations[index % len(variations)]


def random_nutrition(rng: random.Random) -> Nutrition:
    return Nutrition(
        calories=200 + rng.randrange(400),
        protein=15 + rng.randrange(25),
        carbs=20 + rng.randrange(40),
        fat=8 + rng.randrange(20),
    )


class RecipeSource(ABC):
    name = "external"

    @abstractmethod
    async def fetch_candidates(self, query: str, main_food: str, user_ingredients: Sequence[str]) -> List[Recipe]:
        ...


# ---------------------------------------------------------------------
# templated providers
# ---------------------------------------------------------------------
class MockRecipeSource(RecipeSource):
    def __init__(self, name: str, base_url: str, rng: Optional[random.Random] = None, count: int = RESULTS_PER_SOURCE):
        self.name = name
        self.base_url = base_url.rstrip("/")
        self.rng = rng or random.Random()
        self.count = count

    def _ingredients(self, main_food: str, user_ingredients: Sequence[str]) -> List[str]:
        items = [normalize(main_food), *EXTERNAL_COMMON_INGREDIENTS, *(user_ingredients or [])]
        return dedupe(items)[:MAX_EXTERNAL_INGREDIENTS]

    def _steps(self, food: str) -> List[str]:
        return [
            f"Prepare the {food} by washing and cutting as needed.",
            "Season with salt and pepper to taste.",
            "Heat oil in a pan over medium heat.",
            f"Cook the {food} until golden brown and cooked through.",
            "Serve hot with your favorite sides.",
        ]

    def _recipe(self, main_food: str, user_ingredients: Sequence[str], index: int) -> Recipe:
        rng = self.rng
        food = normalize(main_food)
        title = external_title(main_food, self.name, index)
        ingredients = self._ingredients(main_food, user_ingredients)
        im = match(ingredients, user_ingredients, main_food)
        return Recipe(
            id=f"external-{self.name.lower()}-{rng.getrandbits(48):012x}-{index}",
            title=title,
            description=(
                f"A popular {food} recipe from {self.name}. "
                "This recipe has been tried and tested by thousands of home cooks."
            ),
            image=fallback_image(main_food, index),
            ingredients=ingredients,
            steps=self._steps(food),
            cookingTime=30 + rng.randrange(60),
            cuisine="International",
            mealType="Dinner",
            dietaryStyle="Regular",
            tags=["international", "dinner", self.name.lower()],
            source=self.name,
            createdBy=self.name,
            rating=round(4.0 + rng.random(), 1),
            difficulty=rng.choice(DIFFICULTIES),
            servings=4 + rng.randrange(4),
            nutrition=random_nutrition(rng),
            ingredientMatch=im,
            matchScore=im.matchPercentage / 100,
            isExternal=True,
            sourceUrl=f"{self.base_url}/recipe/{slugify(title)}",
        )

    async def fetch_candidates(self, query: str, main_food: str, user_ingredients: Sequence[str]) -> List[Recipe]:
        return [self._recipe(main_food, user_ingredients, i) for i in range(self.count)]


def default_mock_sources(rng: Optional[random.Random] = None) -> List[RecipeSource]:
    rng = rng or random.Random()
    return [MockRecipeSource(p["name"], p["baseUrl"], rng) for p in EXTERNAL_PROVIDERS]


# ---------------------------------------------------------------------
# HTTP providers
# ---------------------------------------------------------------------
class _HttpSource(RecipeSource):
    url = ""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        count: int = RESULTS_PER_SOURCE,
    ):
        self.rng = rng or random.Random()
        self.timeout = timeout
        self.count = count
        self._transport = transport

    async def _get_json(self, params: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as cli:
                r = await cli.get(self.url, params=params)
                r.raise_for_status()
                return r.json()
        except (httpx.HTTPError, ValueError) as e:
            log.warning("%s search failed (params=%s): %s", self.name, params, e)
            return None


def mealdb_ingredients(meal: Dict[str, Any]) -> List[str]:
    # strIngredient1..20 with the matching strMeasureN in front
    out: List[str] = []
    for i in range(1, 21):
        ing = (meal.get(f"strIngredient{i}") or "").strip()
        if not ing:
            continue
        measure = (meal.get(f"strMeasure{i}") or "").strip()
        out.append(f"{measure} {ing}".strip() if measure else ing)
    return out


def mealdb_steps(instructions: Optional[str]) -> List[str]:
    lines = [s.strip() for s in re.split(r"[\r\n]+", instructions or "") if s.strip()]
    return lines or ["Follow the recipe instructions."]


class TheMealDBSource(_HttpSource):
    name = "TheMealDB"
    url = THEMEALDB_SEARCH_URL

    def _recipe(self, meal: Dict[str, Any], main_food: str, user_ingredients: Sequence[str]) -> Recipe:
        rng = self.rng
        meal_id = str(meal.get("idMeal") or "")
        area = (meal.get("strArea") or "").strip() or "International"
        ingredients = mealdb_ingredients(meal)
        im = match(ingredients, user_ingredients, main_food)
        return Recipe(
            id=f"themealdb-{meal_id}",
            title=(meal.get("strMeal") or "").strip() or external_title(main_food, self.name, 0),
            description=(
                f"A delicious {normalize(main_food)} recipe from TheMealDB. "
                "This recipe has been tried and tested by home cooks worldwide."
            ),
            image=meal.get("strMealThumb") or "",
            ingredients=ingredients,
            steps=mealdb_steps(meal.get("strInstructions")),
            cookingTime=30 + rng.randrange(30),
            cuisine=area,
            mealType="Dinner",
            dietaryStyle="Regular",
            tags=[area.lower(), "dinner", "themealdb"],
            source=self.name,
            createdBy=self.name,
            rating=round(4.0 + rng.random(), 1),
            difficulty=rng.choice(DIFFICULTIES),
            servings=4 + rng.randrange(4),
            nutrition=random_nutrition(rng),
            ingredientMatch=im,
            matchScore=im.matchPercentage / 100,
            isExternal=True,
            sourceUrl=THEMEALDB_MEAL_URL.format(id=meal_id),
        )

    async def fetch_candidates(self, query: str, main_food: str, user_ingredients: Sequence[str]) -> List[Recipe]:
        data = await self._get_json({"s": query})
        meals = (data or {}).get("meals") or []
        return [self._recipe(m, main_food, user_ingredients) for m in meals[: self.count]]


class RecipePuppySource(_HttpSource):
    name = "RecipePuppy"
    url = RECIPEPUPPY_URL

    def _recipe(self, result: Dict[str, Any], main_food: str, user_ingredients: Sequence[str], index: int) -> Recipe:
        rng = self.rng
        raw = result.get("ingredients") or ""
        ingredients = [s.strip() for s in raw.split(", ") if s.strip()]
        title = (result.get("title") or "").strip() or external_title(main_food, self.name, index)
        im = match(ingredients, user_ingredients, main_food)
        return Recipe(
            id=f"recipepuppy-{rng.getrandbits(48):012x}-{index}",
            title=title,
            description=(
                f"A popular {normalize(main_food)} recipe from RecipePuppy. "
                "This recipe has been collected from various cooking websites."
            ),
            image=result.get("thumbnail") or "",
            ingredients=ingredients,
            steps=["Follow the recipe instructions from the source."],
            cookingTime=30 + rng.randrange(30),
            cuisine="International",
            mealType="Dinner",
            dietaryStyle="Regular",
            tags=["international", "dinner", "recipepuppy"],
            source=self.name,
            createdBy=self.name,
            rating=round(3.5 + 1.5 * rng.random(), 1),
            difficulty=rng.choice(DIFFICULTIES),
            servings=4 + rng.randrange(4),
            nutrition=random_nutrition(rng),
            ingredientMatch=im,
            matchScore=im.matchPercentage / 100,
            isExternal=True,
            sourceUrl=result.get("href") or None,
        )

    async def fetch_candidates(self, query: str, main_food: str, user_ingredients: Sequence[str]) -> List[Recipe]:
        data = await self._get_json({"q": query})
        results = (data or {}).get("results") or []
        return [self._recipe(r, main_food, user_ingredients, i) for i, r in enumerate(results[: self.count])]


# ---------------------------------------------------------------------
# community (approved user recipes)
# ---------------------------------------------------------------------
class CommunityRecipeSource(RecipeSource):
    name = "ViralCarrot Community"

    def __init__(self, store, limit: int = RESULTS_PER_SOURCE):
        self.store = store
        self.limit = limit

    async def fetch_candidates(self, query: str, main_food: str, user_ingredients: Sequence[str]) -> List[Recipe]:
        found = await self.store.search_approved(main_food, limit=self.limit)
        out: List[Recipe] = []
        for ur in found:
            im = match(ur.ingredients, user_ingredients, main_food)
            out.append(ur.to_recipe(ingredientMatch=im, matchScore=im.matchPercentage / 100))
        return out


# ---------------------------------------------------------------------
# fan-out
# ---------------------------------------------------------------------
async def gather_candidates(
    sources: Iterable[RecipeSource],
    query: str,
    main_food: str,
    user_ingredients: Sequence[str],
) -> List[Recipe]:
    """Ask every source concurrently; a failed source contributes nothing."""
    sources = list(sources)
    results = await asyncio.gather(
        *(s.fetch_candidates(query, main_food, user_ingredients) for s in sources),
        return_exceptions=True,
    )
    out: List[Recipe] = []
    for src, res in zip(sources, results):
        if isinstance(res, BaseException):
            log.warning("source %s failed: %r", src.name, res)
            continue
        log.debug("source %s returned %d recipes", src.name, len(res))
        out.extend(res)
    return out


def count_by_source(recipes: Iterable[Recipe]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for r in recipes:
        k = r.source.lower()
        counts[k] = counts.get(k, 0) + 1
    return counts
