# viralcarrot/services/synthesizer.py
# Template-based recipe synthesis ("ViralCarrot Original" recipes)
# - title / ingredients / steps are deterministic for (main food, ingredients, filters, index)
# - nutrition jitter, ids, rating and servings come from the injected random source
# - image: curated pool first; indexes below the upgrade limit may try the image search

from __future__ import annotations
import asyncio
import logging
import random
from typing import List, Optional, Sequence

from viralcarrot.models.schemas import ORIGINAL_SOURCE, Nutrition, Recipe, RecipeFilters
from viralcarrot.models.templates import (
    COMMON_INGREDIENTS,
    COOKING_METHODS,
    CUISINE_INGREDIENTS,
    CUISINE_MODIFIERS,
    DEFAULT_IMAGE,
    FALLBACK_IMAGES,
    FLAVOR_ENHANCERS,
    GENERIC_INGREDIENTS,
    GENERIC_NUTRITION,
    GENERIC_TITLE_TEMPLATES,
    HARD_FOODS,
    MAX_CUISINE_INGREDIENTS,
    MAX_INGREDIENTS,
    NUTRITION_BASE,
    NUTRITION_JITTER,
    TITLE_TEMPLATES,
    VEGETABLES,
)
from viralcarrot.services.images import RequestContext, UnsplashImageSearch
from viralcarrot.services.matcher import dedupe, match, match_score, normalize, resolve_key

log = logging.getLogger(__name__)

TITLE_PATTERNS = 7
COOKING_TIMES = {"15": 15, "30": 30, "60": 60}
DEFAULT_COOKING_TIME = 40


def display_food(main_food: str) -> str:
    s = (main_food or "").strip()
    return s[:1].upper() + s[1:]


def base_templates(main_food: str) -> Sequence[str]:
    key = resolve_key(main_food, TITLE_TEMPLATES)
    if key:
        return TITLE_TEMPLATES[key]
    food = display_food(main_food)
    return tuple(t.format(food=food) for t in GENERIC_TITLE_TEMPLATES)


def build_title(main_food: str, filters: RecipeFilters, index: int) -> str:
    """
    index % len picks from each candidate list, then index % 7 picks how they combine:
    base / method+food / flavor+food / cuisine+base / cuisine+method+food /
    method+base / flavor+base.
    """
    food = display_food(main_food)
    templates = base_templates(main_food)
    base = templates[index % len(templates)]
    method = COOKING_METHODS[index % len(COOKING_METHODS)]
    flavor = FLAVOR_ENHANCERS[index % len(FLAVOR_ENHANCERS)]

    modifier = None
    ckey = resolve_key(filters.cuisine, CUISINE_MODIFIERS)
    if ckey:
        mods = CUISINE_MODIFIERS[ckey]
        modifier = mods[index % len(mods)]

    pattern = index % TITLE_PATTERNS
    if pattern == 0:
        return base
    if pattern == 1:
        return f"{method} {food}"
    if pattern == 2:
        return f"{flavor} {food}"
    if pattern == 3:
        return f"{modifier} {base}" if modifier else f"Homemade {base}"
    if pattern == 4:
        return f"{modifier} {method} {food}" if modifier else f"{method} {flavor} {food}"
    if pattern == 5:
        return f"{method} {base}"
    return f"{flavor} {base}"


def build_ingredients(main_food: str, supporting: Sequence[str], filters: RecipeFilters) -> List[str]:
    key = resolve_key(main_food, COMMON_INGREDIENTS)
    staples = COMMON_INGREDIENTS[key] if key else GENERIC_INGREDIENTS
    items = [normalize(main_food), *staples, *(supporting or [])]

    ckey = resolve_key(filters.cuisine, CUISINE_INGREDIENTS)
    if ckey:
        items.extend(CUISINE_INGREDIENTS[ckey][:MAX_CUISINE_INGREDIENTS])

    return dedupe(items)[:MAX_INGREDIENTS]


def _has(ingredients: Sequence[str], word: str) -> bool:
    return any(word in normalize(i) for i in ingredients)


def build_steps(main_food: str, ingredients: Sequence[str], filters: RecipeFilters) -> List[str]:
    food = normalize(main_food)
    lowered = {normalize(i) for i in ingredients}
    steps = [f"Prepare the {food}: rinse, pat dry and cut into even, bite-sized pieces."]

    if "salt" in lowered and "black pepper" in lowered:
        steps.append(f"Season the {food} generously with salt and black pepper.")

    if filters.cookingTime == "15":
        steps.append(
            f"Heat oil in a large skillet over medium-high heat and quickly sear the {food} "
            "for 3-4 minutes per side until golden."
        )
    elif filters.cookingTime == "30":
        steps.append(
            f"Heat oil in a skillet over medium heat and cook the {food} for 8-10 minutes, "
            "turning occasionally, until cooked through."
        )
    else:
        steps.append(
            f"Preheat the oven to 400°F (200°C) and roast the {food} for 20-25 minutes "
            "until golden and cooked through."
        )

    veg = [v for v in VEGETABLES if _has(ingredients, v) and v != food]
    if veg:
        steps.append(f"Add the {', '.join(veg[:3])} and cook until tender and fragrant.")

    if _has(ingredients, "lemon"):
        steps.append("Finish with a squeeze of fresh lemon juice and serve immediately.")
    elif _has(ingredients, "herbs"):
        steps.append("Garnish with fresh herbs and serve hot.")
    else:
        steps.append("Plate, taste for seasoning and serve hot with your favorite sides.")
    return steps


def estimate_nutrition(main_food: str, rng: random.Random) -> Nutrition:
    key = resolve_key(main_food, NUTRITION_BASE)
    base = NUTRITION_BASE[key] if key else GENERIC_NUTRITION
    return Nutrition(**{f: base[f] + rng.randrange(NUTRITION_JITTER[f]) for f in NUTRITION_JITTER})


def fallback_image(main_food: str, index: int) -> str:
    key = resolve_key(main_food, FALLBACK_IMAGES)
    if not key:
        return DEFAULT_IMAGE
    pool = FALLBACK_IMAGES[key]
    return pool[index % len(pool)]


def rate_difficulty(main_food: str, filters: RecipeFilters) -> str:
    food = normalize(main_food)
    if any(h in food for h in HARD_FOODS):
        return "Hard"
    if normalize(filters.mealType) == "breakfast":
        return "Easy"
    return "Medium"


def cooking_minutes(filters: RecipeFilters) -> int:
    return COOKING_TIMES.get(filters.cookingTime or "", DEFAULT_COOKING_TIME)


class Synthesizer:
    def __init__(
        self,
        rng: Optional[random.Random] = None,
        image_search: Optional[UnsplashImageSearch] = None,
        image_timeout: float = 5.0,
        image_upgrade_limit: int = 3,
    ):
        self.rng = rng or random.Random()
        self.image_search = image_search
        self.image_timeout = image_timeout
        self.image_upgrade_limit = image_upgrade_limit

    async def synthesize(
        self,
        main_food: str,
        supporting: Sequence[str],
        filters: RecipeFilters,
        index: int,
        ctx: Optional[RequestContext] = None,
    ) -> Recipe:
        ctx = ctx or RequestContext()
        food = (main_food or "").strip()
        rng = self.rng

        title = build_title(food, filters, index)
        ingredients = build_ingredients(food, supporting, filters)
        steps = build_steps(food, ingredients, filters)
        cuisine = filters.cuisine or "International"
        meal_type = filters.mealType or "Dinner"
        minutes = cooking_minutes(filters)
        category = resolve_key(food, TITLE_TEMPLATES) or normalize(food)

        # all rng draws happen here, before the image search is awaited
        recipe = Recipe(
            id=f"viralcarrot-{rng.getrandbits(48):012x}-{index}",
            title=title,
            description=(
                f"A ViralCarrot original {cuisine.lower()} {normalize(food)} dish, "
                f"ready in about {minutes} minutes."
            ),
            image=fallback_image(food, index),
            ingredients=ingredients,
            steps=steps,
            cookingTime=minutes,
            cuisine=cuisine,
            mealType=meal_type,
            dietaryStyle=filters.dietaryStyle or "Regular",
            tags=sorted({cuisine.lower(), meal_type.lower(), category, "viralcarrot"}),
            source=ORIGINAL_SOURCE,
            createdBy=ORIGINAL_SOURCE,
            rating=round(4.0 + rng.random(), 1),
            difficulty=rate_difficulty(food, filters),
            servings=2 + rng.randrange(5),
            nutrition=estimate_nutrition(food, rng),
            ingredientMatch=match(ingredients, supporting, food),
            matchScore=match_score(ingredients, supporting),
            isExternal=False,
        )

        if self.image_search is not None and index < self.image_upgrade_limit:
            image = await self._search_image(ctx, recipe, food, index)
            if image:
                recipe.image = image
        return recipe

    async def _search_image(self, ctx: RequestContext, recipe: Recipe, food: str, index: int) -> Optional[str]:
        try:
            return await asyncio.wait_for(
                self.image_search.search_image(
                    ctx, recipe.title, food, recipe.cuisine, recipe.mealType, index
                ),
                timeout=self.image_timeout,
            )
        except asyncio.TimeoutError:
            log.warning("image search timed out after %.1fs (session=%s, index=%d)",
                        self.image_timeout, ctx.session_key[:8], index)
        except Exception as e:
            log.warning("image search error (session=%s, index=%d): %s", ctx.session_key[:8], index, e)
        return None

    async def synthesize_many(
        self,
        main_food: str,
        supporting: Sequence[str],
        filters: RecipeFilters,
        count: int,
        ctx: Optional[RequestContext] = None,
    ) -> List[Recipe]:
        ctx = ctx or RequestContext()
        tasks = [self.synthesize(main_food, supporting, filters, i, ctx) for i in range(count)]
        return list(await asyncio.gather(*tasks))
