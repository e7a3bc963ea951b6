# viralcarrot/services/pantry.py
# Pantry wizard: which existing (external) recipes can be cooked from what's on hand
# - two-stage funnel: coarse 30% prefilter -> detailed pantry_match -> 50% gate
#   (both stages share ingredients_overlap, so the prefilter never drops a recipe the gate keeps)
# - matching is recipe-driven (share of the recipe's ingredients the pantry covers)

from __future__ import annotations
import asyncio
import logging
from typing import Iterable, List, Sequence

from viralcarrot.models.schemas import MatchSummary, Recipe, RecipeFilters
from viralcarrot.services.matcher import ingredients_overlap, normalize, pantry_match
from viralcarrot.services.sources import RecipeSource, gather_candidates

log = logging.getLogger(__name__)

PREFILTER_THRESHOLD = 30
MATCH_THRESHOLD = 50
DEFAULT_LIMIT = 12
QUERY_INGREDIENTS = 3

HIGH_MATCH = 80
MEDIUM_MATCH = 60


def coarse_coverage(recipe_ingredients: Sequence[str], pantry: Sequence[str]) -> int:
    """Share of recipe ingredients some pantry item overlaps with, in percent."""
    recipe = [normalize(r) for r in recipe_ingredients if normalize(r)]
    have = [normalize(p) for p in pantry if normalize(p)]
    if not recipe or not have:
        return 0
    hits = sum(1 for r in recipe if any(ingredients_overlap(p, r) for p in have))
    return round(100 * hits / len(recipe))


def prefilter(candidates: Iterable[Recipe], pantry: Sequence[str], threshold: int = PREFILTER_THRESHOLD) -> List[Recipe]:
    return [r for r in candidates if coarse_coverage(r.ingredients, pantry) >= threshold]


def dedupe_by_title(recipes: Iterable[Recipe]) -> List[Recipe]:
    seen, out = set(), []
    for r in recipes:
        k = normalize(r.title)
        if k in seen:
            continue
        seen.add(k)
        out.append(r)
    return out


def pantry_match_recipes(
    recipes: Iterable[Recipe],
    pantry: Sequence[str],
    threshold: int = MATCH_THRESHOLD,
    limit: int = DEFAULT_LIMIT,
) -> List[Recipe]:
    kept: List[Recipe] = []
    for r in recipes:
        pm = pantry_match(r.ingredients, pantry)
        if pm.matchPercentage < threshold:
            continue
        kept.append(r.model_copy(update={"ingredientMatch": pm, "matchScore": pm.matchPercentage / 100}))
    kept.sort(key=lambda r: -r.ingredientMatch.matchPercentage)
    return kept[:limit]


def narrow_by_cuisine(recipes: List[Recipe], cuisine: str | None) -> List[Recipe]:
    c = normalize(cuisine)
    if not c:
        return recipes
    narrowed = [r for r in recipes if normalize(r.cuisine) == c]
    # nothing left for that cuisine -> keep everything
    return narrowed or recipes


def match_summary(recipes: Iterable[Recipe]) -> MatchSummary:
    s = MatchSummary()
    for r in recipes:
        pct = r.ingredientMatch.matchPercentage
        if pct >= HIGH_MATCH:
            s.highMatch += 1
        elif pct >= MEDIUM_MATCH:
            s.mediumMatch += 1
        else:
            s.lowMatch += 1
    return s


class PantryWizard:
    def __init__(self, sources: Sequence[RecipeSource], limit: int = DEFAULT_LIMIT):
        self.sources = list(sources)
        self.limit = limit

    async def _candidates(self, pantry: Sequence[str]) -> List[Recipe]:
        queries = list(pantry)[:QUERY_INGREDIENTS]
        batches = await asyncio.gather(
            *(gather_candidates(self.sources, q, q, pantry) for q in queries)
        )
        return [r for batch in batches for r in batch]

    async def find(self, pantry: Sequence[str], filters: RecipeFilters) -> List[Recipe]:
        candidates = dedupe_by_title(await self._candidates(pantry))
        candidates = narrow_by_cuisine(candidates, filters.cuisine)
        coarse = prefilter(candidates, pantry)
        matched = pantry_match_recipes(coarse, pantry, limit=self.limit)
        log.info(
            "pantry: %d candidates, %d after prefilter, %d matched (pantry=%s)",
            len(candidates), len(coarse), len(matched), list(pantry)[:QUERY_INGREDIENTS],
        )
        return matched
