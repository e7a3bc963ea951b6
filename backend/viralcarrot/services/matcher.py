# viralcarrot/services/matcher.py
# Ingredient normalizing / overlap matching
# - pure functions, no I/O
# - one overlap rule shared by the generator, external sources and the pantry wizard
#   (substring either way, or first-token containment: "black pepper" vs "pepper")

from __future__ import annotations
import re
from typing import Iterable, List, Mapping, Optional, Sequence, TypeVar

from viralcarrot.models.schemas import IngredientMatch

T = TypeVar("T")

# main-food sentinel used when the user gave no ingredients (generator side)
NO_INGREDIENTS_FOUND = 85
NO_INGREDIENTS_MISSING = 0
# pantry side: independent sentinel for an empty pantry
EMPTY_PANTRY_PERCENTAGE = 85

NO_INGREDIENTS_SCORE = 0.9
MAX_MATCH_SCORE = 0.95

# "2", "1/2", "0.5", "2-3", "½"
_QUANTITY_RE = re.compile(r"[\d/.,\-½¼¾⅓⅔]+")


def normalize(s: Optional[str]) -> str:
    return (s or "").strip().lower()


def _first_token(s: str) -> str:
    parts = s.split()
    if not parts:
        return ""
    tok = parts[0]
    # a bare quantity is not an ingredient word
    return "" if _QUANTITY_RE.fullmatch(tok) else tok


def ingredients_overlap(a: str, b: str) -> bool:
    """True when either ingredient contains the other, or a leading word of one is in the other."""
    a, b = normalize(a), normalize(b)
    if not a or not b:
        return False
    if a in b or b in a:
        return True
    fa, fb = _first_token(a), _first_token(b)
    return bool((fa and fa in b) or (fb and fb in a))


def _clean(items: Iterable[str]) -> List[str]:
    return [s.strip() for s in (items or []) if isinstance(s, str) and s.strip()]


def match(recipe_ingredients: Sequence[str], user_ingredients: Sequence[str], main_food: str) -> IngredientMatch:
    """
    Which of the user's ingredients a recipe covers.

    available/missing keep the order of user_ingredients. With no user
    ingredients there is nothing to divide by: the recipe scores 85 when the
    main food shows up in its ingredient list, else 0.
    """
    recipe = _clean(recipe_ingredients)
    user = _clean(user_ingredients)

    if not user:
        food = normalize(main_food)
        if food and any(food in normalize(r) for r in recipe):
            return IngredientMatch(
                availableIngredients=[main_food.strip()],
                missingIngredients=[],
                matchPercentage=NO_INGREDIENTS_FOUND,
            )
        return IngredientMatch(matchPercentage=NO_INGREDIENTS_MISSING)

    available: List[str] = []
    missing: List[str] = []
    for u in user:
        if any(ingredients_overlap(u, r) for r in recipe):
            available.append(u)
        else:
            missing.append(u)

    pct = round(100 * len(available) / len(user))
    return IngredientMatch(availableIngredients=available, missingIngredients=missing, matchPercentage=pct)


def match_score(recipe_ingredients: Sequence[str], user_ingredients: Sequence[str]) -> float:
    # ranking score, kept apart from match(); 0.9 when nothing to compare
    recipe = _clean(recipe_ingredients)
    user = _clean(user_ingredients)
    if not user:
        return NO_INGREDIENTS_SCORE
    matched = sum(1 for u in user if any(ingredients_overlap(u, r) for r in recipe))
    return min(MAX_MATCH_SCORE, matched / len(user))


def pantry_match(recipe_ingredients: Sequence[str], pantry: Sequence[str]) -> IngredientMatch:
    """
    Recipe-driven coverage: how many of the recipe's ingredients the pantry has.
    available/missing are recipe ingredients, in recipe order.
    """
    recipe = _clean(recipe_ingredients)
    have = _clean(pantry)

    if not have:
        return IngredientMatch(matchPercentage=EMPTY_PANTRY_PERCENTAGE)
    if not recipe:
        return IngredientMatch(matchPercentage=0)

    available: List[str] = []
    missing: List[str] = []
    for r in recipe:
        if any(ingredients_overlap(p, r) for p in have):
            available.append(r)
        else:
            missing.append(r)

    pct = round(100 * len(available) / len(recipe))
    return IngredientMatch(availableIngredients=available, missingIngredients=missing, matchPercentage=pct)


def resolve_key(food: Optional[str], table: Mapping[str, T]) -> Optional[str]:
    """Category key for a food: exact key first, then substring either way."""
    s = normalize(food)
    if not s:
        return None
    if s in table:
        return s
    for key in table:
        if key in s:
            return key
    if len(s) >= 3:
        for key in table:
            if s in key:
                return key
    return None


def dedupe(items: Iterable[str]) -> List[str]:
    # case-insensitive, first spelling wins
    seen, out = set(), []
    for s in items:
        s = (s or "").strip()
        k = s.lower()
        if s and k not in seen:
            seen.add(k)
            out.append(s)
    return out
