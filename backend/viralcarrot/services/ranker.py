# viralcarrot/services/ranker.py
# Merge originals with external candidates, rank, paginate
# - originals (isExternal=False) always come before external recipes
# - inside each group: matchScore desc, input order otherwise (sorted() is stable)

from __future__ import annotations
from typing import Iterable, List, Sequence

from viralcarrot.models.schemas import RankedPage, Recipe

DEFAULT_PAGE_SIZE = 6


def rank(recipes: Iterable[Recipe]) -> List[Recipe]:
    return sorted(recipes, key=lambda r: (r.isExternal, -r.matchScore))


def paginate(items: Sequence[Recipe], page: int, page_size: int = DEFAULT_PAGE_SIZE) -> RankedPage:
    page = max(1, int(page or 1))
    total = len(items)
    start = (page - 1) * page_size
    return RankedPage(
        items=list(items[start:start + page_size]),
        total=total,
        hasMore=page * page_size < total,
    )


def aggregate(
    synthesized: Sequence[Recipe],
    external: Sequence[Recipe],
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> RankedPage:
    return paginate(rank([*synthesized, *external]), page, page_size)


def top_external(recipes: Iterable[Recipe], limit: int) -> List[Recipe]:
    # external-only listing: best ingredient match first
    ranked = sorted(recipes, key=lambda r: -r.ingredientMatch.matchPercentage)
    return ranked[:limit]
