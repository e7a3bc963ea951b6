# viralcarrot/services/images.py
# Recipe image search (Unsplash) with a food-content filter
# - the request context (session key + ids already handed out) is passed down explicitly
# - any HTTP failure -> None, the caller keeps its curated fallback
# - the filter drops live-animal photos ("live chicken", livestock, butcher ...)

from __future__ import annotations
import logging
import re
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Set

import httpx

from viralcarrot.models.templates import FOOD_TERMS, LIVE_ANIMAL_TERMS, SEARCH_COOKING_METHODS

log = logging.getLogger(__name__)

UNSPLASH_SEARCH_URL = "https://api.unsplash.com/search/photos"


def _terms_regex(terms: Sequence[str]) -> re.Pattern:
    alts = "|".join(re.escape(t) for t in terms)
    return re.compile(rf"\b(?:{alts})s?\b", re.I)


_LIVE_ANIMAL_RE = _terms_regex(LIVE_ANIMAL_TERMS)
_FOOD_RE = _terms_regex(FOOD_TERMS)


@dataclass
class RequestContext:
    """Per-request state handed down the synthesis call chain."""
    session_key: str = field(default_factory=lambda: uuid.uuid4().hex)
    used_images: Set[str] = field(default_factory=set)


def _description(result: Dict[str, Any]) -> str:
    return (result.get("alt_description") or result.get("description") or "").strip()


def is_food_safe(description: Optional[str]) -> bool:
    # no description is fine; a live-animal description is not
    if not description:
        return True
    return not _LIVE_ANIMAL_RE.search(description)


def looks_like_food(description: Optional[str]) -> bool:
    return bool(description) and bool(_FOOD_RE.search(description))


def pick_food_image(results: Sequence[Dict[str, Any]], used: Set[str]) -> Optional[Dict[str, Any]]:
    """First unused result with a food-preparation description, else first unused safe one."""
    fallback: Optional[Dict[str, Any]] = None
    for r in results or []:
        rid = str(r.get("id") or "")
        if not rid or rid in used:
            continue
        desc = _description(r)
        if not is_food_safe(desc):
            continue
        if looks_like_food(desc):
            return r
        if fallback is None:
            fallback = r
    return fallback


def clean_title_for_search(title: str) -> str:
    s = re.sub(r"[^\w\s]", " ", (title or "").lower())
    return re.sub(r"\s+", " ", s).strip()


class UnsplashImageSearch:
    """
    search_image() tries, in order:
      1) the cleaned recipe title
      2) main food + cuisine
      3) main food + meal type
      4) cooking method + main food
      5) main food alone
    """

    def __init__(
        self,
        access_key: str,
        timeout: float = 5.0,
        per_page: int = 5,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.access_key = access_key
        self.timeout = timeout
        self.per_page = per_page
        self._transport = transport

    def _queries(self, title: str, main_food: str, cuisine: Optional[str], meal_type: Optional[str], index: int) -> List[str]:
        food = (main_food or "").strip()
        qs = [clean_title_for_search(title)]
        if cuisine:
            qs.append(f"{food} {cuisine} food recipe")
        if meal_type:
            qs.append(f"{food} {meal_type} food")
        method = SEARCH_COOKING_METHODS[index % len(SEARCH_COOKING_METHODS)]
        qs.append(f"{method} {food} food")
        qs.append(f"{food} food recipe")
        return [q for q in qs if q.strip()]

    async def search_image(
        self,
        ctx: RequestContext,
        title: str,
        main_food: str,
        cuisine: Optional[str] = None,
        meal_type: Optional[str] = None,
        index: int = 0,
    ) -> Optional[str]:
        headers = {"Authorization": f"Client-ID {self.access_key}", "Accept-Version": "v1"}
        async with httpx.AsyncClient(headers=headers, timeout=self.timeout, transport=self._transport) as cli:
            for q in self._queries(title, main_food, cuisine, meal_type, index):
                url = await self._search(cli, q, ctx)
                if url:
                    return url
        return None

    async def _search(self, cli: httpx.AsyncClient, query: str, ctx: RequestContext) -> Optional[str]:
        params = {
            "query": query,
            "per_page": self.per_page,
            "orientation": "landscape",
            "content_filter": "high",
        }
        try:
            r = await cli.get(UNSPLASH_SEARCH_URL, params=params)
            r.raise_for_status()
            results = r.json().get("results") or []
        except (httpx.HTTPError, ValueError) as e:
            log.warning("image search failed (session=%s, q=%r): %s", ctx.session_key[:8], query, e)
            return None

        picked = pick_food_image(results, ctx.used_images)
        if not picked:
            return None
        url = ((picked.get("urls") or {}).get("regular")) or None
        if url:
            ctx.used_images.add(str(picked["id"]))
        return url
