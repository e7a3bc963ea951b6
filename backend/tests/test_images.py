import asyncio

import httpx

from viralcarrot.services.images import (
    RequestContext,
    UnsplashImageSearch,
    clean_title_for_search,
    is_food_safe,
    looks_like_food,
    pick_food_image,
)


def _photo(pid, desc):
    return {"id": pid, "alt_description": desc, "urls": {"regular": f"https://images.test/{pid}.jpg"}}


def test_live_animal_descriptions_are_rejected():
    assert not is_food_safe("a live chicken standing in a barn")
    assert not is_food_safe("Hen in the yard")
    assert not is_food_safe("cattle grazing on a hill")
    assert is_food_safe("grilled chicken breast on a plate")
    assert is_food_safe("chicken curry")
    assert is_food_safe(None)
    assert is_food_safe("")


def test_food_vocabulary():
    assert looks_like_food("Roasted vegetables served in a bowl")
    assert not looks_like_food("kitchen counter")
    assert not looks_like_food(None)


def test_pick_prefers_food_descriptions():
    results = [_photo("a", "kitchen counter"), _photo("b", "grilled chicken served on a plate")]
    assert pick_food_image(results, set())["id"] == "b"


def test_pick_skips_unsafe_and_used():
    results = [_photo("a", "live chicken on a farm"), _photo("b", None), _photo("c", "baked salmon dish")]
    assert pick_food_image(results, {"c"})["id"] == "b"
    assert pick_food_image(results[:1], set()) is None
    assert pick_food_image([], set()) is None


def test_clean_title_for_search():
    assert clean_title_for_search("Chef's Pan-Seared Chicken!") == "chef s pan seared chicken"


def test_search_falls_through_to_next_query():
    queries = []

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["Authorization"] == "Client-ID test-key"
        q = request.url.params["query"]
        queries.append(q)
        if len(queries) == 1:
            return httpx.Response(200, json={"results": [_photo("cow1", "a cow in a field")]})
        return httpx.Response(200, json={"results": [_photo("p1", "roasted chicken served on a plate")]})

    search = UnsplashImageSearch("test-key", transport=httpx.MockTransport(handler))
    ctx = RequestContext()
    url = asyncio.run(search.search_image(ctx, "Lemon Herb Roasted Chicken", "chicken", "Italian", "Dinner", 0))

    assert url == "https://images.test/p1.jpg"
    assert queries == ["lemon herb roasted chicken", "chicken Italian food recipe"]
    assert ctx.used_images == {"p1"}


def test_search_does_not_reuse_images_within_a_request():
    handler = lambda req: httpx.Response(200, json={"results": [_photo("p1", "fried rice bowl")]})
    search = UnsplashImageSearch("k", transport=httpx.MockTransport(handler))
    ctx = RequestContext()
    assert asyncio.run(search.search_image(ctx, "Fried Rice", "rice")) == "https://images.test/p1.jpg"
    assert asyncio.run(search.search_image(ctx, "Fried Rice", "rice", index=1)) is None


def test_search_errors_return_none():
    search = UnsplashImageSearch("k", transport=httpx.MockTransport(lambda req: httpx.Response(503)))
    assert asyncio.run(search.search_image(RequestContext(), "Beef Stew", "beef")) is None


def test_query_strategies():
    search = UnsplashImageSearch("k")
    qs = search._queries("Beef Stew", "beef", None, "Lunch", 2)
    assert qs == ["beef stew", "beef Lunch food", "pan-seared beef food", "beef food recipe"]
