import asyncio

from viralcarrot.core.cache import TTLCache, make_key


class Clock:
    def __init__(self):
        self.t = 0.0

    def __call__(self):
        return self.t


def test_make_key_is_stable():
    a = make_key("generate", "chicken", ["garlic"], {"cuisine": "Thai", "mealType": None}, 1)
    b = make_key("generate", "chicken", ["garlic"], {"mealType": None, "cuisine": "Thai"}, 1)
    assert a == b
    assert a != make_key("generate", "chicken", ["garlic"], {"cuisine": "Thai", "mealType": None}, 2)


def test_get_or_compute_caches_until_expiry():
    clock = Clock()
    cache = TTLCache(clock=clock)
    calls = []

    async def compute():
        calls.append(1)
        return {"n": len(calls)}

    assert asyncio.run(cache.get_or_compute("k", 30, compute)) == {"n": 1}
    clock.t = 29
    assert asyncio.run(cache.get_or_compute("k", 30, compute)) == {"n": 1}
    clock.t = 30
    assert asyncio.run(cache.get_or_compute("k", 30, compute)) == {"n": 2}
    assert len(calls) == 2


def test_expired_entries_are_dropped():
    clock = Clock()
    cache = TTLCache(clock=clock)
    cache.set("a", 1, ttl=10)
    cache.set("b", 2, ttl=100)
    clock.t = 50
    assert cache.get("a") is None
    assert cache.purge_expired() == 0
    assert len(cache) == 1
    clock.t = 200
    assert cache.purge_expired() == 1
    cache.set("c", 3, ttl=1)
    cache.clear()
    assert len(cache) == 0


def test_insert_sweeps_expired_keys_never_read_again():
    clock = Clock()
    cache = TTLCache(clock=clock)

    async def compute():
        return "fresh"

    for i in range(1000):
        cache.set(f"req-{i}", i, ttl=1800)
    clock.t = 10000
    asyncio.run(cache.get_or_compute("fresh", 1800, compute))
    assert len(cache) == 1


def test_sweep_is_throttled():
    clock = Clock()
    cache = TTLCache(clock=clock, purge_interval=60)
    clock.t = 60
    cache.set("a", 1, ttl=5)
    clock.t = 100
    cache.set("b", 2, ttl=5)
    # next sweep not due until t=120
    assert len(cache) == 2
    clock.t = 120
    cache.set("c", 3, ttl=5)
    assert len(cache) == 1
