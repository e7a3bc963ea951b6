import asyncio
import random

from conftest import FakeImageSearch
from viralcarrot.models.schemas import RecipeFilters
from viralcarrot.models.templates import DEFAULT_IMAGE, FALLBACK_IMAGES
from viralcarrot.services.images import RequestContext
from viralcarrot.services.synthesizer import (
    Synthesizer,
    build_ingredients,
    build_steps,
    build_title,
    estimate_nutrition,
    fallback_image,
    rate_difficulty,
)


def test_chicken_garlic_salt_example(rng):
    r = asyncio.run(Synthesizer(rng=rng).synthesize("chicken", ["garlic", "salt"], RecipeFilters(), 0))
    for ing in ("chicken", "garlic", "salt", "olive oil", "black pepper", "onion"):
        assert ing in r.ingredients
    assert r.ingredientMatch.availableIngredients == ["garlic", "salt"]
    assert r.ingredientMatch.matchPercentage == 100
    assert r.matchScore == 0.95
    assert r.source == "ViralCarrot"
    assert r.isExternal is False


def test_title_and_ingredients_do_not_depend_on_rng():
    filters = RecipeFilters(cuisine="Italian")
    a = asyncio.run(Synthesizer(rng=random.Random(1)).synthesize("beef", ["mushrooms"], filters, 4))
    b = asyncio.run(Synthesizer(rng=random.Random(99)).synthesize("beef", ["mushrooms"], filters, 4))
    assert a.title == b.title
    assert a.ingredients == b.ingredients


def test_seeded_rng_gives_identical_recipes():
    a = asyncio.run(Synthesizer(rng=random.Random(7)).synthesize("salmon", [], RecipeFilters(), 2))
    b = asyncio.run(Synthesizer(rng=random.Random(7)).synthesize("salmon", [], RecipeFilters(), 2))
    assert a == b


def test_titles_vary_across_indexes():
    titles = [build_title("chicken", RecipeFilters(), i) for i in range(7)]
    assert titles[0] == "Crispy Garlic Butter Chicken"
    assert titles[1] == "Grilled Chicken"
    assert titles[2] == "Spicy Chicken"
    assert len(set(titles)) == 7


def test_title_uses_cuisine_modifier():
    assert build_title("chicken", RecipeFilters(cuisine="Italian"), 3) == "Tuscan Spicy Buffalo Chicken Wings"


def test_generic_title_for_unknown_food():
    assert build_title("quinoa", RecipeFilters(), 0) == "Delicious Quinoa Recipe"


def test_ingredients_add_cuisine_extras():
    ings = build_ingredients("chicken", [], RecipeFilters(cuisine="Italian"))
    assert ings == ["chicken", "olive oil", "salt", "black pepper", "garlic", "onion", "basil", "parmesan cheese"]


def test_ingredients_capped_and_deduped():
    extra = ["Garlic"] + [f"spice {i}" for i in range(10)]
    ings = build_ingredients("chicken", extra, RecipeFilters())
    assert len(ings) == 12
    assert [i.lower() for i in ings].count("garlic") == 1


def test_steps_follow_cooking_time():
    ings = build_ingredients("chicken", [], RecipeFilters())
    quick = build_steps("chicken", ings, RecipeFilters(cookingTime="15"))
    slow = build_steps("chicken", ings, RecipeFilters())
    assert quick[0].startswith("Prepare the chicken")
    assert "salt and black pepper" in quick[1]
    assert "sear" in quick[2]
    assert "400°F (200°C)" in slow[2]
    assert len(slow) == 4
    assert slow[-1].startswith("Plate")


def test_steps_add_vegetables_only_when_given():
    plain = build_steps("pasta", build_ingredients("pasta", [], RecipeFilters()), RecipeFilters())
    assert not any(s.startswith("Add the") for s in plain)

    ings = build_ingredients("chicken", ["broccoli", "carrot"], RecipeFilters())
    steps = build_steps("chicken", ings, RecipeFilters())
    assert steps[3] == "Add the carrot, broccoli and cook until tender and fragrant."


def test_steps_lemon_finish():
    ings = build_ingredients("salmon", [], RecipeFilters())
    steps = build_steps("salmon", ings, RecipeFilters(cookingTime=30))
    assert "medium heat" in steps[2]
    assert "lemon juice" in steps[-1]


def test_nutrition_jitter_bounds(rng):
    for _ in range(50):
        n = estimate_nutrition("quinoa", rng)
        assert 150 <= n.calories < 350
        assert 10 <= n.protein < 30
        assert 20 <= n.carbs < 50
        assert 5 <= n.fat < 20


def test_difficulty():
    assert rate_difficulty("Octopus", RecipeFilters()) == "Hard"
    assert rate_difficulty("eggs", RecipeFilters(mealType="Breakfast")) == "Easy"
    assert rate_difficulty("chicken", RecipeFilters()) == "Medium"


def test_fallback_image_cycles():
    assert fallback_image("chicken", 4) == FALLBACK_IMAGES["chicken"][1]
    assert fallback_image("quinoa", 0) == DEFAULT_IMAGE


def test_defaults_and_cooking_time(rng):
    r = asyncio.run(Synthesizer(rng=rng).synthesize("tofu", [], RecipeFilters(), 0))
    assert (r.cuisine, r.mealType, r.dietaryStyle) == ("International", "Dinner", "Regular")
    assert r.cookingTime == 40
    r = asyncio.run(Synthesizer(rng=rng).synthesize("tofu", [], RecipeFilters(cookingTime="15"), 0))
    assert r.cookingTime == 15


def test_image_upgrade_only_for_first_three(rng):
    images = FakeImageSearch()
    synth = Synthesizer(rng=rng, image_search=images)
    recipes = asyncio.run(synth.synthesize_many("chicken", [], RecipeFilters(), 6, RequestContext()))
    assert sorted(images.calls) == [0, 1, 2]
    for r in recipes[:3]:
        assert r.image.startswith("https://img.test/")
    for i, r in enumerate(recipes[3:], start=3):
        assert r.image == fallback_image("chicken", i)
    assert len({r.id for r in recipes}) == 6


def test_image_failure_keeps_fallback(rng):
    synth = Synthesizer(rng=rng, image_search=FakeImageSearch(fail=True))
    r = asyncio.run(synth.synthesize("beef", [], RecipeFilters(), 0))
    assert r.image == fallback_image("beef", 0)


def test_slow_image_search_is_bounded(rng):
    synth = Synthesizer(rng=rng, image_search=FakeImageSearch(delay=5), image_timeout=0.05)
    r = asyncio.run(synth.synthesize("beef", [], RecipeFilters(), 1))
    assert r.image == fallback_image("beef", 1)
