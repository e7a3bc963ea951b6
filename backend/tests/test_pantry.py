import asyncio

from conftest import FailingSource, StaticSource, make_recipe
from viralcarrot.models.schemas import RecipeFilters
from viralcarrot.services.pantry import (
    PantryWizard,
    coarse_coverage,
    dedupe_by_title,
    match_summary,
    narrow_by_cuisine,
    pantry_match_recipes,
    prefilter,
)

STIR_FRY = ["chicken breast", "rice", "soy sauce", "ginger"]


def test_boundary_recipe_is_kept_at_fifty_percent():
    out = pantry_match_recipes([make_recipe("r1", ingredients=STIR_FRY)], ["rice", "chicken"])
    assert len(out) == 1
    m = out[0].ingredientMatch
    assert m.availableIngredients == ["chicken breast", "rice"]
    assert m.matchPercentage == 50
    assert out[0].matchScore == 0.5


def test_below_threshold_dropped_and_sorted_and_capped():
    recipes = [make_recipe("low", ingredients=["rice", "saffron", "peas", "chorizo"])]
    recipes += [make_recipe(f"full{i}", ingredients=["rice", "chicken"]) for i in range(15)]
    recipes.append(make_recipe("half", ingredients=STIR_FRY))
    out = pantry_match_recipes(recipes, ["rice", "chicken"])
    assert len(out) == 12
    assert all(r.ingredientMatch.matchPercentage >= 50 for r in out)
    assert "low" not in {r.id for r in out}
    pcts = [r.ingredientMatch.matchPercentage for r in out]
    assert pcts == sorted(pcts, reverse=True)


def test_prefilter_drops_low_coverage():
    assert coarse_coverage(STIR_FRY, ["rice", "chicken"]) == 50
    keep = make_recipe("keep", ingredients=STIR_FRY)
    drop = make_recipe("drop", ingredients=["rice", "saffron", "chorizo", "peas", "prawns"])
    assert [r.id for r in prefilter([keep, drop], ["rice", "chicken"])] == ["keep"]


def test_prefilter_keeps_recipes_the_detailed_match_keeps():
    plain = make_recipe("plain", ingredients=["rice", "chicken"])
    pantry = ["basmati rice", "chicken thighs"]
    assert coarse_coverage(plain.ingredients, pantry) == 100
    assert [r.id for r in prefilter([plain], pantry)] == ["plain"]
    [kept] = pantry_match_recipes(prefilter([plain], pantry), pantry)
    assert kept.ingredientMatch.matchPercentage == 100


def test_wizard_finds_recipe_with_generic_ingredient_names():
    src = StaticSource("static", [make_recipe("plain", title="Chicken and Rice", ingredients=["rice", "chicken"])])
    out = asyncio.run(PantryWizard([src]).find(["basmati rice", "chicken thighs"], RecipeFilters()))
    assert [r.id for r in out] == ["plain"]


def test_dedupe_by_title_ignores_case():
    out = dedupe_by_title([make_recipe("1", title="Fried Rice"), make_recipe("2", title="fried rice ")])
    assert [r.id for r in out] == ["1"]


def test_narrow_by_cuisine_falls_back():
    recipes = [make_recipe("a", cuisine="Japanese"), make_recipe("b", cuisine="Italian")]
    assert [r.id for r in narrow_by_cuisine(recipes, "japanese")] == ["a"]
    assert narrow_by_cuisine(recipes, "Thai") == recipes
    assert narrow_by_cuisine(recipes, None) == recipes


def test_match_summary_buckets():
    recipes = [make_recipe("a", pct=95), make_recipe("b", pct=80), make_recipe("c", pct=65), make_recipe("d", pct=50)]
    s = match_summary(recipes)
    assert (s.highMatch, s.mediumMatch, s.lowMatch) == (2, 1, 1)


def test_wizard_queries_first_three_items_and_survives_failures():
    src = StaticSource("static", [
        make_recipe("stir", title="Chicken Stir Fry", ingredients=STIR_FRY),
        make_recipe("paella", title="Paella", ingredients=["rice", "saffron", "chorizo", "peas", "prawns"]),
    ])
    wizard = PantryWizard([src, FailingSource()])
    pantry = ["rice", "chicken", "soy sauce", "ginger"]
    out = asyncio.run(wizard.find(pantry, RecipeFilters()))

    assert sorted(src.queries) == ["chicken", "rice", "soy sauce"]
    assert [r.id for r in out] == ["stir"]
    assert out[0].ingredientMatch.matchPercentage == 100
