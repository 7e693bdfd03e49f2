import pytest

from hello_fresh_scrape.errors import IngredientReferenceError
from hello_fresh_scrape.models.recipe import Ingredient, IngredientYield, Recipe, Recipes, Yield
from hello_fresh_scrape.resolve.yields import ingredient_name, yield_ids_to_names


def _recipe(recipe_id, ingredients, *yields):
    return Recipe(
        id=recipe_id,
        ingredients=[Ingredient(id=i, name=n) for i, n in ingredients],
        yields=[
            Yield(yields=servings, ingredients=[IngredientYield(id=i, amount=a, unit=u) for i, a, u in entries])
            for servings, entries in yields
        ],
    )


def test_resolves_id_to_name_and_keeps_quantity():
    r = _recipe("r1", [("i1", "Egg")], (2, [("i1", 2, "pcs")]))
    yield_ids_to_names([r])
    entry = r.yields[0].ingredients[0]
    assert entry.id == "Egg"
    assert entry.amount == 2
    assert entry.unit == "pcs"


def test_unknown_id_names_it_and_keeps_earlier_rewrites():
    r = _recipe("r1", [("i1", "Egg")], (2, [("i1", 2, "pcs"), ("i2", 1, "cup")]))
    with pytest.raises(IngredientReferenceError) as exc_info:
        yield_ids_to_names([r])
    assert exc_info.value.ingredient_id == "i2"
    assert "i2" in str(exc_info.value)
    assert [e.id for e in r.yields[0].ingredients] == ["Egg", "i2"]


def test_lookup_is_scoped_to_owning_recipe():
    a = _recipe("a", [("i1", "Butter")], (2, [("i1", 10, "g")]))
    b = _recipe("b", [("i1", "Rice")], (2, [("i1", 150, "g")]), (4, [("i1", 300, "g")]))
    yield_ids_to_names([a, b])
    assert a.yields[0].ingredients[0].id == "Butter"
    assert [y.ingredients[0].id for y in b.yields] == ["Rice", "Rice"]


def test_id_from_other_recipe_is_not_resolved():
    a = _recipe("a", [("i1", "Butter")], (2, [("i1", 10, "g")]))
    b = _recipe("b", [("i2", "Rice")], (2, [("i1", 150, "g")]))
    with pytest.raises(IngredientReferenceError) as exc_info:
        yield_ids_to_names([a, b])
    assert exc_info.value.ingredient_id == "i1"
    assert a.yields[0].ingredients[0].id == "Butter"


def test_first_matching_ingredient_wins():
    r = _recipe("r1", [("i1", "Shallot"), ("i1", "Onion")], (2, [("i1", 1, "unit")]))
    yield_ids_to_names([r])
    assert r.yields[0].ingredients[0].id == "Shallot"


def test_recipes_without_yields_are_untouched():
    r = _recipe("r1", [("i1", "Egg")])
    yield_ids_to_names([r])
    assert r.ingredients[0].id == "i1"


def test_recipes_batch_method():
    batch = Recipes([_recipe("r1", [("i1", "Egg")], (2, [("i1", 2, "pcs")]))])
    batch.yield_ids_to_names()
    assert batch[0].yields[0].ingredients[0].id == "Egg"


def test_ingredient_name():
    ingredients = [Ingredient(id="i1", name="Egg"), Ingredient(id="i2", name="Flour"), Ingredient(id="i2", name="Rye")]
    assert ingredient_name("i2", ingredients) == "Flour"
    with pytest.raises(IngredientReferenceError, match="id i3 not found in ingredients list"):
        ingredient_name("i3", ingredients)
