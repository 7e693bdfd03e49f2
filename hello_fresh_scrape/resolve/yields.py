"""Resolve IngredientYield ids to ingredient names."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Sequence

from hello_fresh_scrape.errors import IngredientReferenceError
from hello_fresh_scrape.models.recipe import Ingredient, Recipe

logger = logging.getLogger(__name__)


def ingredient_name(ingredient_id: str, ingredients: Sequence[Ingredient]) -> str:
    """Return the name of the first ingredient whose id is ``ingredient_id``.

    Raises IngredientReferenceError when no ingredient matches.
    """
    for ingredient in ingredients:
        if ingredient.id == ingredient_id:
            return ingredient.name
    raise IngredientReferenceError(ingredient_id)


def _name_index(ingredients: Sequence[Ingredient]) -> Dict[str, str]:
    index: Dict[str, str] = {}
    for ingredient in ingredients:
        # first match wins
        index.setdefault(ingredient.id, ingredient.name)
    return index


def yield_ids_to_names(recipes: Iterable[Recipe]) -> None:
    """Rewrite every IngredientYield id to the matching ingredient's name, in place.

    Each recipe's yields are resolved against that recipe's own ingredients
    only. The first unknown id raises IngredientReferenceError; entries
    rewritten before it stay rewritten.
    """
    for recipe in recipes:
        names = _name_index(recipe.ingredients)
        resolved = 0
        for y in recipe.yields:
            for entry in y.ingredients:
                try:
                    entry.id = names[entry.id]
                except KeyError:
                    logger.debug("Recipe %s: yield for %d references unknown id %s", recipe.id, y.yields, entry.id)
                    raise IngredientReferenceError(entry.id) from None
                resolved += 1
        logger.debug("Recipe %s: resolved %d yield ingredient ids", recipe.id, resolved)
