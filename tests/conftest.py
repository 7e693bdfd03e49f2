import json

import pytest


def _recipe(recipe_id, ingredients, yields):
    return {
        "id": recipe_id,
        "country": "US",
        "name": f"Recipe {recipe_id}",
        "seoName": f"recipe-{recipe_id}",
        "comment": None,
        "difficulty": 1,
        "prepTime": "PT15M",
        "servingSize": 2,
        "ingredients": [{"id": i, "name": n, "shipped": True} for i, n in ingredients],
        "yields": [
            {"yields": servings, "ingredients": [{"id": i, "amount": a, "unit": u} for i, a, u in entries]}
            for servings, entries in yields
        ],
    }


@pytest.fixture
def sample_payload():
    """A dehydrated query cache with two recipe listings among unrelated queries."""
    listing_a = {
        "items": [
            _recipe("r1", [("i1", "Egg"), ("i2", "Flour")], [(2, [("i1", 2, "pcs"), ("i2", 100, "g")])]),
            _recipe("r2", [("i1", "Milk")], [(2, [("i1", 250, "ml")]), (4, [("i1", 500, "ml")])]),
        ],
        "total": 2,
    }
    listing_b = {"items": [_recipe("r3", [("i9", "Salt")], [(2, [("i9", 1, "tsp")])])]}
    queries = [
        {"queryKey": ["menu"], "state": {"data": ["unrelated"]}},
        {"queryKey": ["recipes", 1], "state": {"data": listing_a}},
        {"queryKey": ["flags"], "state": {"data": None}},
        {"queryKey": ["locale"], "state": {"data": "en-US"}},
        {"queryKey": ["recipes", 2], "state": {"data": listing_b}},
    ]
    return {"props": {"pageProps": {"ssrPayload": {"dehydratedState": {"queries": queries}}}}}


def build_page(payload) -> bytes:
    body = json.dumps(payload)
    return (
        "<!DOCTYPE html><html><head>"
        '<script type="application/ld+json">{"@type": "WebSite"}</script>'
        "</head><body><div id=\"__next\"></div>"
        f'<script id="__NEXT_DATA__" type="application/json">{body}</script>'
        '<script src="/_next/static/main.js"></script>'
        "</body></html>"
    ).encode("utf-8")


@pytest.fixture
def recipe_page(sample_payload) -> bytes:
    return build_page(sample_payload)
