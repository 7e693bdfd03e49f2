"""Orchestrator helpers: scrape a page (or a saved one) into Recipes.

Every stage failure propagates to the caller; there is no fallback result.
"""

from __future__ import annotations

import json
import logging

from hello_fresh_scrape.ingest.fetch import iter_body, open_page
from hello_fresh_scrape.ingest.payload import recipes_from_payload
from hello_fresh_scrape.ingest.scan import Source, extract_next_data
from hello_fresh_scrape.models.recipe import Recipes
from hello_fresh_scrape.resolve.yields import yield_ids_to_names

logger = logging.getLogger(__name__)


def recipes_from_html(source: Source, resolve_yields: bool = False) -> Recipes:
    """Scan an HTML document, decode its recipes and optionally resolve yields."""
    stage = "scan"
    try:
        raw = extract_next_data(source)

        stage = "decode"
        recipes = recipes_from_payload(raw)

        if resolve_yields:
            stage = "resolve"
            yield_ids_to_names(recipes)
    except Exception:
        logger.error("Extraction failed | stage=%s", stage)
        raise
    return recipes


def scrape_recipes(page: str, resolve_yields: bool = False) -> Recipes:
    """Fetch page and return the recipes embedded in it."""
    logger.info("Scrape start | page=%s", page)
    resp = open_page(page)
    with resp:
        recipes = recipes_from_html(iter_body(resp), resolve_yields=resolve_yields)
    logger.info("Scrape success | page=%s recipes=%d", page, len(recipes))
    return recipes


def dump_recipes(recipes: Recipes) -> str:
    """Serialize recipes as a tab-indented JSON array with wire field names."""
    return json.dumps(recipes.model_dump(mode="json", by_alias=True), indent="\t", ensure_ascii=False)
