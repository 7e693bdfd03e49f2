"""Exceptions raised while scraping Hello Fresh pages."""

from __future__ import annotations


class ScrapeError(Exception):
    """Base class for every failure raised by hello_fresh_scrape."""


class StreamError(ScrapeError):
    """Reading the page body failed. The underlying error is chained as __cause__."""


class ShapeError(ScrapeError):
    """The page or its JSON payload does not have the expected structure."""


class PayloadNotFoundError(ShapeError):
    """No <script id="__NEXT_DATA__" type="application/json"> text in the page."""

    def __init__(self, message: str = "recipe props data not found"):
        super().__init__(message)


class EnvelopeError(ShapeError):
    """The payload is not JSON or does not match the props/pageProps/... envelope."""


class QueryDecodeError(ShapeError):
    """An object-shaped query result could not be decoded as a recipe collection."""

    def __init__(self, index: int, message: str):
        self.index = index
        super().__init__(f"query {index}: {message}")


class IngredientReferenceError(ScrapeError):
    """A yield references an ingredient id missing from its recipe."""

    def __init__(self, ingredient_id: str):
        self.ingredient_id = ingredient_id
        super().__init__(f"id {ingredient_id} not found in ingredients list")


class SitemapError(ScrapeError):
    """The collections sitemap could not be parsed."""
