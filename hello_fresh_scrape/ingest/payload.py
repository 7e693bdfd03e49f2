"""Pull recipes out of the __NEXT_DATA__ payload.

The payload is a react-query cache dump::

    props.pageProps.ssrPayload.dehydratedState.queries[*].state.data

Each query's ``data`` can be anything. Recipe listings are the objects of
the form ``{"items": [recipe, ...]}``; arrays, scalars and null are other
cached queries and are skipped.
"""

from __future__ import annotations

import json
import logging
from typing import Any, List, Union

from pydantic import Field, ValidationError

from hello_fresh_scrape.errors import EnvelopeError, QueryDecodeError
from hello_fresh_scrape.models.recipe import Recipe, RecipeCollection, Recipes, WireModel

logger = logging.getLogger(__name__)


class QueryState(WireModel):
    data: Any = Field(None, alias="Data")


class Query(WireModel):
    state: QueryState = Field(default_factory=QueryState, alias="State")


class DehydratedState(WireModel):
    queries: List[Query] = Field(default_factory=list, alias="Queries")


class SSRPayload(WireModel):
    dehydrated_state: DehydratedState = Field(default_factory=DehydratedState, alias="DehydratedState")


class PageProps(WireModel):
    ssr_payload: SSRPayload = Field(default_factory=SSRPayload, alias="SSRPayload")


class Props(WireModel):
    page_props: PageProps = Field(default_factory=PageProps, alias="PageProps")


class Envelope(WireModel):
    props: Props = Field(default_factory=Props, alias="Props")


def decode_envelope(raw: Union[bytes, str]) -> Envelope:
    """Decode the payload JSON into its envelope. Raises EnvelopeError."""
    try:
        doc = json.loads(raw)
    except ValueError as exc:
        raise EnvelopeError(f"payload is not valid JSON: {exc}") from exc
    try:
        return Envelope.model_validate(doc)
    except ValidationError as exc:
        raise EnvelopeError(f"unexpected payload envelope: {exc}") from exc


def recipes_from_payload(raw: Union[bytes, str]) -> Recipes:
    """Return every recipe listed in the payload's cached queries, in order.

    Raises EnvelopeError when the payload itself is malformed and
    QueryDecodeError when an object-shaped query is not a recipe listing.
    """
    envelope = decode_envelope(raw)
    queries = envelope.props.page_props.ssr_payload.dehydrated_state.queries
    recipes: List[Recipe] = []
    for i, query in enumerate(queries):
        data = query.state.data
        # Recipes only occur when data is a JSON object
        if not isinstance(data, dict):
            continue
        try:
            collection = RecipeCollection.model_validate(data)
        except ValidationError as exc:
            raise QueryDecodeError(i, f"not a recipe collection: {exc}") from exc
        if collection.items:
            logger.debug("Query %d: %d recipes", i, len(collection.items))
            recipes.extend(collection.items)
    logger.info("Payload held %d queries, %d recipes", len(queries), len(recipes))
    return Recipes(recipes)
