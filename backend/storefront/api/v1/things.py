"""Catalogue endpoints."""

from __future__ import annotations

from flask import Blueprint, request

from storefront.api.deps import json_response, timing
from storefront.core.errors import NotFound
from storefront.schemas import ThingQuerySchema, ThingSchema
from storefront.services import CatalogService, NotFoundError

bp = Blueprint("things", __name__)

thing_schema = ThingSchema()
thing_list_schema = ThingSchema(many=True)
query_schema = ThingQuerySchema()


@bp.get("")
@timing
def list_things():
    """Return every thing for sale, optionally sorted (``?sort=-price,name``)."""

    query = query_schema.load(request.args)
    items = CatalogService().list_things(sort=query["sort"])
    return json_response({"data": thing_list_schema.dump(items)})


@bp.get("/<int:thing_id>")
@timing
def get_thing(thing_id: int):
    """Return a single thing."""

    try:
        thing = CatalogService().get_thing(thing_id)
    except NotFoundError as exc:
        raise NotFound(str(exc)) from exc
    return json_response({"data": thing_schema.dump(thing)})
