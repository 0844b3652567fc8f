"""Favorites of the authenticated user."""

from __future__ import annotations

from flask import Blueprint

from storefront.api.deps import current_user, json_response, require_auth, timing
from storefront.schemas import ThingSchema
from storefront.services import CatalogService

bp = Blueprint("favorites", __name__)

thing_list_schema = ThingSchema(many=True)


@bp.get("")
@require_auth
@timing
def list_favorites():
    """Return the things the current user marked as favorite."""

    user = current_user()
    items = CatalogService().favorites_of(user.id)
    return json_response({"data": thing_list_schema.dump(items)})
