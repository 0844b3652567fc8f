"""Thing resource schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, post_load, validate


class ThingSchema(Schema):
    """Public representation of a thing for sale."""

    id = fields.Integer(required=True)
    name = fields.String(required=True)
    price = fields.Integer(required=True)
    display_price = fields.String(dump_only=True)
    description = fields.String(allow_none=True)


class ThingQuerySchema(Schema):
    """Query parameters accepted when listing things."""

    class Meta:
        unknown = EXCLUDE

    sort = fields.String(load_default="", validate=validate.Length(max=200))

    @post_load
    def _split_sort(self, data, **kwargs):
        raw = data.get("sort") or ""
        data["sort"] = [token.strip() for token in raw.split(",") if token.strip()]
        return data
