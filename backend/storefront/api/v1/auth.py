"""Authentication endpoints for API clients."""

from __future__ import annotations

from flask import Blueprint, request

from storefront.api.deps import current_user, json_response, require_auth, timing
from storefront.core.errors import Unauthorized
from storefront.schemas import LoginSchema, TokenResponseSchema, WhoAmISchema
from storefront.services import AuthService, InvalidCredentialsError

bp = Blueprint("auth", __name__)

login_schema = LoginSchema()
token_schema = TokenResponseSchema()
whoami_schema = WhoAmISchema()


@bp.post("/login")
@timing
def login():
    """Authenticate credentials and issue an access token."""

    credentials = login_schema.load(request.get_json(silent=True) or {})
    service = AuthService()
    try:
        user = service.login(credentials)
    except InvalidCredentialsError as exc:
        raise Unauthorized(str(exc)) from exc
    token = service.issue_access_token(user)
    return json_response({"data": token_schema.dump({"access_token": token})})


@bp.get("/whoami")
@require_auth
@timing
def whoami():
    """Return the authenticated user profile."""

    return json_response({"data": whoami_schema.dump(current_user())})
