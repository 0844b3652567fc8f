"""HTML views rendered with Jinja2 templates."""

from __future__ import annotations

import logging
from http import HTTPStatus

from flask import Blueprint, redirect, render_template, request, session, url_for
from marshmallow import ValidationError

from storefront.models.user import User
from storefront.schemas import LoginSchema
from storefront.services import AuthService, CatalogService, InvalidCredentialsError, NotFoundError

LOGGER = logging.getLogger(__name__)

SESSION_USER_KEY = "user_id"

bp = Blueprint("web", __name__, template_folder="templates")

login_schema = LoginSchema()


def session_user() -> User | None:
    """Return the logged-in user, dropping stale session ids."""
    user_id = session.get(SESSION_USER_KEY)
    if user_id is None:
        return None
    try:
        return AuthService().whoami(user_id)
    except NotFoundError:
        session.pop(SESSION_USER_KEY, None)
        return None


@bp.app_context_processor
def _inject_user() -> dict[str, object]:
    return {"current_user": session_user()}


@bp.get("/")
@bp.get("/products")
def products():
    """Products page: every thing for sale, cheapest first."""
    things = CatalogService().list_things(sort=["price", "name"])
    return render_template("products.html", things=things)


@bp.route("/login", methods=["GET", "POST"])
def login():
    """Show the login form; on submit, dispatch ``login(credentials)``."""
    if request.method == "GET":
        return render_template("login.html")

    email = request.form.get("email", "")
    try:
        credentials = login_schema.load(request.form)
    except ValidationError:
        return (
            render_template("login.html", error="Enter a valid email and password.", email=email),
            HTTPStatus.BAD_REQUEST,
        )
    try:
        user = AuthService().login(credentials)
    except InvalidCredentialsError as exc:
        return (
            render_template("login.html", error=str(exc), email=email),
            HTTPStatus.UNAUTHORIZED,
        )
    session.clear()
    session[SESSION_USER_KEY] = user.id
    return redirect(url_for("web.products"))


@bp.post("/logout")
def logout():
    session.clear()
    return redirect(url_for("web.products"))
