"""Integration tests for the HTML pages."""

from __future__ import annotations

from storefront.web.views import SESSION_USER_KEY
from tests.factories.thing import ThingFactory


def _login(client, email="shopper@example.com", password="Passw0rd!"):
    return client.post("/login", data={"email": email, "password": password})


class TestLoginPage:
    def test_form_uses_plain_field_classes(self, client, session):
        resp = client.get("/login")

        assert resp.status_code == 200
        html = resp.get_data(as_text=True)
        assert 'class="formEmail"' in html
        assert 'class="formPassword"' in html
        assert "form-control" not in html
        assert 'name="email"' in html
        assert 'name="password"' in html
        assert "Log In" in html

    def test_successful_login_redirects_and_sets_session(self, client, user):
        resp = _login(client)

        assert resp.status_code == 302
        assert resp.headers["Location"].endswith("/products")
        with client.session_transaction() as flask_session:
            assert flask_session[SESSION_USER_KEY] == user.id

    def test_wrong_password_rerenders_form(self, client, user):
        resp = _login(client, password="wrong")

        assert resp.status_code == 401
        html = resp.get_data(as_text=True)
        assert "Invalid email or password" in html
        assert 'value="shopper@example.com"' in html
        with client.session_transaction() as flask_session:
            assert SESSION_USER_KEY not in flask_session

    def test_malformed_submission_is_bad_request(self, client, session):
        resp = client.post("/login", data={"email": "nope"})

        assert resp.status_code == 400
        assert "Enter a valid email and password." in resp.get_data(as_text=True)


class TestProductsPage:
    def test_lists_things_cheapest_first(self, client, session):
        ThingFactory(name="Krampus", price=19999, description="Scary")
        ThingFactory(name="Tooth Fairy", price=999)

        resp = client.get("/products")

        assert resp.status_code == 200
        html = resp.get_data(as_text=True)
        assert html.index("Tooth Fairy") < html.index("Krampus")
        assert "$9.99" in html
        assert "$199.99" in html
        assert "Scary" in html

    def test_root_serves_products(self, client, session):
        resp = client.get("/")

        assert resp.status_code == 200
        assert "Nothing for sale yet." in resp.get_data(as_text=True)

    def test_navbar_shows_login_link_when_anonymous(self, client, session):
        html = client.get("/").get_data(as_text=True)

        assert 'href="/login"' in html
        assert 'id="navbar-user"' not in html

    def test_navbar_shows_user_after_login(self, client, user):
        _login(client)

        html = client.get("/products").get_data(as_text=True)

        assert '<span class="navbar-text" id="navbar-user">Shopper</span>' in html
        assert "Log Out" in html

    def test_logout_clears_session(self, client, user):
        _login(client)

        resp = client.post("/logout")

        assert resp.status_code == 302
        with client.session_transaction() as flask_session:
            assert SESSION_USER_KEY not in flask_session

    def test_stale_session_user_is_dropped(self, client, session):
        with client.session_transaction() as flask_session:
            flask_session[SESSION_USER_KEY] = 999_999

        html = client.get("/").get_data(as_text=True)

        assert 'href="/login"' in html
