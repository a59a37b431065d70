"""
Tests for the session cookie endpoints, the session gate and the
participant dashboard behind it.
"""

import pytest

from tests.tokens import create_test_token


class TestSessionEndpoints:
    def test_post_sets_cookie(self, client):
        response = client.post("/api/auth/session", json={"idToken": "token-abc"})

        assert response.status_code == 200
        assert response.json() == {"success": True}
        cookie = response.headers["set-cookie"]
        assert cookie.startswith("wn_session=token-abc")
        assert "HttpOnly" in cookie
        assert "Max-Age=604800" in cookie
        assert "Path=/" in cookie
        assert "SameSite=lax" in cookie

    def test_post_accepts_snake_case(self, client):
        response = client.post("/api/auth/session", json={"id_token": "token-abc"})
        assert response.status_code == 200

    @pytest.mark.parametrize("body", [{}, {"idToken": ""}])
    def test_post_without_token_is_400(self, client, body):
        response = client.post("/api/auth/session", json=body)
        assert response.status_code == 400
        assert response.json()["error"] == "TOKEN_REQUIRED"
        assert "set-cookie" not in response.headers

    def test_delete_clears_cookie(self, client):
        response = client.delete("/api/auth/session")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        cookie = response.headers["set-cookie"]
        assert cookie.startswith("wn_session=")
        assert "Max-Age=0" in cookie

    def test_delete_without_session_still_succeeds(self, client):
        assert client.delete("/api/auth/session").status_code == 200


class TestSessionGate:
    def test_redirects_without_cookie(self, client):
        response = client.get("/app/settings", follow_redirects=False)
        assert response.status_code == 307
        assert response.headers["location"] == "/login?next=%2Fapp%2Fsettings"

    def test_redirects_dashboard_root(self, client):
        response = client.get("/app", follow_redirects=False)
        assert response.status_code == 307
        assert response.headers["location"] == "/login?next=%2Fapp"

    def test_unprotected_paths_pass(self, client):
        assert client.get("/api/health", follow_redirects=False).status_code == 200

    def test_any_cookie_passes_the_gate(self, client):
        """The gate only checks presence; the dashboard rejects the token."""
        client.cookies.set("wn_session", "garbage")
        response = client.get("/app", follow_redirects=False)
        assert response.status_code == 401
        assert response.json()["error"] == "INVALID_TOKEN"


class TestDashboard:
    def test_participant(self, client, user_token):
        client.cookies.set("wn_session", user_token)
        response = client.get("/app")

        assert response.status_code == 200
        body = response.json()
        assert body["user"]["id"] == "test-user-123"
        assert body["is_admin"] is False
        assert body["innovations"] == []

    def test_admin_flag(self, client, admin_token):
        client.cookies.set("wn_session", admin_token)
        assert client.get("/app").json()["is_admin"] is True

    def test_expired_session(self, client):
        client.cookies.set("wn_session", create_test_token(expired=True))
        response = client.get("/app")
        assert response.status_code == 401
        assert response.json()["error"] == "TOKEN_EXPIRED"

    def test_session_cookie_does_not_authorise_api(self, client, admin_token):
        """Admin endpoints only accept bearer tokens."""
        client.cookies.set("wn_session", admin_token)
        assert client.get("/api/admin/users").status_code == 401
