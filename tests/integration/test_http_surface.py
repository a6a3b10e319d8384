"""Tests for the service-wide HTTP surface: root, health and CORS."""


class TestRootAndHealth:
    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.text == "UniThrift API ✅"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "domain": "marketplace"}


class TestCors:
    def test_localhost_origin_is_allowed(self, client):
        response = client.get("/health", headers={"Origin": "http://localhost:5173"})

        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"

    def test_other_origins_are_not_granted(self, client):
        for origin in ("https://localhost:5173", "http://localhost", "http://example.com"):
            response = client.get("/health", headers={"Origin": origin})

            assert response.status_code == 200
            assert "access-control-allow-origin" not in response.headers

    def test_preflight_is_204(self, client):
        response = client.options(
            "/api/cart/checkout",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )

        assert response.status_code == 204
        assert response.content == b""
        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
        assert "POST" in response.headers["access-control-allow-methods"]

    def test_preflight_from_disallowed_origin(self, client):
        response = client.options(
            "/api/cart/checkout",
            headers={"Origin": "http://evil.example", "Access-Control-Request-Method": "POST"},
        )

        assert response.status_code == 204
        assert "access-control-allow-origin" not in response.headers

    def test_plain_options_is_204(self, client):
        response = client.options("/api/products")

        assert response.status_code == 204
