"""Tests for the browsing pages and the health endpoint.

Covers:
  - GET / lists every registered platform
  - GET /docs redirects to /
  - GET /platform/<platform> sections and empty states
  - GET /api/health
"""

from techdocs.services import discovery


class TestIndex:

    def test_returns_200(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.mimetype == "text/html"

    def test_links_every_platform(self, client):
        html = client.get("/").get_data(as_text=True)
        assert 'href="/platform/truestate"' in html
        assert 'href="/platform/acn"' in html
        assert "Truestate" in html

    def test_site_title(self, client):
        html = client.get("/").get_data(as_text=True)
        assert "<h1>IQOL&#39;s Tech Documentation</h1>" in html

    def test_docs_redirects_home(self, client):
        resp = client.get("/docs")
        assert resp.status_code == 302
        assert resp.headers["Location"].endswith("/")


class TestPlatformDetail:

    def test_lists_workflows_and_services(self, client):
        resp = client.get("/platform/truestate")
        assert resp.status_code == 200
        html = resp.get_data(as_text=True)
        assert 'href="/docs/truestate/schema"' in html
        assert 'href="/docs/truestate/workflows/lead-onboarding"' in html
        assert "Lead Onboarding" in html
        assert 'href="/docs/truestate/microservices/search"' in html
        assert 'href="/docs/truestate/microservices/billing"' in html

    def test_empty_sections(self, client):
        resp = client.get("/platform/acn")
        assert resp.status_code == 200
        html = resp.get_data(as_text=True)
        assert "No workflow documentation available for this platform yet." in html
        assert "No microservices documentation available for this platform yet." in html

    def test_unknown_platform_404(self, client):
        resp = client.get("/platform/unknown")
        assert resp.status_code == 404
        assert resp.get_json() == {"error": "Platform not found"}

    def test_unknown_platform_skips_discovery(self, client, monkeypatch):
        def _boom(*args, **kwargs):
            raise AssertionError("filesystem touched")

        monkeypatch.setattr(discovery, "list_workflows", _boom)
        monkeypatch.setattr(discovery, "list_microservices", _boom)
        assert client.get("/platform/vault").status_code == 404


class TestHealth:

    def test_health_fields(self, client):
        data = client.get("/api/health").get_json()
        assert data["status"] == "operational"
        assert data["version"] == "1.0.0"
        assert data["platforms_total"] == 2
        assert data["platforms"] == ["truestate", "acn"]
        assert data["uptime_seconds"] >= 0
