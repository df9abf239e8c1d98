"""Health endpoint tests."""

from nna_registry import __version__
from nna_registry.main import app
from nna_registry.services.taxonomy.initializer import InitializationResult
from nna_registry.settings import settings


class TestHealth:

    def test_ok_after_startup(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "ok"
        assert body["environment"] == settings.environment
        assert body["version"] == __version__
        assert body["taxonomy"]["success"] is True
        assert body["taxonomy"]["layers"] == 10
        assert body["taxonomy"]["collisions"] == 1

    def test_degraded_when_initialization_failed(self, client):
        app.state.taxonomy = InitializationResult(
            success=False, error="Taxonomy integrity check failed: x"
        )
        resp = client.get("/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "degraded"
        assert body["taxonomy"]["error"] == "Taxonomy integrity check failed: x"
