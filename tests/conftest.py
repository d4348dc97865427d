import pytest

from config_service import create_app
from config_service.services import ConfigSource, MappingLookup

COMPLETE_ENV = {
    "VITE_SUPABASE_URL": "https://x.supabase.co",
    "VITE_SUPABASE_ANON_KEY": "abc",
}


@pytest.fixture
def make_client():
    """Build a test client whose configuration comes from a static mapping."""

    def _make(values, **overrides):
        overrides.setdefault("DEPLOYMENT_NAME", "Vercel")
        overrides.setdefault("SERVE_DEV_SCRIPT", False)
        app = create_app(
            sources=[ConfigSource("environment", MappingLookup(values))],
            **overrides,
        )
        app.testing = True
        return app.test_client()

    return _make


@pytest.fixture
def client(make_client):
    return make_client(COMPLETE_ENV)
