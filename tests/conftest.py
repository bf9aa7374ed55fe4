import pytest
from fastapi.testclient import TestClient

from ai_canvas.api.main import create_app
from ai_canvas.core.config import Settings


@pytest.fixture
def settings():
    """Settings built from explicit values so a local .env never leaks in."""
    return Settings(
        _env_file=None,
        HUGGINGFACE_API_KEY="hf-test-key",
        STRIPE_SECRET_KEY="sk_test_123",
        STRIPE_PUBLISHABLE_KEY="pk_test_123",
    )


@pytest.fixture
def make_client(settings):
    def _make(**overrides):
        services = {k: overrides.pop(k) for k in ("image_service", "checkout_service") if k in overrides}
        app = create_app(settings.model_copy(update=overrides), **services)
        return TestClient(app, raise_server_exceptions=False)
    return _make
