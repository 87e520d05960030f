"""
Test configuration and fixtures for the Swatchbook catalog and search tests.
"""
import pytest
from fastapi.testclient import TestClient

# Import the main app
from main import app
from swatchbook.services.catalog import reset_catalog
from swatchbook.utils.metrics import reset_metrics as reset_global_metrics


@pytest.fixture
def test_client():
    """Create test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def reset_metrics():
    """Reset metrics before each test."""
    reset_global_metrics()


@pytest.fixture
def fresh_catalog():
    """Rebuild the global catalog around a test that mutates it."""
    reset_catalog()
    yield
    reset_catalog()
