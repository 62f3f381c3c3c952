import pytest

from src.videoplayer.config import DEFAULT_CATALOG_FILE


def pytest_configure(config):
    config.addinivalue_line("markers", "interactive: tests that drive the command loop")


@pytest.fixture(autouse=True)
def default_catalog(monkeypatch):
    """Keep a developer's .env from pointing tests at another catalog."""
    monkeypatch.setattr("src.videoplayer.config.CATALOG_FILE", DEFAULT_CATALOG_FILE)
