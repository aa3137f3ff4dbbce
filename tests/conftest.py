import pytest
from pathlib import Path


@pytest.fixture
def test_assets_dir() -> Path:
    """Return the path to the test assets directory."""
    return Path(__file__).parent / 'assets'


@pytest.fixture
def test_cache_dir(tmp_path) -> Path:
    """Return a temporary directory for cache testing."""
    return tmp_path / 'cache'


@pytest.fixture
def load_html(test_assets_dir):
    """Return a loader for HTML pages in the assets directory."""
    def load(name: str) -> bytes:
        return (test_assets_dir / 'html' / name).read_bytes()
    return load
