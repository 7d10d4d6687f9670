import pytest
from pi.paint.config import reset_config
from pi.paint.width import clear_width_cache


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Isolate each test from PI_PAINT_* variables and cached settings."""
    monkeypatch.delenv("PI_PAINT_ASCII_BORDERS", raising=False)
    monkeypatch.delenv("PI_PAINT_UNICODE_VERSION", raising=False)
    reset_config()
    clear_width_cache()
    yield
    reset_config()
    clear_width_cache()
