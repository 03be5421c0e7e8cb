"""Pytest fixtures for roundrect tests."""

import tempfile

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def default_config():
    """Create default configuration."""
    from roundrect.config import RoundRectConfig
    return RoundRectConfig()


@pytest.fixture
def unit_rect():
    """Unit square centred at the origin."""
    from roundrect.models import RectSpec
    return RectSpec(x=0.0, y=0.0, width=1.0, height=1.0)


@pytest.fixture
def wide_rect():
    """2 x 1 rectangle anchored at its bottom-left corner at (1, 1)."""
    from roundrect.models import RectSpec
    return RectSpec(x=1.0, y=1.0, width=2.0, height=1.0, just=["left", "bottom"])


@pytest.fixture
def canvas():
    """Square 200px canvas in normalized units."""
    from roundrect.paint.canvas import Canvas
    return Canvas(width_px=200, height_px=200, units="npc")


@pytest.fixture(autouse=True)
def fresh_current_canvas():
    """Reset the module-level canvas between tests."""
    from roundrect.paint.canvas import set_current_canvas
    set_current_canvas(None)
    yield
    set_current_canvas(None)
