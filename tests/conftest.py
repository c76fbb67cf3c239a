"""
Pytest configuration for markup_layout
"""

import logging
import sys

import pytest

from markup_layout.config import LayoutConfig
from markup_layout.engine.font_resolver import FontResolver
from markup_layout.engine.geometry import Bounds
from markup_layout.engine.layout_context import LayoutContext
from markup_layout.engine.layout_engine import LayoutEngine
from markup_layout.styles.text_style import TextStyle
from markup_layout.surfaces.recording import RecordingSurface


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid handler leaks between tests."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def config():
    """Default layout configuration."""
    return LayoutConfig()


@pytest.fixture
def surface():
    """200 x 300 pt recording surface with its origin at (0, 0)."""
    return RecordingSurface(Bounds(0.0, 0.0, 200.0, 300.0))


@pytest.fixture
def engine(config):
    return LayoutEngine(config)


@pytest.fixture
def make_context():
    """Factory building a fresh LayoutContext on a surface, as a layout pass would."""

    def _make(surface, config=None, origin=None):
        config = config or LayoutConfig()
        resolver = FontResolver()
        font = resolver.resolve(config.font, config.font_size)
        style = TextStyle(font=font, color=config.color)
        return LayoutContext(surface, config, resolver, style, origin=origin)

    return _make


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests that stay in memory"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests that write real PDF output"
    )
    logging.raiseExceptions = False


def pytest_collection_modifyitems(config, items):
    """Mark every test as a unit test unless it writes real PDF output."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
