import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from animations.driver import AnimationDriver
from lifecycle.task_registry import TaskRegistry
from models.enums import LogLevel
from utils.logger import configure_logger


@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep test output readable; restore defaults afterwards."""
    configure_logger(min_level=LogLevel.WARN, use_colors=False)
    yield
    configure_logger(min_level=LogLevel.WARN, use_colors=False)


@pytest.fixture(autouse=True)
def fresh_task_registry():
    """Each test sees an empty registry."""
    TaskRegistry._instance = None
    yield
    TaskRegistry._instance = None


@pytest.fixture
def make_driver():
    """
    Factory for fast-ticking drivers, disposed after the test.
    """
    created = []

    def factory(duration_ms=50, **kwargs):
        kwargs.setdefault("fps", 200)
        driver = AnimationDriver(duration_ms=duration_ms, **kwargs)
        created.append(driver)
        return driver

    yield factory

    for driver in created:
        driver.dispose()
