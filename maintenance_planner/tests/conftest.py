from collections.abc import Generator

import pytest
import structlog

from maintenance_planner.core.config import Settings


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Leave structlog unconfigured between tests."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def planner_settings() -> Settings:
    """Settings with the documented defaults, independent of the environment."""
    return Settings(
        _env_file=None,
        VIRTUALIZATION_THRESHOLD=50,
        WORKDAY_HOURS=8.0,
        MIN_BAR_WIDTH_PERCENT=2.0,
        GANTT_ROW_HEIGHT=80,
        GANTT_VIEWPORT_HEIGHT=600,
        GANTT_OVERSCAN=5,
        DEFAULT_OVERSCAN=3,
    )
