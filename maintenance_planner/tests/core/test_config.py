import pytest
from pydantic import ValidationError

from maintenance_planner.core.config import Settings


class TestSettings:
    """Test planner settings."""

    def test_defaults(self, monkeypatch):
        for name in ("PLANNER_VIRTUALIZATION_THRESHOLD", "PLANNER_GANTT_ROW_HEIGHT"):
            monkeypatch.delenv(name, raising=False)

        config = Settings(_env_file=None)

        assert config.VIRTUALIZATION_THRESHOLD == 50
        assert config.GANTT_ROW_HEIGHT == 80
        assert config.PROJECTION_CACHE_SIZE >= 1

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("PLANNER_GANTT_ROW_HEIGHT", "40")
        monkeypatch.setenv("PLANNER_LOG_FORMAT", "json")

        config = Settings(_env_file=None)

        assert config.GANTT_ROW_HEIGHT == 40
        assert config.LOG_FORMAT == "json"

    def test_is_local(self):
        assert Settings(_env_file=None, ENVIRONMENT="local").is_local
        assert not Settings(_env_file=None, ENVIRONMENT="production").is_local

    @pytest.mark.parametrize(
        "override",
        [
            {"WORKDAY_HOURS": 0},
            {"MIN_BAR_WIDTH_PERCENT": 120},
            {"GANTT_ROW_HEIGHT": 0},
            {"GANTT_OVERSCAN": -1},
            {"VIRTUALIZATION_THRESHOLD": -1},
            {"PROJECTION_CACHE_SIZE": 0},
        ],
    )
    def test_invalid_layout_bounds(self, override):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **override)
