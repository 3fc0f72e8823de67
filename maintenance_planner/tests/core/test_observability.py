from structlog.testing import capture_logs

from maintenance_planner.core.config import Settings
from maintenance_planner.core.observability import (
    get_logger,
    log_performance_metrics,
    setup_structured_logging,
)


class TestObservability:
    """Test structured logging helpers."""

    def test_performance_metric_logged(self):
        with capture_logs() as logs:
            log_performance_metrics("compose_schedule_view", 0.25, {"view_mode": "gantt"})

        [event] = logs
        assert event["event"] == "Performance metric recorded"
        assert event["operation"] == "compose_schedule_view"
        assert event["duration_seconds"] == 0.25
        assert event["view_mode"] == "gantt"
        assert event["log_level"] == "debug"

    def test_setup_json_logging(self, capsys):
        setup_structured_logging(
            Settings(_env_file=None, LOG_FORMAT="json", LOG_LEVEL="INFO")
        )

        get_logger("test").info("planner ready", rows=3)

        out = capsys.readouterr().out
        assert '"event": "planner ready"' in out
        assert '"rows": 3' in out

    def test_level_filtering(self, capsys):
        setup_structured_logging(
            Settings(_env_file=None, LOG_FORMAT="json", LOG_LEVEL="WARNING")
        )

        get_logger("test").info("hidden")

        assert "hidden" not in capsys.readouterr().out
