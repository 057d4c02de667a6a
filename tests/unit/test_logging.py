"""Unit tests for the JSON-lines step log."""

import json

from src.common.logging import get_json_file_logger


class TestJsonFileLogger:
    def test_lines_carry_run_context(self, tmp_path):
        """Bound context appears on every line next to the event fields."""
        log_path = tmp_path / "nested" / "steps.jsonl"
        log = get_json_file_logger(log_path, workspace="/workspace", platform="acme/platform@main")

        log.info("step_completed", step="platform", outcome="cloned")
        log.info("step_completed", step="git", initialized=True)

        events = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines()]
        assert [e["step"] for e in events] == ["platform", "git"]
        assert all(e["workspace"] == "/workspace" for e in events)
        assert all(e["platform"] == "acme/platform@main" for e in events)
        assert all(e["level"] == "info" for e in events)
        assert events[0]["outcome"] == "cloned"

    def test_debug_events_are_not_written(self, tmp_path):
        log_path = tmp_path / "steps.jsonl"
        log = get_json_file_logger(log_path)

        log.debug("noise")
        log.info("step_completed", step="git")

        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["event"] == "step_completed"

    def test_appends_across_loggers(self, tmp_path):
        """Reopening the same file appends instead of truncating."""
        log_path = tmp_path / "steps.jsonl"
        get_json_file_logger(log_path).info("step_completed", step="platform")
        get_json_file_logger(log_path).info("step_completed", step="git")

        steps = [json.loads(line)["step"] for line in log_path.read_text(encoding="utf-8").splitlines()]
        assert steps == ["platform", "git"]
