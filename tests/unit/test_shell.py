"""Unit tests for the subprocess runner."""

import sys

import pytest

from src.common.errors import BootstrapError
from src.common.shell import CommandRunner, format_command, redact


class TestRedact:
    def test_masks_url_credentials(self):
        assert redact("git clone https://ghp_abc123@github.com/o/r /tmp/x") == (
            "git clone https://***@github.com/o/r /tmp/x"
        )

    def test_leaves_plain_urls_alone(self):
        assert redact("https://github.com/o/r") == "https://github.com/o/r"

    def test_format_command_redacts(self):
        assert format_command(["git", "clone", "https://t@github.com/o/r"]) == (
            "git clone https://***@github.com/o/r"
        )


class TestCommandRunner:
    """Test cases for run/probe against real processes."""

    def test_run_success(self, tmp_path):
        CommandRunner().run([sys.executable, "-c", "pass"], cwd=tmp_path)

    def test_run_propagates_exit_code(self):
        """A failing command raises BootstrapError carrying its exit status."""
        with pytest.raises(BootstrapError) as excinfo:
            CommandRunner().run([sys.executable, "-c", "raise SystemExit(3)"])

        assert excinfo.value.returncode == 3

    def test_run_missing_command(self):
        with pytest.raises(BootstrapError) as excinfo:
            CommandRunner().run(["definitely-not-a-real-command-xyz"])

        assert excinfo.value.returncode == 127
        assert "definitely-not-a-real-command-xyz" in str(excinfo.value)

    def test_run_error_message_is_redacted(self):
        with pytest.raises(BootstrapError) as excinfo:
            CommandRunner().run([sys.executable, "-c", "raise SystemExit(1)", "https://tok@github.com/o/r"])

        assert "tok@" not in str(excinfo.value)

    def test_probe_returns_stdout(self):
        assert CommandRunner().probe([sys.executable, "-c", "print(' 1.2.3 ')"]) == "1.2.3"

    def test_probe_failure_returns_none(self):
        assert CommandRunner().probe([sys.executable, "-c", "raise SystemExit(2)"]) is None

    def test_probe_missing_command_returns_none(self):
        assert CommandRunner().probe(["definitely-not-a-real-command-xyz"]) is None
