"""Shared fixtures: a recording command runner and an in-memory filesystem."""

from pathlib import Path

import pytest

from src.bootstrap.config import BootstrapConfig
from src.common.errors import BootstrapError


class FakeRunner:
    """Records commands instead of running them.

    ``git clone`` creates the destination directory so later steps see a
    checkout. ``failures`` maps an argv prefix to the exit code ``run``
    should fail with; ``probes`` maps a full argv to the output ``probe``
    returns (missing entries probe as failed).
    """

    def __init__(self, available=(), probes=None, failures=None):
        self.available = set(available)
        self.probes = {tuple(k): v for k, v in (probes or {}).items()}
        self.failures = {tuple(k): v for k, v in (failures or {}).items()}
        self.calls = []
        self.probe_calls = []

    def which(self, name):
        return f"/usr/bin/{name}" if name in self.available else None

    def run(self, argv, *, cwd=None):
        argv = [str(a) for a in argv]
        self.calls.append((argv, cwd))
        for prefix, code in self.failures.items():
            if tuple(argv[: len(prefix)]) == prefix:
                raise BootstrapError(f"Command failed with exit code {code}: {' '.join(argv)}", returncode=code)
        if argv[:2] == ["git", "clone"]:
            Path(argv[-1]).mkdir(parents=True)

    def probe(self, argv, *, cwd=None):
        argv = [str(a) for a in argv]
        self.probe_calls.append((argv, cwd))
        return self.probes.get(tuple(argv))

    def commands(self):
        return [argv for argv, _ in self.calls]


class MemoryFilesystem:
    """Filesystem double holding file contents in a dict."""

    def __init__(self, files=None, dirs=()):
        self.files = dict(files or {})
        self.dirs = set(dirs)

    def exists(self, path):
        return path in self.files or path in self.dirs

    def write_text(self, path, content):
        self.files[path] = content


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def make_runner():
    """Factory for runners with configured tools, probe outputs or failures."""
    return FakeRunner


@pytest.fixture
def memory_fs():
    return MemoryFilesystem()


@pytest.fixture
def workspace(tmp_path):
    path = tmp_path / "workspace"
    path.mkdir()
    return path


@pytest.fixture
def platform_checkout(tmp_path):
    """A platform checkout directory with two custom agents."""
    path = tmp_path / "platform"
    custom = path / "agents" / "custom"
    custom.mkdir(parents=True)
    (custom / "a.md").write_text("# Agent A\n")
    (custom / "b.md").write_text("# Agent B\n")
    return path


@pytest.fixture
def make_config(tmp_path, workspace):
    def _make(**overrides):
        values = {
            "platform_repo": "your-org/ai-dev-platform",
            "platform_version": "main",
            "platform_path": tmp_path / "platform",
            "workspace_path": workspace,
        }
        values.update(overrides)
        return BootstrapConfig(**values)

    return _make
