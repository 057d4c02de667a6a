"""Create-once scaffolding: default documents that never overwrite user edits."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from importlib import resources
from pathlib import Path

from src.common.console import info, ok
from src.common.constants import AI_DIR, SCAFFOLDS_PACKAGE, WORKFLOWS_DIR
from src.common.errors import BootstrapError


class ScaffoldResult(str, enum.Enum):
    CREATED = "created"
    EXISTS = "exists"


@dataclass(frozen=True)
class Scaffold:
    """A default document and where it lives in the workspace.

    ``guard`` is the workspace-relative path whose existence means the
    scaffold has already been applied. It is the document itself unless
    a whole directory is owned by the user once it exists.
    """

    label: str
    path: Path
    template: str
    guard: Path | None = None

    @property
    def guard_path(self) -> Path:
        return self.guard if self.guard is not None else self.path

    def default_content(self) -> str:
        return resources.files(SCAFFOLDS_PACKAGE).joinpath(self.template).read_text(encoding="utf-8")


AI_CONFIG = Scaffold("AI config", AI_DIR / "ai.config.yaml", "ai.config.yaml")
REPO_MAP = Scaffold("Repo map", AI_DIR / "repo-map.yaml", "repo-map.yaml")
CI_WORKFLOW = Scaffold(
    "GitHub workflow",
    WORKFLOWS_DIR / "ai-check.yml",
    "ai-check.yml",
    guard=WORKFLOWS_DIR,
)

SCAFFOLDS = (AI_CONFIG, REPO_MAP, CI_WORKFLOW)


class LocalFilesystem:
    """The real filesystem."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def write_text(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)


def plan_write(desired: str, guard_exists: bool) -> str | None:
    """Return the content to write, or ``None`` if the target must be left alone."""
    return None if guard_exists else desired


def materialize(
    scaffold: Scaffold,
    workspace: Path,
    fs: LocalFilesystem | None = None,
) -> ScaffoldResult:
    fs = fs or LocalFilesystem()
    target = workspace / scaffold.path
    guard = workspace / scaffold.guard_path

    content = plan_write(scaffold.default_content(), fs.exists(guard))
    if content is None:
        info(f"{scaffold.label} already exists at {guard}")
        return ScaffoldResult.EXISTS

    info(f"Creating {scaffold.label}...")
    try:
        fs.write_text(target, content)
    except OSError as exc:
        raise BootstrapError(f"Cannot write {scaffold.label} to {target}: {exc}") from exc
    ok(f"Created {scaffold.label} at {target}")
    return ScaffoldResult.CREATED
