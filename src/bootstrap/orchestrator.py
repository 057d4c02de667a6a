"""Runs the bootstrap steps in order and reports what each one did.

Steps run strictly in sequence. The first :class:`BootstrapError`
propagates to the caller and leaves the filesystem as the completed
steps left it; there is no rollback.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import structlog

from src.bootstrap.agents import configure_agents
from src.bootstrap.config import BootstrapConfig
from src.bootstrap.repository import SyncOutcome, sync_platform
from src.bootstrap.scaffold import SCAFFOLDS, LocalFilesystem, ScaffoldResult, materialize
from src.bootstrap.tooling import ToolInstaller
from src.common.console import C, banner, info, ok, warn
from src.common.errors import BootstrapError
from src.common.shell import CommandRunner


@dataclass
class BootstrapReport:
    """Outcome of one bootstrap run."""

    sync: SyncOutcome | None = None
    tool_installed: bool | None = None        # None when Claude setup was skipped
    linked_agents: list[Path] = field(default_factory=list)
    scaffolds: dict[str, ScaffoldResult] = field(default_factory=dict)
    git_initialized: bool = False


def ensure_git_repo(workspace: Path, runner: CommandRunner) -> bool:
    """``git init`` the workspace unless it is already inside a repository."""
    if runner.probe(["git", "rev-parse", "--git-dir"], cwd=workspace) is not None:
        return False
    info("Initializing git repository...")
    runner.run(["git", "init"], cwd=workspace)
    ok("Git repository initialized")
    return True


def print_summary(config: BootstrapConfig) -> None:
    print(banner("AI Development Platform Ready"))
    print(f"Platform: {config.platform_ref}")
    print(f"Location: {config.platform_path}")
    print(f"Workspace: {config.workspace_path}")
    print()
    print(f"{C.BOLD}Available Commands:{C.NC}")
    print("  claude /compound-engineering:plan <feature>   - Create detailed plan")
    print("  claude /compound-engineering:work <plan>      - Execute plan")
    print("  claude /compound-engineering:review <pr>      - Review PR")
    print()
    print(f"{C.BOLD}Configuration:{C.NC}")
    print("  .ai/ai.config.yaml    - Platform configuration")
    print("  .ai/repo-map.yaml     - Repository structure")
    print()
    print(f"{C.BOLD}Next Steps:{C.NC}")
    print("  1. Edit .ai/ai.config.yaml with your stack")
    print("  2. Update .ai/repo-map.yaml with your structure")
    print("  3. Create your first feature plan")
    print()


def run_bootstrap(
    config: BootstrapConfig,
    runner: CommandRunner | None = None,
    fs: LocalFilesystem | None = None,
    event_log: structlog.BoundLogger | None = None,
) -> BootstrapReport:
    """Provision ``config.workspace_path`` against the platform checkout."""
    runner = runner or CommandRunner()
    fs = fs or LocalFilesystem()
    log = structlog.get_logger("bootstrap")
    report = BootstrapReport()

    def step_done(step: str, **fields) -> None:
        log.debug("step_completed", step=step, **fields)
        if event_log is not None:
            event_log.info("step_completed", step=step, **fields)

    print()
    info("AI Dev Platform - Bootstrap")
    print()

    workspace = config.workspace_path
    if not workspace.is_dir():
        raise BootstrapError(f"Workspace directory does not exist: {workspace}")

    report.sync = sync_platform(config, runner)
    step_done("platform", outcome=report.sync.value, ref=config.platform_ref)

    if config.skip_claude_setup:
        warn("Skipping Claude Code setup")
    else:
        report.tool_installed = ToolInstaller(runner).ensure()
        step_done("claude", installed=report.tool_installed)
        report.linked_agents = configure_agents(config, runner)
        step_done("agents", linked=[p.name for p in report.linked_agents])

    for scaffold in SCAFFOLDS:
        result = materialize(scaffold, workspace, fs)
        report.scaffolds[scaffold.label] = result
        step_done("scaffold", scaffold=scaffold.label, result=result.value)

    report.git_initialized = ensure_git_repo(workspace, runner)
    step_done("git", initialized=report.git_initialized)

    print_summary(config)
    ok("Bootstrap complete!")
    return report
