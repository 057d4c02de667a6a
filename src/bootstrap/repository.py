"""Platform repository sync: clone on first run, fast-forward afterwards."""

from __future__ import annotations

import enum
from pathlib import Path

from src.bootstrap.config import BootstrapConfig
from src.common.console import info, ok
from src.common.constants import GITHUB_HOST
from src.common.shell import CommandRunner


class SyncOutcome(str, enum.Enum):
    CLONED = "cloned"
    UPDATED = "updated"


def clone_url(repo: str, token: str = "") -> str:
    """Return the URL to clone *repo* from.

    ``owner/name`` identifiers map to GitHub, with *token* embedded for
    authenticated access when given. Full URLs and absolute local paths
    are used as-is.
    """
    if "://" in repo or Path(repo).is_absolute():
        return repo
    if token:
        return f"https://{token}@{GITHUB_HOST}/{repo}"
    return f"https://{GITHUB_HOST}/{repo}"


def sync_platform(config: BootstrapConfig, runner: CommandRunner) -> SyncOutcome:
    """Make ``config.platform_path`` a checkout of the platform repo at its pinned version.

    An existing directory is always treated as a checkout: it is fetched,
    checked out and pulled, never recloned. A directory left behind by an
    interrupted clone therefore fails at ``git fetch``.
    """
    info("Setting up AI platform repository...")
    path = config.platform_path
    version = config.platform_version

    if path.is_dir():
        info("Platform directory exists, updating...")
        runner.run(["git", "fetch", "origin"], cwd=path)
        runner.run(["git", "checkout", version], cwd=path)
        runner.run(["git", "pull", "origin", version], cwd=path)
        ok(f"Platform updated to {version}")
        return SyncOutcome.UPDATED

    info("Cloning platform repository...")
    runner.run(["git", "clone", clone_url(config.platform_repo, config.github_token), str(path)])
    runner.run(["git", "checkout", version], cwd=path)
    ok(f"Platform cloned to {path}")
    return SyncOutcome.CLONED
