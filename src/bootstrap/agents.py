"""Agent linking: expose the platform's agent definitions inside the workspace."""

from __future__ import annotations

from pathlib import Path

from src.bootstrap.config import BootstrapConfig
from src.common.console import info, ok
from src.common.constants import (
    AGENT_LINK_DIR,
    AGENT_PATTERN,
    CLAUDE_BINARY,
    CUSTOM_AGENTS_DIR,
    EVERY_AGENTS_DIR,
    EVERY_LINK_NAME,
    PLUGIN_MARKETPLACE_URL,
    PLUGIN_NAME,
)
from src.common.errors import BootstrapError
from src.common.shell import CommandRunner


def _force_symlink(target: Path, link: Path) -> None:
    """Point *link* at *target*, replacing whatever link or file is there."""
    if link.is_dir() and not link.is_symlink():
        raise BootstrapError(f"Refusing to replace directory with agent link: {link}")
    try:
        if link.is_symlink() or link.exists():
            link.unlink()
        link.symlink_to(target)
    except OSError as exc:
        raise BootstrapError(f"Cannot link {link} -> {target}: {exc}") from exc


def link_agents(config: BootstrapConfig) -> list[Path]:
    """Symlink the platform's custom agents (and the Every bundle) into the workspace.

    Returns the links created, in creation order.
    """
    link_dir = config.workspace_path / AGENT_LINK_DIR
    try:
        link_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise BootstrapError(f"Cannot create agent directory {link_dir}: {exc}") from exc
    linked: list[Path] = []

    custom_dir = config.platform_path / CUSTOM_AGENTS_DIR
    if custom_dir.is_dir():
        info("Linking custom agents...")
        for agent in sorted(custom_dir.glob(AGENT_PATTERN)):
            # *.md in a shell skips dotfiles
            if agent.name.startswith(".") or not agent.is_file():
                continue
            link = link_dir / agent.name
            _force_symlink(agent.absolute(), link)
            linked.append(link)
            ok(f"Linked: {agent.name}")

    every_dir = config.platform_path / EVERY_AGENTS_DIR
    if every_dir.is_dir():
        info("Linking Every agents...")
        link = link_dir / EVERY_LINK_NAME
        _force_symlink(every_dir.absolute(), link)
        linked.append(link)

    return linked


def install_plugin(runner: CommandRunner) -> bool:
    """Register the Every marketplace and install its plugin. Never raises.

    Returns True only if both commands succeeded.
    """
    added = runner.probe([CLAUDE_BINARY, "/plugin", "marketplace", "add", PLUGIN_MARKETPLACE_URL])
    installed = runner.probe([CLAUDE_BINARY, "/plugin", "install", PLUGIN_NAME])
    return added is not None and installed is not None


def configure_agents(config: BootstrapConfig, runner: CommandRunner) -> list[Path]:
    info("Configuring Claude Code with AI platform agents...")
    linked = link_agents(config)

    info("Attempting to install Every's Compound Engineering plugin...")
    # The plugin is optional: its outcome is deliberately ignored.
    install_plugin(runner)

    ok("Claude Code configured")
    return linked
