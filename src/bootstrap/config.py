"""Bootstrap configuration, built once from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path

from src.common.constants import (
    DEFAULT_PLATFORM_DIRNAME,
    DEFAULT_PLATFORM_REPO,
    DEFAULT_PLATFORM_VERSION,
    DEFAULT_WORKSPACE_PATH,
    TOKEN_ENV_VARS,
    TOKEN_FILE_NAME,
)

_TRUTHY = {"1", "true", "yes", "on"}


def is_truthy(value: str | None) -> bool:
    return (value or "").strip().lower() in _TRUTHY


def resolve_token(
    environ: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> str:
    """Return the GitHub token for cloning, or ``""`` for anonymous access.

    Sources in priority order: ``GITHUB_TOKEN``, ``CODER_GITHUB_TOKEN``,
    then ``~/.github-token``. The first non-empty one wins.
    """
    env = os.environ if environ is None else environ
    for name in TOKEN_ENV_VARS:
        value = env.get(name, "").strip()
        if value:
            return value

    token_file = (home or Path.home()) / TOKEN_FILE_NAME
    if token_file.is_file():
        return token_file.read_text().strip()
    return ""


def _path(value: str | Path) -> Path:
    return Path(value).expanduser().absolute()


@dataclass(frozen=True)
class BootstrapConfig:
    """Everything a bootstrap run needs, resolved up front."""

    platform_repo: str
    platform_version: str
    platform_path: Path
    workspace_path: Path
    skip_claude_setup: bool = False
    github_token: str = field(default="", repr=False)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        home: Path | None = None,
        **overrides,
    ) -> BootstrapConfig:
        """Build the config from ``AI_PLATFORM_*``, ``WORKSPACE_PATH`` and ``SKIP_CLAUDE_SETUP``.

        Keyword *overrides* (e.g. from command-line options) replace the
        matching fields after the environment has been read; ``None``
        values are ignored.
        """
        env = os.environ if environ is None else environ
        home = home or Path.home()

        config = cls(
            platform_repo=env.get("AI_PLATFORM_REPO") or DEFAULT_PLATFORM_REPO,
            platform_version=env.get("AI_PLATFORM_VERSION") or DEFAULT_PLATFORM_VERSION,
            platform_path=_path(env.get("AI_PLATFORM_PATH") or home / DEFAULT_PLATFORM_DIRNAME),
            workspace_path=_path(env.get("WORKSPACE_PATH") or DEFAULT_WORKSPACE_PATH),
            skip_claude_setup=is_truthy(env.get("SKIP_CLAUDE_SETUP")),
            github_token=resolve_token(env, home),
        )

        changes = {k: v for k, v in overrides.items() if v is not None}
        for key in ("platform_path", "workspace_path"):
            if key in changes:
                changes[key] = _path(changes[key])
        return replace(config, **changes) if changes else config

    @property
    def platform_ref(self) -> str:
        return f"{self.platform_repo}@{self.platform_version}"
