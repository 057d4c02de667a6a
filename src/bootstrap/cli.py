"""CLI entrypoint for the workspace bootstrap.

Configuration comes from the environment (see ``--help``); options given
on the command line take precedence.
"""

from __future__ import annotations

import argparse
import os
import textwrap
from pathlib import Path

from src.bootstrap.config import BootstrapConfig
from src.bootstrap.orchestrator import run_bootstrap
from src.common.console import fail, info
from src.common.errors import BootstrapError
from src.common.logging import configure_structlog, get_json_file_logger


def _load_dotenv(env_path: Path) -> None:
    """Load variables from a .env file into os.environ (no overwrite)."""
    if not env_path.is_file():
        return
    info(f"Loading environment from {env_path}")
    with open(env_path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, _, value = line.partition("=")
            key = key.strip()
            value = value.strip().strip("\"'")
            os.environ.setdefault(key, value)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ai-bootstrap",
        description="Bootstrap a workspace with the AI development platform.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""\
            environment:
              AI_PLATFORM_REPO      platform repo (default: your-org/ai-dev-platform)
              AI_PLATFORM_VERSION   branch or tag to use (default: main)
              AI_PLATFORM_PATH      local checkout (default: ~/.ai-platform)
              WORKSPACE_PATH        workspace root (default: /workspace)
              SKIP_CLAUDE_SETUP     set to "true" to skip Claude Code setup
              GITHUB_TOKEN, CODER_GITHUB_TOKEN, ~/.github-token
                                    credentials for cloning (first one set wins)
        """),
    )
    parser.add_argument("--workspace", type=Path, default=None, help="Workspace root (overrides WORKSPACE_PATH)")
    parser.add_argument(
        "--platform-path", type=Path, default=None,
        help="Local platform checkout (overrides AI_PLATFORM_PATH)",
    )
    parser.add_argument(
        "--skip-claude-setup", action="store_true", default=None,
        help="Skip Claude Code install and agent linking",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Append JSON-lines step events to FILE")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every command that is run")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)

    configure_structlog(verbose=args.verbose)
    _load_dotenv(Path.cwd() / ".env")

    config = BootstrapConfig.from_env(
        workspace_path=args.workspace,
        platform_path=args.platform_path,
        skip_claude_setup=args.skip_claude_setup,
    )
    event_log = None
    if args.log_file:
        event_log = get_json_file_logger(
            args.log_file,
            workspace=str(config.workspace_path),
            platform=config.platform_ref,
        )

    try:
        run_bootstrap(config, event_log=event_log)
    except BootstrapError as exc:
        fail(str(exc), code=exc.returncode)
