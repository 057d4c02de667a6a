"""Shared constants for the workspace bootstrap."""

from pathlib import Path

# Package holding the default workspace documents
SCAFFOLDS_PACKAGE = "src.bootstrap.scaffolds"

# ── Platform repository ─────────────────────────────────────────────────────
GITHUB_HOST = "github.com"
DEFAULT_PLATFORM_REPO = "your-org/ai-dev-platform"
DEFAULT_PLATFORM_VERSION = "main"
DEFAULT_PLATFORM_DIRNAME = ".ai-platform"    # under $HOME
DEFAULT_WORKSPACE_PATH = "/workspace"

# Credentials, in priority order
TOKEN_ENV_VARS = ("GITHUB_TOKEN", "CODER_GITHUB_TOKEN")
TOKEN_FILE_NAME = ".github-token"            # under $HOME

# ── Claude Code ──────────────────────────────────────────────────────────────
CLAUDE_BINARY = "claude"
CLAUDE_PACKAGE = "@anthropic-ai/claude-code"
PLUGIN_MARKETPLACE_URL = "https://github.com/EveryInc/every-marketplace"
PLUGIN_NAME = "compound-engineering"

# ── Workspace layout ─────────────────────────────────────────────────────────
AI_DIR = Path(".ai")
AGENT_LINK_DIR = AI_DIR / "agents"
CUSTOM_AGENTS_DIR = Path("agents") / "custom"
EVERY_AGENTS_DIR = Path("agents") / "every"
EVERY_LINK_NAME = "every"
AGENT_PATTERN = "*.md"
WORKFLOWS_DIR = Path(".github") / "workflows"
