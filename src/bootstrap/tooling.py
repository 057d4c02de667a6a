"""Claude Code presence check and installation."""

from __future__ import annotations

from src.common.console import info, ok
from src.common.constants import CLAUDE_BINARY, CLAUDE_PACKAGE
from src.common.errors import BootstrapError
from src.common.shell import CommandRunner

# Package-manager frontends in priority order: (binary, global-install argv prefix)
_INSTALLERS = (
    ("npm", ["npm", "install", "-g"]),
    ("pnpm", ["pnpm", "add", "-g"]),
)


class ToolInstaller:
    """Installs a CLI tool globally through npm or pnpm when it is missing."""

    def __init__(
        self,
        runner: CommandRunner,
        binary: str = CLAUDE_BINARY,
        package: str = CLAUDE_PACKAGE,
        label: str = "Claude Code",
    ) -> None:
        self.runner = runner
        self.binary = binary
        self.package = package
        self.label = label

    def present(self) -> bool:
        """True if the binary is on PATH and ``--version`` succeeds."""
        if self.runner.which(self.binary) is None:
            return False
        version = self.runner.probe([self.binary, "--version"])
        if version is None:
            return False
        ok(f"{self.label} found: {version}")
        return True

    def install(self) -> str:
        """Install the package with the first available frontend and return its name."""
        info(f"Installing {self.label}...")
        for frontend, command in _INSTALLERS:
            if self.runner.which(frontend) is not None:
                self.runner.run([*command, self.package])
                ok(f"{self.label} installed")
                return frontend
        raise BootstrapError(f"npm or pnpm not found. Cannot install {self.label}.")

    def ensure(self) -> bool:
        """Install the tool unless it is present. Returns True if an install ran."""
        if self.present():
            return False
        self.install()
        return True
