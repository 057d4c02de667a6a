"""Subprocess helpers: fatal runs, best-effort probes, secret redaction."""

from __future__ import annotations

import re
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

import structlog

from src.common.errors import BootstrapError

_CREDENTIAL_RE = re.compile(r"(\w+://)[^/@\s]+@")


def redact(text: str) -> str:
    """Mask credentials embedded in URLs (``https://TOKEN@host`` -> ``https://***@host``)."""
    return _CREDENTIAL_RE.sub(r"\1***@", text)


def format_command(argv: Sequence[str]) -> str:
    return redact(" ".join(str(a) for a in argv))


class CommandRunner:
    """Runs external commands on behalf of the bootstrap steps.

    ``run`` is for required commands: output goes straight to the terminal
    and any failure raises :class:`BootstrapError`. ``probe`` is for
    checks and optional commands: output is captured and a failure is
    reported as ``None`` instead of raising.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger("shell")

    def which(self, name: str) -> str | None:
        return shutil.which(name)

    def run(self, argv: Sequence[str], *, cwd: Path | None = None) -> None:
        self._log.debug("command", argv=format_command(argv), cwd=str(cwd) if cwd else None)
        try:
            subprocess.run([str(a) for a in argv], cwd=cwd, check=True)
        except FileNotFoundError as exc:
            raise BootstrapError(f"Command not found: {argv[0]}", returncode=127) from exc
        except subprocess.CalledProcessError as exc:
            raise BootstrapError(
                f"Command failed with exit code {exc.returncode}: {format_command(argv)}",
                returncode=exc.returncode,
            ) from exc

    def probe(self, argv: Sequence[str], *, cwd: Path | None = None) -> str | None:
        """Return the stripped stdout of *argv*, or ``None`` if it could not run or exited non-zero."""
        self._log.debug("probe", argv=format_command(argv), cwd=str(cwd) if cwd else None)
        try:
            result = subprocess.run(
                [str(a) for a in argv],
                cwd=cwd,
                capture_output=True,
                text=True,
            )
        except OSError:
            return None
        if result.returncode != 0:
            return None
        return result.stdout.strip()
