"""ANSI colour codes and console helpers."""

from __future__ import annotations

import sys


class C:
    """ANSI colour codes (no-op if not a tty)."""

    _tty = sys.stdout.isatty()
    RED = "\033[0;31m" if _tty else ""
    GREEN = "\033[0;32m" if _tty else ""
    BLUE = "\033[0;34m" if _tty else ""
    YELLOW = "\033[1;33m" if _tty else ""
    BOLD = "\033[1m" if _tty else ""
    NC = "\033[0m" if _tty else ""


def info(msg: str) -> None:
    print(f"{C.BLUE}[INFO]{C.NC}  {msg}")


def ok(msg: str) -> None:
    print(f"{C.GREEN}[ OK ]{C.NC} {msg}")


def warn(msg: str) -> None:
    print(f"{C.YELLOW}[WARN]{C.NC} {msg}")


def error(msg: str) -> None:
    print(f"{C.RED}[FAIL]{C.NC} {msg}", file=sys.stderr)


def fail(msg: str, code: int = 1) -> None:
    error(msg)
    sys.exit(code)


# ── Summary formatting ───────────────────────────────────────────────────────

SEC = "=" * 32


def banner(title: str) -> str:
    return f"\n{SEC}\n  {title}\n{SEC}\n"
