#!/usr/bin/env python3
"""
AI Dev Platform — Workspace Bootstrap
=====================================
Thin entry-point. All logic lives in src.bootstrap.cli.

Usage:
    python3 bootstrap_workspace.py                         # defaults
    AI_PLATFORM_REPO=custom/repo python3 bootstrap_workspace.py
    SKIP_CLAUDE_SETUP=true python3 bootstrap_workspace.py  # no Claude Code
"""

from src.bootstrap.cli import main

if __name__ == "__main__":
    main()
