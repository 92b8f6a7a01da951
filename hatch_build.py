"""Hatchling build hook that records the git commit in glyphedit/_build_info.py."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any, Optional

from hatchling.builders.hooks.plugin.interface import BuildHookInterface

BUILD_INFO_PATH = "glyphedit/_build_info.py"


def _git(root: Path, *args: str) -> Optional[str]:
    try:
        out = subprocess.check_output(["git", *args], cwd=str(root), stderr=subprocess.DEVNULL)
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        # Building from an sdist or without git installed
        return None
    return out.decode().strip() or None


class CustomBuildHook(BuildHookInterface):
    def initialize(self, version: str, build_data: dict[str, Any]) -> None:
        root = Path(self.root)
        lines = [
            "# Auto-generated at build time.",
            f"COMMIT = {_git(root, 'rev-parse', 'HEAD')!r}",
            f"DATE = {_git(root, 'show', '-s', '--format=%cI', 'HEAD')!r}",
        ]
        (root / BUILD_INFO_PATH).write_text("\n".join(lines) + "\n", encoding="utf-8")
        build_data.setdefault("artifacts", []).append(BUILD_INFO_PATH)
