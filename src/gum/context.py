# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Launch context backed by the real process environment."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(slots=True)
class SystemContext:
    """Answer :class:`~gum.interfaces.LaunchContext` queries from the host.

    Attributes:
        explicit: Whether resolution failures are fatal.
        quiet: Whether user-facing output is suppressed.
        cwd: Optional working directory override; defaults to ``Path.cwd()``.
        env: Environment mapping consulted for ``PATH``.
        platform: Platform identifier consulted for Windows detection.
    """

    explicit: bool = False
    quiet: bool = False
    cwd: Path | None = None
    env: Mapping[str, str] = field(default_factory=lambda: os.environ)
    platform: str = sys.platform

    def file_exists(self, path: Path) -> bool:
        try:
            return path.exists()
        except OSError:
            return False

    def working_dir(self) -> Path:
        base = self.cwd if self.cwd is not None else Path.cwd()
        return Path(os.path.abspath(base))

    def search_paths(self) -> Sequence[Path]:
        raw = self.env.get("PATH", "")
        return [Path(entry) for entry in raw.split(os.pathsep) if entry]

    def is_windows(self) -> bool:
        return self.platform.startswith("win")

    def is_explicit(self) -> bool:
        return self.explicit

    def is_quiet(self) -> bool:
        return self.quiet

    def exit(self, code: int) -> None:
        sys.exit(code)


__all__ = ["SystemContext"]
