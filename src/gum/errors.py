# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exceptions raised while resolving a build tool invocation."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class NotFoundError(LookupError):
    """Raised when a search exhausts its directories without a match."""

    def __init__(self, names: Sequence[str], start: Path | None = None) -> None:
        """Record what was searched for and where the search began.

        Args:
            names: Candidate file names that were probed.
            start: Directory where an upward walk started, if any.
        """

        self.names = tuple(names)
        self.start = start
        joined = ", ".join(self.names)
        location = f" from {start}" if start is not None else ""
        super().__init__(f"did not find {joined}{location}")


class NoExecutableError(NotFoundError):
    """Raised when neither a wrapper nor a system executable is available."""


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


__all__ = ["ConfigError", "NoExecutableError", "NotFoundError"]
