# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Spawn the resolved build tool with inherited standard streams."""

from __future__ import annotations

import subprocess
from pathlib import Path

from .models import Command


def run_command(command: Command, *, cwd: Path | None = None) -> int:
    """Run ``command`` to completion and return its exit status.

    Standard input, output and error are inherited from the launcher. An
    interrupt is left to the child, which receives it through the shared
    process group; the launcher then waits for the child to finish.

    Args:
        command: Executable and argument vector to run.
        cwd: Working directory for the child; defaults to the launcher's.

    Returns:
        int: Exit status reported by the child process.

    Raises:
        FileNotFoundError: If the executable disappeared after resolution.
    """

    process = subprocess.Popen(command.as_list(), cwd=str(cwd) if cwd is not None else None)
    while True:
        try:
            return process.wait()
        except KeyboardInterrupt:
            continue


__all__ = ["run_command"]
