# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Assemble tool-selection flags, banners and the final command."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

from .logging import LaunchLogger
from .models import Command, InvocationPlan
from .rewrite import rewrite_args


class SelectionBuilder:
    """Collect tool-selection flags and banner clauses side by side.

    Every branch that adds a flag adds its clause in the same call so the
    banner always describes the argument vector that is actually run.
    """

    def __init__(self, tool: str, executable: Path) -> None:
        self._flags: list[str] = []
        self._banner: list[str] = [f"Using {tool} at '{executable}'"]

    def select(self, flag: str | None, path: Path, clause: str) -> None:
        """Record ``clause`` and, when ``flag`` is set, pass ``path`` with it.

        Args:
            flag: Tool flag such as ``-b``; ``None`` when the user already
                supplied the value on the command line.
            path: File or directory the clause refers to.
            clause: Banner template with a ``{path}`` placeholder.
        """

        if flag is not None:
            self._flags.extend((flag, str(path)))
        self._banner.append(clause.format(path=path))

    def flag_only(self, flag: str, path: Path) -> None:
        self._flags.extend((flag, str(path)))

    @property
    def flags(self) -> tuple[str, ...]:
        return tuple(self._flags)

    @property
    def banner(self) -> tuple[str, ...]:
        return tuple(self._banner)


def build_command(
    plan: InvocationPlan,
    *,
    value_flags: Sequence[str] = (),
    logger: LaunchLogger | None = None,
) -> Command:
    """Rewrite the plan arguments and produce the command to spawn.

    Args:
        plan: Resolved invocation plan.
        value_flags: Flags whose following token must not be rewritten.
        logger: Receives the debug dump when the plan requests one.

    Returns:
        Command: Executable, final argument vector and banner.
    """

    section = plan.config.section(plan.family)
    rewritten = plan.with_args(
        tuple(rewrite_args(plan.args, section.mappings, enabled=section.replace, value_flags=value_flags)),
    )
    command = Command(
        executable=rewritten.executable,
        argv=(*rewritten.selection_args, *rewritten.args),
        banner=plan.banner,
    )
    if logger is not None and plan.config.general.debug:
        dump = replace(logger, debug_enabled=True)
        for line in debug_lines(plan, rewritten.args, command):
            dump.debug(line)
    return command


def debug_lines(plan: InvocationPlan, rewritten: Sequence[str], command: Command) -> list[str]:
    """Return the ``key=value`` lines of the ``-gd`` resolution dump."""

    lines = [
        f"nearest={plan.meta.nearest}",
        f"rootBuildFile={plan.root_build_file}",
        f"buildFile={plan.nearest_build_file or ''}",
    ]
    if plan.family == "gradle":
        settings = plan.settings_file.path if plan.settings_file.is_discovered else ""
        lines.append(f"settingsFile={settings}")
    lines.append(f"explicitBuildFile={plan.explicit_build_file or ''}")
    if plan.family == "gradle":
        lines.append(f"explicitSettingsFile={plan.explicit_settings_file or ''}")
        lines.append(f"explicitProjectDir={plan.explicit_project_dir or ''}")
    lines.append(f"originalArgs={list(plan.args)}")
    if plan.config.section(plan.family).replace:
        lines.append(f"replacedArgs={list(rewritten)}")
    lines.append(f"actualArgs={list(command.argv)}")
    return lines


__all__ = ["SelectionBuilder", "build_command", "debug_lines"]
