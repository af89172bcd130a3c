# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data structures for the launcher command line."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from ..constants import (
    DEBUG_FLAG,
    FORCE_GRADLE_FLAG,
    FORCE_MAVEN_FLAG,
    HELP_FLAG,
    NEAREST_FLAG,
    QUIET_FLAG,
    REPLACE_FLAG,
    SHOW_CONFIG_FLAG,
    VERSION_FLAG,
)
from ..flags import grab_flag

USAGE: Final[str] = f"""\
Usage: gm [{HELP_FLAG}] [{VERSION_FLAG}] [{QUIET_FLAG}] [{SHOW_CONFIG_FLAG}] [{FORCE_GRADLE_FLAG} | {FORCE_MAVEN_FLAG}] \
[{NEAREST_FLAG}] [{DEBUG_FLAG}] [{REPLACE_FLAG}] [args...]

Runs the Gradle or Maven build of the current project, preferring the
project wrapper over a system installation.

Launcher flags:
  {FORCE_GRADLE_FLAG}   force a Gradle build
  {FORCE_MAVEN_FLAG}   force a Maven build
  {NEAREST_FLAG}   run the nearest build file instead of the root one
  {DEBUG_FLAG}   display resolution details
  {REPLACE_FLAG}   skip task/goal alias replacement
  {QUIET_FLAG}   run quietly
  {SHOW_CONFIG_FLAG}   display the effective configuration
  {VERSION_FLAG}   display version information
  {HELP_FLAG}   display this help

All other arguments are passed to the build tool."""


@dataclass(slots=True, frozen=True)
class LaunchOptions:
    """Launcher flags split from the arguments forwarded to the build tool."""

    force_gradle: bool
    force_maven: bool
    quiet: bool
    version: bool
    help: bool
    show_config: bool
    args: tuple[str, ...]

    @property
    def forced_family(self) -> str | None:
        if self.force_gradle:
            return "gradle"
        if self.force_maven:
            return "maven"
        return None

    @classmethod
    def from_args(cls, raw: Sequence[str]) -> LaunchOptions:
        """Return options parsed from the raw command line.

        Meta-flags consumed by the resolvers (``-gn``, ``-gd``, ``-gr``) are
        left in ``args``.
        """

        force_gradle, remaining = grab_flag(FORCE_GRADLE_FLAG, raw)
        force_maven, remaining = grab_flag(FORCE_MAVEN_FLAG, remaining)
        quiet, remaining = grab_flag(QUIET_FLAG, remaining)
        version, remaining = grab_flag(VERSION_FLAG, remaining)
        show_help, remaining = grab_flag(HELP_FLAG, remaining)
        show_config, remaining = grab_flag(SHOW_CONFIG_FLAG, remaining)
        return cls(
            force_gradle=force_gradle,
            force_maven=force_maven,
            quiet=quiet,
            version=version,
            help=show_help,
            show_config=show_config,
            args=tuple(remaining),
        )


__all__ = ["LaunchOptions", "USAGE"]
