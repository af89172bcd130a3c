# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Immutable value objects describing a resolved build tool invocation."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum
from pathlib import Path

from .config.models import Config


class Source(StrEnum):
    """Provenance of a resolved path."""

    EXPLICIT = "explicit"
    DISCOVERED = "discovered"
    ABSENT = "absent"


@dataclass(frozen=True, slots=True)
class ResolvedPath:
    """A path paired with where it came from.

    ``path`` is ``None`` exactly when ``source`` is :attr:`Source.ABSENT`.
    """

    path: Path | None = None
    source: Source = Source.ABSENT

    @classmethod
    def explicit(cls, path: Path) -> ResolvedPath:
        return cls(path=path, source=Source.EXPLICIT)

    @classmethod
    def discovered(cls, path: Path) -> ResolvedPath:
        return cls(path=path, source=Source.DISCOVERED)

    @classmethod
    def absent(cls) -> ResolvedPath:
        return cls()

    @classmethod
    def from_optional(cls, path: Path | None) -> ResolvedPath:
        """Return a discovered path, or an absent one when ``path`` is ``None``."""

        return cls.absent() if path is None else cls.discovered(path)

    @property
    def found(self) -> bool:
        return self.path is not None

    @property
    def is_explicit(self) -> bool:
        return self.source is Source.EXPLICIT

    @property
    def is_discovered(self) -> bool:
        return self.source is Source.DISCOVERED

    def __str__(self) -> str:
        return "" if self.path is None else str(self.path)


@dataclass(frozen=True, slots=True)
class MetaFlags:
    """Launcher meta-flags removed from the argument stream before resolution."""

    nearest: bool = False
    debug: bool = False
    skip_replace: bool = False


@dataclass(frozen=True, slots=True)
class InvocationPlan:
    """Everything decided about one build tool invocation.

    Attributes:
        family: Tool family identifier (``"gradle"`` or ``"maven"``).
        executable: Absolute path to the wrapper or system executable.
        build_file: Explicit build file, or the nearest discovered one.
        root_build_file: Discovered root build file.
        settings_file: Explicit or discovered settings file.
        project_dir: Explicit project directory.
        root_dir: Directory anchoring project-level configuration.
        meta: Meta-flags extracted from the command line.
        config: Effective configuration, command line overrides applied.
        args: User arguments with meta-flags removed, not yet rewritten.
        selection_args: Tool-selection flags chosen by the resolver.
        banner: Clauses explaining the executable and file choice.
        notes: Informational messages produced during resolution.
    """

    family: str
    executable: Path
    build_file: ResolvedPath = field(default_factory=ResolvedPath)
    root_build_file: ResolvedPath = field(default_factory=ResolvedPath)
    settings_file: ResolvedPath = field(default_factory=ResolvedPath)
    project_dir: ResolvedPath = field(default_factory=ResolvedPath)
    root_dir: Path | None = None
    meta: MetaFlags = field(default_factory=MetaFlags)
    config: Config = field(default_factory=Config)
    args: tuple[str, ...] = ()
    selection_args: tuple[str, ...] = ()
    banner: tuple[str, ...] = ()
    notes: tuple[str, ...] = ()

    @property
    def explicit_build_file(self) -> Path | None:
        return self.build_file.path if self.build_file.is_explicit else None

    @property
    def explicit_settings_file(self) -> Path | None:
        return self.settings_file.path if self.settings_file.is_explicit else None

    @property
    def explicit_project_dir(self) -> Path | None:
        return self.project_dir.path if self.project_dir.is_explicit else None

    @property
    def nearest_build_file(self) -> Path | None:
        return self.build_file.path if self.build_file.is_discovered else None

    @property
    def banner_text(self) -> str:
        return " ".join(self.banner)

    def with_args(self, args: tuple[str, ...]) -> InvocationPlan:
        """Return a copy of the plan carrying ``args``."""

        return replace(self, args=args)


@dataclass(frozen=True, slots=True)
class Command:
    """Final executable and argument vector handed to the process runner."""

    executable: Path
    argv: tuple[str, ...]
    banner: tuple[str, ...] = ()

    @property
    def banner_text(self) -> str:
        return " ".join(self.banner)

    def as_list(self) -> list[str]:
        return [str(self.executable), *self.argv]


__all__ = ["Command", "InvocationPlan", "MetaFlags", "ResolvedPath", "Source"]
