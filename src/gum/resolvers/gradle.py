# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolver for Gradle builds."""

from __future__ import annotations

from pathlib import Path

from ..assembly import SelectionBuilder
from ..constants import (
    GRADLE_BUILD_CANDIDATES,
    GRADLE_BUILD_FILE_FLAGS,
    GRADLE_EXECUTABLE,
    GRADLE_INSTALL_DOCS,
    GRADLE_PROJECT_DIR_FLAGS,
    GRADLE_ROOT_CANDIDATES,
    GRADLE_SETTINGS_CANDIDATES,
    GRADLE_SETTINGS_FILE_FLAGS,
    GRADLE_WRAPPER,
    GRADLE_WRAPPER_DOCS,
)
from ..errors import NotFoundError
from ..models import InvocationPlan, MetaFlags, ResolvedPath
from ..search import find_root_file, search_upward
from .base import BuildToolResolver, NoProjectError

BUILD_FLAG = "-b"
SETTINGS_FLAG = "-c"


class GradleResolver(BuildToolResolver):
    """Locate ``gradlew``/``gradle`` plus the build and settings files to run."""

    family = "gradle"
    display_name = "Gradle"
    wrapper_name = GRADLE_WRAPPER
    executable_name = GRADLE_EXECUTABLE
    wrapper_docs = GRADLE_WRAPPER_DOCS
    install_docs = GRADLE_INSTALL_DOCS
    value_flags = GRADLE_BUILD_FILE_FLAGS + GRADLE_SETTINGS_FILE_FLAGS + GRADLE_PROJECT_DIR_FLAGS

    def _resolve(self, meta: MetaFlags, args: list[str]) -> InvocationPlan:
        pwd = self.context.working_dir()
        project_dir = self.explicit_path(GRADLE_PROJECT_DIR_FLAGS, args)
        explicit_build = self.explicit_path(GRADLE_BUILD_FILE_FLAGS, args)
        explicit_settings = self.explicit_path(GRADLE_SETTINGS_FILE_FLAGS, args)

        if project_dir is not None:
            config = self.load_config(project_dir, meta)
            executable = self.select_executable(project_dir)
            builder = SelectionBuilder(self.family, executable)
            builder.select(None, project_dir, "to run project at '{path}':")
            return InvocationPlan(
                family=self.family,
                executable=executable,
                project_dir=ResolvedPath.explicit(project_dir),
                root_dir=project_dir,
                meta=meta,
                config=config,
                args=tuple(args),
                selection_args=builder.flags,
                banner=builder.banner,
            )

        settings = self._find(GRADLE_SETTINGS_CANDIDATES, pwd)
        if explicit_build is not None:
            nearest = root = None
        else:
            root, nearest = self._find_build_files(pwd, boundary=explicit_settings or settings)

        root_dir = self._root_dir(pwd, explicit_build, root, explicit_settings, settings, nearest)
        config = self.load_config(root_dir, meta)
        executable = self.select_executable(pwd)

        settings_file = (
            ResolvedPath.explicit(explicit_settings)
            if explicit_settings is not None
            else ResolvedPath.from_optional(settings)
        )
        if explicit_build is not None:
            build_file = ResolvedPath.explicit(explicit_build)
        else:
            build_file = ResolvedPath.from_optional(nearest)

        notes: list[str] = []
        if explicit_build is None and root is None and nearest is None:
            if explicit_settings is not None:
                notes.append(
                    self.note(f"Did not find a suitable Gradle build file but {explicit_settings} is specified"),
                )
            elif settings is not None:
                notes.append(self.note(f"Did not find a suitable Gradle build file but found {settings}"))
            else:
                raise NoProjectError(GRADLE_BUILD_CANDIDATES + GRADLE_SETTINGS_CANDIDATES, pwd)

        root_build_file = ResolvedPath.from_optional(root)
        builder = self._selection(executable, meta, build_file, root_build_file, settings_file)
        return InvocationPlan(
            family=self.family,
            executable=executable,
            build_file=build_file,
            root_build_file=root_build_file,
            settings_file=settings_file,
            root_dir=root_dir,
            meta=meta,
            config=config,
            args=tuple(args),
            selection_args=builder.flags,
            banner=builder.banner,
            notes=tuple(notes),
        )

    def _find(self, candidates: tuple[str, ...], start: Path, **bounds: Path | None) -> Path | None:
        try:
            return search_upward(self.context, start, candidates, **bounds)
        except NotFoundError:
            return None

    def _find_build_files(self, pwd: Path, *, boundary: Path | None) -> tuple[Path | None, Path | None]:
        """Return the ``(root, nearest)`` build files for ``pwd``.

        The root search begins one level above ``pwd`` and may not climb
        above the settings directory. The nearest search stops below the
        root directory, so a root file above an empty working directory
        leaves nearest unset. Without a root file the nearest file doubles
        as the root.
        """

        settings_dir = boundary.parent if boundary is not None else None
        try:
            root: Path | None = find_root_file(self.context, pwd.parent, GRADLE_ROOT_CANDIDATES, boundary=settings_dir)
        except NotFoundError:
            root = None

        if root is not None:
            return root, self._find(GRADLE_BUILD_CANDIDATES, pwd, stop_at=root.parent)
        nearest = self._find(GRADLE_BUILD_CANDIDATES, pwd)
        return nearest, nearest

    def _root_dir(self, pwd: Path, *candidates: Path | None) -> Path:
        """Return the directory of the first candidate file that exists."""

        for candidate in candidates:
            if candidate is not None and self.context.file_exists(candidate):
                return candidate.parent
        return pwd

    def _selection(
        self,
        executable: Path,
        meta: MetaFlags,
        build_file: ResolvedPath,
        root_build_file: ResolvedPath,
        settings_file: ResolvedPath,
    ) -> SelectionBuilder:
        builder = SelectionBuilder(self.family, executable)
        build_clause = "to run buildFile '{path}':"
        settings_clause = "with settings at '{path}':"

        build_set = True
        if build_file.is_explicit:
            builder.select(None, build_file.path, build_clause)
        elif meta.nearest and build_file.found:
            builder.select(BUILD_FLAG, build_file.path, build_clause)
        elif root_build_file.found:
            builder.select(BUILD_FLAG, root_build_file.path, build_clause)
        else:
            build_set = False

        if settings_file.is_explicit:
            if not build_set:
                builder.select(None, settings_file.path, settings_clause)
        elif settings_file.found:
            if build_set:
                builder.flag_only(SETTINGS_FLAG, settings_file.path)
            else:
                builder.select(SETTINGS_FLAG, settings_file.path, settings_clause)
        return builder


__all__ = ["GradleResolver"]
