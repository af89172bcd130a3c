# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolver for Maven builds."""

from __future__ import annotations

from pathlib import Path

from ..assembly import SelectionBuilder
from ..constants import (
    MAVEN_BUILD_CANDIDATES,
    MAVEN_EXECUTABLE,
    MAVEN_FILE_FLAGS,
    MAVEN_INSTALL_DOCS,
    MAVEN_WRAPPER,
    MAVEN_WRAPPER_DOCS,
)
from ..errors import NotFoundError
from ..models import InvocationPlan, MetaFlags, ResolvedPath
from ..search import search_upward
from .base import BuildToolResolver, NoProjectError

FILE_FLAG = "-f"


class MavenResolver(BuildToolResolver):
    """Locate ``mvnw``/``mvn`` plus the ``pom.xml`` to run."""

    family = "maven"
    display_name = "Maven"
    wrapper_name = MAVEN_WRAPPER
    executable_name = MAVEN_EXECUTABLE
    wrapper_docs = MAVEN_WRAPPER_DOCS
    install_docs = MAVEN_INSTALL_DOCS
    value_flags = MAVEN_FILE_FLAGS

    def _resolve(self, meta: MetaFlags, args: list[str]) -> InvocationPlan:
        pwd = self.context.working_dir()
        explicit_build = self.explicit_path(MAVEN_FILE_FLAGS, args)

        nearest = root = None
        if explicit_build is None:
            nearest = self._find(pwd)
            # The root pom is the first one above the working directory.
            root = self._find(pwd.parent) or nearest

        anchor_file = explicit_build or root
        root_dir = anchor_file.parent if anchor_file is not None else pwd
        config = self.load_config(root_dir, meta)
        executable = self.select_executable(pwd)

        builder = SelectionBuilder(self.family, executable)
        clause = "to run buildFile '{path}':"
        if explicit_build is not None:
            builder.select(None, explicit_build, clause)
            build_file = ResolvedPath.explicit(explicit_build)
        elif nearest is None:
            raise NoProjectError(MAVEN_BUILD_CANDIDATES, pwd)
        else:
            build_file = ResolvedPath.discovered(nearest)
            builder.select(FILE_FLAG, nearest if meta.nearest else root, clause)

        return InvocationPlan(
            family=self.family,
            executable=executable,
            build_file=build_file,
            root_build_file=ResolvedPath.from_optional(root),
            root_dir=root_dir,
            meta=meta,
            config=config,
            args=tuple(args),
            selection_args=builder.flags,
            banner=builder.banner,
        )

    def _find(self, start: Path) -> Path | None:
        try:
            return search_upward(self.context, start, MAVEN_BUILD_CANDIDATES)
        except NotFoundError:
            return None


__all__ = ["MavenResolver"]
