# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared machinery for per-family build tool resolvers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path
from typing import ClassVar

from ..config import Config, load_config
from ..constants import EXIT_FAILURE, WINDOWS_SUFFIX
from ..errors import NoExecutableError, NotFoundError
from ..flags import extract_meta_flags, find_flag_value
from ..interfaces import ConfigProvider, LaunchContext
from ..logging import LaunchLogger, build_logger
from ..models import InvocationPlan, MetaFlags
from ..search import anchor, find_on_paths, search_upward


class NoProjectError(NotFoundError):
    """Raised when neither a build file nor a settings file could be found."""


class BuildToolResolver(ABC):
    """Resolve an :class:`InvocationPlan` for one build tool family.

    Subclasses describe their executables through class attributes and
    implement :meth:`_resolve`; this base class owns meta-flag extraction,
    executable selection and the strict versus best-effort failure policy.
    """

    family: ClassVar[str]
    display_name: ClassVar[str]
    wrapper_name: ClassVar[str]
    executable_name: ClassVar[str]
    wrapper_docs: ClassVar[str]
    install_docs: ClassVar[str]
    value_flags: ClassVar[tuple[str, ...]] = ()

    def __init__(
        self,
        context: LaunchContext,
        *,
        config_provider: ConfigProvider = load_config,
        logger: LaunchLogger | None = None,
    ) -> None:
        """Bind the resolver to its collaborators.

        Args:
            context: Filesystem, platform and process collaborator.
            config_provider: Callable returning the configuration for a
                project root directory.
            logger: Output adapter; a plain one is built when omitted.
        """

        self.context = context
        self._config_provider = config_provider
        self._base_logger = logger or build_logger()
        self.logger = self._base_logger

    def resolve(self, args: Sequence[str]) -> InvocationPlan | None:
        """Return the invocation plan for ``args`` or ``None`` when unusable.

        In explicit mode a failure terminates the process through the
        context; otherwise ``None`` lets the caller try another family.

        Args:
            args: Raw arguments following the launcher flags.

        Returns:
            InvocationPlan | None: Resolved plan, or ``None`` on failure.
        """

        meta, remaining = extract_meta_flags(args)
        self.logger = replace(self._base_logger, quiet=self._base_logger.quiet or self.context.is_quiet())
        try:
            return self._resolve(meta, remaining)
        except NoExecutableError:
            return self._abandon(None)
        except NoProjectError:
            return self._abandon(f"No {self.display_name} project found")

    @abstractmethod
    def _resolve(self, meta: MetaFlags, args: list[str]) -> InvocationPlan:
        """Build the plan, raising :class:`NotFoundError` subclasses on failure."""

    def _abandon(self, message: str | None) -> None:
        if self.context.is_explicit():
            if message is not None:
                self.logger.fail(message)
            self.context.exit(EXIT_FAILURE)
        return None

    def executable_file_name(self, base: str) -> str:
        return f"{base}{WINDOWS_SUFFIX}" if self.context.is_windows() else base

    def explicit_path(self, flags: Sequence[str], args: Sequence[str]) -> Path | None:
        """Return the absolute value supplied for ``flags`` in ``args``."""

        value = find_flag_value(flags, args)
        if value is None:
            return None
        return anchor(self.context, Path(value).expanduser())

    def load_config(self, root_dir: Path, meta: MetaFlags) -> Config:
        """Load the configuration for ``root_dir`` and apply meta-flag overrides.

        The resolver logger is refreshed so that a configured ``quiet`` takes
        effect for the remaining messages.
        """

        config = self._config_provider(root_dir).with_overrides(
            family=self.family,
            quiet=self.context.is_quiet(),
            debug=meta.debug,
            skip_replace=meta.skip_replace,
        )
        self.logger = replace(self.logger, quiet=self.logger.quiet or config.general.quiet)
        return config

    def select_executable(self, start: Path) -> Path:
        """Return the wrapper above ``start`` or the system executable.

        Args:
            start: Directory where the wrapper search begins.

        Returns:
            Path: Absolute path of the chosen executable.

        Raises:
            NoExecutableError: If neither executable can be located.
        """

        wrapper = self.executable_file_name(self.wrapper_name)
        try:
            return search_upward(self.context, start, [wrapper])
        except NotFoundError:
            pass

        system = self.executable_file_name(self.executable_name)
        try:
            executable = find_on_paths(self.context, system)
        except NotFoundError as exc:
            if self.context.is_explicit():
                self.logger.warn(
                    f"No {system} found in path. Please install {self.display_name}. ({self.install_docs})",
                )
            raise NoExecutableError([wrapper, system], start) from exc

        if self.context.is_explicit():
            self.logger.warn(
                f"No {wrapper} set up for this project. Please consider setting one up. ({self.wrapper_docs})",
            )
        return executable

    def note(self, message: str) -> str:
        self.logger.info(message)
        return message


__all__ = ["BuildToolResolver", "NoProjectError"]
