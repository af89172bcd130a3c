# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Collaborator interfaces consumed by the resolution engine."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .config.models import Config


@runtime_checkable
class LaunchContext(Protocol):
    """Supply filesystem, platform and process facts to the resolvers."""

    def file_exists(self, path: Path) -> bool:
        """Return ``True`` when ``path`` exists; probe failures count as absent."""

        raise NotImplementedError

    def working_dir(self) -> Path:
        """Return the absolute directory the launcher was started from."""

        raise NotImplementedError

    def search_paths(self) -> Sequence[Path]:
        """Return the ordered ``PATH``-equivalent directories."""

        raise NotImplementedError

    def is_windows(self) -> bool:
        """Return ``True`` when executables carry the ``.bat`` suffix."""

        raise NotImplementedError

    def is_explicit(self) -> bool:
        """Return ``True`` when failures must terminate the process."""

        raise NotImplementedError

    def is_quiet(self) -> bool:
        """Return ``True`` when banners and notes must be suppressed."""

        raise NotImplementedError

    def exit(self, code: int) -> None:
        """Terminate the process with ``code``."""

        raise NotImplementedError


ConfigProvider = Callable[[Path], "Config"]


__all__ = ["ConfigProvider", "LaunchContext"]
