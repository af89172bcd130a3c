# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Upward directory searches used to discover wrappers and build files."""

from __future__ import annotations

import os
from collections.abc import Iterator, Sequence
from pathlib import Path

from .constants import DIRNAME_TOKEN
from .errors import NotFoundError
from .interfaces import LaunchContext


def expand_candidates(directory: Path, candidates: Sequence[str]) -> list[str]:
    """Return ``candidates`` with ``{dirname}`` replaced by the name of ``directory``.

    Args:
        directory: Directory about to be probed.
        candidates: Ordered file name templates.

    Returns:
        list[str]: Concrete file names in priority order.
    """

    return [candidate.replace(DIRNAME_TOKEN, directory.name) for candidate in candidates]


def anchor(context: LaunchContext, path: Path) -> Path:
    """Return ``path`` made absolute against the context working directory.

    Args:
        context: Launch context supplying the working directory.
        path: Absolute or relative path.

    Returns:
        Path: Normalised absolute path; ``..`` segments are collapsed lexically.
    """

    candidate = path if path.is_absolute() else context.working_dir() / path
    return Path(os.path.normpath(candidate))


def _too_shallow(directory: Path, boundary: Path | None) -> bool:
    return boundary is not None and len(directory.parts) < len(boundary.parts)


def iter_search_dirs(
    start: Path,
    *,
    boundary: Path | None = None,
    stop_at: Path | None = None,
) -> Iterator[Path]:
    """Yield ``start`` and its ancestors in walking order.

    The filesystem root terminates the walk without being yielded. When
    ``boundary`` is given the walk also ends before any directory shallower
    than ``boundary``, and on reaching ``stop_at``, which is not yielded.

    Args:
        start: Absolute directory where the walk begins.
        boundary: Optional directory bounding the walk from above.
        stop_at: Optional directory excluded from the walk together with its ancestors.

    Yields:
        Path: Directories to probe, nearest first.
    """

    directory = start
    while directory.parent != directory and not _too_shallow(directory, boundary):
        if stop_at is not None and directory == stop_at:
            return
        yield directory
        directory = directory.parent


def search_upward(
    context: LaunchContext,
    start: Path,
    candidates: Sequence[str],
    *,
    boundary: Path | None = None,
    stop_at: Path | None = None,
) -> Path:
    """Return the first existing candidate found walking up from ``start``.

    Every candidate is tried in order within a directory before the walk
    moves on to the parent.

    Args:
        context: Launch context answering existence probes.
        start: Directory where the walk begins.
        candidates: Ordered file name templates.
        boundary: Optional directory bounding the walk from above.
        stop_at: Optional directory where the walk ends unprobed.

    Returns:
        Path: Absolute path of the first match.

    Raises:
        NotFoundError: If the walk ends without a match.
    """

    origin = anchor(context, start)
    for directory in iter_search_dirs(origin, boundary=boundary, stop_at=stop_at):
        for name in expand_candidates(directory, candidates):
            path = directory / name
            if context.file_exists(path):
                return path
    raise NotFoundError(candidates, origin)


def find_root_file(
    context: LaunchContext,
    start: Path,
    candidates: Sequence[str],
    *,
    boundary: Path | None = None,
) -> Path:
    """Return the topmost file of a chain of same-named files above ``start``.

    The nearest match is located first; the search then keeps climbing for
    as long as the parent directory holds a file with the same name.

    Args:
        context: Launch context answering existence probes.
        start: Directory where the walk begins.
        candidates: Ordered file name templates.
        boundary: Optional directory the chain may not climb above.

    Returns:
        Path: Absolute path of the root file.

    Raises:
        NotFoundError: If no candidate exists between ``start`` and the boundary.
    """

    current = search_upward(context, start, candidates, boundary=boundary)
    while True:
        parent = current.parent.parent
        if parent.parent == parent or _too_shallow(parent, boundary):
            return current
        candidate = parent / current.name
        if not context.file_exists(candidate):
            return current
        current = candidate


def find_on_paths(context: LaunchContext, name: str) -> Path:
    """Return ``name`` located in the first matching search-path directory.

    Args:
        context: Launch context supplying the search paths.
        name: Executable file name.

    Returns:
        Path: Absolute path of the executable.

    Raises:
        NotFoundError: If no search-path directory contains ``name``.
    """

    for directory in context.search_paths():
        path = directory / name
        if context.file_exists(path):
            return anchor(context, path)
    raise NotFoundError([name])


__all__ = [
    "anchor",
    "expand_candidates",
    "find_on_paths",
    "find_root_file",
    "iter_search_dirs",
    "search_upward",
]
