# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build tool family registry."""

from __future__ import annotations

from typing import Final

from .base import BuildToolResolver, NoProjectError
from .gradle import GradleResolver
from .maven import MavenResolver

RESOLVERS: Final[dict[str, type[BuildToolResolver]]] = {
    GradleResolver.family: GradleResolver,
    MavenResolver.family: MavenResolver,
}


def resolver_for(family: str) -> type[BuildToolResolver]:
    """Return the resolver class registered for ``family``.

    Raises:
        KeyError: If ``family`` is unknown.
    """

    try:
        return RESOLVERS[family]
    except KeyError as exc:
        raise KeyError(f"unknown build tool family: {family}") from exc


__all__ = [
    "BuildToolResolver",
    "GradleResolver",
    "MavenResolver",
    "NoProjectError",
    "RESOLVERS",
    "resolver_for",
]
