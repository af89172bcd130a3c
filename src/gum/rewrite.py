# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration driven task alias rewriting."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .flags import value_positions


def rewrite_args(
    args: Sequence[str],
    mappings: Mapping[str, Sequence[str]],
    *,
    enabled: bool,
    value_flags: Sequence[str] = (),
) -> list[str]:
    """Replace alias tokens in ``args`` with their configured expansion.

    Any token with a mapping is rewritten, options included, except the
    values following a flag in ``value_flags``. Unmatched tokens pass
    through verbatim and keep their relative order.

    Args:
        args: Task arguments as typed by the user.
        mappings: Alias to replacement tokens.
        enabled: When ``False`` the arguments are returned unchanged.
        value_flags: Flags whose following token is a value, not a task.

    Returns:
        list[str]: Rewritten argument vector.
    """

    if not enabled or not mappings:
        return list(args)

    skipped = value_positions(value_flags, args)
    rewritten: list[str] = []
    for index, arg in enumerate(args):
        replacement = None if index in skipped else mappings.get(arg)
        if replacement is None:
            rewritten.append(arg)
        else:
            rewritten.extend(replacement)
    return rewritten


__all__ = ["rewrite_args"]
