# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers for picking launcher flags out of raw command line arguments."""

from __future__ import annotations

from collections.abc import Sequence

from .constants import DEBUG_FLAG, NEAREST_FLAG, REPLACE_FLAG
from .models import MetaFlags


def grab_flag(flag: str, args: Sequence[str]) -> tuple[bool, list[str]]:
    """Remove every occurrence of ``flag`` from ``args``.

    Args:
        flag: Exact token to remove.
        args: Raw argument sequence.

    Returns:
        tuple[bool, list[str]]: Whether the flag was present, and the
        remaining arguments in their original relative order.
    """

    remaining = [arg for arg in args if arg != flag]
    return len(remaining) != len(args), remaining


def find_flag_value(flags: Sequence[str], args: Sequence[str]) -> str | None:
    """Return the value supplied for the first matching flag spelling.

    Both ``--flag value`` and ``--flag=value`` are recognised. A flag given
    as the final token has no value and is ignored.

    Args:
        flags: Accepted spellings, e.g. ``("-b", "--build-file")``.
        args: Raw argument sequence.

    Returns:
        str | None: The value, or ``None`` when no spelling carries one.
    """

    for index, arg in enumerate(args):
        if arg in flags:
            if index + 1 < len(args):
                return args[index + 1]
            continue
        for flag in flags:
            if flag.startswith("--") and arg.startswith(f"{flag}="):
                return arg[len(flag) + 1 :]
    return None


def value_positions(flags: Sequence[str], args: Sequence[str]) -> set[int]:
    """Return indexes of tokens that are values of ``flags`` in ``args``."""

    return {index + 1 for index, arg in enumerate(args) if arg in flags and index + 1 < len(args)}


def extract_meta_flags(args: Sequence[str]) -> tuple[MetaFlags, list[str]]:
    """Strip the ``-gn``, ``-gd`` and ``-gr`` meta-flags from ``args``.

    Args:
        args: Raw argument sequence.

    Returns:
        tuple[MetaFlags, list[str]]: Extracted flags and the untouched
        remainder.
    """

    nearest, remaining = grab_flag(NEAREST_FLAG, args)
    debug, remaining = grab_flag(DEBUG_FLAG, remaining)
    skip_replace, remaining = grab_flag(REPLACE_FLAG, remaining)
    return MetaFlags(nearest=nearest, debug=debug, skip_replace=skip_replace), remaining


__all__ = [
    "extract_meta_flags",
    "find_flag_value",
    "grab_flag",
    "value_positions",
]
