# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from rich.markup import escape
from rich.text import Text

from .console import detect_tty, get_console_manager


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(msg: str, *, style: str | None, use_emoji: bool, use_color: bool | None = None) -> None:
    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def section(title: str, *, use_color: bool) -> None:
    """Print a section header."""

    console = get_console_manager().get(color=use_color, emoji=True)
    console.print(f"\n--- {escape(title)} ---")


def plain(msg: str) -> None:
    """Emit ``msg`` without decoration."""

    _print_line(msg, style=None, use_emoji=False)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an informational message."""

    _print_line(f"{emoji('ℹ️ ', use_emoji)}{msg}", style="cyan", use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a warning message."""

    _print_line(f"{emoji('⚠️ ', use_emoji)}{msg}", style="yellow", use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message."""

    _print_line(f"{emoji('❌ ', use_emoji)}{msg}", style="red", use_emoji=use_emoji, use_color=use_color)


@dataclass(slots=True)
class LaunchLogger:
    """Adapter around the logging helpers honouring quiet and debug settings.

    Failures are always shown; every other message is dropped while
    ``quiet`` is set.
    """

    use_emoji: bool = False
    quiet: bool = False
    debug_enabled: bool = False
    _key_value_re: re.Pattern[str] = field(default=re.compile(r"([\w-]+)=(.*)"), repr=False)

    def echo(self, message: str) -> None:
        if not self.quiet:
            plain(message)

    def info(self, message: str) -> None:
        if not self.quiet:
            info(message, use_emoji=self.use_emoji)

    def warn(self, message: str) -> None:
        if not self.quiet:
            warn(message, use_emoji=self.use_emoji)

    def fail(self, message: str) -> None:
        fail(message, use_emoji=self.use_emoji)

    def debug(self, message: str) -> None:
        """Emit a ``key=value`` debug line when debug output is enabled.

        Debug output is requested explicitly and therefore ignores ``quiet``.
        """

        if not self.debug_enabled:
            return
        console = get_console_manager().get(color=detect_tty(), emoji=False)
        text = Text("[debug] ", style="bold cyan")
        match = self._key_value_re.fullmatch(message)
        if match is None:
            text.append(message, style="dim")
        else:
            text.append(match.group(1), style="bold magenta")
            text.append("=", style="dim")
            text.append(match.group(2), style="bold green")
        console.print(text)


def build_logger(*, quiet: bool = False, debug: bool = False, emoji: bool = False) -> LaunchLogger:
    """Return a :class:`LaunchLogger` for the given output preferences."""

    return LaunchLogger(use_emoji=emoji, quiet=quiet, debug_enabled=debug)


__all__ = [
    "LaunchLogger",
    "build_logger",
    "emoji",
    "fail",
    "info",
    "plain",
    "section",
    "warn",
]
