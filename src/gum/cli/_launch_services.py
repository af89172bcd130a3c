# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helper services used by the launcher command."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from ..assembly import build_command
from ..config import Config, ConfigError, ConfigLoader, load_config
from ..console import detect_tty, get_console_manager
from ..context import SystemContext
from ..execution import run_command
from ..interfaces import ConfigProvider
from ..logging import LaunchLogger, section
from ..models import Command, InvocationPlan
from ..resolvers import resolver_for
from ._launch_models import LaunchOptions
from .shared import CLIError

CommandRunner = Callable[[Command], int]


def discovery_order(options: LaunchOptions, config: Config) -> tuple[list[str], bool]:
    """Return the families to try and whether resolution is explicit.

    Raises:
        CLIError: If both families are forced at once.
    """

    if options.force_gradle and options.force_maven:
        raise CLIError("Choose either -gg or -gm, not both")
    forced = options.forced_family
    if forced is not None:
        return [forced], True
    return list(dict.fromkeys(config.general.discovery)), False


def select_plan(
    options: LaunchOptions,
    *,
    cwd: Path,
    logger: LaunchLogger,
    config_provider: ConfigProvider = load_config,
) -> InvocationPlan | None:
    """Return the first plan produced by the candidate families.

    Args:
        options: Parsed launcher options.
        cwd: Working directory the resolution starts from.
        logger: Output adapter handed to the resolvers.
        config_provider: Configuration lookup for a project root.

    Returns:
        InvocationPlan | None: Plan of the first family that resolves, or
        ``None`` when none does.

    Raises:
        CLIError: If both families are forced or configuration cannot be
            loaded.
    """

    try:
        families, explicit = discovery_order(options, ConfigLoader.for_project(None).load())
        for family in families:
            context = SystemContext(explicit=explicit, quiet=options.quiet, cwd=cwd)
            resolver = resolver_for(family)(context, config_provider=config_provider, logger=logger)
            plan = resolver.resolve(options.args)
            if plan is not None:
                return plan
    except (CLIError, ConfigError) as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc
    return None


def launch(
    options: LaunchOptions,
    *,
    cwd: Path,
    logger: LaunchLogger,
    runner: CommandRunner | None = None,
    config_provider: ConfigProvider = load_config,
) -> int:
    """Resolve, announce and run the build.

    Returns:
        int: Exit status of the build tool.

    Raises:
        CLIError: If no project is found or the tool cannot be started.
    """

    plan = select_plan(options, cwd=cwd, logger=logger, config_provider=config_provider)
    if plan is None:
        message = "Did not find a Gradle or Maven project"
        logger.fail(message)
        raise CLIError(message)

    resolver = resolver_for(plan.family)
    command = build_command(plan, value_flags=resolver.value_flags, logger=logger)
    if not plan.config.general.quiet:
        logger.echo(command.banner_text)
    try:
        return (runner or run_command)(command)
    except OSError as exc:
        logger.fail(f"Unable to run {command.executable}: {exc}")
        raise CLIError(str(exc)) from exc


def show_config(*, cwd: Path, logger: LaunchLogger) -> None:
    """Print the effective configuration for ``cwd`` as JSON.

    Raises:
        CLIError: If configuration cannot be loaded.
    """

    try:
        result = ConfigLoader.for_project(cwd).load_with_trace()
    except ConfigError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc
    console = get_console_manager().get(color=False, emoji=False)
    console.print_json(result.config.model_dump_json())
    section("Sources", use_color=detect_tty())
    for source in result.sources:
        logger.info(f"loaded {source}")


__all__ = ["discovery_order", "launch", "select_plan", "show_config"]
