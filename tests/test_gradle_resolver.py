# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for Gradle invocation resolution against synthetic trees."""

from __future__ import annotations

from pathlib import Path

import pytest

from gum.assembly import build_command
from gum.config import Config
from gum.models import Source
from gum.resolvers import GradleResolver
from tests.helpers.context import RecordingConfigProvider, SyntheticContext

BIN = "/opt/gradle/bin"
SYSTEM_GRADLE = Path(BIN, "gradle")


def _resolver(context: SyntheticContext, provider: RecordingConfigProvider | None = None) -> GradleResolver:
    return GradleResolver(context, config_provider=provider or RecordingConfigProvider())


def _parent_with_wrapper(**kwargs: bool) -> SyntheticContext:
    return SyntheticContext.tree(
        "/t/pw/gradlew",
        "/t/pw/build.gradle",
        "/t/pw/settings.gradle",
        "/t/pw/child/build.gradle",
        f"{BIN}/gradle",
        cwd="/t/pw/child",
        paths=[BIN],
        **kwargs,
    )


def test_single_project_with_wrapper() -> None:
    context = SyntheticContext.tree(
        "/t/single/gradlew",
        "/t/single/build.gradle",
        "/t/single/settings.gradle",
        f"{BIN}/gradle",
        cwd="/t/single",
        paths=[BIN],
    )

    plan = _resolver(context).resolve([])

    assert plan is not None
    assert plan.executable == Path("/t/single/gradlew")
    assert plan.root_build_file.path == Path("/t/single/build.gradle")
    assert plan.build_file.path == Path("/t/single/build.gradle")
    assert plan.settings_file.path == Path("/t/single/settings.gradle")
    assert plan.explicit_build_file is None
    assert plan.explicit_settings_file is None
    assert plan.explicit_project_dir is None


def test_single_project_without_wrapper_uses_system_gradle() -> None:
    context = SyntheticContext.tree(
        "/t/single/build.gradle",
        "/t/single/settings.gradle",
        f"{BIN}/gradle",
        cwd="/t/single",
        paths=[BIN],
    )

    plan = _resolver(context).resolve([])

    assert plan is not None
    assert plan.executable == SYSTEM_GRADLE
    assert plan.root_build_file.path == plan.build_file.path == Path("/t/single/build.gradle")


def test_parent_with_wrapper_prefers_root_build_file() -> None:
    plan = _resolver(_parent_with_wrapper()).resolve(["build"])

    assert plan is not None
    assert plan.executable == Path("/t/pw/gradlew")
    assert plan.root_build_file.path == Path("/t/pw/build.gradle")
    assert plan.nearest_build_file == Path("/t/pw/child/build.gradle")
    assert plan.settings_file.path == Path("/t/pw/settings.gradle")
    assert plan.selection_args == ("-b", "/t/pw/build.gradle", "-c", "/t/pw/settings.gradle")
    assert plan.args == ("build",)
    assert plan.banner_text == "Using gradle at '/t/pw/gradlew' to run buildFile '/t/pw/build.gradle':"


def test_parent_without_wrapper() -> None:
    context = SyntheticContext.tree(
        "/t/pn/build.gradle",
        "/t/pn/settings.gradle",
        "/t/pn/child/build.gradle",
        f"{BIN}/gradle",
        cwd="/t/pn/child",
        paths=[BIN],
    )

    plan = _resolver(context).resolve([])

    assert plan is not None
    assert plan.executable == SYSTEM_GRADLE
    assert plan.root_build_file.path == Path("/t/pn/build.gradle")
    assert plan.build_file.path == Path("/t/pn/child/build.gradle")


def test_nearest_flag_selects_nearest_build_file() -> None:
    context = SyntheticContext.tree(
        "/t/pc/gradlew",
        "/t/pc/build.gradle",
        "/t/pc/settings.gradle",
        "/t/pc/child/child.gradle",
        cwd="/t/pc/child",
    )

    plan = _resolver(context).resolve(["-gn", "test"])

    assert plan is not None
    assert plan.meta.nearest is True
    assert plan.root_build_file.path == Path("/t/pc/build.gradle")
    assert plan.build_file.path == Path("/t/pc/child/child.gradle")
    assert plan.selection_args[:2] == ("-b", "/t/pc/child/child.gradle")
    assert plan.args == ("test",)


def test_explicit_build_file_replaces_discovery() -> None:
    context = SyntheticContext.tree(
        "/t/pe/gradlew",
        "/t/pe/build.gradle",
        "/t/pe/settings.gradle",
        "/t/pe/child/build.gradle",
        "/t/pe/child/explicit.gradle",
        cwd="/t/pe/child",
    )

    plan = _resolver(context).resolve(["-b", "/t/pe/child/explicit.gradle", "build"])

    assert plan is not None
    assert plan.executable == Path("/t/pe/gradlew")
    assert plan.explicit_build_file == Path("/t/pe/child/explicit.gradle")
    assert plan.nearest_build_file is None
    assert not plan.root_build_file.found
    assert plan.settings_file.path == Path("/t/pe/settings.gradle")
    assert plan.settings_file.source is Source.DISCOVERED
    assert plan.selection_args == ("-c", "/t/pe/settings.gradle")
    assert plan.args == ("-b", "/t/pe/child/explicit.gradle", "build")


def test_relative_explicit_build_file_is_made_absolute() -> None:
    context = SyntheticContext.tree("/t/pe/gradlew", "/t/pe/child/explicit.gradle", cwd="/t/pe/child")

    plan = _resolver(context).resolve(["--build-file=explicit.gradle"])

    assert plan is not None
    assert plan.explicit_build_file == Path("/t/pe/child/explicit.gradle")


def test_explicit_settings_file_suppresses_settings_flag() -> None:
    plan = _resolver(_parent_with_wrapper()).resolve(["-c", "../settings.gradle"])

    assert plan is not None
    assert plan.explicit_settings_file == Path("/t/pw/settings.gradle")
    assert plan.root_build_file.path == Path("/t/pw/build.gradle")
    assert plan.build_file.path == Path("/t/pw/child/build.gradle")
    assert plan.selection_args == ("-b", "/t/pw/build.gradle")


def test_explicit_build_and_settings_files() -> None:
    plan = _resolver(_parent_with_wrapper()).resolve(["-b", "x.gradle", "-c", "s.gradle"])

    assert plan is not None
    assert plan.explicit_build_file == Path("/t/pw/child/x.gradle")
    assert plan.explicit_settings_file == Path("/t/pw/child/s.gradle")
    assert plan.selection_args == ()


def test_explicit_project_dir_suppresses_file_resolution() -> None:
    plan = _resolver(_parent_with_wrapper()).resolve(["-p", "..", "build"])

    assert plan is not None
    assert plan.executable == Path("/t/pw/gradlew")
    assert plan.explicit_project_dir == Path("/t/pw")
    assert not plan.build_file.found
    assert not plan.root_build_file.found
    assert not plan.settings_file.found
    assert plan.selection_args == ()
    assert plan.args == ("-p", "..", "build")
    assert plan.banner_text == "Using gradle at '/t/pw/gradlew' to run project at '/t/pw':"


def test_explicit_project_dir_searches_wrapper_from_project_dir() -> None:
    context = SyntheticContext.tree("/elsewhere/gradlew", "/t/pw/build.gradle", cwd="/t/pw")

    plan = _resolver(context).resolve(["--project-dir", "/elsewhere"])

    assert plan is not None
    assert plan.executable == Path("/elsewhere/gradlew")


def test_root_build_file_above_empty_working_dir() -> None:
    context = SyntheticContext.tree("/p/build.gradle", "/p/gradlew", cwd="/p/child")

    plan = _resolver(context).resolve([])

    assert plan is not None
    assert plan.root_build_file.path == Path("/p/build.gradle")
    assert plan.executable == Path("/p/gradlew")
    assert plan.nearest_build_file is None
    assert plan.selection_args == ("-b", "/p/build.gradle")


def test_nearest_flag_falls_back_to_root_when_nearest_absent() -> None:
    context = SyntheticContext.tree("/p/build.gradle", "/p/gradlew", cwd="/p/child")

    plan = _resolver(context).resolve(["-gn"])

    assert plan is not None
    assert plan.selection_args == ("-b", "/p/build.gradle")


def test_build_file_only_in_working_dir_is_both_nearest_and_root() -> None:
    context = SyntheticContext.tree("/p/child/build.gradle.kts", "/p/child/gradlew", cwd="/p/child")

    plan = _resolver(context).resolve([])

    assert plan is not None
    assert plan.root_build_file.path == plan.build_file.path == Path("/p/child/build.gradle.kts")


def test_root_search_stays_within_settings_directory() -> None:
    context = SyntheticContext.tree(
        "/w/build.gradle",
        "/w/p/gradlew",
        "/w/p/settings.gradle",
        "/w/p/a/build.gradle",
        cwd="/w/p/a",
    )

    plan = _resolver(context).resolve([])

    assert plan is not None
    assert plan.root_build_file.path == Path("/w/p/a/build.gradle")


def test_root_search_without_settings_climbs_further() -> None:
    context = SyntheticContext.tree("/w/build.gradle", "/w/p/gradlew", "/w/p/a/build.gradle", cwd="/w/p/a")

    plan = _resolver(context).resolve([])

    assert plan is not None
    assert plan.root_build_file.path == Path("/w/build.gradle")


def test_settings_only_project_is_degraded_plan() -> None:
    context = SyntheticContext.tree("/s/gradlew", "/s/settings.gradle.kts", cwd="/s")

    plan = _resolver(context).resolve(["build"])

    assert plan is not None
    assert not plan.build_file.found
    assert not plan.root_build_file.found
    assert plan.selection_args == ("-c", "/s/settings.gradle.kts")
    assert plan.banner_text == "Using gradle at '/s/gradlew' with settings at '/s/settings.gradle.kts':"
    assert plan.notes == ("Did not find a suitable Gradle build file but found /s/settings.gradle.kts",)


def test_explicit_settings_without_build_file_is_degraded_plan() -> None:
    context = SyntheticContext.tree("/s/gradlew", "/s/conf/settings.gradle", cwd="/s")

    plan = _resolver(context).resolve(["-c", "conf/settings.gradle"])

    assert plan is not None
    assert plan.explicit_settings_file == Path("/s/conf/settings.gradle")
    assert plan.selection_args == ()
    assert plan.notes == ("Did not find a suitable Gradle build file but /s/conf/settings.gradle is specified",)


def test_no_executables_in_explicit_mode_exits() -> None:
    context = SyntheticContext.tree("/t/single/build.gradle", cwd="/t/single")

    assert _resolver(context).resolve([]) is None
    assert context.exit_codes == [1]


def test_no_executables_in_best_effort_mode_returns_none() -> None:
    context = SyntheticContext.tree("/t/single/build.gradle", cwd="/t/single", explicit=False)

    assert _resolver(context).resolve([]) is None
    assert context.exit_codes == []


def test_empty_tree_without_executables_is_fatal() -> None:
    context = SyntheticContext.tree(cwd="/nothing/here")

    assert _resolver(context).resolve(["build"]) is None
    assert context.exit_codes == [1]


def test_no_project_in_explicit_mode_exits() -> None:
    context = SyntheticContext.tree(f"{BIN}/gradle", cwd="/empty", paths=[BIN])

    assert _resolver(context).resolve([]) is None
    assert context.exit_codes == [1]


def test_no_project_in_best_effort_mode_returns_none() -> None:
    context = SyntheticContext.tree(f"{BIN}/gradle", cwd="/empty", paths=[BIN], explicit=False)

    assert _resolver(context).resolve([]) is None
    assert context.exit_codes == []


def test_windows_uses_bat_executables() -> None:
    context = SyntheticContext.tree(
        "/t/win/gradlew",
        "/t/win/build.gradle",
        f"{BIN}/gradle.bat",
        cwd="/t/win",
        paths=[BIN],
        windows=True,
    )

    plan = _resolver(context).resolve([])

    assert plan is not None
    assert plan.executable == Path(BIN, "gradle.bat")


def test_config_is_loaded_for_project_root() -> None:
    provider = RecordingConfigProvider()

    _resolver(_parent_with_wrapper(), provider).resolve([])

    assert provider.roots == [Path("/t/pw")]


def test_meta_flags_update_effective_config() -> None:
    plan = _resolver(_parent_with_wrapper()).resolve(["-gd", "-gr", "compile"])

    assert plan is not None
    assert plan.args == ("compile",)
    assert plan.config.general.debug is True
    assert plan.config.gradle.replace is False
    assert plan.config.maven.replace is True


def test_replace_flag_with_replacement_configured_off() -> None:
    provider = RecordingConfigProvider(Config.model_validate({"gradle": {"replace": False}}))
    context = SyntheticContext.tree("/p/gradlew", "/p/build.gradle", cwd="/p")

    plan = _resolver(context, provider).resolve(["-gr", "compile"])

    assert plan is not None
    assert plan.config.gradle.replace is False
    assert build_command(plan, value_flags=GradleResolver.value_flags).argv == ("-b", "/p/build.gradle", "compile")


def test_missing_wrapper_warning_in_explicit_mode(capsys: pytest.CaptureFixture[str]) -> None:
    context = SyntheticContext.tree("/t/single/build.gradle", f"{BIN}/gradle", cwd="/t/single", paths=[BIN], quiet=False)

    _resolver(context).resolve([])

    assert "No gradlew set up for this project" in capsys.readouterr().out


def test_quiet_mode_suppresses_notes(capsys: pytest.CaptureFixture[str]) -> None:
    context = SyntheticContext.tree("/s/gradlew", "/s/settings.gradle", cwd="/s")

    plan = _resolver(context).resolve([])

    assert plan is not None
    assert plan.notes
    assert capsys.readouterr().out == ""
