# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for configuration models and layered loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from gum.config import Config, ConfigError, ConfigLoader, TomlConfigSource, load_config
from gum.config.sources import deep_merge


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text.strip(), encoding="utf-8")
    return path


def test_defaults_without_any_file(tmp_path: Path) -> None:
    cfg = load_config(tmp_path)

    assert cfg.general.quiet is False
    assert cfg.general.discovery == ["gradle", "maven"]
    assert cfg.gradle.replace is True
    assert cfg.gradle.mappings["compile"] == ["classes"]
    assert cfg.maven.mappings["build"] == ["verify"]


def test_user_and_project_layers(tmp_path: Path, isolated_home: Path) -> None:
    _write(
        isolated_home / ".gm.toml",
        """
[general]
discovery = ["maven", "gradle"]
quiet = true

[gradle.mappings]
ship = "clean publish"
""",
    )
    project = tmp_path / "project"
    _write(
        project / ".gm.toml",
        """
[general]
quiet = false

[gradle]
replace = false
""",
    )

    result = ConfigLoader.for_project(project).load_with_trace()

    cfg = result.config
    assert cfg.general.discovery == ["maven", "gradle"]
    assert cfg.general.quiet is False
    assert cfg.gradle.replace is False
    assert cfg.gradle.mappings["ship"] == ["clean", "publish"]
    assert cfg.gradle.mappings["compile"] == ["classes"]
    assert result.sources == [
        "Built-in defaults",
        f"TOML configuration at {isolated_home / '.gm.toml'}",
        f"TOML configuration at {project / '.gm.toml'}",
    ]


def test_project_in_home_is_loaded_once(isolated_home: Path) -> None:
    _write(isolated_home / ".gm.toml", "[general]\ndebug = true")

    result = ConfigLoader.for_project(isolated_home).load_with_trace()

    assert result.config.general.debug is True
    assert len(result.sources) == 2


def test_list_mappings_are_kept_as_tokens() -> None:
    cfg = Config.model_validate({"maven": {"mappings": {"it": ["verify", "-DskipUnit"]}}})

    assert cfg.maven.mappings == {"it": ["verify", "-DskipUnit"]}


def test_invalid_toml_raises_config_error(tmp_path: Path) -> None:
    _write(tmp_path / ".gm.toml", "[general\nquiet = true")

    with pytest.raises(ConfigError, match="not valid TOML"):
        load_config(tmp_path)


def test_unknown_key_names_the_offending_layer(tmp_path: Path) -> None:
    _write(tmp_path / ".gm.toml", "[gradle]\nreplcae = false")

    with pytest.raises(ConfigError, match=r"Invalid configuration in TOML configuration at .*\.gm\.toml"):
        load_config(tmp_path)


def test_unknown_discovery_family_is_rejected(tmp_path: Path) -> None:
    _write(tmp_path / ".gm.toml", '[general]\ndiscovery = ["ant"]')

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_include_is_merged_below_document(tmp_path: Path) -> None:
    _write(tmp_path / "shared.toml", "[gradle]\nreplace = false\n[general]\ndebug = true")
    _write(tmp_path / ".gm.toml", 'include = "shared.toml"\n[general]\ndebug = false')

    cfg = load_config(tmp_path)

    assert cfg.gradle.replace is False
    assert cfg.general.debug is False


def test_circular_include_is_reported(tmp_path: Path) -> None:
    _write(tmp_path / "a.toml", 'include = "b.toml"')
    _write(tmp_path / "b.toml", 'include = "a.toml"')

    with pytest.raises(ConfigError, match="Circular include"):
        TomlConfigSource(tmp_path / "a.toml").load()


def test_loader_requires_a_source() -> None:
    with pytest.raises(ValueError):
        ConfigLoader([])


def test_with_overrides_only_touches_named_family() -> None:
    base = Config.model_validate({"general": {"quiet": True}})

    cfg = base.with_overrides(family="maven", debug=True, skip_replace=True)

    assert cfg.general.quiet is True
    assert cfg.general.debug is True
    assert cfg.maven.replace is False
    assert cfg.gradle.replace is True
    assert base.maven.replace is True


def test_skip_replace_keeps_configured_false() -> None:
    base = Config.model_validate({"gradle": {"replace": False}})

    assert base.with_overrides(family="gradle", skip_replace=True).gradle.replace is False
    assert base.with_overrides(family="gradle").gradle.replace is False


def test_section_rejects_unknown_family() -> None:
    with pytest.raises(KeyError):
        Config().section("ant")


def test_deep_merge_is_recursive() -> None:
    merged = deep_merge({"a": {"b": 1, "c": 2}, "d": 1}, {"a": {"c": 3}, "e": 4})

    assert merged == {"a": {"b": 1, "c": 3}, "d": 1, "e": 4}
