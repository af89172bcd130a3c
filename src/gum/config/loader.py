# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Config loading with layered precedence and traceability."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..constants import CONFIG_FILE_NAME
from ..errors import ConfigError
from .models import Config
from .sources import DefaultConfigSource, TomlConfigSource, deep_merge


@runtime_checkable
class ConfigSource(Protocol):
    """Provide one layer of raw configuration data."""

    name: str

    def load(self) -> Mapping[str, Any]:
        """Return the raw configuration mapping for this layer."""

        raise NotImplementedError

    def describe(self) -> str:
        """Return a human readable description of the layer."""

        raise NotImplementedError


class ConfigLoadResult(BaseModel):
    """Container bundling a resolved config with the layers that shaped it."""

    model_config = ConfigDict(validate_assignment=True)

    config: Config
    sources: list[str] = Field(default_factory=list)


class ConfigLoader:
    """Apply layered configuration sources with predictable precedence."""

    def __init__(self, sources: Sequence[ConfigSource]) -> None:
        """Initialise a loader that merges the supplied configuration sources.

        Args:
            sources: Ordered collection of configuration sources, lowest
                precedence first.
        """

        if not sources:
            raise ValueError("at least one configuration source is required")
        self._sources = list(sources)

    @classmethod
    def for_project(cls, root_dir: Path | None, *, home: Path | None = None) -> ConfigLoader:
        """Return a loader for defaults, the user file and the project file.

        Args:
            root_dir: Project root holding an optional ``.gm.toml``.
            home: User home directory; defaults to ``Path.home()``.

        Returns:
            ConfigLoader: Loader with the standard layer stack.
        """

        home_dir = Path.home() if home is None else home
        sources: list[ConfigSource] = [DefaultConfigSource()]
        user_file = home_dir / CONFIG_FILE_NAME
        sources.append(TomlConfigSource(user_file))
        if root_dir is not None:
            project_file = root_dir / CONFIG_FILE_NAME
            if project_file != user_file:
                sources.append(TomlConfigSource(project_file))
        return cls(sources)

    def load_with_trace(self) -> ConfigLoadResult:
        """Merge every source and validate the result.

        Returns:
            ConfigLoadResult: Validated configuration plus contributing layers.

        Raises:
            ConfigError: If a layer cannot be read or fails validation.
        """

        merged: dict[str, Any] = {}
        applied: list[str] = []
        for source in self._sources:
            fragment = source.load()
            if not fragment:
                continue
            candidate = deep_merge(merged, fragment)
            try:
                Config.model_validate(candidate)
            except ValidationError as exc:
                raise ConfigError(f"Invalid configuration in {source.describe()}: {exc}") from exc
            merged = candidate
            applied.append(source.describe())
        return ConfigLoadResult(config=Config.model_validate(merged), sources=applied)

    def load(self) -> Config:
        return self.load_with_trace().config


def load_config(root_dir: Path | None) -> Config:
    """Return the effective configuration for ``root_dir``.

    This is the default :data:`~gum.interfaces.ConfigProvider`.
    """

    return ConfigLoader.for_project(root_dir).load()


__all__ = ["ConfigLoadResult", "ConfigLoader", "ConfigSource", "load_config"]
