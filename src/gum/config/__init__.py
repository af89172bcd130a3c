# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders."""

from __future__ import annotations

from ..errors import ConfigError
from .loader import ConfigLoader, ConfigLoadResult, ConfigSource, load_config
from .models import Config, FamilyName, GeneralSection, GradleSection, MavenSection, ToolSection
from .sources import DefaultConfigSource, TomlConfigSource

__all__ = [
    "Config",
    "ConfigError",
    "ConfigLoadResult",
    "ConfigLoader",
    "ConfigSource",
    "DefaultConfigSource",
    "FamilyName",
    "GeneralSection",
    "GradleSection",
    "MavenSection",
    "TomlConfigSource",
    "ToolSection",
    "load_config",
]
