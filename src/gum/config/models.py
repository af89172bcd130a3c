# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for the gum launcher."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import DEFAULT_GRADLE_MAPPINGS, DEFAULT_MAVEN_MAPPINGS

FamilyName = Literal["gradle", "maven"]


def _split_mappings(raw: Mapping[str, str]) -> dict[str, list[str]]:
    return {alias: replacement.split() for alias, replacement in raw.items()}


class GeneralSection(BaseModel):
    """Settings shared by every tool family."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    quiet: bool = False
    debug: bool = False
    discovery: list[FamilyName] = Field(default_factory=lambda: ["gradle", "maven"])


class ToolSection(BaseModel):
    """Alias rewriting settings for one tool family."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    replace: bool = True
    mappings: dict[str, list[str]] = Field(default_factory=dict)

    @field_validator("mappings", mode="before")
    @classmethod
    def _coerce_mappings(cls, value: Any) -> Any:
        """Split whitespace separated replacement strings into token lists."""

        if not isinstance(value, Mapping):
            return value
        coerced: dict[str, Any] = {}
        for alias, replacement in value.items():
            coerced[alias] = replacement.split() if isinstance(replacement, str) else replacement
        return coerced


class GradleSection(ToolSection):
    """Gradle alias settings."""

    mappings: dict[str, list[str]] = Field(default_factory=lambda: _split_mappings(DEFAULT_GRADLE_MAPPINGS))


class MavenSection(ToolSection):
    """Maven alias settings."""

    mappings: dict[str, list[str]] = Field(default_factory=lambda: _split_mappings(DEFAULT_MAVEN_MAPPINGS))


class Config(BaseModel):
    """Top-level launcher configuration."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    general: GeneralSection = Field(default_factory=GeneralSection)
    gradle: GradleSection = Field(default_factory=GradleSection)
    maven: MavenSection = Field(default_factory=MavenSection)

    def section(self, family: str) -> ToolSection:
        """Return the alias section belonging to ``family``.

        Raises:
            KeyError: If ``family`` is not a known tool family.
        """

        if family == "gradle":
            return self.gradle
        if family == "maven":
            return self.maven
        raise KeyError(family)

    def with_overrides(
        self,
        *,
        family: str,
        quiet: bool = False,
        debug: bool = False,
        skip_replace: bool = False,
    ) -> Config:
        """Return a copy with command line overrides applied.

        Args:
            family: Tool family whose ``replace`` setting ``skip_replace`` clears.
            quiet: Force quiet output when ``True``.
            debug: Force the debug dump when ``True``.
            skip_replace: Turn alias replacement off for ``family`` when ``True``.

        Returns:
            Config: Updated configuration; ``self`` is left untouched.
        """

        general = self.general.model_copy(
            update={"quiet": self.general.quiet or quiet, "debug": self.general.debug or debug},
        )
        section = self.section(family)
        if skip_replace:
            section = section.model_copy(update={"replace": False})
        return self.model_copy(update={"general": general, family: section})

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="python")


__all__ = [
    "Config",
    "FamilyName",
    "GeneralSection",
    "GradleSection",
    "MavenSection",
    "ToolSection",
]
