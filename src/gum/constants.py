# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants used across gum modules."""

from __future__ import annotations

from typing import Final

DIRNAME_TOKEN: Final[str] = "{dirname}"

GRADLE_BUILD_CANDIDATES: Final[tuple[str, ...]] = (
    "build.gradle",
    "build.gradle.kts",
    f"{DIRNAME_TOKEN}.gradle",
    f"{DIRNAME_TOKEN}.gradle.kts",
)
GRADLE_SETTINGS_CANDIDATES: Final[tuple[str, ...]] = ("settings.gradle", "settings.gradle.kts")
GRADLE_ROOT_CANDIDATES: Final[tuple[str, ...]] = ("build.gradle", "build.gradle.kts")
MAVEN_BUILD_CANDIDATES: Final[tuple[str, ...]] = ("pom.xml",)

GRADLE_WRAPPER: Final[str] = "gradlew"
GRADLE_EXECUTABLE: Final[str] = "gradle"
MAVEN_WRAPPER: Final[str] = "mvnw"
MAVEN_EXECUTABLE: Final[str] = "mvn"
WINDOWS_SUFFIX: Final[str] = ".bat"

# Tool-selection flags recognised for each family.
GRADLE_BUILD_FILE_FLAGS: Final[tuple[str, ...]] = ("-b", "--build-file")
GRADLE_SETTINGS_FILE_FLAGS: Final[tuple[str, ...]] = ("-c", "--settings-file")
GRADLE_PROJECT_DIR_FLAGS: Final[tuple[str, ...]] = ("-p", "--project-dir")
MAVEN_FILE_FLAGS: Final[tuple[str, ...]] = ("-f", "--file")

# Meta-flags consumed by the launcher and never forwarded.
NEAREST_FLAG: Final[str] = "-gn"
DEBUG_FLAG: Final[str] = "-gd"
REPLACE_FLAG: Final[str] = "-gr"

# Launcher-level flags handled by the command line frontend.
FORCE_GRADLE_FLAG: Final[str] = "-gg"
FORCE_MAVEN_FLAG: Final[str] = "-gm"
QUIET_FLAG: Final[str] = "-gq"
VERSION_FLAG: Final[str] = "-gv"
HELP_FLAG: Final[str] = "-gh"
SHOW_CONFIG_FLAG: Final[str] = "-gc"

CONFIG_FILE_NAME: Final[str] = ".gm.toml"

EXIT_FAILURE: Final[int] = 1

GRADLE_WRAPPER_DOCS: Final[str] = "https://gradle.org/docs/current/userguide/gradle_wrapper.html"
GRADLE_INSTALL_DOCS: Final[str] = "https://gradle.org/docs/current/userguide/installation.html"
MAVEN_WRAPPER_DOCS: Final[str] = "https://maven.apache.org/wrapper/"
MAVEN_INSTALL_DOCS: Final[str] = "https://maven.apache.org/download.cgi"

DEFAULT_GRADLE_MAPPINGS: Final[dict[str, str]] = {
    "compile": "classes",
    "package": "assemble",
    "verify": "build",
    "install": "publishToMavenLocal",
    "deploy": "publish",
}
DEFAULT_MAVEN_MAPPINGS: Final[dict[str, str]] = {
    "classes": "compile",
    "assemble": "package",
    "build": "verify",
    "publishToMavenLocal": "install",
    "publish": "deploy",
}

__all__ = [
    "CONFIG_FILE_NAME",
    "DEBUG_FLAG",
    "DEFAULT_GRADLE_MAPPINGS",
    "DEFAULT_MAVEN_MAPPINGS",
    "DIRNAME_TOKEN",
    "EXIT_FAILURE",
    "FORCE_GRADLE_FLAG",
    "FORCE_MAVEN_FLAG",
    "GRADLE_BUILD_CANDIDATES",
    "GRADLE_BUILD_FILE_FLAGS",
    "GRADLE_EXECUTABLE",
    "GRADLE_INSTALL_DOCS",
    "GRADLE_PROJECT_DIR_FLAGS",
    "GRADLE_ROOT_CANDIDATES",
    "GRADLE_SETTINGS_CANDIDATES",
    "GRADLE_SETTINGS_FILE_FLAGS",
    "GRADLE_WRAPPER",
    "GRADLE_WRAPPER_DOCS",
    "HELP_FLAG",
    "MAVEN_BUILD_CANDIDATES",
    "MAVEN_EXECUTABLE",
    "MAVEN_FILE_FLAGS",
    "MAVEN_INSTALL_DOCS",
    "MAVEN_WRAPPER",
    "MAVEN_WRAPPER_DOCS",
    "NEAREST_FLAG",
    "QUIET_FLAG",
    "REPLACE_FLAG",
    "SHOW_CONFIG_FLAG",
    "VERSION_FLAG",
    "WINDOWS_SUFFIX",
]
