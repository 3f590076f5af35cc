# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants used across multicatalog modules."""

from __future__ import annotations

from typing import Final

DEFAULT_CATALOG_IDENTIFIER: Final[str] = "AddressablesMainContentCatalog"
DEFAULT_CATALOG_FILENAME: Final[str] = "catalog.json"

BUNDLE_SUFFIX: Final[str] = ".bundle"

# Profile variables naming the shared default output and runtime locations.
LOCAL_BUILD_PATH: Final[str] = "LocalBuildPath"
LOCAL_LOAD_PATH: Final[str] = "LocalLoadPath"

# The built-in shader bundle must stay loadable from the default catalog.
RESERVED_BUNDLE_PATTERNS: Final[tuple[str, ...]] = ("*unitybuiltinshaders*",)

# Persistent library root and primary source root of a project.
PROTECTED_ROOT_NAMES: Final[tuple[str, ...]] = ("Library", "Assets")

CONFIG_FILENAME: Final[str] = "multicatalog.toml"
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_SECTION: Final[str] = "multicatalog"

LOAD_PATH_SEPARATORS: Final[tuple[str, ...]] = ("/", "\\")

__all__ = [
    "BUNDLE_SUFFIX",
    "CONFIG_FILENAME",
    "DEFAULT_CATALOG_FILENAME",
    "DEFAULT_CATALOG_IDENTIFIER",
    "LOAD_PATH_SEPARATORS",
    "LOCAL_BUILD_PATH",
    "LOCAL_LOAD_PATH",
    "PROTECTED_ROOT_NAMES",
    "PYPROJECT_FILENAME",
    "PYPROJECT_SECTION",
    "RESERVED_BUNDLE_PATTERNS",
]
