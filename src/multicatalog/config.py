# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and TOML loading for catalog declarations."""

from __future__ import annotations

import os
import re
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .constants import (
    CONFIG_FILENAME,
    LOCAL_BUILD_PATH,
    LOCAL_LOAD_PATH,
    PROTECTED_ROOT_NAMES,
    PYPROJECT_FILENAME,
    PYPROJECT_SECTION,
    RESERVED_BUNDLE_PATTERNS,
)
from .models import CatalogSpec
from .profiles import PathReference, Profile

_ENV_VAR_PATTERN: Final[re.Pattern[str]] = re.compile(r"\$(\w+)|\$\{([^}]+)\}")

DEFAULT_PROFILE_VARIABLES: Final[dict[str, str]] = {
    "BuildTarget": "StandaloneLinux64",
    LOCAL_BUILD_PATH: "Library/com.unity.addressables/aa/[BuildTarget]",
    LOCAL_LOAD_PATH: "{UnityEngine.AddressableAssets.Addressables.RuntimePath}/[BuildTarget]",
}


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class CatalogSpecConfig(BaseModel):
    """Declaration of one additional catalog."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    name: str = Field(min_length=1)
    groups: list[str] = Field(default_factory=list)
    build_path: str = ""
    load_path: str = ""

    def to_spec(self) -> CatalogSpec:
        """Return the runtime spec with unresolved path references."""

        return CatalogSpec(
            name=self.name,
            groups=tuple(self.groups),
            build_path=PathReference(self.build_path),
            load_path=PathReference(self.load_path),
        )


class ProfileConfig(BaseModel):
    """Active profile supplying values for path references."""

    model_config = ConfigDict(validate_assignment=True)

    name: str = "Default"
    variables: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_PROFILE_VARIABLES))

    def to_profile(self) -> Profile:
        """Return the profile used to resolve path references."""

        return Profile.from_mapping(self.variables, name=self.name)


class MultiCatalogConfig(BaseModel):
    """Primary configuration container."""

    model_config = ConfigDict(validate_assignment=True)

    catalogs: list[CatalogSpecConfig] = Field(default_factory=list)
    profile: ProfileConfig = Field(default_factory=ProfileConfig)
    protected_roots: list[Path] = Field(default_factory=lambda: [Path(name) for name in PROTECTED_ROOT_NAMES])
    reserved_bundles: list[str] = Field(default_factory=lambda: list(RESERVED_BUNDLE_PATTERNS))
    default_build_path: str = LOCAL_BUILD_PATH
    default_load_path: str = LOCAL_LOAD_PATH

    @model_validator(mode="after")
    def _check_unique_names(self) -> MultiCatalogConfig:
        seen: set[str] = set()
        for catalog in self.catalogs:
            if catalog.name in seen:
                raise ValueError(f"duplicate catalog name '{catalog.name}'")
            seen.add(catalog.name)
        return self

    def specs(self) -> list[CatalogSpec]:
        """Return catalog specs in declaration order."""

        return [catalog.to_spec() for catalog in self.catalogs]

    def resolved_protected_roots(self, project_root: Path) -> list[Path]:
        """Return protected roots with relative entries anchored at ``project_root``.

        Args:
            project_root: Directory relative roots are resolved against.

        Returns:
            list[Path]: Absolute or root-anchored protected directories.
        """

        return [root if root.is_absolute() else project_root / root for root in self.protected_roots]


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _expand_env_value(value: Any, env: Mapping[str, str]) -> Any:
    if isinstance(value, str):
        return _ENV_VAR_PATTERN.sub(lambda match: _lookup_env(match, env), value)
    if isinstance(value, Mapping):
        return {key: _expand_env_value(item, env) for key, item in value.items()}
    if isinstance(value, list):
        return [_expand_env_value(item, env) for item in value]
    return value


def _lookup_env(match: re.Match[str], env: Mapping[str, str]) -> str:
    key = match.group(1) or match.group(2)
    return env.get(key, match.group(0))


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Unable to read {path}: {exc}") from exc


def _pyproject_section(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    tool_section = _read_toml(path).get("tool")
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION)
    return dict(section) if isinstance(section, Mapping) else {}


def load_config(
    project_root: Path,
    *,
    config_path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> MultiCatalogConfig:
    """Load configuration for ``project_root``.

    Sources are layered with increasing precedence: built-in defaults,
    ``[tool.multicatalog]`` in ``pyproject.toml``, then ``multicatalog.toml``
    (or ``config_path`` when given). ``$VAR`` and ``${VAR}`` tokens are
    expanded from ``env``.

    Args:
        project_root: Directory holding the project configuration files.
        config_path: Explicit configuration file replacing ``multicatalog.toml``.
        env: Environment used for variable expansion. Defaults to ``os.environ``.

    Returns:
        MultiCatalogConfig: Validated configuration.

    Raises:
        ConfigError: If a file is unreadable, malformed, or fails validation.
    """

    defaults: dict[str, Any] = {"profile": {"variables": dict(DEFAULT_PROFILE_VARIABLES)}}
    merged = _deep_merge(defaults, _pyproject_section(project_root / PYPROJECT_FILENAME))
    if config_path is not None:
        if not config_path.is_file():
            raise ConfigError(f"Configuration file {config_path} does not exist")
        merged = _deep_merge(merged, _read_toml(config_path))
    elif (project_root / CONFIG_FILENAME).is_file():
        merged = _deep_merge(merged, _read_toml(project_root / CONFIG_FILENAME))

    expanded = _expand_env_value(merged, env if env is not None else os.environ)
    try:
        return MultiCatalogConfig.model_validate(expanded)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


__all__ = [
    "CatalogSpecConfig",
    "ConfigError",
    "DEFAULT_PROFILE_VARIABLES",
    "MultiCatalogConfig",
    "ProfileConfig",
    "load_config",
]
