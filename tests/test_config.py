# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from multicatalog.config import ConfigError, MultiCatalogConfig, load_config
from multicatalog.constants import LOCAL_BUILD_PATH


def test_defaults_without_files(tmp_path: Path) -> None:
    config = load_config(tmp_path, env={})

    assert config.catalogs == []
    assert config.profile.variables[LOCAL_BUILD_PATH] == "Library/com.unity.addressables/aa/[BuildTarget]"
    assert config.resolved_protected_roots(tmp_path) == [tmp_path / "Library", tmp_path / "Assets"]


def test_project_file_overrides_pyproject(project_root: Path) -> None:
    (project_root / "pyproject.toml").write_text(
        """
[tool.multicatalog]
reserved_bundles = ["*shaders*"]

[tool.multicatalog.profile.variables]
DlcBuildPath = "from/pyproject"
""".strip(),
        encoding="utf-8",
    )

    config = load_config(project_root, env={})

    assert config.reserved_bundles == ["*shaders*"]
    assert config.profile.variables["DlcBuildPath"] == "build/dlc"
    assert config.profile.variables["BuildTarget"] == "StandaloneLinux64"
    [spec] = config.specs()
    assert spec.name == "dlc"
    assert spec.groups == ("g-dlc",)
    assert spec.build_path.id == "DlcBuildPath"


def test_environment_variables_are_expanded(tmp_path: Path) -> None:
    config_path = tmp_path / "custom.toml"
    config_path.write_text('[profile.variables]\nDlcBuildPath = "${OUT_DIR}/dlc"\n', encoding="utf-8")

    config = load_config(tmp_path, config_path=config_path, env={"OUT_DIR": "/tmp/out"})

    assert config.profile.to_profile().value_of("DlcBuildPath") == "/tmp/out/dlc"


def test_missing_explicit_config_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="does not exist"):
        load_config(tmp_path, config_path=tmp_path / "missing.toml")


def test_invalid_toml_raises(tmp_path: Path) -> None:
    (tmp_path / "multicatalog.toml").write_text("[[catalogs]\nname=", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(tmp_path, env={})


def test_duplicate_catalog_names_are_rejected(tmp_path: Path) -> None:
    (tmp_path / "multicatalog.toml").write_text(
        '[[catalogs]]\nname = "dlc"\n\n[[catalogs]]\nname = "dlc"\n',
        encoding="utf-8",
    )

    with pytest.raises(ConfigError, match="duplicate catalog name"):
        load_config(tmp_path, env={})


def test_blank_catalog_name_is_rejected() -> None:
    with pytest.raises(ValueError):
        MultiCatalogConfig.model_validate({"catalogs": [{"name": ""}]})
