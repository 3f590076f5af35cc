# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

CONFIG_TOML = """
[profile.variables]
LocalBuildPath = "build/default"
LocalLoadPath = "{Runtime}/default"
DlcBuildPath = "build/dlc"
DlcLoadPath = "https://cdn.example.com/dlc"

[[catalogs]]
name = "dlc"
groups = ["g-dlc"]
build_path = "DlcBuildPath"
load_path = "DlcLoadPath"
""".strip()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Return a project directory holding a configuration and a build manifest."""

    (tmp_path / "multicatalog.toml").write_text(CONFIG_TOML, encoding="utf-8")
    manifest = {
        "runtime_catalog_filename": "catalog.json",
        "locations": [
            {"internal_id": "Assets/a.prefab", "provider": "AssetProvider", "keys": ["a"]},
            {
                "internal_id": "Assets/b.prefab",
                "provider": "AssetProvider",
                "keys": ["b"],
                "dependencies": ["dlc_assets.bundle", "a"],
            },
            {
                "internal_id": "{Runtime}/default/dlc_assets.bundle",
                "provider": "AssetBundleProvider",
                "keys": ["dlc_assets.bundle"],
                "resource_kind": "bundle",
                "data": {"bundle_name": "dlc_assets"},
            },
        ],
        "groups": [
            {"guid": "g-base", "name": "Base", "entries": [{"guid": "a"}]},
            {
                "guid": "g-dlc",
                "name": "Dlc",
                "entries": [{"guid": "b", "bundle_file_id": "{Runtime}/default/dlc_assets.bundle"}],
            },
        ],
        "bundle_to_group": {"dlc_assets.bundle": "g-dlc"},
    }
    (tmp_path / "manifest.json").write_text(json.dumps(manifest), encoding="utf-8")
    return tmp_path
