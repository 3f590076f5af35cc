# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for manifest reading and plan writing."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from multicatalog.builder import MultiCatalogBuilder
from multicatalog.config import load_config
from multicatalog.errors import ManifestError
from multicatalog.manifest import load_manifest, write_plan
from multicatalog.models import BundleRequestOptions, ResourceKind


def test_load_manifest_builds_context(project_root: Path) -> None:
    context = load_manifest(project_root / "manifest.json")

    assert [location.primary_key for location in context.locations] == ["a", "b", "dlc_assets.bundle"]
    bundle_location = context.locations[2]
    assert bundle_location.resource_kind is ResourceKind.BUNDLE
    assert bundle_location.payload == BundleRequestOptions(bundle_name="dlc_assets")
    assert context.group_for_bundle(bundle_location).guid == "g-dlc"
    assert context.runtime_catalog_filename == "catalog.json"


def test_invalid_manifest_raises(tmp_path: Path) -> None:
    path = tmp_path / "manifest.json"
    path.write_text(json.dumps({"locations": [{"internal_id": "x", "keys": []}]}), encoding="utf-8")

    with pytest.raises(ManifestError, match="Invalid manifest"):
        load_manifest(path)


def test_unreadable_manifest_raises(tmp_path: Path) -> None:
    with pytest.raises(ManifestError, match="Unable to read"):
        load_manifest(tmp_path / "missing.json")


def test_write_plan_lists_default_catalog_first(project_root: Path) -> None:
    builder = MultiCatalogBuilder(load_config(project_root, env={}), project_root=project_root, use_emoji=False)
    result = builder.plan(load_manifest(project_root / "manifest.json"))
    output = project_root / "out" / "plan.json"

    write_plan(result.catalogs(), output)

    document = json.loads(output.read_text(encoding="utf-8"))
    default, dlc = document["catalogs"]
    assert default["identifier"] == "AddressablesMainContentCatalog"
    assert [entry["keys"][0] for entry in default["locations"]] == ["a"]
    assert dlc["filename"] == "dlc.json"
    assert dlc["register"] is False
    assert [entry["internal_id"] for entry in dlc["locations"]] == [
        "Assets/b.prefab",
        "https://cdn.example.com/dlc/dlc_assets.bundle",
        "Assets/a.prefab",
    ]
