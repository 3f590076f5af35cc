# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for assigning manifest locations to catalogs."""

from __future__ import annotations

import pytest

from multicatalog.closure import DependencyCloser
from multicatalog.constants import DEFAULT_CATALOG_IDENTIFIER
from multicatalog.diagnostics import DiagnosticKind
from multicatalog.errors import CatalogConfigurationError
from multicatalog.models import AssetEntry, BuildContext
from multicatalog.partition import Partitioner

from .helpers.catalogs import asset, bundle, entry, group, make_profile, spec


def _partition(context: BuildContext, *specs, **profile_vars):
    partitioner = Partitioner(context, make_profile(**profile_vars), use_emoji=False)
    return partitioner.partition(list(specs))


def test_unclaimed_locations_stay_in_default_then_closure_shares_dependency() -> None:
    a = asset("a")
    b = asset("b", "a")
    context = BuildContext([a, b], [group("g-base", entry("a")), group("g-dlc", entry("b"))], {})

    result = _partition(context, spec("S", "g-dlc"))
    setup = result.setups[0]

    assert result.default_catalog.keys == ["a"]
    assert setup.build_info.keys == ["b"]

    diagnostics = DependencyCloser(result.default_catalog, use_emoji=False).close(setup.build_info)

    assert diagnostics == []
    assert setup.build_info.keys == ["b", "a"]
    assert result.default_catalog.keys == ["a"]
    assert setup.build_info.locations[1] is a


def test_first_declared_spec_wins() -> None:
    b = asset("b")
    context = BuildContext([b], [group("g-dlc", entry("b"))], {})

    result = _partition(context, spec("first", "g-dlc"), spec("second", "g-dlc"))

    assert result.setups[0].build_info.keys == ["b"]
    assert result.setups[1].is_empty
    assert [catalog.identifier for catalog in result.catalogs()] == [DEFAULT_CATALOG_IDENTIFIER, "first"]


def test_every_location_has_exactly_one_home() -> None:
    dlc_bundle = bundle("dlc_assets")
    locations = [asset("a"), asset("b", "dlc_assets.bundle"), dlc_bundle, asset("c", "a")]
    context = BuildContext(
        locations,
        [group("g-dlc", entry("b", dlc_bundle)), group("g-extra", entry("c"))],
        {"dlc_assets.bundle": "g-dlc"},
    )

    result = _partition(context, spec("dlc", "g-dlc"), spec("extra", "g-extra"))

    homes = {location.primary_key: result.home_of(location.primary_key) for location in locations}
    assert homes == {
        "a": DEFAULT_CATALOG_IDENTIFIER,
        "b": "dlc",
        "dlc_assets.bundle": "dlc",
        "c": "extra",
    }
    total = sum(len(catalog) for catalog in result.catalogs())
    assert total == len(locations)


def test_bundle_moved_into_catalog_gets_catalog_load_path() -> None:
    dlc_bundle = bundle("dlc_assets")
    context = BuildContext(
        [dlc_bundle],
        [group("g-dlc", entry("b", dlc_bundle))],
        {"dlc_assets.bundle": "g-dlc"},
    )

    result = _partition(context, spec("dlc", "g-dlc"))
    setup = result.setups[0]
    relocated = setup.build_info.locations[0]

    assert relocated.internal_id == "https://cdn.example.com/dlc/dlc_assets.bundle"
    assert relocated is not dlc_bundle
    assert relocated.keys == dlc_bundle.keys
    assert relocated.payload == dlc_bundle.payload
    assert dlc_bundle.internal_id == "{Runtime}/default/dlc_assets.bundle"
    assert setup.bundles == [dlc_bundle]


def test_bundle_with_pinned_load_path_keeps_it() -> None:
    dlc_bundle = bundle("dlc_assets")
    pinned = group("g-dlc", entry("b", dlc_bundle), load_path="PinnedLoadPath")
    context = BuildContext([dlc_bundle], [pinned], {"dlc_assets.bundle": "g-dlc"})

    result = _partition(context, spec("dlc", "g-dlc"), PinnedLoadPath="https://pinned.example.com/content/")

    assert result.setups[0].build_info.locations[0].internal_id == "https://pinned.example.com/content/dlc_assets.bundle"


def test_bundle_without_owning_group_is_dropped_with_diagnostic() -> None:
    dlc_bundle = bundle("dlc_assets")
    b = asset("b")
    context = BuildContext([dlc_bundle, b], [group("g-dlc", entry("b", dlc_bundle))], {})

    result = _partition(context, spec("dlc", "g-dlc"))

    assert [diagnostic.kind for diagnostic in result.diagnostics] == [DiagnosticKind.MISSING_GROUP]
    assert result.diagnostics[0].subject == dlc_bundle.internal_id
    assert result.setups[0].build_info.keys == ["b"]
    assert result.home_of("dlc_assets.bundle") is None


def test_reserved_shader_bundle_keeps_default_load_path() -> None:
    shaders = bundle("defaultlocalgroup_unitybuiltinshaders")
    context = BuildContext(
        [shaders],
        [group("g-dlc", entry("shader", shaders))],
        {"defaultlocalgroup_unitybuiltinshaders.bundle": "g-dlc"},
    )

    result = _partition(context, spec("dlc", "g-dlc"))

    assert result.setups[0].build_info.locations[0] is shaders
    assert result.setups[0].bundles == [shaders]


def test_spec_catalog_paths_and_registration() -> None:
    context = BuildContext([asset("b")], [group("g-dlc", entry("b"))], {}, runtime_catalog_filename="catalog.json")

    result = _partition(context, spec("dlc", "g-dlc"))
    default, dlc = result.catalogs()

    assert default.filename == "catalog.json"
    assert default.register is True
    assert default.build_path == "build/default"
    assert dlc.filename == "dlc.json"
    assert dlc.register is False
    assert dlc.build_path == "build/dlc"
    assert dlc.load_path == "https://cdn.example.com/dlc"


def test_spec_with_empty_build_path_is_rejected() -> None:
    context = BuildContext([asset("b")], [group("g-dlc", entry("b"))], {})

    with pytest.raises(CatalogConfigurationError, match="build path"):
        _partition(context, spec("dlc", "g-dlc", build_path=""))


def test_spec_without_groups_claims_nothing() -> None:
    context = BuildContext([asset("a")], [group("g-base", entry("a"))], {})

    result = _partition(context, spec("empty"), None)

    assert result.default_catalog.keys == ["a"]
    assert len(result.setups) == 1
    assert result.catalogs() == [result.default_catalog]


def test_folder_entries_claim_sub_assets_and_folder_bundles() -> None:
    folder_bundle = bundle("folder_assets")
    folder = AssetEntry(guid="folder", bundle_file_id=folder_bundle.internal_id, is_folder=True, sub_assets=("c",))
    context = BuildContext(
        [asset("c"), folder_bundle],
        [group("g-dlc", folder)],
        {"folder_assets.bundle": "g-dlc"},
    )

    result = _partition(context, spec("dlc", "g-dlc"))

    assert result.default_catalog.is_empty
    assert result.setups[0].build_info.keys == ["c", "folder_assets.bundle"]
