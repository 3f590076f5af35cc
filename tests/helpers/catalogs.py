# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Builders for locations, groups and specs used across the test-suite."""

from __future__ import annotations

from collections.abc import Sequence

from multicatalog.constants import LOCAL_BUILD_PATH, LOCAL_LOAD_PATH
from multicatalog.models import (
    AssetEntry,
    AssetGroup,
    BundleRequestOptions,
    CatalogSpec,
    Location,
    ResourceKind,
)
from multicatalog.profiles import PathReference, Profile

RUNTIME_PREFIX = "{Runtime}/default"


def make_profile(**extra: str) -> Profile:
    variables = {
        LOCAL_BUILD_PATH: "build/default",
        LOCAL_LOAD_PATH: RUNTIME_PREFIX,
        "DlcBuildPath": "build/dlc",
        "DlcLoadPath": "https://cdn.example.com/dlc",
    }
    variables.update(extra)
    return Profile(name="Test", variables=variables)


def asset(key: str, *dependencies: str, aliases: Sequence[str] = ()) -> Location:
    return Location(
        internal_id=f"Assets/{key}.prefab",
        provider="AssetProvider",
        keys=(key, *aliases),
        resource_kind=ResourceKind.ASSET,
        dependencies=dependencies,
    )


def bundle(name: str, *dependencies: str, prefix: str = RUNTIME_PREFIX) -> Location:
    file_name = f"{name}.bundle"
    return Location(
        internal_id=f"{prefix}/{file_name}",
        provider="AssetBundleProvider",
        keys=(file_name,),
        resource_kind=ResourceKind.BUNDLE,
        dependencies=dependencies,
        payload=BundleRequestOptions(bundle_name=name),
    )


def group(
    guid: str,
    *entries: AssetEntry,
    build_path: str = LOCAL_BUILD_PATH,
    load_path: str = LOCAL_LOAD_PATH,
) -> AssetGroup:
    return AssetGroup(
        guid=guid,
        name=guid.title(),
        build_path=PathReference(build_path),
        load_path=PathReference(load_path),
        entries=entries,
    )


def entry(guid: str, bundle_location: Location | None = None) -> AssetEntry:
    bundle_file_id = bundle_location.internal_id if bundle_location is not None else None
    return AssetEntry(guid=guid, bundle_file_id=bundle_file_id)


def spec(
    name: str,
    *groups: str,
    build_path: str = "DlcBuildPath",
    load_path: str = "DlcLoadPath",
) -> CatalogSpec:
    return CatalogSpec(
        name=name,
        groups=groups,
        build_path=PathReference(build_path),
        load_path=PathReference(load_path),
    )


__all__ = ["RUNTIME_PREFIX", "asset", "bundle", "entry", "group", "make_profile", "spec"]
