# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Read build manifests and write catalog plans as JSON documents."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .catalog import CatalogBuildInfo
from .constants import DEFAULT_CATALOG_FILENAME, LOCAL_BUILD_PATH, LOCAL_LOAD_PATH
from .errors import ManifestError
from .models import AssetEntry, AssetGroup, BuildContext, BundleRequestOptions, Location, ResourceKind
from .profiles import PathReference


class LocationDocument(BaseModel):
    """Serialized manifest location."""

    model_config = ConfigDict(extra="ignore")

    internal_id: str
    provider: str = ""
    keys: list[str] = Field(min_length=1)
    resource_kind: ResourceKind = ResourceKind.ASSET
    dependencies: list[str] = Field(default_factory=list)
    data: dict[str, Any] | None = None

    def to_location(self) -> Location:
        payload: Any = self.data
        if self.resource_kind is ResourceKind.BUNDLE and self.data and "bundle_name" in self.data:
            payload = BundleRequestOptions(bundle_name=str(self.data["bundle_name"]))
        return Location(
            internal_id=self.internal_id,
            provider=self.provider,
            keys=tuple(self.keys),
            resource_kind=self.resource_kind,
            dependencies=tuple(self.dependencies),
            payload=payload,
        )


class EntryDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    guid: str
    bundle_file_id: str | None = None
    is_folder: bool = False
    sub_assets: list[str] = Field(default_factory=list)


class GroupDocument(BaseModel):
    """Serialized asset group."""

    model_config = ConfigDict(extra="ignore")

    guid: str
    name: str = ""
    build_path: str = LOCAL_BUILD_PATH
    load_path: str = LOCAL_LOAD_PATH
    entries: list[EntryDocument] = Field(default_factory=list)

    def to_group(self) -> AssetGroup:
        return AssetGroup(
            guid=self.guid,
            name=self.name or self.guid,
            build_path=PathReference(self.build_path),
            load_path=PathReference(self.load_path),
            entries=tuple(
                AssetEntry(
                    guid=entry.guid,
                    bundle_file_id=entry.bundle_file_id,
                    is_folder=entry.is_folder,
                    sub_assets=tuple(entry.sub_assets),
                )
                for entry in self.entries
            ),
        )


class ManifestDocument(BaseModel):
    """Top-level build manifest produced by the asset build pipeline."""

    model_config = ConfigDict(extra="ignore")

    runtime_catalog_filename: str = DEFAULT_CATALOG_FILENAME
    locations: list[LocationDocument] = Field(default_factory=list)
    groups: list[GroupDocument] = Field(default_factory=list)
    bundle_to_group: dict[str, str] = Field(default_factory=dict)

    def to_context(self) -> BuildContext:
        return BuildContext(
            [location.to_location() for location in self.locations],
            [group.to_group() for group in self.groups],
            self.bundle_to_group,
            runtime_catalog_filename=self.runtime_catalog_filename,
        )


def load_manifest(path: Path) -> BuildContext:
    """Return the build context described by the JSON manifest at ``path``.

    Raises:
        ManifestError: If the file cannot be read or does not validate.
    """

    try:
        payload = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"Unable to read manifest {path}: {exc}") from exc
    try:
        document = ManifestDocument.model_validate_json(payload)
    except ValidationError as exc:
        raise ManifestError(f"Invalid manifest {path}: {exc}") from exc
    return document.to_context()


def catalog_to_dict(catalog: CatalogBuildInfo) -> dict[str, Any]:
    """Return a JSON-serialisable summary of ``catalog``."""

    return {
        "identifier": catalog.identifier,
        "filename": catalog.filename,
        "build_path": catalog.build_path,
        "load_path": catalog.load_path,
        "register": catalog.register,
        "locations": [
            {"internal_id": location.internal_id, "keys": list(location.keys)} for location in catalog.locations
        ],
    }


def write_plan(catalogs: Sequence[CatalogBuildInfo], path: Path) -> None:
    """Write a JSON plan listing ``catalogs`` and their locations to ``path``."""

    path.parent.mkdir(parents=True, exist_ok=True)
    document = {"catalogs": [catalog_to_dict(catalog) for catalog in catalogs]}
    path.write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")


__all__ = [
    "ManifestDocument",
    "catalog_to_dict",
    "load_manifest",
    "write_plan",
]
