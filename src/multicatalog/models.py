# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data model for build manifests, asset groups, and catalog specs."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum
from fnmatch import fnmatch
from typing import Any

from .constants import BUNDLE_SUFFIX, DEFAULT_CATALOG_FILENAME
from .profiles import PathReference


class ResourceKind(str, Enum):
    """Distinguish physically movable bundles from assets packed inside them."""

    BUNDLE = "bundle"
    ASSET = "asset"


@dataclass(frozen=True, slots=True)
class BundleRequestOptions:
    """Provider payload attached to bundle-kind locations."""

    bundle_name: str

    @property
    def bundle_id(self) -> str:
        """Return the bundle identifier used by the bundle-to-group map."""

        return f"{self.bundle_name}{BUNDLE_SUFFIX}"


@dataclass(frozen=True, slots=True)
class Location:
    """One built artifact entry of the flat build manifest.

    Attributes:
        internal_id: Provider-facing locator; for bundles this is the load path.
        provider: Identifier of the provider able to load the artifact.
        keys: Aliases under which the artifact may be requested.
        resource_kind: Whether the entry is a bundle or an asset.
        dependencies: Primary keys of the locations required to load this one.
        payload: Provider-specific data; :class:`BundleRequestOptions` for bundles.
    """

    internal_id: str
    provider: str
    keys: tuple[str, ...]
    resource_kind: ResourceKind = ResourceKind.ASSET
    dependencies: tuple[str, ...] = ()
    payload: Any = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "keys", tuple(self.keys))
        object.__setattr__(self, "dependencies", tuple(self.dependencies))
        if not self.keys:
            raise ValueError(f"location '{self.internal_id}' requires at least one key")

    @property
    def primary_key(self) -> str:
        return self.keys[0]

    @property
    def is_bundle(self) -> bool:
        return self.resource_kind is ResourceKind.BUNDLE

    @property
    def bundle_options(self) -> BundleRequestOptions | None:
        """Return the bundle payload when this is a bundle-kind location."""

        if self.is_bundle and isinstance(self.payload, BundleRequestOptions):
            return self.payload
        return None

    def relocated(self, internal_id: str) -> Location:
        """Return a copy of the location pointing at ``internal_id``."""

        return replace(self, internal_id=internal_id)


@dataclass(frozen=True, slots=True)
class AssetEntry:
    """A single entry of an asset group."""

    guid: str
    bundle_file_id: str | None = None
    is_folder: bool = False
    sub_assets: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class AssetGroup:
    """A user-declared group of asset entries sharing build and load paths."""

    guid: str
    name: str
    build_path: PathReference
    load_path: PathReference
    entries: tuple[AssetEntry, ...] = ()

    def entry_guids(self) -> frozenset[str]:
        """Return the guids of every entry in the group."""

        return frozenset(entry.guid for entry in self.entries)


@dataclass(frozen=True, slots=True)
class CatalogSpec:
    """Declared partition rule for one additional catalog.

    Attributes:
        name: Unique catalog name, also the base name of its manifest file.
        groups: Guids of the asset groups whose content belongs to the catalog.
        build_path: Reference to the directory receiving the catalog output.
        load_path: Reference to the runtime prefix the content is loaded from.
    """

    name: str
    groups: tuple[str, ...]
    build_path: PathReference
    load_path: PathReference


class BuildContext:
    """Inputs produced by the asset build pipeline for one build pass."""

    def __init__(
        self,
        locations: Sequence[Location],
        groups: Iterable[AssetGroup],
        bundle_to_group: Mapping[str, str],
        *,
        runtime_catalog_filename: str = DEFAULT_CATALOG_FILENAME,
    ) -> None:
        self.locations: list[Location] = list(locations)
        self.groups: list[AssetGroup] = list(groups)
        self.bundle_to_group: dict[str, str] = dict(bundle_to_group)
        self.runtime_catalog_filename = runtime_catalog_filename
        self._groups_by_guid = {group.guid: group for group in self.groups}
        self._entries_by_bundle_file: dict[str, AssetEntry] = {}
        for group in self.groups:
            for entry in group.entries:
                if entry.bundle_file_id and not entry.is_folder:
                    self._entries_by_bundle_file.setdefault(entry.bundle_file_id, entry)

    def find_group(self, guid: str) -> AssetGroup | None:
        """Return the group with ``guid`` or ``None`` when it does not exist."""

        return self._groups_by_guid.get(guid)

    def entry_for_bundle_file(self, bundle_file_id: str) -> AssetEntry | None:
        """Return the first non-folder asset entry packed into ``bundle_file_id``."""

        return self._entries_by_bundle_file.get(bundle_file_id)

    def group_for_bundle(self, location: Location) -> AssetGroup | None:
        """Return the group owning the bundle behind ``location``.

        Returns ``None`` when the location carries no bundle payload, the
        bundle is unknown to the pipeline, or the group no longer exists.
        """

        options = location.bundle_options
        if options is None:
            return None
        guid = self.bundle_to_group.get(options.bundle_id)
        if guid is None:
            return None
        return self.find_group(guid)


def is_reserved_bundle(location: Location, patterns: Iterable[str]) -> bool:
    """Return ``True`` when ``location`` is a bundle matching a reserved pattern."""

    options = location.bundle_options
    if options is None:
        return False
    name = options.bundle_name.lower()
    return any(fnmatch(name, pattern.lower()) for pattern in patterns)


__all__ = [
    "AssetEntry",
    "AssetGroup",
    "BuildContext",
    "BundleRequestOptions",
    "CatalogSpec",
    "Location",
    "ResourceKind",
    "is_reserved_bundle",
]
