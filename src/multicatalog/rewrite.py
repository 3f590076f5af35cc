# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Recompute runtime load paths of bundles moved into another catalog."""

from __future__ import annotations

from .constants import LOAD_PATH_SEPARATORS, LOCAL_LOAD_PATH
from .models import AssetGroup, Location
from .profiles import Profile, resolve_reference


def bundle_file_name(internal_id: str) -> str:
    """Return the trailing file name of ``internal_id`` (either separator style)."""

    name = internal_id
    for separator in LOAD_PATH_SEPARATORS:
        name = name.rsplit(separator, 1)[-1]
    return name


def join_load_path(prefix: str, file_name: str) -> str:
    """Append ``file_name`` to ``prefix`` with exactly one separator between them."""

    if not prefix:
        return file_name
    if prefix.endswith(LOAD_PATH_SEPARATORS):
        return f"{prefix}{file_name}"
    return f"{prefix}/{file_name}"


class PathRewriter:
    """Rebase bundles that still use the shared default load path.

    Groups that pin an explicit load path keep it; only groups pointing at the
    profile's default local load path are redirected to the catalog's runtime
    load path.
    """

    def __init__(self, profile: Profile, *, default_load_path: str = LOCAL_LOAD_PATH) -> None:
        self._profile = profile
        self._default_load_path = default_load_path

    def uses_default_load_path(self, group: AssetGroup) -> bool:
        """Return ``True`` when ``group`` loads from the profile's default load path.

        Args:
            group: Group owning a bundle being moved.

        Returns:
            bool: Whether the group's load path reference is the default one.
        """

        return group.load_path.id == self._default_load_path

    def load_path_prefix(self, group: AssetGroup, catalog_load_path: str) -> str:
        """Return the runtime prefix bundles of ``group`` load from.

        Args:
            group: Group owning the bundle.
            catalog_load_path: Resolved runtime load path of the target catalog.

        Returns:
            str: ``catalog_load_path`` for default groups, otherwise the
            group's own resolved load path.
        """

        if self.uses_default_load_path(group):
            return catalog_load_path
        return resolve_reference(group.load_path, self._profile)

    def rewrite(self, location: Location, group: AssetGroup, catalog_load_path: str) -> str:
        """Return the runtime load path of ``location`` inside the target catalog.

        Args:
            location: Bundle location being assigned to a catalog.
            group: Group owning the bundle.
            catalog_load_path: Resolved runtime load path of the catalog.

        Returns:
            str: Prefix chosen for the group joined with the bundle file name.
        """

        prefix = self.load_path_prefix(group, catalog_load_path)
        return join_load_path(prefix, bundle_file_name(location.internal_id))


__all__ = ["PathRewriter", "bundle_file_name", "join_load_path"]
