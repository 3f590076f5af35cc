# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Decide whether a location belongs to a declared catalog."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Final

from .models import AssetGroup, BuildContext, CatalogSpec, Location, ResourceKind

MembershipPredicate = Callable[[Location, Sequence[AssetGroup], BuildContext], bool]


def _bundle_is_member(location: Location, groups: Sequence[AssetGroup], context: BuildContext) -> bool:
    entry = context.entry_for_bundle_file(location.internal_id)
    if entry is not None:
        return any(entry.guid in group.entry_guids() for group in groups)
    # Folder entries pack their sub-assets into the folder's own bundle.
    return any(
        candidate.is_folder and candidate.bundle_file_id == location.internal_id
        for group in groups
        for candidate in group.entries
    )


def _asset_is_member(location: Location, groups: Sequence[AssetGroup], _context: BuildContext) -> bool:
    keys = set(location.keys)
    for group in groups:
        for entry in group.entries:
            if entry.guid in keys:
                return True
            if entry.is_folder and keys.intersection(entry.sub_assets):
                return True
    return False


_PREDICATES: Final[dict[ResourceKind, MembershipPredicate]] = {
    ResourceKind.BUNDLE: _bundle_is_member,
    ResourceKind.ASSET: _asset_is_member,
}


def is_member(spec: CatalogSpec, location: Location, context: BuildContext) -> bool:
    """Return ``True`` when ``location`` is content of one of ``spec``'s groups.

    Args:
        spec: Catalog declaration listing member group guids.
        location: Manifest entry under consideration.
        context: Build inputs used to look up groups and entries.

    Returns:
        bool: ``False`` for specs without groups, otherwise the result of the
        predicate registered for the location's resource kind.
    """

    if not spec.groups:
        return False
    groups = [group for guid in spec.groups if (group := context.find_group(guid)) is not None]
    if not groups:
        return False
    return _PREDICATES[location.resource_kind](location, groups, context)


__all__ = ["MembershipPredicate", "is_member"]
