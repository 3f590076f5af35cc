# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Catalog accumulators sharing a single arena of locations."""

from __future__ import annotations

from dataclasses import dataclass, field

from .models import CatalogSpec, Location


class LocationArena:
    """Append-only store of locations addressed by integer index.

    Catalogs reference locations by index so a dependency shared between the
    default catalog and an additional catalog is one record, not two copies.
    """

    def __init__(self) -> None:
        self._records: list[Location] = []

    def add(self, location: Location) -> int:
        """Store ``location`` and return its index."""

        self._records.append(location)
        return len(self._records) - 1

    def __getitem__(self, index: int) -> Location:
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)


@dataclass(slots=True)
class CatalogBuildInfo:
    """Locations and output configuration of one catalog to be written.

    Attributes:
        identifier: Logical catalog name.
        filename: Name of the catalog manifest file.
        arena: Shared location store the catalog indexes into.
        build_path: Directory the catalog output is placed in.
        load_path: Runtime prefix the catalog is loaded from.
        register: Whether the catalog is discovered automatically at startup.
    """

    identifier: str
    filename: str
    arena: LocationArena = field(repr=False)
    build_path: str = ""
    load_path: str = ""
    register: bool = True
    _indices: list[int] = field(default_factory=list, init=False, repr=False)
    _members: set[int] = field(default_factory=set, init=False, repr=False)
    _first_by_key: dict[str, int] = field(default_factory=dict, init=False, repr=False)

    @property
    def indices(self) -> tuple[int, ...]:
        """Return arena indices of the member locations in insertion order."""

        return tuple(self._indices)

    @property
    def locations(self) -> list[Location]:
        """Return the member locations in insertion order."""

        return [self.arena[index] for index in self._indices]

    @property
    def keys(self) -> list[str]:
        """Return the primary key of every member in insertion order."""

        return [self.arena[index].primary_key for index in self._indices]

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when the catalog holds no locations."""

        return not self._indices

    def add_location(self, location: Location) -> int:
        """Store ``location`` in the arena and append it to this catalog.

        Args:
            location: Record to store.

        Returns:
            int: Arena index of the stored record.
        """

        index = self.arena.add(location)
        self.add_reference(index)
        return index

    def add_reference(self, index: int) -> bool:
        """Append the arena record at ``index`` unless it is already a member.

        Returns:
            bool: ``True`` when the reference was appended.
        """

        if index in self._members:
            return False
        self._indices.append(index)
        self._members.add(index)
        self._first_by_key.setdefault(self.arena[index].primary_key, index)
        return True

    def find_index(self, primary_key: str) -> int | None:
        """Return the first member index whose primary key is ``primary_key``."""

        return self._first_by_key.get(primary_key)

    def contains_key(self, primary_key: str) -> bool:
        """Return ``True`` when a member location has ``primary_key``."""

        return primary_key in self._first_by_key

    def __len__(self) -> int:
        return len(self._indices)


@dataclass(slots=True)
class CatalogSetup:
    """Pair a declared spec with the catalog being accumulated for it.

    ``bundles`` lists the original bundle locations whose home is this
    catalog; relocation moves their files after the external build.
    """

    spec: CatalogSpec
    build_info: CatalogBuildInfo
    bundles: list[Location] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def is_empty(self) -> bool:
        return self.build_info.is_empty


__all__ = ["CatalogBuildInfo", "CatalogSetup", "LocationArena"]
