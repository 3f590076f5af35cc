# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Assign every manifest location to exactly one home catalog."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import PurePath

from .catalog import CatalogBuildInfo, CatalogSetup, LocationArena
from .constants import (
    DEFAULT_CATALOG_IDENTIFIER,
    LOCAL_BUILD_PATH,
    LOCAL_LOAD_PATH,
    RESERVED_BUNDLE_PATTERNS,
)
from .diagnostics import Diagnostic, DiagnosticKind
from .errors import CatalogConfigurationError
from .logging import fail
from .membership import is_member
from .models import BuildContext, CatalogSpec, Location, is_reserved_bundle
from .profiles import PathReference, Profile, resolve_reference
from .rewrite import PathRewriter


@dataclass(slots=True)
class PartitionResult:
    """Outcome of partitioning: the default catalog plus one setup per spec."""

    arena: LocationArena
    default_catalog: CatalogBuildInfo
    setups: list[CatalogSetup]
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def catalogs(self) -> list[CatalogBuildInfo]:
        """Return the default catalog followed by every non-empty spec catalog."""

        catalogs = [self.default_catalog]
        catalogs.extend(setup.build_info for setup in self.setups if not setup.is_empty)
        return catalogs

    def home_of(self, primary_key: str) -> str | None:
        """Return the identifier of the catalog whose home entry has ``primary_key``."""

        for setup in self.setups:
            if any(location.primary_key == primary_key for location in self._home_entries(setup)):
                return setup.name
        if self.default_catalog.contains_key(primary_key):
            return self.default_catalog.identifier
        return None

    def _home_entries(self, setup: CatalogSetup) -> Iterable[Location]:
        default_indices = set(self.default_catalog.indices)
        return (self.arena[index] for index in setup.build_info.indices if index not in default_indices)


def _resolve_required(reference: PathReference, profile: Profile, *, catalog: str, label: str) -> str:
    value = resolve_reference(reference, profile)
    if not value.strip():
        raise CatalogConfigurationError(catalog, f"the {label} path '{reference.id}' resolves to an empty string")
    return value


class Partitioner:
    """Split the flat manifest of a build context across declared catalogs.

    Specs are evaluated in declaration order and the first matching spec wins.
    Bundle locations moved into a catalog are appended as rewritten copies
    pointing at their new runtime load path; the original record is left
    untouched.
    """

    def __init__(
        self,
        context: BuildContext,
        profile: Profile,
        *,
        default_build_path: str = LOCAL_BUILD_PATH,
        default_load_path: str = LOCAL_LOAD_PATH,
        reserved_bundles: Sequence[str] = RESERVED_BUNDLE_PATTERNS,
        use_emoji: bool = True,
    ) -> None:
        self._context = context
        self._profile = profile
        self._default_build_path = default_build_path
        self._default_load_path = default_load_path
        self._reserved_bundles = tuple(reserved_bundles)
        self._rewriter = PathRewriter(profile, default_load_path=default_load_path)
        self._use_emoji = use_emoji

    def create_default_catalog(self, arena: LocationArena) -> CatalogBuildInfo:
        """Return the empty default catalog for the build context."""

        return CatalogBuildInfo(
            identifier=DEFAULT_CATALOG_IDENTIFIER,
            filename=self._context.runtime_catalog_filename,
            arena=arena,
            build_path=resolve_reference(PathReference(self._default_build_path), self._profile),
            load_path=resolve_reference(PathReference(self._default_load_path), self._profile),
            register=True,
        )

    def create_setup(self, spec: CatalogSpec, arena: LocationArena) -> CatalogSetup:
        """Return the setup for ``spec`` with resolved build and load paths.

        Raises:
            CatalogConfigurationError: If either path resolves to a blank string.
        """

        extension = PurePath(self._context.runtime_catalog_filename).suffix
        build_info = CatalogBuildInfo(
            identifier=spec.name,
            filename=f"{spec.name}{extension}",
            arena=arena,
            build_path=_resolve_required(spec.build_path, self._profile, catalog=spec.name, label="build"),
            load_path=_resolve_required(spec.load_path, self._profile, catalog=spec.name, label="load"),
            register=False,
        )
        return CatalogSetup(spec=spec, build_info=build_info)

    def partition(self, specs: Sequence[CatalogSpec | None]) -> PartitionResult:
        """Assign each location of the context to its home catalog.

        Args:
            specs: Declared catalog specs in priority order; ``None`` entries
                are ignored.

        Returns:
            PartitionResult: Default catalog, per-spec setups and diagnostics.
        """

        arena = LocationArena()
        default_catalog = self.create_default_catalog(arena)
        setups = [self.create_setup(spec, arena) for spec in specs if spec is not None]
        result = PartitionResult(arena=arena, default_catalog=default_catalog, setups=setups)

        for location in self._context.locations:
            setup = next((item for item in setups if is_member(item.spec, location, self._context)), None)
            if setup is None:
                default_catalog.add_location(location)
            elif location.is_bundle:
                self._assign_bundle(location, setup, result)
            else:
                setup.build_info.add_location(location)
        return result

    def _assign_bundle(self, location: Location, setup: CatalogSetup, result: PartitionResult) -> None:
        group = self._context.group_for_bundle(location)
        if group is None:
            message = f"Could not find the group that belongs to location {location.internal_id}."
            fail(message, use_emoji=self._use_emoji)
            result.diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.MISSING_GROUP,
                    catalog=setup.name,
                    subject=location.internal_id,
                    message=message,
                )
            )
            return
        if is_reserved_bundle(location, self._reserved_bundles):
            setup.build_info.add_location(location)
        else:
            load_path = self._rewriter.rewrite(location, group, setup.build_info.load_path)
            setup.build_info.add_location(location.relocated(load_path))
        setup.bundles.append(location)


__all__ = ["PartitionResult", "Partitioner"]
