# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Move built bundles and catalog manifests into each catalog's directory."""

from __future__ import annotations

import shutil
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .catalog import CatalogSetup
from .constants import DEFAULT_CATALOG_IDENTIFIER, LOCAL_BUILD_PATH, RESERVED_BUNDLE_PATTERNS
from .errors import CatalogConfigurationError
from .logging import info, ok
from .models import BuildContext, is_reserved_bundle
from .profiles import PathReference, Profile, resolve_reference
from .rewrite import bundle_file_name


def move_overwrite(src: Path, dst: Path) -> bool:
    """Move ``src`` to ``dst``, replacing any file already at ``dst``.

    Returns:
        bool: ``False`` when ``src`` and ``dst`` name the same file.
    """

    if src.resolve() == dst.resolve():
        return False
    if dst.exists():
        dst.unlink()
    shutil.move(src, dst)
    return True


@dataclass(slots=True)
class RelocationResult:
    """Capture the files moved and the bundles left in place."""

    moved: list[tuple[Path, Path]] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    def register_moved(self, src: Path, dst: Path) -> None:
        self.moved.append((src, dst))

    def register_skipped(self, internal_id: str) -> None:
        self.skipped.append(internal_id)

    @property
    def destinations(self) -> list[Path]:
        return [dst for _src, dst in self.moved]


class Relocator:
    """Relocate outputs written to the default build directory.

    Runs after the external build. Only bundles whose owning group still
    uses the default build path are moved; reserved bundles never move.
    """

    def __init__(
        self,
        context: BuildContext,
        profile: Profile,
        *,
        project_root: Path,
        default_build_path: str = LOCAL_BUILD_PATH,
        reserved_bundles: Sequence[str] = RESERVED_BUNDLE_PATTERNS,
        use_emoji: bool = True,
    ) -> None:
        self._context = context
        self._profile = profile
        self._project_root = project_root
        self._default_build_path = default_build_path
        self._reserved_bundles = tuple(reserved_bundles)
        self._use_emoji = use_emoji

    def default_build_dir(self) -> Path:
        """Return the directory the external build wrote every bundle into."""

        value = resolve_reference(PathReference(self._default_build_path), self._profile)
        if not value.strip():
            raise CatalogConfigurationError(DEFAULT_CATALOG_IDENTIFIER, "the default build path is empty")
        return self._absolute(value)

    def relocate(self, setups: Iterable[CatalogSetup], *, default_build_dir: Path | None = None) -> RelocationResult:
        """Relocate the outputs of every non-empty catalog setup.

        Args:
            setups: Catalog setups produced by partitioning.
            default_build_dir: Override for the shared default output directory.

        Returns:
            RelocationResult: Files moved and bundles left in place.

        Raises:
            CatalogConfigurationError: When a catalog's files cannot be placed.
            OSError: When deleting or moving a file fails.
        """

        source_dir = default_build_dir if default_build_dir is not None else self.default_build_dir()
        result = RelocationResult()
        for setup in setups:
            if setup.is_empty:
                continue
            self.relocate_catalog(setup, source_dir, result)
        ok(f"Relocated {len(result.moved)} files", use_emoji=self._use_emoji)
        return result

    def relocate_catalog(self, setup: CatalogSetup, source_dir: Path, result: RelocationResult) -> None:
        """Move the bundles and manifest file of ``setup`` out of ``source_dir``.

        Args:
            setup: Catalog setup whose outputs are moved.
            source_dir: Directory the external build wrote into.
            result: Accumulator receiving moved and skipped entries.

        Raises:
            CatalogConfigurationError: When the build path is blank, a bundle
                has no owning group, or a source file is missing.
        """

        name = setup.name
        build_path = setup.build_info.build_path
        if not build_path.strip():
            raise CatalogConfigurationError(name, "the resolved build path is empty")
        catalog_dir = self._absolute(build_path)
        catalog_dir.mkdir(parents=True, exist_ok=True)
        info(f"Relocating catalog '{name}' into {catalog_dir}", use_emoji=self._use_emoji)

        for location in setup.bundles:
            if is_reserved_bundle(location, self._reserved_bundles):
                result.register_skipped(location.internal_id)
                continue
            group = self._context.group_for_bundle(location)
            if group is None:
                raise CatalogConfigurationError(name, f"no group owns bundle {location.internal_id}")
            # A group with its own build path already placed the bundle deliberately.
            if group.build_path.id != self._default_build_path:
                result.register_skipped(location.internal_id)
                continue
            file_name = bundle_file_name(location.internal_id)
            src = source_dir / file_name
            if not src.is_file():
                raise CatalogConfigurationError(name, f"bundle file {src} does not exist")
            dst = catalog_dir / file_name
            if move_overwrite(src, dst):
                result.register_moved(src, dst)

        self._relocate_manifest(setup, source_dir, catalog_dir, result)

    def _relocate_manifest(self, setup: CatalogSetup, source_dir: Path, catalog_dir: Path, result: RelocationResult) -> None:
        filename = setup.build_info.filename
        src = source_dir / filename
        dst = catalog_dir / filename
        if not src.is_file():
            if dst.is_file():
                return
            raise CatalogConfigurationError(setup.name, f"catalog file {src} does not exist")
        if move_overwrite(src, dst):
            result.register_moved(src, dst)

    def _absolute(self, value: str) -> Path:
        path = Path(value).expanduser()
        return path if path.is_absolute() else self._project_root / path


__all__ = ["RelocationResult", "Relocator", "move_overwrite"]
