# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Remove catalog output directories left behind by previous builds."""

from __future__ import annotations

import shutil
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .constants import PROTECTED_ROOT_NAMES
from .logging import ok
from .models import CatalogSpec
from .profiles import Profile, resolve_reference


@dataclass(slots=True)
class CleanResult:
    """Capture the outcome of a catalog cleanup."""

    removed: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    protected: list[Path] = field(default_factory=list)

    def register_removed(self, path: Path) -> None:
        """Record a directory removed during cleanup."""

        self.removed.append(path)

    def register_skipped(self, path: Path) -> None:
        """Record a directory that would be removed during a dry run."""

        self.skipped.append(path)

    def register_protected(self, path: Path) -> None:
        """Record a directory preserved because it is a protected root."""

        self.protected.append(path)

    def __bool__(self) -> bool:
        return bool(self.removed or self.skipped or self.protected)


def default_protected_roots(project_root: Path) -> list[Path]:
    """Return the library and source roots of ``project_root``."""

    return [project_root / name for name in PROTECTED_ROOT_NAMES]


def resolve_build_directory(spec: CatalogSpec, profile: Profile, project_root: Path) -> Path | None:
    """Return the directory ``spec`` builds into, or ``None`` when unset.

    Falls back to the raw reference when it resolves to an empty value.
    """

    build_path = resolve_reference(spec.build_path, profile)
    if not build_path.strip():
        build_path = spec.build_path.id
    if not build_path.strip():
        return None
    path = Path(build_path).expanduser()
    return path if path.is_absolute() else project_root / path


def is_protected(directory: Path, protected_roots: Iterable[Path]) -> bool:
    """Return whether ``directory`` is exactly one of ``protected_roots``."""

    resolved = directory.resolve()
    return any(resolved == root.resolve() for root in protected_roots)


def clean_catalog_outputs(
    specs: Sequence[CatalogSpec | None],
    *,
    profile: Profile,
    project_root: Path,
    protected_roots: Sequence[Path] | None = None,
    dry_run: bool = False,
    use_emoji: bool = True,
) -> CleanResult:
    """Delete the build directory of every declared catalog.

    Args:
        specs: Declared catalog specs; ``None`` entries are ignored.
        profile: Profile used to resolve the build path references.
        project_root: Base directory for relative build paths.
        protected_roots: Directories that must never be deleted. Defaults to
            the project's ``Library`` and ``Assets`` roots.
        dry_run: When ``True`` report the directories without deleting them.
        use_emoji: Whether log output may include emoji glyphs.

    Returns:
        CleanResult: Removed, dry-run and protected directories.
    """

    roots = list(protected_roots) if protected_roots is not None else default_protected_roots(project_root)
    result = CleanResult()
    for spec in specs:
        if spec is None:
            continue
        directory = resolve_build_directory(spec, profile, project_root)
        if directory is None or not directory.is_dir():
            continue
        if is_protected(directory, roots):
            result.register_protected(directory)
            continue
        if dry_run:
            result.register_skipped(directory)
            continue
        for child in directory.iterdir():
            if child.is_file() or child.is_symlink():
                child.unlink()
        shutil.rmtree(directory)
        result.register_removed(directory)

    if dry_run:
        ok(f"Dry run complete; {len(result.skipped)} catalog directories would be removed", use_emoji=use_emoji)
    else:
        ok(f"Removed {len(result.removed)} catalog directories", use_emoji=use_emoji)
    return result


__all__ = [
    "CleanResult",
    "clean_catalog_outputs",
    "default_protected_roots",
    "is_protected",
    "resolve_build_directory",
]
