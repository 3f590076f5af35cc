# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for presenting filesystem paths to the user."""

from __future__ import annotations

import os
from os import PathLike
from pathlib import Path

_Pathish = str | PathLike[str] | Path


def _best_effort_resolve(path: Path) -> Path:
    try:
        return path.resolve(strict=False)
    except (OSError, RuntimeError):
        return path.absolute()


def normalize_path(path: _Pathish, *, base_dir: _Pathish | None = None) -> Path:
    """Return ``path`` relative to ``base_dir`` when they share a lineage.

    Args:
        path: Filesystem path supplied by the caller.
        base_dir: Base directory used to relativise the path. Defaults to
            ``Path.cwd()`` when omitted.

    Returns:
        Path: Relative path when possible, otherwise the resolved candidate.
    """

    raw_path = Path(path).expanduser()
    base = _best_effort_resolve(Path.cwd() if base_dir is None else Path(base_dir).expanduser())
    candidate = _best_effort_resolve(raw_path if raw_path.is_absolute() else base / raw_path)
    try:
        return candidate.relative_to(base)
    except ValueError:
        try:
            return Path(os.path.relpath(candidate, base))
        except ValueError:
            return candidate


def display_relative_path(path: _Pathish, root: _Pathish) -> str:
    """Return a display-friendly POSIX form of ``path`` relative to ``root``."""

    return normalize_path(path, base_dir=root).as_posix()


__all__ = ["display_relative_path", "normalize_path"]
