# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Reusable Typer option declarations."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

ROOT_OPTION = Annotated[
    Path,
    typer.Option("--root", "-r", help="Project root used for relative paths."),
]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Configuration file overriding multicatalog.toml."),
]
MANIFEST_OPTION = Annotated[
    Path,
    typer.Option("--manifest", "-m", help="JSON build manifest produced by the asset pipeline."),
]
OUTPUT_OPTION = Annotated[
    Path | None,
    typer.Option("--output", "-o", help="Write the catalog plan as JSON to this path."),
]
BUILD_DIR_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--build-dir",
        help="Default build output directory, relative to --root (defaults to the profile's build path).",
    ),
]
DRY_RUN_OPTION = Annotated[
    bool,
    typer.Option("--dry-run", help="Show what would be removed."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]

__all__ = [
    "BUILD_DIR_OPTION",
    "CONFIG_OPTION",
    "DRY_RUN_OPTION",
    "EMOJI_OPTION",
    "MANIFEST_OPTION",
    "OUTPUT_OPTION",
    "ROOT_OPTION",
]
