# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command removing previous catalog output directories."""

from __future__ import annotations

from pathlib import Path

import typer

from ..builder import MultiCatalogBuilder
from ..filesystem import display_relative_path
from .options import CONFIG_OPTION, DRY_RUN_OPTION, EMOJI_OPTION, ROOT_OPTION
from .shared import CLIError, build_cli_logger, load_cli_config


def clean_command(
    root: ROOT_OPTION = Path(),
    config: CONFIG_OPTION = None,
    dry_run: DRY_RUN_OPTION = False,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Delete the build directories of every declared catalog."""

    logger = build_cli_logger(emoji=emoji)
    root = root.resolve()
    try:
        settings = load_cli_config(root, config, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    builder = MultiCatalogBuilder(settings, project_root=root, use_emoji=emoji)
    result = builder.clear_cached_data(dry_run=dry_run)

    for path in result.protected:
        logger.warn(f"Refusing to remove protected directory {display_relative_path(path, root)}")
    if dry_run:
        for path in sorted(result.skipped):
            logger.warn(f"DRY RUN: would remove {display_relative_path(path, root)}")


__all__ = ["clean_command"]
