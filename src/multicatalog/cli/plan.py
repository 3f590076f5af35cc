# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI commands that partition a manifest and relocate built files."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.table import Table

from ..builder import MultiCatalogBuilder
from ..errors import MultiCatalogError
from ..manifest import load_manifest, write_plan
from ..models import BuildContext
from ..partition import PartitionResult
from .options import BUILD_DIR_OPTION, CONFIG_OPTION, EMOJI_OPTION, MANIFEST_OPTION, OUTPUT_OPTION, ROOT_OPTION
from .shared import CLIError, CLILogger, build_cli_logger, load_cli_config, report_failure


def _render_plan(result: PartitionResult, *, logger: CLILogger) -> None:
    logger.section("Catalog plan")
    table = Table()
    table.add_column("Catalog")
    table.add_column("File")
    table.add_column("Locations", justify="right")
    table.add_column("Build path")
    table.add_column("Register")
    for catalog in result.catalogs():
        table.add_row(
            catalog.identifier,
            catalog.filename,
            str(len(catalog)),
            catalog.build_path,
            "yes" if catalog.register else "no",
        )
    logger.console.print(table)
    for diagnostic in result.diagnostics:
        logger.warn(f"[{diagnostic.kind.value}] {diagnostic.catalog}: {diagnostic.subject}")


def _prepare(
    root: Path,
    config: Path | None,
    manifest: Path,
    *,
    logger: CLILogger,
) -> tuple[MultiCatalogBuilder, BuildContext, PartitionResult]:
    settings = load_cli_config(root, config, logger=logger)
    builder = MultiCatalogBuilder(settings, project_root=root, use_emoji=logger.use_emoji)
    try:
        context = load_manifest(manifest)
        return builder, context, builder.plan(context)
    except MultiCatalogError as exc:
        raise report_failure(exc, logger=logger) from exc


def plan_command(
    manifest: MANIFEST_OPTION,
    root: ROOT_OPTION = Path(),
    config: CONFIG_OPTION = None,
    output: OUTPUT_OPTION = None,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Partition the manifest into catalogs and report the result."""

    logger = build_cli_logger(emoji=emoji)
    root = root.resolve()
    try:
        _builder, _context, result = _prepare(root, config, manifest, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    _render_plan(result, logger=logger)
    if output is not None:
        write_plan(result.catalogs(), output)
        logger.ok(f"Wrote catalog plan to {output}")


def relocate_command(
    manifest: MANIFEST_OPTION,
    root: ROOT_OPTION = Path(),
    config: CONFIG_OPTION = None,
    build_dir: BUILD_DIR_OPTION = None,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Move built bundles and catalog files into their catalog directories."""

    logger = build_cli_logger(emoji=emoji)
    root = root.resolve()
    try:
        builder, context, result = _prepare(root, config, manifest, logger=logger)
        if build_dir is not None and not build_dir.is_absolute():
            build_dir = root / build_dir
        logger.section("Relocation")
        try:
            builder.relocate(context, result, default_build_dir=build_dir)
        except MultiCatalogError as exc:
            raise report_failure(exc, logger=logger) from exc
        except OSError as exc:
            logger.fail(f"Relocation failed: {exc}")
            raise CLIError(str(exc)) from exc
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc


__all__ = ["plan_command", "relocate_command"]
