# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Orchestrate the partition, closure, relocation, and cleanup passes."""

from __future__ import annotations

from pathlib import Path

from .clean import CleanResult, clean_catalog_outputs
from .closure import DependencyCloser
from .config import MultiCatalogConfig
from .models import BuildContext
from .partition import PartitionResult, Partitioner
from .relocate import RelocationResult, Relocator


class MultiCatalogBuilder:
    """Build multiple catalogs from one build context.

    The passes are strictly ordered: partitioning completes before closure
    reads the default catalog, and closure completes before relocation moves
    any file.
    """

    def __init__(self, config: MultiCatalogConfig, *, project_root: Path, use_emoji: bool = True) -> None:
        self.config = config
        self.project_root = project_root
        self.profile = config.profile.to_profile()
        self.use_emoji = use_emoji

    def plan(self, context: BuildContext) -> PartitionResult:
        """Partition ``context`` and close every additional catalog.

        The returned result lists the default catalog first via
        :meth:`PartitionResult.catalogs`.
        """

        partitioner = Partitioner(
            context,
            self.profile,
            default_build_path=self.config.default_build_path,
            default_load_path=self.config.default_load_path,
            reserved_bundles=self.config.reserved_bundles,
            use_emoji=self.use_emoji,
        )
        result = partitioner.partition(self.config.specs())
        closer = DependencyCloser(result.default_catalog, use_emoji=self.use_emoji)
        result.diagnostics.extend(closer.close_all(result.setups))
        return result

    def relocate(
        self,
        context: BuildContext,
        result: PartitionResult,
        *,
        default_build_dir: Path | None = None,
    ) -> RelocationResult:
        """Move the files written by the external build into catalog directories."""

        relocator = Relocator(
            context,
            self.profile,
            project_root=self.project_root,
            default_build_path=self.config.default_build_path,
            reserved_bundles=self.config.reserved_bundles,
            use_emoji=self.use_emoji,
        )
        return relocator.relocate(result.setups, default_build_dir=default_build_dir)

    def clear_cached_data(self, *, dry_run: bool = False) -> CleanResult:
        """Remove previously produced catalog output directories."""

        return clean_catalog_outputs(
            self.config.specs(),
            profile=self.profile,
            project_root=self.project_root,
            protected_roots=self.config.resolved_protected_roots(self.project_root),
            dry_run=dry_run,
            use_emoji=self.use_emoji,
        )


__all__ = ["MultiCatalogBuilder"]
