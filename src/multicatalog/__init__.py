# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Split a flat build manifest into independent, self-sufficient catalogs."""

from __future__ import annotations

from .builder import MultiCatalogBuilder
from .catalog import CatalogBuildInfo, CatalogSetup, LocationArena
from .clean import CleanResult, clean_catalog_outputs
from .closure import DependencyCloser
from .config import ConfigError, MultiCatalogConfig, load_config
from .diagnostics import Diagnostic, DiagnosticKind
from .errors import CatalogConfigurationError, ManifestError, MultiCatalogError
from .models import (
    AssetEntry,
    AssetGroup,
    BuildContext,
    BundleRequestOptions,
    CatalogSpec,
    Location,
    ResourceKind,
)
from .partition import PartitionResult, Partitioner
from .profiles import PathReference, Profile, resolve_reference
from .relocate import RelocationResult, Relocator, move_overwrite
from .rewrite import PathRewriter

__all__ = [
    "AssetEntry",
    "AssetGroup",
    "BuildContext",
    "BundleRequestOptions",
    "CatalogBuildInfo",
    "CatalogConfigurationError",
    "CatalogSetup",
    "CatalogSpec",
    "CleanResult",
    "ConfigError",
    "DependencyCloser",
    "Diagnostic",
    "DiagnosticKind",
    "Location",
    "LocationArena",
    "ManifestError",
    "MultiCatalogBuilder",
    "MultiCatalogConfig",
    "MultiCatalogError",
    "PartitionResult",
    "Partitioner",
    "PathReference",
    "PathRewriter",
    "Profile",
    "RelocationResult",
    "Relocator",
    "ResourceKind",
    "clean_catalog_outputs",
    "load_config",
    "move_overwrite",
    "resolve_reference",
]
