# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised by catalog partitioning and relocation."""

from __future__ import annotations


class MultiCatalogError(RuntimeError):
    """Base class for errors surfaced to the invoking build pipeline."""


class CatalogConfigurationError(MultiCatalogError):
    """Raised when a declared catalog cannot be placed on disk or loaded.

    Empty build or load paths, bundles whose owning group cannot be found
    during relocation, and bundle files missing from the default output
    directory all fall into this category.
    """

    def __init__(self, catalog: str, message: str) -> None:
        """Initialise the error with the affected catalog name.

        Args:
            catalog: Name of the catalog whose processing was aborted.
            message: Human-readable description of the problem.
        """

        super().__init__(f"catalog '{catalog}': {message}")
        self.catalog = catalog


class ManifestError(MultiCatalogError):
    """Raised when a build manifest document is malformed."""


__all__ = ["CatalogConfigurationError", "ManifestError", "MultiCatalogError"]
