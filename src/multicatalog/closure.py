# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Make additional catalogs self-sufficient by pulling in their dependencies."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from .catalog import CatalogBuildInfo, CatalogSetup
from .diagnostics import Diagnostic, DiagnosticKind
from .logging import fail


class DependencyCloser:
    """Close catalogs over their dependencies using the default catalog.

    Dependencies are only ever looked up in the default catalog. Matches are
    shared by reference: the default catalog keeps its entry and the
    additional catalog gains a second reference to the same record.
    """

    def __init__(self, default_catalog: CatalogBuildInfo, *, use_emoji: bool = True) -> None:
        self._default = default_catalog
        self._use_emoji = use_emoji

    def close(self, catalog: CatalogBuildInfo) -> list[Diagnostic]:
        """Expand ``catalog`` breadth-first until every dependency is present.

        Args:
            catalog: Additional catalog sharing the default catalog's arena.

        Returns:
            list[Diagnostic]: One entry per dependency key that could not be
            found in the default catalog nor in ``catalog`` itself.
        """

        diagnostics: list[Diagnostic] = []
        queue = deque(catalog.indices)
        visited: set[int] = set()

        while queue:
            index = queue.popleft()
            if index in visited:
                continue
            visited.add(index)
            location = catalog.arena[index]

            for dependency in location.dependencies:
                found = self._default.find_index(dependency)
                if found is not None:
                    catalog.add_reference(found)
                    queue.append(found)
                elif not catalog.contains_key(dependency):
                    message = f"Could not find location for dependency ID {dependency} in the default catalog."
                    fail(message, use_emoji=self._use_emoji)
                    diagnostics.append(
                        Diagnostic(
                            kind=DiagnosticKind.MISSING_DEPENDENCY,
                            catalog=catalog.identifier,
                            subject=dependency,
                            message=message,
                        )
                    )
        return diagnostics

    def close_all(self, setups: Iterable[CatalogSetup]) -> list[Diagnostic]:
        """Close every setup's catalog and collect the diagnostics in order."""

        diagnostics: list[Diagnostic] = []
        for setup in setups:
            diagnostics.extend(self.close(setup.build_info))
        return diagnostics


__all__ = ["DependencyCloser"]
