# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Records describing recoverable lookup failures."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DiagnosticKind(str, Enum):
    """Categories of degradations reported while building catalogs."""

    MISSING_GROUP = "missing-group"
    MISSING_DEPENDENCY = "missing-dependency"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A lookup failure that was logged and skipped rather than raised."""

    kind: DiagnosticKind
    catalog: str
    subject: str
    message: str


__all__ = ["Diagnostic", "DiagnosticKind"]
