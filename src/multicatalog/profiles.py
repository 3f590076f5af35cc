# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Profile variables and the resolution of path references against them.

Build and load paths are declared as references: either the name of a
profile variable (``LocalBuildPath``) or a literal string that may embed
``[Variable]`` tokens. Resolution mirrors what the asset build pipeline does
for its own groups so catalogs land next to the content they describe.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Final

_TOKEN_PATTERN: Final[re.Pattern[str]] = re.compile(r"\[([^\[\]]+)\]")
_MAX_EXPANSION_DEPTH: Final[int] = 16


@dataclass(frozen=True, slots=True)
class PathReference:
    """Unresolved reference to a build or load path."""

    id: str


@dataclass(slots=True)
class Profile:
    """Named table of path variables used to evaluate references."""

    name: str = "Default"
    variables: dict[str, str] = field(default_factory=dict)

    def value_of(self, variable_id: str) -> str | None:
        """Return the evaluated value of ``variable_id`` or ``None`` when undefined."""

        raw = self.variables.get(variable_id)
        if raw is None:
            return None
        return self.evaluate(raw)

    def evaluate(self, text: str) -> str:
        """Expand ``[Variable]`` tokens in ``text``.

        Unknown tokens are left untouched. Expansion is repeated until the
        text stops changing, bounded so self-referencing variables terminate.

        Args:
            text: String possibly containing ``[Variable]`` tokens.

        Returns:
            str: Text with every known token substituted.
        """

        current = text
        for _ in range(_MAX_EXPANSION_DEPTH):
            expanded = _TOKEN_PATTERN.sub(self._substitute, current)
            if expanded == current:
                break
            current = expanded
        return current

    def _substitute(self, match: re.Match[str]) -> str:
        return self.variables.get(match.group(1), match.group(0))

    @classmethod
    def from_mapping(cls, variables: Mapping[str, str], *, name: str = "Default") -> Profile:
        """Build a profile from a plain variable mapping.

        Args:
            variables: Variable names mapped to raw values.
            name: Profile name.

        Returns:
            Profile: Profile owning a copy of ``variables``.
        """

        return cls(name=name, variables=dict(variables))


def resolve_reference(reference: PathReference, profile: Profile) -> str:
    """Return the concrete string for ``reference`` under ``profile``.

    The variable value is preferred; when the reference does not name a
    variable (or the variable is empty) the raw id is evaluated instead.
    """

    value = profile.value_of(reference.id)
    if not value:
        value = profile.evaluate(reference.id)
    return value


__all__ = ["PathReference", "Profile", "resolve_reference"]
