# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, loading)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from ..config import ConfigError, MultiCatalogConfig, load_config
from ..errors import MultiCatalogError
from ..logging import fail as core_fail
from ..logging import ok as core_ok
from ..logging import section as core_section
from ..logging import warn as core_warn


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around the logging helpers respecting CLI emoji settings."""

    console: Console
    use_emoji: bool

    def fail(self, message: str) -> None:
        core_fail(message, use_emoji=self.use_emoji)

    def warn(self, message: str) -> None:
        core_warn(message, use_emoji=self.use_emoji)

    def ok(self, message: str) -> None:
        core_ok(message, use_emoji=self.use_emoji)

    def section(self, title: str) -> None:
        """Print a header before a block of command output."""

        core_section(title, use_emoji=self.use_emoji)


def build_cli_logger(*, emoji: bool, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` bound to a dedicated Rich console."""

    console = Console(no_color=no_color, highlight=False)
    return CLILogger(console=console, use_emoji=emoji)


def load_cli_config(root: Path, config_path: Path | None, *, logger: CLILogger) -> MultiCatalogConfig:
    """Return configuration for ``root`` or raise :class:`CLIError` on failure."""

    try:
        return load_config(root, config_path=config_path)
    except ConfigError as exc:
        logger.fail(f"Configuration error: {exc}")
        raise CLIError(str(exc)) from exc


def report_failure(exc: MultiCatalogError, *, logger: CLILogger) -> CLIError:
    """Log ``exc`` and return the matching :class:`CLIError`."""

    logger.fail(str(exc))
    return CLIError(str(exc))


__all__ = ["CLIError", "CLILogger", "build_cli_logger", "load_cli_config", "report_failure"]
