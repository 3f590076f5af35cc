# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from .clean import clean_command
from .plan import plan_command, relocate_command

app = typer.Typer(
    name="multicatalog",
    help="Split a build manifest into multiple content catalogs.",
    no_args_is_help=True,
    add_completion=False,
)
app.command("plan")(plan_command)
app.command("relocate")(relocate_command)
app.command("clean")(clean_command)

__all__ = ["app"]
