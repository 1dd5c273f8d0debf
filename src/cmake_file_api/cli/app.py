# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from .index_cmd import index_command
from .query_cmd import query_command
from .sources_cmd import sources_command

app = typer.Typer(
    name="cmake-file-api",
    help="Write CMake file-api queries and inspect the replies.",
    no_args_is_help=True,
    add_completion=False,
)
app.command("query")(query_command)
app.command("index")(index_command)
app.command("sources")(sources_command)

__all__ = ["app"]
