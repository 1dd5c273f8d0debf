# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""``query`` command: write stateless or stateful file-api queries."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer

from ..errors import CMakeFileApiError
from ..objects.base import ObjectKind
from ..objects.registry import object_type_for
from ..query import QueryWriter
from ..types import JSONValue
from .shared import (
    BuildDirArgument,
    CLIError,
    ColorOption,
    EmojiOption,
    VerboseOption,
    build_cli_logger,
    exit_on_error,
)


def parse_client_data(raw: str | None) -> JSONValue:
    """Decode the ``--client-data`` option.

    Raises:
        typer.BadParameter: If ``raw`` is not valid JSON.
    """

    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"not valid JSON: {exc.msg}", param_hint="--client-data") from exc


def build_writer(kinds: list[ObjectKind], client: str | None, client_data: JSONValue) -> QueryWriter:
    """Return a writer requesting ``kinds`` (every known kind when empty).

    Raises:
        CLIError: If the client name is unusable as a directory name.
    """

    writer = QueryWriter()
    if kinds:
        for kind in dict.fromkeys(kinds):
            writer.request_object(object_type_for(kind))
    else:
        writer.request_all_objects()
    if client is not None:
        try:
            writer.set_client(client, client_data)
        except ValueError as exc:
            raise CLIError(str(exc), exit_code=2) from exc
    return writer


def run_query(
    build_dir: Path,
    *,
    kinds: list[ObjectKind],
    client: str | None,
    client_data: JSONValue,
    emoji: bool = True,
    color: bool = True,
    verbose: bool = False,
) -> int:
    """Write the requested queries below ``build_dir`` and return an exit status."""

    logger = build_cli_logger(emoji=emoji, color=color, verbose=verbose)
    try:
        writer = build_writer(kinds, client, client_data)
        if client is None:
            written = writer.write_stateless(build_dir)
        else:
            written = (writer.write_stateful(build_dir),)
    except (CMakeFileApiError, CLIError) as exc:
        return exit_on_error(exc, logger).exit_code
    for path in written:
        logger.ok(f"wrote {path}")
    logger.info("run cmake on the build directory to generate the reply")
    return 0


def query_command(
    build_dir: BuildDirArgument,
    kind: Annotated[
        list[ObjectKind] | None,
        typer.Option("--kind", "-k", help="Object kind to request; repeat for several. Defaults to all."),
    ] = None,
    client: Annotated[
        str | None,
        typer.Option("--client", help="Write a stateful query for this client instead of stateless markers."),
    ] = None,
    client_data: Annotated[
        str | None,
        typer.Option("--client-data", help="JSON value CMake echoes back to a stateful client."),
    ] = None,
    emoji: EmojiOption = True,
    color: ColorOption = True,
    verbose: VerboseOption = False,
) -> None:
    """Write query files so the next CMake run generates a reply."""

    if client_data is not None and client is None:
        raise typer.BadParameter("requires --client", param_hint="--client-data")
    data = parse_client_data(client_data)
    exit_code = run_query(
        build_dir,
        kinds=kind or [],
        client=client,
        client_data=data,
        emoji=emoji,
        color=color,
        verbose=verbose,
    )
    raise typer.Exit(code=exit_code)


__all__ = ["build_writer", "parse_client_data", "query_command", "run_query"]
