# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""``sources`` command: list target sources with their compile settings."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..config import IndexSelection
from ..errors import CMakeFileApiError
from ..objects import CodeModelV2
from ..objects.codemodel_v2 import Configuration
from ..reply import ReplyReader
from ._rendering import describe_source
from .shared import (
    BuildDirArgument,
    CLIError,
    ColorOption,
    EmojiOption,
    IndexSelectionOption,
    VerboseOption,
    build_cli_logger,
    exit_on_error,
    reader_settings,
)


def select_configuration(codemodel: CodeModelV2, name: str | None) -> Configuration:
    """Return the configuration called ``name``, or the first one when ``name`` is ``None``.

    Raises:
        CLIError: If the requested configuration does not exist.
    """

    if name is None:
        if not codemodel.configurations:
            raise CLIError("the codemodel lists no configurations")
        return codemodel.configurations[0]
    configuration = codemodel.configuration(name)
    if configuration is None:
        available = ", ".join(repr(config.name) for config in codemodel.configurations) or "none"
        raise CLIError(f"configuration {name!r} not found (available: {available})")
    return configuration


def run_sources(
    build_dir: Path,
    *,
    config_name: str | None = None,
    index_selection: IndexSelection = IndexSelection.LAST,
    emoji: bool = True,
    color: bool = True,
    verbose: bool = False,
) -> int:
    """Print every target's sources with their compile settings and return an exit status."""

    logger = build_cli_logger(emoji=emoji, color=color, verbose=verbose)
    try:
        reader = ReplyReader.from_build_dir(build_dir, settings=reader_settings(index_selection))
        configuration = select_configuration(reader.read_object(CodeModelV2), config_name)
    except (CMakeFileApiError, CLIError) as exc:
        return exit_on_error(exc, logger).exit_code
    for target in configuration.targets:
        logger.section(f"{target.name} ({target.type_name})")
        for source in target.sources:
            for line in describe_source(target, source):
                logger.echo(line)
    return 0


def sources_command(
    build_dir: BuildDirArgument,
    config: Annotated[
        str | None,
        typer.Option("--config", "-c", help="Configuration to list; defaults to the first one."),
    ] = None,
    index_selection: IndexSelectionOption = IndexSelection.LAST,
    emoji: EmojiOption = True,
    color: ColorOption = True,
    verbose: VerboseOption = False,
) -> None:
    """List the sources of every target together with includes, defines and flags."""

    exit_code = run_sources(
        build_dir,
        config_name=config,
        index_selection=index_selection,
        emoji=emoji,
        color=color,
        verbose=verbose,
    )
    raise typer.Exit(code=exit_code)


__all__ = ["run_sources", "select_configuration", "sources_command"]
