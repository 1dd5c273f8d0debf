# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""``index`` command: summarise the reply index of a build directory."""

from __future__ import annotations

from pathlib import Path

import typer

from ..config import IndexSelection
from ..errors import CMakeFileApiError
from ..reply import ReplyReader
from ._rendering import build_catalog_table, describe_cmake
from .shared import (
    BuildDirArgument,
    ColorOption,
    EmojiOption,
    IndexSelectionOption,
    VerboseOption,
    build_cli_logger,
    exit_on_error,
    reader_settings,
)


def run_index(
    build_dir: Path,
    *,
    index_selection: IndexSelection = IndexSelection.LAST,
    emoji: bool = True,
    color: bool = True,
    verbose: bool = False,
) -> int:
    """Print the tool information and object catalog and return an exit status."""

    logger = build_cli_logger(emoji=emoji, color=color, verbose=verbose)
    try:
        reader = ReplyReader.from_build_dir(build_dir, settings=reader_settings(index_selection))
    except CMakeFileApiError as exc:
        return exit_on_error(exc, logger).exit_code
    index = reader.index
    logger.info(describe_cmake(index.cmake))
    logger.console.print(build_catalog_table(index.objects))
    for label, message in index.reply_errors():
        logger.warn(f"{label}: {message}")
    return 0


def index_command(
    build_dir: BuildDirArgument,
    index_selection: IndexSelectionOption = IndexSelection.LAST,
    emoji: EmojiOption = True,
    color: ColorOption = True,
    verbose: VerboseOption = False,
) -> None:
    """Show the CMake version, generator and object catalog of a reply."""

    exit_code = run_index(
        build_dir,
        index_selection=index_selection,
        emoji=emoji,
        color=color,
        verbose=verbose,
    )
    raise typer.Exit(code=exit_code)


__all__ = ["index_command", "run_index"]
