# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (console output, errors, common options)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Final

import typer
from rich.console import Console

from ..config import IndexSelection, ReaderSettings
from ..errors import CMakeFileApiError
from ..logging import enable_debug_logging
from ..logging import fail as core_fail
from ..logging import info as core_info
from ..logging import ok as core_ok
from ..logging import section as core_section
from ..logging import warn as core_warn

FAILURE_EXIT_CODE: Final[int] = 1

BuildDirArgument = Annotated[
    Path,
    typer.Argument(help="CMake build directory.", file_okay=False),
]
EmojiOption = Annotated[bool, typer.Option("--emoji/--no-emoji", help="Decorate messages with emoji.")]
ColorOption = Annotated[bool, typer.Option("--color/--no-color", help="Colourise output on terminals.")]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Print debug records from the reader to stderr."),
]
IndexSelectionOption = Annotated[
    IndexSelection,
    typer.Option("--index-selection", help="Which index file to use when several exist."),
]


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = FAILURE_EXIT_CODE) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around the console helpers honouring CLI presentation flags."""

    console: Console
    use_emoji: bool
    use_color: bool

    def fail(self, message: str) -> None:
        """Print a failure message."""

        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        """Print a warning message."""

        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def ok(self, message: str) -> None:
        """Print a success message."""

        core_ok(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def info(self, message: str) -> None:
        """Print an informational message."""

        core_info(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def section(self, title: str) -> None:
        """Print a section header."""

        core_section(title, use_color=self.use_color)

    def echo(self, message: str) -> None:
        """Print ``message`` verbatim, without markup interpretation."""

        self.console.print(message, markup=False, highlight=False)


def build_cli_logger(*, emoji: bool, color: bool = True, verbose: bool = False) -> CLILogger:
    """Return a :class:`CLILogger` bound to a dedicated Rich console.

    Args:
        emoji: Whether messages may include emoji glyphs.
        color: Whether terminal colour output is allowed.
        verbose: Whether package debug records should reach stderr.

    Returns:
        CLILogger: Logger instance for one command invocation.
    """

    if verbose:
        enable_debug_logging()
    console = Console(no_color=not color, highlight=False, soft_wrap=True)
    return CLILogger(console=console, use_emoji=emoji, use_color=color)


def reader_settings(index_selection: IndexSelection) -> ReaderSettings:
    """Build reader settings from command-line options."""

    return ReaderSettings(index_selection=index_selection)


def exit_on_error(exc: CMakeFileApiError | CLIError, logger: CLILogger) -> typer.Exit:
    """Report ``exc`` and return the :class:`typer.Exit` the command should raise."""

    logger.fail(str(exc))
    return typer.Exit(code=exc.exit_code if isinstance(exc, CLIError) else FAILURE_EXIT_CODE)


__all__ = [
    "BuildDirArgument",
    "CLIError",
    "CLILogger",
    "ColorOption",
    "EmojiOption",
    "FAILURE_EXIT_CODE",
    "IndexSelectionOption",
    "VerboseOption",
    "build_cli_logger",
    "exit_on_error",
    "reader_settings",
]
