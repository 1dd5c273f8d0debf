# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console output for the command line and debug log wiring.

Library modules only emit ``DEBUG`` records through
``logging.getLogger(__name__)``; nothing is printed unless a caller asks for
it. The command line uses the message helpers below and, with ``--verbose``,
:func:`enable_debug_logging` to surface those records on stderr.
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from typing import Final, Literal

from rich.console import Console
from rich.rule import Rule
from rich.text import Text

PACKAGE_LOGGER: Final[str] = "cmake_file_api"
_DEBUG_MARKER: Final[str] = "_cmake_file_api_debug_configured"

MessageLevel = Literal["info", "ok", "warn", "fail"]

# level -> (emoji prefix, rich style)
_MESSAGE_STYLES: Final[dict[MessageLevel, tuple[str, str]]] = {
    "info": ("ℹ️ ", "cyan"),
    "ok": ("✅ ", "green"),
    "warn": ("⚠️ ", "yellow"),
    "fail": ("❌ ", "bold red"),
}


def detect_tty() -> bool:
    """Return ``True`` when stdout is attached to a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=8)
def _console_for(color: bool, emoji: bool, tty: bool) -> Console:
    colored = color and tty
    return Console(
        color_system="auto" if colored else None,
        force_terminal=tty,
        no_color=not colored,
        emoji=emoji,
        soft_wrap=True,
        highlight=False,
    )


def get_console(*, color: bool, emoji: bool) -> Console:
    """Return the shared console for the given presentation flags.

    Consoles resolve ``sys.stdout`` when printing, so a cached console still
    follows stream redirection.

    Args:
        color: Whether colour output is wanted; it is dropped off-terminal.
        emoji: Whether Rich may render emoji glyphs.

    Returns:
        Console: Console shared by every caller passing the same flags.
    """

    return _console_for(color, emoji, detect_tty())


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise an empty string."""

    return symbol if enable else ""


def message(level: MessageLevel, msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print ``msg`` styled for ``level``.

    Args:
        level: One of ``info``, ``ok``, ``warn`` or ``fail``.
        msg: Text printed verbatim; Rich markup is not interpreted.
        use_emoji: Prefix the level's emoji.
        use_color: Colour override; ``None`` colours only on a terminal.
    """

    prefix, style = _MESSAGE_STYLES[level]
    colored = detect_tty() if use_color is None else use_color
    text = Text(emoji(prefix, use_emoji) + msg)
    if colored:
        text.stylize(style)
    get_console(color=colored, emoji=use_emoji).print(text)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print an informational message."""

    message("info", msg, use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print a success message."""

    message("ok", msg, use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print a warning."""

    message("warn", msg, use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print an error."""

    message("fail", msg, use_emoji=use_emoji, use_color=use_color)


def section(title: str, *, use_color: bool) -> None:
    """Print a header separating blocks of output, a rule when colour is on."""

    console = get_console(color=use_color, emoji=False)
    if use_color:
        console.print(Rule(title, style="dim"))
        return
    console.print(Text(f"\n--- {title} ---"))


def enable_debug_logging() -> logging.Logger:
    """Stream the package's ``DEBUG`` records to stderr.

    Repeated calls attach a single handler.

    Returns:
        logging.Logger: The package logger.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    if getattr(logger, _DEBUG_MARKER, False):
        return logger
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    setattr(logger, _DEBUG_MARKER, True)
    return logger


__all__ = [
    "PACKAGE_LOGGER",
    "detect_tty",
    "emoji",
    "enable_debug_logging",
    "fail",
    "get_console",
    "info",
    "message",
    "ok",
    "section",
    "warn",
]
