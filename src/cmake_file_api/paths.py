# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Path arithmetic for the ``.cmake/api/v1`` layout under a build directory."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Final, TypeAlias

StrPath: TypeAlias = str | PathLike[str]

API_ROOT_PARTS: Final[tuple[str, ...]] = (".cmake", "api", "v1")
QUERY_DIRNAME: Final[str] = "query"
REPLY_DIRNAME: Final[str] = "reply"


def api_dir(build_dir: StrPath) -> Path:
    """Return the file-api root (``<build>/.cmake/api/v1``) for ``build_dir``."""

    return Path(build_dir).joinpath(*API_ROOT_PARTS)


def query_dir(build_dir: StrPath) -> Path:
    """Return the directory clients write query files into."""

    return api_dir(build_dir) / QUERY_DIRNAME


def reply_dir(build_dir: StrPath) -> Path:
    """Return the directory CMake writes reply files into."""

    return api_dir(build_dir) / REPLY_DIRNAME


__all__ = ["API_ROOT_PARTS", "StrPath", "api_dir", "query_dir", "reply_dir"]
