# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Client library for CMake's file-based API.

Write queries with :class:`QueryWriter`, run CMake on the build directory,
then read the typed reply objects with :class:`ReplyReader`.
"""

from __future__ import annotations

from importlib import metadata

from . import objects
from .config import IndexSelection, ReaderSettings
from .errors import (
    ClientNameNotSetError,
    CMakeFileApiError,
    FileApiNotGeneratedError,
    ObjectNotFoundError,
    QueryIOError,
    ReaderError,
    ReplyDecodeError,
    ReplyIOError,
    WriterError,
)
from .index import Index
from .paths import api_dir, query_dir, reply_dir
from .query import QueryWriter, read_stateful_query
from .reply import ReplyReader, index_file, is_available, locate_index

__all__ = [
    "CMakeFileApiError",
    "ClientNameNotSetError",
    "FileApiNotGeneratedError",
    "Index",
    "IndexSelection",
    "ObjectNotFoundError",
    "QueryIOError",
    "QueryWriter",
    "ReaderError",
    "ReaderSettings",
    "ReplyDecodeError",
    "ReplyIOError",
    "ReplyReader",
    "WriterError",
    "__version__",
    "api_dir",
    "index_file",
    "is_available",
    "locate_index",
    "objects",
    "query_dir",
    "read_stateful_query",
    "reply_dir",
]

try:
    __version__ = metadata.version("cmake-file-api")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
