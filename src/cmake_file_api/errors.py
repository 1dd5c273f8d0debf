# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exceptions raised while writing queries and reading replies."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - import cycle guard for annotations only
    from .objects.base import ObjectKind


class CMakeFileApiError(Exception):
    """Base class for every error surfaced by the package."""


class ReaderError(CMakeFileApiError):
    """Raised when the reply directory cannot be read into typed objects."""


class ReplyIOError(ReaderError):
    """Raised when a reply file is missing or unreadable."""

    def __init__(self, path: Path, cause: OSError) -> None:
        """Record the failing ``path`` and the underlying OS ``cause``."""

        super().__init__(f"{path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause


class ReplyDecodeError(ReaderError):
    """Raised when a reply file is not valid JSON or does not match its schema."""

    def __init__(self, path: Path, detail: str) -> None:
        """Record the offending ``path`` and a human-readable ``detail``."""

        super().__init__(f"{path}: {detail}")
        self.path = path
        self.detail = detail


class FileApiNotGeneratedError(ReaderError):
    """Raised when CMake has not generated the file-api reply for a build directory."""

    def __init__(self, build_dir: Path) -> None:
        """Record the ``build_dir`` that lacks a reply index."""

        super().__init__(f"cmake-file-api is not generated for build directory {build_dir}")
        self.build_dir = build_dir


class ObjectNotFoundError(ReaderError):
    """Raised when the reply index does not list the requested object kind and major version."""

    def __init__(self, kind: ObjectKind, major: int) -> None:
        """Record the requested ``kind`` and ``major`` version."""

        super().__init__(f"object {kind.value}-v{major} not found in reply index")
        self.kind = kind
        self.major = major


class WriterError(CMakeFileApiError):
    """Raised when query files cannot be written."""


class QueryIOError(WriterError):
    """Raised when a query file or directory cannot be created."""

    def __init__(self, path: Path, cause: OSError) -> None:
        """Record the failing ``path`` and the underlying OS ``cause``."""

        super().__init__(f"{path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause


class ClientNameNotSetError(WriterError):
    """Raised when a stateful query is written without a client name."""

    def __init__(self) -> None:
        """Create the error with a fixed message."""

        super().__init__("client name not set; call set_client() before write_stateful()")


__all__ = (
    "CMakeFileApiError",
    "ClientNameNotSetError",
    "FileApiNotGeneratedError",
    "ObjectNotFoundError",
    "QueryIOError",
    "ReaderError",
    "ReplyDecodeError",
    "ReplyIOError",
    "WriterError",
)
