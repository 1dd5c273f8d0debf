# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Reader for file-api replies written by CMake into ``.cmake/api/v1/reply``."""

from __future__ import annotations

import errno
import logging
import os
from pathlib import Path
from typing import Final, TypeVar

from .config import DEFAULT_SETTINGS, IndexSelection, ReaderSettings
from .errors import FileApiNotGeneratedError, ObjectNotFoundError, ReplyIOError
from .index import Index, ReplyFileReference
from .io import load_model
from .objects.base import ApiObject, ObjectKind
from .objects.registry import object_type_for
from .paths import StrPath, reply_dir
from .resolver import resolve_references

LOGGER = logging.getLogger(__name__)

INDEX_PREFIX: Final[str] = "index-"
INDEX_SUFFIX: Final[str] = ".json"

ObjectT = TypeVar("ObjectT", bound=ApiObject)


def index_candidates(build_dir: StrPath) -> tuple[Path, ...]:
    """Return every ``index-*.json`` file in the reply directory, sorted by name.

    The extension is matched case-insensitively; directories are ignored.
    An absent reply directory yields an empty tuple.
    """

    directory = reply_dir(build_dir)
    if not directory.is_dir():
        return ()
    candidates = (
        path
        for path in directory.iterdir()
        if path.name.startswith(INDEX_PREFIX) and path.suffix.lower() == INDEX_SUFFIX and path.is_file()
    )
    return tuple(sorted(candidates, key=lambda path: path.name))


def index_file(build_dir: StrPath, *, settings: ReaderSettings | None = None) -> Path | None:
    """Return the reply index file for ``build_dir``.

    Args:
        build_dir: CMake build directory.
        settings: Reader options selecting among several index files.

    Returns:
        Path | None: Selected index file, or ``None`` when the reply directory
        is absent or holds no index file.
    """

    candidates = index_candidates(build_dir)
    if not candidates:
        return None
    selection = (settings or DEFAULT_SETTINGS).index_selection
    return candidates[0] if selection is IndexSelection.FIRST else candidates[-1]


def locate_index(build_dir: StrPath, *, settings: ReaderSettings | None = None) -> Path:
    """Return the reply index file for ``build_dir`` or explain why there is none.

    Args:
        build_dir: CMake build directory.
        settings: Reader options selecting among several index files.

    Returns:
        Path: Selected index file.

    Raises:
        FileApiNotGeneratedError: If the reply directory does not exist.
        ReplyIOError: If the reply directory exists but holds no index file.
    """

    directory = reply_dir(build_dir)
    if not directory.is_dir():
        raise FileApiNotGeneratedError(Path(build_dir))
    path = index_file(build_dir, settings=settings)
    if path is None:
        missing = directory / f"{INDEX_PREFIX}*{INDEX_SUFFIX}"
        raise ReplyIOError(missing, FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(missing)))
    return path


def is_available(build_dir: StrPath) -> bool:
    """Return ``True`` when CMake generated a reply index for ``build_dir``."""

    return index_file(build_dir) is not None


class ReplyReader:
    """Typed access to the objects listed in a reply index.

    The index is parsed once when the reader is created. Every
    :meth:`read_object` call reads its files afresh and shares no mutable
    state with other calls.

    Example:
        >>> reader = ReplyReader.from_build_dir("build")  # doctest: +SKIP
        >>> codemodel = reader.read_object(CodeModelV2)  # doctest: +SKIP
        >>> [target.name for target in codemodel.configurations[0].targets]  # doctest: +SKIP
    """

    def __init__(self, build_dir: Path, index: Index, *, settings: ReaderSettings | None = None) -> None:
        """Create a reader over an already parsed ``index``.

        Args:
            build_dir: CMake build directory the index belongs to.
            index: Parsed reply index.
            settings: Reader options.
        """

        self._build_dir = build_dir
        self._index = index
        self._settings = settings or DEFAULT_SETTINGS

    @classmethod
    def from_build_dir(cls, build_dir: StrPath, *, settings: ReaderSettings | None = None) -> ReplyReader:
        """Locate and parse the reply index of ``build_dir``.

        Args:
            build_dir: CMake build directory.
            settings: Reader options.

        Returns:
            ReplyReader: Reader bound to the parsed index.

        Raises:
            FileApiNotGeneratedError: If the reply directory is absent.
            ReplyIOError: If the index file is absent or cannot be read.
            ReplyDecodeError: If the index file is malformed.
        """

        root = Path(build_dir)
        resolved_settings = settings or DEFAULT_SETTINGS
        path = locate_index(root, settings=resolved_settings)
        LOGGER.debug("reading reply index %s", path)
        index = load_model(path, Index, encoding=resolved_settings.encoding)
        return cls(root, index, settings=resolved_settings)

    @property
    def build_dir(self) -> Path:
        """Return the build directory the reader is bound to."""

        return self._build_dir

    @property
    def reply_dir(self) -> Path:
        """Return the directory object files are resolved against."""

        return reply_dir(self._build_dir)

    @property
    def index(self) -> Index:
        """Return the parsed reply index."""

        return self._index

    @property
    def settings(self) -> ReaderSettings:
        """Return the reader options."""

        return self._settings

    def has_object(self, object_type: type[ApiObject]) -> bool:
        """Return ``True`` when the index lists ``object_type`` at its required major version."""

        return self.find_object(object_type.OBJECT_KIND, object_type.required_major()) is not None

    def find_object(self, kind: ObjectKind, major: int) -> ReplyFileReference | None:
        """Return the first catalog entry for ``kind`` and ``major``, if any."""

        return self._index.find_object(kind, major)

    def read_object(self, object_type: type[ObjectT]) -> ObjectT:
        """Read, decode and resolve the object described by ``object_type``.

        Args:
            object_type: Schema class, e.g. :class:`~cmake_file_api.objects.CodeModelV2`.

        Returns:
            ObjectT: Fully resolved object.

        Raises:
            ObjectNotFoundError: If the index does not list the kind at the schema's major version.
            ReplyIOError: If the object file or a file it references cannot be read.
            ReplyDecodeError: If the object file or a file it references is malformed.
        """

        kind = object_type.OBJECT_KIND
        major = object_type.required_major()
        entry = self.find_object(kind, major)
        if entry is None:
            raise ObjectNotFoundError(kind, major)
        directory = self.reply_dir
        path = directory / entry.json_file
        obj = load_model(path, object_type, encoding=self._settings.encoding)
        resolve_references(obj, directory, settings=self._settings)
        LOGGER.debug("loaded %s v%s from %s", kind.value, entry.version, path.name)
        return obj

    def read_kind(self, kind: ObjectKind | str) -> ApiObject:
        """Read the object of ``kind`` using the schema registered for it.

        Raises:
            KeyError: If no schema is registered for ``kind``.
        """

        return self.read_object(object_type_for(kind))


__all__ = [
    "INDEX_PREFIX",
    "ReplyReader",
    "index_candidates",
    "index_file",
    "is_available",
    "locate_index",
    "reply_dir",
]
