# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Models of the reply index document (``index-*.json``).

The ``reply`` mapping carries no discriminator: a value is an error record,
a reference to an object file, or a nested per-client mapping, told apart
only by shape. The unions below are therefore validated left to right and
the first variant that matches wins. Because every fixed-shape variant
forbids unknown members, an error record can never be mistaken for a file
reference and vice versa.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Annotated, TypeAlias

from pydantic import Field, NonNegativeInt

from .objects.base import ApiModel, MajorMinor, ObjectKind
from .types import JSONValue


class CMakeVersion(ApiModel):
    """Version of the CMake instance that generated the reply."""

    major: NonNegativeInt
    minor: NonNegativeInt
    patch: NonNegativeInt
    suffix: str
    string: str
    is_dirty: bool

    def as_tuple(self) -> tuple[int, int, int]:
        """Return ``(major, minor, patch)`` for ordered comparisons."""

        return (self.major, self.minor, self.patch)


class CMakePaths(ApiModel):
    """Absolute paths of the tools and resources shipped with CMake."""

    cmake: Path
    ctest: Path
    cpack: Path
    root: Path


class CMakeGenerator(ApiModel):
    """Generator used for the build tree."""

    multi_config: bool
    name: str
    platform: str | None = None


class CMakeInfo(ApiModel):
    """Information about the CMake instance that generated the reply."""

    version: CMakeVersion
    paths: CMakePaths
    generator: CMakeGenerator


class ReplyFileReference(ApiModel):
    """Catalog entry pointing at the reply file holding one object.

    ``json_file`` is relative to the reply directory.
    """

    kind: ObjectKind
    version: MajorMinor
    json_file: Path


class ReplyError(ApiModel):
    """Error CMake reports for a query it could not satisfy."""

    error: str


class QueryJson(ApiModel):
    """Echo of a stateful ``query.json`` with CMake's responses; members are free-form JSON."""

    client: JSONValue = None
    requests: JSONValue = None
    responses: JSONValue = None


ClientField: TypeAlias = Annotated[
    ReplyError | ReplyFileReference | QueryJson,
    Field(union_mode="left_to_right"),
]
ClientReplies: TypeAlias = dict[str, ClientField]
ReplyField: TypeAlias = Annotated[
    ReplyError | ReplyFileReference | ClientReplies | None,
    Field(union_mode="left_to_right"),
]


class Index(ApiModel):
    """Root index listing every generated object and the replies to each query."""

    cmake: CMakeInfo
    objects: tuple[ReplyFileReference, ...]
    reply: dict[str, ReplyField]

    def find_object(self, kind: ObjectKind, major: int) -> ReplyFileReference | None:
        """Return the first catalog entry matching ``kind`` and ``major``.

        Args:
            kind: Requested object kind.
            major: Requested major version.

        Returns:
            ReplyFileReference | None: First match in catalog order, or ``None``.
        """

        return next(
            (entry for entry in self.objects if entry.kind is kind and entry.version.major == major),
            None,
        )

    def client_replies(self, client_name: str) -> ClientReplies | None:
        """Return the replies for the stateful client ``client_name``.

        CMake files them under ``client-<name>``; both spellings are accepted.
        """

        for key in (client_name, f"client-{client_name}"):
            value = self.reply.get(key)
            if isinstance(value, dict):
                return value
        return None

    def reply_errors(self) -> Iterator[tuple[str, str]]:
        """Yield ``(label, message)`` for every error record, including nested client ones."""

        for label, value in self.reply.items():
            if isinstance(value, ReplyError):
                yield label, value.error
            elif isinstance(value, dict):
                for client_label, client_value in value.items():
                    if isinstance(client_value, ReplyError):
                        yield f"{label}/{client_label}", client_value.error


__all__ = [
    "CMakeGenerator",
    "CMakeInfo",
    "CMakePaths",
    "CMakeVersion",
    "ClientField",
    "ClientReplies",
    "Index",
    "QueryJson",
    "ReplyError",
    "ReplyField",
    "ReplyFileReference",
]
