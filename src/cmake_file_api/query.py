# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Writers for file-api query files in ``.cmake/api/v1/query``.

Stateless queries are empty marker files named ``<kind>-v<major>``. A
stateful query is a single ``<client>/query.json`` document listing the
requested objects together with opaque client data that CMake echoes back in
the reply index.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from .errors import ClientNameNotSetError
from .io import load_model, write_text
from .objects.base import ApiObject, ObjectKind
from .objects.registry import registered_objects
from .paths import StrPath, query_dir
from .types import JSONValue

LOGGER = logging.getLogger(__name__)

QUERY_FILENAME: Final[str] = "query.json"


class RequestVersion(BaseModel):
    """Requested version; ``minor`` is only meaningful for stateful queries."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    major: NonNegativeInt
    minor: NonNegativeInt | None = None


class Request(BaseModel):
    """Single object request."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: ObjectKind
    version: RequestVersion

    @property
    def stateless_name(self) -> str:
        """Return the marker file name used for a stateless query."""

        return f"{self.kind.wire_tag}-v{self.version.major}"

    def to_json(self) -> dict[str, JSONValue]:
        """Return the wire form, omitting an unset ``minor``."""

        return self.model_dump(mode="json", exclude_none=True)


class Query(BaseModel):
    """Content of a stateful ``query.json``."""

    model_config = ConfigDict(extra="forbid")

    requests: list[Request] = Field(default_factory=list)
    client: JSONValue = None

    def to_json(self) -> dict[str, JSONValue]:
        """Return the wire form; ``client`` is always present, possibly ``null``."""

        return {
            "requests": [request.to_json() for request in self.requests],
            "client": self.client,
        }


class QueryWriter:
    """Collect object requests and write them as query files.

    Example:
        >>> QueryWriter().request_object(CodeModelV2).write_stateless("build")  # doctest: +SKIP
    """

    def __init__(self) -> None:
        """Create a writer with no requests and no client."""

        self._query = Query()
        self._client_name: str | None = None

    @property
    def query(self) -> Query:
        """Return a copy of the query collected so far."""

        return self._query.model_copy(deep=True)

    @property
    def client_name(self) -> str | None:
        """Return the client name set for stateful queries."""

        return self._client_name

    def request(self, kind: ObjectKind | str, major: int, minor: int | None = None) -> QueryWriter:
        """Request ``kind`` at ``major`` (and optionally ``minor``) version."""

        self._query.requests.append(
            Request(kind=ObjectKind(kind), version=RequestVersion(major=major, minor=minor)),
        )
        return self

    def request_object(self, object_type: type[ApiObject]) -> QueryWriter:
        """Request ``object_type`` at the major version it decodes."""

        return self.request(object_type.OBJECT_KIND, object_type.required_major())

    def request_object_exact(self, object_type: type[ApiObject], minor: int) -> QueryWriter:
        """Request ``object_type`` at an exact minor version; only stateful queries carry it."""

        return self.request(object_type.OBJECT_KIND, object_type.required_major(), minor)

    def request_all_objects(self) -> QueryWriter:
        """Request every object kind this package can decode."""

        for object_type in registered_objects():
            self.request_object(object_type)
        return self

    def set_client(self, client_name: str, client_data: JSONValue = None) -> QueryWriter:
        """Set the client directory name and the data CMake should echo back."""

        if client_name in {"", ".", ".."} or "/" in client_name or "\\" in client_name:
            raise ValueError(f"invalid client name '{client_name}'")
        self._client_name = client_name
        self._query.client = client_data
        return self

    def write_stateless(self, build_dir: StrPath) -> tuple[Path, ...]:
        """Write one empty marker file per request.

        Args:
            build_dir: CMake build directory.

        Returns:
            tuple[Path, ...]: Paths of the written marker files.

        Raises:
            QueryIOError: If the query directory or a marker file cannot be written.
        """

        directory = query_dir(build_dir)
        written = tuple(write_text(directory / request.stateless_name, "") for request in self._query.requests)
        LOGGER.debug("wrote %d stateless query file(s) to %s", len(written), directory)
        return written

    def write_stateful(self, build_dir: StrPath) -> Path:
        """Write ``<client>/query.json`` holding every request and the client data.

        Args:
            build_dir: CMake build directory.

        Returns:
            Path: Path of the written ``query.json``.

        Raises:
            ClientNameNotSetError: If :meth:`set_client` was not called.
            QueryIOError: If the query file cannot be written.
        """

        if self._client_name is None:
            raise ClientNameNotSetError()
        path = query_dir(build_dir) / self._client_name / QUERY_FILENAME
        write_text(path, json.dumps(self._query.to_json()))
        LOGGER.debug("wrote stateful query for client %s to %s", self._client_name, path)
        return path


def read_stateful_query(build_dir: StrPath, client_name: str) -> Query:
    """Read back the stateful query previously written for ``client_name``.

    Raises:
        ReplyIOError: If the query file is missing or unreadable.
        ReplyDecodeError: If the query file is malformed.
    """

    return load_model(query_dir(build_dir) / client_name / QUERY_FILENAME, Query)


__all__ = [
    "QUERY_FILENAME",
    "Query",
    "QueryWriter",
    "Request",
    "RequestVersion",
    "query_dir",
    "read_stateful_query",
]
