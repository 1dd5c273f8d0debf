# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for writing stateless and stateful queries."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cmake_file_api import ClientNameNotSetError, QueryIOError, QueryWriter, query_dir, read_stateful_query
from cmake_file_api.objects import CacheV2, CodeModelV2, ObjectKind, registered_objects


def test_stateless_query_writes_empty_marker_files(tmp_path: Path) -> None:
    written = QueryWriter().request_object(CodeModelV2).request_object(CacheV2).write_stateless(tmp_path)

    assert written == (query_dir(tmp_path) / "codemodel-v2", query_dir(tmp_path) / "cache-v2")
    for path, object_type in zip(written, (CodeModelV2, CacheV2), strict=True):
        assert path.name == object_type.query_name()
        assert path.read_bytes() == b""


def test_stateless_query_ignores_minor_version(tmp_path: Path) -> None:
    (path,) = QueryWriter().request_object_exact(CodeModelV2, 7).write_stateless(tmp_path)

    assert path.name == "codemodel-v2"


def test_request_all_objects_covers_registry(tmp_path: Path) -> None:
    written = QueryWriter().request_all_objects().write_stateless(tmp_path)

    assert sorted(path.name for path in written) == sorted(obj.query_name() for obj in registered_objects())


def test_stateful_query_round_trip(tmp_path: Path) -> None:
    writer = (
        QueryWriter()
        .request_object(CodeModelV2)
        .request_object_exact(CacheV2, 1)
        .set_client("my-ide", {"session": [1, 2]})
    )

    path = writer.write_stateful(tmp_path)

    assert path == query_dir(tmp_path) / "my-ide" / "query.json"
    assert json.loads(path.read_text(encoding="utf-8")) == {
        "requests": [
            {"kind": "codemodel", "version": {"major": 2}},
            {"kind": "cache", "version": {"major": 2, "minor": 1}},
        ],
        "client": {"session": [1, 2]},
    }
    query = read_stateful_query(tmp_path, "my-ide")
    assert query == writer.query
    assert [request.kind for request in query.requests] == [ObjectKind.CODEMODEL, ObjectKind.CACHE]


def test_stateful_query_without_client_data_writes_null(tmp_path: Path) -> None:
    path = QueryWriter().request("toolchains", 1).set_client("tool").write_stateful(tmp_path)

    assert json.loads(path.read_text(encoding="utf-8"))["client"] is None


def test_stateful_query_requires_client_name(tmp_path: Path) -> None:
    writer = QueryWriter().request_object(CodeModelV2)

    with pytest.raises(ClientNameNotSetError):
        writer.write_stateful(tmp_path)

    assert not query_dir(tmp_path).exists()


@pytest.mark.parametrize("name", ["", ".", "..", "a/b", "a\\b"])
def test_invalid_client_names_are_rejected(name: str) -> None:
    with pytest.raises(ValueError, match="invalid client name"):
        QueryWriter().set_client(name)


def test_unknown_kind_is_rejected() -> None:
    with pytest.raises(ValueError):
        QueryWriter().request("bogus", 1)


def test_query_property_is_a_copy() -> None:
    writer = QueryWriter().request_object(CodeModelV2)

    writer.query.requests.clear()

    assert len(writer.query.requests) == 1
    assert writer.client_name is None


def test_unwritable_query_directory_raises(tmp_path: Path) -> None:
    (tmp_path / ".cmake").write_text("", encoding="utf-8")

    with pytest.raises(QueryIOError):
        QueryWriter().request_object(CodeModelV2).write_stateless(tmp_path)
