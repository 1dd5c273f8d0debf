# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for locating the reply index and loading typed objects."""

from __future__ import annotations

from pathlib import Path

import pytest

from cmake_file_api import (
    FileApiNotGeneratedError,
    ObjectNotFoundError,
    ReaderSettings,
    ReplyDecodeError,
    ReplyIOError,
    ReplyReader,
    index_file,
    is_available,
    locate_index,
)
from cmake_file_api.config import IndexSelection
from cmake_file_api.objects import CacheV2, CMakeFilesV1, CodeModelV2, ConfigureLogV1, ObjectKind, ToolchainsV1
from cmake_file_api.reply import index_candidates


def test_missing_api_directory_is_reported_as_not_generated(tmp_path: Path) -> None:
    with pytest.raises(FileApiNotGeneratedError) as excinfo:
        ReplyReader.from_build_dir(tmp_path)

    assert excinfo.value.build_dir == tmp_path
    assert not is_available(tmp_path)
    assert index_file(tmp_path) is None


def test_reply_directory_without_index_is_an_io_error(builder) -> None:
    builder.write("codemodel-v2-0000.json", {})

    with pytest.raises(ReplyIOError) as excinfo:
        locate_index(builder.build_dir)

    assert isinstance(excinfo.value.cause, FileNotFoundError)
    assert not is_available(builder.build_dir)


def test_malformed_index_is_a_decode_error(builder) -> None:
    builder.write_raw("index-2024-01-01T00-00-00-0000.json", "{ not json")

    with pytest.raises(ReplyDecodeError):
        ReplyReader.from_build_dir(builder.build_dir)


def test_index_with_unknown_field_names_the_field(builder) -> None:
    builder.write_index(extra={"unexpected": True})

    with pytest.raises(ReplyDecodeError) as excinfo:
        ReplyReader.from_build_dir(builder.build_dir)

    assert "unknown field `extra`" in excinfo.value.detail


def test_index_candidates_ignore_other_files(builder) -> None:
    builder.write_index("index-b.json")
    builder.write_index("index-a.JSON")
    builder.write("cache-v2.json", {})
    (builder.reply_dir / "index-dir.json").mkdir()

    assert [path.name for path in index_candidates(builder.build_dir)] == ["index-a.JSON", "index-b.json"]


def test_latest_index_is_selected_by_default(builder) -> None:
    builder.write_index("index-2024-01-01T00-00-00-0000.json")
    builder.write_index("index-2024-06-01T00-00-00-0000.json")

    assert index_file(builder.build_dir).name == "index-2024-06-01T00-00-00-0000.json"
    first = ReaderSettings(index_selection=IndexSelection.FIRST)
    assert index_file(builder.build_dir, settings=first).name == "index-2024-01-01T00-00-00-0000.json"


def test_reader_exposes_index_and_paths(populated_build: Path) -> None:
    reader = ReplyReader.from_build_dir(populated_build)

    assert is_available(populated_build)
    assert reader.build_dir == populated_build
    assert reader.reply_dir == populated_build / ".cmake" / "api" / "v1" / "reply"
    assert reader.index.cmake.version.string == "3.28.1"
    assert reader.settings.encoding == "utf-8"


def test_has_object_checks_kind_and_major(populated_build: Path) -> None:
    reader = ReplyReader.from_build_dir(populated_build)

    assert reader.has_object(CodeModelV2)
    assert reader.find_object(ObjectKind.CODEMODEL, 1) is None


def test_absent_kind_raises_object_not_found(builder) -> None:
    builder.add_object("cache", 2, 0, {"entries": []})
    builder.write_index()
    reader = ReplyReader.from_build_dir(builder.build_dir)

    with pytest.raises(ObjectNotFoundError) as excinfo:
        reader.read_object(CodeModelV2)

    assert excinfo.value.kind is ObjectKind.CODEMODEL
    assert excinfo.value.major == 2
    assert str(excinfo.value) == "object codemodel-v2 not found in reply index"


def test_wrong_major_version_is_not_found(builder) -> None:
    builder.add_object("cache", 3, 0, {"entries": []})
    builder.write_index()
    reader = ReplyReader.from_build_dir(builder.build_dir)

    assert not reader.has_object(CacheV2)
    with pytest.raises(ObjectNotFoundError):
        reader.read_object(CacheV2)


def test_missing_object_file_is_an_io_error(builder) -> None:
    entry = builder.add_object("cache", 2, 0, {"entries": []})
    builder.write_index()
    (builder.reply_dir / entry["jsonFile"]).unlink()
    reader = ReplyReader.from_build_dir(builder.build_dir)

    with pytest.raises(ReplyIOError):
        reader.read_object(CacheV2)


def test_object_with_unknown_field_is_a_decode_error(builder) -> None:
    builder.add_object("configureLog", 1, 0, {"path": "log.yaml", "eventKindNames": [], "extra": 1})
    builder.write_index()
    reader = ReplyReader.from_build_dir(builder.build_dir)

    with pytest.raises(ReplyDecodeError, match="unknown field `extra`"):
        reader.read_object(ConfigureLogV1)


def test_flat_objects_are_loaded(populated_build: Path) -> None:
    reader = ReplyReader.from_build_dir(populated_build)

    cache = reader.read_object(CacheV2)
    toolchains = reader.read_object(ToolchainsV1)
    cmake_files = reader.read_object(CMakeFilesV1)
    configure_log = reader.read_object(ConfigureLogV1)

    assert cache.entry("CMAKE_BUILD_TYPE").value == "Debug"
    assert toolchains.for_language("CXX").compiler.id == "GNU"
    assert [item.path for item in cmake_files.project_inputs()] == [Path("CMakeLists.txt")]
    assert configure_log.event_kind_names == ("try_compile-v1", "try_run-v1")


def test_read_kind_dispatches_through_registry(populated_build: Path) -> None:
    reader = ReplyReader.from_build_dir(populated_build)

    assert isinstance(reader.read_kind("toolchains"), ToolchainsV1)
    with pytest.raises(KeyError):
        reader.read_kind("bogus")


def test_reads_are_independent(populated_build: Path) -> None:
    reader = ReplyReader.from_build_dir(populated_build)

    first = reader.read_object(CodeModelV2)
    second = reader.read_object(CodeModelV2)

    assert first is not second
    assert first.configurations[0].targets[0] == second.configurations[0].targets[0]
