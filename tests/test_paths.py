# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the file-api directory layout helpers."""

from __future__ import annotations

from pathlib import Path

from cmake_file_api.paths import api_dir, query_dir, reply_dir


def test_layout_is_rooted_under_build_dir(tmp_path: Path) -> None:
    assert api_dir(tmp_path) == tmp_path / ".cmake" / "api" / "v1"
    assert query_dir(tmp_path) == tmp_path / ".cmake" / "api" / "v1" / "query"
    assert reply_dir(tmp_path) == tmp_path / ".cmake" / "api" / "v1" / "reply"


def test_string_build_dir_is_accepted() -> None:
    assert reply_dir("build") == Path("build/.cmake/api/v1/reply")


def test_paths_do_not_touch_the_filesystem(tmp_path: Path) -> None:
    missing = tmp_path / "does-not-exist"

    query_dir(missing)
    reply_dir(missing)

    assert not missing.exists()
