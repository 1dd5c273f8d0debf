# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures building synthetic reply directories."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import pytest

from reply_factory import CMAKE_INFO, ReplyBuilder


@pytest.fixture
def cmake_info() -> dict[str, Any]:
    """Return a fresh copy of the tool information block of an index."""

    return copy.deepcopy(CMAKE_INFO)


@pytest.fixture
def builder(tmp_path: Path) -> ReplyBuilder:
    """Return a builder rooted at a fresh build directory."""

    build_dir = tmp_path / "build"
    build_dir.mkdir()
    return ReplyBuilder(build_dir)


@pytest.fixture
def populated_build(builder: ReplyBuilder) -> Path:
    """Return a build directory holding a complete reply with every object kind."""

    codemodel = builder.add_codemodel({"Debug": (["app", "core"], [".", "lib"])})
    builder.add_object(
        "cache",
        2,
        0,
        {
            "entries": [
                {
                    "name": "CMAKE_BUILD_TYPE",
                    "value": "Debug",
                    "type": "STRING",
                    "properties": [{"name": "HELPSTRING", "value": "Choose the type of build."}],
                },
            ],
        },
    )
    builder.add_object(
        "toolchains",
        1,
        0,
        {
            "toolchains": [
                {
                    "language": "CXX",
                    "compiler": {
                        "path": "/usr/bin/c++",
                        "id": "GNU",
                        "version": "13.2.0",
                        "implicit": {
                            "includeDirectories": ["/usr/include"],
                            "linkDirectories": ["/usr/lib"],
                            "linkFrameworkDirectories": [],
                            "linkLibraries": ["stdc++", "m"],
                        },
                    },
                    "sourceFileExtensions": ["cpp", "cc"],
                },
            ],
        },
    )
    builder.add_object(
        "cmakeFiles",
        1,
        1,
        {
            "paths": {"source": "/src", "build": str(builder.build_dir)},
            "inputs": [
                {"path": "CMakeLists.txt"},
                {"path": "/usr/share/cmake/Modules/CMakeCXXInformation.cmake", "isExternal": True, "isCMake": True},
                {"path": "CMakeFiles/3.28.1/CMakeSystem.cmake", "isGenerated": True},
            ],
        },
    )
    builder.add_object(
        "configureLog",
        1,
        0,
        {"path": "CMakeFiles/CMakeConfigureLog.yaml", "eventKindNames": ["try_compile-v1", "try_run-v1"]},
    )
    builder.reply = {
        "codemodel-v2": codemodel,
        "cache-v1": {"error": "unknown request kind version"},
        "client-ide": {
            "query.json": {
                "client": {"session": 7},
                "requests": [{"kind": "codemodel", "version": 2}],
                "responses": [codemodel],
            },
            "codemodel-v2": codemodel,
            "bogus-v1": {"error": "unknown request kind 'bogus'"},
        },
    }
    builder.write_index()
    return builder.build_dir
