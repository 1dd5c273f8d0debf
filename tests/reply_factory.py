# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Factories writing synthetic file-api reply directories for tests."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from cmake_file_api.paths import reply_dir
DEFAULT_INDEX_NAME = "index-2024-05-01T10-00-00-0000.json"

CMAKE_INFO: dict[str, Any] = {
    "version": {
        "major": 3,
        "minor": 28,
        "patch": 1,
        "suffix": "",
        "string": "3.28.1",
        "isDirty": False,
    },
    "paths": {
        "cmake": "/usr/bin/cmake",
        "ctest": "/usr/bin/ctest",
        "cpack": "/usr/bin/cpack",
        "root": "/usr/share/cmake-3.28",
    },
    "generator": {"multiConfig": False, "name": "Ninja"},
}


def backtrace_graph() -> dict[str, Any]:
    return {
        "nodes": [
            {"file": 0},
            {"file": 0, "line": 7, "command": 0, "parent": 0},
        ],
        "commands": ["add_executable"],
        "files": ["CMakeLists.txt"],
    }


def target_payload(name: str, *, source: str = "main.cpp", directory: str = ".") -> dict[str, Any]:
    """Return a target object with one compiled source and one header."""

    return {
        "name": name,
        "id": f"{name}::@6890427a1f51a3e7e1df",
        "type": "EXECUTABLE",
        "backtrace": 1,
        "paths": {"source": directory, "build": directory},
        "nameOnDisk": name,
        "artifacts": [{"path": name}],
        "link": {
            "language": "CXX",
            "commandFragments": [
                {"fragment": "-O2", "role": "flags"},
                {"fragment": "libcore.a", "role": "libraries"},
            ],
        },
        "dependencies": [{"id": "core::@abcd", "backtrace": 1}],
        "sources": [
            {"path": source, "compileGroupIndex": 0, "sourceGroupIndex": 0, "backtrace": 1},
            {"path": f"{name}.h", "sourceGroupIndex": 1, "backtrace": 1},
        ],
        "sourceGroups": [
            {"name": "Source Files", "sourceIndexes": [0]},
            {"name": "Header Files", "sourceIndexes": [1]},
        ],
        "compileGroups": [
            {
                "sourceIndexes": [0],
                "language": "CXX",
                "languageStandard": {"backtraces": [1], "standard": "17"},
                "compileCommandFragments": [{"fragment": "-g -Wall -DLOCAL_FLAG=1"}],
                "includes": [
                    {"path": "/src/include", "backtrace": 1},
                    {"path": "/opt/vendor/include", "isSystem": True},
                ],
                "defines": [{"define": "APP_VERSION=2", "backtrace": 1}],
            },
        ],
        "backtraceGraph": backtrace_graph(),
    }


def directory_payload(source: str) -> dict[str, Any]:
    """Return a directory object with a target and a file installer."""

    return {
        "paths": {"source": source, "build": source},
        "installers": [
            {
                "component": "Unspecified",
                "type": "target",
                "destination": "bin",
                "paths": ["app"],
                "targetId": "app::@6890427a1f51a3e7e1df",
                "targetIndex": 0,
                "backtrace": 1,
            },
            {
                "component": "Unspecified",
                "type": "file",
                "destination": "share",
                "paths": [{"from": "data/a.txt", "to": "a.txt"}],
            },
        ],
        "backtraceGraph": backtrace_graph(),
    }


def configuration_payload(name: str, targets: Iterable[str], directories: Iterable[str]) -> dict[str, Any]:
    """Return a configuration whose targets and directories live in ``<kind>-<name>-<config>.json``."""

    target_names = list(targets)
    directory_sources = list(directories)
    return {
        "name": name,
        "projects": [
            {
                "name": "demo",
                "directoryIndexes": list(range(len(directory_sources))),
                "targetIndexes": list(range(len(target_names))),
            },
        ],
        "directories": [
            {
                "source": source,
                "build": source,
                "projectIndex": 0,
                "targetIndexes": [position] if position < len(target_names) else [],
                "jsonFile": f"directory-{source}-{name}.json",
                **({"childIndexes": [1]} if position == 0 and len(directory_sources) > 1 else {}),
                **({"parentIndex": 0} if position > 0 else {}),
                **({"minimumCMakeVersion": {"string": "3.20"}, "hasInstallRule": True} if position == 0 else {}),
            }
            for position, source in enumerate(directory_sources)
        ],
        "targets": [
            {
                "name": target,
                "id": f"{target}::@6890427a1f51a3e7e1df",
                "directoryIndex": min(position, len(directory_sources) - 1),
                "projectIndex": 0,
                "jsonFile": f"target-{target}-{name}.json",
            }
            for position, target in enumerate(target_names)
        ],
    }


class ReplyBuilder:
    """Write index and object files into ``<build>/.cmake/api/v1/reply``."""

    def __init__(self, build_dir: Path) -> None:
        self.build_dir = build_dir
        self.reply_dir = reply_dir(build_dir)
        self.objects: list[dict[str, Any]] = []
        self.reply: dict[str, Any] = {}

    def write(self, name: str, payload: Any) -> Path:
        path = self.reply_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    def write_raw(self, name: str, text: str) -> Path:
        path = self.reply_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    def add_object(self, kind: str, major: int, minor: int, payload: dict[str, Any]) -> dict[str, Any]:
        """Write ``payload`` as an object file and list it in the catalog."""

        file_name = f"{kind}-v{major}-{len(self.objects):04d}.json"
        self.write(file_name, {"kind": kind, "version": {"major": major, "minor": minor}, **payload})
        entry = {"kind": kind, "version": {"major": major, "minor": minor}, "jsonFile": file_name}
        self.objects.append(entry)
        return entry

    def add_codemodel(self, configurations: dict[str, tuple[list[str], list[str]]]) -> dict[str, Any]:
        """Write a codemodel plus one target and directory file per reference."""

        payloads = []
        for config_name, (targets, directories) in configurations.items():
            payloads.append(configuration_payload(config_name, targets, directories))
            for target in targets:
                self.write(f"target-{target}-{config_name}.json", target_payload(target, source=f"{target}.cpp"))
            for source in directories:
                self.write(f"directory-{source}-{config_name}.json", directory_payload(source))
        return self.add_object(
            "codemodel",
            2,
            6,
            {"paths": {"source": "/src", "build": str(self.build_dir)}, "configurations": payloads},
        )

    def write_index(self, name: str = DEFAULT_INDEX_NAME, **overrides: Any) -> Path:
        payload = {"cmake": CMAKE_INFO, "objects": self.objects, "reply": self.reply}
        payload.update(overrides)
        return self.write(name, payload)
