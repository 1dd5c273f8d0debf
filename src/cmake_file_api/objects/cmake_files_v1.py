# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Schema of the ``cmakeFiles`` v1 object."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from pydantic import Field

from ..types import JSONValue
from .base import ApiModel, ApiObject, ObjectKind


class CMakeFilesPaths(ApiModel):
    """Top-level source and build directories, with forward slashes."""

    source: Path
    build: Path


class CMakeFilesInput(ApiModel):
    """Input file read by CMake while configuring and generating."""

    path: Path
    is_generated: bool = False
    is_external: bool = False
    is_cmake: bool = Field(default=False, alias="isCMake")


class CMakeFiles(ApiObject):
    """The ``cmakeFiles`` object kind lists CMakeLists.txt and included ``.cmake`` files."""

    OBJECT_KIND: ClassVar[ObjectKind] = ObjectKind.CMAKE_FILES
    MAJOR_VERSION: ClassVar[int] = 1

    paths: CMakeFilesPaths
    inputs: tuple[CMakeFilesInput, ...]
    # Added in cmakeFiles 1.1; entries are kept as raw JSON.
    globs_dependent: tuple[JSONValue, ...] = ()

    def project_inputs(self) -> tuple[CMakeFilesInput, ...]:
        """Return inputs that belong to the project rather than CMake or the build tree."""

        return tuple(item for item in self.inputs if not (item.is_cmake or item.is_generated or item.is_external))


__all__ = ["CMakeFiles", "CMakeFilesInput", "CMakeFilesPaths"]
