# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Schema of the ``toolchains`` v1 object."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from .base import ApiModel, ApiObject, ObjectKind


class ImplicitInfo(ApiModel):
    """Values of the ``CMAKE_<LANG>_IMPLICIT_*`` variables."""

    include_directories: tuple[Path, ...] = ()
    link_directories: tuple[Path, ...] = ()
    link_framework_directories: tuple[Path, ...] = ()
    link_libraries: tuple[str, ...] = ()


class Compiler(ApiModel):
    """Compiler details for one language."""

    path: Path | None = None
    id: str | None = None
    version: str | None = None
    target: str | None = None
    implicit: ImplicitInfo = ImplicitInfo()
    command_fragment: str | None = None


class Toolchain(ApiModel):
    """Toolchain used for one enabled language."""

    language: str
    compiler: Compiler
    source_file_extensions: tuple[str, ...] = ()


class Toolchains(ApiObject):
    """The ``toolchains`` object kind lists properties of the toolchains used during the build."""

    OBJECT_KIND: ClassVar[ObjectKind] = ObjectKind.TOOLCHAINS
    MAJOR_VERSION: ClassVar[int] = 1

    toolchains: tuple[Toolchain, ...]

    def for_language(self, language: str) -> Toolchain | None:
        """Return the toolchain for ``language`` (e.g. ``"CXX"``) if enabled."""

        return next((toolchain for toolchain in self.toolchains if toolchain.language == language), None)


__all__ = ["Compiler", "ImplicitInfo", "Toolchain", "Toolchains"]
