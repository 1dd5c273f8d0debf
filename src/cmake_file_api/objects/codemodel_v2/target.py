# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Codemodel ``target`` object referenced from a configuration's targets."""

from __future__ import annotations

import shlex
from pathlib import Path
from typing import Final

from pydantic import Field, NonNegativeInt

from ..base import ApiModel
from .backtrace_graph import BacktraceGraph

DEFINE_PREFIXES: Final[tuple[str, ...]] = ("-D", "/D")


class Folder(ApiModel):
    """Value of the ``FOLDER`` target property."""

    name: str


class TargetPaths(ApiModel):
    """Source and build directories of the target."""

    source: Path
    build: Path


class Artifact(ApiModel):
    """Artifact produced on disk for consumption by dependents."""

    path: Path


class InstallPrefix(ApiModel):
    """Value of ``CMAKE_INSTALL_PREFIX``."""

    path: Path


class InstallDestination(ApiModel):
    """Install destination, absolute or relative to the prefix."""

    path: Path
    backtrace: NonNegativeInt | None = None


class TargetInstall(ApiModel):
    """Install rule attached to the target."""

    prefix: InstallPrefix
    destinations: tuple[InstallDestination, ...] = ()


class Launcher(ApiModel):
    """Launcher (emulator or test launcher) configured for an executable."""

    command: str
    arguments: tuple[str, ...] = ()
    launcher_type: str = Field(alias="type")


class CommandFragment(ApiModel):
    """Fragment of a link or archive command line with its role."""

    fragment: str
    role: str


class SysrootPath(ApiModel):
    """Absolute sysroot path."""

    path: Path


class Link(ApiModel):
    """Link step of executables and shared libraries."""

    language: str
    command_fragments: tuple[CommandFragment, ...] = ()
    lto: bool = False
    sysroot: SysrootPath | None = None


class Archive(ApiModel):
    """Archive step of static libraries."""

    command_fragments: tuple[CommandFragment, ...] = ()
    lto: bool = False


class Dependency(ApiModel):
    """Dependency on another target, identified by its opaque id."""

    id: str
    backtrace: NonNegativeInt | None = None


class FileSet(ApiModel):
    """File set declared with ``target_sources(FILE_SET ...)``."""

    name: str
    type_name: str = Field(alias="type")
    visibility: str
    base_directories: tuple[str, ...]


class Source(ApiModel):
    """Source file of the target.

    ``compile_group_index``, ``source_group_index`` and ``file_set_index``
    index the owning target's ``compile_groups``, ``source_groups`` and
    ``file_sets``; ``backtrace`` indexes the backtrace graph nodes.
    """

    path: Path
    compile_group_index: NonNegativeInt | None = None
    source_group_index: NonNegativeInt | None = None
    is_generated: bool = False
    file_set_index: NonNegativeInt | None = None
    backtrace: NonNegativeInt | None = None


class SourceGroup(ApiModel):
    """Source group created by ``source_group()`` or by default."""

    name: str
    source_indexes: tuple[NonNegativeInt, ...]


class LanguageStandard(ApiModel):
    """Language standard set explicitly or implied by compile features."""

    backtraces: tuple[NonNegativeInt, ...] = ()
    standard: str


class CompileCommandFragment(ApiModel):
    """Fragment of the compiler command line, in the native shell format."""

    fragment: str


class Include(ApiModel):
    """Include directory."""

    path: Path
    is_system: bool = False
    backtrace: NonNegativeInt | None = None


class Framework(ApiModel):
    """Apple framework directory."""

    path: Path
    is_system: bool = False
    backtrace: NonNegativeInt | None = None


class PrecompileHeader(ApiModel):
    """Precompiled header."""

    header: Path
    backtrace: NonNegativeInt | None = None


class Define(ApiModel):
    """Preprocessor definition in ``NAME[=VALUE]`` form."""

    define: str
    backtrace: NonNegativeInt | None = None


class CompileGroup(ApiModel):
    """Sources compiled with the same language and settings."""

    source_indexes: tuple[NonNegativeInt, ...]
    language: str
    language_standard: LanguageStandard | None = None
    compile_command_fragments: tuple[CompileCommandFragment, ...] = ()
    includes: tuple[Include, ...] = ()
    frameworks: tuple[Framework, ...] = ()
    precompile_headers: tuple[PrecompileHeader, ...] = ()
    defines: tuple[Define, ...] = ()
    sysroot: SysrootPath | None = None

    def compile_fragments(self) -> tuple[str, ...]:
        """Return the compile command fragments split into single arguments.

        Fragments that cannot be split (for example unbalanced quotes) are skipped.
        """

        arguments: list[str] = []
        for fragment in self.compile_command_fragments:
            try:
                arguments.extend(shlex.split(fragment.fragment))
            except ValueError:
                continue
        return tuple(arguments)

    def all_defines(self) -> tuple[str, ...]:
        """Return declared defines followed by ``-D``/``/D`` definitions found in fragments."""

        declared = [define.define for define in self.defines]
        declared.extend(flag[2:] for flag in self.compile_fragments() if _is_define(flag))
        return tuple(declared)

    def flags(self) -> tuple[str, ...]:
        """Return the split compile fragments without preprocessor definitions."""

        return tuple(flag for flag in self.compile_fragments() if not _is_define(flag))


class Target(ApiModel):
    """Target object describing one build system target.

    ``type_name`` is one of ``EXECUTABLE``, ``STATIC_LIBRARY``,
    ``SHARED_LIBRARY``, ``MODULE_LIBRARY``, ``OBJECT_LIBRARY``,
    ``INTERFACE_LIBRARY`` or ``UTILITY``. Every ``backtrace`` member in the
    object indexes :attr:`backtrace_graph` nodes.
    """

    name: str
    id: str
    type_name: str = Field(alias="type")
    backtrace: NonNegativeInt | None = None
    folder: Folder | None = None
    paths: TargetPaths
    name_on_disk: str | None = None
    artifacts: tuple[Artifact, ...] = ()
    is_generator_provided: bool = False
    install: TargetInstall | None = None
    launchers: tuple[Launcher, ...] = ()
    link: Link | None = None
    archive: Archive | None = None
    dependencies: tuple[Dependency, ...] = ()
    file_sets: tuple[FileSet, ...] = ()
    sources: tuple[Source, ...] = ()
    source_groups: tuple[SourceGroup, ...] = ()
    compile_groups: tuple[CompileGroup, ...] = ()
    backtrace_graph: BacktraceGraph

    def compile_group_for(self, source: Source) -> CompileGroup | None:
        """Return the compile group of ``source`` or ``None`` when it is not compiled."""

        if source.compile_group_index is None:
            return None
        return self.compile_groups[source.compile_group_index]

    def source_group_for(self, source: Source) -> SourceGroup | None:
        """Return the source group of ``source`` or ``None`` when it has none."""

        if source.source_group_index is None:
            return None
        return self.source_groups[source.source_group_index]


def _is_define(flag: str) -> bool:
    return flag.startswith(DEFINE_PREFIXES)


__all__ = [
    "Archive",
    "Artifact",
    "CommandFragment",
    "CompileCommandFragment",
    "CompileGroup",
    "Define",
    "Dependency",
    "FileSet",
    "Folder",
    "Framework",
    "Include",
    "InstallDestination",
    "InstallPrefix",
    "LanguageStandard",
    "Launcher",
    "Link",
    "PrecompileHeader",
    "Source",
    "SourceGroup",
    "SysrootPath",
    "Target",
    "TargetInstall",
    "TargetPaths",
]
