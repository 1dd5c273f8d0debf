# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Codemodel ``directory`` object referenced from a configuration's directories."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from pydantic import Field, NonNegativeInt

from ..base import ApiModel
from .backtrace_graph import BacktraceGraph


class DirectoryPaths(ApiModel):
    """Source and build paths, relative to the top-level directories when inside them."""

    source: Path
    build: Path


class TargetIdAndIndex(ApiModel):
    """Target identified by its opaque id and its index into the configuration's targets."""

    id: str
    index: NonNegativeInt


class FromToPaths(ApiModel):
    """Install path given as an explicit source and destination pair."""

    from_path: Path = Field(alias="from")
    to_path: Path = Field(alias="to")


# A plain string is tried first; objects fall through to the explicit pair.
InstallPath = Annotated[str | FromToPaths, Field(union_mode="left_to_right")]


class Installer(ApiModel):
    """Entry corresponding to one ``install()`` rule.

    ``installer_type`` is one of ``file``, ``directory``, ``target``,
    ``export``, ``script``, ``code``, ``importedRuntimeArtifacts``,
    ``runtimeDependencySet``, ``fileSet`` or ``cxxModuleBmi``; the optional
    members are populated according to it.
    """

    component: str
    installer_type: str = Field(alias="type")
    destination: str | None = None
    paths: tuple[InstallPath, ...] = ()
    is_exclude_from_all: bool = False
    is_for_all_components: bool = False
    is_optional: bool = False
    target_id: str | None = None
    target_index: NonNegativeInt | None = None
    target_is_import_library: bool = False
    target_install_namelink: str | None = None
    export_name: str | None = None
    export_targets: tuple[TargetIdAndIndex, ...] = ()
    runtime_dependency_set_name: str | None = None
    runtime_dependency_set_type: str | None = None
    file_set_name: str | None = None
    file_set_type: str | None = None
    file_set_directories: tuple[str, ...] = ()
    file_set_target: TargetIdAndIndex | None = None
    cxx_module_bmi_target: TargetIdAndIndex | None = None
    script_file: Path | None = None
    backtrace: NonNegativeInt | None = None


class Directory(ApiModel):
    """Directory object describing one build system directory and its install rules."""

    paths: DirectoryPaths
    backtrace_graph: BacktraceGraph
    installers: tuple[Installer, ...] = ()

    def installers_of_type(self, installer_type: str) -> tuple[Installer, ...]:
        """Return installers whose ``type`` equals ``installer_type``."""

        return tuple(installer for installer in self.installers if installer.installer_type == installer_type)


__all__ = [
    "Directory",
    "DirectoryPaths",
    "FromToPaths",
    "InstallPath",
    "Installer",
    "TargetIdAndIndex",
]
