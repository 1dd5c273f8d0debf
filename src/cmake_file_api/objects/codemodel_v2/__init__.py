# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Codemodel v2 object and the satellite objects it references."""

from __future__ import annotations

from .backtrace_graph import BacktraceFrame, BacktraceGraph, BacktraceNode
from .codemodel import (
    CodeModel,
    CodeModelPaths,
    Configuration,
    DirectoryReference,
    MinimumCMakeVersion,
    Project,
    TargetReference,
)
from .directory import Directory, DirectoryPaths, FromToPaths, InstallPath, Installer, TargetIdAndIndex
from .target import (
    Archive,
    Artifact,
    CommandFragment,
    CompileCommandFragment,
    CompileGroup,
    Define,
    Dependency,
    FileSet,
    Folder,
    Framework,
    Include,
    InstallDestination,
    InstallPrefix,
    LanguageStandard,
    Launcher,
    Link,
    PrecompileHeader,
    Source,
    SourceGroup,
    SysrootPath,
    Target,
    TargetInstall,
    TargetPaths,
)

__all__ = [
    "Archive",
    "Artifact",
    "BacktraceFrame",
    "BacktraceGraph",
    "BacktraceNode",
    "CodeModel",
    "CodeModelPaths",
    "CommandFragment",
    "CompileCommandFragment",
    "CompileGroup",
    "Configuration",
    "Define",
    "Dependency",
    "Directory",
    "DirectoryPaths",
    "DirectoryReference",
    "FileSet",
    "Folder",
    "Framework",
    "FromToPaths",
    "Include",
    "InstallDestination",
    "InstallPath",
    "InstallPrefix",
    "Installer",
    "LanguageStandard",
    "Launcher",
    "Link",
    "MinimumCMakeVersion",
    "PrecompileHeader",
    "Project",
    "Source",
    "SourceGroup",
    "SysrootPath",
    "Target",
    "TargetIdAndIndex",
    "TargetInstall",
    "TargetPaths",
    "TargetReference",
]
