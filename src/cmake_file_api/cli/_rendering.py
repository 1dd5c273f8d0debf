# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rich renderables shared by the reply inspection commands."""

from __future__ import annotations

from collections.abc import Iterable

from rich.table import Table

from ..index import CMakeInfo, ReplyFileReference
from ..objects.codemodel_v2 import CompileGroup, Source, Target


def describe_cmake(cmake: CMakeInfo) -> str:
    """Return a one-line summary of the CMake instance that wrote the reply."""

    generator = cmake.generator
    platform = f" [{generator.platform}]" if generator.platform else ""
    layout = "multi-config" if generator.multi_config else "single-config"
    return f"CMake {cmake.version.string} using {generator.name}{platform} ({layout})"


def build_catalog_table(objects: Iterable[ReplyFileReference]) -> Table:
    """Return a table listing every catalog entry of the index."""

    table = Table(title="Reply objects", show_lines=False)
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Version", no_wrap=True)
    table.add_column("File", overflow="fold")
    for entry in objects:
        table.add_row(entry.kind.value, str(entry.version), str(entry.json_file))
    return table


def describe_source(target: Target, source: Source) -> list[str]:
    """Return the lines printed for ``source``: its path then its compile settings."""

    marker = " (generated)" if source.is_generated else ""
    lines = [f"{source.path}{marker}"]
    group = target.compile_group_for(source)
    if group is not None:
        lines.extend(f"    {line}" for line in describe_compile_group(group))
    return lines


def describe_compile_group(group: CompileGroup) -> list[str]:
    """Return the language, include, define and flag lines of ``group``."""

    lines = [f"language: {group.language}"]
    if group.language_standard is not None:
        lines[0] += f" (standard {group.language_standard.standard})"
    includes = [f"{include.path}{' [system]' if include.is_system else ''}" for include in group.includes]
    for label, values in (("includes", includes), ("defines", group.all_defines()), ("flags", group.flags())):
        if values:
            lines.append(f"{label}: {' '.join(values)}")
    return lines


__all__ = [
    "build_catalog_table",
    "describe_cmake",
    "describe_compile_group",
    "describe_source",
]
