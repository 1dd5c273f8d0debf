# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Schema of the ``codemodel`` v2 object.

Each configuration lists its targets and directories as references to
satellite files. After loading through :class:`~cmake_file_api.reply.ReplyReader`
the referenced objects are available on :attr:`Configuration.targets` and
:attr:`Configuration.directories`, at the same positions as the references,
so every integer index in the graph (``target_indexes``, ``directory_index``,
``parent_index``...) addresses them directly.
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from pydantic import Field, NonNegativeInt, PrivateAttr

from ..base import ApiModel, ApiObject, ObjectKind, ReferenceField
from .directory import Directory
from .target import Target


class CodeModelPaths(ApiModel):
    """Absolute top-level source and build directories."""

    source: Path
    build: Path


class MinimumCMakeVersion(ApiModel):
    """Version given to the most local ``cmake_minimum_required(VERSION)`` call."""

    version: str = Field(alias="string")


class DirectoryReference(ApiModel):
    """Entry of a configuration's ``directories`` array."""

    source: Path
    build: Path
    parent_index: NonNegativeInt | None = None
    child_indexes: tuple[NonNegativeInt, ...] = ()
    project_index: NonNegativeInt
    target_indexes: tuple[NonNegativeInt, ...] = ()
    minimum_cmake_version: MinimumCMakeVersion | None = Field(default=None, alias="minimumCMakeVersion")
    has_install_rule: bool = False
    json_file: Path


class TargetReference(ApiModel):
    """Entry of a configuration's ``targets`` array.

    ``id`` matches the ``id`` of the referenced target object and is unique
    across the whole codemodel; positional lookups use the array index.
    """

    name: str
    id: str
    directory_index: NonNegativeInt
    project_index: NonNegativeInt
    json_file: Path


class Project(ApiModel):
    """Top-level project or subproject declared with ``project()``."""

    name: str
    parent_index: NonNegativeInt | None = None
    child_indexes: tuple[NonNegativeInt, ...] = ()
    directory_indexes: tuple[NonNegativeInt, ...]
    target_indexes: tuple[NonNegativeInt, ...] = ()


class Configuration(ApiModel):
    """Build configuration such as ``Debug``.

    ``directory_refs`` and ``target_refs`` mirror the wire ``directories``
    and ``targets`` arrays. The resolved objects are not part of the wire
    format and stay empty until the codemodel is read through a reply reader.
    """

    reference_fields: ClassVar[tuple[ReferenceField, ...]] = (
        ReferenceField(refs="target_refs", resolved="_targets", model=Target),
        ReferenceField(refs="directory_refs", resolved="_directories", model=Directory),
    )

    name: str
    projects: tuple[Project, ...]
    directory_refs: tuple[DirectoryReference, ...] = Field(alias="directories")
    target_refs: tuple[TargetReference, ...] = Field(alias="targets")

    _targets: tuple[Target, ...] = PrivateAttr(default=())
    _directories: tuple[Directory, ...] = PrivateAttr(default=())

    @property
    def targets(self) -> tuple[Target, ...]:
        """Return resolved targets; position ``i`` corresponds to ``target_refs[i]``."""

        return self._targets

    @property
    def directories(self) -> tuple[Directory, ...]:
        """Return resolved directories; position ``i`` corresponds to ``directory_refs[i]``."""

        return self._directories

    @property
    def is_resolved(self) -> bool:
        """Return ``True`` once every reference has a loaded counterpart."""

        return len(self._targets) == len(self.target_refs) and len(self._directories) == len(self.directory_refs)

    def target_by_name(self, name: str) -> Target | None:
        """Return the resolved target called ``name``."""

        return next((target for target in self._targets if target.name == name), None)

    def target_by_id(self, target_id: str) -> Target | None:
        """Return the resolved target whose opaque id is ``target_id``."""

        return next((target for target in self._targets if target.id == target_id), None)

    def project_targets(self, project: Project) -> tuple[Target, ...]:
        """Return the resolved targets owned by ``project``, excluding subprojects."""

        return tuple(self._targets[index] for index in project.target_indexes)

    def directory_targets(self, directory: DirectoryReference) -> tuple[Target, ...]:
        """Return the resolved targets defined in ``directory``, excluding subdirectories."""

        return tuple(self._targets[index] for index in directory.target_indexes)


class CodeModel(ApiObject):
    """The ``codemodel`` object kind describes the build system structure as modeled by CMake."""

    OBJECT_KIND: ClassVar[ObjectKind] = ObjectKind.CODEMODEL
    MAJOR_VERSION: ClassVar[int] = 2

    paths: CodeModelPaths
    configurations: tuple[Configuration, ...]

    def configuration(self, name: str) -> Configuration | None:
        """Return the configuration called ``name`` (e.g. ``"Debug"``)."""

        return next((config for config in self.configurations if config.name == name), None)


__all__ = [
    "CodeModel",
    "CodeModelPaths",
    "Configuration",
    "DirectoryReference",
    "MinimumCMakeVersion",
    "Project",
    "TargetReference",
]
