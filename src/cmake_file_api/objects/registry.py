# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Registry of the object schemas this package can decode."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from .base import ApiObject, ObjectKind
from .cache_v2 import Cache
from .cmake_files_v1 import CMakeFiles
from .codemodel_v2 import CodeModel
from .configure_log_v1 import ConfigureLog
from .toolchains_v1 import Toolchains

OBJECT_TYPES: Final[Mapping[ObjectKind, type[ApiObject]]] = MappingProxyType(
    {
        ObjectKind.CODEMODEL: CodeModel,
        ObjectKind.CONFIGURE_LOG: ConfigureLog,
        ObjectKind.CACHE: Cache,
        ObjectKind.TOOLCHAINS: Toolchains,
        ObjectKind.CMAKE_FILES: CMakeFiles,
    },
)


def object_type_for(kind: ObjectKind | str) -> type[ApiObject]:
    """Return the schema registered for ``kind``.

    Args:
        kind: Object kind or its wire tag (e.g. ``"codemodel"``).

    Returns:
        type[ApiObject]: Schema class decoding the kind.

    Raises:
        KeyError: If ``kind`` is not a known wire tag.
    """

    try:
        return OBJECT_TYPES[ObjectKind(kind)]
    except ValueError as exc:
        raise KeyError(kind) from exc


def registered_objects() -> tuple[type[ApiObject], ...]:
    """Return every registered schema in registry order."""

    return tuple(OBJECT_TYPES.values())


__all__ = ["OBJECT_TYPES", "object_type_for", "registered_objects"]
