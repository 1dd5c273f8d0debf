# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Typed schemas of the objects published by the file-api."""

from __future__ import annotations

from typing import Final

from . import codemodel_v2
from .base import ApiModel, ApiObject, MajorMinor, ObjectKind, ReferenceField
from .cache_v2 import Cache as CacheV2
from .cmake_files_v1 import CMakeFiles as CMakeFilesV1
from .codemodel_v2 import CodeModel as CodeModelV2
from .configure_log_v1 import ConfigureLog as ConfigureLogV1
from .registry import OBJECT_TYPES, object_type_for, registered_objects
from .toolchains_v1 import Toolchains as ToolchainsV1

__all__: Final[tuple[str, ...]] = (
    "OBJECT_TYPES",
    "ApiModel",
    "ApiObject",
    "CMakeFilesV1",
    "CacheV2",
    "CodeModelV2",
    "ConfigureLogV1",
    "MajorMinor",
    "ObjectKind",
    "ReferenceField",
    "ToolchainsV1",
    "codemodel_v2",
    "object_type_for",
    "registered_objects",
)
