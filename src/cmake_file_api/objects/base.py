# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Base models shared by every file-api object schema."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Final

from pydantic import BaseModel, ConfigDict, NonNegativeInt, model_validator
from pydantic.alias_generators import to_camel

STRICT_MODEL_CONFIG: Final[ConfigDict] = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="forbid",
    frozen=True,
)


class ObjectKind(str, Enum):
    """Object kinds published by the file-api, valued by their wire tag."""

    CODEMODEL = "codemodel"
    TOOLCHAINS = "toolchains"
    CACHE = "cache"
    CMAKE_FILES = "cmakeFiles"
    CONFIGURE_LOG = "configureLog"

    @property
    def wire_tag(self) -> str:
        """Return the tag used in index entries and query file names."""

        return self.value


@dataclass(frozen=True, slots=True)
class ReferenceField:
    """Declare a list of cross-file references and where their targets land.

    Attributes:
        refs: Name of the model attribute holding the reference entries. Every
            entry exposes a ``json_file`` path relative to the reply directory.
        resolved: Name of the private attribute receiving the loaded objects,
            position for position.
        model: Schema each referenced file is decoded into.
    """

    refs: str
    resolved: str
    model: type[ApiModel]


class ApiModel(BaseModel):
    """Strict base for fixed-shape file-api structures.

    Unknown members are rejected so schema drift between CMake releases fails
    loudly instead of being silently dropped. Wire names are camelCase.
    """

    model_config = STRICT_MODEL_CONFIG

    reference_fields: ClassVar[tuple[ReferenceField, ...]] = ()


class MajorMinor(ApiModel):
    """Version pair of an object schema."""

    major: NonNegativeInt
    minor: NonNegativeInt

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


class ApiObject(ApiModel):
    """Top-level object stored in its own reply file and listed in the index."""

    OBJECT_KIND: ClassVar[ObjectKind]
    MAJOR_VERSION: ClassVar[int]

    kind: ObjectKind
    version: MajorMinor

    @classmethod
    def wire_tag(cls) -> str:
        """Return the kind tag used on disk and in the index."""

        return cls.OBJECT_KIND.wire_tag

    @classmethod
    def required_major(cls) -> int:
        """Return the major version this schema decodes."""

        return cls.MAJOR_VERSION

    @classmethod
    def query_name(cls) -> str:
        """Return the stateless query file name (``<kind>-v<major>``)."""

        return f"{cls.wire_tag()}-v{cls.required_major()}"

    @model_validator(mode="after")
    def _check_identity(self) -> ApiObject:
        """Reject documents whose self-declared kind or major version disagree with the schema."""

        if self.kind is not self.OBJECT_KIND:
            raise ValueError(f"document kind '{self.kind.value}' is not '{self.OBJECT_KIND.value}'")
        if self.version.major != self.MAJOR_VERSION:
            raise ValueError(f"document major version {self.version.major} is not {self.MAJOR_VERSION}")
        return self


__all__ = [
    "STRICT_MODEL_CONFIG",
    "ApiModel",
    "ApiObject",
    "MajorMinor",
    "ObjectKind",
    "ReferenceField",
]
