# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Schema of the ``cache`` v2 object (entries of ``CMakeCache.txt``)."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from .base import ApiModel, ApiObject, ObjectKind


class CacheProperty(ApiModel):
    """Property attached to a cache entry, e.g. ``HELPSTRING``."""

    name: str
    value: str


class CacheEntry(ApiModel):
    """Single persistent cache variable."""

    name: str
    value: str
    type_name: str = Field(alias="type")
    properties: tuple[CacheProperty, ...] = ()

    def property_value(self, name: str) -> str | None:
        """Return the value of property ``name`` or ``None`` when absent."""

        for prop in self.properties:
            if prop.name == name:
                return prop.value
        return None


class Cache(ApiObject):
    """The ``cache`` object kind lists the variables stored in the build tree's cache."""

    OBJECT_KIND: ClassVar[ObjectKind] = ObjectKind.CACHE
    MAJOR_VERSION: ClassVar[int] = 2

    entries: tuple[CacheEntry, ...]

    def entry(self, name: str) -> CacheEntry | None:
        """Return the entry called ``name`` if the cache defines it."""

        return next((entry for entry in self.entries if entry.name == name), None)


__all__ = ["Cache", "CacheEntry", "CacheProperty"]
