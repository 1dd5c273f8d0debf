# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reader configuration models."""

from __future__ import annotations

import codecs
from enum import Enum
from typing import Final

from pydantic import BaseModel, ConfigDict, field_validator


class IndexSelection(str, Enum):
    """Policy used when the reply directory holds more than one index file."""

    # CMake documents that the lexicographically greatest name is the current index.
    LAST = "last"
    FIRST = "first"


DEFAULT_ENCODING: Final[str] = "utf-8"


class ReaderSettings(BaseModel):
    """Options controlling how reply files are located and decoded."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    encoding: str = DEFAULT_ENCODING
    index_selection: IndexSelection = IndexSelection.LAST

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        """Return ``value`` after confirming Python knows the codec.

        Args:
            value: Codec name supplied by the caller.

        Returns:
            str: The unchanged codec name.

        Raises:
            ValueError: If the codec is unknown.
        """

        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding '{value}'") from exc
        return value


DEFAULT_SETTINGS: Final[ReaderSettings] = ReaderSettings()

__all__ = ["DEFAULT_ENCODING", "DEFAULT_SETTINGS", "IndexSelection", "ReaderSettings"]
