# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases for JSON payloads exchanged with CMake."""

from __future__ import annotations

from typing import TypeAlias

from pydantic import JsonValue

# pydantic's recursive alias so free-form regions validate inside models.
JSONValue: TypeAlias = JsonValue

__all__ = ["JSONValue"]
