# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Schema of the ``configureLog`` v1 object."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from .base import ApiObject, ObjectKind


class ConfigureLog(ApiObject):
    """Location of the configure log and the event kinds it records.

    The log file may not exist when no events were logged; clients must use
    ``path`` rather than assuming the documented default location.
    """

    OBJECT_KIND: ClassVar[ObjectKind] = ObjectKind.CONFIGURE_LOG
    MAJOR_VERSION: ClassVar[int] = 1

    path: Path
    event_kind_names: tuple[str, ...]


__all__ = ["ConfigureLog"]
