# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Second-pass loader that materialises cross-file references.

Schemas declare their reference lists through
:attr:`~cmake_file_api.objects.base.ApiModel.reference_fields`. The resolver
walks a decoded object, loads every referenced file in reference order,
resolves the loaded objects in turn and only then attaches the results.
Traversal depth follows the schema declarations; nothing here assumes how
deep the reference chain is.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any, get_args, get_origin

from .config import DEFAULT_SETTINGS, ReaderSettings
from .errors import ReplyDecodeError
from .io import load_model
from .objects.base import ApiModel

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class _StagedAssignment:
    """Resolved values waiting to be attached to their owner."""

    owner: ApiModel
    attribute: str
    values: tuple[ApiModel, ...]


@dataclass(slots=True)
class ReferenceResolver:
    """Resolve reference lists against a reply directory.

    Attributes:
        reply_dir: Directory every ``json_file`` is relative to.
        settings: Reader options, used for the file encoding.
    """

    reply_dir: Path
    settings: ReaderSettings = field(default_factory=lambda: DEFAULT_SETTINGS)
    _staged: list[_StagedAssignment] = field(default_factory=list, init=False, repr=False)

    def resolve(self, root: ApiModel) -> None:
        """Load and attach every reference reachable from ``root``.

        Either every reference is attached or, when any referenced file fails
        to load, nothing is and the error propagates.

        Args:
            root: Decoded object whose references should be materialised.

        Raises:
            ReplyIOError: If a referenced file is missing or unreadable.
            ReplyDecodeError: If a referenced file is malformed or references form a cycle.
        """

        self._staged.clear()
        try:
            self._visit(root, active=frozenset())
            for assignment in self._staged:
                setattr(assignment.owner, assignment.attribute, assignment.values)
        finally:
            self._staged.clear()

    def _visit(self, model: ApiModel, *, active: frozenset[Path]) -> None:
        """Stage the references declared by ``model`` and descend into nested models."""

        for reference in type(model).reference_fields:
            loaded: list[ApiModel] = []
            for entry in getattr(model, reference.refs):
                path = self.reply_dir / entry.json_file
                if path in active:
                    raise ReplyDecodeError(path, "reference cycle detected")
                satellite = load_model(path, reference.model, encoding=self.settings.encoding)
                self._visit(satellite, active=active | {path})
                loaded.append(satellite)
            LOGGER.debug("resolved %d %s reference(s)", len(loaded), reference.refs)
            self._staged.append(_StagedAssignment(model, reference.resolved, tuple(loaded)))
        for child in _referencing_children(model):
            self._visit(child, active=active)


def resolve_references(root: ApiModel, reply_dir: Path, *, settings: ReaderSettings | None = None) -> None:
    """Resolve every reference reachable from ``root`` against ``reply_dir``."""

    ReferenceResolver(reply_dir, settings or DEFAULT_SETTINGS).resolve(root)


def has_references(model_type: type[ApiModel]) -> bool:
    """Return ``True`` when ``model_type`` or any nested schema declares reference lists."""

    return _has_references(model_type, frozenset())


def _referencing_children(model: ApiModel) -> Iterator[ApiModel]:
    """Yield nested models of ``model`` whose schemas can hold references."""

    for name, info in type(model).model_fields.items():
        if not any(has_references(candidate) for candidate in _model_types(info.annotation)):
            continue
        value = getattr(model, name)
        if isinstance(value, ApiModel):
            yield value
        elif isinstance(value, (tuple, list)):
            yield from (item for item in value if isinstance(item, ApiModel))
        elif isinstance(value, dict):
            yield from (item for item in value.values() if isinstance(item, ApiModel))


@lru_cache(maxsize=None)
def _has_references(model_type: type[ApiModel], seen: frozenset[type[ApiModel]]) -> bool:
    if model_type.reference_fields:
        return True
    nested_seen = seen | {model_type}
    for info in model_type.model_fields.values():
        for candidate in _model_types(info.annotation):
            if candidate not in nested_seen and _has_references(candidate, nested_seen):
                return True
    return False


def _model_types(annotation: Any) -> tuple[type[ApiModel], ...]:
    """Return the :class:`ApiModel` subclasses mentioned anywhere in ``annotation``."""

    origin = get_origin(annotation)
    if origin is None:
        if isinstance(annotation, type) and issubclass(annotation, ApiModel):
            return (annotation,)
        return ()
    args = get_args(annotation)
    if origin is Annotated:
        args = args[:1]
    found: list[type[ApiModel]] = []
    for arg in args:
        found.extend(_model_types(arg))
    return tuple(found)


__all__ = ["ReferenceResolver", "has_references", "resolve_references"]
