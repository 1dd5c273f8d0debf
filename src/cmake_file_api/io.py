# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading reply documents and writing query files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TypeVar, cast

from pydantic import BaseModel, ValidationError

from .config import DEFAULT_ENCODING
from .errors import QueryIOError, ReplyDecodeError, ReplyIOError
from .types import JSONValue

ModelT = TypeVar("ModelT", bound=BaseModel)


def load_document(path: Path, *, encoding: str = DEFAULT_ENCODING) -> JSONValue:
    """Load a JSON document from disk.

    Args:
        path: Filesystem path to the JSON document.
        encoding: Text encoding used to read the file.

    Returns:
        JSONValue: Parsed JSON value.

    Raises:
        ReplyIOError: If the file is missing or unreadable.
        ReplyDecodeError: If the file does not contain valid JSON.
    """

    try:
        text = path.read_text(encoding=encoding)
    except OSError as exc:
        raise ReplyIOError(path, exc) from exc
    except UnicodeDecodeError as exc:
        raise ReplyDecodeError(path, f"not valid {encoding} text: {exc.reason}") from exc
    try:
        return cast(JSONValue, json.loads(text))
    except json.JSONDecodeError as exc:
        raise ReplyDecodeError(path, f"invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}") from exc


def decode_model(path: Path, model: type[ModelT], payload: JSONValue) -> ModelT:
    """Validate ``payload`` against ``model``.

    Args:
        path: Source path of ``payload`` used in error reporting.
        model: Pydantic model the payload must satisfy.
        payload: Parsed JSON document.

    Returns:
        ModelT: Validated model instance.

    Raises:
        ReplyDecodeError: If the payload does not match the model, including unknown fields.
    """

    if not isinstance(payload, dict):
        raise ReplyDecodeError(path, f"expected a JSON object, found {type(payload).__name__}")
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise ReplyDecodeError(path, describe_validation_error(exc)) from exc


def load_model(path: Path, model: type[ModelT], *, encoding: str = DEFAULT_ENCODING) -> ModelT:
    """Read ``path`` and validate it against ``model`` in one step."""

    return decode_model(path, model, load_document(path, encoding=encoding))


def describe_validation_error(exc: ValidationError) -> str:
    """Render pydantic validation errors as a compact, field-oriented message.

    Args:
        exc: Validation error raised by pydantic.

    Returns:
        str: Semicolon separated list of problems, each naming its field path.
    """

    problems: list[str] = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        if error["type"] == "extra_forbidden":
            problems.append(f"unknown field `{location}`")
        elif error["type"] == "missing":
            problems.append(f"missing field `{location}`")
        else:
            problems.append(f"`{location}`: {error['msg']}")
    return "; ".join(problems)


def write_text(path: Path, content: str, *, encoding: str = DEFAULT_ENCODING) -> Path:
    """Write ``content`` to ``path``, creating parent directories.

    Raises:
        QueryIOError: If the directory or file cannot be written.
    """

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise QueryIOError(path.parent, exc) from exc
    try:
        path.write_text(content, encoding=encoding)
    except OSError as exc:
        raise QueryIOError(path, exc) from exc
    return path


__all__ = ["decode_model", "describe_validation_error", "load_document", "load_model", "write_text"]
