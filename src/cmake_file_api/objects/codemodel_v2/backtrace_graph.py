# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Backtrace graph embedded in codemodel target and directory objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pydantic import NonNegativeInt, PositiveInt

from ..base import ApiModel


class BacktraceNode(ApiModel):
    """Node of a backtrace graph.

    ``file`` indexes :attr:`BacktraceGraph.files`, ``command`` indexes
    :attr:`BacktraceGraph.commands` and ``parent`` indexes
    :attr:`BacktraceGraph.nodes`. ``line`` is 1-based.
    """

    file: NonNegativeInt
    line: PositiveInt | None = None
    command: NonNegativeInt | None = None
    parent: NonNegativeInt | None = None


@dataclass(frozen=True, slots=True)
class BacktraceFrame:
    """Readable view of a backtrace node."""

    file: Path
    line: int | None
    command: str | None


class BacktraceGraph(ApiModel):
    """Graph of CMake language backtraces referenced by ``backtrace`` members of the owning object."""

    nodes: tuple[BacktraceNode, ...] = ()
    commands: tuple[str, ...] = ()
    files: tuple[Path, ...] = ()

    def frame(self, node_index: int) -> BacktraceFrame:
        """Return the frame described by node ``node_index``.

        Args:
            node_index: Index into :attr:`nodes`.

        Returns:
            BacktraceFrame: File, line and command of the node.

        Raises:
            IndexError: If ``node_index`` or an index held by the node is out of range.
        """

        node = self.nodes[node_index]
        command = self.commands[node.command] if node.command is not None else None
        return BacktraceFrame(file=self.files[node.file], line=node.line, command=command)

    def stack(self, node_index: int) -> tuple[BacktraceFrame, ...]:
        """Return the call stack starting at ``node_index`` and walking parents to the bottom."""

        frames: list[BacktraceFrame] = []
        current: int | None = node_index
        while current is not None:
            frames.append(self.frame(current))
            current = self.nodes[current].parent
        return tuple(frames)


__all__ = ["BacktraceFrame", "BacktraceGraph", "BacktraceNode"]
