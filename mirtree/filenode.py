"""Nodes of a lazily loaded file tree."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path


class FileType(enum.Enum):
    """Kind of entry a node stands for."""

    DIR = "dir"
    FILE = "file"
    UNKNOWN = "unknown"


@dataclass(eq=False)
class FileNode:
    """A file or directory in the tree, with its loaded children."""

    name: str
    kind: FileType = FileType.UNKNOWN
    full_path: Path = field(default_factory=Path)
    size: int = 0
    has_unexpanded_children: bool = False
    children: list[FileNode] = field(default_factory=list)

    def add_child(self, child: FileNode) -> None:
        """Append a child node."""
        self.children.append(child)

    def extension(self) -> str:
        """Return the name's suffix from its last dot, or "" for non-files."""
        if self.kind is not FileType.FILE:
            return ""
        dot = self.name.rfind(".")
        return self.name[dot:] if dot != -1 else ""