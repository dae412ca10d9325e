"""A directory tree that loads one level at a time and keeps children sorted."""

from __future__ import annotations

import enum
import os
import sys
from pathlib import Path
from typing import TextIO

from .filenode import FileNode, FileType


class SortCriteria(enum.Enum):
    """Orderings available for a directory's children."""

    TYPE_THEN_NAME = "type_then_name"
    EXTENSION = "extension"
    NAME = "name"
    SIZE = "size"
    DATE_MODIFIED = "date_modified"


def _path_extension(name: str) -> str:
    """Suffix of a file name; a lone leading dot does not start one."""
    if name in (".", ".."):
        return ""
    dot = name.rfind(".")
    if dot <= 0:
        return ""
    return name[dot:]


def _not_dir(node: FileNode) -> bool:
    return node.kind is not FileType.DIR


def _by_type_then_name(node: FileNode):
    return (_not_dir(node), node.name.lower())


def _by_extension(node: FileNode):
    ext = _path_extension(node.name).lower() if node.kind is FileType.FILE else ""
    return (_not_dir(node), ext, node.name.lower())


def _by_name(node: FileNode):
    return node.name.lower()


def _by_size(node: FileNode):
    size = -node.size if node.kind is FileType.FILE else 0
    return (_not_dir(node), size, node.name.lower())


_SORT_KEYS = {
    SortCriteria.TYPE_THEN_NAME: _by_type_then_name,
    SortCriteria.EXTENSION: _by_extension,
    SortCriteria.NAME: _by_name,
    SortCriteria.SIZE: _by_size,
}


def _scan(directory: Path) -> list[FileNode]:
    """Read one directory level; unreadable entries are skipped."""
    nodes: list[FileNode] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                path = Path(entry.path)
                try:
                    if entry.is_dir():
                        nodes.append(
                            FileNode(
                                entry.name,
                                FileType.DIR,
                                path,
                                has_unexpanded_children=True,
                            )
                        )
                    elif entry.is_file():
                        try:
                            size = entry.stat().st_size
                        except OSError:
                            size = 0
                        nodes.append(FileNode(entry.name, FileType.FILE, path, size=size))
                except OSError:
                    continue
    except OSError:
        pass
    return nodes


class FileTree:
    """A file tree rooted at a folder, expanded on demand."""

    def __init__(self, folder: str | os.PathLike[str] | None = None) -> None:
        self._sort_criteria = SortCriteria.TYPE_THEN_NAME
        root = Path.cwd() if folder is None else Path(folder)
        self._root = self._build(root)
        self._current: FileNode | None = self._root

    @property
    def root_node(self) -> FileNode:
        return self._root

    @property
    def root_folder(self) -> Path:
        return self._root.full_path

    @property
    def sort_criteria(self) -> SortCriteria:
        return self._sort_criteria

    @property
    def is_initialized(self) -> bool:
        return self._root is not None

    def _build(self, folder: Path) -> FileNode:
        root = FileNode(folder.name or str(folder), FileType.DIR, folder)
        if not folder.exists():
            return root
        root.children.extend(_scan(folder))
        self._sort_children(root)
        return root

    def _sort_children(self, node: FileNode | None) -> None:
        if node is None or not node.children:
            return
        key = _SORT_KEYS.get(self._sort_criteria)
        if key is not None:
            node.children.sort(key=key)

    def set_root_folder(self, folder: str | os.PathLike[str]) -> None:
        """Rebuild the tree at a new root folder."""
        if folder is None or os.fspath(folder) == "":
            raise ValueError("tried to set empty root path")
        self._root = self._build(Path(folder))
        self._current = self._root

    def set_sort_criteria(self, criteria: SortCriteria) -> None:
        """Change the ordering and re-sort the current node's children."""
        if self._sort_criteria is not criteria:
            self._sort_criteria = criteria
            self._sort_children(self._current)

    def refresh_root_node(self) -> None:
        """Reload the tree from the current root folder."""
        self._root = self._build(self._root.full_path)
        self._current = self._root

    def expand_node(self, node: FileNode | None) -> bool:
        """Load a directory node's children; False if there was nothing to load."""
        if node is None or node.kind is not FileType.DIR or not node.has_unexpanded_children:
            return False
        node.children.clear()
        node.has_unexpanded_children = False
        node.children.extend(_scan(node.full_path))
        self._sort_children(node)
        return True

    def current_path(self) -> Path:
        """Path of the current node, or an empty path if there is none."""
        return self._current.full_path if self._current is not None else Path()

    def current_children(self) -> list[FileNode]:
        """The current node's children as a new list."""
        return list(self._current.children) if self._current is not None else []

    def format_tree(self) -> str:
        """Render the loaded tree as indented text, one node per line."""
        return "".join(f"{line}\n" for line in self._lines(self._root, 0))

    def _lines(self, node: FileNode, depth: int):
        indent = "  " * depth
        if node.kind is FileType.DIR:
            yield f"{indent}[DIR] {node.name}"
        else:
            yield f"{indent}[FILE] {node.name} ({node.size} bytes)"
        for child in node.children:
            yield from self._lines(child, depth + 1)

    def print(self, file: TextIO | None = None) -> None:
        """Write the rendered tree to a stream, standard output by default."""
        (file if file is not None else sys.stdout).write(self.format_tree())