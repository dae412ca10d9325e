"""Interaction layer over a file tree: labels, clicks, context menus and callbacks."""

from __future__ import annotations

import abc
import enum
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .filenode import FileNode, FileType
from .filetree import FileTree
from .fileutils import get_file_extension, read_file
from .textutils import to_lower_case

NodeCallback = Callable[[Path], object]
DialogCallback = Callable[[Path], object]

_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


class CallbackType(enum.Enum):
    """User actions a callback can be attached to."""

    CLICK = "click"
    DOUBLE_CLICK = "double_click"
    CONTEXT_MENU = "context_menu"


class FileDialogManager(abc.ABC):
    """A way of asking the user for a file or folder."""

    @abc.abstractmethod
    def open_folder_dialog(self, title: str, callback: DialogCallback) -> None:
        """Let the user pick a folder and pass it to the callback."""

    @abc.abstractmethod
    def open_file_dialog(
        self, title: str, callback: DialogCallback, filter: str = ""
    ) -> None:
        """Let the user pick a file and pass it to the callback."""

    @abc.abstractmethod
    def set_initial_path(self, path: str | os.PathLike[str]) -> None:
        """Set the folder the next dialog starts in."""


@dataclass
class OpenFile:
    """A file loaded for viewing."""

    content: str = ""
    path: str = ""

    @property
    def is_open(self) -> bool:
        return bool(self.content) and bool(self.path)

    def clear(self) -> None:
        self.content = ""
        self.path = ""


def format_file_size(size_in_bytes: int) -> str:
    """Format a byte count with a binary unit, e.g. "512 B" or "1.50 KB"."""
    size = float(size_in_bytes)
    unit = 0
    while size >= 1024.0 and unit < len(_SIZE_UNITS) - 1:
        size /= 1024.0
        unit += 1
    if unit == 0:
        return f"{size_in_bytes} {_SIZE_UNITS[0]}"
    if size < 10:
        return f"{size:.2f} {_SIZE_UNITS[unit]}"
    if size < 100:
        return f"{size:.1f} {_SIZE_UNITS[unit]}"
    return f"{size:.0f} {_SIZE_UNITS[unit]}"


class FileTreeBrowser:
    """Reacts to user actions on the nodes of a file tree."""

    def __init__(
        self, file_tree: FileTree, file_dialog: FileDialogManager | None = None
    ) -> None:
        self.file_tree = file_tree
        self.file_dialog = file_dialog
        self.current_file = OpenFile()
        self._file_callbacks: dict[CallbackType, NodeCallback] = {}
        self._dir_callbacks: dict[CallbackType, NodeCallback] = {}
        self._extension_callbacks: dict[str, dict[CallbackType, NodeCallback]] = {}

    # Callbacks

    def register_file_callback(
        self, callback_type: CallbackType, callback: NodeCallback
    ) -> None:
        """Set the callback run for this action on any file."""
        self._file_callbacks[callback_type] = callback

    def register_directory_callback(
        self, callback_type: CallbackType, callback: NodeCallback
    ) -> None:
        """Set the callback run for this action on any directory."""
        self._dir_callbacks[callback_type] = callback

    def register_extension_callback(
        self, extension: str, callback_type: CallbackType, callback: NodeCallback
    ) -> None:
        """Set the callback run for this action on files with the extension."""
        key = to_lower_case(extension)
        self._extension_callbacks.setdefault(key, {})[callback_type] = callback

    def trigger_file_callback(
        self, callback_type: CallbackType, path: str | os.PathLike[str]
    ) -> None:
        callback = self._file_callbacks.get(callback_type)
        if callback is not None:
            callback(Path(path))

    def trigger_directory_callback(
        self, callback_type: CallbackType, path: str | os.PathLike[str]
    ) -> None:
        callback = self._dir_callbacks.get(callback_type)
        if callback is not None:
            callback(Path(path))

    def trigger_extension_callback(
        self, extension: str, callback_type: CallbackType, path: str | os.PathLike[str]
    ) -> None:
        callback = self._extension_callbacks.get(to_lower_case(extension), {}).get(
            callback_type
        )
        if callback is not None:
            callback(Path(path))

    # Nodes

    def _root_relative(self, node: FileNode) -> Path:
        return self.file_tree.root_node.full_path / node.name

    def display_name(self, node: FileNode) -> str:
        """Label shown for a node in the tree."""
        if node.kind is FileType.DIR:
            return f"[DIR] {node.name}"
        if node.kind is FileType.FILE:
            return f"[FILE] {node.name} ({format_file_size(node.size)})"
        return ""

    def open_node(self, node: FileNode) -> list[FileNode]:
        """Unfold a directory, loading its children the first time."""
        if node.kind is not FileType.DIR:
            return []
        if node.has_unexpanded_children:
            self.file_tree.expand_node(node)
        return list(node.children)

    def single_click(self, node: FileNode) -> None:
        """Run the click callbacks for a node."""
        path = node.full_path
        if node.kind is FileType.FILE:
            self.trigger_file_callback(CallbackType.CLICK, path)
            self.trigger_extension_callback(
                get_file_extension(path), CallbackType.CLICK, path
            )
        elif node.kind is FileType.DIR:
            self.trigger_directory_callback(CallbackType.CLICK, path)

    def double_click(self, node: FileNode) -> None:
        """Run the double-click callbacks for a node; files are also opened."""
        path = self._root_relative(node)
        if node.kind is FileType.FILE:
            self.trigger_file_callback(CallbackType.CONTEXT_MENU, node.full_path)
            self._load(path)
            self.trigger_file_callback(CallbackType.DOUBLE_CLICK, path)
            self.trigger_extension_callback(
                get_file_extension(node.full_path), CallbackType.DOUBLE_CLICK, path
            )
        elif node.kind is FileType.DIR:
            self.trigger_directory_callback(CallbackType.CONTEXT_MENU, node.full_path)
            self.trigger_directory_callback(CallbackType.DOUBLE_CLICK, path)

    def context_menu_items(self, node: FileNode) -> dict[str, Callable[[], object]]:
        """Labels of the node's context menu, each with the action it runs."""
        items: dict[str, Callable[[], object]] = {
            "Copy Path": lambda: self.copy_path(node)
        }
        if node.kind is FileType.FILE:
            items["Open File"] = lambda: self.open_file(node)
            ext = get_file_extension(node.full_path)
            callback = self._extension_callbacks.get(to_lower_case(ext), {}).get(
                CallbackType.CONTEXT_MENU
            )
            if callback is not None:
                items[f"Process {ext[1:]} file"] = lambda: callback(node.full_path)
        return items

    def copy_path(self, node: FileNode) -> str:
        """Path text of a node, joined to the root folder."""
        return str(self._root_relative(node))

    def open_file(self, node: FileNode) -> OpenFile:
        """Load a node's file as the current open file."""
        return self._load(self._root_relative(node))

    def _load(self, path: Path) -> OpenFile:
        try:
            content = read_file(path)
        except OSError:
            content = ""
        self.current_file = OpenFile(content, str(path))
        return self.current_file

    def close_file(self) -> None:
        """Forget the current open file."""
        self.current_file.clear()

    # Dialogs

    def _ask(self, pick: Callable[[DialogCallback], None]) -> Path | None:
        if self.file_dialog is None:
            return None
        chosen: list[Path] = []

        def accept(path: Path) -> None:
            if os.fspath(path):
                chosen.append(Path(path))

        self.file_dialog.set_initial_path(self.file_tree.root_folder)
        pick(accept)
        return chosen[-1] if chosen else None

    def open_folder_dialog(self) -> Path | None:
        """Ask for a folder, starting at the root folder; None if none chosen."""
        dialog = self.file_dialog
        return self._ask(lambda cb: dialog.open_folder_dialog("Open Folder", cb))

    def open_file_dialog(self) -> Path | None:
        """Ask for a file, starting at the root folder; None if none chosen."""
        dialog = self.file_dialog
        return self._ask(lambda cb: dialog.open_file_dialog("Open File", cb))