"""Command line entry point: list a folder and act on its entries."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

from .browser import CallbackType, FileTreeBrowser
from .filenode import FileNode, FileType
from .filetree import FileTree, SortCriteria

_FILE_MESSAGES = {
    CallbackType.CLICK: ("FILE_CLICK", "Triggers on any clicked file"),
    CallbackType.DOUBLE_CLICK: ("FILE_DBLCLICK", "Triggers on any double clicked file"),
    CallbackType.CONTEXT_MENU: ("FILE_CONTEXT", "Triggers on any file context menu"),
}
_DIR_MESSAGES = {
    CallbackType.CLICK: ("DIR_CLICK", "Triggers on any clicked directory"),
    CallbackType.DOUBLE_CLICK: ("DIR_DBLCLICK", "Triggers on any double clicked directory"),
    CallbackType.CONTEXT_MENU: ("DIR_CONTEXT", "Triggers on any directory context menu"),
}
_EXTENSION_MESSAGES = {
    ".txt": {
        CallbackType.CLICK: ("TXT_CLICK", "Triggers on any clicked .txt file"),
        CallbackType.DOUBLE_CLICK: ("TXT_DBLCLICK", "Triggers on any double clicked .txt file"),
        CallbackType.CONTEXT_MENU: ("TXT_CONTEXT", "Triggers on .txt file context menu"),
    },
    ".typ": {
        CallbackType.CLICK: ("TYP_CLICK", "Triggers on any clicked .typ file"),
    },
    ".any": {
        CallbackType.CLICK: (
            "ANY_CLICK",
            "Triggers on any clicked file without specific handler",
        ),
        CallbackType.DOUBLE_CLICK: (
            "ANY_DBLCLICK",
            "Triggers on any double clicked file without specific handler",
        ),
        CallbackType.CONTEXT_MENU: (
            "ANY_CONTEXT",
            "Triggers on context menu for any file without specific handler",
        ),
    },
    ".json": {
        CallbackType.CLICK: ("JSON_CLICK", "Triggers on any clicked .json file"),
        CallbackType.DOUBLE_CLICK: ("JSON_DBLCLICK", "Triggers on any double clicked .json file"),
        CallbackType.CONTEXT_MENU: ("JSON_CONTEXT", "Triggers on .json file context menu"),
    },
}


def _reporter(out: TextIO | None, tag: str, text: str):
    def report(path: Path) -> None:
        stream = out if out is not None else sys.stdout
        stream.write(f"[{tag}] {path} - {text}\n")

    return report


def register_default_callbacks(
    browser: FileTreeBrowser, out: TextIO | None = None
) -> None:
    """Attach callbacks that report every action as a line of text."""
    for kind, (tag, text) in _FILE_MESSAGES.items():
        browser.register_file_callback(kind, _reporter(out, tag, text))
    for kind, (tag, text) in _DIR_MESSAGES.items():
        browser.register_directory_callback(kind, _reporter(out, tag, text))
    for extension, messages in _EXTENSION_MESSAGES.items():
        for kind, (tag, text) in messages.items():
            browser.register_extension_callback(extension, kind, _reporter(out, tag, text))


def _expand(browser: FileTreeBrowser, node: FileNode, depth: int) -> None:
    for child in node.children:
        if depth > 0 and child.kind is FileType.DIR:
            browser.open_node(child)
            _expand(browser, child, depth - 1)


def _find(browser: FileTreeBrowser, tree: FileTree, name: str) -> FileNode | None:
    node = tree.root_node
    for part in Path(name).parts:
        node = next((c for c in browser.open_node(node) if c.name == part), None)
        if node is None:
            return None
    return node


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mirtree", description="Show a folder as a tree and act on its entries."
    )
    parser.add_argument("folder", nargs="?", default=None, help="root folder (default: current)")
    parser.add_argument(
        "--sort",
        choices=[c.value for c in SortCriteria],
        default=SortCriteria.TYPE_THEN_NAME.value,
        help="ordering of entries",
    )
    parser.add_argument("--depth", type=int, default=0, help="levels of subfolders to load")
    parser.add_argument(
        "--click", action="append", default=[], metavar="NAME", help="click an entry"
    )
    parser.add_argument(
        "--double-click",
        action="append",
        default=[],
        metavar="NAME",
        help="double click an entry; files are printed",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line program."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.depth < 0:
        parser.error("--depth must not be negative")

    tree = FileTree(args.folder)
    tree.set_sort_criteria(SortCriteria(args.sort))
    browser = FileTreeBrowser(tree)
    out = sys.stdout
    register_default_callbacks(browser, out)

    _expand(browser, tree.root_node, args.depth)
    tree.print(out)

    for name in args.click:
        node = _find(browser, tree, name)
        if node is None:
            parser.error(f"no such entry: {name}")
        browser.single_click(node)

    for name in args.double_click:
        node = _find(browser, tree, name)
        if node is None:
            parser.error(f"no such entry: {name}")
        browser.double_click(node)
        if browser.current_file.is_open:
            out.write(browser.current_file.content)
            if not browser.current_file.content.endswith("\n"):
                out.write("\n")
            browser.close_file()
    return 0