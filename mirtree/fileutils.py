"""Helpers for reading files, file extensions and simple CSV data."""

from __future__ import annotations

import os
from pathlib import Path
from typing import IO, TextIO, Union

PathLike = Union[str, "os.PathLike[str]"]

_UPPER_TO_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _ascii_lower(text: str) -> str:
    return text.translate(_UPPER_TO_LOWER)


def _is_path(source: object) -> bool:
    return isinstance(source, (str, os.PathLike))


def _split_lines(content: str) -> list[str]:
    """Split like line-by-line reading: no empty entry after a final newline."""
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def open_file(filepath: PathLike) -> IO[str]:
    """Open a file for reading text, explaining in the error why it failed."""
    path = Path(filepath)
    try:
        return open(path, encoding="utf-8", errors="replace", newline="")
    except OSError as exc:
        message = f"Failed to open file: {path}"
        if not path.exists():
            message += " [file does not exist]"
        elif not path.is_file():
            message += " [not a regular file]"
        else:
            message += " [possible permission issue]"
        raise type(exc)(exc.errno, message) from exc


def read_lines(source: PathLike | TextIO) -> list[str]:
    """Return the lines of a file or text stream, without line endings."""
    if _is_path(source):
        with open_file(source) as stream:
            content = stream.read()
    else:
        content = source.read()
    return [line[:-1] if line.endswith("\r") else line for line in _split_lines(content)]


def read_file(source: PathLike | TextIO) -> str:
    """Return the whole content of a file or text stream."""
    if _is_path(source):
        with open_file(source) as stream:
            return stream.read()
    return source.read()


def get_file_extension(filepath: PathLike) -> str:
    """Return the extension of the path's file name, including its dot."""
    name = Path(filepath).name
    if name in (".", ".."):
        return ""
    dot = name.rfind(".")
    if dot <= 0:
        return ""
    return name[dot:]


def has_extension(filepath: PathLike, extension: str) -> bool:
    """Tell whether the path has the given extension, ignoring case and a missing dot."""
    wanted = _ascii_lower(extension)
    if wanted and not wanted.startswith("."):
        wanted = "." + wanted
    return _ascii_lower(get_file_extension(filepath)) == wanted


def parse_csv_line(line: str, delimiter: str = ",") -> list[str]:
    """Split one CSV record into fields; quotes group text and are dropped."""
    fields: list[str] = []
    field: list[str] = []
    in_quotes = False
    for char in line:
        if not in_quotes and char == delimiter:
            fields.append("".join(field))
            field.clear()
        elif char == '"':
            in_quotes = not in_quotes
        else:
            field.append(char)
    fields.append("".join(field))
    return fields


def read_csv(filepath: PathLike) -> list[list[str]]:
    """Read a comma separated file; quoted fields may span several lines."""
    with open_file(filepath) as stream:
        content = stream.read()

    rows: list[list[str]] = []
    accumulated = ""
    in_quotes = False
    for line in _split_lines(content):
        if line.count('"') % 2:
            in_quotes = not in_quotes
        accumulated = line if not accumulated else f"{accumulated}\n{line}"
        if not in_quotes:
            rows.append(parse_csv_line(accumulated, ","))
            accumulated = ""
    if accumulated:
        rows.append(parse_csv_line(accumulated, ","))
    return rows