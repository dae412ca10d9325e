"""Small text helpers for words, digits, placeholders and lookups."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

_UPPER_TO_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_OVERFLOW = "{overflow}"
_BOM_TEXT = "\ufeff"
_BOM_BYTES = b"\xef\xbb\xbf"


def _isalnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def _isdigit(char: str) -> bool:
    return "0" <= char <= "9"


def split_at(line: str, delimiter: str = " ") -> list[str]:
    """Split at the delimiter outside double quotes; quotes are dropped."""
    tokens: list[str] = []
    token: list[str] = []
    in_quotes = False
    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            tokens.append("".join(token))
            token.clear()
        else:
            token.append(char)
    tokens.append("".join(token))
    return tokens


def get_first_clean_string(text: str) -> str:
    """Return the first run of ASCII letters and digits."""
    result: list[str] = []
    for char in text:
        if _isalnum(char):
            result.append(char)
        elif result:
            break
    return "".join(result)


def find_first_clean_string(text: str) -> str:
    """Return the first run of ASCII letters and digits."""
    return get_first_clean_string(text)


def find_numbers(text: str) -> str:
    """Return all digits of the text, in order."""
    return "".join(char for char in text if _isdigit(char))


def filter_numbers(text: str) -> str:
    """Return the text with all digits removed."""
    return "".join(char for char in text if not _isdigit(char))


def to_lower_case(text: str) -> str:
    """Lower-case the ASCII letters of the text."""
    return text.translate(_UPPER_TO_LOWER)


def split_chars_from_nums(text: str) -> tuple[str, str]:
    """Return (non-digits, digits) of the text."""
    return filter_numbers(text), find_numbers(text)


def find_numbers_and_consume(text: str) -> tuple[str, str]:
    """Return (digits, the text without them)."""
    chars, nums = split_chars_from_nums(text)
    return nums, chars


def replace_placeholder_if(
    text: str,
    placeholder: str,
    replacement: str,
    open_char: str = "{",
    close_char: str = "}",
) -> str:
    """Replace every enclosed placeholder, such as {name}, with the replacement."""
    start = 0
    while (start := text.find(open_char, start)) != -1:
        end = text.find(close_char, start)
        if end == -1:
            break
        found = text[start + 1 :] if end == start else text[start + 1 : end]
        if found == placeholder:
            text = text[:start] + replacement + text[end + 1 :]
            start += len(replacement)
        else:
            start = end + 1
    return text


def find_all_clean_strings(text: str) -> list[str]:
    """Return every run of ASCII letters and digits."""
    words: list[str] = []
    current: list[str] = []
    for char in text:
        if _isalnum(char):
            current.append(char)
        elif current:
            words.append("".join(current))
            current.clear()
    if current:
        words.append("".join(current))
    return words


def find_match_from(text: str, candidates: Iterable[str]) -> str:
    """Return the first candidate found in the lower-cased text, or ""."""
    lowered = to_lower_case(text)
    return next((candidate for candidate in candidates if candidate in lowered), "")


def find_io_datatype(text: str) -> str:
    """Return the I/O kind (ai, ao, di or do) named in the text, or ""."""
    return find_match_from(text, ("ai", "ao", "di", "do"))


def find_clean_string_at(text: str, pos: int) -> str:
    """Return the clean word at a 1-based position, or "{overflow}"."""
    if pos < 1:
        return _OVERFLOW
    result = ""
    i = 1
    while i < pos + 1:
        for char in text:
            if _isalnum(char):
                result += char
            elif result:
                if i == pos:
                    return result
                i += 1
                result = ""
        if i == pos:
            return result
        i += 1
        result = ""
        i += 1
    return _OVERFLOW


def extract_all_between_curly_braces(text: str) -> list[str]:
    """Return the contents of every closed {...} pair, left to right."""
    results: list[str] = []
    start = 0
    while start < len(text):
        opening = text.find("{", start)
        if opening == -1:
            break
        closing = text.find("}", opening + 1)
        if closing == -1:
            break
        results.append(text[opening + 1 : closing])
        start = closing + 1
    return results


def remove_characters_from_str(
    text: str, chars: str, replacement: str | None = None
) -> str:
    """Drop, or replace, every occurrence of any of the given characters."""
    if not text or not chars:
        return text
    wanted = set(chars)
    substitute = "" if replacement is None else replacement
    return "".join(substitute if char in wanted else char for char in text)


def map_contains(mapping: Mapping, key) -> bool:
    """Tell whether the key, or the key with a byte-order mark in front, is present."""
    if key in mapping:
        return True
    if isinstance(key, str):
        return _BOM_TEXT + key in mapping or _BOM_BYTES.decode("latin-1") + key in mapping
    if isinstance(key, bytes):
        return _BOM_BYTES + key in mapping
    return False