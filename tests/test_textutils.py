import pytest

from mirtree.textutils import (
    extract_all_between_curly_braces,
    filter_numbers,
    find_all_clean_strings,
    find_clean_string_at,
    find_first_clean_string,
    find_io_datatype,
    find_match_from,
    find_numbers,
    find_numbers_and_consume,
    get_first_clean_string,
    map_contains,
    remove_characters_from_str,
    replace_placeholder_if,
    split_at,
    split_chars_from_nums,
    to_lower_case,
)


def test_split_at_default_space_respects_quotes():
    assert split_at('say "hello world" now') == ["say", "hello world", "now"]


def test_split_at_custom_delimiter():
    assert split_at("a,b,,c", ",") == ["a", "b", "", "c"]


def test_first_clean_string_skips_leading_symbols():
    assert get_first_clean_string("  --abc123-def") == "abc123"
    assert find_first_clean_string("  --abc123-def") == "abc123"


def test_first_clean_string_of_symbols_is_empty():
    assert get_first_clean_string("--!!") == ""


@pytest.mark.parametrize("text", ["a1b2c3", "", "123", "no digits", "x9y_8"])
def test_digit_helpers_are_consistent(text):
    chars, nums = split_chars_from_nums(text)
    assert nums == find_numbers(text)
    assert chars == filter_numbers(text)
    assert find_numbers_and_consume(text) == (nums, chars)
    assert sorted(chars + nums) == sorted(text)
    assert all(c.isdigit() for c in nums)
    assert not any(c.isdigit() for c in chars)


def test_to_lower_case_only_ascii():
    assert to_lower_case("ABC def") == "abc def"
    assert to_lower_case("\u00c4B") == "\u00c4b"


def test_replace_placeholder_if_replaces_only_matching():
    result = replace_placeholder_if("Hello {name}, {other}!", "name", "Bob")
    assert result == "Hello Bob, {other}!"


def test_replace_placeholder_if_custom_brackets_and_repeats():
    result = replace_placeholder_if("<x>-<x>-<y>", "x", "1", "<", ">")
    assert result == "1-1-<y>"


def test_replace_placeholder_if_replacement_is_not_rescanned():
    assert replace_placeholder_if("{a}", "a", "{a}") == "{a}"


def test_find_all_clean_strings():
    assert find_all_clean_strings("foo, bar;baz") == ["foo", "bar", "baz"]
    assert find_all_clean_strings("--") == []


def test_find_match_from_lowercases_text():
    assert find_match_from("Signal_AI_01", ["ao", "ai"]) == "ai"
    assert find_match_from("nothing", ["zz"]) == ""


def test_find_io_datatype():
    assert find_io_datatype("Pump_DO_3") == "do"
    assert find_io_datatype("xyz") == ""


@pytest.mark.parametrize("pos,word", [(1, "alpha"), (2, "beta"), (3, "gamma")])
def test_find_clean_string_at_positions(pos, word):
    assert find_clean_string_at("alpha beta gamma", pos) == word


def test_find_clean_string_at_overflow():
    assert find_clean_string_at("alpha beta", 3) == "{overflow}"
    assert find_clean_string_at("alpha", 0) == "{overflow}"


def test_extract_all_between_curly_braces():
    assert extract_all_between_curly_braces("{a} x {bc} {open") == ["a", "bc"]
    assert extract_all_between_curly_braces("none") == []


def test_remove_characters_from_str():
    assert remove_characters_from_str("a-b_c", "-_") == "abc"
    assert remove_characters_from_str("a-b_c", "-_", " ") == "a b c"


def test_remove_characters_from_str_empty_inputs_return_text():
    assert remove_characters_from_str("a-b", "") == "a-b"
    assert remove_characters_from_str("", "-") == ""


def test_map_contains_plain_and_bom_keys():
    assert map_contains({"key": 1}, "key") is True
    assert map_contains({"\ufeffkey": 1}, "key") is True
    assert map_contains({"\xef\xbb\xbfkey": 1}, "key") is True
    assert map_contains({"other": 1}, "key") is False


def test_map_contains_bytes_and_other_keys():
    assert map_contains({b"\xef\xbb\xbfkey": 1}, b"key") is True
    assert map_contains({1: "one"}, 2) is False