import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sovview import strings


def test_tokenize_skips_empty():
    assert strings.tokenize("/a//b/c/", "/") == ["a", "b", "c"]


def test_tokenize_multiple_delimiters():
    assert strings.tokenize("a,b;c", ",;") == ["a", "b", "c"]


@pytest.mark.parametrize("text", ["", "///"])
def test_tokenize_nothing(text):
    assert strings.tokenize(text, "/") == []


@given(st.text(alphabet="ab/,", max_size=30))
def test_tokenize_invariant(text):
    tokens = strings.tokenize(text, "/,")
    assert all(token and "/" not in token and "," not in token for token in tokens)
    assert "".join(tokens) == text.replace("/", "").replace(",", "")


def test_color_from_hex():
    assert strings.color_from_hex("FF0000FF") == 0xFF0000FF
    assert strings.color_from_hex("ff0000ff") == strings.color_from_hex("FF0000FF")


def test_color_non_hex_is_zero_digit():
    assert strings.color_from_hex("#ff") == 0xFF


@given(st.integers(min_value=0, max_value=0xFFFFFFFF))
def test_color_round_trip(value):
    assert strings.color_from_hex(f"{value:08x}") == value


def test_color_truncates_to_32_bits():
    assert strings.color_from_hex("1" + "F" * 8) == 0xFFFFFFFF


def test_read_file_round_trip(tmp_path):
    target = tmp_path / "tree.json"
    target.write_text('{"items": []}', encoding="utf-8")
    assert strings.read_file(target) == '{"items": []}'


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        strings.read_file(tmp_path / "missing")


@pytest.mark.parametrize("length", [0, 1, 7, 12])
def test_readable_word_shape(length):
    word = strings.readable_word(length, random.Random(4))
    assert len(word) == length
    assert all(char in "aeiou" for char in word[1::2])
    assert all(char in "bcdefghijklmnpqrstvwxyz" for char in word[0::2])


def test_readable_word_deterministic():
    first = strings.readable_word(9, random.Random(1))
    second = strings.readable_word(9, random.Random(1))
    assert len(first) == 9
    assert first == second


def test_alphanumeric_shape():
    text = strings.alphanumeric(40, random.Random(2))
    assert len(text) == 40
    assert text.isalnum() and text.isascii()


def test_unescape_known_escapes():
    assert strings.unescape('\\"quoted\\" a\\/b \\\\') == '"quoted" a/b \\'


def test_unescape_drops_unknown_and_trailing():
    assert strings.unescape("a\\nb") == "ab"
    assert strings.unescape("end\\") == "end"


@given(st.text().filter(lambda value: "\\" not in value))
def test_unescape_plain_text_unchanged(text):
    assert strings.unescape(text) == text


def test_delete_codepoints_range():
    assert strings.delete_codepoints("abcdef", 1, 2) == "ae"


@given(st.text(max_size=20))
def test_delete_codepoints_past_end_only_drops_last(text):
    assert strings.delete_codepoints(text, len(text) + 1, 0) == text[:-1]


def test_delete_codepoints_multibyte():
    assert strings.delete_codepoints("héllo", 10, 0) == "héll"