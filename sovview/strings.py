"""String utilities: tokenizing, unescaping, hex colours and random words."""

from __future__ import annotations

import random
import re
from pathlib import Path

_VOWELS = "aeiou"
_CONSONANTS = "bcdefghijklmnpqrstvwxyz"
_ALPHANUMERIC = (
    "0123456789"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
)
_UNESCAPABLE = frozenset("\\\"'/?")


def delete_codepoints(text, start, length):
    """Drop code points start..start+length inclusive, and always the last one."""
    return "".join(
        char
        for index, char in enumerate(text[:-1])
        if index < start or index > start + length
    )


def tokenize(text, delimiters):
    """Split text at any delimiter character, discarding empty tokens."""
    if not delimiters:
        return [text] if text else []
    pattern = "[" + re.escape(delimiters) + "]"
    return [token for token in re.split(pattern, text) if token]


def _hex_value(char):
    try:
        return int(char, 16)
    except ValueError:
        return 0


def color_from_hex(text):
    """Read hex digits as a 32-bit value; other characters count as zero."""
    result = 0
    for char in text:
        result = ((result << 4) | _hex_value(char)) & 0xFFFFFFFF
    return result


def read_file(path):
    """Return the whole content of a text file."""
    return Path(path).read_text(encoding="utf-8")


def readable_word(length, rng=None):
    """Generate a pronounceable word alternating consonants and vowels."""
    rng = rng or random
    return "".join(
        rng.choice(_CONSONANTS if index % 2 == 0 else _VOWELS)
        for index in range(length)
    )


def alphanumeric(length, rng=None):
    """Generate a random string of digits and ASCII letters."""
    rng = rng or random
    return "".join(rng.choice(_ALPHANUMERIC) for _ in range(length))


def unescape(text):
    """Resolve backslash escapes of \\ " ' / ?; other escapes are dropped."""
    result = []
    chars = iter(text)
    for char in chars:
        if char == "\\":
            following = next(chars, None)
            if following is not None and following in _UNESCAPABLE:
                result.append(following)
        else:
            result.append(char)
    return "".join(result)