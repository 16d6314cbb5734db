"""Flatten JSON text into (path, value) pairs.

Every string or primitive that is the value of an object member or an array
element becomes one pair. Its path is built from the member names and array
positions that lead to it, each preceded by a slash, for example
``/items/0/rect/x``. Values are kept as text, with simple escapes resolved.
"""

from __future__ import annotations

from .strings import unescape
from .tokenizer import TokenType, tokenize

_SCALARS = (TokenType.STRING, TokenType.PRIMITIVE)


def flatten(text):
    """Return the (path, value) pairs of the JSON text in document order.

    Raises InvalidJsonError or PartialJsonError on malformed input.
    """
    tokens = tokenize(text)
    counters = [0] * len(tokens)

    def path_of(index):
        parts = []
        while index != -1:
            token = tokens[index]
            if token.type in _SCALARS:
                parts.append("/" + text[token.start : token.end])
            elif token.type == TokenType.ARRAY:
                parts.append(f"/{counters[index]}")
            index = token.parent
        return "".join(reversed(parts))

    pairs = []
    for token in tokens[1:]:
        if token.parent == -1:
            continue
        parent = tokens[token.parent]
        if token.type in _SCALARS and parent.type in (TokenType.STRING, TokenType.ARRAY):
            value = unescape(text[token.start : token.end])
            pairs.append((path_of(token.parent), value))
        if parent.type == TokenType.ARRAY:
            counters[token.parent] += 1
    return pairs