"""Minimal non-strict JSON tokenizer producing a flat list of tokens.

Each token records its kind, the span of text it covers, the number of direct
children (for objects the number of keys, for keys their single value) and
the index of its parent token.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

_WHITESPACE = frozenset("\t\r\n ")
_PRIMITIVE_END = frozenset(":\t\r\n ,]}")
_SIMPLE_ESCAPES = frozenset('"/\\bfrnt')
_HEX_DIGITS = frozenset("0123456789ABCDEFabcdef")


class TokenType(IntEnum):
    UNDEFINED = 0
    OBJECT = 1
    ARRAY = 2
    STRING = 3
    PRIMITIVE = 4


@dataclass
class Token:
    """A span of JSON text; start and end are -1 until known."""

    type: TokenType
    start: int = -1
    end: int = -1
    size: int = 0
    parent: int = -1


class JsonTokenError(ValueError):
    """Raised when text cannot be tokenized."""

    def __init__(self, message, position):
        super().__init__(f"{message} at position {position}")
        self.position = position


class InvalidJsonError(JsonTokenError):
    """An invalid character or a mismatched bracket."""


class PartialJsonError(JsonTokenError):
    """The text ends before the JSON value is complete."""


class _Tokenizer:
    def __init__(self, text):
        self.text = text.split("\0", 1)[0]
        self.pos = 0
        self.tokens = []
        self.parent = -1

    def _count_child(self):
        if self.parent != -1:
            self.tokens[self.parent].size += 1

    def _primitive(self):
        start = self.pos
        text = self.text
        while self.pos < len(text):
            char = text[self.pos]
            if char in _PRIMITIVE_END:
                break
            if ord(char) < 32 or ord(char) >= 127:
                raise InvalidJsonError("invalid character in primitive", self.pos)
            self.pos += 1
        self.tokens.append(Token(TokenType.PRIMITIVE, start, self.pos, parent=self.parent))
        self.pos -= 1

    def _string(self):
        start = self.pos
        text = self.text
        self.pos += 1
        while self.pos < len(text):
            char = text[self.pos]
            if char == '"':
                self.tokens.append(
                    Token(TokenType.STRING, start + 1, self.pos, parent=self.parent)
                )
                return
            if char == "\\" and self.pos + 1 < len(text):
                self.pos += 1
                escaped = text[self.pos]
                if escaped == "u":
                    self.pos += 1
                    for _ in range(4):
                        if self.pos >= len(text):
                            break
                        if text[self.pos] not in _HEX_DIGITS:
                            raise InvalidJsonError("invalid unicode escape", start)
                        self.pos += 1
                    self.pos -= 1
                elif escaped not in _SIMPLE_ESCAPES:
                    raise InvalidJsonError("invalid escape sequence", start)
            self.pos += 1
        raise PartialJsonError("unterminated string", start)

    def _open(self, char):
        token = Token(TokenType.OBJECT if char == "{" else TokenType.ARRAY, self.pos)
        if self.parent != -1:
            self.tokens[self.parent].size += 1
            token.parent = self.parent
        self.tokens.append(token)
        self.parent = len(self.tokens) - 1

    def _close(self, char):
        kind = TokenType.OBJECT if char == "}" else TokenType.ARRAY
        if not self.tokens:
            raise InvalidJsonError("unmatched closing bracket", self.pos)
        token = self.tokens[-1]
        while True:
            if token.start != -1 and token.end == -1:
                if token.type != kind:
                    raise InvalidJsonError("mismatched closing bracket", self.pos)
                token.end = self.pos + 1
                self.parent = token.parent
                return
            if token.parent == -1:
                if token.type != kind or self.parent == -1:
                    raise InvalidJsonError("unmatched closing bracket", self.pos)
                return
            token = self.tokens[token.parent]

    def run(self):
        text = self.text
        while self.pos < len(text):
            char = text[self.pos]
            if char in "{[":
                self._open(char)
            elif char in "}]":
                self._close(char)
            elif char == '"':
                self._string()
                self._count_child()
            elif char in _WHITESPACE:
                pass
            elif char == ":":
                self.parent = len(self.tokens) - 1
            elif char == ",":
                if self.parent != -1 and self.tokens[self.parent].type not in (
                    TokenType.ARRAY,
                    TokenType.OBJECT,
                ):
                    self.parent = self.tokens[self.parent].parent
            else:
                self._primitive()
                self._count_child()
            self.pos += 1

        for token in reversed(self.tokens):
            if token.start != -1 and token.end == -1:
                raise PartialJsonError("unclosed object or array", token.start)
        return self.tokens


def tokenize(text):
    """Split JSON text into tokens; text after a NUL character is ignored.

    Raises InvalidJsonError or PartialJsonError on malformed input.
    """
    return _Tokenizer(text).run()