"""A small, forgiving JSON reader for objects, arrays and plain strings.

Only the subset needed for configuration-style documents is understood:
objects, arrays of strings, and strings without escape sequences.
Anything after the first complete value is ignored.
"""

from __future__ import annotations

from typing import Union

JsonValue = Union[str, list, dict]

_WHITESPACE = frozenset(" \t\n\v\f\r")


class JsonParseError(ValueError):
    """Raised when the text cannot be read as a supported JSON value."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at position {position}")
        self.position = position


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def skip_whitespace(self) -> None:
        while self.peek() in _WHITESPACE and self.peek():
            self.pos += 1

    def string(self) -> str:
        self.skip_whitespace()
        if self.peek() != '"':
            raise JsonParseError("expected string", self.pos)
        start = self.pos + 1
        end = self.text.find('"', start)
        if end < 0:
            self.pos = len(self.text)
            raise JsonParseError("unterminated string", start - 1)
        self.pos = end + 1
        return self.text[start:end]

    def skip_comma(self) -> None:
        self.skip_whitespace()
        if self.peek() == ",":
            self.pos += 1
        self.skip_whitespace()

    def array(self) -> list:
        self.pos += 1
        items: list = []
        self.skip_whitespace()
        while self.peek() not in ("", "]"):
            try:
                items.append(self.string())
            except JsonParseError:
                # Arrays hold strings only; reading stops at the first other item.
                break
            self.skip_comma()
        if self.peek() == "]":
            self.pos += 1
        return items

    def object(self) -> dict:
        self.pos += 1
        members: dict = {}
        self.skip_whitespace()
        while self.peek() not in ("", "}"):
            key = self.string()
            self.skip_whitespace()
            if self.peek() != ":":
                raise JsonParseError("expected ':'", self.pos)
            self.pos += 1
            value = self.value()
            # Lookups find the first member with a given key.
            members.setdefault(key, value)
            self.skip_comma()
        if self.peek() == "}":
            self.pos += 1
        return members

    def value(self) -> JsonValue:
        self.skip_whitespace()
        char = self.peek()
        if char == "{":
            return self.object()
        if char == "[":
            return self.array()
        if char == '"':
            return self.string()
        raise JsonParseError("unexpected character", self.pos)


def parse(text: str) -> JsonValue:
    """Parse *text* into a dict, list or str."""
    return _Parser(text).value()