"""Line and token reader for configuration sources."""

from __future__ import annotations

from mkproj.support import MkprojError
from mkproj.variables import Variables

_WHITESPACE = " \t\n\v\f\r"
_TOKEN_SEPARATORS = ", \t"
_LINE_END = "\n"
_HEX_DIGITS = "0123456789abcdefABCDEF"
_SIMPLE_ESCAPES = {"n": "\n", "r": "\r", "t": "\t"}


def _is_space(ch: str) -> bool:
    return bool(ch) and ch in _WHITESPACE


def _is_separator(ch: str) -> bool:
    return _is_space(ch) or (bool(ch) and ch in _TOKEN_SEPARATORS)


def is_identifier(string: str) -> bool:
    """Return True if every character is an ASCII letter or underscore."""
    return all((ch.isascii() and ch.isalpha()) or ch == "_" for ch in string)


class Parser:
    """Reads a source a line at a time, then the tokens of that line.

    ``index`` points just past the command word of the current line, ``next``
    counts the characters left on that line from ``index``, and ``tindex`` is
    the position of the next token to read.
    """

    def __init__(self, src: str) -> None:
        self.src = src
        self.token = ""
        self.index = 0
        self.tindex = 0
        self.next = 0
        self.line = 0

    def reset(self, index: int) -> None:
        """Continue reading from *index* as if a new line started there."""
        self.index = index
        self.tindex = index
        self.next = 0

    def _char(self, position: int) -> str:
        return self.src[position] if 0 <= position < len(self.src) else ""

    def _in_line(self) -> bool:
        return self.tindex - self.index < self.next

    def read_line(self) -> bool:
        """Move to the next non-blank line and read its command word."""
        self.token = ""
        src = self.src
        if self.next > 0:
            self.index += self.next
        if self.index >= len(src):
            return False

        while self.index < len(src) and _is_space(src[self.index]):
            self.index += 1
        if self.index >= len(src):
            return False

        end = src.find(_LINE_END, self.index)
        if end < 0:
            end = len(src)
        else:
            self.line += 1
        self.next = end - self.index

        place = self.index
        while self.index - place < self.next and not _is_space(src[self.index]):
            self.index += 1
        if self.index == place:
            return False

        self.token = src[place:self.index]
        self.tindex = self.index
        self.next -= self.index - place
        return True

    def _skip_word(self) -> None:
        while self._in_line() and not _is_separator(self.src[self.tindex]):
            self.tindex += 1

    def _escape(self) -> str:
        code = self._char(self.tindex)
        if code in _SIMPLE_ESCAPES:
            return _SIMPLE_ESCAPES[code]
        if code == "x":
            digits = self.src[self.tindex + 1:self.tindex + 3]
            self.tindex += 2
            if len(digits) != 2 or not all(d in _HEX_DIGITS for d in digits):
                raise MkprojError(f"Invalid \\x in string on line {self.line}.")
            return chr(int(digits, 16))
        return code

    def read_token(self, variables: Variables) -> bool:
        """Read the next token of the current line into ``token``.

        Quoted tokens have their escapes decoded, ``$name`` tokens are replaced
        by the variable's value and ``$$`` yields a literal dollar sign.
        """
        self.token = ""
        src = self.src

        while self._in_line() and _is_separator(src[self.tindex]):
            self.tindex += 1
        if not self._in_line():
            return False

        head = src[self.tindex]
        if head == '"':
            self.tindex += 1
            chars = []
            while self._in_line() and src[self.tindex] != '"':
                ch = src[self.tindex]
                if ch == "\\":
                    self.tindex += 1
                    ch = self._escape()
                chars.append(ch)
                self.tindex += 1
            self.tindex += 1
            self.token = "".join(chars)
            return True

        if head == "$":
            if self._char(self.tindex + 1) == "$":
                self.tindex += 2
                self.token = "$"
                return True
            self.tindex += 1
            place = self.tindex
            self._skip_word()
            if self.tindex == place:
                return False
            self.token = variables.get(src[place:self.tindex])
            return True

        place = self.tindex
        self.tindex += 1
        self._skip_word()
        self.token = src[place:self.tindex]
        return True