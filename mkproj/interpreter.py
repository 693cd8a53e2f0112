"""Execution of configuration scripts."""

from __future__ import annotations

import contextlib
import os
import re
import sys
from typing import TextIO

from mkproj.parser import Parser, is_identifier
from mkproj.support import MkprojError, read_file
from mkproj.variables import Variables

LIST_SEPARATOR = "\x03"
TRUE = "true"
FALSE = ""

_NUMBER = re.compile(r"\s*\+?(\d+)")


def _list_items(value: str) -> list[str]:
    """Split a list value into its non-empty items."""
    return [item for item in value.split(LIST_SEPARATOR) if item]


def _dirname(path: str) -> str:
    """Return the directory part of *path* the way POSIX dirname does."""
    stripped = path.rstrip("/")
    if not stripped:
        return "/" if path else "."
    slash = stripped.rfind("/")
    if slash < 0:
        return "."
    head = stripped[:slash].rstrip("/")
    return head or "/"


def _leading_number(text: str) -> int:
    """Parse the leading decimal number of *text*, or 0 if there is none."""
    match = _NUMBER.match(text)
    return int(match.group(1)) if match else 0


class Interpreter:
    """Runs configuration scripts against a shared set of variables."""

    def __init__(
        self,
        variables: Variables | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.variables = variables if variables is not None else Variables()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr

    # -- helpers -----------------------------------------------------------

    def _next_token(self, parser: Parser, what: str, file_path: str) -> str:
        if not parser.read_token(self.variables):
            raise MkprojError(f"{what} on line {parser.line} (of file {file_path}).")
        return parser.token

    def _identifier(self, parser: Parser, what: str, file_path: str) -> str:
        candidate = self._next_token(parser, f"{what}, got end of line", file_path)
        if not is_identifier(candidate):
            raise MkprojError(
                f"{what}, got '{candidate}' on line {parser.line} (of file {file_path})."
            )
        return candidate

    def _assign(self, parser: Parser, name: str, file_path: str) -> None:
        """Assign the current token, or an expression starting at it, to *name*."""
        if parser.token == "(":
            while self.evaluate(parser, name, file_path):
                pass
        else:
            self.variables.set(name, parser.token)

    def _load(self, parser: Parser, path: str, purpose: str, file_path: str) -> str:
        try:
            return read_file(path)
        except MkprojError as exc:
            raise MkprojError(
                f"Could not open file {path} for {purpose}, on line {parser.line}"
                f" (of file {file_path})."
            ) from exc

    def _output_stream(self, selector: str) -> TextIO | None:
        """Pick the stream for '>N'; 0 names standard input, which is discarded."""
        if not selector:
            return self.stdout
        number = ord(selector) - 0x30
        if not 0 <= number < 3:
            number = 1
        return {1: self.stdout, 2: self.stderr}.get(number)

    # -- expressions -------------------------------------------------------

    def evaluate(self, parser: Parser, identifier: str, file_path: str) -> bool:
        """Evaluate one expression step into *identifier*.

        Returns False once the closing ')' is read.
        """
        where = f"on line {parser.line} (of file {file_path})"
        operation = self._next_token(parser, "Expression expects operation", file_path)
        variables = self.variables

        match operation:
            case "eq":
                first = self._next_token(
                    parser, "eq expects two arguments, got zero", file_path
                )
                if LIST_SEPARATOR in first:
                    raise MkprojError(f"eq expects atomic values {where}.")
                second = self._next_token(
                    parser, "eq expects two arguments, got one", file_path
                )
                if LIST_SEPARATOR in second:
                    raise MkprojError(f"eq expects atomic values {where}.")
                variables.set(identifier, TRUE if first == second else FALSE)
            case "not":
                value = self._next_token(
                    parser, "not expects an argument, got none", file_path
                )
                variables.set(identifier, FALSE if value else TRUE)
            case "cat":
                first = self._next_token(
                    parser, "cat expects two arguments, got zero", file_path
                )
                second = self._next_token(
                    parser, "cat expects two arguments, got one", file_path
                )
                variables.set(identifier, first + second)
            case "curdir":
                variables.set(identifier, _dirname(file_path))
            case "atom":
                value = self._next_token(
                    parser, "atom expects one argument, got zero", file_path
                )
                variables.set(identifier, FALSE if LIST_SEPARATOR in value else TRUE)
            case "car":
                value = self._next_token(
                    parser, "car expects one argument, got zero", file_path
                )
                if LIST_SEPARATOR not in value:
                    raise MkprojError(f"car expects list argument {where}.")
                items = _list_items(value)
                variables.set(identifier, items[0] if items else "")
            case "cdr":
                value = self._next_token(
                    parser, "cdr expects one argument, got zero", file_path
                )
                if LIST_SEPARATOR not in value:
                    raise MkprojError(f"cdr expects list argument {where}.")
                variables.set(identifier, value.split(LIST_SEPARATOR, 1)[1])
            case "cons":
                head = self._next_token(
                    parser, "cons expects two arguments, got zero", file_path
                )
                tail = self._next_token(
                    parser, "cons expects two arguments, got one", file_path
                )
                variables.set(identifier, head + LIST_SEPARATOR + tail)
            case "\\":
                name = self._next_token(
                    parser, "set expr expects two arguments got none", file_path
                )
                if not is_identifier(name):
                    raise MkprojError(
                        "set expr expects an identifier as the first argument,"
                        f" got '{name}' {where}."
                    )
                self._next_token(parser, "set expr expects two arguments got one", file_path)
                self._assign(parser, name, file_path)
            case ")":
                return False
            case _:
                variables.set(identifier, operation)
        return True

    # -- commands ----------------------------------------------------------

    def _print(self, parser: Parser, command: str) -> None:
        stream = self._output_stream(command[1:2])
        while parser.read_token(self.variables):
            if stream is not None:
                stream.write(", ".join(_list_items(parser.token)))
        if stream is not None:
            stream.flush()

    def _input(self, parser: Parser, file_path: str) -> None:
        name = self._identifier(parser, "Input command expects variable identifier", file_path)
        line = self.stdin.readline()
        if not line:
            raise MkprojError(
                f"Input command reached end of input on line {parser.line}"
                f" (of file {file_path})."
            )
        self.variables.set(name, line.removesuffix("\n"))

    def _goto(self, parser: Parser, file_path: str) -> None:
        label = parser.token[1:]
        name = self.variables.get(label[1:]) if label.startswith("$") else label
        target = f"@{name}:"
        src = parser.src
        if name.startswith("."):
            start = src.find(self.variables.get("_pfx"))
            position = src.find(target, start) if start >= 0 else -1
        else:
            position = src.find(target)
        if position < 0:
            raise MkprojError(
                f"Could not find label '{label}' on line {parser.line} (of file {file_path})."
            )
        parser.reset(position)

    def _conditional(self, parser: Parser, command: str, file_path: str) -> None:
        if command[1:] == "(":
            while self.evaluate(parser, "_c", file_path):
                pass
            value = self.variables.get("_c")
        else:
            value = self.variables.get(command[1:])
        self._next_token(parser, "Conditional expects label", file_path)
        if value:
            self._goto(parser, file_path)

    def _section(self, command: str) -> None:
        colon = command.find(":")
        if colon >= 0 and command[1:2] != ".":
            self.variables.set("_pfx", command[:colon])

    def _mkdir(self, parser: Parser, file_path: str) -> None:
        path = self._next_token(parser, "Mkdir instruction expects directory", file_path)
        with contextlib.suppress(OSError):
            os.mkdir(path, 0o777)

    def _pipe(self, parser: Parser, command: str, file_path: str) -> None:
        flags = command[1:]
        path = self.variables.get("output")
        mode = "w" if "|" in flags else "a"
        try:
            handle = open(path, mode, encoding="utf-8", newline="")
        except OSError as exc:
            raise MkprojError(
                f"Could not create file {path} on line {parser.line} (of file {file_path})."
            ) from exc
        with handle:
            if "$" in flags:
                name = self._next_token(
                    parser, f"{command} requires a variable as its first argument", file_path
                )
                handle.write(self.variables.get(name))
            else:
                rest = parser.src[parser.index:parser.index + parser.next]
                if rest[:1] in (" ", "\t") and rest:
                    rest = rest[1:]
                handle.write(rest)
            if "&" not in flags:
                handle.write("\n")

    def _set(self, parser: Parser, command: str, file_path: str) -> None:
        if len(command) != 1:
            raise MkprojError(
                "A space must delimit the set command '\\' and the variable name"
                f" on line {parser.line} (of file {file_path})."
            )
        name = self._identifier(parser, "Set command expects variable identifier", file_path)
        self._next_token(parser, "Set command expects value, got end of line", file_path)
        self._assign(parser, name, file_path)

    def _include(self, parser: Parser, command: str, file_path: str) -> None:
        start = parser.index - len(command)
        length = len(command) + parser.next
        path = self._next_token(parser, "Include requires a path to read", file_path)
        src = parser.src
        end = min(start + length + 1, len(src))
        src = src[:start] + " " * (end - start) + src[end:]
        contents = self._load(parser, path, "include", file_path)
        parser.src = src[:parser.index] + contents + src[parser.index:]
        parser.reset(parser.index)

    def _directive(self, parser: Parser, command: str, file_path: str) -> None:
        match command[1:]:
            case "execute":
                path = self._next_token(parser, "Execute requires a path to read", file_path)
                contents = self._load(parser, path, "execution", file_path)
                self.run(contents, "", path)
            case "include":
                self._include(parser, command, file_path)
            case "call":
                self._next_token(parser, "Call expects a goto", file_path)
                self.variables.set("return", str(parser.index + parser.next))
                self._goto(parser, file_path)
            case "return":
                parser.reset(_leading_number(self.variables.get("return")))

    def run(self, source: str, type_name: str, file_path: str) -> None:
        """Run *source*, starting at the section for *type_name* if one is given."""
        parser = Parser(source)
        if type_name:
            header = f"@@{type_name}:"
            position = source.find(header)
            if position < 0:
                raise MkprojError(
                    f"Could not find type '{type_name}' on line {parser.line}"
                    f" (of file {file_path})."
                )
            parser.reset(position + len(header) + 1)

        while parser.read_line():
            command = parser.token
            match command[0]:
                case ">":
                    self._print(parser, command)
                case "<":
                    self._input(parser, file_path)
                case "?":
                    self._conditional(parser, command, file_path)
                case "%":
                    self._goto(parser, file_path)
                case "@":
                    if command[1:2] == "@":
                        return
                    self._section(command)
                case "~":
                    self._mkdir(parser, file_path)
                case "|":
                    self._pipe(parser, command, file_path)
                case "\\":
                    self._set(parser, command, file_path)
                case "#":
                    self._directive(parser, command, file_path)
                case _:
                    raise MkprojError(
                        f"Invalid command '{command}' on line {parser.line}"
                        f" (of file {file_path})."
                    )