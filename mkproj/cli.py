"""Command line entry point."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from mkproj.interpreter import Interpreter
from mkproj.support import MkprojError, read_file
from mkproj.variables import Variables

DEFAULT_CONFIG = ".mkproj"


def parse_define(text: str) -> tuple[str, str]:
    """Split a ``-D`` argument of the form ``identifier=value``."""
    pieces = [piece for piece in text.split("=") if piece]
    if not pieces:
        raise MkprojError("Format of -D is <identifier>=<value>.")
    return pieces[0], pieces[1] if len(pieces) > 1 else ""


def default_config_path() -> str:
    """Return the configuration file in the user's home directory."""
    home = os.environ.get("HOME") or str(Path.home())
    return f"{home}/{DEFAULT_CONFIG}"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mkproj", description="Create a project from a configured template."
    )
    parser.add_argument("-c", dest="config", help="configuration file to read")
    parser.add_argument(
        "-D", dest="defines", action="append", default=[], metavar="NAME=VALUE",
        help="set a variable before running",
    )
    parser.add_argument("-t", dest="type_name", help="project type to create")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the configuration for the requested project type."""
    args = _build_parser().parse_args(argv)
    variables = Variables()
    try:
        for define in args.defines:
            name, value = parse_define(define)
            variables.set(name, value)
        if args.type_name is None:
            raise MkprojError("No type specified.")
        config_path = args.config if args.config is not None else default_config_path()
        try:
            config = read_file(config_path)
        except MkprojError as exc:
            raise MkprojError(f"Could not read config ({config_path}).") from exc
        Interpreter(variables, sys.stdin, sys.stdout, sys.stderr).run(
            config, args.type_name, config_path
        )
    except MkprojError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())