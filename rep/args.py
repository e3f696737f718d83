"""Parsing of the full command line."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from rep.errors import InvalidArgumentsError
from rep.flags import Flag, parse_flags


@dataclass
class ParsedArgs:
    """Flags, search pattern and file patterns taken from the command line."""

    flags: list[Flag] = field(default_factory=list)
    pattern: str = ""
    file_patterns: list[str] = field(default_factory=list)


def usage_string(program_name: str) -> str:
    """Return the one-line usage message for ``program_name``."""
    return f"Usage: {program_name} [-n] [-i] [-c] [-v] <pattern> <filename>"


def parse_args(args: Sequence[str]) -> ParsedArgs:
    """Parse ``args`` (program name first) into a :class:`ParsedArgs`.

    Raises InvalidArgumentsError when a pattern or a file pattern is missing.
    """
    if not args:
        raise InvalidArgumentsError("No arguments provided")

    program_name = args[0]
    if len(args) < 3:
        raise InvalidArgumentsError(usage_string(program_name))

    flags = parse_flags(args)
    positional = [arg for arg in args[1:] if Flag.from_arg(arg) is None]
    if len(positional) < 2:
        raise InvalidArgumentsError(usage_string(program_name))

    pattern, *file_patterns = positional
    return ParsedArgs(flags=flags, pattern=pattern, file_patterns=file_patterns)