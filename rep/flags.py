"""Command-line flags."""

from __future__ import annotations

from enum import Enum
from typing import Sequence


class Flag(Enum):
    """A single-letter option, valued by its command-line spelling."""

    LINE_NUMBERS = "-n"
    CASE_INSENSITIVE = "-i"
    INVERT = "-v"
    COUNT = "-c"
    WORD_MATCH = "-w"
    VERBOSE = "-V"

    @classmethod
    def from_arg(cls, arg: str) -> Flag | None:
        """Return the flag spelled by ``arg``, or None if it is not a flag."""
        try:
            return cls(arg)
        except ValueError:
            return None


def parse_flags(args: Sequence[str]) -> list[Flag]:
    """Collect every flag in ``args``, skipping the program name, in order."""
    return [flag for flag in map(Flag.from_arg, args[1:]) if flag is not None]