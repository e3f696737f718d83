"""Formatting of search results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Sequence

from rep.flags import Flag


class OutputMode(Enum):
    """Whether to print matching lines or only their count."""

    FULL_LINES = auto()
    COUNT = auto()

    @classmethod
    def from_flags(cls, flags: Sequence[Flag]) -> OutputMode:
        return cls.COUNT if Flag.COUNT in flags else cls.FULL_LINES


@dataclass(frozen=True)
class OutputConfig:
    """How results are printed."""

    mode: OutputMode = OutputMode.FULL_LINES
    show_line_numbers: bool = False
    show_filename: bool = False
    verbose: bool = False

    @classmethod
    def from_flags(cls, flags: Sequence[Flag], multiple_files: bool) -> OutputConfig:
        mode = OutputMode.from_flags(flags)
        return cls(
            mode=mode,
            show_line_numbers=Flag.LINE_NUMBERS in flags and mode is not OutputMode.COUNT,
            show_filename=multiple_files,
            verbose=Flag.VERBOSE in flags,
        )


def format_match(
    line: str, line_number: int, filename: str | None, config: OutputConfig
) -> str:
    """Format a matched line, prefixed by filename and one-based line number as configured."""
    parts = []
    if filename is not None and config.show_filename:
        parts.append(filename)
    if config.show_line_numbers:
        parts.append(str(line_number + 1))
    parts.append(line)
    return ":".join(parts)


def format_count(count: int, filename: str | None, show_filename: bool) -> str:
    """Format a match count, prefixed by the filename when shown."""
    if filename is not None and show_filename:
        return f"{filename}:{count}"
    return str(count)