"""Expansion of file patterns and reading of files."""

from __future__ import annotations

import glob
import os
from pathlib import Path
from typing import Sequence

from rep.errors import GlobPatternError, NoFilesMatchedError, RepIOError

_SEPARATORS = {"/", os.sep}


def _syntax_error(pattern: str, position: int, reason: str) -> GlobPatternError:
    return GlobPatternError(
        f"Invalid glob pattern '{pattern}': "
        f"Pattern syntax error near position {position}: {reason}"
    )


def _check_pattern(pattern: str) -> None:
    """Reject malformed wildcards and unterminated character classes."""
    length = len(pattern)
    i = 0
    while i < length:
        char = pattern[i]
        if char == "*":
            end = i
            while end < length and pattern[end] == "*":
                end += 1
            run = end - i
            if run > 2:
                raise _syntax_error(
                    pattern, i, "wildcards are either regular `*` or recursive `**`"
                )
            if run == 2:
                starts_component = i == 0 or pattern[i - 1] in _SEPARATORS
                ends_component = end == length or pattern[end] in _SEPARATORS
                if not (starts_component and ends_component):
                    raise _syntax_error(
                        pattern,
                        i,
                        "recursive wildcards must form a single path component",
                    )
            i = end
        elif char == "[":
            start = i + 1
            if start < length and pattern[start] == "!":
                start += 1
            # A ']' directly after the opening bracket is part of the class.
            close = pattern.find("]", start + 1) if start < length else -1
            if close == -1:
                raise _syntax_error(pattern, i, "invalid range pattern")
            i = close + 1
        else:
            i += 1


def expand_file_patterns(patterns: Sequence[str]) -> list[Path]:
    """Expand each glob pattern in turn into the paths it matches.

    Paths from one pattern are sorted; patterns keep their given order.
    Raises GlobPatternError for a malformed pattern and NoFilesMatchedError
    when nothing matches at all.
    """
    paths: list[Path] = []
    for pattern in patterns:
        _check_pattern(pattern)
        paths.extend(Path(p) for p in sorted(glob.glob(pattern, recursive=True)))
    if not paths:
        raise NoFilesMatchedError()
    return paths


def read_file_contents(path: str | os.PathLike[str]) -> str:
    """Return the UTF-8 text of ``path`` with its line endings untouched.

    Raises RepIOError when the file cannot be read or decoded.
    """
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise RepIOError(f"Error reading file {os.fspath(path)}: {exc}") from exc