"""Line-by-line substring search."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence

from rep.flags import Flag


@dataclass(frozen=True)
class MatchedLine:
    """A selected line with its zero-based line number."""

    line_number: int
    content: str


@dataclass
class SearchResult:
    """The lines selected by a search."""

    matches: list[MatchedLine] = field(default_factory=list)

    @property
    def total_count(self) -> int:
        return len(self.matches)


@dataclass(frozen=True)
class SearchConfig:
    """Options that change which lines are selected."""

    case_insensitive: bool = False
    invert_match: bool = False
    word_match: bool = False

    @classmethod
    def from_flags(cls, flags: Sequence[Flag]) -> SearchConfig:
        return cls(
            case_insensitive=Flag.CASE_INSENSITIVE in flags,
            invert_match=Flag.INVERT in flags,
            word_match=Flag.WORD_MATCH in flags,
        )


def _lines(content: str) -> Iterator[str]:
    """Split on newlines, dropping a trailing carriage return from each line."""
    if not content:
        return
    parts = content.split("\n")
    if parts[-1] == "":
        parts.pop()
    for part in parts:
        yield part[:-1] if part.endswith("\r") else part


def search(content: str, pattern: str, config: SearchConfig) -> SearchResult:
    """Select the lines of ``content`` that contain ``pattern``.

    With ``invert_match`` the lines that do not contain it are selected.
    """
    needle = pattern.lower() if config.case_insensitive else pattern
    matches = []
    for line_number, line in enumerate(_lines(content)):
        haystack = line.lower() if config.case_insensitive else line
        if (needle in haystack) != config.invert_match:
            matches.append(MatchedLine(line_number, line))
    return SearchResult(matches)