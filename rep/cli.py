"""Command-line entry point: search files for lines containing a pattern."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence, TextIO

from rep.args import parse_args
from rep.errors import RepError
from rep.file_ops import expand_file_patterns, read_file_contents
from rep.output import OutputConfig, OutputMode, format_count, format_match
from rep.search import SearchConfig, search


def _process_file(
    path: Path,
    pattern: str,
    search_config: SearchConfig,
    output_config: OutputConfig,
    out: TextIO,
    err: TextIO,
) -> None:
    filename = str(path)

    if output_config.verbose:
        print(f"Searching in file: {filename}", file=err)
        print(f'Pattern: "{pattern}"', file=err)
        options = {
            "case_insensitive": search_config.case_insensitive,
            "invert_match": search_config.invert_match,
            "word_match": search_config.word_match,
        }
        rendered = ", ".join(f"{name}={str(value).lower()}" for name, value in options.items())
        print(f"Search options: {rendered}", file=err)

    contents = read_file_contents(path)
    result = search(contents, pattern, search_config)

    if output_config.verbose:
        print(f"Found {result.total_count} matches", file=err)

    if output_config.mode is OutputMode.COUNT:
        print(format_count(result.total_count, filename, output_config.show_filename), file=out)
    else:
        for matched in result.matches:
            print(
                format_match(matched.content, matched.line_number, filename, output_config),
                file=out,
            )


def run(args: Sequence[str], out: TextIO | None = None, err: TextIO | None = None) -> None:
    """Run a search for ``args`` (program name first), writing results to ``out``.

    Diagnostics go to ``err``. Raises RepError on any failure.
    """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err

    parsed = parse_args(args)
    paths = expand_file_patterns(parsed.file_patterns)

    search_config = SearchConfig.from_flags(parsed.flags)
    output_config = OutputConfig.from_flags(parsed.flags, len(paths) > 1)

    if output_config.verbose:
        print(f"Processing {len(paths)} file(s)", file=err)
        print("---", file=err)

    for path in paths:
        _process_file(path, parsed.pattern, search_config, output_config, out, err)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; ``argv`` excludes the program name. Returns the exit status."""
    if argv is None:
        args = list(sys.argv)
    else:
        args = ["rep", *argv]
    try:
        run(args)
    except RepError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())