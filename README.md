# rep

`rep` prints the lines of one or more files that contain a given string.
The search is for a fixed string. The pattern is matched literally and is
not treated as a regular expression.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## Usage

```
rep [-n] [-i] [-c] [-v] [-w] [-V] <pattern> <file-or-glob> [<file-or-glob> ...]
```

Flags may appear anywhere on the command line. The first argument that is
not a flag is the pattern. Every other argument that is not a flag is a file
name or a glob pattern. `rep` expands glob patterns itself, so a quoted
pattern such as `'logs/*.txt'` works even when the shell does not expand it.
`**` matches directories recursively, as in `'src/**/*.py'`. The paths that
one pattern matches are sorted, and the patterns are processed in the order
they are given.

| Flag | Meaning |
|------|---------|
| `-n` | Prefix each printed line with its 1-based line number (ignored with `-c`) |
| `-i` | Match case-insensitively |
| `-v` | Print the lines that do *not* contain the pattern |
| `-c` | Print only the number of selected lines for each file |
| `-w` | Accepted and shown in the `-V` report; it does not change which lines match |
| `-V` | Print progress details (files, pattern, options, match counts) to standard error |

When more than one file is searched, each output line starts with the file
name, for example `notes.txt:3:some line`, or `notes.txt:2` with `-c`.

Files are read as UTF-8. Lines may end in `\n` or `\r\n`.

### Examples

```
rep error server.log
rep -n -i warning '*.log'
rep -c TODO 'src/**/*.py'
rep -v debug app.log
```

Errors are reported on standard error, and the command then exits with
status 1. These errors include:

- missing arguments
- a malformed glob pattern
- patterns that match no files
- a file that cannot be read or decoded

## Library use

The pieces are available as modules:

- `rep.flags`: `Flag` and `parse_flags`
- `rep.args`: `ParsedArgs`, `parse_args` and `usage_string`
- `rep.search`: `SearchConfig`, `search`, `SearchResult` and `MatchedLine`
- `rep.output`: `OutputMode`, `OutputConfig`, `format_match` and `format_count`
- `rep.file_ops`: `expand_file_patterns` and `read_file_contents`
- `rep.errors`: `RepError` and its subclasses

For example, a case-insensitive search:

```python
from rep.flags import Flag
from rep.search import SearchConfig, search

config = SearchConfig.from_flags([Flag.CASE_INSENSITIVE])
result = search("Line One\nline two\n", "line", config)
print(result.total_count)  # 2
```

`rep.cli.run(args, out=None, err=None)` runs a full search. `args` is the
argument list with the program name first. Results are written to `out` and
diagnostics to `err`, which default to standard output and standard error.
It raises a `RepError` on failure. `rep.cli.main(argv=None)` is the command
entry point and returns the exit status.

## What it does not do

- There is no regular-expression matching. The pattern is always a literal
  substring.
- `-w` does not limit matches to whole words.
- It does not read from standard input. At least one file or glob pattern is
  required.
- Directories are not searched unless a glob names the files inside them. A
  directory given by name is reported as a read error.