"""Exceptions raised while searching files."""


class RepError(Exception):
    """Base class for every error the tool reports."""


class InvalidArgumentsError(RepError):
    """The command line could not be understood."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Invalid arguments: {message}")


class MissingFileError(RepError):
    """A named file does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"File not found: {path}")


class GlobPatternError(RepError):
    """A file pattern was malformed or could not be expanded."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        super().__init__(f"Invalid glob pattern: {pattern}")


class RepIOError(RepError):
    """A file could not be read."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"IO error: {message}")


class NoFilesMatchedError(RepError):
    """None of the file patterns matched any file."""

    def __init__(self) -> None:
        super().__init__("No files found matching patterns")