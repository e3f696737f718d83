"""Print the lines of files that contain a fixed string."""

__version__ = "0.1.0"