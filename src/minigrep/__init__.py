"""minigrep: print the lines of a file that contain a query."""

__version__ = "0.1.0"
