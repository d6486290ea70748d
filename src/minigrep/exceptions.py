"""Errors raised by minigrep."""


class MinigrepError(Exception):
    """Base class for errors reported to the user."""


class MissingArgumentError(MinigrepError):
    """A required command-line argument was not supplied."""

    def __init__(self, argument: str, message: str):
        super().__init__(message)
        self.argument = argument


class FileReadError(MinigrepError):
    """The target file could not be read as text."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not read {path}: {reason}")
        self.path = path
        self.reason = reason
