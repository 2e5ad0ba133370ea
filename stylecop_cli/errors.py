"""Exceptions raised while discovering and analysing files."""

from __future__ import annotations


class StyleCopCLIError(Exception):
    """Base class for errors reported to the user by the CLI."""


class InvalidExtensionError(StyleCopCLIError):
    """A file's extension does not match the type it was loaded as."""

    def __init__(self, file_path: str, expected: str) -> None:
        super().__init__(f"Invalid file extension: {file_path} (expected {expected})")
        self.file_path = file_path
        self.expected = expected


class ParseError(StyleCopCLIError):
    """A project file is not well-formed XML."""

    def __init__(self, file_path: str, reason: str) -> None:
        super().__init__(f"Failed to parse {file_path}: {reason}")
        self.file_path = file_path


class AnalyzerError(StyleCopCLIError):
    """The external analysis engine could not be run or failed."""


class DecodeError(StyleCopCLIError):
    """A solution file is not valid UTF-8 text."""

    def __init__(self, file_path: str, reason: str) -> None:
        super().__init__(f"Failed to decode {file_path} as UTF-8: {reason}")
        self.file_path = file_path
