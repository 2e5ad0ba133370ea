"""Load lifecycle shared by Visual Studio file types."""

from __future__ import annotations

import os
from typing import Protocol, runtime_checkable

from stylecop_cli.errors import InvalidExtensionError


@runtime_checkable
class VisualStudioFile(Protocol):
    """Protocol implemented by every Visual Studio file type.

    Concrete types fix ``file_extension`` and supply ``read_file``; the
    validation steps in ``load_file`` are shared.
    """

    file_extension: str
    file_path: str

    @property
    def directory_path(self) -> str:
        """Path to the directory containing the file."""
        ...

    def get_full_path(self, relative_path: str) -> str:
        """Resolve a path relative to the directory containing the file."""
        ...

    def load(self) -> None:
        """Validate the file and populate derived state."""
        ...

    def read_file(self) -> None:
        """Format-specific read step, called once validation passes."""
        ...


def check_file_path(file_path: str) -> None:
    """Raise FileNotFoundError unless ``file_path`` is an existing file."""
    if not os.path.isfile(file_path):
        raise FileNotFoundError(f"File not found at path: {file_path}")


def check_file_extension(file_path: str, file_extension: str) -> None:
    """Raise InvalidExtensionError unless the extension matches, ignoring case."""
    extension = os.path.splitext(file_path)[1]
    if extension.lower() != file_extension.lower():
        raise InvalidExtensionError(file_path, file_extension)


def load_file(vs_file: VisualStudioFile) -> None:
    """Validate ``vs_file`` then run its read step."""
    check_file_path(vs_file.file_path)
    check_file_extension(vs_file.file_path, vs_file.file_extension)
    vs_file.read_file()


def directory_of(file_path: str) -> str:
    return os.path.dirname(file_path)


def get_full_path(file_path: str, relative_path: str) -> str:
    """Resolve ``relative_path`` against the directory containing ``file_path``.

    Visual Studio writes backslash separators; they are converted to the
    platform separator.
    """
    relative_path = relative_path.replace("\\", os.sep)
    return os.path.join(directory_of(file_path), relative_path)
