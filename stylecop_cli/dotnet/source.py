"""Visual C# source files named directly on the command line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from stylecop_cli.dotnet.visual_studio import directory_of, get_full_path, load_file

SOURCE_FILE_EXTENSION = ".cs"


@dataclass
class CSharpSourceFile:
    """A .cs file. Loading only validates the path and extension."""
    file_path: str
    file_extension: ClassVar[str] = SOURCE_FILE_EXTENSION

    @property
    def directory_path(self) -> str:
        return directory_of(self.file_path)

    def get_full_path(self, relative_path: str) -> str:
        return get_full_path(self.file_path, relative_path)

    def load(self) -> None:
        load_file(self)

    def read_file(self) -> None:
        # Source contents are read by the analysis engine, not here.
        pass
