"""Parse .sln files (custom text format, not XML)."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import ClassVar

from stylecop_cli.dotnet.project import PROJECT_FILE_EXTENSION, CSharpProjectFile
from stylecop_cli.dotnet.visual_studio import directory_of, get_full_path, load_file
from stylecop_cli.errors import DecodeError

logger = logging.getLogger(__name__)

SOLUTION_FILE_EXTENSION = ".sln"

PROJECT_TAG = "Project"

# Project("{TYPE-GUID}") = "Name", "Path\To\Project.csproj", "{PROJECT-GUID}"
_GUID = r'"\{[A-F\d-]+\}"'
_PROJECT_RE = re.compile(
    "^" + PROJECT_TAG + r"\(" + _GUID + r"\) = "
    r'"(?P<name>\w+)", '
    r'"(?P<path>[\w.\\]+(?i:' + re.escape(PROJECT_FILE_EXTENSION) + r'))", '
    + _GUID + "$"
)


@dataclass
class SolutionFile:
    """A Visual Studio solution file and the C# projects it references."""
    file_path: str
    project_files: list[CSharpProjectFile] = field(default_factory=list, init=False)
    file_extension: ClassVar[str] = SOLUTION_FILE_EXTENSION

    @property
    def directory_path(self) -> str:
        return directory_of(self.file_path)

    def get_full_path(self, relative_path: str) -> str:
        return get_full_path(self.file_path, relative_path)

    def load(self) -> None:
        load_file(self)

    def read_file(self) -> None:
        """Scan every line for C# project declarations.

        Lines starting with ``Project`` that do not match the declaration
        shape (solution folders, other project types, unusual names) are
        skipped.
        """
        self.project_files = []
        try:
            with open(self.file_path, "r", encoding="utf-8-sig") as f:
                for line in f:
                    line = line.rstrip("\r\n")
                    if line.startswith(PROJECT_TAG):
                        self._add_project_file(line)
        except UnicodeDecodeError as e:
            raise DecodeError(self.file_path, str(e)) from e

    def _add_project_file(self, line: str) -> None:
        match = _PROJECT_RE.match(line)
        if match is None:
            logger.debug(f"Skipping unrecognised project line in {self.file_path}: {line}")
            return

        self.project_files.append(CSharpProjectFile(
            file_path=self.get_full_path(match.group("path")),
            project_name=match.group("name"),
        ))
