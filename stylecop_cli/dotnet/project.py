"""Parse .csproj files (XML with MSBuild schema)."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import ClassVar

from stylecop_cli.dotnet.source import SOURCE_FILE_EXTENSION, CSharpSourceFile
from stylecop_cli.dotnet.visual_studio import directory_of, get_full_path, load_file
from stylecop_cli.errors import ParseError

logger = logging.getLogger(__name__)

PROJECT_FILE_EXTENSION = ".csproj"

MSBUILD_NAMESPACE = "http://schemas.microsoft.com/developer/msbuild/2003"
_NS = {"msb": MSBUILD_NAMESPACE}

# Relative to the root <Project> element
_COMPILE_XPATH = "msb:ItemGroup/msb:Compile"
_AUTOGEN_XPATH = "msb:AutoGen"


@dataclass
class CSharpProjectFile:
    """A Visual C# project file and the source files it compiles.

    ``project_name`` is set when the project was discovered through a
    solution file, and left as None when the project file was named
    directly.
    """
    file_path: str
    project_name: str | None = None
    source_file_paths: list[str] = field(default_factory=list, init=False)
    file_extension: ClassVar[str] = PROJECT_FILE_EXTENSION

    @property
    def directory_path(self) -> str:
        return directory_of(self.file_path)

    @property
    def has_project_name(self) -> bool:
        return self.project_name is not None

    @property
    def source_files(self) -> list[CSharpSourceFile]:
        return [CSharpSourceFile(path) for path in self.source_file_paths]

    def get_full_path(self, relative_path: str) -> str:
        return get_full_path(self.file_path, relative_path)

    def load(self) -> None:
        load_file(self)

    def read_file(self) -> None:
        """Collect the paths of non-generated .cs compile items, in document order."""
        try:
            tree = ET.parse(self.file_path)
        except ET.ParseError as e:
            raise ParseError(self.file_path, str(e)) from e

        self.source_file_paths = []
        root = tree.getroot()
        if root.tag != f"{{{MSBUILD_NAMESPACE}}}Project":
            logger.debug(f"{self.file_path}: root is not an MSBuild 2003 <Project>")
            return

        for compile_item in root.findall(_COMPILE_XPATH, _NS):
            self._add_source_file(compile_item)

    def _add_source_file(self, compile_item: ET.Element) -> None:
        autogen = compile_item.find(_AUTOGEN_XPATH, _NS)
        if autogen is not None and (autogen.text or "").strip().lower() == "true":
            logger.debug(f"Skipping auto-generated item in {self.file_path}: {compile_item.get('Include')}")
            return

        include = compile_item.get("Include")
        if include is None:
            return

        if include.lower().endswith(SOURCE_FILE_EXTENSION):
            self.source_file_paths.append(self.get_full_path(include))
