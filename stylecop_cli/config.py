"""Core data types and configuration for StyleCop CLI runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

DEFAULT_ENGINE = "StyleCop"


@dataclass
class CodeProject:
    """A group of source files analysed together by the engine."""
    key: int
    directory_path: str
    configuration: list[str] = field(default_factory=list)
    source_paths: list[str] = field(default_factory=list)
    name: str | None = None


@dataclass
class Violation:
    rule_id: str
    message: str
    source_path: str
    line: int
    code_project_key: int


@dataclass
class AnalysisConfig:
    project_files: list[str] = field(default_factory=list)
    solution_files: list[str] = field(default_factory=list)
    source_files: list[str] = field(default_factory=list)
    recursive: bool = False
    settings_file: str | None = None
    engine_output_file: str | None = None
    configuration_flags: list[str] = field(default_factory=list)
    engine: str = DEFAULT_ENGINE
    engine_timeout: float | None = None
    output_path: str | None = None
    verbose: bool = False
    quiet: bool = False

    def has_inputs(self) -> bool:
        """True if any project, solution or source file was requested."""
        return bool(self.project_files or self.solution_files or self.source_files)


@dataclass
class AnalysisResult:
    version: str = "1.0"
    metadata: dict[str, Any] = field(default_factory=dict)
    stats: dict[str, Any] = field(default_factory=dict)
    code_projects: list[dict] = field(default_factory=list)
    violations: list[dict] = field(default_factory=list)
    output: list[str] = field(default_factory=list)
