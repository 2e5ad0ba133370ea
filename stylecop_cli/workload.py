"""Code projects gathered during a run, and what the engine reported on them."""

from __future__ import annotations

from stylecop_cli.config import CodeProject, Violation


class Workload:
    """Accumulates code projects in creation order.

    Each code project gets a key one higher than the last, starting at 0.
    """

    def __init__(self, configuration: list[str] | None = None) -> None:
        self.configuration = list(configuration or [])
        self.code_projects: list[CodeProject] = []
        self.violations: list[Violation] = []
        self.output_lines: list[str] = []
        self.solution_count = 0
        self.project_count = 0
        self._next_key = 0

    def create_code_project(self, directory_path: str, name: str | None = None) -> CodeProject:
        """Create a code project with the next key. It is not added until add_code_project."""
        code_project = CodeProject(
            key=self._next_key,
            directory_path=directory_path,
            configuration=list(self.configuration),
            name=name,
        )
        self._next_key += 1
        return code_project

    def add_code_project(self, code_project: CodeProject) -> None:
        self.code_projects.append(code_project)

    def has_code_projects(self) -> bool:
        return len(self.code_projects) > 0

    def source_file_count(self) -> int:
        return sum(len(cp.source_paths) for cp in self.code_projects)

    def record_output(self, line: str) -> None:
        self.output_lines.append(line)

    def record_violation(self, violation: Violation) -> None:
        self.violations.append(violation)
