"""Discovery phases: turn project, solution and source arguments into code projects."""

from __future__ import annotations

import logging

from stylecop_cli.config import AnalysisConfig
from stylecop_cli.dotnet.files import find_files
from stylecop_cli.dotnet.project import CSharpProjectFile
from stylecop_cli.dotnet.solution import SolutionFile
from stylecop_cli.dotnet.source import CSharpSourceFile
from stylecop_cli.workload import Workload

logger = logging.getLogger(__name__)


def add_project_files(project_files: list[CSharpProjectFile], workload: Workload) -> None:
    """Load each project and add one code project holding its sources."""
    for project_file in project_files:
        code_project = workload.create_code_project(
            project_file.directory_path, name=project_file.project_name,
        )

        project_file.load()

        for source_file in project_file.source_files:
            source_file.load()
            code_project.source_paths.append(source_file.file_path)

        logger.debug(
            f"{project_file.file_path}: {len(code_project.source_paths)} source files"
        )
        workload.add_code_project(code_project)
        workload.project_count += 1


def run_projects_phase(config: AnalysisConfig, workload: Workload) -> None:
    """Add code projects for project files named directly."""
    paths = find_files(config.project_files, config.recursive)
    add_project_files([CSharpProjectFile(path) for path in paths], workload)


def run_solutions_phase(config: AnalysisConfig, workload: Workload) -> None:
    """Add code projects for every C# project referenced by the solutions."""
    for path in find_files(config.solution_files, config.recursive):
        solution_file = SolutionFile(path)
        solution_file.load()
        workload.solution_count += 1

        logger.debug(f"{path}: {len(solution_file.project_files)} C# projects")
        add_project_files(solution_file.project_files, workload)


def run_sources_phase(config: AnalysisConfig, workload: Workload) -> None:
    """Add a one-file code project for each source file named directly."""
    for path in find_files(config.source_files, config.recursive):
        source_file = CSharpSourceFile(path)
        code_project = workload.create_code_project(source_file.directory_path)

        source_file.load()

        code_project.source_paths.append(source_file.file_path)
        workload.add_code_project(code_project)
