"""Run the StyleCop console engine as a subprocess."""

from __future__ import annotations

import logging
import os
import re
import subprocess

from stylecop_cli.analysis.base import OutputHandler, ViolationHandler
from stylecop_cli.config import DEFAULT_ENGINE, CodeProject, Violation
from stylecop_cli.errors import AnalyzerError

logger = logging.getLogger(__name__)

# path(line[,col]): [warning|error ]SA1600: message
_VIOLATION_RE = re.compile(
    r"^(?P<path>.+?)\((?P<line>\d+)(?:,\d+)?\):\s*"
    r"(?:(?:warning|error)\s+)?"
    r"(?P<rule>[A-Z]{2,}\d+):\s*(?P<message>.*)$"
)


def parse_violation(line: str, code_project_key: int) -> Violation | None:
    """Parse one line of engine output, or return None if it is not a violation."""
    match = _VIOLATION_RE.match(line.strip())
    if match is None:
        return None
    return Violation(
        rule_id=match.group("rule"),
        message=match.group("message").strip(),
        source_path=match.group("path"),
        line=int(match.group("line")),
        code_project_key=code_project_key,
    )


class StyleCopConsole:
    """Drives a StyleCop command-line engine, one run per code project.

    The engine is invoked in the code project's directory as::

        <engine> [--settings FILE] [--out FILE] [--flags A,B] SOURCE...

    When more than one code project is analysed, each run writes its own
    output file, named ``<stem>.<key><ext>`` after the requested one.
    """

    name = "stylecop"

    def __init__(
        self,
        engine: str = DEFAULT_ENGINE,
        settings_file: str | None = None,
        output_file: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.engine = engine
        # Absolute, since each run changes directory
        self.settings_file = os.path.abspath(settings_file) if settings_file else None
        self.output_file = os.path.abspath(output_file) if output_file else None
        self.timeout = timeout

    def output_file_for(self, code_project: CodeProject, shared: bool) -> str | None:
        """Output file for one run; split per key when several runs share it."""
        if self.output_file is None or not shared:
            return self.output_file
        stem, ext = os.path.splitext(self.output_file)
        return f"{stem}.{code_project.key}{ext}"

    def build_command(self, code_project: CodeProject, shared: bool = False) -> list[str]:
        cmd = [self.engine]
        if self.settings_file:
            cmd += ["--settings", self.settings_file]
        output_file = self.output_file_for(code_project, shared)
        if output_file:
            cmd += ["--out", output_file]
        if code_project.configuration:
            cmd += ["--flags", ",".join(code_project.configuration)]
        cmd += [os.path.abspath(p) for p in code_project.source_paths]
        return cmd

    def analyze(
        self,
        code_projects: list[CodeProject],
        on_output: OutputHandler,
        on_violation: ViolationHandler,
    ) -> None:
        runnable = []
        for code_project in code_projects:
            if code_project.source_paths:
                runnable.append(code_project)
            else:
                logger.debug(f"Code project {code_project.key} has no source files")

        shared = len(runnable) > 1
        for code_project in runnable:
            self._run(code_project, shared, on_output, on_violation)

    def _run(
        self,
        code_project: CodeProject,
        shared: bool,
        on_output: OutputHandler,
        on_violation: ViolationHandler,
    ) -> None:
        cmd = self.build_command(code_project, shared)
        logger.debug(f"Running {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                cwd=code_project.directory_path or None,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise AnalyzerError(f"Analysis engine not found: {self.engine}") from e
        except subprocess.TimeoutExpired as e:
            raise AnalyzerError(
                f"Analysis engine timed out after {self.timeout}s on {code_project.directory_path}"
            ) from e

        violations = 0
        for line in result.stdout.splitlines():
            on_output(line)
            violation = parse_violation(line, code_project.key)
            if violation is not None:
                violations += 1
                on_violation(violation)

        # Engines commonly exit non-zero when violations are found
        if result.returncode != 0 and violations == 0:
            message = result.stderr.strip() or f"exit status {result.returncode}"
            raise AnalyzerError(f"Analysis engine failed on {code_project.directory_path}: {message}")

        if result.stderr.strip():
            logger.warning(f"{self.engine}: {result.stderr.strip()}")
