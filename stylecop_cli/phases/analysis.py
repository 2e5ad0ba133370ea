"""Analysis phase: hand the discovered code projects to the engine."""

from __future__ import annotations

import logging

from stylecop_cli.analysis.base import Analyzer, OutputHandler
from stylecop_cli.config import AnalysisConfig, Violation
from stylecop_cli.workload import Workload

logger = logging.getLogger(__name__)


def run_analysis_phase(
    config: AnalysisConfig,
    workload: Workload,
    analyzer: Analyzer,
    output_callback: OutputHandler | None = None,
) -> None:
    """Run the analyzer over every code project.

    Does nothing when discovery found no code projects.
    """
    if not workload.has_code_projects():
        logger.info("No files to analyze")
        return

    def on_output(line: str) -> None:
        workload.record_output(line)
        if output_callback:
            output_callback(line)

    def on_violation(violation: Violation) -> None:
        workload.record_violation(violation)

    analyzer.analyze(workload.code_projects, on_output, on_violation)
