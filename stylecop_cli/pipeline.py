"""Sequential phase orchestrator with timing."""

from __future__ import annotations

import time

from stylecop_cli.analysis.base import Analyzer, OutputHandler
from stylecop_cli.analysis.stylecop import StyleCopConsole
from stylecop_cli.config import AnalysisConfig, AnalysisResult
from stylecop_cli.output import build_result
from stylecop_cli.phases.analysis import run_analysis_phase
from stylecop_cli.phases.discovery import (
    run_projects_phase,
    run_solutions_phase,
    run_sources_phase,
)
from stylecop_cli.workload import Workload


_PHASE_LABELS = {
    "projects": "Reading project files",
    "solutions": "Reading solution files",
    "sources": "Checking source files",
    "analysis": "Analysing source files",
}


def default_analyzer(config: AnalysisConfig) -> Analyzer:
    return StyleCopConsole(
        engine=config.engine,
        settings_file=config.settings_file,
        output_file=config.engine_output_file,
        timeout=config.engine_timeout,
    )


def run_pipeline(
    config: AnalysisConfig,
    analyzer: Analyzer | None = None,
    progress_callback=None,
    output_callback: OutputHandler | None = None,
) -> AnalysisResult:
    """Execute discovery then analysis and return the result.

    Args:
        config: Analysis configuration.
        analyzer: Engine to run; a StyleCopConsole built from the config
            when omitted.
        progress_callback: Optional callable(phase_name, label) invoked
            when each phase starts. Used by the CLI for Rich progress.
        output_callback: Optional callable(line) receiving engine output
            as it is produced.

    Loading errors propagate and stop the run before anything is analysed.
    """
    if analyzer is None:
        analyzer = default_analyzer(config)

    workload = Workload(config.configuration_flags)
    timings: dict[str, float] = {}
    total_start = time.monotonic()

    phases = [
        ("projects", lambda: run_projects_phase(config, workload)),
        ("solutions", lambda: run_solutions_phase(config, workload)),
        ("sources", lambda: run_sources_phase(config, workload)),
        ("analysis", lambda: run_analysis_phase(config, workload, analyzer, output_callback)),
    ]

    for name, phase_fn in phases:
        if progress_callback:
            progress_callback(name, _PHASE_LABELS.get(name, name))
        start = time.monotonic()
        phase_fn()
        timings[name] = time.monotonic() - start

    total_ms = (time.monotonic() - total_start) * 1000

    return build_result(config, workload, analyzer, timings, total_ms)
