"""JSON serialisation of analysis results."""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path

from stylecop_cli import __version__
from stylecop_cli.analysis.base import Analyzer
from stylecop_cli.config import AnalysisConfig, AnalysisResult
from stylecop_cli.workload import Workload


def _count_rules(workload: Workload) -> dict[str, int]:
    """Count violations per rule."""
    counts: dict[str, int] = {}
    for v in workload.violations:
        counts[v.rule_id] = counts.get(v.rule_id, 0) + 1
    return counts


def build_result(
    config: AnalysisConfig,
    workload: Workload,
    analyzer: Analyzer,
    timings: dict[str, float],
    total_ms: float,
) -> AnalysisResult:
    """Build the AnalysisResult from the workload."""
    return AnalysisResult(
        version="1.0",
        metadata={
            "analysed_at": datetime.now(timezone.utc).isoformat(),
            "stylecop_cli_version": __version__,
            "analyzer": getattr(analyzer, "name", type(analyzer).__name__),
            "settings_file": config.settings_file,
            "configuration_flags": list(config.configuration_flags),
            "analysis_duration_ms": round(total_ms, 1),
            "phase_timings": timings,
        },
        stats={
            "solutions": workload.solution_count,
            "projects": workload.project_count,
            "code_projects": len(workload.code_projects),
            "source_files": workload.source_file_count(),
            "violations": len(workload.violations),
            "rules": _count_rules(workload),
        },
        code_projects=[asdict(cp) for cp in workload.code_projects],
        violations=[asdict(v) for v in workload.violations],
        output=list(workload.output_lines),
    )


def write_output(result: AnalysisResult, output_path: str) -> None:
    """Write the analysis result to a JSON file."""
    data = asdict(result)
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(data, f, indent=2, default=str)
