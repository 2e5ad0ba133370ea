"""Protocol for source code analysis engines."""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

from stylecop_cli.config import CodeProject, Violation

OutputHandler = Callable[[str], None]
ViolationHandler = Callable[[Violation], None]


@runtime_checkable
class Analyzer(Protocol):
    """Protocol that all analysis engines must implement."""

    name: str

    def analyze(
        self,
        code_projects: list[CodeProject],
        on_output: OutputHandler,
        on_violation: ViolationHandler,
    ) -> None:
        """Analyse every code project, reporting output lines and violations."""
        ...
