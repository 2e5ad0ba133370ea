"""Adapters for the external source code analysis engine."""

from __future__ import annotations

from stylecop_cli.analysis.base import Analyzer
from stylecop_cli.analysis.stylecop import StyleCopConsole

__all__ = ["Analyzer", "StyleCopConsole"]
