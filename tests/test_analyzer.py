"""Tests for the StyleCop engine adapter."""

from __future__ import annotations

import os
import subprocess

import pytest

from stylecop_cli.analysis import Analyzer, StyleCopConsole
from stylecop_cli.analysis.stylecop import parse_violation
from stylecop_cli.config import CodeProject
from stylecop_cli.errors import AnalyzerError


def _completed(stdout: str = "", stderr: str = "", returncode: int = 0):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


class _FakeRun:
    """Stands in for subprocess.run, recording each command."""

    def __init__(self, *results):
        self.results = list(results)
        self.commands: list[list[str]] = []
        self.kwargs: list[dict] = []

    def __call__(self, cmd, **kwargs):
        self.commands.append(cmd)
        self.kwargs.append(kwargs)
        return self.results.pop(0)


class TestParseViolation:
    def test_stylecop_line(self):
        v = parse_violation("C:\\src\\Program.cs(12): SA1600: Elements must be documented.", 3)
        assert v is not None
        assert v.source_path == "C:\\src\\Program.cs"
        assert v.line == 12
        assert v.rule_id == "SA1600"
        assert v.message == "Elements must be documented."
        assert v.code_project_key == 3

    def test_msbuild_line_with_column(self):
        v = parse_violation("/src/App.cs(4,9): warning SA1101: Prefix local calls with this", 0)
        assert v is not None
        assert v.line == 4
        assert v.rule_id == "SA1101"
        assert v.source_path == "/src/App.cs"

    def test_plain_output_is_not_violation(self):
        assert parse_violation("Pass 1: App", 0) is None
        assert parse_violation("2 violations encountered.", 0) is None
        assert parse_violation("", 0) is None


class TestStyleCopConsole:
    def test_satisfies_protocol(self):
        assert isinstance(StyleCopConsole(), Analyzer)

    def test_build_command(self):
        console = StyleCopConsole(engine="stylecop", settings_file="Settings.StyleCop", output_file="out.xml")
        cp = CodeProject(key=0, directory_path="src", configuration=["DEBUG", "TRACE"], source_paths=["/src/A.cs"])

        assert console.build_command(cp) == [
            "stylecop",
            "--settings", os.path.abspath("Settings.StyleCop"),
            "--out", os.path.abspath("out.xml"),
            "--flags", "DEBUG,TRACE",
            os.path.abspath("/src/A.cs"),
        ]

    def test_build_command_minimal(self):
        cp = CodeProject(key=0, directory_path="src", source_paths=["A.cs"])
        assert StyleCopConsole(engine="sc").build_command(cp) == ["sc", os.path.abspath("A.cs")]

    def test_output_and_violations_reported(self, monkeypatch):
        fake = _FakeRun(_completed(
            stdout="Pass 1: App\n/src/A.cs(3): SA1633: File must have header\nDone\n",
            returncode=1,
        ))
        monkeypatch.setattr(subprocess, "run", fake)

        output, violations = [], []
        cp = CodeProject(key=7, directory_path="/src", source_paths=["/src/A.cs"])
        StyleCopConsole(engine="sc").analyze([cp], output.append, violations.append)

        assert output == ["Pass 1: App", "/src/A.cs(3): SA1633: File must have header", "Done"]
        assert len(violations) == 1
        assert violations[0].rule_id == "SA1633"
        assert violations[0].code_project_key == 7

    def test_one_run_per_code_project(self, monkeypatch):
        fake = _FakeRun(_completed(), _completed())
        monkeypatch.setattr(subprocess, "run", fake)

        projects = [
            CodeProject(key=0, directory_path="a", source_paths=["a/One.cs"]),
            CodeProject(key=1, directory_path="empty"),
            CodeProject(key=2, directory_path="b", source_paths=["b/Two.cs", "b/Three.cs"]),
        ]
        StyleCopConsole(engine="sc").analyze(projects, lambda line: None, lambda v: None)

        assert len(fake.commands) == 2
        assert fake.commands[1][1:] == [os.path.abspath("b/Two.cs"), os.path.abspath("b/Three.cs")]

    def test_missing_engine(self, monkeypatch):
        def raise_not_found(cmd, **kwargs):
            raise FileNotFoundError(cmd[0])

        monkeypatch.setattr(subprocess, "run", raise_not_found)
        cp = CodeProject(key=0, directory_path=".", source_paths=["A.cs"])

        with pytest.raises(AnalyzerError, match="not found: nope"):
            StyleCopConsole(engine="nope").analyze([cp], lambda line: None, lambda v: None)

    def test_timeout(self, monkeypatch):
        def raise_timeout(cmd, **kwargs):
            raise subprocess.TimeoutExpired(cmd, kwargs.get("timeout"))

        monkeypatch.setattr(subprocess, "run", raise_timeout)
        cp = CodeProject(key=0, directory_path="src", source_paths=["A.cs"])

        with pytest.raises(AnalyzerError, match="timed out"):
            StyleCopConsole(engine="sc", timeout=1).analyze([cp], lambda line: None, lambda v: None)

    def test_failure_without_violations(self, monkeypatch):
        monkeypatch.setattr(subprocess, "run", _FakeRun(_completed(stderr="bad settings", returncode=2)))
        cp = CodeProject(key=0, directory_path="src", source_paths=["A.cs"])

        with pytest.raises(AnalyzerError, match="bad settings"):
            StyleCopConsole(engine="sc").analyze([cp], lambda line: None, lambda v: None)

    def test_runs_in_code_project_directory(self, monkeypatch, tmp_path):
        fake = _FakeRun(_completed())
        monkeypatch.setattr(subprocess, "run", fake)
        cp = CodeProject(key=0, directory_path=str(tmp_path), source_paths=[str(tmp_path / "A.cs")])

        StyleCopConsole(engine="sc", timeout=5).analyze([cp], lambda line: None, lambda v: None)

        assert fake.kwargs[0]["cwd"] == str(tmp_path)
        assert fake.kwargs[0]["timeout"] == 5

    def test_relative_settings_resolved_before_run(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        console = StyleCopConsole(engine="sc", settings_file="Settings.StyleCop", output_file="out.xml")
        monkeypatch.chdir("/")

        assert console.settings_file == str(tmp_path / "Settings.StyleCop")
        assert console.output_file == str(tmp_path / "out.xml")

    def test_single_run_keeps_output_name(self, monkeypatch, tmp_path):
        fake = _FakeRun(_completed(), _completed())
        monkeypatch.setattr(subprocess, "run", fake)
        out = str(tmp_path / "violations.xml")
        projects = [
            CodeProject(key=0, directory_path="a", source_paths=["a/One.cs"]),
            CodeProject(key=1, directory_path="empty"),
        ]

        StyleCopConsole(engine="sc", output_file=out).analyze(projects, lambda line: None, lambda v: None)

        assert len(fake.commands) == 1
        assert fake.commands[0][1:3] == ["--out", out]

    def test_output_file_split_per_code_project(self, monkeypatch, tmp_path):
        fake = _FakeRun(_completed(), _completed())
        monkeypatch.setattr(subprocess, "run", fake)
        projects = [
            CodeProject(key=0, directory_path="a", source_paths=["a/One.cs"]),
            CodeProject(key=3, directory_path="b", source_paths=["b/Two.cs"]),
        ]

        console = StyleCopConsole(engine="sc", output_file=str(tmp_path / "violations.xml"))
        console.analyze(projects, lambda line: None, lambda v: None)

        assert [cmd[1:3] for cmd in fake.commands] == [
            ["--out", str(tmp_path / "violations.0.xml")],
            ["--out", str(tmp_path / "violations.3.xml")],
        ]
