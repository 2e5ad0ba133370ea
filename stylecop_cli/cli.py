"""StyleCop CLI - Command-line interface to StyleCop source code analysis."""

from __future__ import annotations

import logging

import click

from stylecop_cli import __version__
from stylecop_cli.config import DEFAULT_ENGINE, AnalysisConfig, AnalysisResult
from stylecop_cli.errors import StyleCopCLIError
from stylecop_cli.output import write_output
from stylecop_cli.pipeline import run_pipeline

URL = "http://sourceforge.net/projects/stylecopcli"


@click.group()
@click.version_option(__version__, prog_name="stylecop-cli", message=f"%(prog)s %(version)s\n{URL}")
def cli() -> None:
    """StyleCop CLI - Analyse Visual C# sources referenced by solutions and projects."""
    pass


def _configure_logging(verbose: bool) -> None:
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _print_summary(console, result: AnalysisResult, verbose: bool) -> None:
    from rich.table import Table

    stats = result.stats
    metadata = result.metadata

    table = Table(title="StyleCop Analysis", show_edge=False)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Solutions", str(stats.get("solutions", 0)))
    table.add_row("Projects", str(stats.get("projects", 0)))
    table.add_row("Source files", str(stats.get("source_files", 0)))
    table.add_row("Violations", str(stats.get("violations", 0)))

    duration = metadata.get("analysis_duration_ms", 0)
    table.add_row("Duration", f"{duration:.1f}ms")

    console.print(table)

    rules = stats.get("rules", {})
    if verbose and rules:
        rule_table = Table(title="Violations by Rule", show_edge=False)
        rule_table.add_column("Rule", style="bold")
        rule_table.add_column("Count", justify="right")
        for rule, count in sorted(rules.items()):
            rule_table.add_row(rule, str(count))
        console.print(rule_table)

    timings = metadata.get("phase_timings", {})
    if verbose and timings:
        timing_table = Table(title="Phase Timings", show_edge=False)
        timing_table.add_column("Phase", style="bold")
        timing_table.add_column("Time (ms)", justify="right")
        for phase, seconds in timings.items():
            timing_table.add_row(phase, f"{seconds * 1000:.1f}")
        console.print(timing_table)


def _run_with_progress(config: AnalysisConfig, console) -> AnalysisResult:
    """Run the pipeline with Rich progress display, echoing engine output."""
    from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

    with Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Initialising...", total=None)

        def on_phase(name, label):
            progress.update(task, description=label)

        result = run_pipeline(
            config,
            progress_callback=on_phase,
            output_callback=lambda line: console.print(line, markup=False, highlight=False, soft_wrap=True),
        )

    if result.stats.get("code_projects", 0) == 0:
        console.print("No files to analyze.")
    else:
        _print_summary(console, result, config.verbose)

    return result


def _run_quiet(config: AnalysisConfig) -> AnalysisResult:
    """Run the pipeline with no output."""
    return run_pipeline(config)


@cli.command("analyze")
@click.option("-p", "--proj", "project_files", multiple=True, help="Visual C# project file (.csproj); wildcards allowed")
@click.option("-s", "--sln", "solution_files", multiple=True, help="Visual Studio solution file (.sln); wildcards allowed")
@click.option("-c", "--cs", "source_files", multiple=True, help="Visual C# source file (.cs); wildcards allowed")
@click.option("-r", "--recursive", is_flag=True, help="Search sub-directories for matching files")
@click.option("--settings", "settings_file", default=None, help="StyleCop settings file")
@click.option("--out", "engine_output_file", default=None, help="File the engine writes violations to")
@click.option("--flags", "configuration_flags", multiple=True, help="Configuration flag passed to the engine")
@click.option("--engine", default=DEFAULT_ENGINE, envvar="STYLECOP_ENGINE", show_default=True, help="Analysis engine command")
@click.option("--timeout", "engine_timeout", default=None, type=float, help="Seconds to allow each engine run")
@click.option("-o", "--output", "output_path", default=None, help="Write a JSON report to this path")
@click.option("--verbose", is_flag=True, help="Show debug logging, rule counts and phase timings")
@click.option("--quiet", is_flag=True, help="Suppress all output except errors")
@click.pass_context
def analyze_cmd(
    ctx: click.Context,
    project_files: tuple[str, ...],
    solution_files: tuple[str, ...],
    source_files: tuple[str, ...],
    recursive: bool,
    settings_file: str | None,
    engine_output_file: str | None,
    configuration_flags: tuple[str, ...],
    engine: str,
    engine_timeout: float | None,
    output_path: str | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Analyse C# sources from project, solution and source files."""
    from rich.console import Console

    config = AnalysisConfig(
        project_files=list(project_files),
        solution_files=list(solution_files),
        source_files=list(source_files),
        recursive=recursive,
        settings_file=settings_file,
        engine_output_file=engine_output_file,
        configuration_flags=list(configuration_flags),
        engine=engine,
        engine_timeout=engine_timeout,
        output_path=output_path,
        verbose=verbose,
        quiet=quiet,
    )

    if not config.has_inputs():
        click.echo(ctx.get_help())
        return

    _configure_logging(verbose)
    console = Console()

    try:
        if quiet:
            result = _run_quiet(config)
        else:
            result = _run_with_progress(config, console)
    except (StyleCopCLIError, OSError) as e:
        from rich.markup import escape

        Console(stderr=True).print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        ctx.exit(1)

    if output_path:
        write_output(result, output_path)
        if not quiet:
            console.print(f"[green]Output written to:[/green] {output_path}")


if __name__ == "__main__":
    cli()
