from __future__ import annotations

"""CLI entrypoint for truedl."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import BenchmarkConfig, ConfigNotFoundError, load_config
from .engine import ResourceExhaustionError, damerau_levenshtein
from .harness import reports
from .harness.benchmark import persist_benchmark, run_benchmark
from .harness.selftest import SelfTestError, assert_self_tests, load_cases, run_self_tests
from .logging_config import configure_logging

app = typer.Typer(help="True Damerau-Levenshtein distance and its benchmark harness.")
console = Console()


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Log level for stderr output."
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Also write DEBUG and above to this file."
    ),
) -> None:
    configure_logging(log_level, log_file=log_file)


@app.command()
def distance(
    a: str = typer.Argument(..., help="First sequence."),
    b: str = typer.Argument(..., help="Second sequence."),
    max_cells: Optional[int] = typer.Option(
        None, "--max-cells", help="Refuse inputs whose table would exceed this many cells."
    ),
) -> None:
    try:
        value = damerau_levenshtein(a, b, max_cells=max_cells)
    except ResourceExhaustionError as exc:
        console.print(f"[red]Resource exhaustion[/red]: {escape(str(exc))}")
        raise typer.Exit(code=2)
    console.print(value)


@app.command()
def selftest(
    cases_path: Optional[Path] = typer.Option(
        None, "--cases", help="JSONL file of cases (a, b, expected)."
    ),
) -> None:
    cases = None
    if cases_path is not None:
        if not cases_path.exists():
            console.print(f"[red]Cases file not found:[/red] {cases_path}")
            raise typer.Exit(code=1)
        try:
            cases = load_cases(cases_path)
        except ValueError as exc:
            console.print(f"[red]Invalid cases file[/red]: {escape(str(exc))}")
            raise typer.Exit(code=1)
    outcomes = run_self_tests(cases)

    table = Table(title="Self-test")
    table.add_column("a")
    table.add_column("b")
    table.add_column("expected", justify="right")
    table.add_column("got", justify="right")
    table.add_column("ok", justify="right")
    for outcome in outcomes:
        table.add_row(
            repr(outcome.case.a),
            repr(outcome.case.b),
            str(outcome.case.expected),
            str(outcome.got),
            "[green]yes[/green]" if outcome.passed else "[red]no[/red]",
        )
    console.print(table)

    if not all(outcome.passed for outcome in outcomes):
        raise typer.Exit(code=1)
    console.print("[green]OK[/green] basic unit tests passed")


@app.command()
def bench(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML benchmark config."
    ),
    output: Path = typer.Option(
        Path("results_baseline.csv"), "--output", "-o", help="CSV file for results."
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Override the config seed."),
    skip_selftest: bool = typer.Option(
        False, "--skip-selftest", help="Do not run the self-test first."
    ),
) -> None:
    try:
        config = load_config(config_path) if config_path is not None else BenchmarkConfig()
    except ConfigNotFoundError as exc:
        console.print(f"[red]Config not found[/red]: {escape(str(exc))}")
        raise typer.Exit(code=1)
    except ValueError as exc:
        console.print(f"[red]Invalid config[/red]: {escape(str(exc))}")
        raise typer.Exit(code=1)
    if seed is not None:
        config = config.model_copy(update={"seed": seed})

    if not skip_selftest:
        try:
            assert_self_tests()
        except SelfTestError as exc:
            console.print(f"[red]{escape(str(exc))}[/red]")
            raise typer.Exit(code=1)

    console.print(f"Writing results to: [green]{output}[/green]")
    try:
        rows = run_benchmark(config)
    except ResourceExhaustionError as exc:
        console.print(f"[red]Resource exhaustion[/red]: {escape(str(exc))}")
        raise typer.Exit(code=2)
    summary_path = persist_benchmark(rows, output, config=config)

    table = Table(title="Benchmark")
    table.add_column("length", justify="right")
    table.add_column("iters", justify="right")
    table.add_column("avg_us", justify="right")
    table.add_column("distance", justify="right")
    for row in rows:
        table.add_row(
            str(row.length),
            str(row.iters),
            f"{row.avg_us:.3f}",
            "" if row.distance is None else str(row.distance),
        )
    console.print(table)
    console.print(f"Summary written to [green]{summary_path}[/green]")


@app.command()
def report(
    csv_path: Path = typer.Argument(..., help="Results CSV written by 'bench'."),
) -> None:
    if not csv_path.exists():
        console.print(f"[red]Results not found:[/red] {csv_path}")
        raise typer.Exit(code=1)

    summary = reports.summarise(reports.load_results(csv_path))

    table = Table(title="Benchmark Metrics")
    table.add_column("metric")
    table.add_column("value")
    for key, value in summary.items():
        table.add_row(key, f"{value:.3f}" if isinstance(value, float) else str(value))

    console.print(table)


if __name__ == "__main__":  # pragma: no cover
    app()
