from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from validatorreport.config import ReportConfig
from validatorreport.pipeline import run_pipeline

app = typer.Typer(add_completion=False)


@app.command()
def render(
    results: Path = typer.Option(..., "--results", "-r", exists=True, dir_okay=False, help="Validation results JSON"),
    out: Path = typer.Option(Path("output") / "results.html", "--out", "-o", help="HTML report to write"),
    include_suppressed: Optional[bool] = typer.Option(
        None,
        "--include-suppressed/--exclude-suppressed",
        help="Show suppressed findings and counts (default: VALIDATOR_REPORT_INCLUDE_SUPPRESSED)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Extra debug output"),
):
    """
    Render validation results into a collapsible HTML report.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s %(message)s",
    )

    if include_suppressed is None:
        include_suppressed = ReportConfig.from_env().include_suppressed

    written = run_pipeline(results_path=results, out_path=out, include_suppressed=include_suppressed)
    typer.echo(f"Report generated: {written}")


def main():
    app()


if __name__ == "__main__":
    main()
