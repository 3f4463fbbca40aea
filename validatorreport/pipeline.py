from __future__ import annotations

import logging
from pathlib import Path

from validatorreport.extract.results_loader import load_results
from validatorreport.report.writer import write_results_html

log = logging.getLogger("validatorreport.pipeline")


def run_pipeline(results_path: Path, out_path: Path, include_suppressed: bool = False) -> Path:
    results = load_results(results_path)
    log.info(
        "Loaded %d issues for %s v%s",
        len(results.issues), results.protocol, results.version,
    )

    return write_results_html(results, out_path=out_path, include_suppressed=include_suppressed)
