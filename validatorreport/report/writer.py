from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from validatorreport.core.findings import ValidatorResults
from validatorreport.report.render import render_results_html
from validatorreport.report.template import ReportTemplate

log = logging.getLogger("validatorreport.writer")


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def _write_whole(path: Path, text: str) -> None:
    fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(text)
        # mkstemp creates 0600; give the report the mode a plain write would
        os.chmod(tmp, 0o666 & ~_current_umask())
        os.replace(tmp, path)
    except BaseException:
        try:
            os.remove(tmp)
        except OSError:
            pass
        raise


def write_results_html(
    results: ValidatorResults,
    out_path: Path,
    include_suppressed: bool,
    template: Optional[ReportTemplate] = None,
) -> Path:
    """
    Render the full results document and write it to `out_path` in one go.
    The destination is only replaced once the whole document exists.
    """
    out_path = Path(out_path)
    log.info("  Writing results to %s...", out_path)

    html = render_results_html(
        results,
        include_suppressed=include_suppressed,
        template=template or ReportTemplate.default(),
    )

    out_path.parent.mkdir(parents=True, exist_ok=True)
    _write_whole(out_path, html)
    return out_path
