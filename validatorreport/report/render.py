from __future__ import annotations

from typing import Dict, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from validatorreport.analyze.tree_builder import build_forests
from validatorreport.core.findings import ValidatorResults
from validatorreport.core.tree import TreeItem
from validatorreport.report.rows import COLUMNS, build_report_rows
from validatorreport.report.template import TEMPLATES_DIR, ReportTemplate

TOOL_NAME = "validator-report"


def make_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "html.j2"]),
    )


def render_results_html(
    results: ValidatorResults,
    include_suppressed: bool,
    template: ReportTemplate,
    env: Optional[Environment] = None,
    forests: Optional[Dict[str, Sequence[TreeItem]]] = None,
) -> str:
    env = env or make_environment()
    if forests is None:
        forests = build_forests(results.issues)

    rows = build_report_rows(results, forests, include_suppressed)

    table = env.get_template("results_table.html.j2").render(
        protocol=results.protocol,
        version=results.version,
        columns=COLUMNS,
        rows=rows,
    )
    footer = env.get_template("footer.html.j2").render(
        tool_name=TOOL_NAME,
        validator_version=results.validator_version,
        timestamp=results.timestamp,
    )

    return "".join([
        template.header(results.protocol, results.version),
        table,
        "\n",
        template.end,
        footer,
    ])
