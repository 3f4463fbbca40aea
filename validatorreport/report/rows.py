"""
Flattens the category forests into the rows of the results table.

Each row carries its depth and whether it can be collapsed, which is all a
viewer needs to expand/collapse the table. Counts come from the tree
(for nodes) or from the caller's category totals (for header rows).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from validatorreport.analyze.counts import grand_totals
from validatorreport.core.findings import SEVERITIES, SeverityCounts, ValidatorResults
from validatorreport.core.tree import TreeItem

COLUMNS = (
    "Description",
    "State",
    "Certainty",
    "Fix Impact",
    "Category",
    "Code",
    "Line",
    "Column",
    "DVE",
)


@dataclass
class ReportRow:
    kind: str  # protocol | category | node | leaf
    depth: int
    label: str
    collapsible: bool
    toggle: bool = False
    marker: Optional[str] = None  # css class of the severity swatch
    counts: str = ""
    suppressed: bool = False
    cells: List[str] = field(default_factory=lambda: [""] * (len(COLUMNS) - 1))

    @property
    def css_class(self) -> str:
        level = f"level{self.depth}"
        return f"collapse {level}" if self.collapsible else level


def counts_label(active: int, suppressed: int, include_suppressed: bool) -> str:
    if include_suppressed:
        return f"({active} active, {suppressed} suppressed)"
    return f"({active} active)"


def _item_cells(item: TreeItem) -> List[str]:
    f = item.finding
    loc = f.location
    return [
        "Suppressed" if f.suppressed else "Active",
        f.certainty,
        f.fix_impact,
        f.category,
        f.code,
        str(loc.line) if loc else "",
        str(loc.column) if loc and loc.column is not None else "",
        f.source or "",
    ]


def _walk(item: TreeItem, rows: List[ReportRow], include_suppressed: bool) -> None:
    f = item.finding
    # every item is visited; only the row itself is hidden
    visible = include_suppressed or not f.suppressed

    if item.kind == "node":
        if visible:
            rows.append(ReportRow(
                kind="node",
                depth=item.depth,
                label=f.description,
                collapsible=True,
                toggle=True,
                marker=f.severity.lower(),
                counts=counts_label(item.active_count, item.suppressed_count, include_suppressed),
                suppressed=f.suppressed,
                cells=_item_cells(item),
            ))
        for child in item.children:
            _walk(child, rows, include_suppressed)
        return

    if visible:
        rows.append(ReportRow(
            kind="leaf",
            depth=item.depth,
            label=f.description,
            collapsible=False,
            marker=f.severity.lower(),
            suppressed=f.suppressed,
            cells=_item_cells(item),
        ))


def build_report_rows(
    results: ValidatorResults,
    forests: Dict[str, Sequence[TreeItem]],
    include_suppressed: bool,
) -> List[ReportRow]:
    total = grand_totals(results.counts)
    rows: List[ReportRow] = [ReportRow(
        kind="protocol",
        depth=0,
        label=f"{results.protocol} v{results.version}",
        collapsible=True,
        toggle=True,
        counts=counts_label(total.active, total.suppressed, include_suppressed),
    )]

    for severity in SEVERITIES:
        items = forests.get(severity) or []
        counts: SeverityCounts = results.counts_for(severity)
        rows.append(ReportRow(
            kind="category",
            depth=1,
            label=severity,
            collapsible=True,
            toggle=bool(items),
            marker=severity.lower(),
            counts=counts_label(counts.active, counts.suppressed, include_suppressed),
        ))
        for item in items:
            _walk(item, rows, include_suppressed)

    return rows
