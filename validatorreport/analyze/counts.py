from __future__ import annotations

from typing import Dict, Iterable

from validatorreport.core.findings import SEVERITIES, Finding, SeverityCounts


def count_by_severity(findings: Iterable[Finding]) -> Dict[str, SeverityCounts]:
    """
    Category totals for inputs that don't carry them.
    Every finding counts under its own severity, sub-findings included.
    A top-level finding with an unknown severity never reaches the table,
    so neither it nor anything beneath it is counted.
    """
    active = {sev: 0 for sev in SEVERITIES}
    suppressed = {sev: 0 for sev in SEVERITIES}

    stack = [f for f in findings if f.severity in active]
    while stack:
        f = stack.pop()
        stack.extend(f.children)
        if f.severity not in active:
            continue
        if f.suppressed:
            suppressed[f.severity] += 1
        else:
            active[f.severity] += 1

    return {sev: SeverityCounts(active[sev], suppressed[sev]) for sev in SEVERITIES}


def grand_totals(counts: Dict[str, SeverityCounts]) -> SeverityCounts:
    total = SeverityCounts()
    for sev in SEVERITIES:
        total = total + counts.get(sev, SeverityCounts())
    return total
