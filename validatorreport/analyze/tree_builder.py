from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence, Tuple

from validatorreport.core.findings import SEVERITIES, Finding
from validatorreport.core.tree import TreeItem, TreeLeaf, TreeNode

log = logging.getLogger("validatorreport.tree_builder")

# protocol row is depth 0, category rows depth 1
TOP_LEVEL_DEPTH = 2


def group_by_severity(findings: Iterable[Finding]) -> Dict[str, List[Finding]]:
    groups: Dict[str, List[Finding]] = {sev: [] for sev in SEVERITIES}

    for f in findings:
        bucket = groups.get(f.severity)
        if bucket is None:
            log.debug("Dropping finding with unknown severity %r: %s", f.severity, f.description)
            continue
        bucket.append(f)

    return groups


def _contribution(item: TreeItem) -> Tuple[int, int]:
    """
    What `item` adds to its parent's (active, suppressed) counts.
    A node routes its whole rolled-up total by its own suppression state.
    """
    if item.kind == "leaf":
        return (0, 1) if item.finding.suppressed else (1, 0)
    total = 1 + item.active_count + item.suppressed_count
    return (0, total) if item.finding.suppressed else (total, 0)


def aggregate_counts(node: TreeNode) -> TreeNode:
    """Recompute a node's counts from its already built direct children."""
    active = suppressed = 0
    for child in node.children:
        a, s = _contribution(child)
        active += a
        suppressed += s
    node.active_count = active
    node.suppressed_count = suppressed
    return node


def _build_item(finding: Finding, depth: int) -> Tuple[TreeItem, int, int]:
    if not finding.children:
        item: TreeItem = TreeLeaf(finding=finding, depth=depth)
        active, suppressed = _contribution(item)
        return item, active, suppressed

    node = TreeNode(finding=finding, depth=depth)
    for sub in finding.children:
        child, a, s = _build_item(sub, depth + 1)
        node.children.append(child)
        node.active_count += a
        node.suppressed_count += s

    active, suppressed = _contribution(node)
    return node, active, suppressed


def build_tree_items(findings: Sequence[Finding], depth: int = TOP_LEVEL_DEPTH) -> List[TreeItem]:
    """
    Turn findings into display items, one per finding and in the same order.
    Findings with sub-findings become nodes whose counts are filled in
    while the children are attached.
    """
    return [_build_item(f, depth)[0] for f in findings]


def build_forests(findings: Iterable[Finding]) -> Dict[str, List[TreeItem]]:
    forests: Dict[str, List[TreeItem]] = {}
    for severity, group in group_by_severity(findings).items():
        forests[severity] = build_tree_items(group)
        log.debug("%s: %d top-level items", severity, len(forests[severity]))
    return forests
