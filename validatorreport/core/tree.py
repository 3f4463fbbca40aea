"""
Display nodes for the result tree.

A TreeItem is either a TreeLeaf or a TreeNode, told apart by `kind`.
Only nodes own children and carry subtree counts.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Union

from validatorreport.core.findings import Finding


@dataclass
class TreeLeaf:
    finding: Finding
    depth: int
    kind: Literal["leaf"] = "leaf"


@dataclass
class TreeNode:
    finding: Finding
    depth: int
    children: List["TreeItem"] = field(default_factory=list)
    active_count: int = 0
    suppressed_count: int = 0
    kind: Literal["node"] = "node"


TreeItem = Union[TreeLeaf, TreeNode]
