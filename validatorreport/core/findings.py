from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal, Optional, Tuple

Severity = Literal["Critical", "Major", "Minor", "Warning"]

SEVERITIES: Tuple[str, ...] = ("Critical", "Major", "Minor", "Warning")


@dataclass(frozen=True)
class Location:
    line: int
    column: Optional[int] = None


@dataclass(frozen=True)
class Finding:
    description: str
    severity: Severity
    certainty: str = ""
    fix_impact: str = ""
    category: str = ""
    code: str = ""
    location: Optional[Location] = None
    suppressed: bool = False
    source: Optional[str] = None
    children: Tuple["Finding", ...] = ()


@dataclass(frozen=True)
class SeverityCounts:
    active: int = 0
    suppressed: int = 0

    def __add__(self, other: "SeverityCounts") -> "SeverityCounts":
        return SeverityCounts(self.active + other.active, self.suppressed + other.suppressed)


@dataclass
class ValidatorResults:
    protocol: str
    version: str
    validator_version: str = ""
    timestamp: str = ""
    issues: Tuple[Finding, ...] = ()
    counts: Dict[str, SeverityCounts] = field(default_factory=dict)

    def counts_for(self, severity: str) -> SeverityCounts:
        return self.counts.get(severity, SeverityCounts())
