from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from validatorreport.analyze.counts import count_by_severity
from validatorreport.core.findings import SEVERITIES, Finding, Location, SeverityCounts, ValidatorResults

# JSON key prefix per severity, e.g. "criticalIssueCount" / "suppressedCriticalIssueCount"
_COUNT_KEYS = {sev: sev.lower() for sev in SEVERITIES}


def _read_json(path: Path):
    return json.loads(path.read_text(encoding="utf-8-sig"))


def _opt_int(value: Any, where: str) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{where}: expected an integer, got {value!r}") from None


def _opt_bool(value: Any, where: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"{where}: expected a boolean, got {value!r}")
    return value


def _parse_finding(obj: Any, where: str) -> Finding:
    if not isinstance(obj, dict):
        raise ValueError(f"{where}: expected an object, got {type(obj).__name__}")

    for key in ("description", "severity"):
        if key not in obj:
            raise ValueError(f"{where}: missing '{key}'")

    line = _opt_int(obj.get("line"), f"{where}.line")
    column = _opt_int(obj.get("column"), f"{where}.column")
    location = Location(line=line, column=column) if line is not None else None

    subs = obj.get("subResults") or []
    if not isinstance(subs, list):
        raise ValueError(f"{where}.subResults: expected a list")

    return Finding(
        description=str(obj["description"]),
        severity=str(obj["severity"]),
        certainty=str(obj.get("certainty") or ""),
        fix_impact=str(obj.get("fixImpact") or ""),
        category=str(obj.get("category") or ""),
        code=str(obj.get("code") or ""),
        location=location,
        suppressed=_opt_bool(obj.get("suppressed"), f"{where}.suppressed"),
        source=obj.get("dveExport") or None,
        children=tuple(
            _parse_finding(sub, f"{where}.subResults[{i}]") for i, sub in enumerate(subs)
        ),
    )


def _parse_counts(obj: Dict[str, Any], issues) -> Dict[str, SeverityCounts]:
    present = [
        f"{prefix}IssueCount" in obj or f"suppressed{prefix.capitalize()}IssueCount" in obj
        for prefix in _COUNT_KEYS.values()
    ]
    if not any(present):
        return count_by_severity(issues)

    counts: Dict[str, SeverityCounts] = {}
    for sev, prefix in _COUNT_KEYS.items():
        active_key = f"{prefix}IssueCount"
        suppressed_key = f"suppressed{prefix.capitalize()}IssueCount"
        counts[sev] = SeverityCounts(
            active=_opt_int(obj.get(active_key), active_key) or 0,
            suppressed=_opt_int(obj.get(suppressed_key), suppressed_key) or 0,
        )
    return counts


def parse_results(obj: Any) -> ValidatorResults:
    if not isinstance(obj, dict):
        raise ValueError(f"Validation results must be a JSON object, got {type(obj).__name__}")

    raw_issues = obj.get("issues") or []
    if not isinstance(raw_issues, list):
        raise ValueError("issues: expected a list")

    issues = tuple(_parse_finding(x, f"issues[{i}]") for i, x in enumerate(raw_issues))

    return ValidatorResults(
        protocol=str(obj.get("protocol") or ""),
        version=str(obj.get("version") or ""),
        validator_version=str(obj.get("validatorVersion") or ""),
        timestamp=str(obj.get("validationTimeStamp") or ""),
        issues=issues,
        counts=_parse_counts(obj, issues),
    )


def load_results(path: Path) -> ValidatorResults:
    """
    Accepts a JSON export of one validation run:
      { "protocol", "version", "validatorVersion", "validationTimeStamp",
        "issues": [ {..., "subResults": [...]} ],
        "criticalIssueCount", "suppressedCriticalIssueCount", ... }
    Per-category totals are optional and derived from the issues when absent.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Validation results not found: {path}")
    return parse_results(_read_json(path))
