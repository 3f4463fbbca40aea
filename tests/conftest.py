"""Shared fixtures for validator-report tests."""

from __future__ import annotations

import pytest

from validatorreport.core.findings import Finding, Location, SeverityCounts, ValidatorResults


def make_finding(
    description: str = "Issue",
    severity: str = "Critical",
    suppressed: bool = False,
    children=(),
    **kwargs,
) -> Finding:
    return Finding(
        description=description,
        severity=severity,
        suppressed=suppressed,
        children=tuple(children),
        **kwargs,
    )


@pytest.fixture
def finding():
    return make_finding


@pytest.fixture
def sample_results() -> ValidatorResults:
    """One finding per category, with a nested Major finding."""
    issues = (
        make_finding("Missing version", "Critical", code="1.2.3", location=Location(10, 4), certainty="Certain"),
        make_finding(
            "Invalid parameters",
            "Major",
            fix_impact="NonBreaking",
            children=[
                make_finding("Param 1 invalid", "Major", code="2.1.1"),
                make_finding("Param 2 invalid", "Major", code="2.1.1", suppressed=True),
            ],
        ),
        make_finding("Unused column", "Minor", suppressed=True),
        make_finding("Consider renaming", "Warning", source="Element <b>1</b>"),
    )
    return ValidatorResults(
        protocol="Skyline Example",
        version="1.0.0.1",
        validator_version="2.3.4",
        timestamp="2026-10-17 12:00:00",
        issues=issues,
        counts={
            "Critical": SeverityCounts(1, 0),
            "Major": SeverityCounts(2, 1),
            "Minor": SeverityCounts(0, 1),
            "Warning": SeverityCounts(1, 0),
        },
    )
