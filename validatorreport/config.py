"""Report configuration: whether suppressed findings show up in counts and rows."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

INCLUDE_SUPPRESSED_ENV = "VALIDATOR_REPORT_INCLUDE_SUPPRESSED"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"", "0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise RuntimeError(f"{name} must be one of 1/0, true/false, yes/no, on/off (got {raw!r})")


@dataclass(frozen=True)
class ReportConfig:
    include_suppressed: bool = False

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "ReportConfig":
        """Read settings from the environment, after loading a .env if one exists."""
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True), override=False)
        raw = os.environ.get(INCLUDE_SUPPRESSED_ENV, "")
        return cls(include_suppressed=_parse_bool(INCLUDE_SUPPRESSED_ENV, raw))
