from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from markupsafe import escape

TEMPLATES_DIR = Path(__file__).parent / "templates"


@dataclass(frozen=True)
class ReportTemplate:
    """Static text wrapped around the results table."""

    start: str
    end: str

    def header(self, protocol_name: str, protocol_version: str) -> str:
        text = self.start.replace("$protocolName$", str(escape(protocol_name)))
        return text.replace("$protocolVersion$", str(escape(protocol_version)))

    @classmethod
    def from_directory(cls, directory: Path) -> "ReportTemplate":
        directory = Path(directory)
        return cls(
            start=(directory / "results_start.html").read_text(encoding="utf-8"),
            end=(directory / "results_end.html").read_text(encoding="utf-8"),
        )

    @classmethod
    def default(cls) -> "ReportTemplate":
        return cls.from_directory(TEMPLATES_DIR)
