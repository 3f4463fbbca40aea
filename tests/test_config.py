"""Tests for reading report settings from the environment."""

from __future__ import annotations

import pytest

from validatorreport.config import INCLUDE_SUPPRESSED_ENV, ReportConfig


@pytest.mark.parametrize("raw, expected", [
    ("1", True), ("true", True), ("YES", True), (" on ", True),
    ("0", False), ("false", False), ("no", False), ("", False),
])
def test_include_suppressed_values(monkeypatch, raw, expected):
    monkeypatch.setenv(INCLUDE_SUPPRESSED_ENV, raw)
    assert ReportConfig.from_env(load_env_file=False).include_suppressed is expected


def test_default_is_exclude(monkeypatch):
    monkeypatch.delenv(INCLUDE_SUPPRESSED_ENV, raising=False)
    assert ReportConfig.from_env(load_env_file=False) == ReportConfig(include_suppressed=False)


def test_invalid_value_fails(monkeypatch):
    monkeypatch.setenv(INCLUDE_SUPPRESSED_ENV, "maybe")
    with pytest.raises(RuntimeError):
        ReportConfig.from_env(load_env_file=False)


def test_reads_dotenv_file(monkeypatch, tmp_path):
    monkeypatch.delenv(INCLUDE_SUPPRESSED_ENV, raising=False)
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text(f"{INCLUDE_SUPPRESSED_ENV}=true\n", encoding="utf-8")
    try:
        assert ReportConfig.from_env().include_suppressed is True
    finally:
        monkeypatch.delenv(INCLUDE_SUPPRESSED_ENV, raising=False)
