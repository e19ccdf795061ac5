"""Tests for config loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from accesscontrast.config import ContrastConfig
from accesscontrast.models import BLACK, WHITE, ConformanceLevel


class TestContrastConfig:
    def test_defaults(self) -> None:
        cfg = ContrastConfig()
        assert cfg.level == "AA"
        assert cfg.conformance_level is ConformanceLevel.AA
        assert cfg.page_background_color == WHITE
        assert cfg.include_offscreen is False

    def test_load_from_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "accesscontrast.yaml"
        config_file.write_text(
            """\
level: AAA
page_background: '#000'
include_offscreen: true
""",
            encoding="utf-8",
        )
        cfg = ContrastConfig.load(config_file)
        assert cfg.conformance_level is ConformanceLevel.AAA
        assert cfg.page_background_color == BLACK
        assert cfg.include_offscreen is True

    def test_load_missing_file_returns_defaults(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        cfg = ContrastConfig.load(None)
        assert cfg.level == "AA"

    def test_discovers_cwd_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "accesscontrast.yaml").write_text("level: AAA\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        assert ContrastConfig.load().level == "AAA"

    def test_partial_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "accesscontrast.yaml"
        config_file.write_text("include_offscreen: true\n", encoding="utf-8")
        cfg = ContrastConfig.load(config_file)
        assert cfg.include_offscreen is True
        assert cfg.level == "AA"  # default preserved

    def test_empty_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "accesscontrast.yaml"
        config_file.write_text("", encoding="utf-8")
        assert ContrastConfig.load(config_file) == ContrastConfig()

    def test_lowercase_level(self) -> None:
        assert ContrastConfig(level="aaa").level == "AAA"

    def test_invalid_level(self) -> None:
        with pytest.raises(ValidationError):
            ContrastConfig(level="A")

    def test_invalid_page_background(self) -> None:
        with pytest.raises(ValidationError, match="Unrecognized color"):
            ContrastConfig(page_background="papayawhip")
