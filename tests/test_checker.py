"""Tests for the single-element contrast check."""

from __future__ import annotations

import pytest

from accesscontrast import check_text_contrast
from accesscontrast.checker import ContrastChecker
from accesscontrast.config import ContrastConfig
from accesscontrast.dom.snapshot import SnapshotDocument
from accesscontrast.errors import ContrastViolation, ParseError
from tests.utils.logs import warning_count


class TestColorNotations:
    def test_hsl_and_hsla(self, doc: SnapshotDocument) -> None:
        text = doc.find("normal-text")
        text.style.color = "hsla(0,0%,0%,1)"
        text.style.background_color = "hsl(255,0%,100%)"
        assert check_text_contrast(doc, text) is True

    def test_rgb_and_rgba(self, doc: SnapshotDocument) -> None:
        text = doc.find("normal-text")
        text.style.color = "rgba(0,0,0,1)"
        text.style.background_color = "rgb(255,255,255)"
        assert check_text_contrast(doc, text) is True

    def test_three_and_six_digit_hex(self, doc: SnapshotDocument) -> None:
        text = doc.find("normal-text")
        text.style.color = "#555"
        text.style.background_color = "#ffffff"
        assert check_text_contrast(doc, text) is True

    def test_black_on_white_passes_everything(self, doc: SnapshotDocument) -> None:
        for element_id in ("normal-text", "large-scale-text", "container-text"):
            text = doc.find(element_id)
            assert check_text_contrast(doc, text, level="AA")
            assert check_text_contrast(doc, text, level="AAA")

    def test_unparseable_color_raises(self, doc: SnapshotDocument) -> None:
        text = doc.find("normal-text")
        text.style.color = "not-a-color"
        with pytest.raises(ParseError):
            check_text_contrast(doc, text)


class TestConformanceLevels:
    def test_aa_passes_aaa_fails(self, doc: SnapshotDocument) -> None:
        text = doc.find("normal-text")
        text.style.color = "#666"
        text.style.background_color = "#fff"
        assert check_text_contrast(doc, text, text, "AA")
        with pytest.raises(ContrastViolation, match="lower than expected"):
            check_text_contrast(doc, text, text, "AAA")

    def test_config_level_is_default(self, doc: SnapshotDocument) -> None:
        text = doc.find("normal-text")
        text.style.color = "#666"
        checker = ContrastChecker(doc, ContrastConfig(level="AAA"))
        with pytest.raises(ContrastViolation):
            checker.check_text_contrast(text)
        assert checker.check_text_contrast(text, level="AA")

    def test_violation_details(self, doc: SnapshotDocument) -> None:
        text = doc.find("normal-text")
        text.style.color = "#888"
        with pytest.raises(ContrastViolation) as info:
            check_text_contrast(doc, text)
        assert info.value.required_ratio == 4.5
        assert info.value.actual_ratio == pytest.approx(3.54, abs=0.01)
        assert info.value.element == "p#normal-text"


class TestTextSize:
    def test_large_scale_uses_relaxed_ratio(self, doc: SnapshotDocument) -> None:
        normal = doc.find("normal-text")
        normal.style.color = "#888"
        normal.style.background_color = "#fff"
        large = doc.find("large-scale-text")
        large.style.color = "#888"
        large.style.background_color = "#fff"

        with pytest.raises(ContrastViolation, match="lower than expected"):
            check_text_contrast(doc, normal)
        assert check_text_contrast(doc, large)

    def test_font_weight(self, doc: SnapshotDocument) -> None:
        text = doc.find("normal-text")  # 20px
        text.style.color = "#888"
        text.style.background_color = "#fff"
        with pytest.raises(ContrastViolation, match="lower than expected"):
            check_text_contrast(doc, text)

        text.style.font_weight = "bold"
        assert check_text_contrast(doc, text)

        text.style.font_weight = "600"
        assert check_text_contrast(doc, text)

        text.style.font_weight = "500"
        with pytest.raises(ContrastViolation):
            check_text_contrast(doc, text)

        text.style.font_weight = "bold"
        text.style.font_size = "12px"
        with pytest.raises(ContrastViolation, match="lower than expected"):
            check_text_contrast(doc, text)


class TestExplicitBackground:
    def test_uses_given_element(self, doc: SnapshotDocument) -> None:
        text = doc.find("container-text")
        container = doc.find("container")
        text.style.color = "#000"

        container.style.background_color = "#000"
        with pytest.raises(ContrastViolation, match="lower than expected"):
            check_text_contrast(doc, text, container)

        container.style.background_color = "#fff"
        assert check_text_contrast(doc, text, container)

        text.style.color = "#fff"
        container.style.background_color = "#000"
        assert check_text_contrast(doc, text, container)

    def test_overrides_nearer_background(self, doc: SnapshotDocument) -> None:
        text = doc.find("container-text")
        container = doc.find("container")
        text.style.color = "#000"
        text.style.background_color = "#000"
        container.style.background_color = "#fff"

        with pytest.raises(ContrastViolation):
            check_text_contrast(doc, text)
        assert check_text_contrast(doc, text, container)


class TestAlphaWarnings:
    def test_translucent_text_warns_once(
        self, doc: SnapshotDocument, warnings: pytest.LogCaptureFixture
    ) -> None:
        text = doc.find("normal-text")
        text.style.color = "hsla(0,0%,0%,0.7)"
        text.style.background_color = "hsl(255,0%,100%)"
        assert check_text_contrast(doc, text)
        assert warning_count(warnings) == 1

    def test_warns_even_when_failing(
        self, doc: SnapshotDocument, warnings: pytest.LogCaptureFixture
    ) -> None:
        text = doc.find("normal-text")
        text.style.color = "rgba(0, 0, 0, 0.2)"
        with pytest.raises(ContrastViolation):
            check_text_contrast(doc, text)
        assert warning_count(warnings) == 1

    def test_translucent_background_warns_once(
        self, doc: SnapshotDocument, warnings: pytest.LogCaptureFixture
    ) -> None:
        text = doc.find("container-text")
        doc.find("container").style.background_color = "rgba(0, 0, 0, 0.1)"
        assert check_text_contrast(doc, text)
        assert warning_count(warnings) == 1

    def test_translucent_text_is_composited(self, doc: SnapshotDocument) -> None:
        text = doc.find("normal-text")
        # Black at 20% over white is about #ccc: far too light
        text.style.color = "rgba(0, 0, 0, 0.2)"
        with pytest.raises(ContrastViolation) as info:
            check_text_contrast(doc, text)
        assert info.value.actual_ratio < 2

    def test_opaque_colors_do_not_warn(
        self, doc: SnapshotDocument, warnings: pytest.LogCaptureFixture
    ) -> None:
        assert check_text_contrast(doc, doc.find("normal-text"))
        assert warning_count(warnings) == 0
