"""Shared test fixtures."""

from __future__ import annotations

import logging

import pytest

from accesscontrast.dom.snapshot import SnapshotDocument
from tests.fixtures.pages import color_contrast_page


@pytest.fixture
def doc() -> SnapshotDocument:
    """A fresh copy of the reference color-contrast page."""
    return color_contrast_page()


@pytest.fixture
def warnings(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """caplog capturing accesscontrast warnings."""
    caplog.set_level(logging.WARNING, logger="accesscontrast")
    return caplog
