"""Helpers for asserting on captured log records."""

from __future__ import annotations

import logging

import pytest


def warning_count(caplog: pytest.LogCaptureFixture) -> int:
    """Number of WARNING records captured so far."""
    return sum(1 for r in caplog.records if r.levelno == logging.WARNING)
