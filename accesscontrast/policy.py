"""Conformance policy: which ratio a piece of text must meet.

WCAG treats text as "large scale" at 18pt regular or 14pt bold. At the CSS
reference density of 96dpi (1pt = 4/3 px) those become 24px and 18.66px.
"""

from __future__ import annotations

import re

from accesscontrast.errors import ContrastViolation, ParseError
from accesscontrast.models import ConformanceLevel

LARGE_BOLD_MIN_PX = 18.66
LARGE_REGULAR_MIN_PX = 24.0
BOLD_MIN_WEIGHT = 600

REQUIRED_RATIOS: dict[tuple[ConformanceLevel, bool], float] = {
    (ConformanceLevel.AA, False): 4.5,
    (ConformanceLevel.AA, True): 3.0,
    (ConformanceLevel.AAA, False): 7.0,
    (ConformanceLevel.AAA, True): 4.5,
}

_WEIGHT_KEYWORDS = {
    "normal": 400,
    "bold": 700,
    "bolder": 700,
    "lighter": 100,
}

_SIZE_RE = re.compile(r"^(\d+\.?\d*|\.\d+)\s*(px|pt)?$", re.IGNORECASE)


def parse_font_size(value: str | float) -> float:
    """Return a computed font size in CSS pixels.

    Accepts ``px`` and ``pt`` units or a bare number (taken as px).
    """
    if isinstance(value, (int, float)):
        return float(value)
    m = _SIZE_RE.match(value.strip())
    if not m:
        raise ParseError(value, kind="font-size")
    size = float(m.group(1))
    if (m.group(2) or "px").lower() == "pt":
        size *= 4 / 3
    return size


def normalize_font_weight(value: str | int) -> int:
    """Map a CSS font-weight (keyword or number) to its numeric weight."""
    if isinstance(value, int):
        return value
    text = str(value).strip().lower()
    if text in _WEIGHT_KEYWORDS:
        return _WEIGHT_KEYWORDS[text]
    try:
        return int(float(text))
    except ValueError:
        raise ParseError(str(value), kind="font-weight") from None


def is_large_scale(font_size_px: float, font_weight: int | str) -> bool:
    """Whether text of this size and weight qualifies for the relaxed ratio."""
    weight = normalize_font_weight(font_weight)
    if font_size_px >= LARGE_REGULAR_MIN_PX:
        return True
    return weight >= BOLD_MIN_WEIGHT and font_size_px >= LARGE_BOLD_MIN_PX


def required_ratio(level: ConformanceLevel | str | None, large_scale: bool) -> float:
    return REQUIRED_RATIOS[(ConformanceLevel.coerce(level), bool(large_scale))]


def evaluate(actual_ratio: float, required: float, element: str = "") -> None:
    """Raise :class:`ContrastViolation` if *actual_ratio* is below *required*.

    A ratio exactly at the threshold passes.
    """
    if actual_ratio >= required:
        return
    raise ContrastViolation(actual_ratio, required, element)
