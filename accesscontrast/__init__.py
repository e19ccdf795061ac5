"""AccessContrast: WCAG text contrast checks for rendered pages."""

from accesscontrast.checker import (
    ContrastChecker,
    check_all_text_contrast,
    check_text_contrast,
)
from accesscontrast.errors import A11yError, ContrastViolation, ParseError
from accesscontrast.models import Color, ConformanceLevel

__version__ = "0.1.0"

__all__ = [
    "A11yError",
    "Color",
    "ConformanceLevel",
    "ContrastChecker",
    "ContrastViolation",
    "ParseError",
    "check_all_text_contrast",
    "check_text_contrast",
]
