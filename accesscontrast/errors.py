"""Exceptions raised by contrast checks."""

from __future__ import annotations


class ContrastError(Exception):
    """Base class for all accesscontrast errors."""


class ParseError(ContrastError, ValueError):
    """A colour or font value could not be parsed."""

    def __init__(self, value: str, kind: str = "color") -> None:
        self.value = value
        self.kind = kind
        super().__init__(f"Unrecognized {kind} value: {value!r}")


class ContrastViolation(ContrastError, AssertionError):
    """A single text element is below its required contrast ratio."""

    def __init__(self, actual_ratio: float, required_ratio: float, element: str = "") -> None:
        self.actual_ratio = actual_ratio
        self.required_ratio = required_ratio
        self.element = element
        target = f" for {element}" if element else ""
        super().__init__(
            f"Contrast ratio {actual_ratio:.2f}:1{target} is lower than expected "
            f"{required_ratio:g}:1"
        )


class A11yError(ContrastError, AssertionError):
    """Aggregate failure for a page-wide check.

    ``violations`` holds every :class:`ContrastViolation` found, in document
    order.
    """

    def __init__(self, violations: list[ContrastViolation]) -> None:
        from accesscontrast.reporter import format_violations

        self.violations = list(violations)
        super().__init__(format_violations(self.violations))
