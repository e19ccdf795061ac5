"""Human-readable formatting of contrast failures."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from accesscontrast.errors import ContrastViolation


def format_violation(violation: ContrastViolation) -> str:
    """One line per failing element: identity, actual and required ratio."""
    element = violation.element or "<unknown element>"
    return (
        f"{element}: contrast {violation.actual_ratio:.2f}:1, "
        f"required {violation.required_ratio:g}:1"
    )


def format_violations(violations: list[ContrastViolation]) -> str:
    """Return the body of an A11yError listing every violation."""
    lines = [f"A11yError: {len(violations)} element(s) have insufficient text contrast"]
    for v in violations:
        lines.append(f"  - {format_violation(v)}")
    return "\n".join(lines)


def summarize(violations: list[ContrastViolation]) -> dict[float, int]:
    """Count violations per required ratio (e.g. ``{4.5: 3, 3.0: 1}``)."""
    return dict(Counter(v.required_ratio for v in violations))
