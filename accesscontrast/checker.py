"""Text contrast checks for single elements and whole pages.

Usage::

    checker = ContrastChecker(document)
    checker.check_text_contrast(element)          # True or ContrastViolation
    checker.check_all_text_contrast()             # True or A11yError

Every call reads the document afresh; nothing is cached between checks.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

from accesscontrast.background import resolve_background, resolve_own_background
from accesscontrast.config import ContrastConfig
from accesscontrast.dom.base import Document, ancestors, iter_elements
from accesscontrast.errors import A11yError, ContrastViolation
from accesscontrast.models import ConformanceLevel, EffectiveBackground, TextStyleProfile
from accesscontrast.policy import evaluate, normalize_font_weight, parse_font_size, required_ratio
from accesscontrast.utils.colors import parse_color
from accesscontrast.utils.contrast import composite, contrast_ratio

logger = logging.getLogger(__name__)


class ContrastChecker:
    """Checks rendered text against WCAG contrast thresholds."""

    def __init__(self, document: Document, config: ContrastConfig | None = None) -> None:
        self.document = document
        self.config = config or ContrastConfig()

    def check_text_contrast(
        self,
        element: Any,
        background_element: Any | None = None,
        level: ConformanceLevel | str | None = None,
    ) -> bool:
        """Check one text element.

        Without *background_element* the background is resolved from the
        element and its ancestors.  With one, only that element's own
        background colour is used.

        Returns True on success; raises :class:`ContrastViolation` otherwise.
        """
        page_bg = self.config.page_background_color
        if background_element is None:
            background = resolve_background(self.document, element, page_background=page_bg)
        else:
            background = resolve_own_background(
                self.document, background_element, page_background=page_bg
            )
        self._check(element, background, self._level(level))
        return True

    def check_all_text_contrast(
        self,
        root: Any | None = None,
        level: ConformanceLevel | str | None = None,
    ) -> bool:
        """Check every visible text element under *root* (default: whole page).

        Elements whose background involves an image are skipped with a
        warning.  All failures are collected into one :class:`A11yError`.
        """
        resolved = self._level(level)
        page_bg = self.config.page_background_color
        violations: list[ContrastViolation] = []
        checked = 0

        for element in self.iter_text_elements(root):
            background = resolve_background(self.document, element, page_background=page_bg)
            if background.indeterminate:
                continue
            checked += 1
            try:
                self._check(element, background, resolved)
            except ContrastViolation as exc:
                violations.append(exc)

        logger.debug(
            "Checked %d text element(s), %d violation(s)", checked, len(violations)
        )
        if violations:
            raise A11yError(violations)
        return True

    def iter_text_elements(self, root: Any | None = None) -> Iterator[Any]:
        """Yield visible, in-viewport elements that directly contain text."""
        doc = self.document
        viewport = doc.viewport()
        for element in iter_elements(doc, root):
            if not doc.own_text(element).strip():
                continue
            if not self._is_rendered(element):
                logger.debug("Skipping hidden element %s", doc.describe(element))
                continue
            box = doc.box(element)
            if box.is_empty:
                logger.debug("Skipping zero-size element %s", doc.describe(element))
                continue
            if not self.config.include_offscreen and not viewport.contains(box):
                logger.debug("Skipping out-of-viewport element %s", doc.describe(element))
                continue
            yield element

    def _is_rendered(self, element: Any) -> bool:
        doc = self.document
        style = doc.style(element)
        if style.visibility.strip().lower() in ("hidden", "collapse"):
            return False
        for node in (element, *ancestors(doc, element)):
            if doc.style(node).display.strip().lower() == "none":
                return False
        return True

    def _level(self, level: ConformanceLevel | str | None) -> ConformanceLevel:
        if level is None:
            return self.config.conformance_level
        return ConformanceLevel.coerce(level)

    def _check(
        self, element: Any, background: EffectiveBackground, level: ConformanceLevel
    ) -> None:
        doc = self.document
        style = doc.style(element)
        foreground = parse_color(style.color)

        if not foreground.is_opaque or background.translucent:
            logger.warning(
                "%s uses a translucent color; contrast for it is approximate",
                doc.describe(element),
            )
        foreground = composite(foreground, background.color)

        profile = TextStyleProfile(
            font_size_px=parse_font_size(style.font_size),
            font_weight=normalize_font_weight(style.font_weight),
        )
        required = required_ratio(level, profile.is_large_scale)
        ratio = contrast_ratio(foreground, background.color)
        evaluate(ratio, required, doc.describe(element))


def check_text_contrast(
    document: Document,
    element: Any,
    background_element: Any | None = None,
    level: ConformanceLevel | str | None = None,
) -> bool:
    """Module-level shortcut for :meth:`ContrastChecker.check_text_contrast`."""
    return ContrastChecker(document).check_text_contrast(element, background_element, level)


def check_all_text_contrast(
    document: Document,
    root: Any | None = None,
    level: ConformanceLevel | str | None = None,
) -> bool:
    """Module-level shortcut for :meth:`ContrastChecker.check_all_text_contrast`."""
    return ContrastChecker(document).check_all_text_contrast(root, level)
