"""Capture page snapshots from a live Playwright page.

The whole DOM is serialised in a single ``page.evaluate`` round trip as a
flat, document-ordered element list with parent indexes, so a snapshot
reflects one consistent moment of the page and any nesting depth loads.
Take a new snapshot for every check; a snapshot never updates itself.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from accesscontrast.checker import ContrastChecker
from accesscontrast.config import ContrastConfig
from accesscontrast.dom.snapshot import SnapshotDocument
from accesscontrast.models import ConformanceLevel

if TYPE_CHECKING:
    from playwright.sync_api import Page

logger = logging.getLogger(__name__)

CAPTURE_SCRIPT = """
() => {
    // Read through prototypes: a <form> exposes its named controls as
    // properties, which can shadow id, localName, children and friends.
    const localName = Object.getOwnPropertyDescriptor(Element.prototype, "localName").get;
    const childrenOf = Object.getOwnPropertyDescriptor(Element.prototype, "children").get;
    const childNodesOf = Object.getOwnPropertyDescriptor(Node.prototype, "childNodes").get;
    const getAttribute = Element.prototype.getAttribute;
    const getRect = Element.prototype.getBoundingClientRect;

    function ownText(el) {
        let text = "";
        for (const node of childNodesOf.call(el)) {
            if (node.nodeType === Node.TEXT_NODE) text += node.data;
        }
        return text;
    }

    const elements = [];
    const stack = [[document.documentElement, null]];
    while (stack.length) {
        const [el, parent] = stack.pop();
        const style = window.getComputedStyle(el);
        const r = getRect.call(el);
        const index = elements.length;
        elements.push({
            parent: parent,
            tag: localName.call(el),
            id: getAttribute.call(el, "id") || "",
            text: ownText(el),
            style: {
                color: style.color,
                backgroundColor: style.backgroundColor,
                backgroundImage: style.backgroundImage,
                fontSize: style.fontSize,
                fontWeight: style.fontWeight,
                display: style.display,
                visibility: style.visibility,
            },
            box: { x: r.x, y: r.y, width: r.width, height: r.height },
        });
        const kids = childrenOf.call(el);
        for (let i = kids.length - 1; i >= 0; i--) stack.push([kids[i], index]);
    }

    return {
        url: window.location.href,
        viewport: { x: 0, y: 0, width: window.innerWidth, height: window.innerHeight },
        elements: elements,
    };
}
"""


def capture_snapshot(page: Page) -> SnapshotDocument:
    """Serialise the page's current DOM into a :class:`SnapshotDocument`."""
    data = page.evaluate(CAPTURE_SCRIPT)
    document = SnapshotDocument.from_dict(data)
    logger.debug("Captured snapshot of %s", document.page.url or "<page>")
    return document


def check_page(
    page: Page,
    level: ConformanceLevel | str | None = None,
    config: ContrastConfig | None = None,
) -> bool:
    """Snapshot *page* and run the page-wide contrast check on it.

    Returns True or raises :class:`~accesscontrast.errors.A11yError`.
    """
    checker = ContrastChecker(capture_snapshot(page), config)
    return checker.check_all_text_contrast(level=level)
