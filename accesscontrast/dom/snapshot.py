"""In-memory page snapshots.

A snapshot is plain data: the element tree with each element's computed
style, bounding box and own text, plus the viewport.  It is what the
Playwright capture script produces, and what tests build by hand.  Field
names are snake_case with camelCase aliases so browser JSON loads as-is.

The models are deliberately left mutable so a caller can tweak a style and
run the same check again.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterator

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from accesscontrast.dom.base import ComputedStyle, iter_elements
from accesscontrast.models import Box

logger = logging.getLogger(__name__)


class _SnapshotModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StyleSnapshot(_SnapshotModel):
    """Computed-style strings for one element."""

    color: str = "rgb(0, 0, 0)"
    background_color: str = "rgba(0, 0, 0, 0)"
    background_image: str = "none"
    font_size: str = "16px"
    font_weight: str = "400"
    display: str = "block"
    visibility: str = "visible"


class BoxSnapshot(_SnapshotModel):
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def to_box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)


class ElementSnapshot(_SnapshotModel):
    """One element and its subtree."""

    tag: str = "div"
    id: str = ""
    text: str = ""  # direct text-node content only
    style: StyleSnapshot = Field(default_factory=StyleSnapshot)
    box: BoxSnapshot | None = None
    children: list[ElementSnapshot] = Field(default_factory=list)


class PageSnapshot(_SnapshotModel):
    """A whole captured page.

    Load page data with :meth:`SnapshotDocument.from_dict` rather than
    ``model_validate``: the latter validates the tree recursively and
    rejects deeply nested pages.
    """

    url: str = ""
    viewport: BoxSnapshot = Field(
        default_factory=lambda: BoxSnapshot(width=1280, height=720)
    )
    root: ElementSnapshot = Field(
        default_factory=lambda: ElementSnapshot(tag="html")
    )


class SnapshotDocument:
    """:class:`~accesscontrast.dom.base.Document` backed by a PageSnapshot.

    Usage::

        doc = SnapshotDocument.from_dict(data)
        check_all_text_contrast(doc)
    """

    def __init__(self, page: PageSnapshot) -> None:
        self.page = page
        self._parents: dict[int, ElementSnapshot] = {}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SnapshotDocument:
        """Build a document from browser or file data.

        Accepts either a nested ``root`` tree or a flat, document-ordered
        ``elements`` list where each entry names its ``parent`` index.  Each
        element is validated on its own and linked iteratively, so nesting
        depth is unbounded.
        """
        viewport = (
            BoxSnapshot.model_validate(data["viewport"])
            if data.get("viewport") is not None
            else BoxSnapshot(width=1280, height=720)
        )
        if "elements" in data:
            root = _link_flat(data["elements"])
        else:
            root = _link_nested(data.get("root") or {"tag": "html"})
        page = PageSnapshot.model_construct(
            url=str(data.get("url") or ""), viewport=viewport, root=root
        )
        return cls(page)

    @property
    def root(self) -> ElementSnapshot:
        return self.page.root

    def parent(self, element: ElementSnapshot) -> ElementSnapshot | None:
        if element is self.page.root:
            return None
        parent = self._parents.get(id(element))
        if parent is None or not any(c is element for c in parent.children):
            # tree changed since the index was built
            self._reindex()
            parent = self._parents.get(id(element))
        return parent

    def children(self, element: ElementSnapshot) -> list[ElementSnapshot]:
        return list(element.children)

    def style(self, element: ElementSnapshot) -> ComputedStyle:
        s = element.style
        return ComputedStyle(
            color=s.color,
            background_color=s.background_color,
            background_image=s.background_image,
            font_size=s.font_size,
            font_weight=s.font_weight,
            display=s.display,
            visibility=s.visibility,
        )

    def box(self, element: ElementSnapshot) -> Box:
        if element.box is None:
            return Box(0, 0, 0, 0)
        return element.box.to_box()

    def viewport(self) -> Box:
        return self.page.viewport.to_box()

    def own_text(self, element: ElementSnapshot) -> str:
        return element.text

    def describe(self, element: ElementSnapshot) -> str:
        if element.id:
            return f"{element.tag}#{element.id}"
        snippet = " ".join(element.text.split())
        if len(snippet) > 30:
            snippet = snippet[:29] + "…"
        return f'{element.tag} "{snippet}"' if snippet else element.tag

    def find(self, element_id: str) -> ElementSnapshot:
        """Return the element with the given id; raises ``KeyError`` if absent."""
        for element in self.elements():
            if element.id == element_id:
                return element
        raise KeyError(element_id)

    def elements(self) -> Iterator[ElementSnapshot]:
        yield from iter_elements(self)

    def _reindex(self) -> None:
        self._parents.clear()
        stack = [self.page.root]
        while stack:
            node = stack.pop()
            for child in node.children:
                self._parents[id(child)] = node
                stack.append(child)
        logger.debug("Indexed %d snapshot elements", len(self._parents) + 1)


_LINK_KEYS = ("children", "parent")


def _element(raw: dict[str, Any]) -> ElementSnapshot:
    """Validate one element, ignoring its links to other elements."""
    return ElementSnapshot.model_validate(
        {k: v for k, v in raw.items() if k not in _LINK_KEYS}
    )


def _link_nested(raw_root: dict[str, Any]) -> ElementSnapshot:
    root = _element(raw_root)
    stack = [(raw_root, root)]
    while stack:
        raw, node = stack.pop()
        for raw_child in raw.get("children") or []:
            child = _element(raw_child)
            node.children.append(child)
            stack.append((raw_child, child))
    return root


def _link_flat(elements: list[dict[str, Any]]) -> ElementSnapshot:
    nodes = [_element(raw) for raw in elements]
    root: ElementSnapshot | None = None
    for raw, node in zip(elements, nodes):
        parent = raw.get("parent")
        if parent is None:
            if root is not None:
                raise ValueError("Snapshot has more than one root element")
            root = node
        elif not 0 <= parent < len(nodes):
            raise ValueError(f"Snapshot parent index out of range: {parent!r}")
        else:
            nodes[parent].children.append(node)
    if root is None:
        raise ValueError("Snapshot has no root element")
    return root


def load_snapshot(path: Path) -> SnapshotDocument:
    """Load a snapshot from a JSON or YAML file."""
    raw: dict[str, Any] = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return SnapshotDocument.from_dict(raw)
