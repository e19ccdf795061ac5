"""Protocol for the rendering environment that contrast checks read from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Protocol, runtime_checkable

from accesscontrast.models import Box


@dataclass
class ComputedStyle:
    """Raw computed-style strings for one element, as a browser reports them."""

    color: str = "rgb(0, 0, 0)"
    background_color: str = "rgba(0, 0, 0, 0)"
    background_image: str = "none"
    font_size: str = "16px"
    font_weight: str = "400"
    display: str = "block"
    visibility: str = "visible"

    @property
    def has_background_image(self) -> bool:
        return self.background_image.strip().lower() not in ("", "none")


@runtime_checkable
class Document(Protocol):
    """Interface over a rendered page.

    Element handles are opaque to the checks; they are only ever passed back
    into the document that produced them.  Implementations must read live
    state on every call so that repeated checks see the current page.
    """

    @property
    def root(self) -> Any:
        """The topmost element (``<html>``)."""
        ...

    def parent(self, element: Any) -> Any | None:
        """The element's parent, or None at the root."""
        ...

    def children(self, element: Any) -> Iterable[Any]:
        """Child elements in document order."""
        ...

    def style(self, element: Any) -> ComputedStyle:
        ...

    def box(self, element: Any) -> Box:
        """Bounding client rect in viewport coordinates."""
        ...

    def viewport(self) -> Box:
        ...

    def own_text(self, element: Any) -> str:
        """Text from the element's direct text-node children only."""
        ...

    def describe(self, element: Any) -> str:
        """Short human-readable identity (e.g. ``p#intro``)."""
        ...


def ancestors(document: Document, element: Any) -> Iterable[Any]:
    """Yield *element*'s ancestors, closest first."""
    node = document.parent(element)
    while node is not None:
        yield node
        node = document.parent(node)


def iter_elements(document: Document, root: Any | None = None) -> Iterable[Any]:
    """Yield *root* and all its descendants in document (pre-)order."""
    stack = [document.root if root is None else root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(list(document.children(node))))
