"""Effective background resolution.

Works out the opaque colour actually painted behind an element by walking
the element's true ancestors (never visually overlapping siblings) and
compositing any translucent layers on the way.
"""

from __future__ import annotations

import logging
from typing import Any

from accesscontrast.dom.base import Document
from accesscontrast.models import WHITE, Color, EffectiveBackground
from accesscontrast.utils.colors import parse_color
from accesscontrast.utils.contrast import composite

logger = logging.getLogger(__name__)


def resolve_background(
    document: Document,
    element: Any,
    *,
    page_background: Color = WHITE,
) -> EffectiveBackground:
    """Return the effective background behind *element*.

    Starts at *element*'s own background and walks up to the root.  Layers
    are collected until one is fully opaque; if none is, the page background
    closes the stack.  A background image anywhere on the way makes the
    result indeterminate: a warning is logged and the layers gathered so far
    are flattened over white.
    """
    layers: list[Color] = []
    node = element
    while node is not None:
        style = document.style(node)
        if style.has_background_image:
            logger.warning(
                "Background image on %s; cannot determine contrast for %s",
                document.describe(node),
                document.describe(element),
            )
            return EffectiveBackground(
                color=_flatten(layers, WHITE),
                indeterminate=True,
                translucent=_has_translucent(layers),
            )

        color = parse_color(style.background_color)
        if not color.is_transparent:
            layers.append(color)
            if color.is_opaque:
                break
        node = document.parent(node)

    if layers and layers[-1].is_opaque:
        base, layers = layers[-1], layers[:-1]
    else:
        base = _opaque(page_background)

    return EffectiveBackground(
        color=_flatten(layers, base),
        translucent=_has_translucent(layers),
    )


def resolve_own_background(
    document: Document,
    element: Any,
    *,
    page_background: Color = WHITE,
) -> EffectiveBackground:
    """Background of *element* alone, without looking at its ancestors.

    Used when the caller names the background element explicitly.  A
    translucent colour is composited over the page background.
    """
    style = document.style(element)
    color = parse_color(style.background_color)
    base = _opaque(page_background)
    if style.has_background_image:
        logger.warning(
            "Background image on %s; contrast is approximate",
            document.describe(element),
        )
        return EffectiveBackground(
            color=composite(color, WHITE),
            indeterminate=True,
            translucent=0.0 < color.alpha < 1.0,
        )
    return EffectiveBackground(
        color=composite(color, base),
        translucent=0.0 < color.alpha < 1.0,
    )


def _flatten(layers: list[Color], base: Color) -> Color:
    """Composite *layers* (closest first) over an opaque *base*."""
    result = base
    for layer in reversed(layers):
        result = composite(layer, result)
    return result


def _has_translucent(layers: list[Color]) -> bool:
    return any(0.0 < c.alpha < 1.0 for c in layers)


def _opaque(color: Color) -> Color:
    if color.is_opaque:
        return color
    return composite(color, WHITE)
