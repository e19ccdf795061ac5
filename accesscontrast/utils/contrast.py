"""WCAG 2.1 contrast ratio utilities.

Implements the relative luminance and contrast ratio calculations defined in
WCAG 2.1 Success Criterion 1.4.3 (Contrast - Minimum), plus the alpha
compositing needed to flatten translucent colours before measuring them.
"""

from __future__ import annotations

from accesscontrast.models import Color


def _srgb_to_linear(v: float) -> float:
    """Convert an sRGB channel (0-1) to linear light."""
    if v <= 0.03928:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(color: Color) -> float:
    """Compute relative luminance for an opaque colour.

    Per WCAG 2.1: L = 0.2126*R + 0.7152*G + 0.0722*B
    where R, G, B are linearized sRGB values. Alpha is ignored; translucent
    colours must be composited first.
    """
    rl = _srgb_to_linear(color.red / 255.0)
    gl = _srgb_to_linear(color.green / 255.0)
    bl = _srgb_to_linear(color.blue / 255.0)
    return 0.2126 * rl + 0.7152 * gl + 0.0722 * bl


def contrast_ratio(color1: Color, color2: Color) -> float:
    """Compute the WCAG contrast ratio between two colours.

    Returns a value between 1.0 (identical) and 21.0 (black on white).
    """
    l1 = relative_luminance(color1)
    l2 = relative_luminance(color2)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def composite(fg: Color, bg: Color) -> Color:
    """Paint *fg* over *bg* using source-over alpha compositing.

    The result is opaque whenever *bg* is.
    """
    a = fg.alpha
    if a >= 1.0:
        return fg
    out_alpha = 1.0 if bg.is_opaque else a + bg.alpha * (1 - a)
    return Color(
        fg.red * a + bg.red * (1 - a),
        fg.green * a + bg.green * (1 - a),
        fg.blue * a + bg.blue * (1 - a),
        out_alpha,
    )
