"""CSS colour string parsing.

Supports the notations browsers report in computed styles and the ones
authors commonly write inline: ``#rgb``, ``#rrggbb``, ``rgb()``, ``rgba()``,
``hsl()``, ``hsla()`` and the ``transparent`` keyword.
"""

from __future__ import annotations

import re

from accesscontrast.errors import ParseError
from accesscontrast.models import TRANSPARENT, Color

_NUM = r"([-+]?(?:\d+\.?\d*|\.\d+))"

_HEX_RE = re.compile(r"^#([0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)
_RGB_RE = re.compile(
    rf"^rgba?\(\s*{_NUM}\s*,\s*{_NUM}\s*,\s*{_NUM}\s*(?:,\s*{_NUM}\s*)?\)$",
    re.IGNORECASE,
)
_HSL_RE = re.compile(
    rf"^hsla?\(\s*{_NUM}(?:deg)?\s*,\s*{_NUM}%\s*,\s*{_NUM}%\s*(?:,\s*{_NUM}\s*)?\)$",
    re.IGNORECASE,
)


def parse_color(value: str) -> Color:
    """Parse a CSS colour string into a :class:`Color`.

    Raises :class:`ParseError` if *value* matches none of the supported
    notations.
    """
    if not isinstance(value, str):
        raise ParseError(repr(value))
    text = value.strip()

    if text.lower() == "transparent":
        return TRANSPARENT

    m = _HEX_RE.match(text)
    if m:
        return _parse_hex(m.group(1))

    m = _RGB_RE.match(text)
    if m:
        r, g, b, a = m.groups()
        return Color(float(r), float(g), float(b), float(a) if a is not None else 1.0)

    m = _HSL_RE.match(text)
    if m:
        h, s, l, a = m.groups()
        r, g, b = hsl_to_rgb(float(h), float(s), float(l))
        return Color(r, g, b, float(a) if a is not None else 1.0)

    raise ParseError(value)


def _parse_hex(digits: str) -> Color:
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """Convert HSL (degrees, percent, percent) to 0-255 RGB floats."""
    s = max(0.0, min(1.0, s / 100.0))
    l = max(0.0, min(1.0, l / 100.0))
    c = (1 - abs(2 * l - 1)) * s
    hp = (h % 360) / 60.0
    x = c * (1 - abs(hp % 2 - 1))

    if hp < 1:
        r1, g1, b1 = c, x, 0.0
    elif hp < 2:
        r1, g1, b1 = x, c, 0.0
    elif hp < 3:
        r1, g1, b1 = 0.0, c, x
    elif hp < 4:
        r1, g1, b1 = 0.0, x, c
    elif hp < 5:
        r1, g1, b1 = x, 0.0, c
    else:
        r1, g1, b1 = c, 0.0, x

    m = l - c / 2
    return ((r1 + m) * 255, (g1 + m) * 255, (b1 + m) * 255)
