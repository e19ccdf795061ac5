"""Shared data models used across the contrast checks."""

from __future__ import annotations

import enum
from dataclasses import dataclass


def _clamp_channel(v: float) -> int:
    return max(0, min(255, round(v)))


def _clamp_alpha(v: float) -> float:
    return max(0.0, min(1.0, float(v)))


class ConformanceLevel(str, enum.Enum):
    """WCAG conformance level a check is run against."""

    AA = "AA"
    AAA = "AAA"

    @classmethod
    def coerce(cls, value: ConformanceLevel | str | None) -> ConformanceLevel:
        """Accept an enum member or a case-insensitive level name.

        ``None`` maps to the default level, AA.
        """
        if value is None:
            return cls.AA
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(
                f"Unknown conformance level: {value!r}. Available: AA, AAA"
            ) from None


@dataclass(frozen=True)
class Color:
    """An sRGB colour with 0-255 channels and a 0-1 alpha."""

    red: int
    green: int
    blue: int
    alpha: float = 1.0

    def __post_init__(self) -> None:
        # frozen, so bypass __setattr__ to store the clamped values
        object.__setattr__(self, "red", _clamp_channel(self.red))
        object.__setattr__(self, "green", _clamp_channel(self.green))
        object.__setattr__(self, "blue", _clamp_channel(self.blue))
        object.__setattr__(self, "alpha", _clamp_alpha(self.alpha))

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    @property
    def is_opaque(self) -> bool:
        return self.alpha >= 1.0

    @property
    def is_transparent(self) -> bool:
        return self.alpha <= 0.0

    def to_hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(*self.rgb)

    def __str__(self) -> str:
        if self.is_opaque:
            return self.to_hex()
        return f"rgba({self.red}, {self.green}, {self.blue}, {self.alpha:g})"


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
TRANSPARENT = Color(0, 0, 0, 0.0)


@dataclass
class TextStyleProfile:
    """Font metrics that decide which contrast threshold applies."""

    font_size_px: float
    font_weight: int = 400

    @property
    def is_large_scale(self) -> bool:
        from accesscontrast.policy import is_large_scale

        return is_large_scale(self.font_size_px, self.font_weight)


@dataclass
class EffectiveBackground:
    """The opaque colour visible behind an element.

    ``indeterminate`` is set when a background image was found on the way up;
    ``color`` then only holds a best-effort value.
    """

    color: Color
    indeterminate: bool = False
    translucent: bool = False  # a partially transparent layer was composited


@dataclass
class Box:
    """An axis-aligned rectangle in CSS pixels (viewport coordinates)."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, other: Box) -> bool:
        """True if *other* lies entirely inside this box."""
        return (
            other.x >= self.x
            and other.y >= self.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )
