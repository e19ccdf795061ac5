"""Pydantic configuration model with YAML loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, field_validator

from accesscontrast.errors import ParseError
from accesscontrast.models import Color, ConformanceLevel
from accesscontrast.utils.colors import parse_color

_DEFAULT_CONFIG_NAME = "accesscontrast.yaml"


class ContrastConfig(BaseModel):
    """Top-level configuration for contrast checks."""

    level: Literal["AA", "AAA"] = "AA"
    page_background: str = "#ffffff"
    include_offscreen: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @field_validator("page_background")
    @classmethod
    def _valid_color(cls, v: str) -> str:
        try:
            parse_color(v)
        except ParseError as exc:
            raise ValueError(str(exc)) from exc
        return v

    @property
    def conformance_level(self) -> ConformanceLevel:
        return ConformanceLevel(self.level)

    @property
    def page_background_color(self) -> Color:
        return parse_color(self.page_background)

    @classmethod
    def load(cls, path: Path | None = None) -> ContrastConfig:
        """Load config from a YAML file.

        Search order when *path* is None:
          1. ./accesscontrast.yaml
          2. ~/.config/accesscontrast/accesscontrast.yaml

        Returns default config if no file is found.
        """
        if path is not None:
            return cls._from_yaml(path)

        candidates = [
            Path.cwd() / _DEFAULT_CONFIG_NAME,
            Path.home() / ".config" / "accesscontrast" / _DEFAULT_CONFIG_NAME,
        ]
        for candidate in candidates:
            if candidate.is_file():
                return cls._from_yaml(candidate)

        return cls()

    @classmethod
    def _from_yaml(cls, path: Path) -> ContrastConfig:
        raw: dict[str, Any] = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return cls.model_validate(raw)
