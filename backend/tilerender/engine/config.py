"""Render configuration — canvas size, background and label font."""

from __future__ import annotations

from dataclasses import dataclass

from tilerender.config import Settings, settings


@dataclass
class RenderConfig:
    """Knobs for one pipeline instance."""

    width: int = 2000
    height: int = 2000
    background: str = "white"

    # Empty path = Pillow's bundled font at ``font_size``
    font_path: str = ""
    font_size: int = 12

    @classmethod
    def from_settings(cls, source: Settings | None = None) -> RenderConfig:
        s = source or settings
        return cls(
            width=s.tilerender_width,
            height=s.tilerender_height,
            font_path=s.tilerender_font_path,
            font_size=s.tilerender_font_size,
        )
