"""Overlay build parameters and configuration."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel

from .calibration import AlignmentStrategy


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class Palette(BaseModel):
    """Colors for one theme. Purely cosmetic."""
    wall_line: int
    corner_marker: int
    label_text: str
    label_stroke: str
    extension_line: int
    door_fill: int = 0x00FF00
    door_outline: int = 0x00AA00
    window_fill: int = 0x0080FF
    window_outline: int = 0x0066CC


PALETTES: dict[Theme, Palette] = {
    Theme.LIGHT: Palette(
        wall_line=0x9333EA,
        corner_marker=0x000000,
        label_text="#000000",
        label_stroke="#ffffff",
        extension_line=0x000000,
    ),
    Theme.DARK: Palette(
        wall_line=0xA78BFA,
        corner_marker=0xFFFFFF,
        label_text="#ffffff",
        label_stroke="#000000",
        extension_line=0xFFFFFF,
    ),
}


class OverlayParams(BaseModel):
    """User-adjustable parameters for overlay generation."""
    theme: Theme = Theme.LIGHT
    label_offset: float = 0.05          # Label distance from wall face (meters)
    extension_line_length: float = 0.2  # Meters
    min_wall_depth: float = 0.1         # Thickness floor for planar walls (meters)
    default_wall_height: float = 2.5    # Used when no floor summary is supplied
    show_corner_markers: bool = False
    corner_marker_size: float = 3.0
    annotate_input: bool = False        # Write surfaceArea back onto input records

    @property
    def palette(self) -> Palette:
        return PALETTES[self.theme]


class OverlayConfig(BaseModel):
    """Controls which builders run and how the scan is aligned."""
    strategy_override: AlignmentStrategy | None = None  # None = automatic
    enabled_builders: list[str] = []                    # Empty = use all registered defaults
    disabled_builders: list[str] = []                   # Explicitly disable specific builders
