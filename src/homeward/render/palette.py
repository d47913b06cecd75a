# src/homeward/render/palette.py
# Colour themes (incl. colour-blind safe palettes) and viewport → tile size.

from dataclasses import dataclass
from typing import Dict, Tuple

from ..config import AccessibilitySettings

RGB = Tuple[int, int, int]


def hex_to_rgb(value: str) -> RGB:
    v = value.lstrip("#")
    if len(v) == 3:
        v = "".join(ch * 2 for ch in v)
    if len(v) != 6:
        raise ValueError(f"bad colour: {value!r}")
    return (int(v[0:2], 16), int(v[2:4], 16), int(v[4:6], 16))


@dataclass(frozen=True)
class Theme:
    wall: RGB
    path: RGB
    player: RGB
    goal: RGB


PALETTES: Dict[str, Theme] = {
    "normal":      Theme(hex_to_rgb("#444"), hex_to_rgb("#F3F4F6"), hex_to_rgb("#007bff"), hex_to_rgb("#28a745")),
    "protanopia":  Theme(hex_to_rgb("#444"), hex_to_rgb("#F3F4F6"), hex_to_rgb("#0072B2"), hex_to_rgb("#E69F00")),
    "deuteranopia": Theme(hex_to_rgb("#444"), hex_to_rgb("#F3F4F6"), hex_to_rgb("#0072B2"), hex_to_rgb("#F0E442")),
    "tritanopia":  Theme(hex_to_rgb("#444"), hex_to_rgb("#F3F4F6"), hex_to_rgb("#D55E00"), hex_to_rgb("#009E73")),
}

HIGH_CONTRAST = Theme(hex_to_rgb("#BBBBBB"), hex_to_rgb("#000000"), hex_to_rgb("#FFFFFF"), hex_to_rgb("#FF00FF"))

# Glyphs drawn instead of flat colour when icons are enabled.
ICONS = {"wall": "🧱", "player": "⭐", "goal": "🏠"}


def theme_for(settings: AccessibilitySettings) -> Theme:
    # High contrast wins over any colour-blind mode; unknown modes fall back to normal.
    if settings.high_contrast:
        return HIGH_CONTRAST
    return PALETTES.get(settings.color_blind_mode, PALETTES["normal"])


def tile_size_for(viewport: Tuple[int, int], grid_size: Tuple[int, int], min_tile: int = 8, max_tile: int = 48) -> int:
    vw, vh = viewport
    gw, gh = grid_size
    fit = min(vw // gw, vh // gh)
    return max(min_tile, min(fit, max_tile))
