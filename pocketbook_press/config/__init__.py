"""Trim sizes and shared layout constants"""

from pocketbook_press.config.sizes import SIZES, PageGeometry, geometry_for
from pocketbook_press.config.layout import LayoutConfig, POCKET_LAYOUT

__all__ = [
    "SIZES",
    "PageGeometry",
    "geometry_for",
    "LayoutConfig",
    "POCKET_LAYOUT",
]
