"""
Shared layout constants

Body and cover layouts read every font size, offset and placeholder from a
single LayoutConfig. Distances are millimetres, font sizes are points.
"""

from dataclasses import dataclass, field

from pocketbook_press.config.sizes import PageGeometry, geometry_for


@dataclass(frozen=True)
class LayoutConfig:
    geometry: PageGeometry = field(default_factory=lambda: geometry_for("pocket"))

    # Title page
    title_font_size: float = 18.0
    subtitle_font_size: float = 12.0
    subtitle_gap: float = 15.0

    # Chapter headings
    heading_font_size: float = 16.0
    heading_offset: float = 20.0
    heading_line_height: float = 7.0
    heading_gap: float = 10.0

    # Body text
    body_font_size: float = 11.0
    line_height: float = 5.0
    paragraph_gap: float = 2.0
    paragraph_indent: str = "      "

    # Folio
    page_number_font_size: float = 9.0
    page_number_offset: float = 10.0  # from the bottom edge

    # Cover
    cover_frame_inset: float = 10.0
    cover_frame_line_width: float = 1.0
    cover_text_inset: float = 20.0
    cover_title_font_size: float = 24.0
    cover_title_y: float = 60.0
    cover_subtitle_font_size: float = 14.0
    cover_subtitle_y: float = 90.0
    cover_author_font_size: float = 12.0
    cover_author_y: float = 150.0
    cover_blurb_font_size: float = 10.0
    cover_blurb_y: float = 50.0
    blurb_max_chars: int = 300
    barcode_y: float = 140.0
    barcode_width: float = 30.0
    barcode_height: float = 15.0
    isbn_font_size: float = 8.0
    isbn_y: float = 158.0

    placeholder_author: str = "Auteur Inconnu"
    placeholder_blurb: str = "Résumé du livre..."
    placeholder_isbn: str = "ISBN 000-0-00-000000-0"

    @property
    def title_page_y(self) -> float:
        return self.geometry.height / 3

    @property
    def cover_text_width(self) -> float:
        return self.geometry.width - 2 * self.cover_text_inset


POCKET_LAYOUT = LayoutConfig()
