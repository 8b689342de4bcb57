import os
from pathlib import Path
from typing import Optional, Union

from pocketbook_press.config.layout import LayoutConfig, POCKET_LAYOUT
from pocketbook_press.logging_config import get_logger
from pocketbook_press.models.manuscript import Manuscript
from pocketbook_press.naming import cover_filename
from pocketbook_press.renderer.document import PaginatedDocument
from pocketbook_press.renderer.measure import TextMeasurer
from pocketbook_press.renderer.pdf_writer import write_pdf

logger = get_logger(__name__)

FRONT_BACKGROUND = (250, 250, 250)
BACK_BACKGROUND = (245, 245, 245)
FRAME_COLOR = (50, 50, 50)
SUBTITLE_COLOR = (80, 80, 80)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


def blurb_for(manuscript: Manuscript, config: LayoutConfig = POCKET_LAYOUT) -> str:
    """Back-cover text: an excerpt of the first chapter, or a placeholder."""
    if not manuscript.chapters:
        return config.placeholder_blurb
    excerpt = manuscript.chapters[0].content[: config.blurb_max_chars]
    return f'Extrait: "{excerpt}..."'


def _layout_front(doc: PaginatedDocument, manuscript: Manuscript, font: str, config: LayoutConfig):
    g = config.geometry
    center_x = g.width / 2

    # Background
    doc.set_fill_color(*FRONT_BACKGROUND)
    doc.rect(0, 0, g.width, g.height, style="F")

    # Decorative frame
    inset = config.cover_frame_inset
    doc.set_draw_color(*FRAME_COLOR)
    doc.set_line_width(config.cover_frame_line_width)
    doc.rect(inset, inset, g.width - 2 * inset, g.height - 2 * inset, style="S")

    # Title
    doc.set_font(font, "bold")
    doc.set_font_size(config.cover_title_font_size)
    title_lines = doc.split_text_to_size(manuscript.title.upper(), config.cover_text_width)
    doc.text(title_lines, center_x, config.cover_title_y, align="center")

    if manuscript.subtitle:
        doc.set_font(font, "italic")
        doc.set_font_size(config.cover_subtitle_font_size)
        doc.set_text_color(*SUBTITLE_COLOR)
        sub_lines = doc.split_text_to_size(manuscript.subtitle, config.cover_text_width)
        doc.text(sub_lines, center_x, config.cover_subtitle_y, align="center")

    doc.set_font(font, "normal")
    doc.set_font_size(config.cover_author_font_size)
    doc.set_text_color(*BLACK)
    doc.text(manuscript.author or config.placeholder_author, center_x, config.cover_author_y, align="center")


def _layout_back(doc: PaginatedDocument, manuscript: Manuscript, font: str, config: LayoutConfig):
    g = config.geometry

    doc.set_fill_color(*BACK_BACKGROUND)
    doc.rect(0, 0, g.width, g.height, style="F")

    doc.set_font(font, "normal")
    doc.set_font_size(config.cover_blurb_font_size)
    blurb_lines = doc.split_text_to_size(blurb_for(manuscript, config), config.cover_text_width)
    doc.text(blurb_lines, config.cover_text_inset, config.cover_blurb_y)

    # Barcode placeholder
    doc.set_fill_color(*WHITE)
    doc.rect(
        g.width / 2 - config.barcode_width / 2,
        config.barcode_y,
        config.barcode_width,
        config.barcode_height,
        style="F",
    )
    doc.set_font_size(config.isbn_font_size)
    doc.text(config.placeholder_isbn, g.width / 2, config.isbn_y, align="center")


def layout_cover(
    manuscript: Manuscript,
    font: str = "times",
    config: LayoutConfig = POCKET_LAYOUT,
    measurer: Optional[TextMeasurer] = None,
) -> PaginatedDocument:
    """Two pages: front cover, then back cover. Fixed content, no overflow handling."""
    doc = PaginatedDocument(
        config.geometry,
        measurer=measurer,
        font_family=font,
        title=manuscript.title,
        author=manuscript.author or "",
    )
    _layout_front(doc, manuscript, font, config)
    doc.add_page()
    _layout_back(doc, manuscript, font, config)
    logger.debug("Cover laid out for '%s'", manuscript.title)
    return doc


def generate_cover(
    manuscript: Manuscript,
    font: str = "times",
    out_dir: Union[str, Path] = ".",
    config: LayoutConfig = POCKET_LAYOUT,
    measurer: Optional[TextMeasurer] = None,
) -> Path:
    doc = layout_cover(manuscript, font=font, config=config, measurer=measurer)

    out_dir = str(out_dir)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    return write_pdf(doc, Path(out_dir) / cover_filename(manuscript.title))
