"""
Body layout

Lays out the book interior: a title page, then every chapter on a fresh
page with its text broken into lines and pages, then page numbers.
"""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import List, Optional, Union

from pocketbook_press.config.layout import LayoutConfig, POCKET_LAYOUT
from pocketbook_press.logging_config import get_logger
from pocketbook_press.models.manuscript import Chapter, Manuscript
from pocketbook_press.naming import body_filename
from pocketbook_press.renderer.document import PaginatedDocument
from pocketbook_press.renderer.measure import TextMeasurer
from pocketbook_press.renderer.pdf_writer import write_pdf

logger = get_logger(__name__)


@dataclass(frozen=True)
class LayoutCursor:
    page_number: int = 1
    y: float = 0.0


def split_paragraphs(content: str) -> List[str]:
    """Split on blank lines; single newlines inside a paragraph become spaces."""
    normalized = content.replace("\r\n", "\n")
    return [para.replace("\n", " ") for para in normalized.split("\n\n")]


def _break_page(doc: PaginatedDocument, cursor: LayoutCursor, config: LayoutConfig) -> LayoutCursor:
    doc.add_page()
    logger.debug("Page break -> page %d", cursor.page_number + 1)
    return LayoutCursor(page_number=cursor.page_number + 1, y=config.geometry.top)


def _emit_line(doc: PaginatedDocument, cursor: LayoutCursor, line: str, config: LayoutConfig) -> LayoutCursor:
    # The only page-break trigger inside body text; checked before every line
    if cursor.y + config.line_height > config.geometry.content_bottom:
        cursor = _break_page(doc, cursor, config)
    doc.text(line, config.geometry.margin_left_for(cursor.page_number), cursor.y)
    return replace(cursor, y=cursor.y + config.line_height)


def _layout_title_page(doc: PaginatedDocument, manuscript: Manuscript, font: str, config: LayoutConfig):
    center_x = config.geometry.width / 2

    doc.set_font_size(config.title_font_size)
    doc.set_font(font, "bold")
    doc.text(manuscript.title, center_x, config.title_page_y, align="center")

    if manuscript.subtitle:
        doc.set_font_size(config.subtitle_font_size)
        doc.set_font(font, "italic")
        doc.text(manuscript.subtitle, center_x, config.title_page_y + config.subtitle_gap, align="center")


def _layout_chapter(
    doc: PaginatedDocument,
    cursor: LayoutCursor,
    index: int,
    chapter: Chapter,
    font: str,
    config: LayoutConfig,
) -> LayoutCursor:
    geometry = config.geometry
    logger.debug("Chapter %d '%s' starts on page %d", index + 1, chapter.title, cursor.page_number)

    # Heading: "1. Title"
    doc.set_font(font, "bold")
    doc.set_font_size(config.heading_font_size)
    cursor = replace(cursor, y=cursor.y + config.heading_offset)
    heading_lines = doc.split_text_to_size(f"{index + 1}. {chapter.title}", geometry.content_width)
    doc.text(heading_lines, geometry.margin_left_for(cursor.page_number), cursor.y)
    cursor = replace(
        cursor,
        y=cursor.y + len(heading_lines) * config.heading_line_height + config.heading_gap,
    )

    doc.set_font(font, "normal")
    doc.set_font_size(config.body_font_size)
    for para in split_paragraphs(chapter.content):
        lines = doc.split_text_to_size(config.paragraph_indent + para, geometry.content_width)
        for line in lines:
            cursor = _emit_line(doc, cursor, line, config)
        cursor = replace(cursor, y=cursor.y + config.paragraph_gap)

    return cursor


def layout_body(
    manuscript: Manuscript,
    font: str = "times",
    config: LayoutConfig = POCKET_LAYOUT,
    measurer: Optional[TextMeasurer] = None,
) -> PaginatedDocument:
    """
    Lay out the book interior without page numbers.

    Args:
        manuscript: Validated manuscript (read only)
        font: Font family key (times | helvetica | courier)
        config: Page geometry and typography
        measurer: Text measurer used for wrapping (ReportLab metrics by default)

    Returns:
        PaginatedDocument with the title page first and one fresh page per chapter
    """
    doc = PaginatedDocument(
        config.geometry,
        measurer=measurer,
        font_family=font,
        title=manuscript.title,
        author=manuscript.author or "",
    )

    _layout_title_page(doc, manuscript, font, config)

    # Break after title page, even when there are no chapters
    cursor = _break_page(doc, LayoutCursor(), config)

    for index, chapter in enumerate(manuscript.chapters):
        # Start chapter on new page
        if index > 0:
            cursor = _break_page(doc, cursor, config)
        cursor = _layout_chapter(doc, cursor, index, chapter, font, config)

    logger.debug("Body laid out: %d chapters on %d pages", len(manuscript.chapters), doc.page_count)
    return doc


def stamp_page_numbers(doc: PaginatedDocument, config: LayoutConfig = POCKET_LAYOUT):
    """
    Number pages 2..N, centred near the bottom edge. The title page stays blank.

    Run exactly once, after layout: a second call stamps every page again.
    """
    geometry = config.geometry
    doc.set_font(doc.font_family, "normal")
    doc.set_font_size(config.page_number_font_size)

    for number in range(2, doc.page_count + 1):  # Skip title page (1)
        doc.set_page(number)
        doc.text(str(number), geometry.width / 2, geometry.height - config.page_number_offset, align="center")


def generate_body(
    manuscript: Manuscript,
    font: str = "times",
    out_dir: Union[str, Path] = ".",
    config: LayoutConfig = POCKET_LAYOUT,
    measurer: Optional[TextMeasurer] = None,
) -> Path:
    """Lay out, number and save the body PDF as <title>_corps.pdf in out_dir."""
    doc = layout_body(manuscript, font=font, config=config, measurer=measurer)
    stamp_page_numbers(doc, config)

    out_dir = str(out_dir)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    return write_pdf(doc, Path(out_dir) / body_filename(manuscript.title))
